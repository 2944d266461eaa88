from fastapi import APIRouter, Depends, Path, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from ...core.auth import get_current_user_id
from ...dependencies import get_mongo_db
from ...schemas import PlaceCreate, PlaceOut, PlaceUpdate
from ...services import places as place_service

router = APIRouter()


@router.post("/{plan_id}/places", response_model=PlaceOut, status_code=status.HTTP_201_CREATED)
async def add_place(
    payload: PlaceCreate,
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlaceOut:
    place = await place_service.add_place(db, user_id, plan_id, payload.model_dump())
    return PlaceOut(**place)


@router.put("/{plan_id}/places/{place_id}", response_model=PlaceOut)
async def update_place(
    payload: PlaceUpdate,
    plan_id: int = Path(..., description="일정 ID"),
    place_id: int = Path(..., description="장소 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlaceOut:
    place = await place_service.update_place(db, user_id, plan_id, place_id, payload)
    return PlaceOut(**place)


@router.delete("/{plan_id}/places/{place_id}")
async def delete_place(
    plan_id: int = Path(..., description="일정 ID"),
    place_id: int = Path(..., description="장소 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> dict:
    await place_service.delete_place(db, user_id, plan_id, place_id)
    return {"status": "deleted"}
