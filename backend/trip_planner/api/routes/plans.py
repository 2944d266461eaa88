from fastapi import APIRouter, Depends, Path, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from ...core.auth import get_current_user_id
from ...dependencies import get_mongo_db
from ...schemas import (
    LocationUpdate,
    PeriodUpdate,
    PlanCostOut,
    PlanCreate,
    PlanDetailOut,
    PlanOut,
    PlanUpdate,
    TransportUpdate,
)
from ...services import plans as plan_service

router = APIRouter()


@router.post("", response_model=PlanOut, status_code=status.HTTP_201_CREATED, summary="개인 일정 생성")
async def create_plan(
    payload: PlanCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanOut:
    plan = await plan_service.create_plan(db, user_id, payload.model_dump())
    return PlanOut(**plan)


@router.get("", response_model=list[PlanOut], summary="내 일정 목록 조회")
async def list_my_plans(
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> list[PlanOut]:
    plans = await plan_service.get_user_plans(db, user_id)
    return [PlanOut(**plan) for plan in plans]


@router.get("/{plan_id}/detail", response_model=PlanDetailOut, summary="일정 상세 정보 조회")
async def get_plan_detail(
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanDetailOut:
    plan = await plan_service.get_plan_detail(db, user_id, plan_id)
    return PlanDetailOut(**plan)


@router.get("/{plan_id}/cost", response_model=PlanCostOut, summary="일정 비용 조회")
async def get_plan_cost(
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanCostOut:
    total_cost = await plan_service.get_plan_total_cost(db, user_id, plan_id)
    return PlanCostOut(total_cost=total_cost)


@router.put("/{plan_id}", response_model=PlanOut, summary="일정 수정")
async def update_plan(
    payload: PlanUpdate,
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanOut:
    plan = await plan_service.update_plan(db, user_id, plan_id, payload)
    return PlanOut(**plan)


@router.put("/{plan_id}/period", response_model=PlanOut, summary="기간 설정")
async def update_period(
    payload: PeriodUpdate,
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanOut:
    plan = await plan_service.update_period(db, user_id, plan_id, payload.start_date, payload.end_date)
    return PlanOut(**plan)


@router.put("/{plan_id}/location", response_model=PlanOut, summary="여행지 설정")
async def update_location(
    payload: LocationUpdate,
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanOut:
    plan = await plan_service.update_location(db, user_id, plan_id, payload.location)
    return PlanOut(**plan)


@router.put("/{plan_id}/transport", response_model=PlanOut, summary="이동수단 설정")
async def update_transport(
    payload: TransportUpdate,
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> PlanOut:
    plan = await plan_service.update_transport(db, user_id, plan_id, payload.transport_info)
    return PlanOut(**plan)


@router.delete("/{plan_id}", summary="일정 삭제")
async def delete_plan(
    plan_id: int = Path(..., description="일정 ID"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
) -> dict:
    await plan_service.delete_plan(db, user_id, plan_id)
    return {"status": "deleted"}
