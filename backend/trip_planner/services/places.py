from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.exceptions import NotFoundOrForbiddenError
from ..repositories import places as place_repository
from ..repositories import plans as plan_repository
from ..schemas.places import PlaceUpdate
from .plans import calculate_day, get_plan_with_permission_check

logger = logging.getLogger(__name__)


def _place_not_found(place_id: int) -> NotFoundOrForbiddenError:
    return NotFoundOrForbiddenError(detail=f"해당 장소를 찾을 수 없거나 권한이 없습니다: {place_id}")


async def _apply_cost_delta(db: AsyncIOMotorDatabase, plan_id: int, delta: int) -> None:
    # total_cost는 장소 비용 변화량만큼 $inc 로 갱신한다 (동시 요청에도 합계 유지)
    if delta:
        await plan_repository.increment_total_cost(db, plan_id, delta)
        logger.info("일정 총 비용 변경: 일정 ID %s, 변화량 %s", plan_id, delta)


async def add_place(db: AsyncIOMotorDatabase, user_id: int, plan_id: int, payload: dict) -> dict:
    logger.info("장소 추가: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)

    place = await place_repository.insert_place(db, plan_id, payload)
    await _apply_cost_delta(db, plan_id, place["cost"])

    place["day"] = calculate_day(plan.get("start_date"), place.get("visit_date"))
    return place


async def update_place(
    db: AsyncIOMotorDatabase, user_id: int, plan_id: int, place_id: int, patch: PlaceUpdate
) -> dict:
    logger.info("장소 수정: 사용자 ID %s, 일정 ID %s, 장소 ID %s", user_id, plan_id, place_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)

    changes = patch.provided()
    if changes:
        before = await place_repository.update_place_fields(db, place_id, plan_id, changes)
        if before is None:
            raise _place_not_found(place_id)
        place = {**before, **changes}
        if "cost" in changes:
            await _apply_cost_delta(db, plan_id, changes["cost"] - before["cost"])
    else:
        place = await place_repository.find_place(db, place_id, plan_id)
        if place is None:
            raise _place_not_found(place_id)

    place["day"] = calculate_day(plan.get("start_date"), place.get("visit_date"))
    return place


async def delete_place(db: AsyncIOMotorDatabase, user_id: int, plan_id: int, place_id: int) -> None:
    logger.info("장소 삭제: 사용자 ID %s, 일정 ID %s, 장소 ID %s", user_id, plan_id, place_id)
    await get_plan_with_permission_check(db, user_id, plan_id)

    deleted = await place_repository.delete_place(db, place_id, plan_id)
    if deleted is None:
        raise _place_not_found(place_id)
    await _apply_cost_delta(db, plan_id, -deleted["cost"])
