from __future__ import annotations

import logging
from datetime import date

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.exceptions import InvalidArgumentError, NotFoundOrForbiddenError
from ..repositories import places as place_repository
from ..repositories import plans as plan_repository
from ..schemas.plans import PlanUpdate

logger = logging.getLogger(__name__)


def validate_period(start_date: date | None, end_date: date | None) -> None:
    if start_date is not None and end_date is not None and start_date > end_date:
        raise InvalidArgumentError(detail="시작 날짜는 종료 날짜보다 빨라야 합니다.")


def calculate_day(start_date: date | None, visit_date: date | None) -> int | None:
    """방문일의 여행 일차. 시작일 당일이 1일차."""
    if start_date is None or visit_date is None:
        return None
    return (visit_date - start_date).days + 1


async def get_plan_with_permission_check(db: AsyncIOMotorDatabase, user_id: int, plan_id: int) -> dict:
    # 존재 여부와 소유 여부를 한 번의 조회로 확인해 타인 일정의 존재를 드러내지 않는다
    plan = await plan_repository.find_plan_by_id_and_user(db, plan_id, user_id)
    if plan is None:
        raise NotFoundOrForbiddenError(plan_id)
    return plan


async def create_plan(db: AsyncIOMotorDatabase, user_id: int | None, payload: dict) -> dict:
    logger.info("일정 생성: 사용자 ID %s", user_id)
    if user_id is None or user_id == "":
        raise InvalidArgumentError(detail="사용자 ID가 없습니다.")

    validate_period(payload.get("start_date"), payload.get("end_date"))

    plan = {
        "user_id": user_id,
        "title": payload.get("title"),
        "start_date": payload.get("start_date"),
        "end_date": payload.get("end_date"),
        "location": payload.get("location"),
        "transport_info": payload.get("transport_info"),
        "is_public": bool(payload.get("is_public", False)),
        "memo": payload.get("memo"),
        # 장소가 추가될 때마다 장소 비용의 합으로 다시 계산된다
        "total_cost": 0,
    }
    if payload.get("group_id") is not None:
        plan["group_id"] = payload["group_id"]
        logger.info("그룹 일정으로 생성: 그룹 ID %s", payload["group_id"])

    saved = await plan_repository.save_plan(db, plan)
    logger.info("일정이 생성되었습니다. ID: %s", saved["id"])
    return saved


async def update_period(
    db: AsyncIOMotorDatabase, user_id: int, plan_id: int, start_date: date, end_date: date
) -> dict:
    logger.info("일정 기간 업데이트: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)

    validate_period(start_date, end_date)
    plan["start_date"] = start_date
    plan["end_date"] = end_date

    updated = await plan_repository.save_plan(db, plan, fields=("start_date", "end_date"))
    logger.info("일정 기간이 업데이트되었습니다. ID: %s", plan_id)
    return updated


async def update_location(db: AsyncIOMotorDatabase, user_id: int, plan_id: int, location: str) -> dict:
    logger.info("일정 여행지 업데이트: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)
    plan["location"] = location
    updated = await plan_repository.save_plan(db, plan, fields=("location",))
    logger.info("일정 여행지가 업데이트되었습니다. ID: %s", plan_id)
    return updated


async def update_transport(db: AsyncIOMotorDatabase, user_id: int, plan_id: int, transport_info: str) -> dict:
    logger.info("일정 이동수단 업데이트: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)
    plan["transport_info"] = transport_info
    updated = await plan_repository.save_plan(db, plan, fields=("transport_info",))
    logger.info("일정 이동수단이 업데이트되었습니다. ID: %s", plan_id)
    return updated


async def update_plan(db: AsyncIOMotorDatabase, user_id: int, plan_id: int, patch: PlanUpdate) -> dict:
    logger.info("일정 정보 업데이트: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)

    changes = patch.provided()
    if "start_date" in changes or "end_date" in changes:
        # 한쪽 날짜만 들어온 경우 저장된 나머지 날짜와 비교한다
        validate_period(
            changes.get("start_date", plan.get("start_date")),
            changes.get("end_date", plan.get("end_date")),
        )

    if not changes:
        logger.info("변경할 필드가 없습니다. ID: %s", plan_id)
        return plan

    plan.update(changes)
    updated = await plan_repository.save_plan(db, plan, fields=changes.keys())
    logger.info("일정 정보가 업데이트되었습니다. ID: %s, 필드: %s", plan_id, sorted(changes))
    return updated


async def delete_plan(db: AsyncIOMotorDatabase, user_id: int, plan_id: int) -> None:
    logger.info("일정 삭제: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)
    await plan_repository.delete_plan(db, plan["id"])
    logger.info("일정이 삭제되었습니다. ID: %s", plan_id)


async def get_plan_total_cost(db: AsyncIOMotorDatabase, user_id: int, plan_id: int) -> int:
    logger.info("일정 비용 조회: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)
    total_cost = plan.get("total_cost") or 0
    logger.info("일정 총 비용: %s", total_cost)
    return total_cost


async def get_user_plans(db: AsyncIOMotorDatabase, user_id: int) -> list[dict]:
    logger.info("사용자 일정 목록 조회: 사용자 ID %s", user_id)
    plans = await plan_repository.find_plans_by_user(db, user_id)
    logger.info("사용자 일정 목록 조회 완료: 총 %s개의 일정", len(plans))
    return plans


async def get_plan_detail(db: AsyncIOMotorDatabase, user_id: int, plan_id: int) -> dict:
    logger.info("일정 상세 정보 조회: 사용자 ID %s, 일정 ID %s", user_id, plan_id)
    plan = await get_plan_with_permission_check(db, user_id, plan_id)

    places = await place_repository.find_places_by_plan(db, plan_id)
    plan["places"] = [
        {**place, "day": calculate_day(plan.get("start_date"), place.get("visit_date"))}
        for place in places
    ]

    logger.info("일정 상세 정보 조회 완료: 일정 ID %s, 장소 수 %s", plan_id, len(places))
    return plan
