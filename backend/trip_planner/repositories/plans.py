from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db.mongo import next_sequence
from .places import delete_places_by_plan

logger = logging.getLogger(__name__)

PLANS_COL = "plans"

DATE_FIELDS = ("start_date", "end_date")
# 생성 이후 save_plan()으로 덮어쓸 수 없는 필드. total_cost는 장소 관리 쪽에서만 갱신한다.
PROTECTED_FIELDS = frozenset({"id", "_id", "user_id", "total_cost", "created_at"})


def _ensure_datetime(value: datetime | date | str | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise TypeError(f"Invalid date string: {value!r}") from exc
    raise TypeError(f"Unsupported date value: {type(value)!r}")


def _as_date(value: datetime | date | None) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_plan(doc: dict) -> dict:
    doc = {**doc}
    doc["id"] = int(doc.pop("_id"))
    for field in DATE_FIELDS:
        doc[field] = _as_date(doc.get(field))
    doc["total_cost"] = doc.get("total_cost") or 0
    return doc


def _to_document(fields: dict) -> dict:
    doc = {**fields}
    for field in DATE_FIELDS:
        if field in doc:
            doc[field] = _ensure_datetime(doc[field])
    return doc


async def save_plan(db: AsyncIOMotorDatabase, plan: dict, fields: Iterable[str] | None = None) -> dict:
    """id가 없으면 새 일정을 저장하고, 있으면 지정한 필드만 $set 으로 갱신한다."""
    now = datetime.utcnow()
    plan_id = plan.get("id")

    if plan_id is None:
        doc = _to_document({k: v for k, v in plan.items() if k != "id"})
        doc["_id"] = await next_sequence(db, PLANS_COL)
        doc["created_at"] = now
        doc["updated_at"] = now
        await db[PLANS_COL].insert_one(doc)
        logger.info("[plan_repository] 새 일정 저장: %s", doc["_id"])
        return normalize_plan(doc)

    names = set(plan) if fields is None else set(fields)
    changes = _to_document({k: plan[k] for k in names - PROTECTED_FIELDS if k in plan})
    changes["updated_at"] = now
    await db[PLANS_COL].update_one({"_id": plan_id}, {"$set": changes})
    logger.info("[plan_repository] 일정 갱신: %s %s", plan_id, sorted(changes))
    return {**plan, **{k: _as_date(v) if k in DATE_FIELDS else v for k, v in changes.items()}}


async def find_plan_by_id_and_user(db: AsyncIOMotorDatabase, plan_id: int, user_id: int) -> dict | None:
    doc = await db[PLANS_COL].find_one({"_id": plan_id, "user_id": user_id})
    return normalize_plan(doc) if doc else None


async def find_plans_by_user(db: AsyncIOMotorDatabase, user_id: int) -> list[dict]:
    cursor = db[PLANS_COL].find({"user_id": user_id}).sort("_id", 1)
    plans: list[dict] = []
    async for doc in cursor:
        plans.append(normalize_plan(doc))
    return plans


async def increment_total_cost(db: AsyncIOMotorDatabase, plan_id: int, delta: int) -> None:
    await db[PLANS_COL].update_one(
        {"_id": plan_id},
        {"$inc": {"total_cost": delta}, "$set": {"updated_at": datetime.utcnow()}},
    )


async def delete_plan(db: AsyncIOMotorDatabase, plan_id: int) -> None:
    await db[PLANS_COL].delete_one({"_id": plan_id})
    # MongoDB에는 FK cascade가 없으므로 소속 장소도 함께 정리
    removed = await delete_places_by_plan(db, plan_id)
    logger.info("[plan_repository] 일정 삭제: %s (장소 %s개 정리)", plan_id, removed)
