from __future__ import annotations

from datetime import date, datetime

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ..db.mongo import next_sequence

PLACES_COL = "places"


def normalize_place(doc: dict) -> dict:
    doc = {**doc}
    doc["id"] = int(doc.pop("_id"))
    visit_date = doc.get("visit_date")
    if isinstance(visit_date, datetime):
        doc["visit_date"] = visit_date.date()
    doc["cost"] = doc.get("cost") or 0
    return doc


def _to_document(fields: dict) -> dict:
    doc = {**fields}
    visit_date = doc.get("visit_date")
    if isinstance(visit_date, date) and not isinstance(visit_date, datetime):
        doc["visit_date"] = datetime.combine(visit_date, datetime.min.time())
    return doc


async def find_places_by_plan(db: AsyncIOMotorDatabase, plan_id: int) -> list[dict]:
    cursor = db[PLACES_COL].find({"plan_id": plan_id}).sort([("order", 1), ("_id", 1)])
    places: list[dict] = []
    async for doc in cursor:
        places.append(normalize_place(doc))
    return places


async def find_place(db: AsyncIOMotorDatabase, place_id: int, plan_id: int) -> dict | None:
    doc = await db[PLACES_COL].find_one({"_id": place_id, "plan_id": plan_id})
    return normalize_place(doc) if doc else None


async def insert_place(db: AsyncIOMotorDatabase, plan_id: int, fields: dict) -> dict:
    now = datetime.utcnow()
    doc = _to_document(fields)
    doc["_id"] = await next_sequence(db, PLACES_COL)
    doc["plan_id"] = plan_id
    doc["created_at"] = now
    doc["updated_at"] = now
    await db[PLACES_COL].insert_one(doc)
    return normalize_place(doc)


async def update_place_fields(
    db: AsyncIOMotorDatabase, place_id: int, plan_id: int, changes: dict
) -> dict | None:
    """변경 전 문서를 반환한다. 비용 변화량 계산에 사용."""
    changes = _to_document(changes)
    changes["updated_at"] = datetime.utcnow()
    doc = await db[PLACES_COL].find_one_and_update(
        {"_id": place_id, "plan_id": plan_id},
        {"$set": changes},
        return_document=ReturnDocument.BEFORE,
    )
    return normalize_place(doc) if doc else None


async def delete_place(db: AsyncIOMotorDatabase, place_id: int, plan_id: int) -> dict | None:
    doc = await db[PLACES_COL].find_one_and_delete({"_id": place_id, "plan_id": plan_id})
    return normalize_place(doc) if doc else None


async def delete_places_by_plan(db: AsyncIOMotorDatabase, plan_id: int) -> int:
    result = await db[PLACES_COL].delete_many({"plan_id": plan_id})
    return result.deleted_count
