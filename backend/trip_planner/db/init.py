from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorDatabase


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db["plans"].create_index([("user_id", 1), ("_id", 1)])
    await db["plans"].create_index("group_id", sparse=True)
    await db["places"].create_index([("plan_id", 1), ("order", 1)])
