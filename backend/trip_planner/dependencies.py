from collections.abc import AsyncGenerator

from motor.motor_asyncio import AsyncIOMotorDatabase

from .db.mongo import MongoConnectionManager


async def get_mongo_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    db = MongoConnectionManager.get_database()
    yield db
