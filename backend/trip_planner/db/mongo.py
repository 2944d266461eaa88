import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument

from ..core.config import settings

logger = logging.getLogger(__name__)

COUNTERS_COL = "counters"


class MongoConnectionManager:
    client: AsyncIOMotorClient | None = None

    @classmethod
    def get_client(cls) -> AsyncIOMotorClient:
        if cls.client is None:
            logger.info("MongoDB 클라이언트 생성: db=%s", settings.mongodb_db)
            cls.client = AsyncIOMotorClient(settings.mongodb_uri)
        return cls.client

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        return cls.get_client()[settings.mongodb_db]

    @classmethod
    async def close(cls) -> None:
        if cls.client:
            cls.client.close()
            cls.client = None


async def next_sequence(db: AsyncIOMotorDatabase, name: str) -> int:
    """컬렉션별 정수 ID 발급 (counters 컬렉션의 seq 값을 원자적으로 증가)"""
    doc = await db[COUNTERS_COL].find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc["seq"])
