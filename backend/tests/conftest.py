from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
from pymongo import ReturnDocument

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT))

from backend.trip_planner.core.security import create_access_token  # noqa: E402
from backend.trip_planner.db.mongo import MongoConnectionManager  # noqa: E402


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


def _apply_update(doc: dict, update: dict) -> None:
    for key, value in update.get("$set", {}).items():
        doc[key] = value
    for key, value in update.get("$inc", {}).items():
        doc[key] = doc.get(key, 0) + value


class _Result:
    def __init__(self, **kwargs: Any) -> None:
        self.__dict__.update(kwargs)


class _FakeCursor:
    def __init__(self, docs: list[dict]) -> None:
        self._docs = docs

    def sort(self, key: Any, direction: int = 1) -> "_FakeCursor":
        keys = [(key, direction)] if isinstance(key, str) else list(key)
        for field, order in reversed(keys):
            self._docs.sort(key=lambda d: (d.get(field) is None, d.get(field)), reverse=order < 0)
        return self

    def __aiter__(self) -> "_FakeCursor":
        self._iter = iter(self._docs)
        return self

    async def __anext__(self) -> dict:
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration from None


class _FakeCollection:
    """motor 컬렉션 중 서비스가 사용하는 메서드만 흉내내는 인메모리 구현"""

    def __init__(self) -> None:
        self.docs: list[dict] = []

    async def create_index(self, *_args: Any, **_kwargs: Any) -> None:
        return None

    async def insert_one(self, doc: dict) -> _Result:
        self.docs.append(dict(doc))
        return _Result(inserted_id=doc.get("_id"))

    async def find_one(self, query: dict) -> dict | None:
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query: dict | None = None) -> _FakeCursor:
        return _FakeCursor([dict(d) for d in self.docs if _matches(d, query or {})])

    async def update_one(self, query: dict, update: dict) -> _Result:
        for doc in self.docs:
            if _matches(doc, query):
                _apply_update(doc, update)
                return _Result(matched_count=1, modified_count=1)
        return _Result(matched_count=0, modified_count=0)

    async def find_one_and_update(
        self, query: dict, update: dict, upsert: bool = False, return_document: Any = ReturnDocument.BEFORE
    ) -> dict | None:
        doc = next((d for d in self.docs if _matches(d, query)), None)
        if doc is None:
            if not upsert:
                return None
            doc = dict(query)
            self.docs.append(doc)
        before = dict(doc)
        _apply_update(doc, update)
        return dict(doc) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, query: dict) -> dict | None:
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                return self.docs.pop(index)
        return None

    async def delete_one(self, query: dict) -> _Result:
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[index]
                return _Result(deleted_count=1)
        return _Result(deleted_count=0)

    async def delete_many(self, query: dict) -> _Result:
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return _Result(deleted_count=before - len(self.docs))


class FakeDatabase:
    def __init__(self) -> None:
        self._collections: dict[str, _FakeCollection] = {}

    def __getitem__(self, name: str) -> _FakeCollection:
        return self._collections.setdefault(name, _FakeCollection())


class _FakeMongoClient:
    def __init__(self) -> None:
        self._db = FakeDatabase()

    def __getitem__(self, _name: str) -> FakeDatabase:
        return self._db

    def close(self) -> None:
        return None


@pytest.fixture(autouse=True)
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
    """MongoDB 연결을 테스트마다 새로 만드는 인메모리 DB로 대체"""
    client = _FakeMongoClient()
    monkeypatch.setattr(MongoConnectionManager, "get_client", classmethod(lambda cls: client))
    return client[""]


@pytest.fixture
def auth_headers() -> Any:
    def _headers(user_id: int) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers
