"""
장소 관리 테스트
- 장소 추가/수정/삭제 시 일정 총 비용이 장소 비용의 합으로 유지되는지 확인
"""
from __future__ import annotations

import asyncio
from datetime import date

import pytest
import pytest_asyncio

from backend.trip_planner.core.exceptions import NotFoundOrForbiddenError
from backend.trip_planner.repositories import plans as plan_repository
from backend.trip_planner.schemas import PlaceUpdate
from backend.trip_planner.services import places as place_service
from backend.trip_planner.services import plans as plan_service

OWNER = 7


@pytest_asyncio.fixture
async def plan_id(fake_db) -> int:
    plan = await plan_service.create_plan(
        fake_db,
        OWNER,
        {"title": "부산 여행", "start_date": date(2024, 7, 1), "end_date": date(2024, 7, 3)},
    )
    return plan["id"]


@pytest.mark.asyncio
async def test_add_place_updates_total_cost(fake_db, plan_id):
    place = await place_service.add_place(
        fake_db, OWNER, plan_id, {"order": 1, "name": "해운대", "cost": 5000, "visit_date": date(2024, 7, 2)}
    )
    await place_service.add_place(fake_db, OWNER, plan_id, {"order": 2, "name": "광안리", "cost": 2500})

    assert place["day"] == 2
    assert place["plan_id"] == plan_id
    assert await plan_service.get_plan_total_cost(fake_db, OWNER, plan_id) == 7500


@pytest.mark.asyncio
async def test_update_place_cost_adjusts_total(fake_db, plan_id):
    place = await place_service.add_place(fake_db, OWNER, plan_id, {"order": 1, "name": "해운대", "cost": 5000})

    updated = await place_service.update_place(fake_db, OWNER, plan_id, place["id"], PlaceUpdate(cost=1000))

    assert updated["cost"] == 1000
    assert updated["name"] == "해운대"
    assert await plan_service.get_plan_total_cost(fake_db, OWNER, plan_id) == 1000


@pytest.mark.asyncio
async def test_delete_place_subtracts_cost(fake_db, plan_id):
    first = await place_service.add_place(fake_db, OWNER, plan_id, {"order": 1, "name": "해운대", "cost": 5000})
    await place_service.add_place(fake_db, OWNER, plan_id, {"order": 2, "name": "광안리", "cost": 2500})

    await place_service.delete_place(fake_db, OWNER, plan_id, first["id"])

    detail = await plan_service.get_plan_detail(fake_db, OWNER, plan_id)
    assert [p["name"] for p in detail["places"]] == ["광안리"]
    assert detail["total_cost"] == 2500


@pytest.mark.asyncio
async def test_place_of_another_plan_is_not_found(fake_db, plan_id):
    other = await plan_service.create_plan(fake_db, OWNER, {"title": "다른 여행"})
    place = await place_service.add_place(fake_db, OWNER, other["id"], {"order": 1, "name": "성산일출봉", "cost": 0})

    with pytest.raises(NotFoundOrForbiddenError):
        await place_service.delete_place(fake_db, OWNER, plan_id, place["id"])


@pytest.mark.asyncio
async def test_add_place_to_foreign_plan_is_rejected(fake_db, plan_id):
    with pytest.raises(NotFoundOrForbiddenError):
        await place_service.add_place(fake_db, OWNER + 1, plan_id, {"order": 1, "name": "해운대", "cost": 5000})
    assert await plan_service.get_plan_total_cost(fake_db, OWNER, plan_id) == 0


@pytest.mark.asyncio
async def test_concurrent_place_additions_keep_total_cost(fake_db, plan_id, monkeypatch):
    original = plan_repository.increment_total_cost

    async def slow_increment(db, target_plan_id, delta):
        # 실제 DB 왕복처럼 다른 요청이 끼어들 수 있도록 양보
        await asyncio.sleep(0.01)
        await original(db, target_plan_id, delta)

    monkeypatch.setattr(plan_repository, "increment_total_cost", slow_increment)

    await asyncio.gather(
        place_service.add_place(fake_db, OWNER, plan_id, {"order": 1, "name": "해운대", "cost": 1000}),
        place_service.add_place(fake_db, OWNER, plan_id, {"order": 2, "name": "광안리", "cost": 2000}),
    )

    detail = await plan_service.get_plan_detail(fake_db, OWNER, plan_id)
    assert sum(p["cost"] for p in detail["places"]) == 3000
    assert detail["total_cost"] == 3000


@pytest.mark.asyncio
async def test_update_place_without_cost_keeps_total(fake_db, plan_id):
    place = await place_service.add_place(fake_db, OWNER, plan_id, {"order": 1, "name": "해운대", "cost": 5000})

    updated = await place_service.update_place(
        fake_db, OWNER, plan_id, place["id"], PlaceUpdate(name="해운대 해수욕장", visit_date=date(2024, 7, 3))
    )

    assert updated["name"] == "해운대 해수욕장"
    assert updated["day"] == 3
    assert await plan_service.get_plan_total_cost(fake_db, OWNER, plan_id) == 5000


@pytest.mark.asyncio
async def test_update_missing_place_is_not_found(fake_db, plan_id):
    with pytest.raises(NotFoundOrForbiddenError):
        await place_service.update_place(fake_db, OWNER, plan_id, 999, PlaceUpdate(cost=10))
