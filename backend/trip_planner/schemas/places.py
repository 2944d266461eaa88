from datetime import date as Date

from pydantic import BaseModel, Field

from .common import PatchModel


class PlaceCreate(BaseModel):
    order: int = Field(ge=0)
    visit_date: Date | None = None
    name: str = Field(min_length=1, max_length=100)
    address: str | None = None
    cost: int = Field(default=0, ge=0)
    memo: str | None = None


class PlaceUpdate(PatchModel):
    order: int | None = Field(default=None, ge=0)
    visit_date: Date | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)
    address: str | None = None
    cost: int | None = Field(default=None, ge=0)
    memo: str | None = None


class PlaceOut(BaseModel):
    id: int
    plan_id: int
    order: int
    day: int | None = Field(default=None, description="여행 일차 (시작일 = 1일차)")
    visit_date: Date | None = None
    name: str
    address: str | None = None
    cost: int = 0
    memo: str | None = None
