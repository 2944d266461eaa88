from datetime import date as Date
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .common import PatchModel
from .places import PlaceOut


class TransportType(str, Enum):
    train = "train"
    bus = "bus"
    car = "car"
    etc = "etc"


class PlanCreate(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    start_date: Date | None = None
    end_date: Date | None = None
    location: str | None = None
    transport_info: TransportType | None = None
    is_public: bool = False
    memo: str | None = None
    group_id: int | None = None


class PeriodUpdate(BaseModel):
    start_date: Date
    end_date: Date


class LocationUpdate(BaseModel):
    location: str


class TransportUpdate(BaseModel):
    transport_info: TransportType


class PlanUpdate(PatchModel):
    """부분 수정 요청. 요청 본문에 실제로 포함된 필드만 반영된다.

    total_cost는 장소 비용의 합으로만 계산되므로 이 모델에 포함하지 않는다.
    """

    title: str | None = Field(default=None, min_length=1, max_length=100)
    start_date: Date | None = None
    end_date: Date | None = None
    location: str | None = None
    transport_info: TransportType | None = None
    is_public: bool | None = None
    memo: str | None = None


class PlanOut(BaseModel):
    id: int
    user_id: int
    group_id: int | None = None
    title: str
    start_date: Date | None = None
    end_date: Date | None = None
    location: str | None = None
    transport_info: TransportType | None = None
    is_public: bool = False
    memo: str | None = None
    total_cost: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlanDetailOut(PlanOut):
    places: list[PlaceOut] = Field(default_factory=list)


class PlanCostOut(BaseModel):
    total_cost: int
