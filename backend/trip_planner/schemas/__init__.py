from .places import PlaceCreate, PlaceOut, PlaceUpdate
from .plans import (
    LocationUpdate,
    PeriodUpdate,
    PlanCostOut,
    PlanCreate,
    PlanDetailOut,
    PlanOut,
    PlanUpdate,
    TransportType,
    TransportUpdate,
)

__all__ = [
    "LocationUpdate",
    "PeriodUpdate",
    "PlaceCreate",
    "PlaceOut",
    "PlaceUpdate",
    "PlanCostOut",
    "PlanCreate",
    "PlanDetailOut",
    "PlanOut",
    "PlanUpdate",
    "TransportType",
    "TransportUpdate",
]
