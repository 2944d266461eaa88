from fastapi import APIRouter

from .routes import health, places, plans

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])
api_router.include_router(places.router, prefix="/plans", tags=["places"])
