"""API router aggregation."""

from fastapi import APIRouter

from timesuggest.api.health import router as health_router
from timesuggest.api.suggestions import router as suggestions_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(suggestions_router)
