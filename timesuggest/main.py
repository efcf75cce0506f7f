"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from timesuggest.api.router import api_router
from timesuggest.config import settings
from timesuggest.suggestions.service import TimeSuggester

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Initialize the time suggester
    """
    logger.info(f"Starting {settings.app_name}...")

    app.state.suggester = TimeSuggester()
    logger.info("TimeSuggester initialized")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Autocomplete suggestions for fuzzy date and time phrases",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "timesuggest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.app_env == "development",
    )
