"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

import structlog

from star_atlas_service.core.config import settings
from star_atlas_service.core.logging import setup_logging
from star_atlas_service.chain.pda import get_program_id
from star_atlas_service.api.middleware import add_middleware
from star_atlas_service.api.schemas.common import HealthCheckResponse
from star_atlas_service.api.routes import profiles, crew
from star_atlas_service.services.profile_service import close_player_profile_service

# Setup logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Star Atlas Blockchain Service",
        version=settings.app_version,
        port=settings.port,
        profile_source=settings.profile_source
    )

    # A malformed program id is fatal; fail before serving requests
    program_id = get_program_id()
    logger.info("Player profile program configured", program_id=str(program_id))

    yield

    logger.info("Shutting down application")
    close_player_profile_service()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Star Atlas Blockchain Service",
    version=settings.app_version,
    description="""
    Read API for Star Atlas player profiles and crew members.

    * **Player Profiles** - profile names read from PlayerName accounts on Solana
    * **Crew** - crew inventory from the Star Atlas catalog API, normalized
    """,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

add_middleware(app)


@app.get(
    "/health",
    response_model=HealthCheckResponse,
    tags=["System"],
    summary="Health Check",
    description="Check service status"
)
async def health_check():
    """Health check endpoint."""
    return HealthCheckResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version
    )


app.include_router(profiles.router, prefix="/api", tags=["Player Profiles"])
app.include_router(crew.router, prefix="/api", tags=["Crew"])

logger.info("FastAPI application configured successfully")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "star_atlas_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
