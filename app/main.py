"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.middleware.error_handler import ErrorHandlerMiddleware
from app.middleware.rate_limit import limiter
from app.api.v1.routers import areas, dashboard, farmers, purchases, reports

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    from app.services.application.state_store import get_state_store
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    data = get_state_store().snapshot
    logger.info(f"Seeded {len(data.areas)} areas, {len(data.farmers)} farmers, "
                f"{len(data.purchases)} purchases")
    if not settings.report_api_key:
        logger.warning("Report API key not configured; reports will return a notice")
    logger.info(f"Report model: {settings.report_model}, rate limit: {settings.report_rate_limit}")

    yield

    # Shutdown
    from app.infrastructure.report_client import get_report_client
    logger.info("Shutting down application...")
    client = get_report_client()
    await client.close()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Agricultural Traceability API

    Tracks planting areas, the farmers supplying produce from them and every
    purchase made, and produces AI-written analytical reports over that data.

    ## Features

    - **Planting areas and farmers**: register and delete; deleting an area
      leaves its farmers in place as unlinked
    - **Purchases**: append-only log with totals computed at entry and a
      newest-first history view
    - **Dashboard**: totals, quality grade distribution and monthly volume
    - **AI reports**: the full data set plus an optional question is sent to
      a hosted generative-text model; failures come back as a readable message

    Data lives in memory and resets to the seed data on restart.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(areas.router, prefix="/api/v1")
app.include_router(farmers.router, prefix="/api/v1")
app.include_router(purchases.router, prefix="/api/v1")
app.include_router(dashboard.router, prefix="/api/v1")
app.include_router(reports.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
