import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Security, status
from fastapi.security import APIKeyHeader
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import db
from routes.auth_routes import router as auth_router
from routes.driver_routes import router as driver_router
from routes.violation_routes import router as violation_router
from routes.memo_routes import router as memo_router
from routes.location_routes import router as location_router
from routes.analytics_routes import router as analytics_router
from utils.seed_data import seed_database

# Configure logging based on settings
Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(settings.log_file),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# API Key Authentication
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)):
    """Verify API key for authentication.

    Args:
        api_key: The API key from the X-API-Key header

    Returns:
        True if authentication successful

    Raises:
        HTTPException: If API key is invalid or missing
    """
    if not settings.api_key:  # If no API key is set, allow all requests (dev mode)
        return True
    if not api_key or api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key"
        )
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown events."""
    # Startup
    logger.info("Starting RTO Face Scan API...")
    db.initialize_schema()
    if settings.seed_on_startup:
        stats = seed_database(random_drivers=settings.seed_random_drivers)
        logger.info(f"Seeded reference data: {stats}")
    if not db.verify_connectivity():
        logger.warning(f"Cannot open SQLite database at {settings.database_path}")

    yield

    # Shutdown
    logger.info("Shutting down RTO Face Scan API...")
    db.close()


# OpenAPI tags for better documentation organization
tags_metadata = [
    {
        "name": "health",
        "description": "Health check endpoints for monitoring API status",
    },
    {
        "name": "auth",
        "description": "Mock officer login for the kiosk",
    },
    {
        "name": "drivers",
        "description": "Driver records and the minimal projection used for face matching",
    },
    {
        "name": "violations",
        "description": "Violation catalog with fixed fines",
    },
    {
        "name": "memos",
        "description": "Issue e-challans and read a driver's history",
    },
    {
        "name": "locations",
        "description": "District/city hierarchy and simulated camera feeds",
    },
    {
        "name": "analytics",
        "description": "Daily aggregate over issued e-challans",
    },
]

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    ## Overview
    Backend for the RTO face scan kiosk. Serves the driver records the kiosk
    matches faces against and stores the e-challans (memos) officers issue.

    ## Features
    - **Record store**: SQLite tables seeded with demo drivers, violations,
      Gujarat districts and cameras
    - **E-challans**: server computed fines, driver history
    - **Analytics**: daily snapshot recomputed on every new memo

    ## Authentication
    Use the `X-API-Key` header for authentication when an API key is configured.
    """,
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check endpoint (no auth required)
@app.get("/health",
         tags=["health"],
         summary="Health Check",
         description="Check the health status of the API and database connectivity",
         response_description="Health status information")
async def health_check():
    """Check API and database health status.

    Returns:
        dict: Health status with API status, database status, and version
    """
    db_status = "healthy" if db.verify_connectivity() else "unhealthy"
    return {
        "status": "healthy",
        "database": db_status,
        "version": settings.app_version
    }

# Root endpoint
@app.get("/",
         summary="API Information",
         description="Get basic information about the RTO Face Scan API",
         response_description="API metadata")
async def root():
    """Get basic API information.

    Returns:
        dict: API name, version, and documentation URL
    """
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "documentation": "/docs"
    }

# Include routers with authentication
for router in (
    auth_router,
    driver_router,
    violation_router,
    memo_router,
    location_router,
    analytics_router,
):
    app.include_router(router, dependencies=[Depends(verify_api_key)])

# Error handlers
@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Handle 404 Not Found errors.

    Args:
        request: The incoming request
        exc: The exception that was raised
    """
    # If it's an HTTPException with a detail, preserve it
    if hasattr(exc, 'detail'):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail}
        )
    return JSONResponse(
        status_code=404,
        content={"error": "Resource not found", "path": str(request.url)}
    )

@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Handle 500 Internal Server errors.

    Args:
        request: The incoming request
        exc: The exception that was raised
    """
    logger.error(f"Internal server error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )
