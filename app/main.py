"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.routes import (
    apartments,
    dashboard,
    health,
    properties,
    water_meters,
    water_readings,
    water_usage,
)
from app.core.config import settings
from app.core.database import Base, engine
from app.core.logging import configure_logging

# Import models for Base.metadata.create_all - order matters for foreign keys
from app.models import (
    apartment,  # noqa: F401
    property,  # noqa: F401
    water_meter,  # noqa: F401
    water_reading,  # noqa: F401
)

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Property management back office - water metering and usage reporting",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(properties.router, prefix="/api")
app.include_router(apartments.router, prefix="/api")
app.include_router(water_meters.router, prefix="/api")
app.include_router(water_readings.router, prefix="/api")
app.include_router(water_usage.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
