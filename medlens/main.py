"""MedLens - lab result normalization, trends and alerts service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from medlens.config import settings
from medlens.core.logging import logger
from medlens.data import load_demo_data
from medlens.dependencies import get_store
from medlens.routers import health_router, documents_router, alerts_router, insights_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting MedLens service...")

    if settings.SEED_DEMO_DATA:
        load_demo_data(get_store())

    logger.info(f"Service started on port {settings.PORT}")

    yield

    # Shutdown
    logger.info("Shutting down MedLens service...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Normalizes medical document extractions and derives lab trends and alerts",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(documents_router, prefix=settings.API_V1_PREFIX)
app.include_router(alerts_router, prefix=settings.API_V1_PREFIX)
app.include_router(insights_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": "0.1.0",
        "environment": settings.ENVIRONMENT,
        "docs": "/docs",
        "health": "/health",
    }


def run():
    """Console entry point."""
    uvicorn.run(
        "medlens.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
