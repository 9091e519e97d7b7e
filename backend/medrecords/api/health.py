from fastapi import APIRouter

from medrecords.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {"status": "healthy", "service": "medrecords-api"}


@router.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Welcome to MedRecords API",
        "docs": "/docs",
        "health": "/health",
        "version": settings.app_version,
    }
