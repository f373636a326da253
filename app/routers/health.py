"""
Health check endpoints for monitoring.
"""
from fastapi import APIRouter
from typing import Dict, Any
from datetime import datetime
from app.config import get_settings
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])
settings = get_settings()

@router.get("/", response_model=Dict[str, Any])
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }

@router.get("/config", response_model=Dict[str, Any])
async def config_check():
    """Report configuration issues without exposing values."""
    issues = settings.validate_configuration()
    if issues:
        logger.warning(f"Configuration issues detected: {len(issues)}")
    return {
        "status": "healthy" if not issues else "degraded",
        "timestamp": datetime.utcnow().isoformat(),
        "issues": issues
    }
