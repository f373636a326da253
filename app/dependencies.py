"""
Dependency injection utilities for PrepDeck application.
"""

from functools import lru_cache
from app.services.interview_prep_service import InterviewPrepService
from app.utils.logger import get_logger
from app.config import get_settings

logger = get_logger(__name__)

@lru_cache()
def get_interview_prep_service() -> InterviewPrepService:
    """Shared interview prep service; it holds no per-request state."""
    logger.debug("Creating InterviewPrepService")
    return InterviewPrepService(settings=get_settings())
