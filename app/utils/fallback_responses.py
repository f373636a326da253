"""
Centralized fallback responses used when AI output is unusable.
"""

from app.models.question_models import JobPostAnalysis

QUESTION_GENERATION_FAILED = "Failed to generate questions"


class FallbackResponses:
    """Centralized fallback responses for all AI-backed features."""

    @staticmethod
    def get_failed_analysis(error: str) -> JobPostAnalysis:
        """Empty analysis carrying the reason the AI output was rejected."""
        return JobPostAnalysis(error=error or "An unknown error occurred")

    @staticmethod
    def get_question_generation_notice(position: str = "") -> str:
        """User-facing notice when reconciliation yields no questions."""
        if position:
            return f"{QUESTION_GENERATION_FAILED} for {position}. Please try again."
        return f"{QUESTION_GENERATION_FAILED}. Please try again."
