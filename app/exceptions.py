"""
Custom exception hierarchy for PrepDeck application.
"""

from typing import Dict, Any

class PrepDeckException(Exception):
    """Base exception for PrepDeck application."""
    def __init__(self, message: str, context: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

class PipelineContractError(PrepDeckException):
    """Raised when a pipeline function receives a non-string where text is required."""
    pass

class AIServiceError(PrepDeckException):
    """Base exception for errors in AI-generated content."""
    pass

class QuestionGenerationError(AIServiceError):
    """Raised when reconciliation yields no usable questions."""
    pass
