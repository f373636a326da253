"""
Unit tests for custom exceptions.
"""
import pytest

from app.exceptions import (
    PrepDeckException,
    PipelineContractError,
    AIServiceError,
    QuestionGenerationError,
)


class TestPrepDeckException:
    """Test cases for PrepDeckException."""

    @pytest.mark.unit
    def test_exception_with_context(self):
        """Test PrepDeckException stores message and context when provided."""
        exc = PrepDeckException("Error message", context={"key": "value"})
        assert str(exc) == "Error message"
        assert exc.message == "Error message"
        assert exc.context == {"key": "value"}

    @pytest.mark.unit
    def test_exception_default_context(self):
        """Test PrepDeckException has empty dict when context not provided."""
        exc = PrepDeckException("Error")
        assert exc.context == {}


class TestExceptionHierarchy:
    """Test exception inheritance."""

    @pytest.mark.unit
    @pytest.mark.parametrize("exc_class", [PipelineContractError, AIServiceError])
    def test_direct_subclasses(self, exc_class):
        """Test top-level errors derive from PrepDeckException."""
        assert issubclass(exc_class, PrepDeckException)

    @pytest.mark.unit
    @pytest.mark.parametrize("exc_class", [QuestionGenerationError])
    def test_ai_service_errors(self, exc_class):
        """Test AI content errors derive from AIServiceError."""
        assert issubclass(exc_class, AIServiceError)
        with pytest.raises(AIServiceError):
            raise exc_class("boom")
