"""
Unit tests for question models and helpers.
"""
import pytest

from app.models.question_models import (
    QuestionEntry,
    QuestionTag,
    is_valid_question_text,
    toggle_saved_question,
)


class TestQuestionEntry:
    """Test cases for QuestionEntry."""

    @pytest.mark.unit
    def test_tag_values(self):
        """Verify tags render as their vocabulary strings."""
        entry = QuestionEntry(
            id=0,
            raw_value="Why this role?",
            text="Why this role?",
            tags=(QuestionTag.COMPANY_SPECIFIC, QuestionTag.ROLE_SPECIFIC)
        )
        assert entry.tag_values == ["company-specific", "role-specific"]
        assert entry.suggested_approach is None


class TestIsValidQuestionText:
    """Test cases for is_valid_question_text."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "Why?", "question", "Questions"])
    def test_invalid_text(self, text):
        """Verify short text and artifact tokens are invalid."""
        assert is_valid_question_text(text) is False

    @pytest.mark.unit
    def test_minimum_length_is_ten(self):
        """Verify exactly ten characters is enough."""
        assert is_valid_question_text("Why Acme??") is True


class TestToggleSavedQuestion:
    """Test cases for toggle_saved_question."""

    @pytest.mark.unit
    def test_adds_unsaved_question(self):
        """Verify a new raw value is appended."""
        assert toggle_saved_question(["a question one"], "a question two") == ["a question one", "a question two"]

    @pytest.mark.unit
    def test_removes_saved_question(self):
        """Verify an existing raw value is removed."""
        assert toggle_saved_question(["a question one", "a question two"], "a question one") == ["a question two"]

    @pytest.mark.unit
    def test_does_not_mutate_input(self):
        """Verify the input list is left untouched."""
        saved = ["a question one"]
        toggle_saved_question(saved, "a question two")
        assert saved == ["a question one"]
