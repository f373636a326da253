"""
Unit tests for the generic-answer filter.

The length thresholds are fixed per phrase; these tests pin both sides of
each boundary.
"""
import pytest

from app.exceptions import PipelineContractError
from app.utils.generic_answer_filter import (
    PREPARE_SPECIFIC_MAX_LENGTH,
    STAR_STRUCTURE_MAX_LENGTH,
    is_generic,
    is_usable_answer,
)

LONG_STAR_ANSWER = (
    "Use the STAR method to describe the time you led a cross-functional team of 5 engineers "
    "to ship a payments migration under a 2-week deadline, citing the 30% latency reduction you achieved."
)


class TestIsGeneric:
    """Test cases for is_generic."""

    @pytest.mark.unit
    def test_bare_star_answer_is_generic(self):
        """Verify the bare STAR instruction is rejected."""
        assert is_generic("Use the STAR method") is True

    @pytest.mark.unit
    def test_long_star_answer_is_kept(self):
        """Verify a long answer that mentions STAR with specifics is kept."""
        assert len(LONG_STAR_ANSWER) >= STAR_STRUCTURE_MAX_LENGTH
        assert is_generic(LONG_STAR_ANSWER) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("answer", ["use star method", "  USE   the star   METHOD  "])
    def test_exact_phrases_ignore_case_and_whitespace(self, answer):
        """Verify the exact-phrase check ignores case and spacing."""
        assert is_generic(answer) is True

    @pytest.mark.unit
    def test_short_structure_phrase_is_generic(self):
        """Verify the structure phrase under its threshold is rejected."""
        answer = "Structure your answer using the STAR method."
        assert len(answer) < STAR_STRUCTURE_MAX_LENGTH
        assert is_generic(answer) is True

    @pytest.mark.unit
    def test_long_structure_phrase_is_kept(self):
        """Verify the structure phrase at or over its threshold is kept."""
        answer = (
            "Structure your answer using the STAR method and cover the Kafka migration you led, "
            "the 40% cost cut, and the on-call rotation you redesigned."
        )
        assert len(answer) >= STAR_STRUCTURE_MAX_LENGTH
        assert is_generic(answer) is False

    @pytest.mark.unit
    def test_short_prepare_phrase_is_generic(self):
        """Verify the prepare phrase under its threshold is rejected."""
        assert is_generic("Prepare a specific answer for this question.") is True

    @pytest.mark.unit
    def test_long_prepare_phrase_is_kept(self):
        """Verify the prepare phrase at or over its threshold is kept."""
        answer = (
            "Prepare a specific answer for this question by naming the incident, the on-call "
            "timeline, the rollback you triggered, and the follow-up postmortem actions you owned."
        )
        assert len(answer) >= PREPARE_SPECIFIC_MAX_LENGTH
        assert is_generic(answer) is False

    @pytest.mark.unit
    def test_short_star_mention_is_generic(self):
        """Verify a very short answer mentioning STAR is rejected."""
        assert is_generic("STAR method works.") is True

    @pytest.mark.unit
    def test_specific_answer_is_not_generic(self):
        """Verify an ordinary specific answer passes."""
        assert is_generic("Compare consistency and availability for the checkout service.") is False

    @pytest.mark.unit
    def test_non_string_raises_contract_error(self):
        """Verify None is rejected as a contract violation."""
        with pytest.raises(PipelineContractError):
            is_generic(None)


class TestIsUsableAnswer:
    """Test cases for is_usable_answer."""

    @pytest.mark.unit
    def test_short_answer_is_not_usable(self):
        """Verify answers under ten characters are unusable."""
        assert is_usable_answer("Too short") is False

    @pytest.mark.unit
    def test_generic_answer_is_not_usable(self):
        """Verify generic answers are unusable."""
        assert is_usable_answer("Use the STAR method") is False

    @pytest.mark.unit
    def test_specific_answer_is_usable(self):
        """Verify a specific answer is usable."""
        assert is_usable_answer("Explain the trade-offs between consistency and availability.") is True

    @pytest.mark.unit
    def test_non_string_raises_contract_error(self):
        """Verify None is rejected as a contract violation."""
        with pytest.raises(PipelineContractError):
            is_usable_answer(None)
