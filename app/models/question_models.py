"""
Question models for the reconciliation pipeline.
Separated from the API schemas to avoid circular imports.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

# Sanitized text shorter than this is never shown as a question or answer
MIN_TEXT_LENGTH = 10

# Literal tokens the AI sometimes emits in place of real content
ARTIFACT_TOKENS = frozenset({"question", "questions"})

class QuestionTag(Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    COMPANY_SPECIFIC = "company-specific"
    ROLE_SPECIFIC = "role-specific"

class PayloadSource(Enum):
    JSON = "json"
    REPAIRED_JSON = "repaired_json"
    FREE_TEXT = "free_text"
    EMPTY = "empty"

@dataclass(frozen=True)
class AnswerCandidate:
    """A question/answer pair extracted from AI output."""
    question: str
    answer: str

@dataclass(frozen=True)
class SplitResult:
    """Question and answer recovered from one interleaved string."""
    question: str
    answer: str

@dataclass(frozen=True)
class QuestionEntry:
    """A reconciled question ready for rendering or persistence."""
    id: int
    raw_value: str
    text: str
    tags: Tuple[QuestionTag, ...] = ()
    suggested_approach: Optional[str] = None

    @property
    def tag_values(self) -> List[str]:
        return [tag.value for tag in self.tags]

@dataclass(frozen=True)
class QuestionPayload:
    """Questions and answers recovered from one raw AI response."""
    questions: List[str] = field(default_factory=list)
    answers: List[AnswerCandidate] = field(default_factory=list)
    source: PayloadSource = PayloadSource.EMPTY
    error: Optional[str] = None

@dataclass(frozen=True)
class JobPostAnalysis:
    """Interview preparation guidance extracted from a job post analysis."""
    key_points: List[str] = field(default_factory=list)
    required_skills: List[str] = field(default_factory=list)
    suggested_questions: List[str] = field(default_factory=list)
    suggested_answers: List[AnswerCandidate] = field(default_factory=list)
    company_info: str = ""
    position_details: str = ""
    culture_fit: str = ""
    error: Optional[str] = None

@dataclass(frozen=True)
class QuestionRegenerationResult:
    """Outcome of one question regeneration cycle."""
    entries: List[QuestionEntry]
    source: PayloadSource
    saved_count: int
    fresh_count: int

def is_valid_question_text(text: str) -> bool:
    """Check the display-text invariant shared by every QuestionEntry."""
    return len(text) >= MIN_TEXT_LENGTH and text.lower() not in ARTIFACT_TOKENS

def toggle_saved_question(saved: List[str], raw_value: str) -> List[str]:
    """Return a new saved list with raw_value added, or removed if already saved."""
    if raw_value in saved:
        return [value for value in saved if value != raw_value]
    return list(saved) + [raw_value]
