"""
Answer Matcher

Finds the best suggested answer for a question among the (question, answer)
pairs produced by the AI, using a fixed priority chain:
positional, exact normalized match, fuzzy match, then first unused answer.
"""

from typing import List, Optional, Sequence, Set
from dataclasses import dataclass
from app.models.question_models import AnswerCandidate
from app.utils.generic_answer_filter import is_usable_answer
from app.utils.text_normalizer import normalize
from app.utils.logger import get_logger

logger = get_logger(__name__)

POSITIONAL = "positional"
EXACT = "exact"
FUZZY = "fuzzy"
FALLBACK = "fallback"

@dataclass
class AnswerMatch:
    """Result of resolving one question against the answer pool."""
    answer: str
    strategy: str
    pool_index: Optional[int] = None

def length_similarity(first: str, second: str) -> float:
    """Ratio of the shorter string length to the longer one."""
    longest = max(len(first), len(second))
    if longest == 0:
        return 0.0
    return min(len(first), len(second)) / longest

class AnswerMatcher:
    """
    Resolves a suggested answer for a question.

    Only usable candidates (long enough and not generic) are ever returned.
    Ties inside a strategy go to the first candidate in pool order.
    """

    FUZZY_THRESHOLD = 0.6

    def resolve(self, question: str, pool: Sequence[AnswerCandidate],
                position: Optional[int] = None,
                used: Optional[Set[str]] = None) -> Optional[str]:
        """Return the matched answer text, or None when nothing qualifies."""
        match = self.match(question, pool, position=position, used=used)
        return match.answer if match else None

    def match(self, question: str, pool: Sequence[AnswerCandidate],
              position: Optional[int] = None,
              positional_candidate: Optional[AnswerCandidate] = None,
              used: Optional[Set[str]] = None) -> Optional[AnswerMatch]:
        """
        Run the priority chain for one question.

        Args:
            question: Question text as displayed
            pool: Candidate pairs in generation order
            position: Index of the question in its originating list
            positional_candidate: Overrides pool[position] when the question
                arrived already paired with its answer
            used: Answer texts already assigned; only the fallback step avoids them

        Returns:
            AnswerMatch or None
        """
        used = used or set()

        positional = self._match_positional(pool, position, positional_candidate)
        if positional:
            return positional

        target = normalize(question)
        if target:
            keys = [normalize(candidate.question) for candidate in pool]

            exact = self._match_exact(target, pool, keys)
            if exact:
                return exact

            fuzzy = self._match_fuzzy(target, pool, keys)
            if fuzzy:
                return fuzzy

        return self._match_fallback(pool, used)

    def _match_positional(self, pool: Sequence[AnswerCandidate], position: Optional[int],
                          positional_candidate: Optional[AnswerCandidate]) -> Optional[AnswerMatch]:
        if positional_candidate is not None:
            if is_usable_answer(positional_candidate.answer):
                return AnswerMatch(positional_candidate.answer, POSITIONAL)
            return None

        if position is None or not 0 <= position < len(pool):
            return None

        candidate = pool[position]
        if is_usable_answer(candidate.answer):
            return AnswerMatch(candidate.answer, POSITIONAL, position)
        return None

    def _match_exact(self, target: str, pool: Sequence[AnswerCandidate],
                     keys: List[str]) -> Optional[AnswerMatch]:
        for index, (candidate, key) in enumerate(zip(pool, keys)):
            if key == target and is_usable_answer(candidate.answer):
                return AnswerMatch(candidate.answer, EXACT, index)
        return None

    def _match_fuzzy(self, target: str, pool: Sequence[AnswerCandidate],
                     keys: List[str]) -> Optional[AnswerMatch]:
        for index, (candidate, key) in enumerate(zip(pool, keys)):
            if not key:
                continue
            similarity = length_similarity(target, key)
            contained = key in target or target in key
            if similarity > self.FUZZY_THRESHOLD and contained and is_usable_answer(candidate.answer):
                logger.debug(f"Fuzzy match at pool index {index} (similarity {similarity:.2f})")
                return AnswerMatch(candidate.answer, FUZZY, index)
        return None

    def _match_fallback(self, pool: Sequence[AnswerCandidate], used: Set[str]) -> Optional[AnswerMatch]:
        for index, candidate in enumerate(pool):
            if candidate.answer not in used and is_usable_answer(candidate.answer):
                return AnswerMatch(candidate.answer, FALLBACK, index)
        return None
