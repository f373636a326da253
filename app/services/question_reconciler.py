"""
Question Reconciler

Merges the user's saved questions with a freshly generated batch, drops
duplicates and unusable text, and attaches the best available answer to each
question. Output order is saved questions first (in saved order), then new
questions in generation order.
"""

from typing import Callable, List, Optional, Sequence, Set
from dataclasses import dataclass
from app.models.question_models import (
    AnswerCandidate, QuestionEntry, QuestionTag, is_valid_question_text
)
from app.services.answer_matcher import AnswerMatcher
from app.services.question_tagger import QuestionTagger
from app.utils.generic_answer_filter import is_usable_answer
from app.utils.question_splitter import try_split
from app.utils.text_normalizer import normalize
from app.utils.text_sanitizer import sanitize_question
from app.utils.logger import get_logger

logger = get_logger(__name__)

Tagger = Callable[[str], Sequence[QuestionTag]]

@dataclass
class _PendingQuestion:
    raw_value: str
    text: str
    from_saved: bool
    position: int
    paired_answer: Optional[AnswerCandidate] = None

class QuestionReconciler:
    """Pure, deterministic merge of saved and fresh questions."""

    def __init__(self, matcher: Optional[AnswerMatcher] = None, tagger: Optional[Tagger] = None):
        self.matcher = matcher or AnswerMatcher()
        self.tagger = tagger or QuestionTagger()

    def reconcile(self, saved_raw: Sequence[str], fresh_questions: Sequence[str],
                  fresh_answers: Sequence[AnswerCandidate],
                  prior_answers_for_saved: Sequence[AnswerCandidate] = ()) -> List[QuestionEntry]:
        """
        Build the final question list for one regeneration cycle.

        Args:
            saved_raw: Raw values the user saved, in saved order
            fresh_questions: Raw question elements from the latest AI response
            fresh_answers: Answer pairs from the latest AI response
            prior_answers_for_saved: Answer pairs generated earlier for the saved questions

        Returns:
            Ordered QuestionEntry list with ids numbered by position
        """
        pending = self._seed_saved(saved_raw)
        saved_count = len(pending)

        recovered: List[AnswerCandidate] = []
        self._merge_fresh(fresh_questions, pending, recovered)

        entries = self._resolve_answers(pending, list(fresh_answers), list(prior_answers_for_saved), recovered)

        logger.info(
            f"Reconciled {len(entries)} questions "
            f"({saved_count} saved, {len(entries) - saved_count} new, "
            f"{sum(1 for e in entries if e.suggested_approach)} with answers)"
        )
        return entries

    def _seed_saved(self, saved_raw: Sequence[str]) -> List[_PendingQuestion]:
        pending = []
        seen_raw: Set[str] = set()

        for position, raw in enumerate(saved_raw):
            if raw in seen_raw:
                continue
            seen_raw.add(raw)

            text = sanitize_question(raw)
            if not is_valid_question_text(text):
                logger.debug(f"Dropping saved question with unusable text: {raw!r}")
                continue
            pending.append(_PendingQuestion(raw_value=raw, text=text, from_saved=True, position=position))

        return pending

    def _merge_fresh(self, fresh_questions: Sequence[str], pending: List[_PendingQuestion],
                     recovered: List[AnswerCandidate]) -> None:
        seen_keys = {normalize(item.text) for item in pending}

        for position, raw in enumerate(fresh_questions):
            split = try_split(raw)
            paired_answer = None
            if split:
                text = split.question
                paired_answer = AnswerCandidate(question=split.question, answer=split.answer)
                recovered.append(paired_answer)
            else:
                text = sanitize_question(raw)

            key = normalize(text)
            if not is_valid_question_text(text) or not key:
                logger.debug(f"Dropping fresh question with unusable text: {raw!r}")
                continue
            if key in seen_keys:
                logger.debug(f"Skipping duplicate question: {text!r}")
                continue

            seen_keys.add(key)
            pending.append(_PendingQuestion(
                raw_value=raw,
                text=text,
                from_saved=False,
                position=position,
                paired_answer=paired_answer
            ))

    def _resolve_answers(self, pending: List[_PendingQuestion], fresh_answers: List[AnswerCandidate],
                         prior_answers: List[AnswerCandidate],
                         recovered: List[AnswerCandidate]) -> List[QuestionEntry]:
        fresh_pool = fresh_answers + recovered
        saved_pool = prior_answers + fresh_pool
        used: Set[str] = set()
        entries = []

        for index, item in enumerate(pending):
            if item.from_saved:
                pool = saved_pool
                positional = self._positional_candidate(prior_answers, item.position)
            else:
                pool = fresh_pool
                positional = item.paired_answer
                if positional is None or not is_usable_answer(positional.answer):
                    positional = self._positional_candidate(fresh_answers, item.position)

            match = self.matcher.match(item.text, pool, positional_candidate=positional, used=used)
            answer = None
            if match:
                answer = match.answer
                used.add(answer)
                logger.debug(f"Question {index} answered by {match.strategy} match")

            entries.append(QuestionEntry(
                id=index,
                raw_value=item.raw_value,
                text=item.text,
                tags=tuple(self.tagger(item.text)),
                suggested_approach=answer
            ))

        return entries

    @staticmethod
    def _positional_candidate(answers: List[AnswerCandidate], position: int) -> Optional[AnswerCandidate]:
        if 0 <= position < len(answers):
            return answers[position]
        return None
