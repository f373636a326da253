"""
Interview Prep Service for PrepDeck

Entry point for the interview preparation features: builds prompts for the
AI provider, parses whatever text comes back, and reconciles the new
questions with the user's saved ones.

The AI provider itself is called by the client; this service only ever sees
the raw response text, so every operation here is pure and synchronous.
"""
from typing import Callable, List, Optional, Sequence

from app.config import get_settings
from app.exceptions import QuestionGenerationError
from app.models.question_models import (
    AnswerCandidate, JobPostAnalysis, QuestionRegenerationResult, toggle_saved_question
)
from app.services.answer_matcher import AnswerMatcher
from app.services.question_reconciler import QuestionReconciler, Tagger
from app.services.question_tagger import QuestionTagger
from app.utils.fallback_responses import FallbackResponses
from app.utils.prompt_templates import PromptTemplates
from app.utils.response_parser import ResponseParser
from app.utils.logger import get_logger

logger = get_logger(__name__)

TaggerFactory = Callable[[Optional[str], Optional[str]], Tagger]


class InterviewPrepService:
    """
    Question regeneration and job post analysis.

    Features:
    - Strict JSON prompts with saved questions excluded
    - Tolerant parsing of malformed model output
    - Saved questions preserved across regenerations
    - Generic coaching answers filtered out
    """

    def __init__(self, settings=None, tagger_factory: Optional[TaggerFactory] = None):
        self.settings = settings or get_settings()
        self.parser = ResponseParser(self.settings)
        self.matcher = AnswerMatcher()
        # Keyword config is read and compiled once per service
        self.tagger = QuestionTagger(config_path=self.settings.QUESTION_TAGS_CONFIG or None)
        self.tagger_factory = tagger_factory or self._default_tagger_factory

    def _default_tagger_factory(self, company: Optional[str], position: Optional[str]) -> Tagger:
        return self.tagger.for_context(company, position)

    def regenerate_questions(self, raw_response: str, saved_questions: Sequence[str],
                             prior_answers: Sequence[AnswerCandidate] = (),
                             company: Optional[str] = None,
                             position: Optional[str] = None) -> QuestionRegenerationResult:
        """
        Reconcile a fresh AI response with the user's saved questions.

        Raises:
            QuestionGenerationError: if no usable question survives
        """
        payload = self.parser.parse_question_payload(raw_response)
        if payload.error:
            logger.warning(f"Question payload degraded: {payload.error[:80]}")

        reconciler = QuestionReconciler(matcher=self.matcher, tagger=self.tagger_factory(company, position))
        entries = reconciler.reconcile(
            saved_raw=saved_questions,
            fresh_questions=payload.questions,
            fresh_answers=payload.answers,
            prior_answers_for_saved=prior_answers
        )

        if not entries:
            raise QuestionGenerationError(
                FallbackResponses.get_question_generation_notice(position or ""),
                context={"source": payload.source.value, "error": payload.error}
            )

        saved_set = set(saved_questions)
        saved_count = sum(1 for entry in entries if entry.raw_value in saved_set)
        return QuestionRegenerationResult(
            entries=entries,
            source=payload.source,
            saved_count=saved_count,
            fresh_count=len(entries) - saved_count
        )

    def analyze_job_post(self, raw_response: str) -> JobPostAnalysis:
        """Parse a job post analysis, replacing a fully empty result with the fallback."""
        analysis = self.parser.parse_job_post_analysis(raw_response)
        has_content = any((
            analysis.key_points, analysis.required_skills, analysis.suggested_questions,
            analysis.suggested_answers, analysis.company_info, analysis.position_details,
            analysis.culture_fit
        ))
        if not has_content:
            logger.warning("Job post analysis produced no usable content")
            return FallbackResponses.get_failed_analysis(analysis.error or "Failed to analyze job post")
        return analysis

    def build_regeneration_prompt(self, position: str, company: str,
                                  saved_questions: Sequence[str] = (),
                                  job_description: Optional[str] = None,
                                  count: Optional[int] = None) -> dict:
        """System and user messages for a question regeneration request."""
        return {
            "system_message": PromptTemplates.QUESTION_GENERATION_SYSTEM,
            "prompt": PromptTemplates.get_question_regeneration_prompt(
                position=position,
                company=company,
                count=count or self.settings.DEFAULT_QUESTION_COUNT,
                job_description=job_description,
                saved_questions=saved_questions
            ),
            "temperature": self.settings.AI_TEMPERATURE,
            "max_tokens": self.settings.AI_MAX_TOKENS
        }

    def build_job_post_prompt(self, job_post: str, position: str, company: str) -> dict:
        """System and user messages for a job post analysis request."""
        return {
            "system_message": PromptTemplates.JSON_ONLY_SYSTEM,
            "prompt": PromptTemplates.get_job_post_analysis_prompt(job_post, position, company),
            "temperature": self.settings.AI_TEMPERATURE,
            "max_tokens": self.settings.AI_MAX_TOKENS
        }

    @staticmethod
    def toggle_saved_question(saved_questions: Sequence[str], raw_value: str) -> List[str]:
        """Save or unsave one question by its raw value."""
        return toggle_saved_question(list(saved_questions), raw_value)
