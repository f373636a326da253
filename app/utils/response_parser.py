"""
Response Parser for PrepDeck

Turns raw model output into structured question payloads and job post
analyses. Handles reasoning-trace wrappers, fenced code blocks, JSON with
trailing commas or bare keys, alternate key names, and responses with no
JSON at all. Malformed text never raises; it degrades to a smaller or empty
result.
"""
import json
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple
from app.config import get_settings
from app.exceptions import PipelineContractError
from app.models.question_models import (
    AnswerCandidate, JobPostAnalysis, PayloadSource, QuestionPayload
)
from app.utils.text_sanitizer import sanitize_answer, sanitize_question
from app.utils.logger import get_logger

logger = get_logger(__name__)

_THINK_BLOCK = re.compile(r'<think>[\s\S]*?</think>', re.IGNORECASE)
_FENCED_BLOCK = re.compile(r'```(?:json)?\s*([\s\S]*?)\s*```', re.IGNORECASE)
_LIST_PREFIX = re.compile(r'^\s*(?:[-*•]|\d+[.)])\s*')
_BULLET_LINE = re.compile(r'^\s*(?:[-*•]|\d+[.)])')
_SKILL_HINT = re.compile(r'skill|experience|knowledge|qualification|requirement', re.IGNORECASE)

# Minimal repairs: trailing commas and missing commas between adjacent strings
_MINIMAL_REPAIRS = (
    (re.compile(r',\s*\]'), ']'),
    (re.compile(r',\s*\}'), '}'),
    (re.compile(r'"\s+"'), '", "'),
)

# Aggressive repairs: bare keys, single-quoted values, bare values
_AGGRESSIVE_REPAIRS = (
    (re.compile(r'([{,]\s*)(\w+)(\s*:)'), r'\1"\2"\3'),
    (re.compile(r":\s*'([^']*)'"), r': "\1"'),
    (re.compile(r':\s*([^",{\[\]}\s]+)(\s*[,}\]])'), r': "\1"\2'),
)


class ResponseParser:
    """Extracts questions, answers and job post insights from AI responses."""

    QUESTION_KEYS = ('questions', 'suggestedQuestions', 'interviewQuestions', 'potentialQuestions')
    ANSWER_KEYS = ('answers', 'suggestedAnswers')
    KEY_POINT_KEYS = ('keyPoints', 'key_points', 'highlights', 'keyPointsToEmphasize')
    SKILL_KEYS = ('requiredSkills', 'skills', 'requirements', 'qualifications')
    COMPANY_KEYS = ('companyInfo', 'company', 'companyInformation', 'companyDetails')
    POSITION_KEYS = ('positionDetails', 'role', 'responsibilities', 'jobDetails', 'roleDetails')
    CULTURE_KEYS = ('cultureFit', 'culture', 'culturalFit', 'companyCulture')

    def __init__(self, settings=None):
        self.settings = settings or get_settings()

    # Public API

    def parse_question_payload(self, response_text: str) -> QuestionPayload:
        """
        Parse a question regeneration response.

        Args:
            response_text: Raw model output

        Returns:
            QuestionPayload with raw question elements and sanitized answer pairs
        """
        content = self.strip_reasoning(response_text)
        if not content:
            return QuestionPayload(source=PayloadSource.EMPTY, error="Empty response from AI")

        data, source = self.load_structured(content)
        if data is None:
            questions = self._questions_from_free_text(content.splitlines())
            if not questions:
                return QuestionPayload(source=PayloadSource.EMPTY, error=self._preview(content))
            logger.info(f"Recovered {len(questions)} questions from free text")
            return QuestionPayload(questions=questions, source=PayloadSource.FREE_TEXT)

        if isinstance(data, list):
            questions_value, answers_value = data, []
        else:
            questions_value = self._first_present(data, self.QUESTION_KEYS)
            answers_value = self._first_present(data, self.ANSWER_KEYS)

        questions, embedded_answers = self._coerce_questions(questions_value)
        answers = self._coerce_answers(answers_value, questions) + embedded_answers

        logger.info(f"Parsed {sum(1 for q in questions if q)} questions and {len(answers)} answers ({source.value})")
        return QuestionPayload(questions=questions, answers=answers, source=source)

    def parse_job_post_analysis(self, response_text: str) -> JobPostAnalysis:
        """
        Parse a job post analysis response.

        Text with no JSON-looking content keeps a preview of itself as the
        error; the free-text fallback still fills the lists it can.
        """
        content = self.strip_reasoning(response_text)
        if not content:
            return JobPostAnalysis(error="Empty response from AI")

        error = None
        data = None
        if self._looks_like_json(content):
            data, _ = self.load_structured(content)
        else:
            error = self._preview(content)

        if not isinstance(data, dict):
            return self._analysis_from_free_text(content, error)

        suggested_questions, embedded_answers = self._coerce_questions(
            self._first_present(data, self.QUESTION_KEYS)
        )
        suggested_answers = self._coerce_answers(
            self._first_present(data, self.ANSWER_KEYS), suggested_questions
        ) + embedded_answers

        analysis = JobPostAnalysis(
            key_points=self._to_list(self._first_present(data, self.KEY_POINT_KEYS)),
            required_skills=self._to_list(self._first_present(data, self.SKILL_KEYS)),
            suggested_questions=[question for question in suggested_questions if question],
            suggested_answers=suggested_answers,
            company_info=self._to_text(self._first_present(data, self.COMPANY_KEYS)),
            position_details=self._to_text(self._first_present(data, self.POSITION_KEYS)),
            culture_fit=self._to_text(self._first_present(data, self.CULTURE_KEYS)),
        )
        logger.info(
            f"Parsed analysis: {len(analysis.key_points)} key points, "
            f"{len(analysis.required_skills)} skills, {len(analysis.suggested_questions)} questions, "
            f"{len(analysis.suggested_answers)} answers"
        )
        return analysis

    # Extraction helpers

    def strip_reasoning(self, response_text: str) -> str:
        """Remove <think> reasoning traces and surrounding whitespace."""
        if not isinstance(response_text, str):
            raise PipelineContractError(
                "AI response must be a string",
                context={"received_type": type(response_text).__name__}
            )
        return _THINK_BLOCK.sub('', response_text).strip()

    def extract_json_candidates(self, content: str) -> List[str]:
        """
        Locate the JSON-looking parts of a response.

        A fenced block wins outright; otherwise the first-`{`-to-last-`}` and
        first-`[`-to-last-`]` spans are returned, earliest start first.
        """
        fenced = _FENCED_BLOCK.search(content)
        if fenced and fenced.group(1).lstrip().startswith(('{', '[')):
            return [fenced.group(1).strip()]

        spans = []
        for opener, closer in (('{', '}'), ('[', ']')):
            start = content.find(opener)
            end = content.rfind(closer)
            if start != -1 and end > start:
                spans.append((start, content[start:end + 1]))
        return [candidate for _, candidate in sorted(spans)]

    def load_structured(self, content: str) -> Tuple[Optional[Any], Optional[PayloadSource]]:
        """Parse JSON from a response, escalating through the repair passes."""
        candidates = self.extract_json_candidates(content)
        if not candidates:
            return None, None

        for candidate in candidates:
            data = self._try_parse(candidate)
            if data is not None:
                return data, PayloadSource.JSON

        for candidate in candidates:
            for repairs in (_MINIMAL_REPAIRS, _AGGRESSIVE_REPAIRS):
                for pattern, replacement in repairs:
                    candidate = pattern.sub(replacement, candidate)
                data = self._try_parse(candidate)
                if data is not None:
                    logger.debug("Parsed AI response after JSON repair")
                    return data, PayloadSource.REPAIRED_JSON

        logger.warning("AI response contained JSON-like text that could not be repaired")
        return None, None

    @staticmethod
    def _try_parse(candidate: str) -> Optional[Any]:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.debug(f"JSON parse error: {e}")
            return None
        return data if isinstance(data, (dict, list)) else None

    @staticmethod
    def _looks_like_json(content: str) -> bool:
        return bool(re.search(r'\{[\s\S]*\}', content)) or '```json' in content.lower()

    # Coercion helpers

    @staticmethod
    def _first_present(data: Dict[str, Any], keys: Sequence[str]) -> Any:
        for key in keys:
            value = data.get(key)
            if value:
                return value
        return None

    def _coerce_questions(self, value: Any) -> Tuple[List[str], List[AnswerCandidate]]:
        """
        Return raw question elements plus answers carried inside object elements.

        Elements with no question text become empty placeholders so every
        question keeps the index of its positional answer.
        """
        if isinstance(value, str):
            return self._split_text_list(value), []
        if not isinstance(value, list):
            return [], []

        questions: List[str] = []
        answers: List[AnswerCandidate] = []
        for element in value:
            if isinstance(element, dict):
                question = element.get('question') or element.get('text')
                if not isinstance(question, str) or not question.strip():
                    questions.append('')
                    continue
                questions.append(question)
                if element.get('answer'):
                    answers.append(AnswerCandidate(
                        question=sanitize_question(question),
                        answer=sanitize_answer(str(element['answer']))
                    ))
            elif element is not None and str(element).strip():
                questions.append(str(element))
            else:
                questions.append('')
        return questions, answers

    def _coerce_answers(self, value: Any, questions: Sequence[str]) -> List[AnswerCandidate]:
        """Accept answers as strings, {question, answer} objects, or a question-to-answer map."""
        if isinstance(value, dict):
            return [
                AnswerCandidate(question=sanitize_question(str(q)), answer=sanitize_answer(str(a)))
                for q, a in value.items() if a
            ]
        if not isinstance(value, list):
            return []

        answers = []
        for index, item in enumerate(value):
            if isinstance(item, dict):
                if 'answer' not in item:
                    continue
                answers.append(AnswerCandidate(
                    question=sanitize_question(str(item.get('question') or '')),
                    answer=sanitize_answer(str(item.get('answer') or ''))
                ))
            elif isinstance(item, str):
                question = questions[index] if index < len(questions) and questions[index] else f"Question {index + 1}"
                answers.append(AnswerCandidate(
                    question=sanitize_question(question),
                    answer=sanitize_answer(item)
                ))
        return answers

    def _to_list(self, value: Any) -> List[str]:
        if isinstance(value, list):
            return [str(item).strip() for item in value if item is not None and str(item).strip()]
        if isinstance(value, str):
            return self._split_text_list(value)
        return []

    @staticmethod
    def _to_text(value: Any) -> str:
        if not value:
            return ''
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, list):
            return ' '.join(str(item) for item in value).strip()
        return str(value).strip()

    @staticmethod
    def _split_text_list(text: str) -> List[str]:
        """Split a bullet or numbered block into items."""
        items = []
        for line in re.split(r'\n|•', text):
            item = _LIST_PREFIX.sub('', line).strip()
            if item:
                items.append(item)
        return items

    # Free-text fallback

    def _questions_from_free_text(self, lines: Sequence[str]) -> List[str]:
        questions = []
        for line in lines:
            item = _LIST_PREFIX.sub('', line).strip()
            if item.endswith('?'):
                questions.append(item)
        return questions[:self.settings.FREE_TEXT_MAX_QUESTIONS]

    def _analysis_from_free_text(self, content: str, error: Optional[str]) -> JobPostAnalysis:
        lines = [line.strip() for line in content.splitlines() if line.strip()]
        bullets = [_LIST_PREFIX.sub('', line).strip() for line in lines if _BULLET_LINE.match(line)]
        bullets = [bullet for bullet in bullets if bullet]

        return JobPostAnalysis(
            key_points=bullets[:self.settings.FREE_TEXT_MAX_KEY_POINTS],
            required_skills=[b for b in bullets if _SKILL_HINT.search(b)][:self.settings.FREE_TEXT_MAX_SKILLS],
            suggested_questions=self._questions_from_free_text(lines),
            error=error
        )

    def _preview(self, content: str) -> str:
        return content[:self.settings.ERROR_PREVIEW_LENGTH] or "Unexpected response from AI"
