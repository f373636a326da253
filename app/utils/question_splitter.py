"""
Splitter for strings that carry a whole question/answer object.

When a model serializes `{"question": ..., "answer": ...}` as a single array
element, the question list ends up holding strings like
`"How do you handle conflict?", "answer": "Give a specific example."`.
"""
import re
from typing import Optional
from app.exceptions import PipelineContractError
from app.models.question_models import SplitResult, MIN_TEXT_LENGTH
from app.utils.text_sanitizer import sanitize_question, sanitize_answer
from app.utils.logger import get_logger

logger = get_logger(__name__)

_ANSWER_MARKER = re.compile(
    r',\s*["\']?answer["\']?\s*:',
    re.IGNORECASE
)


def try_split(raw: str) -> Optional[SplitResult]:
    """
    Split an interleaved question/answer string.

    Returns:
        SplitResult when both halves survive sanitizing with at least
        MIN_TEXT_LENGTH characters, otherwise None.
    """
    if not isinstance(raw, str):
        raise PipelineContractError(
            "try_split expects a string",
            context={"received_type": type(raw).__name__}
        )

    marker = _ANSWER_MARKER.search(raw)
    if not marker:
        return None

    question = sanitize_question(raw[:marker.start()])
    answer = sanitize_answer(raw[marker.end():])

    if len(question) < MIN_TEXT_LENGTH or len(answer) < MIN_TEXT_LENGTH:
        logger.debug(f"Rejected split: question={len(question)} chars, answer={len(answer)} chars")
        return None

    return SplitResult(question=question, answer=answer)
