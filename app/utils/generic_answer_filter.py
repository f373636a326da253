"""
Filter for templated coaching answers that carry no question-specific content.

Short boilerplate that only says "use the STAR method" is rejected, while
longer answers that mention STAR alongside concrete guidance are kept. The
length thresholds differ per phrase and are fixed.
"""
from app.exceptions import PipelineContractError
from app.models.question_models import MIN_TEXT_LENGTH

STAR_STRUCTURE_PHRASE = "structure your answer using the star method"
STAR_STRUCTURE_MAX_LENGTH = 100

PREPARE_SPECIFIC_PHRASE = "prepare a specific answer for this question"
PREPARE_SPECIFIC_MAX_LENGTH = 150

STAR_MENTION_PHRASE = "star method"
STAR_MENTION_MAX_LENGTH = 30

BARE_STAR_ANSWERS = frozenset({"use the star method", "use star method"})


def is_generic(answer: str) -> bool:
    """Return True when the answer is low-information boilerplate."""
    if not isinstance(answer, str):
        raise PipelineContractError(
            "is_generic expects a string",
            context={"received_type": type(answer).__name__}
        )

    text = answer.strip().lower()
    length = len(text)

    if STAR_STRUCTURE_PHRASE in text and length < STAR_STRUCTURE_MAX_LENGTH:
        return True
    if " ".join(text.split()) in BARE_STAR_ANSWERS:
        return True
    if PREPARE_SPECIFIC_PHRASE in text and length < PREPARE_SPECIFIC_MAX_LENGTH:
        return True
    if length < STAR_MENTION_MAX_LENGTH and STAR_MENTION_PHRASE in text:
        return True
    return False


def is_usable_answer(answer: str) -> bool:
    """An answer is usable when it is long enough and not generic."""
    return not is_generic(answer) and len(answer.strip()) >= MIN_TEXT_LENGTH
