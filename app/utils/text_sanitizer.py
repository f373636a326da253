"""
Text sanitizer for AI-generated question and answer fragments.

Strips JSON key prefixes, interleaved-pair tails, quote and bracket remnants
left behind when a model serializes its output badly. The rewrite sequence is
repeated until the text stops changing, so sanitizing twice is the same as
sanitizing once.
"""
import re
from enum import Enum
from app.exceptions import PipelineContractError


class SanitizeMode(Enum):
    QUESTION = "question"
    ANSWER = "answer"


QUOTE_CHARS = '"“”'
OPENERS = {"[": "]", "{": "}", "(": ")"}

_KEY_PREFIX = re.compile(r'^\s*["\']?(?:questions?|answer)["\']?\s*:\s*', re.IGNORECASE)
_PAIR_TAIL = re.compile(
    r',\s*["\']?(?:answer|question)["\']?\s*:',
    re.IGNORECASE
)
_TRAILING_JUNK = re.compile(r'(?:["”]\s*,|[}\]]\s*,?|,)\s*$')
_LEADING_QUOTES = re.compile(r'^[' + QUOTE_CHARS + r']+')
_TRAILING_QUOTES = re.compile(r'[' + QUOTE_CHARS + r']+$')

_ESCAPES = (
    ('\\n', '\n'),
    ('\\t', ' '),
    ('\\"', '"'),
)


def sanitize(raw: str, mode: SanitizeMode = SanitizeMode.QUESTION) -> str:
    """
    Remove JSON and quoting artifacts from a raw AI fragment.

    Args:
        raw: Fragment as produced by the model or the JSON parser
        mode: QUESTION or ANSWER; answers also get literal escape sequences decoded

    Returns:
        Cleaned text, possibly empty. Never None.
    """
    if not isinstance(raw, str):
        raise PipelineContractError(
            "sanitize expects a string",
            context={"received_type": type(raw).__name__}
        )

    text = raw
    previous = None
    while text != previous:
        previous = text
        text = _rewrite_once(text, mode)
    return text


def sanitize_question(raw: str) -> str:
    return sanitize(raw, SanitizeMode.QUESTION)


def sanitize_answer(raw: str) -> str:
    return sanitize(raw, SanitizeMode.ANSWER)


def _rewrite_once(text: str, mode: SanitizeMode) -> str:
    text = text.strip()
    text = _KEY_PREFIX.sub("", text, count=1)

    marker = _PAIR_TAIL.search(text)
    if marker:
        text = text[:marker.start()]

    if mode is SanitizeMode.ANSWER:
        for escaped, plain in _ESCAPES:
            text = text.replace(escaped, plain)

    text = _TRAILING_JUNK.sub("", text.rstrip())
    text = _LEADING_QUOTES.sub("", text.strip())
    text = _TRAILING_QUOTES.sub("", text)
    text = _strip_unbalanced_brackets(text.strip())
    return text.strip()


def _strip_unbalanced_brackets(text: str) -> str:
    """Drop a leading opener that never closes and a trailing bracket left dangling."""
    if not text:
        return text

    first = text[0]
    if first in OPENERS and OPENERS[first] not in text[1:]:
        text = text[1:].lstrip()

    if not text:
        return text

    last = text[-1]
    if last in OPENERS:
        # An opener at the very end can never be closed
        text = text[:-1]
    elif last == ")" and "(" not in text[:-1]:
        text = text[:-1]

    return text
