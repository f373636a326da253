"""
Matching-key normalizer for questions. Output is never shown to users.
"""
import re
from app.exceptions import PipelineContractError

_KEY_PREFIX = re.compile(r'^\s*["\']?question["\']?\s*:\s*')
_NON_WORD = re.compile(r'[^\w\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Lower-case, drop the `question:` key artifact and punctuation, collapse whitespace."""
    if not isinstance(text, str):
        raise PipelineContractError(
            "normalize expects a string",
            context={"received_type": type(text).__name__}
        )

    value = text.lower().strip()
    value = _KEY_PREFIX.sub("", value, count=1)
    value = value.strip().strip('"\'“”‘’')
    value = _NON_WORD.sub("", value)
    value = _WHITESPACE.sub(" ", value)
    return value.strip()
