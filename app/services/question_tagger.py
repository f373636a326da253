"""
Keyword-based question tagger.

Assigns `technical`, `behavioral`, `company-specific` and `role-specific`
labels by scanning question text. Keyword lists come from a YAML file when
one is available and fall back to built-in defaults.
"""

import copy
import re
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Pattern, Tuple
from app.models.question_models import QuestionTag
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "question_tags.yaml"

DEFAULT_KEYWORDS: Dict[str, List[str]] = {
    QuestionTag.TECHNICAL.value: [
        'technical', 'technology', 'algorithm', 'data structure', 'system design',
        'architecture', 'database', 'sql', 'api', 'code', 'coding', 'programming',
        'debug', 'framework', 'scalab', 'performance', 'latency', 'cloud', 'deploy',
        'infrastructure', 'security', 'testing', 'automation', 'stack', 'tool'
    ],
    QuestionTag.BEHAVIORAL.value: [
        'tell me about a time', 'describe a time', 'describe a situation',
        'give an example', 'give me an example', 'how do you handle', 'how did you handle',
        'conflict', 'challenge', 'failure', 'failed', 'mistake', 'teamwork',
        'leadership', 'weakness', 'strength', 'feedback', 'pressure', 'disagree',
        'motivat', 'yourself'
    ],
    QuestionTag.COMPANY_SPECIFIC.value: [
        'our company', 'this company', 'the company', 'why do you want to work',
        'work here', 'join us', 'why us', 'our mission', 'our values', 'our culture',
        'our product', 'our customers', 'company culture'
    ],
    QuestionTag.ROLE_SPECIFIC.value: [
        'this role', 'this position', 'the role', 'the position', 'this job',
        'responsibilit', 'day-to-day', 'first 90 days', 'qualif', 'in this team'
    ]
}

class QuestionTagger:
    """
    Tags questions with the fixed category vocabulary.

    Company and position names, when known, count as company-specific and
    role-specific keywords respectively.
    """

    def __init__(self, company: Optional[str] = None, position: Optional[str] = None,
                 config_path: Optional[str] = None):
        self.company = (company or "").strip().lower()
        self.position = (position or "").strip().lower()
        self.keywords = self._load_keyword_config(config_path)
        self.compiled_patterns = self._compile_patterns()

    def for_context(self, company: Optional[str] = None, position: Optional[str] = None) -> "QuestionTagger":
        """Tagger for one company and position that shares this tagger's compiled patterns."""
        tagger = copy.copy(self)
        tagger.company = (company or "").strip().lower()
        tagger.position = (position or "").strip().lower()
        return tagger

    def __call__(self, text: str) -> Tuple[QuestionTag, ...]:
        return self.tag(text)

    def tag(self, text: str) -> Tuple[QuestionTag, ...]:
        """Return the tags that apply to text, in vocabulary order."""
        text_lower = text.lower()
        tags = []

        for tag in QuestionTag:
            patterns = self.compiled_patterns.get(tag, [])
            if any(pattern.search(text_lower) for pattern in patterns):
                tags.append(tag)
            elif tag is QuestionTag.COMPANY_SPECIFIC and self.company and self.company in text_lower:
                tags.append(tag)
            elif tag is QuestionTag.ROLE_SPECIFIC and self.position and self.position in text_lower:
                tags.append(tag)

        return tuple(tags)

    def _load_keyword_config(self, config_path: Optional[str] = None) -> Dict[str, List[str]]:
        """Load keyword lists from YAML, falling back to the built-in defaults."""
        for path in (config_path, DEFAULT_CONFIG_PATH):
            if not path or not Path(path).exists():
                continue
            try:
                with open(path, 'r') as f:
                    config = yaml.safe_load(f) or {}
                keywords = config.get('question_tags', {})
                if keywords:
                    logger.debug(f"Loaded question tag keywords from {path}")
                    return self._merge_with_defaults(keywords)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load question tag config from {path}: {e}")

        logger.debug("Using built-in question tag keywords")
        return dict(DEFAULT_KEYWORDS)

    def _merge_with_defaults(self, keywords: Dict[str, List[str]]) -> Dict[str, List[str]]:
        known = {tag.value for tag in QuestionTag}
        merged = dict(DEFAULT_KEYWORDS)
        for name, values in keywords.items():
            if name not in known:
                logger.warning(f"Ignoring unknown question tag in config: {name}")
                continue
            merged[name] = [str(value).lower() for value in values or []]
        return merged

    def _compile_patterns(self) -> Dict[QuestionTag, List[Pattern]]:
        """Compile keywords as word-start patterns so 'api' does not hit 'rapid'."""
        return {
            QuestionTag(name): [re.compile(r'\b' + re.escape(keyword)) for keyword in values]
            for name, values in self.keywords.items()
        }
