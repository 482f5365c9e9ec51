"""
Pydantic schemas for scoring configuration and score snapshots.

ScoringConfig: weights and keyword patterns read by the heuristics module
NodeScore:     read-only snapshot of one scored node, used for debug output

Data flow:
  ScoringConfig → heuristics (tag/class weights) → ScoredNode.initialize_node()
  ScoredNode.snapshot() → NodeScore
"""

import os
import re
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .logger import get_module_logger

logger = get_module_logger("schemas")


# --- Default heuristics ---

# Base score deltas by tag name. Tags not listed score 0.
DEFAULT_TAG_WEIGHTS = {
    'div': 5,
    'pre': 3, 'td': 3, 'blockquote': 3,
    'address': -3, 'ol': -3, 'ul': -3, 'dl': -3,
    'dd': -3, 'dt': -3, 'li': -3, 'form': -3,
    'h1': -5, 'h2': -5, 'h3': -5, 'h4': -5, 'h5': -5, 'h6': -5, 'th': -5,
}

# Keywords in class/id values that suggest main content
POSITIVE_PATTERN = (
    r'article|body|content|entry|hentry|h-entry|main|page|pagination'
    r'|post|text|blog|story'
)

# Keywords in class/id values that suggest boilerplate. "hid" only counts as
# a whole space-separated token so that e.g. "hidden-gem" is not double-hit.
NEGATIVE_PATTERN = (
    r'hidden|^hid$| hid$| hid |^hid |banner|combx|comment|com-|contact|foot'
    r'|footer|footnote|masthead|media|meta|modal|outbrain|promo|related'
    r'|scroll|share|shoutbox|sidebar|skyscraper|sponsor|shopping|tags|tool'
    r'|widget'
)

# Tree builders BeautifulSoup can hand us a document from
SUPPORTED_PARSERS = ('html5lib', 'lxml', 'html.parser')

# Environment variable → ScoringConfig field
ENV_VARS = {
    'READABILITY_WEIGHT_CLASSES': 'weight_classes',
    'READABILITY_ID_WEIGHT_FROM_CLASS': 'id_weight_from_class',
    'READABILITY_CLASS_WEIGHT': 'class_weight',
    'READABILITY_PARSER': 'parser',
}


class ScoringConfig(BaseModel):
    """Weights and patterns used to seed node scores."""
    tag_weights: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_TAG_WEIGHTS))
    class_weight: int = 25                      # Added/subtracted per pattern hit
    positive_pattern: str = POSITIVE_PATTERN
    negative_pattern: str = NEGATIVE_PATTERN
    weight_classes: bool = True                 # False → class/id weight is always 0
    # Legacy scorers re-read the class attribute for the id contribution,
    # counting class hits twice. Enable only to reproduce their scores.
    id_weight_from_class: bool = False
    parser: str = 'html5lib'

    @field_validator('tag_weights')
    @classmethod
    def _lowercase_tags(cls, value: dict[str, int]) -> dict[str, int]:
        return {tag.lower(): weight for tag, weight in value.items()}

    @field_validator('positive_pattern', 'negative_pattern')
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}")
        return value

    @field_validator('parser')
    @classmethod
    def _check_parser(cls, value: str) -> str:
        if value not in SUPPORTED_PARSERS:
            raise ValueError(f"parser must be one of {', '.join(SUPPORTED_PARSERS)}")
        return value

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "ScoringConfig":
        """
        Build a config from READABILITY_* environment variables.

        A .env file is loaded first (python-dotenv never overrides variables
        that are already set). Explicit keyword overrides win over both.

        Raises:
            ConfigError: if any value fails validation
        """
        load_dotenv(env_file)

        values = {}
        for var, field in ENV_VARS.items():
            raw = os.getenv(var)
            if raw is not None and raw.strip():
                values[field] = raw.strip()
        values.update(overrides)

        try:
            config = cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = '.'.join(str(part) for part in first.get('loc', ()))
            raise ConfigError(
                f"Invalid scoring configuration: {first.get('msg')}",
                field=field or None,
                details={"errors": e.errors(include_url=False, include_context=False)}
            )

        logger.debug(f"Scoring config loaded from environment: {values}")
        return config


class NodeScore(BaseModel):
    """Snapshot of a scored node."""
    handle: int
    tag: str
    class_name: str = ""
    element_id: str = ""
    score: Union[int, float] = 0


_default_config: Optional[ScoringConfig] = None


def get_default_config() -> ScoringConfig:
    """Get or create the default config instance (read once from the environment)."""
    global _default_config
    if _default_config is None:
        _default_config = ScoringConfig.from_env()
    return _default_config


def reset_default_config() -> None:
    """Forget the cached default so the next lookup re-reads the environment."""
    global _default_config
    _default_config = None
