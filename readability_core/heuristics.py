"""
Tag and class/id heuristics.

Pure functions mapping a tag name, or class/id attribute values, to integer
score deltas. No state beyond a cache of compiled patterns.
"""

import re
from functools import lru_cache
from typing import Optional

from .schemas import ScoringConfig, get_default_config


@lru_cache(maxsize=32)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


def tag_weight(tag_name: Optional[str], config: Optional[ScoringConfig] = None) -> int:
    """Base score delta for a tag name (case-insensitive). Unknown tags score 0."""
    if not tag_name:
        return 0
    config = config or get_default_config()
    return config.tag_weights.get(tag_name.lower(), 0)


def attribute_weight(value: Optional[str], config: Optional[ScoringConfig] = None) -> int:
    """
    Weight of a single class or id value.

    A blank value scores 0. Otherwise the negative and positive patterns are
    checked independently, so a value hitting both nets out to 0.
    """
    if not value or not value.strip():
        return 0
    config = config or get_default_config()

    weight = 0
    if _compile(config.negative_pattern).search(value):
        weight -= config.class_weight
    if _compile(config.positive_pattern).search(value):
        weight += config.class_weight
    return weight


def class_weight(
    class_value: Optional[str],
    id_value: Optional[str],
    config: Optional[ScoringConfig] = None
) -> int:
    """
    Combined weight of an element's class and id attributes.

    Args:
        class_value: The element's class attribute ("" if absent)
        id_value: The element's id attribute ("" if absent)
        config: Scoring config (default: environment-derived default)

    Returns:
        Sum of both contributions, in multiples of config.class_weight
    """
    config = config or get_default_config()
    if not config.weight_classes:
        return 0

    weight = attribute_weight(class_value, config)
    # Legacy scorers score the class value a second time in place of the id
    weight += attribute_weight(class_value if config.id_weight_from_class else id_value, config)
    return weight
