"""Product category detection for Part Namer."""

from .category_detector import (
    UNKNOWN_CATEGORY,
    FAMILY_RULES,
    determine_category,
    match_family,
)

__all__ = [
    "UNKNOWN_CATEGORY",
    "FAMILY_RULES",
    "determine_category",
    "match_family",
]
