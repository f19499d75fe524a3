"""
Extraction package.

Attribute, recurrence and text clean-up helpers applied after the date/time
expression has been resolved.
"""

from .attributes import (
    extract_attributes,
    extract_priority,
    extract_duration,
    detect_category,
    extract_tags,
)
from .recurrence import extract_recurrence
from .location import extract_location
from .item_type import classify_item_type
from .normalization import (
    collapse_whitespace,
    remove_span,
    strip_trailing_punctuation,
    strip_connectors,
    clean_title,
)

__all__ = [
    "extract_attributes",
    "extract_priority",
    "extract_duration",
    "detect_category",
    "extract_tags",
    "extract_recurrence",
    "extract_location",
    "classify_item_type",
    "collapse_whitespace",
    "remove_span",
    "strip_trailing_punctuation",
    "strip_connectors",
    "clean_title",
]
