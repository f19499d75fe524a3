"""
Attribute Extractor

Pulls priority, duration, category and tags out of the text that is left
once the date/time expression has been removed. Everything that is not
consumed becomes the title.

Order: tags → priority → duration → category (category never consumes).
"""
import re
from functools import lru_cache
from typing import Dict, List, Optional, Tuple
import logging

from taskvoice.config.temporal import alternation
from taskvoice.config.vocabulary import (
    get_priority_synonyms,
    get_duration_units,
    get_category_taxonomy,
)
from taskvoice.data_types import ExtractedAttributes, Priority
from taskvoice.extraction.normalization import collapse_whitespace, remove_span

logger = logging.getLogger(__name__)

_LEVEL_TO_PRIORITY = {
    "high": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "low": Priority.LOW,
}

TAG_RE = re.compile(r"(?<![\w#@])([#@])(\w[\w\-]*)")
WORD_RE = re.compile(r"[a-z0-9']+")


# -------------------------------------------------------------------
# Vocabulary-driven patterns
# -------------------------------------------------------------------

def _synonym_table() -> Dict[str, Priority]:
    table: Dict[str, Priority] = {}
    for level, synonyms in get_priority_synonyms().items():
        priority = _LEVEL_TO_PRIORITY.get(level)
        if priority is None:
            continue
        for word in synonyms:
            table.setdefault(word, priority)
    return table


@lru_cache(maxsize=8)
def _compile_priority_pattern(words: Tuple[str, ...]) -> re.Pattern:
    return re.compile(
        rf"\b(?P<word>{alternation(words)})\b(?:[\s\-]+priority\b)?",
        re.IGNORECASE,
    )


@lru_cache(maxsize=8)
def _compile_duration_pattern(units: Tuple[str, ...]) -> re.Pattern:
    return re.compile(
        rf"(?<![\w.])(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>{alternation(units)})\b",
        re.IGNORECASE,
    )


# -------------------------------------------------------------------
# Individual extractors
# -------------------------------------------------------------------

def extract_priority(text: str) -> Tuple[Optional[Priority], str]:
    """
    Extract the leftmost priority word.

    "urgent", "high priority" → HIGH; "normal" → MEDIUM; "later" → LOW.

    Returns:
        (priority or None, remaining text)
    """
    table = _synonym_table()
    if not table:
        return None, text
    match = _compile_priority_pattern(tuple(sorted(table))).search(text)
    if match is None:
        return None, text
    priority = table[match.group("word").lower()]
    return priority, remove_span(text, match.start(), match.end())


def extract_duration(text: str) -> Tuple[Optional[int], str]:
    """
    Extract a duration in minutes.

    "2h" → 120, "45m" → 45, "90 minutes" → 90, "1.5 hours" → 90.
    Zero durations are rejected and stay in the text.

    Returns:
        (minutes or None, remaining text)
    """
    units = get_duration_units()
    hour_units = set(units["hours"])
    all_units = tuple(sorted(set(units["minutes"]) | hour_units))
    if not all_units:
        return None, text

    for match in _compile_duration_pattern(all_units).finditer(text):
        amount = float(match.group("amount"))
        factor = 60 if match.group("unit").lower() in hour_units else 1
        minutes = int(round(amount * factor))
        if minutes <= 0:
            continue
        return minutes, remove_span(text, match.start(), match.end())
    return None, text


def detect_category(text: str) -> Optional[str]:
    """
    Return the first taxonomy category whose keywords appear as words in text.

    Categories are checked in declared order. Nothing is consumed.
    """
    words = set(WORD_RE.findall(text.lower()))
    if not words:
        return None
    for category, keywords in get_category_taxonomy().items():
        if words.intersection(keywords):
            return category
    return None


def extract_tags(text: str) -> Tuple[List[str], str]:
    """
    Collect #tags and @mentions (without the sigil) and remove them.

    Returns:
        (tags in order of appearance, remaining text)
    """
    tags: List[str] = []
    for match in TAG_RE.finditer(text):
        tag = match.group(2)
        if tag not in tags:
            tags.append(tag)
    if not tags:
        return [], text
    return tags, collapse_whitespace(TAG_RE.sub(" ", text))


# -------------------------------------------------------------------
# Combined
# -------------------------------------------------------------------

def extract_attributes(text: str) -> ExtractedAttributes:
    """
    Run every attribute extractor over text.

    Args:
        text: Text with the date/time expression already removed

    Returns:
        ExtractedAttributes; remaining_text is what is left for the title
    """
    remaining = collapse_whitespace(text or "")
    tags, remaining = extract_tags(remaining)
    priority, remaining = extract_priority(remaining)
    duration, remaining = extract_duration(remaining)
    category = detect_category(remaining)

    result = ExtractedAttributes(
        priority=priority,
        duration_minutes=duration,
        category=category,
        tags=tags,
        remaining_text=remaining,
    )
    logger.debug(
        "Extracted attributes",
        extra={
            "stage": "attributes",
            "priority": priority.value if priority else None,
            "duration_minutes": duration,
            "category": category,
            "tags": tags,
        },
    )
    return result
