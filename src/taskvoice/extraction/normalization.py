"""
Text normalization utilities.

Every helper returns a new string; utterances are never modified in place.
"""
import re
from typing import Iterable, Optional

_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_PUNCT_RE = re.compile(r"[\s?!.]+$")
_DANGLING_PUNCT_RE = re.compile(r"^[\s,;:\-]+|[\s,;:\-]+$")


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def remove_span(text: str, start: int, end: int) -> str:
    """
    Remove text[start:end] and re-join the pieces.

    Example:
        >>> remove_span("call mom tomorrow 3pm", 9, 17)
        'call mom 3pm'
    """
    return collapse_whitespace(f"{text[:start]} {text[end:]}")


def strip_trailing_punctuation(text: str) -> str:
    """Drop trailing '?', '!' and '.' ("what's on friday?" → "what's on friday")."""
    return _TRAILING_PUNCT_RE.sub("", text).strip()


def strip_connectors(text: str, connectors: Iterable[str]) -> str:
    """
    Strip connector words left dangling at either end of a title.

    "call mom at" → "call mom", "for dentist" → "dentist".
    Only whole words are removed; inner occurrences are kept.
    """
    words = [w.lower() for w in connectors]
    if not words:
        return collapse_whitespace(text)
    alternation = "|".join(re.escape(w) for w in words)
    leading = re.compile(rf"^(?:(?:{alternation})\s+)+", re.IGNORECASE)
    trailing = re.compile(rf"(?:\s+(?:{alternation}))+$", re.IGNORECASE)

    cleaned = collapse_whitespace(text)
    cleaned = leading.sub("", cleaned)
    cleaned = trailing.sub("", cleaned)
    return cleaned.strip()


def clean_title(text: str, connectors: Iterable[str], fallback: Optional[str] = None) -> str:
    """
    Turn what is left of an utterance into a title.

    Falls back to the trimmed fallback when cleaning consumed everything.
    """
    cleaned = _DANGLING_PUNCT_RE.sub("", strip_connectors(text, connectors))
    cleaned = collapse_whitespace(cleaned)
    if cleaned:
        return cleaned
    return collapse_whitespace(fallback or "")
