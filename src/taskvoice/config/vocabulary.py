"""
Vocabulary Configuration

Loads priority synonyms, duration units, the category taxonomy, title
connectors, event keywords and known places from vocabulary.yaml.
"""
from pathlib import Path
from typing import Dict, Any, Optional, List
import logging
import os

import yaml

from taskvoice.errors import VocabularyError

logger = logging.getLogger(__name__)

# Cache for the loaded vocabulary, keyed by resolved path
_VOCABULARY_CACHE: Dict[str, Dict[str, Any]] = {}

REQUIRED_SECTIONS = ("priority", "duration_units", "categories")


def get_vocabulary_path() -> Path:
    """
    Resolve the vocabulary file location.

    TASKVOICE_VOCABULARY_PATH wins over the bundled config/data/vocabulary.yaml.
    """
    override = os.getenv("TASKVOICE_VOCABULARY_PATH")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parent / "data" / "vocabulary.yaml"


def load_vocabulary(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load vocabulary from YAML (cached).

    Args:
        path: Optional explicit path; defaults to get_vocabulary_path()

    Returns:
        Dictionary containing the vocabulary configuration

    Raises:
        VocabularyError: If the file is missing, unparsable or lacks a required section
    """
    vocab_path = Path(path) if path is not None else get_vocabulary_path()
    cache_key = str(vocab_path)

    if cache_key in _VOCABULARY_CACHE:
        return _VOCABULARY_CACHE[cache_key]

    if not vocab_path.exists():
        raise VocabularyError(
            f"vocabulary.yaml not found. Tried:\n"
            f"  - {vocab_path}\n"
            f"Set TASKVOICE_VOCABULARY_PATH or restore the bundled file."
        )

    try:
        with vocab_path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise VocabularyError(f"Invalid YAML in {vocab_path}: {e}") from e

    if not isinstance(raw, dict):
        raise VocabularyError(
            f"{vocab_path} must contain a mapping, got {type(raw).__name__}")

    missing = [section for section in REQUIRED_SECTIONS if section not in raw]
    if missing:
        raise VocabularyError(
            f"{vocab_path} is missing required sections: {', '.join(missing)}")

    logger.debug("Loaded vocabulary", extra={"path": cache_key})
    _VOCABULARY_CACHE[cache_key] = raw
    return raw


def clear_vocabulary_cache() -> None:
    """Drop cached vocabularies (tests swap TASKVOICE_VOCABULARY_PATH)."""
    _VOCABULARY_CACHE.clear()


def _lower_terms(values: Any, section: str) -> List[str]:
    if not isinstance(values, list):
        return []
    terms = []
    for value in values:
        # Unquoted on/off/yes/no load as booleans
        if not isinstance(value, str):
            raise VocabularyError(
                f"Vocabulary section '{section}' has a non-string entry {value!r}; "
                f"quote it in the YAML file")
        terms.append(value.lower())
    return terms


def get_priority_synonyms() -> Dict[str, List[str]]:
    """
    Get priority level → synonyms.

    Returns:
        {"high": [...], "medium": [...], "low": [...]}
    """
    vocab = load_vocabulary()
    return {
        level.lower(): _lower_terms(terms, f"priority.{level}")
        for level, terms in (vocab.get("priority") or {}).items()
    }


def get_duration_units() -> Dict[str, List[str]]:
    """Get duration unit words grouped into 'minutes' and 'hours'."""
    units = load_vocabulary().get("duration_units") or {}
    return {
        "minutes": _lower_terms(units.get("minutes"), "duration_units.minutes"),
        "hours": _lower_terms(units.get("hours"), "duration_units.hours"),
    }


def get_category_taxonomy() -> Dict[str, List[str]]:
    """
    Get category → keywords in declared order.

    YAML mappings preserve file order, which is the category precedence.
    """
    categories = load_vocabulary().get("categories") or {}
    return {
        name: _lower_terms(keywords, f"categories.{name}")
        for name, keywords in categories.items()
    }


def get_title_connectors() -> List[str]:
    """Get connector words stripped from either end of a title."""
    return _lower_terms(load_vocabulary().get("title_connectors"), "title_connectors")


def get_suggestion_keywords() -> Dict[str, List[str]]:
    """Get keyword groups used by the suggestion engine."""
    groups = load_vocabulary().get("suggestions") or {}
    return {
        name: _lower_terms(terms, f"suggestions.{name}")
        for name, terms in groups.items()
    }


def get_event_keywords() -> List[str]:
    """Get words that make a dated utterance an event."""
    return _lower_terms(load_vocabulary().get("event_keywords"), "event_keywords")


def get_known_places() -> List[str]:
    """Get lowercase place words accepted after "at"."""
    return _lower_terms(load_vocabulary().get("places"), "places")
