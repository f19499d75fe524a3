"""
Config package.

Exposes the environment-driven configuration object and the vocabulary
loaders.
"""

from .config import TaskVoiceConfig, config
from .vocabulary import (
    load_vocabulary,
    clear_vocabulary_cache,
    get_vocabulary_path,
    get_priority_synonyms,
    get_duration_units,
    get_category_taxonomy,
    get_title_connectors,
    get_suggestion_keywords,
    get_event_keywords,
    get_known_places,
)
from . import temporal  # noqa: E402

__all__ = [
    "config",
    "TaskVoiceConfig",
    "load_vocabulary",
    "clear_vocabulary_cache",
    "get_vocabulary_path",
    "get_priority_synonyms",
    "get_duration_units",
    "get_category_taxonomy",
    "get_title_connectors",
    "get_suggestion_keywords",
    "get_event_keywords",
    "get_known_places",
    "temporal",
]
