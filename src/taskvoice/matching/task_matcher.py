"""
Fuzzy task-reference matcher.

Resolves a spoken reference ("the dentist thing", "report") to existing
tasks. Candidates are ranked by tier:

1. EXACT     - title equals the query (case-insensitive)
2. CONTAINS  - title contains the query, or the query contains the title
3. WORD      - some query word is a substring of, or contains, some title word

Within a tier the caller's order is kept.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence

from taskvoice.data_types import TaskRef


class MatchTier(IntEnum):
    EXACT = 1
    CONTAINS = 2
    WORD = 3


@dataclass(frozen=True)
class TaskMatch:
    task: TaskRef
    tier: MatchTier

    def to_dict(self):
        return {"id": self.task.id, "title": self.task.title, "tier": self.tier.name.lower()}


def _normalize(text: str) -> str:
    return " ".join(text.lower().split())


def match_tier(title: str, query: str) -> Optional[MatchTier]:
    """Return the tier at which title matches query, or None."""
    normalized_title = _normalize(title)
    normalized_query = _normalize(query)
    if not normalized_query or not normalized_title:
        return None

    if normalized_title == normalized_query:
        return MatchTier.EXACT
    if normalized_query in normalized_title or normalized_title in normalized_query:
        return MatchTier.CONTAINS

    title_words = normalized_title.split()
    for query_word in normalized_query.split():
        for title_word in title_words:
            if query_word in title_word or title_word in query_word:
                return MatchTier.WORD
    return None


def rank_tasks(tasks: Sequence[TaskRef], query: str) -> List[TaskMatch]:
    """
    Rank tasks against a reference.

    Returns:
        Matches ordered by tier (stable within a tier); empty for an empty query
    """
    if not query or not query.strip():
        return []
    matches = []
    for task in tasks:
        tier = match_tier(task.title, query)
        if tier is not None:
            matches.append(TaskMatch(task=task, tier=tier))
    # sorted() is stable, so caller order survives within a tier
    return sorted(matches, key=lambda m: m.tier)


def match_tasks(tasks: Sequence[TaskRef], query: str) -> List[TaskRef]:
    """
    Find tasks referenced by query, best first.

    Example:
        >>> tasks = [TaskRef(1, "Dentist appointment"), TaskRef(2, "Dentist")]
        >>> [t.id for t in match_tasks(tasks, "dentist")]
        [2, 1]
    """
    return [m.task for m in rank_tasks(tasks, query)]
