"""Task reference matching and voice suggestions."""

from .task_matcher import MatchTier, TaskMatch, match_tier, rank_tasks, match_tasks
from .suggestions import Suggestion, generate_suggestions

__all__ = [
    "MatchTier",
    "TaskMatch",
    "match_tier",
    "rank_tasks",
    "match_tasks",
    "Suggestion",
    "generate_suggestions",
]
