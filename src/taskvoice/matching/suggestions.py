"""
Voice input suggestions.

While the user is still speaking, offer up to three hints: an existing task
that looks similar, a sensible time for meetings or exercise, a priority
when urgency words appear, and a category from the taxonomy.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence
import logging

from rapidfuzz import fuzz, process

from taskvoice.config import config
from taskvoice.config.vocabulary import get_category_taxonomy, get_suggestion_keywords
from taskvoice.data_types import TaskRef
from taskvoice.extraction.attributes import WORD_RE

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3
MAX_SIMILAR_TASKS = 2

CATEGORY_CONFIDENCE: Dict[str, float] = {"health": 0.9}
DEFAULT_CATEGORY_CONFIDENCE = 0.85


@dataclass(frozen=True)
class Suggestion:
    kind: str  # "task" | "time" | "priority" | "category"
    suggestion: str
    confidence: float
    reasoning: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.kind,
            "suggestion": self.suggestion,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
        }


def _mentions(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _similar_tasks(tasks: Sequence[TaskRef], text: str, threshold: int) -> List[Suggestion]:
    titles = [task.title.lower() for task in tasks]
    if not titles:
        return []
    hits = process.extract(
        text,
        titles,
        scorer=fuzz.partial_ratio,
        score_cutoff=threshold,
        limit=MAX_SIMILAR_TASKS,
    )
    return [
        Suggestion(
            kind="task",
            suggestion=f'Continue with "{tasks[index].title}"',
            confidence=0.8,
            reasoning="Similar to existing task",
        )
        for _, _, index in hits
    ]


def _time_suggestions(text: str, hour: int, keywords: Dict[str, List[str]]) -> List[Suggestion]:
    suggestions = []
    if _mentions(text, keywords.get("meeting", [])):
        suggested = "10:00 AM" if hour < 12 else "2:00 PM"
        suggestions.append(Suggestion(
            kind="time",
            suggestion=f"Schedule for {suggested}",
            confidence=0.75,
            reasoning="Optimal meeting time",
        ))
    if _mentions(text, keywords.get("exercise", [])):
        suggested = "7:00 AM" if hour < 8 else "6:00 PM"
        suggestions.append(Suggestion(
            kind="time",
            suggestion=f"Schedule for {suggested}",
            confidence=0.8,
            reasoning="Common exercise time",
        ))
    return suggestions


def _priority_suggestions(text: str, keywords: Dict[str, List[str]]) -> List[Suggestion]:
    suggestions = []
    if _mentions(text, keywords.get("urgent", [])):
        suggestions.append(Suggestion(
            kind="priority",
            suggestion="Set as High priority",
            confidence=0.9,
            reasoning="Urgency keywords detected",
        ))
    if _mentions(text, keywords.get("relaxed", [])):
        suggestions.append(Suggestion(
            kind="priority",
            suggestion="Set as Low priority",
            confidence=0.8,
            reasoning="Low urgency keywords detected",
        ))
    return suggestions


def _category_suggestions(text: str) -> List[Suggestion]:
    words = set(WORD_RE.findall(text))
    suggestions = []
    for category, category_keywords in get_category_taxonomy().items():
        if words.intersection(category_keywords):
            suggestions.append(Suggestion(
                kind="category",
                suggestion=f"Categorize as {category.title()}",
                confidence=CATEGORY_CONFIDENCE.get(category, DEFAULT_CATEGORY_CONFIDENCE),
                reasoning=f"{category.title()}-related keywords detected",
            ))
    return suggestions


def generate_suggestions(
    tasks: Sequence[TaskRef],
    text: str,
    reference: datetime,
    threshold: Optional[int] = None
) -> List[Suggestion]:
    """
    Suggest completions for a partial utterance.

    Args:
        tasks: Snapshot of existing tasks
        text: What the user has said so far
        reference: Current time; its hour picks the suggested time of day
        threshold: rapidfuzz partial_ratio cut-off (defaults to config.FUZZY_THRESHOLD)

    Returns:
        At most three suggestions, highest confidence first
    """
    lowered = " ".join((text or "").lower().split())
    if not lowered:
        return []

    cutoff = config.FUZZY_THRESHOLD if threshold is None else threshold
    keywords = get_suggestion_keywords()

    suggestions: List[Suggestion] = []
    suggestions.extend(_similar_tasks(tasks, lowered, cutoff))
    suggestions.extend(_time_suggestions(lowered, reference.hour, keywords))
    suggestions.extend(_priority_suggestions(lowered, keywords))
    suggestions.extend(_category_suggestions(lowered))

    ranked = sorted(suggestions, key=lambda s: s.confidence, reverse=True)[:MAX_SUGGESTIONS]
    logger.debug(
        f"Generated {len(ranked)} suggestions",
        extra={"stage": "matching", "input": lowered, "output": [s.to_dict() for s in ranked]},
    )
    return ranked
