"""
Task vs. event classification.

A spoken time of day makes an utterance an event. Without one, an event
word ("meeting", "appointment") still makes it an event, all-day when a
date was given. Everything else is a task.
"""
from typing import Tuple

from taskvoice.config.vocabulary import get_event_keywords
from taskvoice.data_types import ItemType, ResolvedDateTime
from taskvoice.extraction.attributes import WORD_RE


def classify_item_type(text: str, resolved: ResolvedDateTime) -> Tuple[ItemType, bool]:
    """
    Decide whether text describes a task or an event.

    Args:
        text: The full utterance
        resolved: Date/time resolver output for the same utterance

    Returns:
        (item type, all_day)
    """
    if resolved.has_time:
        return ItemType.EVENT, False
    words = set(WORD_RE.findall(text.lower()))
    if words.intersection(get_event_keywords()):
        return ItemType.EVENT, resolved.has_date
    return ItemType.TASK, False
