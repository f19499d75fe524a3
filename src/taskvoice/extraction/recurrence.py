"""
Recurrence phrases → RFC 5545 RRULE fragments.

"daily" → FREQ=DAILY, "every week" → FREQ=WEEKLY,
"every monday" → FREQ=WEEKLY;BYDAY=MO.

A single frequency word that opens the utterance (or follows an article)
and is followed by a noun is an adjective ("weekly report friday",
"my daily standup 9am"): the rule is still detected but the word stays in
the title.
"""
import re
from typing import Optional, Tuple

from taskvoice.config.temporal import WEEKDAY_RRULE_CODES, WEEKDAY_TO_NUMBER, alternation
from taskvoice.extraction.normalization import remove_span

_ADJECTIVE_LEADS = {"a", "an", "the", "my", "our", "your", "his", "her", "their"}
_FREQUENCY_WORD_RE = re.compile(r"\A(?:daily|weekly|monthly|yearly|annually)\Z", re.IGNORECASE)

_FREQUENCIES = (
    (re.compile(r"\b(?:daily|every\s+day)\b", re.IGNORECASE), "FREQ=DAILY"),
    (re.compile(r"\b(?:weekly|every\s+week)\b", re.IGNORECASE), "FREQ=WEEKLY"),
    (re.compile(r"\b(?:monthly|every\s+month)\b", re.IGNORECASE), "FREQ=MONTHLY"),
    (re.compile(r"\b(?:yearly|annually|every\s+year)\b", re.IGNORECASE), "FREQ=YEARLY"),
)

EVERY_WEEKDAY_RE = re.compile(
    rf"\b(?P<every>every)\s+(?P<weekday>{alternation(WEEKDAY_TO_NUMBER)})\b",
    re.IGNORECASE,
)


def _is_adjective(text: str, match: re.Match) -> bool:
    if not _FREQUENCY_WORD_RE.match(match.group(0)):
        return False
    before = text[:match.start()].split()
    after = text[match.end():].split()
    if not after or not after[0][0].isalpha():
        return False
    return not before or before[-1].lower() in _ADJECTIVE_LEADS


def extract_recurrence(text: str) -> Tuple[Optional[str], str]:
    """
    Extract a recurrence rule.

    For "every <weekday>" only "every" is removed so the weekday is still
    there for the date resolver to anchor the first occurrence.

    Returns:
        (RRULE fragment or None, remaining text)
    """
    match = EVERY_WEEKDAY_RE.search(text)
    if match:
        code = WEEKDAY_RRULE_CODES[WEEKDAY_TO_NUMBER[match.group("weekday").lower()]]
        remaining = remove_span(text, match.start("every"), match.end("every"))
        return f"FREQ=WEEKLY;BYDAY={code}", remaining

    for pattern, rule in _FREQUENCIES:
        match = pattern.search(text)
        if match:
            if _is_adjective(text, match):
                return rule, text
            return rule, remove_span(text, match.start(), match.end())
    return None, text
