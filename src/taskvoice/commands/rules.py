"""
Command rules.

Ordered list of (name, patterns, builder). Patterns are anchored at the
start, case-insensitive, and tried in declaration order; the first pattern
of the first rule that matches decides the command. The order of
COMMAND_RULES is significant: "edit" must see "change X to Y" before
"move" can, and every explicit verb must win over the create fallback.
"""
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Tuple

from taskvoice.data_types import (
    Command,
    CompleteCommand,
    DeleteCommand,
    EditCommand,
    MoveCommand,
    SearchCommand,
)
from taskvoice.pipeline import parse_updates
from taskvoice.temporal.resolver import resolve_datetime
from taskvoice.temporal.timezones import TimezoneLike

Builder = Callable[[re.Match, datetime, TimezoneLike], Command]


@dataclass(frozen=True)
class CommandRule:
    name: str
    patterns: Tuple[re.Pattern, ...]
    build: Builder

    def match(self, text: str):
        """Return the first pattern match for text, or None."""
        for pattern in self.patterns:
            found = pattern.match(text)
            if found:
                return found
        return None


def _compile(*patterns: str) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# ----------------------------
# Builders
# ----------------------------

def _build_edit(match: re.Match, reference: datetime, timezone: TimezoneLike) -> Command:
    updates = parse_updates(match.group("rest"), reference, timezone)
    return EditCommand(target=match.group("target").strip(), updates=updates)


def _build_delete(match: re.Match, reference: datetime, timezone: TimezoneLike) -> Command:
    return DeleteCommand(target=match.group("target").strip())


def _build_complete(match: re.Match, reference: datetime, timezone: TimezoneLike) -> Command:
    return CompleteCommand(target=match.group("target").strip())


def _build_move(match: re.Match, reference: datetime, timezone: TimezoneLike) -> Command:
    date_text = match.group("date").strip()
    resolved = resolve_datetime(date_text, reference, timezone)
    return MoveCommand(
        target=match.group("target").strip(),
        new_date=resolved.instant,
        date_text=date_text,
    )


def _build_search(match: re.Match, reference: datetime, timezone: TimezoneLike) -> Command:
    date_text = match.group("date").strip()
    resolved = resolve_datetime(date_text, reference, timezone)
    if resolved.instant is not None:
        return SearchCommand(query=resolved.instant)
    return SearchCommand(query=date_text)


# ----------------------------
# Rules (order matters)
# ----------------------------

_EDIT_VERBS = r"(?:edit|change|update|modify)"
_TASK = r"(?:task\s+)?"

COMMAND_RULES: Tuple[CommandRule, ...] = (
    CommandRule(
        name="edit",
        patterns=_compile(
            rf"^{_EDIT_VERBS}\s+{_TASK}(?P<target>.+?)\s+(?:to\s+be|as|to)\s+(?P<rest>.+)$",
            rf"^{_EDIT_VERBS}\s+{_TASK}(?P<target>.+?)\s+(?P<rest>.+)$",
        ),
        build=_build_edit,
    ),
    CommandRule(
        name="delete",
        patterns=_compile(
            rf"^(?:delete|remove|cancel)\s+{_TASK}(?P<target>.+)$",
        ),
        build=_build_delete,
    ),
    CommandRule(
        name="complete",
        patterns=_compile(
            rf"^(?:complete|finish)\s+{_TASK}(?P<target>.+)$",
            rf"^done\s+(?:with\s+)?{_TASK}(?P<target>.+)$",
            rf"^mark\s+{_TASK}(?P<target>.+?)\s+(?:as\s+)?(?:complete|completed|done|finished)$",
        ),
        build=_build_complete,
    ),
    CommandRule(
        name="move",
        patterns=_compile(
            rf"^(?:move|shift)\s+{_TASK}(?P<target>.+?)\s+to\s+(?P<date>.+)$",
            rf"^reschedule\s+{_TASK}(?P<target>.+?)\s+(?:to|for)\s+(?P<date>.+)$",
            rf"^reschedule\s+{_TASK}(?P<target>.+?)\s+(?P<date>.+)$",
        ),
        build=_build_move,
    ),
    CommandRule(
        name="search",
        patterns=_compile(
            r"^(?:show|list|find)\s+(?:tasks?\s+)?(?:(?:for|on)\s+)?(?P<date>.+)$",
            r"^what\s+(?:tasks?\s+)?(?:do\s+i\s+have|are\s+scheduled)\s+(?:(?:for|on)\s+)?(?P<date>.+)$",
            r"^(?:tasks?|what's|whats)\s+(?:(?:for|on)\s+)?(?P<date>.+)$",
        ),
        build=_build_search,
    ),
)
