"""
Task Parse Pipeline

Turns a free-form utterance into ParsedAttributes.

Pipeline stages:
1. Notes (split off text after "notes:")
2. Recurrence (daily / every monday → RRULE)
3. Temporal (date/time expression → start instant)
4. Attributes (tags, priority, duration, category)
5. Location ("at Cafe Roma", "at the office")
6. Item type (task, or event when a time or an event word was spoken)
7. Title (whatever is left, connectors trimmed; falls back to the utterance)

Every stage consumes its span from the text and hands the rest to the next
one. Stages never raise on malformed input; unmatched fields stay absent.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import logging

from taskvoice.config import config
from taskvoice.config.vocabulary import get_title_connectors
from taskvoice.data_types import AttributeUpdates, ItemType, ParsedAttributes, Priority
from taskvoice.extraction.attributes import extract_attributes
from taskvoice.extraction.item_type import classify_item_type
from taskvoice.extraction.location import extract_location
from taskvoice.extraction.normalization import clean_title, collapse_whitespace
from taskvoice.extraction.recurrence import extract_recurrence
from taskvoice.perf import StageTimer
from taskvoice.temporal.resolver import resolve_datetime
from taskvoice.temporal.timezones import TimezoneLike

logger = logging.getLogger(__name__)

NOTES_RE = re.compile(r"\bnotes?\s*:\s*", re.IGNORECASE)


@dataclass
class _StageOutput:
    """Everything the stages found, before defaults are applied."""
    title: str
    priority: Optional[Priority] = None
    start: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    category: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    recurrence: Optional[str] = None
    item_type: ItemType = ItemType.TASK
    all_day: bool = False
    location: Optional[str] = None


def split_notes(text: str) -> Tuple[str, Optional[str]]:
    """
    Split "buy milk notes: the skimmed one" into ("buy milk", "the skimmed one").

    Returns:
        (text before the marker, notes or None)
    """
    match = NOTES_RE.search(text)
    if match is None:
        return text, None
    notes = collapse_whitespace(text[match.end():])
    return collapse_whitespace(text[:match.start()]), (notes or None)


class TaskParsePipeline:
    """
    Pipeline orchestrator that runs the extraction stages in order.

    Holds no per-call state; one instance can serve any number of calls.
    """

    def __init__(self, connectors: Optional[List[str]] = None):
        """
        Args:
            connectors: Words trimmed from either end of the title
                (defaults to the vocabulary's title_connectors)
        """
        self._connectors = connectors

    @property
    def connectors(self) -> List[str]:
        if self._connectors is None:
            return get_title_connectors()
        return self._connectors

    def _run_stages(
        self,
        text: str,
        reference: datetime,
        timezone: TimezoneLike,
        trace: Optional[Dict[str, Any]],
        request_id: Optional[str]
    ) -> _StageOutput:
        timing_trace = trace if config.LOG_PERFORMANCE_METRICS else None

        with StageTimer(timing_trace, "notes", request_id=request_id):
            body, notes = split_notes(text)

        with StageTimer(timing_trace, "recurrence", request_id=request_id):
            recurrence, remaining = extract_recurrence(body)

        with StageTimer(timing_trace, "temporal", request_id=request_id):
            resolved = resolve_datetime(remaining, reference, timezone)

        with StageTimer(timing_trace, "attributes", request_id=request_id):
            extracted = extract_attributes(resolved.remaining_text)

        with StageTimer(timing_trace, "location", request_id=request_id):
            location, remaining = extract_location(extracted.remaining_text)

        with StageTimer(timing_trace, "item_type", request_id=request_id):
            item_type, all_day = classify_item_type(body, resolved)

        with StageTimer(timing_trace, "title", request_id=request_id):
            title = clean_title(remaining, self.connectors)

        if trace is not None:
            trace["temporal"] = resolved.to_dict()
            trace["remaining_text"] = remaining

        if config.DEBUG_NLP:
            logger.debug(
                "Stages complete",
                extra={
                    "request_id": request_id,
                    "stage": "pipeline",
                    "input": text,
                    "output": {
                        "title": title,
                        "start": resolved.to_dict()["instant"],
                        "recurrence": recurrence,
                        "item_type": item_type.value,
                    },
                },
            )

        return _StageOutput(
            title=title,
            priority=extracted.priority,
            start=resolved.instant,
            duration_minutes=extracted.duration_minutes,
            category=extracted.category,
            notes=notes,
            tags=extracted.tags,
            recurrence=recurrence,
            item_type=item_type,
            all_day=all_day,
            location=location,
        )

    def parse(
        self,
        text: str,
        reference: datetime,
        timezone: TimezoneLike = None,
        trace: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None
    ) -> ParsedAttributes:
        """
        Parse an utterance into task attributes.

        Args:
            text: Utterance to parse
            reference: The "now" relative phrases are measured from
            timezone: Optional IANA name or tzinfo for the resolved start
            trace: Optional dict that receives stage timings and intermediates
            request_id: Optional request ID for logging

        Returns:
            ParsedAttributes (priority defaults to MEDIUM; title never empty
            for non-empty input)
        """
        raw_text = text or ""
        stripped = collapse_whitespace(raw_text)
        if not stripped:
            return ParsedAttributes(title="", raw_text=raw_text)

        output = self._run_stages(stripped, reference, timezone, trace, request_id)
        return ParsedAttributes(
            title=output.title or stripped,
            priority=output.priority or Priority.MEDIUM,
            start=output.start,
            duration_minutes=output.duration_minutes,
            category=output.category,
            notes=output.notes,
            tags=output.tags,
            recurrence=output.recurrence,
            item_type=output.item_type,
            all_day=output.all_day,
            location=output.location,
            raw_text=raw_text,
        )

    def parse_updates(
        self,
        text: str,
        reference: datetime,
        timezone: TimezoneLike = None,
        trace: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None
    ) -> AttributeUpdates:
        """
        Parse the update part of an edit command.

        Same stages as parse(), but nothing is defaulted: a field is only
        set when the text mentions it, and the leftover text is only a new
        title when something is left.
        """
        stripped = collapse_whitespace(text or "")
        if not stripped:
            return AttributeUpdates()

        output = self._run_stages(stripped, reference, timezone, trace, request_id)
        return AttributeUpdates(
            title=output.title or None,
            priority=output.priority,
            start=output.start,
            duration_minutes=output.duration_minutes,
            category=output.category,
            notes=output.notes,
            tags=output.tags,
            recurrence=output.recurrence,
            location=output.location,
        )


_default_pipeline = TaskParsePipeline()


def parse_task(
    text: str,
    reference: datetime,
    timezone: TimezoneLike = None
) -> ParsedAttributes:
    """
    Parse an utterance into task attributes with the default pipeline.

    Example:
        >>> parse_task("Team meeting next Monday 3pm high 90m", datetime(2024, 1, 3, 10))
        ParsedAttributes(title='Team meeting', priority=<Priority.HIGH: 'High'>,
                         start=datetime(2024, 1, 8, 15, 0), duration_minutes=90, ...)
    """
    return _default_pipeline.parse(text, reference, timezone)


def parse_updates(
    text: str,
    reference: datetime,
    timezone: TimezoneLike = None
) -> AttributeUpdates:
    """Parse edit-command update text with the default pipeline."""
    return _default_pipeline.parse_updates(text, reference, timezone)
