"""
Command Classifier

Decides whether an utterance is an action on an existing task (edit, delete,
complete, move, search) or a new task. Anything that no rule claims is
parsed as a whole into a CreateCommand.
"""
from datetime import datetime
from typing import Any, Dict, Optional
import logging

from taskvoice.commands.rules import COMMAND_RULES
from taskvoice.config import config
from taskvoice.data_types import Command, CreateCommand
from taskvoice.extraction.normalization import collapse_whitespace, strip_trailing_punctuation
from taskvoice.logging_config import log_with_context
from taskvoice.perf import StageTimer
from taskvoice.pipeline import parse_task
from taskvoice.temporal.timezones import TimezoneLike

logger = logging.getLogger(__name__)


def classify_command(
    text: str,
    reference: datetime,
    timezone: TimezoneLike = None,
    request_id: Optional[str] = None,
    trace: Optional[Dict[str, Any]] = None
) -> Command:
    """
    Classify an utterance into a Command.

    Args:
        text: Utterance as typed or transcribed
        reference: The "now" for resolving dates in the payload
        timezone: Optional IANA name or tzinfo
        request_id: Optional request ID for logging
        trace: Optional dict that receives the classify timing

    Returns:
        The Command of the first matching rule, else CreateCommand

    Example:
        >>> classify_command("delete dentist appointment", datetime(2024, 1, 3, 10))
        DeleteCommand(target='dentist appointment')
    """
    cleaned = strip_trailing_punctuation(collapse_whitespace(text or ""))
    timing_trace = trace if config.LOG_PERFORMANCE_METRICS else None

    with StageTimer(timing_trace, "classify", request_id=request_id):
        command = _match_rules(cleaned, reference, timezone, request_id)
    if command is not None:
        return command

    log_with_context(
        logger, logging.DEBUG, "No command rule matched, creating task",
        request_id=request_id, stage="classify", command="create",
    )
    return CreateCommand(attributes=parse_task(text or "", reference, timezone))


def _match_rules(
    text: str,
    reference: datetime,
    timezone: TimezoneLike,
    request_id: Optional[str]
) -> Optional[Command]:
    for rule in COMMAND_RULES:
        match = rule.match(text)
        if match is None:
            continue
        command = rule.build(match, reference, timezone)
        log_with_context(
            logger, logging.DEBUG, f"Utterance matched command rule '{rule.name}'",
            request_id=request_id, stage="classify", rule=rule.name,
            command=command.command_type.value,
        )
        return command
    return None
