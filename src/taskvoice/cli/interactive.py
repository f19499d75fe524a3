#!/usr/bin/env python3
"""
Interactive CLI for the taskvoice parser

A REPL for trying utterances against the command classifier and the parse
pipeline. Tasks created during the session are kept in memory so that
edit/delete/complete/move references can be matched and free slots found.

Usage:
    python -m taskvoice.cli.interactive

    or

    taskvoice-repl --timezone Europe/London --verbose
"""
import json
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from taskvoice.commands import classify_command
from taskvoice.config import config
from taskvoice.data_types import CreateCommand, SearchCommand, TaskRef
from taskvoice.logging_config import generate_request_id, setup_logging
from taskvoice.matching import generate_suggestions, rank_tasks
from taskvoice.scheduling import (
    commitments_from_tasks,
    find_next_slot,
    group_tasks_by_day,
    suggest_default_reminders,
)
from taskvoice.temporal.timezones import get_timezone


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("🗓️  taskvoice - Interactive Mode")
    print("=" * 60)
    print("\nCommands:")
    print("  - Type a task or a command to classify it")
    print("  - 'slot <minutes>'  find the next free slot")
    print("  - 'agenda'          show session tasks by day")
    print("  - Type 'quit' or 'exit' to quit")
    print("\nExamples:")
    print("  - 'Team meeting next Monday 3pm high 90m'")
    print("  - 'delete dentist appointment'")
    print("  - 'move report to friday'")
    print("=" * 60)


def _now(timezone: Optional[str]) -> datetime:
    if timezone:
        return datetime.now(get_timezone(timezone))
    return datetime.now()


class Session:
    """In-memory task list for one REPL run."""

    def __init__(self, timezone: Optional[str] = None):
        self.timezone = timezone
        self.tasks: List[TaskRef] = []
        self._next_id = 1

    def add(self, command: CreateCommand) -> TaskRef:
        attributes = command.attributes
        task = TaskRef(
            id=self._next_id,
            title=attributes.title,
            start=attributes.start,
            duration_minutes=attributes.duration_minutes,
            category=attributes.category,
        )
        self._next_id += 1
        self.tasks.append(task)
        return task

    def handle(self, sentence: str, verbose: bool = False) -> Dict[str, Any]:
        """Classify one utterance and describe what it would do."""
        now = _now(self.timezone)
        request_id = generate_request_id()
        trace: Dict[str, Any] = {}
        command = classify_command(
            sentence, now, self.timezone, request_id=request_id, trace=trace)
        result: Dict[str, Any] = {"request_id": request_id, "command": command.to_dict()}

        if isinstance(command, CreateCommand):
            task = self.add(command)
            result["created_id"] = task.id
            result["reminders"] = [
                r.to_dict() for r in suggest_default_reminders(command.attributes)
            ]
        elif isinstance(command, SearchCommand):
            result["agenda"] = group_tasks_by_day(self.tasks, now).to_dict()
        else:
            result["matches"] = [m.to_dict() for m in rank_tasks(self.tasks, command.target)]

        if verbose:
            result["suggestions"] = [
                s.to_dict() for s in generate_suggestions(self.tasks, sentence, now)
            ]
            result["timings"] = trace.get("timings", {})
        return result

    def next_slot(self, minutes: int) -> Optional[datetime]:
        return find_next_slot(
            commitments_from_tasks(self.tasks),
            minutes,
            _now(self.timezone),
            window=config.work_window(),
            horizon_days=config.SCHEDULING_HORIZON_DAYS,
        )


def _print_json(payload: Any):
    print()
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def interactive_main(timezone: Optional[str] = None, verbose: bool = False):
    """
    Interactive mode for trying utterances.

    Args:
        timezone: IANA timezone for "now" and resolved instants
        verbose: Also print voice suggestions for each utterance
    """
    print_banner()
    session = Session(timezone=timezone)

    while True:
        try:
            sentence = input("\n💬 Say something: ").strip()

            if not sentence or sentence.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!")
                break

            lowered = sentence.lower()
            if lowered == "agenda":
                _print_json(group_tasks_by_day(session.tasks, _now(timezone)).to_dict())
                continue
            if lowered.startswith("slot"):
                parts = lowered.split()
                minutes = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else 30
                slot = session.next_slot(minutes)
                _print_json({"duration_minutes": minutes, "slot": slot.isoformat() if slot else None})
                continue

            _print_json(session.handle(sentence, verbose=verbose))

        except KeyboardInterrupt:
            print("\n\n👋 Goodbye!")
            break

        except ValueError as e:
            print(f"\n❌ Error: {e}")
            print("Please try again.\n")


def main():
    """Entry point for the interactive CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="taskvoice - Interactive Mode",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--timezone',
        default=config.DEFAULT_TIMEZONE,
        help='IANA timezone for resolved instants (default: DEFAULT_TIMEZONE or local time)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Also show voice suggestions for each utterance'
    )
    args = parser.parse_args()

    config.validate()
    setup_logging('taskvoice', config.LOG_LEVEL, config.LOG_FORMAT, config.LOG_FILE)

    try:
        interactive_main(timezone=args.timezone, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
