"""Bucket a task snapshot into today / tomorrow / later."""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List

from taskvoice.data_types import TaskRef
from taskvoice.temporal.timezones import localize_datetime, split_reference


@dataclass
class Agenda:
    today: List[TaskRef] = field(default_factory=list)
    tomorrow: List[TaskRef] = field(default_factory=list)
    later: List[TaskRef] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        def ids(tasks: List[TaskRef]) -> List[Any]:
            return [task.id for task in tasks]
        return {"today": ids(self.today), "tomorrow": ids(self.tomorrow), "later": ids(self.later)}


def _agenda_order(task: TaskRef):
    # Unscheduled first, then by start
    if task.start is None:
        return (0, 0.0)
    return (1, task.start.timestamp())


def group_tasks_by_day(tasks: Iterable[TaskRef], reference: datetime) -> Agenda:
    """
    Group tasks by the day they start on, relative to reference.

    Unscheduled tasks belong to today. Tasks before today fall into later,
    alongside everything from the day after tomorrow on.
    """
    wall_clock, tz = split_reference(reference)
    midnight = wall_clock.replace(hour=0, minute=0, second=0, microsecond=0)
    today_start = localize_datetime(midnight, tz)
    tomorrow_start = localize_datetime(midnight + timedelta(days=1), tz)
    later_start = localize_datetime(midnight + timedelta(days=2), tz)

    agenda = Agenda()
    for task in tasks:
        if task.start is None or today_start <= task.start < tomorrow_start:
            agenda.today.append(task)
        elif tomorrow_start <= task.start < later_start:
            agenda.tomorrow.append(task)
        else:
            agenda.later.append(task)

    agenda.today.sort(key=_agenda_order)
    agenda.tomorrow.sort(key=_agenda_order)
    agenda.later.sort(key=_agenda_order)
    return agenda
