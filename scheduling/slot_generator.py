"""Slot-Generator: DaySchedules → flache, chronologische Liste von Slot-Kennungen.

Jeder Abend wird unabhängig expandiert, in der übergebenen Reihenfolge.
Über Abende hinweg wird NICHT neu sortiert.
"""

import logging
from datetime import timedelta
from typing import Iterable, Iterator

from models.day_schedule import DaySchedule
from models.timeslot import TimeSlot

logger = logging.getLogger(__name__)


def iter_schedule_slots(schedule: DaySchedule) -> Iterator[TimeSlot]:
    """Liefert die Stunden-Slots eines Abends, von start_hour bis exkl. end_hour.

    Same-day (end_hour > start_hour): bleibt auf dem nominellen Datum.
    Overnight (end_hour <= start_hour): endet erst am Folgetag bei end_hour.
    start_hour == end_hour zählt als overnight → volle 24 Stunden.
    """
    base = schedule.nominal_date
    current = TimeSlot(base, schedule.start_hour)
    next_day = base + timedelta(days=1)

    while True:
        yield current
        current = current.next()

        if schedule.is_overnight:
            if current.day == next_day and current.hour >= schedule.end_hour:
                break
        else:
            if current.hour >= schedule.end_hour:
                break


def generate_time_slots(day_schedules: Iterable[DaySchedule]) -> list[str]:
    """Expandiert alle Abende zu Slot-Kennungen ("YYYY-MM-DDTHH:00").

    Reihenfolge = Reihenfolge der Eingabeliste, innerhalb eines Abends chronologisch.
    Leere Eingabe → leere Liste.
    """
    slots: list[str] = []
    for schedule in day_schedules:
        before = len(slots)
        slots.extend(slot.slot_id for slot in iter_schedule_slots(schedule))
        logger.debug(
            f"Abend {schedule.date} ({schedule.start_hour}→{schedule.end_hour}): "
            f"{len(slots) - before} Slots"
        )
    return slots
