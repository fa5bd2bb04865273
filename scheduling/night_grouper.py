"""Night-Grouper: ordnet Slot-Kennungen ihrem logischen Spielabend zu.

Ein Slot um 1 Uhr am Samstag gehört zu "Freitagnacht", wenn am Freitag ein
Overnight-Abend geplant ist, der um diese Stunde noch läuft. Alle anderen
Slots bleiben auf ihrem eigenen Kalenderdatum.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Mapping

from models.day_schedule import DaySchedule
from models.timeslot import TimeSlot, format_date_key, parse_date_key

logger = logging.getLogger(__name__)

# Slots vor dieser Stunde können zum Overnight-Abend des Vortags gehören
NIGHT_CUTOFF_HOUR = 12

# Feste en-US-Namen, unabhängig von der Locale des Hosts
WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass
class NightGroup:
    """Alle Slots eines logischen Abends plus Anzeige-Label."""

    label: str
    slots: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"label": self.label, "slots": list(self.slots)}


def night_label(date_key: str) -> str:
    """Anzeige-Label, z.B. "Friday, Dec 6".

    Das Datum wird als lokaler Mittag interpretiert (keine DST-Mehrdeutigkeit).
    """
    d = parse_date_key(date_key)
    noon = datetime(d.year, d.month, d.day, 12)
    return f"{WEEKDAY_NAMES[noon.weekday()]}, {MONTH_ABBR[noon.month - 1]} {noon.day}"


def build_schedule_map(day_schedules: Iterable[DaySchedule]) -> dict[str, DaySchedule]:
    """Datum → DaySchedule. Bei doppeltem Datum gewinnt der spätere Eintrag."""
    return {s.date: s for s in day_schedules}


def resolve_night_key(slot: TimeSlot, schedule_map: Mapping[str, DaySchedule]) -> str:
    """Bestimmt den Night-Key (nominelles Datum des Abends) für einen Slot."""
    night_key = slot.date_key
    if slot.hour < NIGHT_CUTOFF_HOUR:
        prev_key = format_date_key(slot.day - timedelta(days=1))
        prev = schedule_map.get(prev_key)
        if prev is not None and prev.is_overnight and slot.hour < prev.end_hour:
            night_key = prev_key
    return night_key


def group_slots_by_night(
    slots: Iterable[str], day_schedules: Iterable[DaySchedule]
) -> dict[str, NightGroup]:
    """Partitioniert Slots nach Abend.

    Rückgabe in Reihenfolge des ersten Auftretens jedes Night-Keys (dict-
    Einfügereihenfolge). Innerhalb einer Gruppe chronologisch sortiert.
    Ungültige Slot-Kennungen → SlotKeyError.
    """
    schedule_map = build_schedule_map(day_schedules)
    parsed: dict[str, list[TimeSlot]] = {}

    for key in slots:
        slot = TimeSlot.from_key(key)
        night_key = resolve_night_key(slot, schedule_map)
        if night_key != slot.date_key:
            logger.debug(f"Slot {key} → Abend {night_key}")
        parsed.setdefault(night_key, []).append(slot)

    grouped: dict[str, NightGroup] = {}
    for night_key, night_slots in parsed.items():
        grouped[night_key] = NightGroup(
            label=night_label(night_key),
            slots=[s.slot_id for s in sorted(night_slots)],
        )
    return grouped
