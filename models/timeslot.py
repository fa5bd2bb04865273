"""Datenmodell für einen stündlichen Zeitslot (Slot-Kennung "YYYY-MM-DDTHH:00").

Alle Slots sind lokale Wanduhr-Zeiten ohne Zeitzone (naive date/datetime).
Die Kennung ist der stabile Schlüssel für gespeicherte Antworten.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

# Strenges Format (fullmatch, nur ASCII-Ziffern): Minute immer 00
SLOT_KEY_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):00", re.ASCII)
DATE_KEY_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class SlotKeyError(ValueError):
    """Ungültige Slot- oder Datums-Kennung."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Ungültige Kennung {value!r}: {reason}")


def parse_date_key(value: str) -> date:
    """Parst "YYYY-MM-DD" zu einem date. Wirft SlotKeyError bei Fehlern."""
    if not isinstance(value, str):
        raise SlotKeyError(value, "kein String")
    m = DATE_KEY_PATTERN.fullmatch(value)
    if m is None:
        raise SlotKeyError(value, "erwartet Format YYYY-MM-DD")
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise SlotKeyError(value, str(e)) from e


def format_date_key(d: date) -> str:
    """Formatiert ein date als "YYYY-MM-DD"."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


@dataclass(frozen=True, order=True)
class TimeSlot:
    """Eine Stunde an einem lokalen Kalendertag.

    Immutable (frozen=True) damit es als Dict-Key / Set-Element nutzbar ist.
    order=True: Vergleich über (day, hour) entspricht der Chronologie.
    """

    # Kalendertag (lokal, ohne Zeitzone)
    day: date
    # Stunde 0-23
    hour: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise SlotKeyError(self.hour, "Stunde muss zwischen 0 und 23 liegen")

    @classmethod
    def from_key(cls, key: str) -> "TimeSlot":
        """Parst eine Slot-Kennung "YYYY-MM-DDTHH:00"."""
        if not isinstance(key, str):
            raise SlotKeyError(key, "kein String")
        m = SLOT_KEY_PATTERN.fullmatch(key)
        if m is None:
            raise SlotKeyError(key, "erwartet Format YYYY-MM-DDTHH:00")
        year, month, day, hour = (int(g) for g in m.groups())
        if hour > 23:
            raise SlotKeyError(key, "Stunde muss zwischen 0 und 23 liegen")
        try:
            day_ = date(year, month, day)
        except ValueError as e:
            raise SlotKeyError(key, str(e)) from e
        return cls(day_, hour)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimeSlot":
        return cls(dt.date(), dt.hour)

    @property
    def slot_id(self) -> str:
        """Eindeutiger String-Bezeichner (z.B. "2024-12-06T18:00")."""
        return f"{format_date_key(self.day)}T{self.hour:02d}:00"

    @property
    def date_key(self) -> str:
        return format_date_key(self.day)

    def to_datetime(self) -> datetime:
        """Naiver lokaler Zeitpunkt (keine Zeitzone, keine DST-Verschiebung)."""
        return datetime(self.day.year, self.day.month, self.day.day, self.hour)

    def next(self) -> "TimeSlot":
        """Folgende Stunde; nach 23 Uhr beginnt der nächste Kalendertag."""
        if self.hour == 23:
            return TimeSlot(self.day + timedelta(days=1), 0)
        return TimeSlot(self.day, self.hour + 1)

    def __repr__(self) -> str:
        return f"TimeSlot({self.slot_id})"

    def __str__(self) -> str:
        return self.slot_id


def parse_slot_key(key: str) -> TimeSlot:
    """Kurzform für TimeSlot.from_key."""
    return TimeSlot.from_key(key)


def format_slot_key(value) -> str:
    """Formatiert TimeSlot oder datetime als Slot-Kennung."""
    if isinstance(value, datetime):
        value = TimeSlot.from_datetime(value)
    return value.slot_id
