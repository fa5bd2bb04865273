"""Gemeinsame Formatierungs-Hilfsfunktionen für Terminal- und Excel-Ausgabe."""

from datetime import date

from models.day_schedule import DaySchedule
from models.timeslot import parse_date_key, parse_slot_key
from scheduling.night_grouper import MONTH_ABBR, WEEKDAY_NAMES

# ─── Farbpalette (RRGGBB, ohne #) ─────────────────────────────────────────────

COLORS: dict[str, str] = {
    "can":         "B3FFB3",
    "maybe":       "FFF2B3",
    "unavailable": "FFB3B3",
    "preferred":   "B3FFB3",
    "playable":    "FFF2B3",
    "wont_play":   "FFB3B3",
    "none":        "F5F5F5",
    "night":       "D4B3FF",
    "total":       "DDDDDD",
    "header":      "4472C4",
}

# Kurzsymbole für Matrix-Zellen
STATUS_SYMBOLS: dict[str, str] = {
    "can": "✓",
    "maybe": "?",
    "unavailable": "✗",
    "preferred": "★",
    "playable": "✓",
    "wont_play": "✗",
}


def today_str() -> str:
    """Gibt das heutige Datum als YYYY-MM-DD zurück."""
    return date.today().isoformat()


# ─── Stunden ──────────────────────────────────────────────────────────────────

def format_hour(hour: int) -> str:
    """0 → "12 AM", 12 → "12 PM", 18 → "6 PM"."""
    hour12 = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    ampm = "AM" if hour < 12 else "PM"
    return f"{hour12} {ampm}"


def hour_options() -> list[tuple[int, str]]:
    """Auswahlliste (Wert, Label) für alle 24 Stunden."""
    return [(h, format_hour(h)) for h in range(24)]


def format_time(slot_key: str) -> str:
    """Slot-Kennung → Uhrzeit, z.B. "2024-12-06T18:00" → "6:00 PM"."""
    slot = parse_slot_key(slot_key)
    hour12, ampm = format_hour(slot.hour).split()
    return f"{hour12}:00 {ampm}"


def format_date(date_key: str, short: bool = False) -> str:
    """"2024-12-06" → "Friday, Dec 6" (short=True: "Fri, Dec 6")."""
    d = parse_date_key(date_key)
    weekday = WEEKDAY_NAMES[d.weekday()]
    if short:
        weekday = weekday[:3]
    return f"{weekday}, {MONTH_ABBR[d.month - 1]} {d.day}"


def time_range_label(schedule: DaySchedule) -> str:
    """"6 PM → 5 AM (+1 day)" für Overnight-Abende, sonst "1 PM → 11 PM"."""
    label = f"{format_hour(schedule.start_hour)} → {format_hour(schedule.end_hour)}"
    if schedule.is_overnight:
        label += " (+1 day)"
    return label
