"""Standard-Termine für "dieses Wochenende" (Fr/Sa/So)."""

from datetime import date, timedelta

from models.day_schedule import DaySchedule
from models.timeslot import format_date_key

FRIDAY = 4  # date.weekday(): 0=Mo .. 6=So


def next_friday(today: date) -> date:
    """Nächster Freitag NACH today (ist today ein Freitag: eine Woche später)."""
    days_ahead = (FRIDAY - today.weekday()) % 7 or 7
    return today + timedelta(days=days_ahead)


def weekend_schedules(
    today: date,
    start_hour: int = 18,
    end_hour: int = 5,
    day_start_hour: int = 13,
) -> list[DaySchedule]:
    """Fr start_hour→end_hour, Sa day_start_hour→end_hour, So day_start_hour→0."""
    friday = next_friday(today)
    saturday = friday + timedelta(days=1)
    sunday = friday + timedelta(days=2)
    return [
        DaySchedule(date=format_date_key(friday), start_hour=start_hour, end_hour=end_hour),
        DaySchedule(date=format_date_key(saturday), start_hour=day_start_hour, end_hour=end_hour),
        DaySchedule(date=format_date_key(sunday), start_hour=day_start_hour, end_hour=0),
    ]
