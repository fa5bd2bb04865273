"""Datenmodell für ein Pokerspiel mit seinen Terminen (Pydantic v2)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from models.day_schedule import DaySchedule


class Game(BaseModel):
    """Ein Spiel: Name, wählbare Limits und die geplanten Abende."""

    game_code: str                                   # "POKER-X7K2"
    name: str
    rate_options: list[str]                          # z.B. ["25-50", "50-100"]
    day_schedules: list[DaySchedule]
    is_visible: bool = True
    created_at: Optional[datetime] = None

    @field_validator("game_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode='after')
    def _check_schedules_and_rates(self):
        if not self.day_schedules:
            raise ValueError("Mindestens ein Abend (day_schedules) erforderlich.")
        dates = [s.date for s in self.day_schedules]
        dupes = sorted({d for d in dates if dates.count(d) > 1})
        if dupes:
            raise ValueError(f"Doppelte Termine: {', '.join(dupes)}")
        if not self.rate_options:
            raise ValueError("Mindestens eine Limit-Option (rate_options) erforderlich.")
        if len(set(self.rate_options)) != len(self.rate_options):
            raise ValueError("Limit-Optionen müssen eindeutig sein.")
        return self

    def time_slots(self) -> list[str]:
        """Alle Slot-Kennungen des Spiels (Reihenfolge der Termine)."""
        from scheduling.slot_generator import generate_time_slots
        return generate_time_slots(self.day_schedules)

    def grouped_slots(self) -> dict:
        """Slots gruppiert nach Abend (Night-Key → NightGroup)."""
        from scheduling.night_grouper import group_slots_by_night
        return group_slots_by_night(self.time_slots(), self.day_schedules)
