"""Datenmodell für einen Spielabend-Termin (Pydantic v2)."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.timeslot import SlotKeyError, parse_date_key


class DaySchedule(BaseModel):
    """Ein geplanter Abend: nominelles Startdatum plus Start- und Endstunde.

    Ist end_hour <= start_hour, läuft der Abend über Mitternacht in den
    Folgetag ("overnight"). start_hour == end_hour bedeutet volle 24 Stunden.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str                                          # "2024-12-06" (lokal, ohne Zeitzone)
    start_hour: int = Field(alias="startHour", ge=0, le=23)
    end_hour: int = Field(alias="endHour", ge=0, le=23)

    @field_validator("date")
    @classmethod
    def _check_date(cls, v: str) -> str:
        try:
            parse_date_key(v)
        except SlotKeyError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def nominal_date(self) -> date:
        return parse_date_key(self.date)

    @property
    def is_overnight(self) -> bool:
        """True wenn der Abend über Mitternacht läuft (end_hour <= start_hour)."""
        return self.end_hour <= self.start_hour

    @property
    def hour_count(self) -> int:
        """Anzahl stündlicher Slots dieses Abends."""
        if self.is_overnight:
            return (24 - self.start_hour) + self.end_hour
        return self.end_hour - self.start_hour

    def to_wire(self) -> dict:
        """Gespeicherte Form mit camelCase-Schlüsseln."""
        return self.model_dump(by_alias=True)
