"""Antwort eines Spielers auf ein Spiel: Limit-Präferenzen + Verfügbarkeit."""

from enum import Enum

from pydantic import BaseModel, field_validator

from models.timeslot import SlotKeyError, TimeSlot


class RatePreference(str, Enum):
    PREFERRED = "preferred"
    PLAYABLE = "playable"
    WONT_PLAY = "wont_play"


class TimeSlotAvailability(str, Enum):
    CAN = "can"
    MAYBE = "maybe"
    UNAVAILABLE = "unavailable"


class GameResponse(BaseModel):
    """Eine Antwort pro (Spiel, Spieler). Slot-Schlüssel sind Slot-Kennungen."""

    game_code: str
    player_id: str
    rate_preferences: dict[str, RatePreference] = {}
    time_slots: dict[str, TimeSlotAvailability] = {}

    @field_validator("game_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.upper()

    @field_validator("time_slots")
    @classmethod
    def _check_slot_keys(cls, v: dict) -> dict:
        for key in v:
            try:
                TimeSlot.from_key(key)
            except SlotKeyError as e:
                raise ValueError(str(e)) from e
        return v

    @property
    def is_available_somewhere(self) -> bool:
        """True wenn mindestens ein Slot mit "can" markiert ist."""
        return any(s == TimeSlotAvailability.CAN for s in self.time_slots.values())
