"""Auswertung der Antworten eines Spiels (anonym, nur Zählwerte).

Zählt pro Slot die "can"/"maybe"-Antworten und pro Limit die
"preferred"/"playable"-Stimmen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from models.response import RatePreference, TimeSlotAvailability
from models.timeslot import TimeSlot

if TYPE_CHECKING:
    from models.game import Game
    from models.response import GameResponse


@dataclass
class SlotCount:
    """Verfügbarkeit eines Slots."""

    can: int = 0
    maybe: int = 0

    def to_dict(self) -> dict:
        return {"can": self.can, "maybe": self.maybe}


@dataclass
class RateCount:
    """Stimmen für ein Limit."""

    preferred: int = 0
    playable: int = 0

    def to_dict(self) -> dict:
        return {"preferred": self.preferred, "playable": self.playable}


@dataclass
class GameSummary:
    """Zusammenfassung aller Antworten zu einem Spiel."""

    game_code: str
    total_responses: int = 0
    available_players: int = 0
    total_slots: int = 0
    slot_counts: dict[str, SlotCount] = field(default_factory=dict)
    rate_counts: dict[str, RateCount] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "game_code": self.game_code,
            "total_responses": self.total_responses,
            "available_players": self.available_players,
            "total_slots": self.total_slots,
            "slot_counts": {k: v.to_dict() for k, v in self.slot_counts.items()},
            "rate_counts": {k: v.to_dict() for k, v in self.rate_counts.items()},
        }


def aggregate_slot_counts(responses: Iterable[GameResponse]) -> dict[str, SlotCount]:
    """Slot → (can, maybe). "unavailable" legt den Eintrag mit 0 an."""
    counts: dict[str, SlotCount] = {}
    for response in responses:
        for slot, status in response.time_slots.items():
            entry = counts.setdefault(slot, SlotCount())
            if status == TimeSlotAvailability.CAN:
                entry.can += 1
            elif status == TimeSlotAvailability.MAYBE:
                entry.maybe += 1
    return counts


def aggregate_rate_counts(responses: Iterable[GameResponse]) -> dict[str, RateCount]:
    """Limit → (preferred, playable). "wont_play" legt den Eintrag mit 0 an."""
    counts: dict[str, RateCount] = {}
    for response in responses:
        for rate, pref in response.rate_preferences.items():
            entry = counts.setdefault(rate, RateCount())
            if pref == RatePreference.PREFERRED:
                entry.preferred += 1
            elif pref == RatePreference.PLAYABLE:
                entry.playable += 1
    return counts


def summarize_game(game: Game, responses: Iterable[GameResponse]) -> GameSummary:
    """Wertet alle Antworten zu game aus. Antworten anderer Spiele werden ignoriert."""
    own = [r for r in responses if r.game_code == game.game_code]
    return GameSummary(
        game_code=game.game_code,
        total_responses=len(own),
        available_players=sum(1 for r in own if r.is_available_somewhere),
        total_slots=len(game.time_slots()),
        slot_counts=aggregate_slot_counts(own),
        rate_counts=aggregate_rate_counts(own),
    )


def best_slots(summary: GameSummary, limit: int = 5) -> list[tuple[str, SlotCount]]:
    """Beste Slots: meiste "can", dann meiste "maybe", dann chronologisch."""
    ranked = sorted(
        summary.slot_counts.items(),
        key=lambda item: (-item[1].can, -item[1].maybe, TimeSlot.from_key(item[0])),
    )
    return ranked[:limit]
