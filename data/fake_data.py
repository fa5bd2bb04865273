"""Testdaten-Generator für den Pokerabend-Planer.

Erzeugt einen reproduzierbaren Datensatz: Spieler, ein Wochenend-Spiel
(Fr/Sa/So, siehe scheduling.weekend) und zufällige Antworten.

Bewusste Muster:
  1. Freitagnacht ist am beliebtesten (höhere "can"-Quote)
  2. Späte Stunden nach 2 Uhr werden häufiger als "maybe" markiert
  3. Ein Spieler antwortet gar nicht (Antwortquote < 100%)
"""

import random
from datetime import date
from typing import Optional

from config.schema import AppConfig
from models.game import Game
from models.player import Player
from models.poker_data import PokerData
from models.response import GameResponse, RatePreference, TimeSlotAvailability
from models.timeslot import parse_slot_key
from scheduling.weekend import weekend_schedules

# ─── Namens-Liste ─────────────────────────────────────────────────────────────

_NICKNAMES = [
    "Ace", "Bluff", "Chip", "Dealer", "Flush", "Gutshot", "Kicker",
    "Nuts", "River", "Shark", "Tilt", "Turbo", "Whale", "Fish",
]

_PASSCODE_CHARS = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


class FakeDataGenerator:
    """Erzeugt einen Beispiel-Datensatz aus der Konfiguration."""

    def __init__(self, config: AppConfig, seed: int = 42,
                 today: Optional[date] = None):
        self.config = config
        self.rng = random.Random(seed)
        self.today = today or date.today()

    def generate(self, num_players: int = 8) -> PokerData:
        players = self._generate_players(num_players)
        game = self._generate_game()
        responses = [
            self._generate_response(game, p)
            for p in players[:-1]   # letzter Spieler antwortet nicht
        ]
        return PokerData(players=players, games=[game], responses=responses)

    # ─── Einzelteile ───

    def _generate_players(self, n: int) -> list[Player]:
        names = self.rng.sample(_NICKNAMES, k=min(n, len(_NICKNAMES)))
        players = []
        for i, name in enumerate(names, 1):
            passcode = "".join(self.rng.choice(_PASSCODE_CHARS) for _ in range(6))
            players.append(Player(id=f"P{i:02d}", nickname=name, passcode=passcode))
        return players

    def _generate_game(self) -> Game:
        sd = self.config.schedule_defaults
        suffix = "".join(self.rng.choice(_PASSCODE_CHARS) for _ in range(4))
        return Game(
            game_code=f"POKER-{suffix}",
            name=f"{self.config.venue_name} Weekend",
            rate_options=list(self.config.default_rates),
            day_schedules=weekend_schedules(
                self.today,
                start_hour=sd.start_hour,
                end_hour=sd.end_hour,
                day_start_hour=sd.weekend_day_start_hour,
            ),
        )

    def _generate_response(self, game: Game, player: Player) -> GameResponse:
        rates = {
            rate: self.rng.choice(list(RatePreference))
            for rate in game.rate_options
        }
        friday_key = game.day_schedules[0].date

        slots: dict[str, TimeSlotAvailability] = {}
        for night_key, group in game.grouped_slots().items():
            can_rate = 0.7 if night_key == friday_key else 0.4
            for slot_key in group.slots:
                hour = parse_slot_key(slot_key).hour
                roll = self.rng.random()
                if 2 <= hour < 12:
                    status = (TimeSlotAvailability.MAYBE if roll < 0.5
                              else TimeSlotAvailability.UNAVAILABLE)
                elif roll < can_rate:
                    status = TimeSlotAvailability.CAN
                elif roll < can_rate + 0.15:
                    status = TimeSlotAvailability.MAYBE
                else:
                    status = TimeSlotAvailability.UNAVAILABLE
                slots[slot_key] = status

        return GameResponse(
            game_code=game.game_code,
            player_id=player.id,
            rate_preferences=rates,
            time_slots=slots,
        )
