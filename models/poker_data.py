"""PokerData: Vollständiger Datensatz (Spieler, Spiele, Antworten) als JSON-Datei."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from models.game import Game
from models.player import Player
from models.response import GameResponse


class PokerDataError(ValueError):
    """Unbekanntes Spiel oder unbekannter Spieler im Datensatz."""


class PokerData(BaseModel):
    """Vollständiger Datensatz: Spieler, Spiele und deren Antworten."""

    players: list[Player] = []
    games: list[Game] = []
    responses: list[GameResponse] = []
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    data_version: str = "1.0"

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über den Datensatz."""
        lines = [
            f"Spieler: {len(self.players)}",
            f"Spiele: {len(self.games)} "
            f"({sum(1 for g in self.games if g.is_visible)} sichtbar)",
            f"Antworten: {len(self.responses)}",
        ]
        for g in self.games:
            lines.append(
                f"  {g.game_code}  {g.name}: {len(g.day_schedules)} Abende, "
                f"{len(self.responses_for(g.game_code))} Antworten"
            )
        return "\n".join(lines)

    # ─── Zugriff ───

    def get_game(self, game_code: str) -> Game:
        code = game_code.upper()
        for g in self.games:
            if g.game_code == code:
                return g
        raise PokerDataError(f"Spiel nicht gefunden: {code}")

    def get_player(self, player_id: str) -> Player:
        for p in self.players:
            if p.id == player_id:
                return p
        raise PokerDataError(f"Spieler nicht gefunden: {player_id}")

    def responses_for(self, game_code: str) -> list[GameResponse]:
        code = game_code.upper()
        return [r for r in self.responses if r.game_code == code]

    def upsert_response(self, response: GameResponse) -> None:
        """Fügt eine Antwort hinzu. Ersetzt eine bestehende Antwort desselben Spielers."""
        self.get_game(response.game_code)
        self.get_player(response.player_id)
        self.responses = [
            r for r in self.responses
            if not (r.game_code == response.game_code
                    and r.player_id == response.player_id)
        ]
        self.responses.append(response)

    # ─── Persistenz ───

    def save_json(self, path: Path) -> None:
        """Speichert den kompletten Datensatz als JSON-Datei."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        now = datetime.now(timezone.utc)
        updated = self.model_copy(update={
            "modified_at": now,
            "created_at": self.created_at or now,
        })
        with open(path, "w", encoding="utf-8") as f:
            f.write(updated.model_dump_json(indent=2, by_alias=True))

    @classmethod
    def load_json(cls, path: Path) -> "PokerData":
        """Lädt einen Datensatz aus einer JSON-Datei."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"JSON-Datei nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return cls.model_validate_json(f.read())
