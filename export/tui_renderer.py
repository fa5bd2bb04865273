"""Gemeinsamer Renderer für die Verfügbarkeits-Matrix.

Wird von der CLI (Rich) und vom Excel-Export verwendet.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.table import Table
    from models.game import Game
    from models.player import Player
    from models.response import GameResponse


def _player_name(player_id: str, players: list["Player"]) -> str:
    for p in players:
        if p.id == player_id:
            return p.nickname
    return player_id


def render_night_sections(
    game: "Game",
    responses: list["GameResponse"],
    players: list["Player"],
) -> list[dict]:
    """Gibt pro Abend einen Abschnitt der Verfügbarkeits-Matrix zurück.

    Jeder Abschnitt: {"night_key", "label", "slots", "header", "rows"}.
    header: ["Player", "6:00 PM", ...]; rows: eine Zeile pro Antwort,
    zuletzt eine Summenzeile ["Total", "2/1", ...] (can/maybe).
    """
    from export.helpers import STATUS_SYMBOLS, format_time

    own = [r for r in responses if r.game_code == game.game_code]
    sections: list[dict] = []

    for night_key, group in game.grouped_slots().items():
        header = ["Player"] + [format_time(s) for s in group.slots]
        rows: list[list[str]] = []
        for r in own:
            cells = [_player_name(r.player_id, players)]
            for slot in group.slots:
                status = r.time_slots.get(slot)
                cells.append(STATUS_SYMBOLS[status.value] if status else "—")
            rows.append(cells)

        totals = ["Total"]
        for slot in group.slots:
            can = sum(1 for r in own if r.time_slots.get(slot) == "can")
            maybe = sum(1 for r in own if r.time_slots.get(slot) == "maybe")
            totals.append(f"{can}/{maybe}")
        rows.append(totals)

        sections.append({
            "night_key": night_key,
            "label": group.label,
            "slots": list(group.slots),
            "header": header,
            "rows": rows,
        })
    return sections


def render_rate_rows(
    game: "Game",
    responses: list["GameResponse"],
    players: list["Player"],
) -> list[list[str]]:
    """Zeilen der Limit-Matrix: [Spieler, Symbol je Limit]."""
    from export.helpers import STATUS_SYMBOLS

    rows: list[list[str]] = []
    for r in responses:
        if r.game_code != game.game_code:
            continue
        cells = [_player_name(r.player_id, players)]
        for rate in game.rate_options:
            pref = r.rate_preferences.get(rate)
            cells.append(STATUS_SYMBOLS[pref.value] if pref else "—")
        rows.append(cells)
    return rows


def build_night_tables(
    game: "Game",
    responses: list["GameResponse"],
    players: list["Player"],
) -> list["Table"]:
    """Rich-Tabellen, eine pro Abend."""
    from rich.table import Table
    from rich import box

    tables = []
    for section in render_night_sections(game, responses, players):
        table = Table(title=section["label"], box=box.ROUNDED)
        for i, col in enumerate(section["header"]):
            table.add_column(col, style="bold" if i == 0 else None,
                             justify="left" if i == 0 else "center")
        for row in section["rows"]:
            table.add_row(*row)
        tables.append(table)
    return tables


def build_rate_table(
    game: "Game",
    responses: list["GameResponse"],
    players: list["Player"],
) -> "Table":
    from rich.table import Table
    from rich import box

    table = Table(title="Limits", box=box.ROUNDED)
    table.add_column("Player", style="bold")
    for rate in game.rate_options:
        table.add_column(rate, justify="center")
    for row in render_rate_rows(game, responses, players):
        table.add_row(*row)
    return table
