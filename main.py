"""Pokerabend-Planer — Haupt-CLI.

Verwendung:
  python main.py config init                      Default-Konfiguration anlegen
  python main.py config show                      Konfiguration anzeigen
  python main.py hours                            Gültige Stundenwerte
  python main.py slots --day 2024-12-06:18-5      Slot-Kennungen erzeugen
  python main.py nights --day 2024-12-06:18-5     Slots nach Abend gruppieren
  python main.py weekend                          Termine für dieses Wochenende
  python main.py generate                         Beispiel-Datensatz erzeugen
  python main.py summary <CODE>                   Antworten auswerten
  python main.py matrix <CODE>                    Verfügbarkeits-Matrix anzeigen
  python main.py export <CODE>                    Excel-Export
"""

import logging
import re
import sys
from datetime import date
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()
logger = logging.getLogger(__name__)

_DAY_OPTION = re.compile(r"(\d{4}-\d{2}-\d{2}):(\d{1,2})-(\d{1,2})", re.ASCII)


def _load_config():
    """Lädt die Konfiguration oder nutzt die Defaults (ohne Datei)."""
    from config.manager import ConfigManager
    try:
        return ConfigManager().load_or_default()
    except ValueError as e:
        # Fehlertexte von YAML/Pydantic enthalten eckige Klammern
        console.print(str(e), style="red", markup=False)
        sys.exit(1)


def _parse_day_option(value: str):
    """"2024-12-06:18-5" → DaySchedule(date, start_hour=18, end_hour=5)."""
    from models.day_schedule import DaySchedule
    m = _DAY_OPTION.fullmatch(value)
    if m is None:
        raise click.BadParameter(
            f"{value!r}: erwartet DATUM:START-ENDE, z.B. 2024-12-06:18-5"
        )
    try:
        return DaySchedule(date=m.group(1), start_hour=int(m.group(2)),
                           end_hour=int(m.group(3)))
    except ValidationError as e:
        raise click.BadParameter(f"{value!r}: {e.errors()[0]['msg']}") from e


def _schedules_from_options(days: tuple[str, ...]):
    if not days:
        raise click.UsageError("Mindestens ein --day angeben.")
    return [_parse_day_option(d) for d in days]


def _load_data_or_abort(data_path: str | None):
    from models.poker_data import PokerData
    config = _load_config()
    p = Path(data_path or config.storage.data_path)
    if not p.exists():
        console.print(
            f"[red]Keine Datendatei gefunden: {p}[/red]\n"
            "Verwenden Sie [bold]python main.py generate[/bold]."
        )
        sys.exit(1)
    logger.info(f"Lade Datensatz: {p}")
    try:
        return PokerData.load_json(p)
    except ValidationError as e:
        console.print(f"[red bold]Datensatz ungültig:[/red bold] {p}\n{e}")
        sys.exit(1)


def _game_or_abort(data, game_code: str):
    from models.poker_data import PokerDataError
    try:
        return data.get_game(game_code)
    except PokerDataError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Default-Konfiguration als YAML an."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_app_config())


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    from export.helpers import format_hour
    config = _load_config()

    console.print(Panel(
        f"[bold]{config.venue_name}[/bold]  |  Limits: {', '.join(config.default_rates)}",
        title="Konfiguration",
        border_style="cyan",
    ))
    sd = config.schedule_defaults
    table = Table(title="Termine", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("Freitag Start", format_hour(sd.start_hour))
    table.add_row("Ende", format_hour(sd.end_hour))
    table.add_row("Sa/So Start", format_hour(sd.weekend_day_start_hour))
    table.add_row("Datensatz", config.storage.data_path)
    table.add_row("Log-Level", config.logging.level)
    console.print(table)


# ─── SLOTS / NIGHTS ───────────────────────────────────────────────────────────

@click.command("hours")
def cmd_hours():
    """Listet die gültigen Stundenwerte für START und ENDE von --day."""
    from export.helpers import hour_options

    table = Table(title="Stunden", box=box.ROUNDED)
    table.add_column("Wert", justify="right", style="bold")
    table.add_column("Anzeige")
    for value, label in hour_options():
        table.add_row(str(value), label)
    console.print(table)


@click.command("slots")
@click.option("--day", "days", multiple=True,
              help="Abend als DATUM:START-ENDE mit Stunden 0-23 "
                   "(siehe 'hours'; mehrfach möglich).")
def cmd_slots(days: tuple[str, ...]):
    """Gibt alle Slot-Kennungen der Abende aus (Reihenfolge wie angegeben)."""
    from scheduling.slot_generator import generate_time_slots
    schedules = _schedules_from_options(days)
    for slot in generate_time_slots(schedules):
        click.echo(slot)


@click.command("nights")
@click.option("--day", "days", multiple=True,
              help="Abend als DATUM:START-ENDE mit Stunden 0-23 "
                   "(siehe 'hours'; mehrfach möglich).")
def cmd_nights(days: tuple[str, ...]):
    """Gruppiert die Slots der Abende nach Spielabend."""
    from scheduling import generate_time_slots, group_slots_by_night
    from export.helpers import format_time

    schedules = _schedules_from_options(days)
    grouped = group_slots_by_night(generate_time_slots(schedules), schedules)

    table = Table(title="Abende", box=box.ROUNDED)
    table.add_column("Night-Key", style="bold")
    table.add_column("Abend")
    table.add_column("Slots", justify="right")
    table.add_column("Von – Bis")
    for night_key, group in grouped.items():
        span = f"{format_time(group.slots[0])} – {format_time(group.slots[-1])}"
        table.add_row(night_key, group.label, str(len(group.slots)), span)
    console.print(table)


@click.command("weekend")
@click.option("--today", "today_str", default=None,
              help="Bezugsdatum YYYY-MM-DD (Standard: heute).")
def cmd_weekend(today_str: str | None):
    """Zeigt die Standard-Termine für das nächste Wochenende."""
    from models.timeslot import SlotKeyError, parse_date_key
    from scheduling.weekend import weekend_schedules
    from export.helpers import format_date, time_range_label

    config = _load_config()
    try:
        today = parse_date_key(today_str) if today_str else date.today()
    except SlotKeyError as e:
        raise click.BadParameter(str(e), param_hint="--today") from e

    sd = config.schedule_defaults
    schedules = weekend_schedules(today, start_hour=sd.start_hour,
                                  end_hour=sd.end_hour,
                                  day_start_hour=sd.weekend_day_start_hour)
    table = Table(title="Wochenende", box=box.ROUNDED)
    table.add_column("Datum", style="bold")
    table.add_column("Tag")
    table.add_column("Zeit")
    table.add_column("Slots", justify="right")
    for s in schedules:
        table.add_row(s.date, format_date(s.date, short=True),
                      time_range_label(s), str(s.hour_count))
    console.print(table)


# ─── GENERATE ─────────────────────────────────────────────────────────────────

@click.command("generate")
@click.option("--seed", default=42, help="Zufalls-Seed für reproduzierbare Daten.")
@click.option("--players", "num_players", default=8, help="Anzahl Spieler.")
@click.option("--data", "data_path", default=None, help="Pfad für den JSON-Datensatz.")
def cmd_generate(seed: int, num_players: int, data_path: str | None):
    """Erzeugt einen Beispiel-Datensatz (Spieler, Wochenend-Spiel, Antworten)."""
    from data.fake_data import FakeDataGenerator

    config = _load_config()
    data = FakeDataGenerator(config, seed=seed).generate(num_players=num_players)
    out_path = Path(data_path or config.storage.data_path)
    data.save_json(out_path)

    console.print(f"[dim]{data.summary()}[/dim]")
    console.print(f"[green]✓[/green] Datensatz gespeichert: {out_path}")


# ─── SUMMARY / MATRIX ─────────────────────────────────────────────────────────

@click.command("summary")
@click.argument("game_code")
@click.option("--data", "data_path", default=None, help="Pfad zum JSON-Datensatz.")
@click.option("--top", default=5, help="Anzahl der besten Slots.")
def cmd_summary(game_code: str, data_path: str | None, top: int):
    """Wertet die Antworten eines Spiels aus (anonyme Zählwerte)."""
    from analysis.aggregation import best_slots, summarize_game
    from export.helpers import format_date, format_time
    from models.timeslot import parse_slot_key

    data = _load_data_or_abort(data_path)
    game = _game_or_abort(data, game_code)
    summary = summarize_game(game, data.responses)

    console.print(Panel(
        f"[bold]{game.name}[/bold]  |  {game.game_code}\n"
        f"Antworten: {summary.total_responses}  |  "
        f"mit Zusage: {summary.available_players}  |  "
        f"Slots: {summary.total_slots}",
        title="Auswertung",
        border_style="cyan",
    ))

    rates = Table(title="Limits", box=box.ROUNDED)
    rates.add_column("Limit", style="bold")
    rates.add_column("Preferred", justify="right")
    rates.add_column("Playable", justify="right")
    for rate in game.rate_options:
        c = summary.rate_counts.get(rate)
        rates.add_row(rate, str(c.preferred if c else 0), str(c.playable if c else 0))
    console.print(rates)

    best = Table(title=f"Top {top} Slots", box=box.ROUNDED)
    best.add_column("Slot", style="bold")
    best.add_column("Zeit")
    best.add_column("Can", justify="right")
    best.add_column("Maybe", justify="right")
    for slot, count in best_slots(summary, limit=top):
        day = parse_slot_key(slot).date_key
        best.add_row(slot, f"{format_date(day, short=True)} {format_time(slot)}",
                     str(count.can), str(count.maybe))
    console.print(best)


@click.command("matrix")
@click.argument("game_code")
@click.option("--data", "data_path", default=None, help="Pfad zum JSON-Datensatz.")
def cmd_matrix(game_code: str, data_path: str | None):
    """Zeigt Limits und Verfügbarkeit pro Spieler und Abend."""
    from export.tui_renderer import build_night_tables, build_rate_table

    data = _load_data_or_abort(data_path)
    game = _game_or_abort(data, game_code)
    console.print(build_rate_table(game, data.responses, data.players))
    for table in build_night_tables(game, data.responses, data.players):
        console.print(table)


# ─── EXPORT ───────────────────────────────────────────────────────────────────

@click.command("export")
@click.argument("game_code")
@click.option("--data", "data_path", default=None, help="Pfad zum JSON-Datensatz.")
@click.option("--output", "-o", default=None, help="Ausgabepfad der Excel-Datei.")
def cmd_export(game_code: str, data_path: str | None, output: str | None):
    """Exportiert Limits und Verfügbarkeit eines Spiels als Excel-Datei."""
    from export.excel_export import AvailabilityExcelExporter

    config = _load_config()
    data = _load_data_or_abort(data_path)
    game = _game_or_abort(data, game_code)
    out_path = Path(output or Path(config.storage.export_dir) / f"{game.game_code}.xlsx")

    AvailabilityExcelExporter(game, data.responses, data.players).export(out_path)
    console.print(f"[green]✓[/green] Excel gespeichert: {out_path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Log-Level (Standard: aus der Konfiguration).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Pokerabend-Planer: Termine, Slots und Verfügbarkeit.

    Starten Sie mit: python main.py weekend
    """
    # 'config' muss auch bei defekter Konfigurationsdatei laufen (init --force)
    if log_level:
        level = log_level
    elif ctx.invoked_subcommand == "config":
        level = "WARNING"
    else:
        level = _load_config().logging.level
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_hours)
cli.add_command(cmd_slots)
cli.add_command(cmd_nights)
cli.add_command(cmd_weekend)
cli.add_command(cmd_generate)
cli.add_command(cmd_summary)
cli.add_command(cmd_matrix)
cli.add_command(cmd_export)


if __name__ == "__main__":
    main()
