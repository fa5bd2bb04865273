"""Excel-Export der Antworten eines Spiels (openpyxl)."""

from pathlib import Path

from models.game import Game
from models.player import Player
from models.response import GameResponse

from export.helpers import COLORS, STATUS_SYMBOLS, time_range_label, today_str
from export.tui_renderer import render_night_sections, render_rate_rows

# Symbol → Farbschlüssel für Zellen der Matrix
_SYMBOL_COLORS = {
    STATUS_SYMBOLS["can"]: COLORS["can"],
    STATUS_SYMBOLS["maybe"]: COLORS["maybe"],
    STATUS_SYMBOLS["unavailable"]: COLORS["unavailable"],
    STATUS_SYMBOLS["preferred"]: COLORS["preferred"],
}


class AvailabilityExcelExporter:
    """Exportiert Limits und Verfügbarkeit eines Spiels in eine Excel-Datei."""

    # Spaltenbreiten (Excel-Einheiten)
    COL_NAME_W = 20
    COL_SLOT_W = 10

    # Zeilenhöhen (Punkte)
    ROW_HEADER_H = 22

    def __init__(self, game: Game, responses: list[GameResponse], players: list[Player]):
        self.game      = game
        self.responses = [r for r in responses if r.game_code == game.game_code]
        self.players   = players

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> None:
        """Erstellt die Excel-Datei mit den Blättern "Rates" und "Availability"."""
        from openpyxl import Workbook
        wb = Workbook()
        wb.remove(wb.active)   # Leeres Standard-Sheet entfernen

        self._sheet_rates(wb)
        self._sheet_availability(wb)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)

    # ─── Style-Helpers ────────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _center_align(self, wrap: bool = True):
        from openpyxl.styles import Alignment
        return Alignment(wrap_text=wrap, horizontal="center", vertical="center")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color="BBBBBB")
        return Border(left=s, right=s, top=s, bottom=s)

    def _write_header(self, ws, row: int, headers: list[str]) -> None:
        from openpyxl.styles import Font
        fill = self._fill(COLORS["header"])
        border = self._thin_border()
        for col, text in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=text)
            cell.fill = fill
            cell.font = Font(bold=True, color="FFFFFF", size=10)
            cell.alignment = self._center_align(wrap=False)
            cell.border = border
        ws.row_dimensions[row].height = self.ROW_HEADER_H

    def _write_body_row(self, ws, row: int, cells: list[str], total: bool = False) -> None:
        from openpyxl.styles import Font
        border = self._thin_border()
        for col, text in enumerate(cells, 1):
            cell = ws.cell(row=row, column=col, value=text)
            cell.border = border
            if col == 1:
                cell.font = Font(bold=True)
                continue
            cell.alignment = self._center_align(wrap=False)
            if total:
                cell.fill = self._fill(COLORS["total"])
            elif text in _SYMBOL_COLORS:
                cell.fill = self._fill(_SYMBOL_COLORS[text])

    # ─── Blätter ──────────────────────────────────────────────────────────────

    def _sheet_rates(self, wb) -> None:
        """Limit-Präferenzen: eine Zeile pro Spieler, eine Spalte pro Limit."""
        from openpyxl.styles import Font
        from openpyxl.utils import get_column_letter

        ws = wb.create_sheet("Rates")
        ws.cell(row=1, column=1, value=f"{self.game.name} ({self.game.game_code})").font = \
            Font(bold=True, size=12)
        ws.cell(row=2, column=1, value=f"Stand: {today_str()}")

        self._write_header(ws, 4, ["Player"] + list(self.game.rate_options))
        row = 5
        for cells in render_rate_rows(self.game, self.responses, self.players):
            self._write_body_row(ws, row, cells)
            row += 1

        ws.column_dimensions["A"].width = self.COL_NAME_W
        for col in range(2, 2 + len(self.game.rate_options)):
            ws.column_dimensions[get_column_letter(col)].width = self.COL_SLOT_W

    def _sheet_availability(self, wb) -> None:
        """Verfügbarkeit: ein Block pro Abend mit verbundenem Titel."""
        from openpyxl.styles import Font
        from openpyxl.utils import get_column_letter

        ws = wb.create_sheet("Availability")
        schedules = {s.date: s for s in self.game.day_schedules}
        row = 1
        max_cols = 1

        for section in render_night_sections(self.game, self.responses, self.players):
            width = len(section["header"])
            max_cols = max(max_cols, width)

            title = section["label"]
            schedule = schedules.get(section["night_key"])
            if schedule is not None:
                title += f"  ({time_range_label(schedule)})"
            cell = ws.cell(row=row, column=1, value=title)
            cell.font = Font(bold=True, size=11)
            cell.fill = self._fill(COLORS["night"])
            if width > 1:
                ws.merge_cells(start_row=row, start_column=1,
                               end_row=row, end_column=width)
            row += 1

            self._write_header(ws, row, section["header"])
            row += 1

            body = section["rows"]
            for i, cells in enumerate(body):
                self._write_body_row(ws, row, cells, total=(i == len(body) - 1))
                row += 1
            row += 1   # Leerzeile zwischen Abenden

        ws.column_dimensions["A"].width = self.COL_NAME_W
        for col in range(2, max_cols + 1):
            ws.column_dimensions[get_column_letter(col)].width = self.COL_SLOT_W
