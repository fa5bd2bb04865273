"""Export-Modul: Terminal-Tabellen (rich) und Excel (openpyxl) für die Verfügbarkeit."""

from export.excel_export import AvailabilityExcelExporter

__all__ = ["AvailabilityExcelExporter"]
