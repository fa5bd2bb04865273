from pydantic import BaseModel, Field, model_validator
from typing import Literal


# ─── TERMIN-DEFAULTS ───

class ScheduleDefaults(BaseModel):
    """Vorgaben für neue Abende (Wochenend-Schnellauswahl)."""
    # Beginn am Freitag (lokale Stunde 0-23)
    start_hour: int = Field(18, ge=0, le=23,
        description="Startstunde Freitagabend")
    # Ende aller Abende; <= Startstunde bedeutet "bis in den Folgetag"
    end_hour: int = Field(5, ge=0, le=23,
        description="Endstunde (Folgetag wenn <= Startstunde)")
    # Beginn am Samstag und Sonntag (Tagesspiel)
    weekend_day_start_hour: int = Field(13, ge=0, le=23,
        description="Startstunde Samstag/Sonntag")


# ─── SPEICHER ───

class StorageConfig(BaseModel):
    """Ablage des Datensatzes."""
    # Pfad zur JSON-Datei mit Spielern, Spielen und Antworten
    data_path: str = Field("output/poker_data.json",
        description="JSON-Datensatz")
    # Standard-Pfad für den Excel-Export
    export_dir: str = Field("output",
        description="Verzeichnis für Excel-Exporte")


# ─── LOGGING ───

class LoggingConfig(BaseModel):
    """Log-Ausgabe der CLI."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING",
        description="Log-Level")


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration der Pokerrunde."""
    # Name der Runde / des Spielorts
    venue_name: str = Field("Home Game",
        description="Name der Runde")
    # Standard-Limits für neue Spiele
    default_rates: list[str] = Field(
        default=["25-50", "50-100", "100-200"],
        description="Standard-Limits für neue Spiele")
    # Vorgaben für Termine
    schedule_defaults: ScheduleDefaults = Field(default_factory=ScheduleDefaults)
    # Datensatz-Ablage
    storage: StorageConfig = Field(default_factory=StorageConfig)
    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode='after')
    def validate_rates(self):
        """Limits müssen vorhanden und eindeutig sein."""
        if not self.default_rates:
            raise ValueError("default_rates darf nicht leer sein")
        if len(set(self.default_rates)) != len(self.default_rates):
            raise ValueError("default_rates enthält Duplikate")
        return self
