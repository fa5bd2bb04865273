"""Standardwerte der Konfiguration."""

from config.schema import AppConfig, LoggingConfig, ScheduleDefaults, StorageConfig

# Limits, die ein neues Spiel vorschlägt
DEFAULT_RATES: list[str] = ["25-50", "50-100", "100-200"]

# Typischer Pokerabend: 18 Uhr bis 5 Uhr morgens
DEFAULT_START_HOUR = 18
DEFAULT_END_HOUR = 5
DEFAULT_WEEKEND_DAY_START_HOUR = 13


def default_schedule_defaults() -> ScheduleDefaults:
    return ScheduleDefaults(
        start_hour=DEFAULT_START_HOUR,
        end_hour=DEFAULT_END_HOUR,
        weekend_day_start_hour=DEFAULT_WEEKEND_DAY_START_HOUR,
    )


def default_app_config() -> AppConfig:
    """Komplette Default-Konfiguration."""
    return AppConfig(
        venue_name="Home Game",
        default_rates=list(DEFAULT_RATES),
        schedule_defaults=default_schedule_defaults(),
        storage=StorageConfig(),
        logging=LoggingConfig(),
    )
