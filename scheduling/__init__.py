from scheduling.slot_generator import generate_time_slots, iter_schedule_slots
from scheduling.night_grouper import (
    NIGHT_CUTOFF_HOUR,
    NightGroup,
    group_slots_by_night,
    night_label,
    resolve_night_key,
)
from scheduling.weekend import weekend_schedules

__all__ = [
    "generate_time_slots",
    "iter_schedule_slots",
    "NIGHT_CUTOFF_HOUR",
    "NightGroup",
    "group_slots_by_night",
    "night_label",
    "resolve_night_key",
    "weekend_schedules",
]
