"""Tests für die Slot-Engine: Slot-Kennungen, Generator und Night-Grouper."""

from datetime import date, datetime

import pytest

from models.day_schedule import DaySchedule
from models.timeslot import (
    SlotKeyError,
    TimeSlot,
    format_slot_key,
    parse_date_key,
    parse_slot_key,
)
from scheduling import (
    generate_time_slots,
    group_slots_by_night,
    night_label,
    resolve_night_key,
    weekend_schedules,
)
from scheduling.night_grouper import build_schedule_map


def _sched(d: str, start: int, end: int) -> DaySchedule:
    return DaySchedule(date=d, start_hour=start, end_hour=end)


# ─── SLOT-KENNUNGEN ───────────────────────────────────────────────────────────

class TestSlotKey:
    def test_parse_and_format_identical(self):
        """Parsen und erneutes Formatieren liefert exakt denselben String."""
        for key in ["2024-12-06T18:00", "2024-12-07T00:00", "2025-01-01T09:00"]:
            assert format_slot_key(parse_slot_key(key)) == key

    def test_generated_slots_roundtrip(self):
        """Alle erzeugten Kennungen sind formatstabil."""
        slots = generate_time_slots([_sched("2024-02-28", 20, 3)])
        assert [parse_slot_key(s).slot_id for s in slots] == slots

    def test_zero_padding(self):
        """Monat, Tag und Stunde sind zweistellig."""
        slot = TimeSlot(date(2024, 3, 5), 7)
        assert slot.slot_id == "2024-03-05T07:00"

    def test_format_from_datetime(self):
        assert format_slot_key(datetime(2024, 12, 6, 23, 0)) == "2024-12-06T23:00"

    def test_ordering_is_chronological(self):
        """23 Uhr am Vortag liegt vor 0 Uhr am Folgetag."""
        late = parse_slot_key("2024-12-07T23:00")
        early = parse_slot_key("2024-12-08T01:00")
        assert late < early
        assert sorted([early, late]) == [late, early]

    def test_next_wraps_midnight(self):
        slot = TimeSlot(date(2024, 12, 31), 23).next()
        assert slot.slot_id == "2025-01-01T00:00"

    @pytest.mark.parametrize("bad", [
        "2024-12-06 18:00",
        "2024-12-06T18:30",
        "2024-12-6T18:00",
        "2024-12-06T24:00",
        "2024-02-30T10:00",
        "2024-12-06",
        "",
        None,
    ])
    def test_malformed_raises(self, bad):
        """Ungültige Kennungen → SlotKeyError mit dem Wert in der Meldung."""
        with pytest.raises(SlotKeyError) as exc:
            parse_slot_key(bad)
        assert exc.value.value == bad

    def test_slot_key_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_slot_key("garbage")

    def test_parse_date_key(self):
        assert parse_date_key("2024-12-06") == date(2024, 12, 6)
        with pytest.raises(SlotKeyError):
            parse_date_key("2024-13-01")

    def test_invalid_hour_rejected(self):
        with pytest.raises(SlotKeyError):
            TimeSlot(date(2024, 12, 6), 24)


# ─── SLOT-GENERATOR ───────────────────────────────────────────────────────────

class TestGenerateTimeSlots:
    def test_overnight_scenario(self):
        """Fr 18 Uhr bis Sa 5 Uhr → 6 Slots am Freitag, 5 am Samstag."""
        slots = generate_time_slots([_sched("2024-12-06", 18, 5)])
        assert len(slots) == 11
        assert slots[:6] == [f"2024-12-06T{h:02d}:00" for h in range(18, 24)]
        assert slots[6:] == [f"2024-12-07T{h:02d}:00" for h in range(0, 5)]

    @pytest.mark.parametrize("start,end", [(13, 23), (0, 1), (9, 17), (22, 23)])
    def test_same_day_count_and_date(self, start, end):
        """Same-day: end - start Slots, alle am nominellen Datum."""
        slots = generate_time_slots([_sched("2024-12-08", start, end)])
        assert len(slots) == end - start
        assert all(s.startswith("2024-12-08T") for s in slots)
        assert slots[0] == f"2024-12-08T{start:02d}:00"

    @pytest.mark.parametrize("start,end", [(18, 5), (23, 0), (20, 2), (13, 0), (12, 11)])
    def test_overnight_count(self, start, end):
        """Overnight: (24 - start) + end Slots; erster am Datum, Rest am Folgetag."""
        slots = generate_time_slots([_sched("2024-12-06", start, end)])
        assert len(slots) == (24 - start) + end
        first_day = [s for s in slots if s.startswith("2024-12-06T")]
        next_day = [s for s in slots if s.startswith("2024-12-07T")]
        assert len(first_day) == 24 - start
        assert len(next_day) == end
        assert slots[0] == f"2024-12-06T{start:02d}:00"

    def test_end_hour_midnight(self):
        """end_hour = 0 bedeutet 0 Uhr am Folgetag (exklusiv)."""
        slots = generate_time_slots([_sched("2024-12-08", 13, 0)])
        assert len(slots) == 11
        assert slots[-1] == "2024-12-08T23:00"

    @pytest.mark.parametrize("hour", [0, 5, 18, 23])
    def test_start_equals_end_full_cycle(self, hour):
        """start_hour == end_hour → volle 24 Slots.

        Festgehaltenes Verhalten (möglicherweise unbeabsichtigt, aber so gewollt
        beibehalten): die Overnight-Regel end <= start greift auch bei Gleichheit.
        """
        slots = generate_time_slots([_sched("2024-12-06", hour, hour)])
        assert len(slots) == 24
        assert len(set(slots)) == 24
        assert slots[0] == f"2024-12-06T{hour:02d}:00"

    def test_strictly_chronological_within_schedule(self):
        for sched in [_sched("2024-12-06", 18, 5), _sched("2024-12-06", 7, 7),
                      _sched("2024-12-06", 10, 20)]:
            parsed = [parse_slot_key(s) for s in generate_time_slots([sched])]
            assert all(a < b for a, b in zip(parsed, parsed[1:]))

    def test_month_and_year_boundary(self):
        slots = generate_time_slots([_sched("2024-12-31", 22, 2)])
        assert slots == [
            "2024-12-31T22:00", "2024-12-31T23:00",
            "2025-01-01T00:00", "2025-01-01T01:00",
        ]

    def test_leap_day(self):
        slots = generate_time_slots([_sched("2024-02-28", 23, 1)])
        assert slots == ["2024-02-28T23:00", "2024-02-29T00:00"]

    def test_empty_input(self):
        assert generate_time_slots([]) == []

    def test_input_order_preserved(self):
        """Zwei Abende in umgekehrter Reihenfolge → Ausgabe folgt der Eingabe."""
        later = _sched("2024-12-08", 13, 15)
        earlier = _sched("2024-12-06", 18, 20)
        slots = generate_time_slots([later, earlier])
        assert slots == [
            "2024-12-08T13:00", "2024-12-08T14:00",
            "2024-12-06T18:00", "2024-12-06T19:00",
        ]

    def test_deterministic(self):
        scheds = [_sched("2024-12-06", 18, 5), _sched("2024-12-07", 13, 5)]
        assert generate_time_slots(scheds) == generate_time_slots(scheds)


# ─── NIGHT-GROUPER ────────────────────────────────────────────────────────────

class TestGroupSlotsByNight:
    def test_overnight_grouped_under_start_date(self):
        """Alle 11 Slots von Fr 18 → Sa 5 gehören zu "2024-12-06"."""
        scheds = [_sched("2024-12-06", 18, 5)]
        grouped = group_slots_by_night(generate_time_slots(scheds), scheds)
        assert list(grouped) == ["2024-12-06"]
        assert len(grouped["2024-12-06"].slots) == 11
        assert grouped["2024-12-06"].label == "Friday, Dec 6"

    def test_no_cross_contamination(self):
        """Kein Overnight-Abend am Vortag → Slots bleiben auf ihrem Datum."""
        scheds = [_sched("2024-12-08", 13, 23)]
        slots = generate_time_slots(scheds) + ["2024-12-08T10:00"]
        grouped = group_slots_by_night(slots, scheds)
        assert list(grouped) == ["2024-12-08"]
        assert grouped["2024-12-08"].slots[0] == "2024-12-08T10:00"

    def test_previous_day_not_overnight_stays(self):
        """Vortag ist same-day → Vormittags-Slot wird nicht übernommen."""
        scheds = [_sched("2024-12-07", 13, 23)]
        grouped = group_slots_by_night(["2024-12-08T02:00"], scheds)
        assert list(grouped) == ["2024-12-08"]

    def test_hour_not_below_end_hour_stays(self):
        """Slot-Stunde >= end_hour des Vortags → eigener Kalendertag."""
        scheds = [_sched("2024-12-06", 18, 5)]
        grouped = group_slots_by_night(["2024-12-07T05:00", "2024-12-07T04:00"], scheds)
        assert grouped["2024-12-07"].slots == ["2024-12-07T05:00"]
        assert grouped["2024-12-06"].slots == ["2024-12-07T04:00"]

    def test_afternoon_slot_never_moved(self):
        """Slots ab 12 Uhr werden nie dem Vortag zugeordnet (auch bei 24h-Abend)."""
        scheds = [_sched("2024-12-06", 18, 18)]
        grouped = group_slots_by_night(generate_time_slots(scheds), scheds)
        assert len(grouped["2024-12-06"].slots) == 6 + 12
        assert grouped["2024-12-07"].slots[0] == "2024-12-07T12:00"
        assert len(grouped["2024-12-07"].slots) == 6

    def test_weekend_partition(self):
        """Fr/Sa/So-Wochenende: jede Gruppe = genau ein Abend, nichts fehlt."""
        scheds = [
            _sched("2024-12-06", 18, 5),
            _sched("2024-12-07", 13, 5),
            _sched("2024-12-08", 13, 0),
        ]
        slots = generate_time_slots(scheds)
        grouped = group_slots_by_night(slots, scheds)

        assert list(grouped) == ["2024-12-06", "2024-12-07", "2024-12-08"]
        assert [len(g.slots) for g in grouped.values()] == [11, 16, 11]
        flat = [s for g in grouped.values() for s in g.slots]
        assert sorted(flat) == sorted(slots)
        assert len(flat) == len(slots)

    def test_sorted_within_group(self):
        """Innerhalb einer Gruppe chronologisch, auch bei gemischter Eingabe."""
        scheds = [_sched("2024-12-07", 20, 3)]
        slots = ["2024-12-08T01:00", "2024-12-07T23:00", "2024-12-08T00:00",
                 "2024-12-07T20:00"]
        grouped = group_slots_by_night(slots, scheds)
        assert grouped["2024-12-07"].slots == [
            "2024-12-07T20:00", "2024-12-07T23:00",
            "2024-12-08T00:00", "2024-12-08T01:00",
        ]

    def test_insertion_order_not_date_order(self):
        """Gruppen-Reihenfolge = erstes Auftreten in der Eingabe."""
        scheds = [_sched("2024-12-08", 13, 15), _sched("2024-12-06", 18, 20)]
        grouped = group_slots_by_night(generate_time_slots(scheds), scheds)
        assert list(grouped) == ["2024-12-08", "2024-12-06"]

    def test_malformed_slot_raises(self):
        """Ungültige Kennung → Fehler statt stiller Falschzuordnung."""
        scheds = [_sched("2024-12-06", 18, 5)]
        with pytest.raises(SlotKeyError):
            group_slots_by_night(["2024-12-07T01:00", "2024-12-07 02:00"], scheds)

    def test_empty_input(self):
        assert group_slots_by_night([], [_sched("2024-12-06", 18, 5)]) == {}

    def test_to_dict(self):
        scheds = [_sched("2024-12-06", 22, 0)]
        grouped = group_slots_by_night(generate_time_slots(scheds), scheds)
        assert grouped["2024-12-06"].to_dict() == {
            "label": "Friday, Dec 6",
            "slots": ["2024-12-06T22:00", "2024-12-06T23:00"],
        }

    def test_duplicate_dates_later_schedule_wins(self):
        """Doppeltes Datum: der spätere Eintrag bestimmt die Zuordnung."""
        scheds = [_sched("2024-12-06", 18, 5), _sched("2024-12-06", 18, 2)]
        schedule_map = build_schedule_map(scheds)
        assert schedule_map["2024-12-06"].end_hour == 2
        grouped = group_slots_by_night(["2024-12-07T03:00"], scheds)
        assert list(grouped) == ["2024-12-07"]


class TestResolveNightKey:
    def test_before_noon_moved(self):
        schedule_map = build_schedule_map([_sched("2024-12-06", 20, 6)])
        slot = parse_slot_key("2024-12-07T05:00")
        assert resolve_night_key(slot, schedule_map) == "2024-12-06"

    def test_month_boundary(self):
        schedule_map = build_schedule_map([_sched("2024-11-30", 20, 4)])
        slot = parse_slot_key("2024-12-01T03:00")
        assert resolve_night_key(slot, schedule_map) == "2024-11-30"

    def test_no_schedule(self):
        slot = parse_slot_key("2024-12-07T01:00")
        assert resolve_night_key(slot, {}) == "2024-12-07"


class TestNightLabel:
    @pytest.mark.parametrize("key,label", [
        ("2024-12-06", "Friday, Dec 6"),
        ("2024-12-07", "Saturday, Dec 7"),
        ("2025-01-12", "Sunday, Jan 12"),
        ("2024-03-31", "Sunday, Mar 31"),
    ])
    def test_labels(self, key, label):
        assert night_label(key) == label


# ─── WOCHENENDE ───────────────────────────────────────────────────────────────

class TestWeekendSchedules:
    def test_from_wednesday(self):
        scheds = weekend_schedules(date(2024, 12, 4))
        assert [s.date for s in scheds] == ["2024-12-06", "2024-12-07", "2024-12-08"]
        assert [(s.start_hour, s.end_hour) for s in scheds] == [(18, 5), (13, 5), (13, 0)]

    def test_friday_skips_to_next_week(self):
        """Ist heute Freitag, wird der Freitag der Folgewoche gewählt."""
        scheds = weekend_schedules(date(2024, 12, 6))
        assert scheds[0].date == "2024-12-13"

    def test_saturday(self):
        scheds = weekend_schedules(date(2024, 12, 7))
        assert scheds[0].date == "2024-12-13"

    def test_custom_hours(self):
        scheds = weekend_schedules(date(2024, 12, 4), start_hour=19, end_hour=3,
                                   day_start_hour=14)
        assert [(s.start_hour, s.end_hour) for s in scheds] == [(19, 3), (14, 3), (14, 0)]
