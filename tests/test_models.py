"""Tests für die Datenmodelle (DaySchedule, Game, GameResponse, PokerData)."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from models import (
    DaySchedule,
    Game,
    GameResponse,
    Player,
    PokerData,
    PokerDataError,
    RatePreference,
    TimeSlotAvailability,
)


def _make_game(code: str = "poker-ab12") -> Game:
    return Game(
        game_code=code,
        name="Friday Game",
        rate_options=["25-50", "50-100"],
        day_schedules=[
            DaySchedule(date="2024-12-06", start_hour=18, end_hour=5),
            DaySchedule(date="2024-12-07", start_hour=13, end_hour=5),
        ],
    )


# ─── DAYSCHEDULE ──────────────────────────────────────────────────────────────

class TestDaySchedule:
    def test_camel_case_aliases(self):
        """Gespeicherte Form {date, startHour, endHour} wird akzeptiert."""
        s = DaySchedule.model_validate({"date": "2024-12-06", "startHour": 18, "endHour": 5})
        assert s.start_hour == 18
        assert s.end_hour == 5
        assert s.to_wire() == {"date": "2024-12-06", "startHour": 18, "endHour": 5}

    def test_overnight_flag(self):
        assert DaySchedule(date="2024-12-06", start_hour=18, end_hour=5).is_overnight
        assert DaySchedule(date="2024-12-06", start_hour=18, end_hour=18).is_overnight
        assert not DaySchedule(date="2024-12-06", start_hour=13, end_hour=23).is_overnight

    def test_hour_count(self):
        assert DaySchedule(date="2024-12-06", start_hour=18, end_hour=5).hour_count == 11
        assert DaySchedule(date="2024-12-06", start_hour=13, end_hour=23).hour_count == 10
        assert DaySchedule(date="2024-12-06", start_hour=7, end_hour=7).hour_count == 24

    @pytest.mark.parametrize("start,end", [(24, 5), (-1, 5), (18, 24), (18, -3)])
    def test_hour_out_of_range(self, start, end):
        """Stunden außerhalb 0-23 → Validierungsfehler an der Grenze."""
        with pytest.raises(ValidationError):
            DaySchedule(date="2024-12-06", start_hour=start, end_hour=end)

    @pytest.mark.parametrize("bad", ["2024-12-6", "06.12.2024", "2024-02-30", "", "2024-12-06T18:00"])
    def test_malformed_date(self, bad):
        with pytest.raises(ValidationError):
            DaySchedule(date=bad, start_hour=18, end_hour=5)

    def test_frozen(self):
        s = DaySchedule(date="2024-12-06", start_hour=18, end_hour=5)
        with pytest.raises(ValidationError):
            s.start_hour = 20


# ─── GAME ─────────────────────────────────────────────────────────────────────

class TestGame:
    def test_code_normalized(self):
        assert _make_game().game_code == "POKER-AB12"

    def test_time_slots(self):
        slots = _make_game().time_slots()
        assert len(slots) == 11 + 16
        assert slots[0] == "2024-12-06T18:00"

    def test_grouped_slots(self):
        grouped = _make_game().grouped_slots()
        assert list(grouped) == ["2024-12-06", "2024-12-07"]
        assert grouped["2024-12-07"].label == "Saturday, Dec 7"

    def test_duplicate_dates_rejected(self):
        with pytest.raises(ValidationError):
            Game(
                game_code="X", name="X", rate_options=["25-50"],
                day_schedules=[
                    DaySchedule(date="2024-12-06", start_hour=18, end_hour=5),
                    DaySchedule(date="2024-12-06", start_hour=13, end_hour=20),
                ],
            )

    def test_empty_schedules_rejected(self):
        with pytest.raises(ValidationError):
            Game(game_code="X", name="X", rate_options=["25-50"], day_schedules=[])

    def test_rates_required_and_unique(self):
        sched = [DaySchedule(date="2024-12-06", start_hour=18, end_hour=5)]
        with pytest.raises(ValidationError):
            Game(game_code="X", name="X", rate_options=[], day_schedules=sched)
        with pytest.raises(ValidationError):
            Game(game_code="X", name="X", rate_options=["1-2", "1-2"], day_schedules=sched)


# ─── GAMERESPONSE ─────────────────────────────────────────────────────────────

class TestGameResponse:
    def test_valid_response(self):
        r = GameResponse(
            game_code="poker-ab12", player_id="P01",
            rate_preferences={"25-50": "preferred"},
            time_slots={"2024-12-06T18:00": "can", "2024-12-07T01:00": "maybe"},
        )
        assert r.game_code == "POKER-AB12"
        assert r.rate_preferences["25-50"] == RatePreference.PREFERRED
        assert r.time_slots["2024-12-07T01:00"] == TimeSlotAvailability.MAYBE
        assert r.is_available_somewhere

    def test_malformed_slot_key_rejected(self):
        """Ungültige Slot-Kennung in den Antworten → Validierungsfehler."""
        with pytest.raises(ValidationError):
            GameResponse(game_code="X", player_id="P01",
                         time_slots={"2024-12-06 18:00": "can"})

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            GameResponse(game_code="X", player_id="P01",
                         time_slots={"2024-12-06T18:00": "yes"})

    def test_not_available(self):
        r = GameResponse(game_code="X", player_id="P01",
                         time_slots={"2024-12-06T18:00": "maybe",
                                     "2024-12-06T19:00": "unavailable"})
        assert not r.is_available_somewhere


# ─── POKERDATA ────────────────────────────────────────────────────────────────

class TestPokerData:
    def _data(self) -> PokerData:
        return PokerData(
            players=[Player(id="P01", nickname="Ace", passcode="abc234"),
                     Player(id="P02", nickname="Nuts", passcode="XYZ789")],
            games=[_make_game()],
        )

    def test_passcode_normalized(self):
        assert self._data().players[0].passcode == "ABC234"

    def test_get_game_case_insensitive(self):
        assert self._data().get_game("poker-ab12").name == "Friday Game"

    def test_get_game_unknown(self):
        with pytest.raises(PokerDataError):
            self._data().get_game("POKER-NOPE")

    def test_upsert_replaces(self):
        """Erneute Antwort desselben Spielers ersetzt die alte."""
        data = self._data()
        data.upsert_response(GameResponse(game_code="POKER-AB12", player_id="P01",
                                          time_slots={"2024-12-06T18:00": "can"}))
        data.upsert_response(GameResponse(game_code="POKER-AB12", player_id="P01",
                                          time_slots={"2024-12-06T18:00": "maybe"}))
        data.upsert_response(GameResponse(game_code="POKER-AB12", player_id="P02"))
        responses = data.responses_for("POKER-AB12")
        assert len(responses) == 2
        p01 = next(r for r in responses if r.player_id == "P01")
        assert p01.time_slots["2024-12-06T18:00"] == TimeSlotAvailability.MAYBE

    def test_upsert_unknown_player(self):
        with pytest.raises(PokerDataError):
            self._data().upsert_response(GameResponse(game_code="POKER-AB12", player_id="P99"))

    def test_save_load_json(self, tmp_path: Path):
        data = self._data()
        data.upsert_response(GameResponse(game_code="POKER-AB12", player_id="P01",
                                          rate_preferences={"25-50": "playable"},
                                          time_slots={"2024-12-07T02:00": "can"}))
        p = tmp_path / "poker_data.json"
        data.save_json(p)
        assert '"startHour": 18' in p.read_text(encoding="utf-8")

        loaded = PokerData.load_json(p)
        assert loaded.games[0].day_schedules == data.games[0].day_schedules
        assert loaded.responses == data.responses
        assert loaded.created_at is not None

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PokerData.load_json(tmp_path / "missing.json")

    def test_summary(self):
        text = self._data().summary()
        assert "Spieler: 2" in text
        assert "POKER-AB12" in text
