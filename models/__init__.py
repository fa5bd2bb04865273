from models.timeslot import SlotKeyError, TimeSlot, parse_slot_key, format_slot_key
from models.day_schedule import DaySchedule
from models.game import Game
from models.player import Player
from models.response import GameResponse, RatePreference, TimeSlotAvailability
from models.poker_data import PokerData, PokerDataError

__all__ = [
    "SlotKeyError",
    "TimeSlot",
    "parse_slot_key",
    "format_slot_key",
    "DaySchedule",
    "Game",
    "Player",
    "GameResponse",
    "RatePreference",
    "TimeSlotAvailability",
    "PokerData",
    "PokerDataError",
]
