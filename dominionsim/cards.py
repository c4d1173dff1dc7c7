"""Card and phase definitions, costs and display names."""

from __future__ import annotations

from enum import IntEnum

MAX_HAND = 500
MAX_DECK = 500
MAX_PLAYERS = 4
NUM_K_CARDS = 10
UNKNOWN_COST = 1000


class Card(IntEnum):
    """Every card that can appear in a game, by supply position."""

    CURSE = 0
    ESTATE = 1
    DUCHY = 2
    PROVINCE = 3
    COPPER = 4
    SILVER = 5
    GOLD = 6
    ADVENTURER = 7
    COUNCIL_ROOM = 8
    FEAST = 9
    GARDENS = 10
    MINE = 11
    REMODEL = 12
    SMITHY = 13
    VILLAGE = 14
    BARON = 15
    GREAT_HALL = 16
    MINION = 17
    STEWARD = 18
    TRIBUTE = 19
    AMBASSADOR = 20
    CUTPURSE = 21
    EMBARGO = 22
    OUTPOST = 23
    SALVAGER = 24
    SEA_HAG = 25
    TREASURE_MAP = 26

    @property
    def is_kingdom(self) -> bool:
        """True for the action and kingdom cards (Adventurer onwards)."""
        return self >= Card.ADVENTURER


class Phase(IntEnum):
    """The phases of a turn."""

    ACTION = 0
    BUY = 1
    CLEANUP = 2


NUM_TOTAL_K_CARDS = len(Card)

TREASURE_VALUES = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}

_COSTS = {
    Card.CURSE: 0,
    Card.ESTATE: 2,
    Card.DUCHY: 5,
    Card.PROVINCE: 8,
    Card.COPPER: 0,
    Card.SILVER: 3,
    Card.GOLD: 6,
    Card.ADVENTURER: 6,
    Card.COUNCIL_ROOM: 5,
    Card.FEAST: 4,
    Card.GARDENS: 4,
    Card.MINE: 5,
    Card.REMODEL: 4,
    Card.SMITHY: 4,
    Card.VILLAGE: 3,
    Card.BARON: 4,
    Card.GREAT_HALL: 3,
    Card.MINION: 5,
    Card.STEWARD: 3,
    Card.TRIBUTE: 5,
    Card.AMBASSADOR: 3,
    Card.CUTPURSE: 4,
    Card.EMBARGO: 2,
    Card.OUTPOST: 5,
    Card.SALVAGER: 4,
    Card.SEA_HAG: 4,
    Card.TREASURE_MAP: 4,
}

_NAMES = {
    Card.CURSE: "Curse",
    Card.ESTATE: "Estate",
    Card.DUCHY: "Duchy",
    Card.PROVINCE: "Province",
    Card.COPPER: "Copper",
    Card.SILVER: "Silver",
    Card.GOLD: "Gold",
    Card.ADVENTURER: "Adventurer",
    Card.COUNCIL_ROOM: "Council Room",
    Card.FEAST: "Feast",
    Card.GARDENS: "Gardens",
    Card.MINE: "Mine",
    Card.REMODEL: "Remodel",
    Card.SMITHY: "Smithy",
    Card.VILLAGE: "Village",
    Card.BARON: "Baron",
    Card.GREAT_HALL: "Great Hall",
    Card.MINION: "Minion",
    Card.STEWARD: "Steward",
    Card.TRIBUTE: "Tribute",
    Card.AMBASSADOR: "Ambassador",
    Card.CUTPURSE: "Cutpurse",
    Card.EMBARGO: "Embargo",
    Card.OUTPOST: "Outpost",
    Card.SALVAGER: "Salvager",
    Card.SEA_HAG: "Sea Hag",
    Card.TREASURE_MAP: "Treasure Map",
}

_PHASE_NAMES = {
    Phase.ACTION: "Action",
    Phase.BUY: "Buy",
    Phase.CLEANUP: "Cleanup",
}


def get_cost(card: int) -> int:
    """Cost of ``card`` in coins, or -1 if it is not a known card."""
    return _COSTS.get(card, -1)


def card_cost(card: int) -> int:
    """Cost of ``card`` for display, or 1000 if it is not a known card."""
    return _COSTS.get(card, UNKNOWN_COST)


def card_name(card: int) -> str:
    """Display name of ``card``, or "?" if it is not a known card."""
    return _NAMES.get(card, "?")


def phase_name(phase: int) -> str:
    """Display name of a turn phase, or an empty string if unknown."""
    return _PHASE_NAMES.get(phase, "")