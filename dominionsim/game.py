"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional

from .cards import (
    MAX_PLAYERS,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    TREASURE_VALUES,
    Card,
    Phase,
    get_cost,
)
from .rngs import RandomStreams

HAND_SIZE = 5
START_ESTATES = 3
START_COPPERS = 7
UNUSED_PLAYER_SCORE = -9999
_GAME_END_PILES = 25

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}


class GameError(Exception):
    """Raised when a requested game action is not allowed."""


class Destination(IntEnum):
    """Where a gained card is placed."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def _player_piles() -> list[list[int]]:
    return [[] for _ in range(MAX_PLAYERS)]


@dataclass
class GameState:
    """The complete state of a game in progress.

    Decks are stored bottom first, so the top card of a deck is its last
    element. ``supply`` holds -1 for piles that are not in the game.
    """

    num_players: int = 2
    supply: list[int] = field(default_factory=lambda: [-1] * NUM_TOTAL_K_CARDS)
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * NUM_TOTAL_K_CARDS)
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: int = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    hands: list[list[int]] = field(default_factory=_player_piles)
    decks: list[list[int]] = field(default_factory=_player_piles)
    discards: list[list[int]] = field(default_factory=_player_piles)
    played_cards: list[int] = field(default_factory=list)
    rng: RandomStreams = field(default_factory=RandomStreams, repr=False, compare=False)

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck deterministically from the game's generator."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no cards in their deck to shuffle")
        pool = sorted(deck)
        shuffled = []
        while pool:
            shuffled.append(pool.pop(int(self.rng.random() * len(pool))))
        deck[:] = shuffled

    def draw_card(self, player: int) -> Optional[int]:
        """Move the top card of a player's deck into their hand.

        An empty deck is first refilled from the shuffled discard pile.
        Returns the card drawn, or None when there was nothing to draw.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                return None
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def buy_card(self, supply_pos: int) -> None:
        """Buy one card from the supply for the current player."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"no cards of type {supply_pos} left in the supply")
        cost = get_cost(supply_pos)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(supply_pos, Destination.DISCARD, self.whose_turn)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards left in a supply pile; -1 if the pile is not in the game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown supply pile {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """How many copies of ``card`` a player owns in deck, hand and discard."""
        return (
            self.decks[player].count(card)
            + self.hands[player].count(card)
            + self.discards[player].count(card)
        )

    def end_turn(self) -> None:
        """Discard the current hand, pass the turn on and draw the next hand."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()
        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()
        for _ in range(HAND_SIZE):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn, 0)

    def is_game_over(self) -> bool:
        """True once Provinces run out or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_END_PILES] if count == 0)
        return empty >= 3

    def _points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points of a player's cards.

        The deck is examined only as far as the size of the discard pile.
        """
        discard = self.discards[player]
        cards: Iterable[int] = (
            *self.hands[player],
            *discard,
            *self.decks[player][: len(discard)],
        )
        return sum(self._points(player, card) for card in cards)

    def get_winners(self) -> list[bool]:
        """One flag per player slot, True for each winner (ties allowed).

        Players who come after the current player in turn order had one
        turn fewer and win ties against the others.
        """
        scores = [
            self.score_for(i) if i < self.num_players else UNUSED_PLAYER_SCORE
            for i in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and i > self.whose_turn else score
            for i, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]

    def discard_card(self, hand_pos: int, player: int, trash: bool) -> None:
        """Remove a card from a player's hand.

        Unless ``trash`` is set the card goes to the played pile. The last
        card of the hand fills the gap the card leaves.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"player {player} has no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(self, supply_pos: int, to: int, player: int) -> None:
        """Take a card from the supply and put it in the player's discard, deck or hand."""
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"supply pile {supply_pos} is empty or not in the game")
        if to == Destination.DECK:
            self.decks[player].append(supply_pos)
        elif to == Destination.HAND:
            self.hands[player].append(supply_pos)
        else:
            self.discards[player].append(supply_pos)
        self.supply[supply_pos] -= 1

    def update_coins(self, player: int, bonus: int) -> int:
        """Set coins to the treasure in the player's hand plus ``bonus``; return it."""
        self.coins = (
            sum(TREASURE_VALUES.get(card, 0) for card in self.hands[player]) + bonus
        )
        return self.coins


def initialize_game(
    num_players: int,
    kingdom_cards: Iterable[int],
    random_seed: int,
    rng: Optional[RandomStreams] = None,
) -> GameState:
    """Set up supplies and starting decks and deal the first player's hand."""
    if rng is None:
        rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)

    if not 2 <= num_players <= MAX_PLAYERS:
        raise GameError(f"a game needs 2 to {MAX_PLAYERS} players, not {num_players}")
    kingdom = list(kingdom_cards)
    if len(kingdom) != NUM_K_CARDS:
        raise GameError(f"exactly {NUM_K_CARDS} kingdom cards are needed")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply
    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    supply[Card.ESTATE] = victory
    supply[Card.DUCHY] = victory
    supply[Card.PROVINCE] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30
    for card in Card:
        if not card.is_kingdom:
            continue
        if card in kingdom:
            if card in (Card.GREAT_HALL, Card.GARDENS):
                supply[card] = victory
            else:
                supply[card] = 10
        else:
            supply[card] = -1

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * START_ESTATES + [Card.COPPER] * START_COPPERS
    for player in range(num_players):
        state.shuffle(player)

    for _ in range(HAND_SIZE):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn, 0)
    return state