"""A two-player game played out automatically by two fixed strategies."""

from __future__ import annotations

import re
import sys
from contextlib import suppress
from typing import Optional, TextIO

from .cards import TREASURE_VALUES, Card
from .effects import play_card
from .game import GameError, GameState, initialize_game

DEFAULT_KINGDOM = (
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _hand_money(state: GameState) -> int:
    return sum(TREASURE_VALUES.get(card, 0) for card in state.hands[state.whose_turn])


def _play_action(state: GameState, position: int) -> int:
    """Play the action at ``position`` and return the treasure left in hand."""
    with suppress(GameError):
        play_card(state, position, -1, -1, -1)
    return _hand_money(state)


def _buy(state: GameState, card: int) -> None:
    with suppress(GameError):
        state.buy_card(card)


def play_game(seed: int, file: Optional[TextIO] = None) -> GameState:
    """Play a whole game from ``seed``, reporting moves, and return the final state."""
    out = sys.stdout if file is None else file
    print("Starting game.", file=out)
    state = initialize_game(2, DEFAULT_KINGDOM, seed)

    num_smithies = 0
    num_adventurers = 0
    while not state.is_game_over():
        money = 0
        smithy_pos = -1
        adventurer_pos = -1
        for index, card in enumerate(state.hands[state.whose_turn]):
            if card in TREASURE_VALUES:
                money += TREASURE_VALUES[card]
            elif card == Card.SMITHY:
                smithy_pos = index
            elif card == Card.ADVENTURER:
                adventurer_pos = index

        if state.whose_turn == 0:
            if smithy_pos != -1:
                print(f"0: smithy played from position {smithy_pos}", file=out)
                money = _play_action(state, smithy_pos)
                print("smithy played.", file=out)
                money = _hand_money(state)

            if money >= 8:
                print("0: bought province", file=out)
                _buy(state, Card.PROVINCE)
            elif money >= 6:
                print("0: bought gold", file=out)
                _buy(state, Card.GOLD)
            elif money >= 4 and num_smithies < 2:
                print("0: bought smithy", file=out)
                _buy(state, Card.SMITHY)
                num_smithies += 1
            elif money >= 3:
                print("0: bought silver", file=out)
                _buy(state, Card.SILVER)

            print("0: end turn", file=out)
            state.end_turn()
        else:
            if adventurer_pos != -1:
                print(f"1: adventurer played from position {adventurer_pos}", file=out)
                money = _play_action(state, adventurer_pos)

            if money >= 8:
                print("1: bought province", file=out)
                _buy(state, Card.PROVINCE)
            elif money >= 6 and num_adventurers < 2:
                print("1: bought adventurer", file=out)
                _buy(state, Card.ADVENTURER)
                num_adventurers += 1
            elif money >= 6:
                print("1: bought gold", file=out)
                _buy(state, Card.GOLD)
            elif money >= 3:
                print("1: bought silver", file=out)
                _buy(state, Card.SILVER)

            print("1: endTurn", file=out)
            state.end_turn()

    print("Finished game.", file=out)
    print(f"Player 0: {state.score_for(0)}\nPlayer 1: {state.score_for(1)}", file=out)
    return state


def main(argv: Optional[list[str]] = None) -> int:
    """Run an automatic game; the single argument is the random seed."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: playdom [integer random number seed]", file=sys.stderr)
        return 1
    play_game(_atoi(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())