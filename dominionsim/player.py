"""Interactive console for playing a game, with optional computer players."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Optional, TextIO

from .cards import MAX_PLAYERS, card_name
from .effects import play_card
from .game import GameError, GameState, initialize_game
from .interface import (
    add_card_to_hand,
    execute_bot_turn,
    print_deck,
    print_discard,
    print_hand,
    print_help,
    print_played,
    print_scores,
    print_state,
    print_supply,
)
from .playdom import DEFAULT_KINGDOM

_UNUSED = -1
_USAGE = "Usage: player [integer random number seed]"
_INT = re.compile(r"[+-]?\d+")


def _matches(command: str, keyword: str) -> bool:
    """Compare the first four characters, as a fixed-width command match."""
    return (command + "\0" * 4)[:4] == (keyword + "\0" * 4)[:4]


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    if not tokens:
        return "", [_UNUSED] * 4
    args = [_UNUSED] * 4
    for slot, token in enumerate(tokens[1:5]):
        match = _INT.match(token)
        if match is None:
            break
        args[slot] = int(match.group())
        if match.end() != len(token):
            break
    return tokens[0], args


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _report_end(game: GameState, turn_num: int, out: TextIO) -> None:
    print_scores(game, out)
    winners = game.get_winners()
    print(f"After {turn_num} turns, the winner(s) are:", file=out)
    for player in range(game.num_players):
        if winners[player]:
            print(f"Player {player}", file=out)
    for player in range(game.num_players):
        print_hand(player, game, out)
        print_played(player, game, out)
        print_discard(player, game, out)
        print_deck(player, game, out)


def run(
    seed: int,
    lines: Optional[Iterable[str]] = None,
    file: Optional[TextIO] = None,
) -> GameState:
    """Read commands from ``lines`` until exit, resignation or the game's end."""
    out = sys.stdout if file is None else file
    source = iter(sys.stdin if lines is None else lines)
    kingdom = list(DEFAULT_KINGDOM)
    is_bot = [False] * MAX_PLAYERS
    game_started = False
    turn_num = 0

    game = initialize_game(2, kingdom, seed)
    print('Please enter a command or "help" for commands', file=out)

    while True:
        current = game.whose_turn
        if game_started and game.is_game_over():
            _report_end(game, turn_num, out)
            break

        if is_bot[current]:
            turn_num = execute_bot_turn(current, turn_num, game, out)
            continue

        print("$ ", end="", file=out)
        line = next(source, None)
        if line is None:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)

        if _matches(command, "add"):
            try:
                add_card_to_hand(current, arg0, game)
            except GameError:
                pass
            print(f"Player {current} adds {card_name(arg0)} to their hand\n", file=out)
        elif _matches(command, "buy"):
            try:
                game.buy_card(arg0)
            except GameError:
                print(f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n", file=out)
            else:
                print(f"Player {current} buys card {arg0}, {card_name(arg0)}\n", file=out)
        elif _matches(command, "end"):
            if game_started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                print(f"Player {game.whose_turn}'s turn number {turn_num}\n", file=out)
        elif _matches(command, "exit"):
            break
        elif _matches(command, "help"):
            print_help(out)
        elif _matches(command, "init"):
            for player in range(arg0 - arg1, arg0):
                if 0 <= player < MAX_PLAYERS:
                    is_bot[player] = True
            try:
                new_game = initialize_game(arg0, kingdom, seed, game.rng)
            except GameError:
                print(file=out)
            else:
                game = new_game
                print(file=out)
                game_started = True
                print(f"Player {game.whose_turn}'s turn number {turn_num}\n", file=out)
        elif _matches(command, "num"):
            print(f"There are {game.num_hand_cards()} cards in your hand.", file=out)
        elif _matches(command, "play"):
            try:
                card = game.hand_card(arg0)
                play_card(game, arg0, arg1, arg2, arg3)
            except GameError:
                print(f"Player {current} cannot play card {arg0}\n", file=out)
            else:
                print(f"Player {current} plays {card_name(card)}\n", file=out)
        elif _matches(command, "resi"):
            game.end_turn()
            print_scores(game, out)
            break
        elif _matches(command, "show"):
            if game_started:
                print_hand(current, game, out)
                print_played(current, game, out)
        elif _matches(command, "stat"):
            if game_started:
                print_state(game, out)
        elif _matches(command, "supp"):
            print_supply(game, out)
        elif _matches(command, "whos"):
            print(f"Player {game.whose_turn}'s turn", file=out)

    return game


def main(argv: Optional[list[str]] = None) -> int:
    """Start the console; the single argument is a positive random seed."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(_USAGE)
        return 0
    seed = _atoi(args[0])
    if seed <= 0:
        print(_USAGE)
        return 0
    run(seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())