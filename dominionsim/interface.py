"""Text display of a game and the simple computer player used by the console."""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import Optional, TextIO

from .cards import (
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    TREASURE_VALUES,
    Card,
    card_cost,
    card_name,
    phase_name,
)
from .game import GameError, GameState
from .rngs import RandomStreams

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
)


def _out(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def add_card_to_hand(player: int, card: int, game: GameState) -> None:
    """Put a kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} cannot be added to a hand")
    game.hands[player].append(card)


def count_hand_coins(player: int, game: GameState) -> int:
    """Total treasure value of the cards in a player's hand."""
    return sum(TREASURE_VALUES.get(card, 0) for card in game.hands[player])


def _print_pile(title: str, cards: list[int], line_end: str, file: TextIO) -> None:
    print(title, end="", file=file)
    if cards:
        print("#  Card", file=file)
    for index, card in enumerate(cards):
        print(f"{index:<2} {card_name(card):<13}{line_end}", file=file)
    print(file=file)


def print_hand(player: int, game: GameState, file: Optional[TextIO] = None) -> None:
    """Print the cards in a player's hand."""
    _print_pile(f"Player {player}'s hand:\n", game.hands[player], "", _out(file))


def print_deck(player: int, game: GameState, file: Optional[TextIO] = None) -> None:
    """Print the cards in a player's deck, bottom first."""
    _print_pile(f"Player {player}'s deck: \n", game.decks[player], "", _out(file))


def print_played(player: int, game: GameState, file: Optional[TextIO] = None) -> None:
    """Print the cards played this turn."""
    _print_pile(f"Player {player}'s played cards: \n", game.played_cards, " ", _out(file))


def print_discard(player: int, game: GameState, file: Optional[TextIO] = None) -> None:
    """Print the cards in a player's discard pile."""
    _print_pile(f"Player {player}'s discard: \n", game.discards[player], " ", _out(file))


def print_supply(game: GameState, file: Optional[TextIO] = None) -> None:
    """Print every supply pile in the game with its cost and remaining copies."""
    out = _out(file)
    print("#   Card          Cost   Copies", file=out)
    for card in Card:
        count = game.supply[card]
        if count == -1:
            continue
        print(
            f"{int(card):<2}  {card_name(card):<13} {card_cost(card):<5}  {count:<5}",
            file=out,
        )
    print(file=out)


def print_state(game: GameState, file: Optional[TextIO] = None) -> None:
    """Print the status of the current turn."""
    print(
        f"Player {game.whose_turn}:\n{phase_name(game.phase)} phase\n"
        f"{game.num_actions} actions\n{game.coins} coins\n{game.num_buys} buys\n",
        file=_out(file),
    )


def print_scores(game: GameState, file: Optional[TextIO] = None) -> None:
    """Print each player's score."""
    out = _out(file)
    for player in range(game.num_players):
        print(f"Player {player} has a score of {game.score_for(player)}", file=out)


def print_help(file: Optional[TextIO] = None) -> None:
    """Print the list of console commands."""
    out = _out(file)
    print(_HELP, end="", file=out)
    print("\n", file=out)


def select_kingdom_cards(random_seed: int, rng: Optional[RandomStreams] = None) -> list[int]:
    """Pick ten different kingdom cards at random."""
    if rng is None:
        rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[int] = []
    while len(chosen) < NUM_K_CARDS:
        card = int(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def execute_bot_turn(
    player: int, turn_num: int, game: GameState, file: Optional[TextIO] = None
) -> int:
    """Play one turn for a computer player and return the updated turn number."""
    out = _out(file)
    coins = count_hand_coins(player, game)
    print(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************",
        file=out,
    )
    print_supply(game, out)

    provinces = game.supply_count(Card.PROVINCE)
    if coins >= card_cost(Card.PROVINCE) and provinces > 0:
        purchase = Card.PROVINCE
    elif provinces == 0 and coins >= card_cost(Card.DUCHY):
        purchase = Card.DUCHY
    elif coins >= card_cost(Card.GOLD) and game.supply_count(Card.GOLD) > 0:
        purchase = Card.GOLD
    elif coins >= card_cost(Card.SILVER) and game.supply_count(Card.SILVER) > 0:
        purchase = Card.SILVER
    else:
        purchase = None

    if purchase is not None:
        with suppress(GameError):
            game.buy_card(purchase)
        print(f"Player {player} buys card {card_name(purchase)}\n", file=out)

    if player == game.num_players - 1:
        turn_num += 1
    game.end_turn()
    if not game.is_game_over():
        print(f"Player {game.whose_turn}'s turn number {turn_num}\n", file=out)
    return turn_num