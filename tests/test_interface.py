import io

import pytest

from dominionsim.cards import Card
from dominionsim.game import GameError, initialize_game
from dominionsim.interface import (
    add_card_to_hand,
    count_hand_coins,
    execute_bot_turn,
    print_deck,
    print_discard,
    print_hand,
    print_help,
    print_played,
    print_scores,
    print_state,
    print_supply,
    select_kingdom_cards,
)

KINGDOM = [
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
]


@pytest.fixture
def game():
    return initialize_game(2, KINGDOM, 1)


def _capture(func, *args):
    buf = io.StringIO()
    func(*args, buf)
    return buf.getvalue()


def test_add_card_to_hand_appends(game):
    before = list(game.hands[0])
    add_card_to_hand(0, Card.SMITHY, game)
    assert game.hands[0] == before + [Card.SMITHY]


@pytest.mark.parametrize("card", [Card.COPPER, Card.PROVINCE, 27, -1])
def test_add_card_to_hand_rejects_non_kingdom(game, card):
    before = list(game.hands[0])
    with pytest.raises(GameError):
        add_card_to_hand(0, card, game)
    assert game.hands[0] == before


def test_count_hand_coins_matches_update_coins(game):
    game.hands[0] = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE, Card.SMITHY]
    assert count_hand_coins(0, game) == game.update_coins(0, 0)
    assert count_hand_coins(0, game) == 6


def test_count_hand_coins_ignores_other_cards(game):
    game.hands[1] = [Card.ESTATE, Card.SMITHY, Card.CURSE]
    assert count_hand_coins(1, game) == 0


def test_select_kingdom_cards_are_distinct_kingdom_cards():
    cards = select_kingdom_cards(5)
    assert len(cards) == 10
    assert len(set(cards)) == 10
    assert all(Card.ADVENTURER <= c <= Card.TREASURE_MAP for c in cards)


def test_select_kingdom_cards_is_deterministic_and_playable():
    cards = select_kingdom_cards(9)
    assert select_kingdom_cards(9) == cards
    state = initialize_game(2, cards, 9)
    assert all(state.supply_count(c) > 0 for c in cards)


def test_print_hand_format(game):
    game.hands[0] = [Card.COPPER, Card.SMITHY]
    out = _capture(print_hand, 0, game)
    assert out == "Player 0's hand:\n#  Card\n0  Copper       \n1  Smithy       \n\n"


def test_print_hand_empty(game):
    game.hands[1] = []
    assert _capture(print_hand, 1, game) == "Player 1's hand:\n\n"


def test_print_discard_and_played_lines(game):
    game.discards[0] = [Card.GOLD]
    game.played_cards[:] = [Card.VILLAGE]
    assert _capture(print_discard, 0, game) == (
        "Player 0's discard: \n#  Card\n0  Gold          \n\n"
    )
    assert "0  Village       \n" in _capture(print_played, 0, game)


def test_print_deck_lists_every_card(game):
    out = _capture(print_deck, 1, game)
    lines = out.splitlines()
    assert lines[0] == "Player 1's deck: "
    assert len(lines) == 2 + len(game.decks[1]) + 1


def test_print_supply_skips_unused_piles(game):
    out = _capture(print_supply, game)
    assert out.splitlines()[0] == "#   Card          Cost   Copies"
    assert "Province" in out
    assert "Feast" not in out


def test_print_state(game):
    out = _capture(print_state, game)
    assert out.startswith("Player 0:\nAction phase\n1 actions\n")
    assert f"{game.coins} coins\n" in out


def test_print_scores(game):
    out = _capture(print_scores, game)
    assert out.splitlines() == [
        f"Player {p} has a score of {game.score_for(p)}" for p in range(2)
    ]


def test_print_help():
    buf = io.StringIO()
    print_help(buf)
    out = buf.getvalue()
    assert out.startswith("Commands are: \n")
    assert "exit the interface" in out


def test_bot_buys_province(game):
    game.hands[0] = [Card.GOLD, Card.GOLD, Card.GOLD]
    game.update_coins(0, 0)
    before = game.supply[Card.PROVINCE]
    buf = io.StringIO()
    turn = execute_bot_turn(0, 0, game, buf)
    assert turn == 0
    assert game.supply[Card.PROVINCE] == before - 1
    assert Card.PROVINCE in game.discards[0]
    assert game.whose_turn == 1
    assert "Player 0 buys card Province" in buf.getvalue()


def test_bot_buys_silver(game):
    game.hands[0] = [Card.SILVER, Card.COPPER]
    game.update_coins(0, 0)
    execute_bot_turn(0, 0, game, io.StringIO())
    assert Card.SILVER in game.discards[0]


def test_bot_last_player_advances_turn_number(game):
    game.end_turn()
    game.hands[1] = []
    game.update_coins(1, 0)
    buf = io.StringIO()
    turn = execute_bot_turn(1, 4, game, buf)
    assert turn == 5
    assert game.whose_turn == 0
    assert "buys card" not in buf.getvalue()