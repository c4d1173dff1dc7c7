"""Kingdom card effects and playing a card from the hand."""

from __future__ import annotations

from .cards import TREASURE_VALUES, Card, Phase, get_cost
from .game import Destination, GameError, GameState

_TREASURES = frozenset(TREASURE_VALUES)
_VICTORY = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)
_EMPTY = -1


def _hand_at(state: GameState, player: int, pos: int) -> int:
    hand = state.hands[player]
    if not 0 <= pos < len(hand):
        raise GameError(f"player {player} has no card at hand position {pos}")
    return hand[pos]


def _try_gain(state: GameState, card: int, to: int, player: int) -> bool:
    """Gain a card if the supply allows it; an empty pile is silently skipped."""
    try:
        state.gain_card(card, to, player)
    except GameError:
        return False
    return True


def _draw(state: GameState, player: int, count: int) -> None:
    for _ in range(count):
        state.draw_card(player)


def _discard_whole_hand(state: GameState, player: int, hand_pos: int) -> None:
    hand = state.hands[player]
    while hand:
        state.discard_card(min(hand_pos, len(hand) - 1), player, False)


def _next_player(state: GameState) -> int:
    nxt = state.whose_turn + 1
    return 0 if nxt > state.num_players - 1 else nxt


def _adventurer(state: GameState, player: int) -> None:
    revealed = []
    treasures = 0
    while treasures < 2:
        card = state.draw_card(player)
        if card is None:
            break
        if card in _TREASURES:
            treasures += 1
        else:
            state.hands[player].pop()
            revealed.append(card)
    state.discards[player].extend(reversed(revealed))


def _council_room(state: GameState, player: int, hand_pos: int) -> None:
    _draw(state, player, 4)
    state.num_buys += 1
    for other in range(state.num_players):
        if other != player:
            state.draw_card(other)
    state.discard_card(hand_pos, player, False)


def _feast(state: GameState, player: int, choice1: int) -> None:
    if state.supply_count(choice1) <= 0:
        raise GameError(f"no cards of type {choice1} left in the supply")
    state.coins = 5
    if state.coins < get_cost(choice1):
        raise GameError("That card is too expensive!")
    state.gain_card(choice1, Destination.DISCARD, player)


def _discard_first(state: GameState, player: int, card: int) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player, False)


def _mine(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    trashed = _hand_at(state, player, choice1)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("mine can only trash a treasure")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"unknown card {choice2}")
    if get_cost(trashed) + 3 > get_cost(choice2):
        raise GameError("mine cannot gain that card")
    _try_gain(state, choice2, Destination.HAND, player)
    state.discard_card(hand_pos, player, False)
    _discard_first(state, player, trashed)


def _remodel(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    trashed = _hand_at(state, player, choice1)
    if get_cost(trashed) + 2 > get_cost(choice2):
        raise GameError("remodel cannot gain that card")
    _try_gain(state, choice2, Destination.DISCARD, player)
    state.discard_card(hand_pos, player, False)
    _discard_first(state, player, trashed)


def _gain_estate_for_baron(state: GameState, player: int) -> None:
    if state.supply_count(Card.ESTATE) > 0:
        _try_gain(state, Card.ESTATE, Destination.DISCARD, player)
        # The supply pile is reduced a second time on top of the gain.
        state.supply[Card.ESTATE] -= 1


def _baron(state: GameState, player: int, choice1: int) -> None:
    state.num_buys += 1
    hand = state.hands[player]
    if choice1 > 0 and Card.ESTATE in hand:
        hand.remove(Card.ESTATE)
        state.coins += 4
        state.discards[player].append(Card.ESTATE)
    else:
        _gain_estate_for_baron(state, player)


def _minion(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    state.num_actions += 1
    state.discard_card(hand_pos, player, False)
    if choice1:
        state.coins += 2
    elif choice2:
        _discard_whole_hand(state, player, hand_pos)
        _draw(state, player, 4)
        for other in range(state.num_players):
            if other != player and len(state.hands[other]) > 4:
                _discard_whole_hand(state, other, hand_pos)
                _draw(state, other, 4)


def _steward(state: GameState, player: int, choice1: int, choice2: int, choice3: int,
             hand_pos: int) -> None:
    if choice1 == 1:
        _draw(state, player, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, player, True)
        state.discard_card(choice3, player, True)
    state.discard_card(hand_pos, player, False)


def _reveal_top(state: GameState, player: int) -> int:
    deck = state.decks[player]
    if not deck:
        discard = state.discards[player]
        if not discard:
            return _EMPTY
        deck.extend(discard)
        discard.clear()
        state.shuffle(player)
    return deck.pop()


def _tribute(state: GameState, player: int) -> None:
    nxt = _next_player(state)
    deck, discard = state.decks[nxt], state.discards[nxt]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed = [deck.pop(), _EMPTY]
        elif discard:
            revealed = [discard.pop(), _EMPTY]
        else:
            revealed = [_EMPTY, _EMPTY]
    else:
        first = _reveal_top(state, nxt)
        revealed = [first, _reveal_top(state, nxt)]

    if revealed[0] == revealed[1] and revealed[1] != _EMPTY:
        state.played_cards.append(revealed[1])
        revealed[1] = _EMPTY

    for card in revealed:
        if card == _EMPTY:
            continue
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORY:
            _draw(state, player, 2)
        else:
            state.num_actions += 2


def _ambassador(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    if not 0 <= choice2 <= 2:
        raise GameError("ambassador returns 0 to 2 cards")
    if choice1 == hand_pos:
        raise GameError("ambassador cannot reveal itself")
    hand = state.hands[player]
    revealed = _hand_at(state, player, choice1)
    # Copies are counted by comparing hand positions with the revealed card.
    copies = 1 if revealed < len(hand) and revealed not in (hand_pos, choice1) else 0
    if copies < choice2:
        raise GameError("not enough copies in hand to return")

    state.supply_count(revealed)
    state.supply[revealed] += choice2
    for other in range(state.num_players):
        if other != player:
            _try_gain(state, revealed, Destination.DISCARD, other)

    state.discard_card(hand_pos, player, False)

    for _ in range(choice2):
        if choice1 >= len(hand):
            break
        target = hand[choice1]
        state.discard_card(hand.index(target), player, True)


def _cutpurse(state: GameState, player: int, hand_pos: int) -> None:
    state.update_coins(player, 2)
    for other in range(state.num_players):
        if other != player and Card.COPPER in state.hands[other]:
            state.discard_card(state.hands[other].index(Card.COPPER), other, False)
    state.discard_card(hand_pos, player, False)


def _embargo(state: GameState, player: int, choice1: int, hand_pos: int) -> None:
    state.coins += 2
    if state.supply_count(choice1) == -1:
        raise GameError(f"supply pile {choice1} is not in the game")
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, player, True)


def _outpost(state: GameState, player: int, hand_pos: int) -> None:
    state.outpost_played += 1
    state.discard_card(hand_pos, player, False)


def _salvager(state: GameState, player: int, choice1: int, hand_pos: int) -> None:
    state.num_buys += 1
    if choice1:
        state.coins += get_cost(state.hand_card(choice1))
        state.discard_card(choice1, player, True)
    state.discard_card(hand_pos, player, False)


def _sea_hag(state: GameState, player: int) -> None:
    for other in range(state.num_players):
        if other == player:
            continue
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state: GameState, player: int, hand_pos: int) -> None:
    hand = state.hands[player]
    other = next(
        (i for i, card in enumerate(hand) if card == Card.TREASURE_MAP and i != hand_pos),
        None,
    )
    if other is None:
        raise GameError("no second treasure map in hand")
    for pos in sorted((hand_pos, other), reverse=True):
        state.discard_card(pos, player, True)
    for _ in range(4):
        _try_gain(state, Card.GOLD, Destination.DECK, player)


def card_effect(card: int, choice1: int, choice2: int, choice3: int,
                state: GameState, hand_pos: int) -> None:
    """Apply the effect of ``card`` played from ``hand_pos`` by the current player.

    Raises GameError when the card cannot be played with the given choices.
    """
    player = state.whose_turn
    if card == Card.ADVENTURER:
        _adventurer(state, player)
    elif card == Card.COUNCIL_ROOM:
        _council_room(state, player, hand_pos)
    elif card == Card.FEAST:
        _feast(state, player, choice1)
    elif card == Card.GARDENS:
        raise GameError("gardens cannot be played")
    elif card == Card.MINE:
        _mine(state, player, choice1, choice2, hand_pos)
    elif card == Card.REMODEL:
        _remodel(state, player, choice1, choice2, hand_pos)
    elif card == Card.SMITHY:
        _draw(state, player, 3)
        state.discard_card(hand_pos, player, False)
    elif card == Card.VILLAGE:
        state.draw_card(player)
        state.num_actions += 2
        state.discard_card(hand_pos, player, False)
    elif card == Card.BARON:
        _baron(state, player, choice1)
    elif card == Card.GREAT_HALL:
        state.draw_card(player)
        state.num_actions += 1
        state.discard_card(hand_pos, player, False)
    elif card == Card.MINION:
        _minion(state, player, choice1, choice2, hand_pos)
    elif card == Card.STEWARD:
        _steward(state, player, choice1, choice2, choice3, hand_pos)
    elif card == Card.TRIBUTE:
        _tribute(state, player)
    elif card == Card.AMBASSADOR:
        _ambassador(state, player, choice1, choice2, hand_pos)
    elif card == Card.CUTPURSE:
        _cutpurse(state, player, hand_pos)
    elif card == Card.EMBARGO:
        _embargo(state, player, choice1, hand_pos)
    elif card == Card.OUTPOST:
        _outpost(state, player, hand_pos)
    elif card == Card.SALVAGER:
        _salvager(state, player, choice1, hand_pos)
    elif card == Card.SEA_HAG:
        _sea_hag(state, player)
    elif card == Card.TREASURE_MAP:
        _treasure_map(state, player, hand_pos)
    else:
        raise GameError(f"card {card} has no effect to play")


def play_card(state: GameState, hand_pos: int, choice1: int = 0, choice2: int = 0,
              choice3: int = 0) -> None:
    """Play the action card at ``hand_pos`` of the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError(f"card {card} is not an action card")
    card_effect(card, choice1, choice2, choice3, state, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)