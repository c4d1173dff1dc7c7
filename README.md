# dominionsim

A small rules engine for the Dominion deck-building card game. It comes with
a deterministic multi-stream random number generator, a scripted two-player
match and an interactive command-line table with optional computer players.

## Installing

```
pip install .
```

Add the `test` extra to get pytest: `pip install .[test]`.

## Watching two bots play

```
dominion-playdom 10
```

The argument is the random seed; without it a usage line is printed and the
command exits with status 1. The game uses a fixed set of ten kingdom cards
(`dominionsim.playdom.DEFAULT_KINGDOM`). Player 0 plays a Smithy when it has
one and buys Provinces, Gold, up to two Smithies, or Silver; player 1 plays an
Adventurer when it has one and buys Provinces, up to two Adventurers, Gold, or
Silver. Each move is printed, then the final scores. From Python,
`dominionsim.playdom.play_game(seed, file=None)` does the same and returns the
final `GameState`.

## Playing at the command line

```
dominion-player 1
```

The seed must be a single positive integer, otherwise a usage line is printed.
Type `help` at the `$ ` prompt for the commands. Commands are matched on their
first four letters:

- `init <players> <bots>` starts a game with 2 to 4 players; the last
  `<bots>` seats are played by the computer (`execute_bot_turn`), which buys
  Province, Duchy (once Provinces are gone), Gold or Silver by the coins in hand.
- `show`, `stat` show your hand and played cards, or the turn's status.
- `play <hand index> [choice] [choice] [choice]` plays an action card.
- `buy <supply number>` buys a card; `supp` lists the supply.
- `end` ends your turn; `num` and `whos` tell the hand size and whose turn it is.
- `add <card number>` puts any kingdom card into your hand.
- `resign` ends the turn and prints the scores; `exit` leaves.

When the game ends the scores, the winners and every player's piles are
printed. `dominionsim.player.run(seed, lines=None, file=None)` runs the same
loop over any iterable of command lines and returns the final `GameState`.

## Using the library

```python
from dominionsim.cards import Card
from dominionsim.game import GameError, initialize_game
from dominionsim.effects import play_card

kingdom = [Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE,
           Card.MINION, Card.MINE, Card.CUTPURSE, Card.SEA_HAG,
           Card.TRIBUTE, Card.SMITHY]
state = initialize_game(2, kingdom, 1)
print(state.num_hand_cards(), state.coins)
try:
    state.buy_card(Card.SILVER)
except GameError as err:
    print("cannot buy:", err)
state.end_turn()
print(state.is_game_over(), state.get_winners())
```

The modules:

- `dominionsim.cards`: the `Card` and `Phase` enums, `get_cost`, `card_cost`,
  `card_name` and `phase_name`.
- `dominionsim.game`: `GameState` (shuffling, drawing, buying, gaining,
  discarding, turns, scoring and `get_winners`), `initialize_game` and
  `GameError`.
- `dominionsim.effects`: `play_card` and `card_effect` for the kingdom cards.
- `dominionsim.interface`: text display of hands, decks, discards, the supply,
  the turn state and scores, plus `select_kingdom_cards` and the computer player.
- `dominionsim.rngs`: `RandomStreams`, a Lehmer generator with 256 streams, and
  `self_test()`, which checks it against its reference states.

Rule violations, such as buying with no buys left or playing a card that is
not an action, raise `GameError`. Shuffling draws from the game's
`RandomStreams`, so a given seed always gives the same game. Note that
`RandomStreams.put_seed(0)` asks for a seed on standard input, and a negative
seed takes one from the clock.

## What it does not do

There is no saving or loading of games and no play over a network. The
command-line table always uses the fixed kingdom of the scripted match;
`select_kingdom_cards` is available to library users but is not offered as a
command.