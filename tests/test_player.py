import io

from dominionsim.cards import Card
from dominionsim.player import main, run


def _run(*lines, seed=1):
    buf = io.StringIO()
    state = run(seed, [line + "\n" for line in lines], buf)
    return state, buf.getvalue()


def test_greeting_and_whos():
    _, out = _run("whos", "exit")
    assert out.startswith('Please enter a command or "help" for commands\n')
    assert "Player 0's turn\n" in out


def test_help():
    _, out = _run("help", "exit")
    assert "Commands are: \n" in out


def test_num_reports_hand_size():
    state, out = _run("num", "exit")
    assert f"There are {len(state.hands[0])} cards in your hand." in out
    assert len(state.hands[0]) == 5


def test_buy_too_expensive():
    _, out = _run("buy 3", "exit")
    assert "Player 0 cannot buy card 3, Province" in out


def test_buy_free_card():
    state, out = _run("buy 0", "exit")
    assert "Player 0 buys card 0, Curse" in out
    assert Card.CURSE in state.discards[0]


def test_init_then_end_turn():
    state, out = _run("init 2 0", "end", "whos", "exit")
    assert "Player 1's turn number 0" in out
    assert "Player 1's turn\n" in out
    assert state.whose_turn == 1


def test_end_before_init_does_nothing():
    state, out = _run("end", "exit")
    assert "turn number" not in out
    assert state.whose_turn == 0


def test_invalid_init_keeps_game_unstarted():
    state, out = _run("init 5 0", "show", "exit")
    assert "hand:" not in out
    assert state.num_players == 2


def test_all_bots_play_to_the_end():
    state, out = _run("init 2 2")
    assert state.is_game_over()
    assert "the winner(s) are:" in out
    assert "Executing Bot Player 0" in out


def test_add_then_play_village():
    state, out = _run("init 2 0", "add 14", "play 5", "exit")
    assert "Player 0 adds Village to their hand" in out
    assert "Player 0 plays Village" in out
    assert Card.VILLAGE in state.played_cards
    assert state.num_actions == 2


def test_play_treasure_fails():
    state, out = _run("init 2 0", "play 99", "exit")
    assert "Player 0 cannot play card 99" in out


def test_show_after_init():
    _, out = _run("show", "init 2 0", "show", "exit")
    assert out.count("Player 0's hand:") == 1


def test_resign_prints_scores():
    state, out = _run("init 2 0", "resign", "whos")
    assert f"Player 0 has a score of {state.score_for(0)}" in out
    assert state.whose_turn == 1
    assert "Player 1's turn\n" not in out


def test_four_letter_prefix_commands():
    _, out = _run("supply", "exit")
    assert "#   Card          Cost   Copies" in out


def test_three_letter_commands_need_exact_match():
    state, _ = _run("addx 7", "exit")
    assert Card.ADVENTURER not in state.hands[0]


def test_exit_stops_reading():
    _, out = _run("exit", "whos")
    assert "Player 0's turn\n" not in out


def test_input_running_out_ends_session():
    state, out = _run("stat")
    assert out.endswith("$ $ ")
    assert state.whose_turn == 0


def test_main_rejects_bad_seed(capsys):
    assert main(["0"]) == 0
    assert "Usage: player" in capsys.readouterr().out


def test_main_requires_one_argument(capsys):
    assert main([]) == 0
    assert "Usage: player" in capsys.readouterr().out