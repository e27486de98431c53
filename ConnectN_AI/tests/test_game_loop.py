"""Tests for ConnectNGame turn handling, undo, and end-of-game state."""

import pytest

from ConnectN_AI.AIPlayer import AIPlayer
from ConnectN_AI.Cell import PLAYER_A, PLAYER_B
from ConnectN_AI.ConnectNGame import ConnectNGame
from ConnectN_AI.GameManager import GameManager
from ConnectN_AI.Player import HumanPlayer, Player, UNDO


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves, human=False):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0
        self.is_human = human

    def next_move(self, manager):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_x_wins_and_final_render_sees_winner():
    m = GameManager(3, 3, 3)
    x = SeqPlayer(PLAYER_A, [(0, 0), (0, 1), (0, 2)])
    o = SeqPlayer(PLAYER_B, [(1, 0), (1, 1)])
    logs = []
    frames = []

    def renderer(manager, last_move):
        frames.append((manager.winner, last_move))

    result = ConnectNGame(m, x, o, logger=logs.append, renderer=renderer).play()

    assert result == PLAYER_A
    assert frames[-1] == (PLAYER_A, (0, 2))
    assert logs[-1] == "Winner: X"
    assert "Move 1: X (0, 0)" in logs


def test_full_board_is_a_draw():
    m = GameManager(1, 4, 3)
    x = SeqPlayer(PLAYER_A, [(0, 0), (0, 2)])
    o = SeqPlayer(PLAYER_B, [(0, 1), (0, 3)])
    logs = []
    result = ConnectNGame(m, x, o, logger=logs.append).play()
    assert result is None
    assert logs[-1] == "Result: Draw (board full)"


def test_illegal_move_disqualifies_player():
    m = GameManager(3, 3, 3)
    x = SeqPlayer(PLAYER_A, [(1, 1), (1, 1)])
    o = SeqPlayer(PLAYER_B, [(0, 0)])
    logs = []
    result = ConnectNGame(m, x, o, logger=logs.append).play()
    assert result == PLAYER_B
    assert logs[-1] == "Disqualification: X - Cell already occupied"
    assert m.history == [(1, 1), (0, 0)]


def test_out_of_bounds_and_malformed_moves_disqualify():
    m = GameManager(3, 3, 3)
    logs = []
    result = ConnectNGame(m, SeqPlayer(PLAYER_A, [(5, 5)]), SeqPlayer(PLAYER_B, []), logger=logs.append).play()
    assert result == PLAYER_B
    assert "Move out of bounds" in logs[-1]

    m = GameManager(3, 3, 3)
    result = ConnectNGame(m, SeqPlayer(PLAYER_A, [(1, 1)]), SeqPlayer(PLAYER_B, ["b2"]), logger=logs.append).play()
    assert result == PLAYER_A
    assert "(row, col) pair" in logs[-1]


def test_undo_rewinds_to_the_humans_turn():
    m = GameManager(3, 3, 3)
    x = SeqPlayer(PLAYER_A, [(1, 1), UNDO, (0, 0), (0, 1), (0, 2)], human=True)
    o = SeqPlayer(PLAYER_B, [(2, 2), (1, 0), (2, 0)])
    logs = []
    result = ConnectNGame(m, x, o, logger=logs.append).play()

    assert "Undo: took back 2 move(s)" in logs
    assert result == PLAYER_A
    assert m.history == [(0, 0), (1, 0), (0, 1), (2, 0), (0, 2)]


def test_undo_between_humans_takes_back_one_move():
    m = GameManager(3, 3, 3)
    x = SeqPlayer(PLAYER_A, [(1, 1), (0, 0), (0, 1), (0, 2)], human=True)
    o = SeqPlayer(PLAYER_B, [UNDO, (2, 2), (1, 0), (2, 0)], human=True)
    logs = []
    result = ConnectNGame(m, x, o, logger=logs.append).play()
    assert "Undo: took back 1 move(s)" in logs
    assert result == PLAYER_A
    assert m.history[0] == (0, 0)


def test_undo_on_empty_history_is_ignored():
    m = GameManager(3, 3, 3)
    x = SeqPlayer(PLAYER_A, [UNDO, (0, 0), (0, 1), (0, 2)], human=True)
    o = SeqPlayer(PLAYER_B, [(1, 0), (1, 1)])
    logs = []
    assert ConnectNGame(m, x, o, logger=logs.append).play() == PLAYER_A
    assert "Nothing to undo" in logs


def test_ai_vs_ai_tic_tac_toe_draws():
    m = GameManager(3, 3, 3, depth=9)
    stats = []
    game = ConnectNGame(m, AIPlayer(PLAYER_A, stats=stats), AIPlayer(PLAYER_B, stats=stats), logger=lambda *_: None)
    assert game.play() is None
    assert len(stats) == 9
    assert [s["player"] for s in stats[:2]] == [PLAYER_A, PLAYER_B]


def test_ai_completes_a_prepared_win():
    m = GameManager(5, 5, 4, depth=2)
    for mv in [(2, 0), (0, 0), (2, 1), (0, 4), (2, 2), (4, 4)]:
        m.make_move(mv)
    logs = []
    result = ConnectNGame(m, AIPlayer(PLAYER_A), SeqPlayer(PLAYER_B, []), logger=logs.append).play()
    assert result == PLAYER_A
    assert m.winner == PLAYER_A
    assert m.history[-1] == (2, 3)
    assert logs == ["Move 7: X (2, 3)", "Winner: X"]


def test_ai_without_candidates_falls_back_to_a_legal_move(monkeypatch):
    from ConnectN_AI.ai import search_minimax

    monkeypatch.setattr(search_minimax, "choose_move", lambda *args, **kwargs: None)
    m = GameManager(3, 3, 3)
    x = AIPlayer(PLAYER_A)
    o = SeqPlayer(PLAYER_B, [(2, 2), (2, 1)])
    logs = []
    result = ConnectNGame(m, x, o, logger=logs.append).play()
    assert result == PLAYER_A
    assert m.history[:3] == [(0, 0), (2, 2), (0, 1)]
    assert "No searched move for X; playing (0, 0)" in logs


@pytest.mark.parametrize("value, expected", [(3, 3), ("5", 5), ("2.0", 2), (1, 1)])
def test_set_depth_accepts_positive_integers(value, expected):
    game = ConnectNGame(GameManager(3, 3, 3), None, None)
    assert game.set_depth(value) == expected
    assert game.manager.depth == expected


@pytest.mark.parametrize("value", [0, -2, "2.5", "abc", None])
def test_set_depth_rejects_bad_values(value):
    game = ConnectNGame(GameManager(3, 3, 3, depth=4), None, None)
    with pytest.raises(ValueError, match="AI depth must be an integer"):
        game.set_depth(value)
    assert game.manager.depth == 4


def test_human_player_reprompts_until_legal():
    m = GameManager(3, 3, 3)
    m.make_move((1, 1))
    answers = iter(["", "nope", "9 9", "1 1", "0 2"])
    printed = []
    player = HumanPlayer(PLAYER_B, input_fn=lambda _prompt: next(answers), output_fn=printed.append)

    assert player.next_move(m) == (0, 2)
    assert printed == [
        "Invalid input format; expected two integers",
        "Invalid input format; expected two integers",
        "Invalid move: Move out of bounds",
        "Invalid move: Cell already occupied",
    ]


def test_human_player_undo_command():
    m = GameManager(3, 3, 3)
    player = HumanPlayer(PLAYER_A, input_fn=lambda _prompt: " UNDO ")
    assert player.next_move(m) == UNDO
