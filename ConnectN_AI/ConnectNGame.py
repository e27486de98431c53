"""Console match loop: alternates players over a GameManager until a win or a full board."""

from ConnectN_AI.Cell import PLAYER_A, PLAYER_B, opponent
from ConnectN_AI.Player import UNDO
from ConnectN_AI.engine import referee

DEPTH_ERROR = "AI depth must be an integer greater than or equal to 1."


class ConnectNGame:
    def __init__(self, manager, x_player, o_player, logger=print, renderer=None):
        self.manager = manager
        self.players = {PLAYER_A: x_player, PLAYER_B: o_player}
        self.logger = logger
        self.renderer = renderer

    def set_depth(self, value):
        """Change the search depth between moves. Accepts ints or numeric strings."""
        try:
            depth = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(DEPTH_ERROR) from exc
        if not depth.is_integer() or depth < 1:
            raise ValueError(DEPTH_ERROR)
        self.manager.depth = int(depth)
        return self.manager.depth

    def play(self):
        """Run a single game. Returns "X" or "O" for a win, None for a draw."""
        manager = self.manager
        game_result = None
        last_move = None

        while True:
            if self.renderer:
                self.renderer(manager, last_move)

            color = manager.whose_turn()
            player = self.players[color]

            try:
                move = player.next_move(manager)
                if move == UNDO:
                    self._undo_for_human()
                    last_move = manager.history[-1] if manager.history else None
                    continue
                if move is None:
                    # Search had nothing to branch on; take any legal cell.
                    move = manager.get_legal_moves()[0]
                    self.logger(f"No searched move for {color}; playing {move}")
                move = referee.normalize_move(move)
                referee.check_move(move, manager)
                manager.make_move(move)
                last_move = move
            except ValueError as exc:
                self.logger(f"Disqualification: {color} - {exc}")
                game_result = opponent(color)
                break

            self.logger(f"Move {len(manager.history)}: {color} {move}")

            if manager.winner is not None:
                self.logger(f"Winner: {manager.winner}")
                game_result = manager.winner
                break
            if manager.is_full():
                self.logger("Result: Draw (board full)")
                game_result = None
                break

        if self.renderer:
            self.renderer(manager, last_move)
        return game_result

    def _undo_for_human(self):
        """Take back one ply, then keep going until a human is to move again."""
        manager = self.manager
        if not manager.history:
            self.logger("Nothing to undo")
            return
        manager.undo_move()
        undone = 1
        while manager.history and not self.players[manager.whose_turn()].is_human:
            manager.undo_move()
            undone += 1
        self.logger(f"Undo: took back {undone} move(s)")
