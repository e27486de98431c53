"""Board state, winning-line bookkeeping, and incremental scoring for connect-N."""

from contextlib import contextmanager

from ConnectN_AI.Cell import Cell, EMPTY, PLAYER_A, PLAYER_B
from ConnectN_AI.Line import Line
from ConnectN_AI.ai import move_selector, search_minimax

# (row step, col step) for each line family, in the order lines are attached to cells.
LINE_DIRECTIONS = [
    (1, 0),   # vertical, downward
    (0, 1),   # horizontal, rightward
    (1, 1),   # diagonal, down-right
    (1, -1),  # diagonal, down-left
]


class GameManager:
    def __init__(self, num_rows=19, num_cols=19, num_to_win=5, player_goes_first=False, depth=4):
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError("board must have at least one row and one column")
        if not 0 < num_to_win <= max(num_rows, num_cols):
            raise ValueError("num_to_win must be between 1 and the longer board side")
        if depth < 1:
            raise ValueError("depth must be at least 1")

        self.num_rows = num_rows
        self.num_cols = num_cols
        self.num_to_win = num_to_win
        # Only decides which side a front end treats as human; X always plays the first ply.
        self.player_goes_first = player_goes_first
        self.depth = depth

        self.history = []
        self.score = 0
        self.winner = None

        self.grid = [[Cell((i, j)) for j in range(num_cols)] for i in range(num_rows)]
        self.lines = []
        self._build_lines()

    def _build_lines(self):
        """Create every line of length num_to_win that fits on the board."""
        n = self.num_to_win
        for i in range(self.num_rows):
            for j in range(self.num_cols):
                for di, dj in LINE_DIRECTIONS:
                    end_i = i + di * (n - 1)
                    end_j = j + dj * (n - 1)
                    if not self.in_bounds((end_i, end_j)):
                        continue
                    line = Line(index=len(self.lines))
                    for k in range(n):
                        line.add_cell(self.grid[i + di * k][j + dj * k])
                    self.lines.append(line)

    def in_bounds(self, position):
        row, col = position
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def cell_at(self, position):
        row, col = position
        return self.grid[row][col]

    def lines_through(self, position):
        """Lines containing position, in registration order."""
        return [self.lines[idx] for idx in self.cell_at(position).lines]

    def whose_turn(self):
        return PLAYER_A if len(self.history) % 2 == 0 else PLAYER_B

    def is_legal_move(self, position):
        return self.winner is None and self.cell_at(position).char == EMPTY

    def get_legal_moves(self):
        """All empty positions in row-major order; none once someone has won."""
        if self.winner is not None:
            return []
        return [
            (i, j)
            for i in range(self.num_rows)
            for j in range(self.num_cols)
            if self.grid[i][j].char == EMPTY
        ]

    def get_smart_legal_moves(self):
        return move_selector.generate_candidates(self)

    def is_full(self):
        return len(self.history) >= self.num_rows * self.num_cols

    def is_over(self):
        return self.winner is not None or self.is_full()

    def make_move(self, position):
        """Place the side to move at position; raise if the move is not legal."""
        row, col = position
        if not self.is_legal_move((row, col)):
            raise ValueError(f"illegal move {(row, col)}")
        cell = self.grid[row][col]
        cell.char = self.whose_turn()

        found = self._update_lines(cell)
        if found is not None:
            self.winner = found

        self.history.append((row, col))

    def undo_move(self):
        """
        Take back the last move. Always clears winner, even if some other line
        on the board is still complete.
        """
        if not self.history:
            raise ValueError("no moves to undo")
        row, col = self.history.pop()
        cell = self.grid[row][col]
        cell.char = EMPTY

        self._update_lines(cell)
        self.winner = None

    def _update_lines(self, cell):
        """
        Rescore the lines through cell and patch the running total.
        Returns the winner of the first completed line, in registration order.
        """
        found = None
        for idx in cell.lines:
            line = self.lines[idx]
            self.score -= line.score
            line.calculate_score()
            self.score += line.score
            if found is None and line.winner is not None:
                found = line.winner
        return found

    @contextmanager
    def simulate(self, position):
        """Play position for the duration of the block; always undone on exit."""
        self.make_move(position)
        try:
            yield self
        finally:
            self.undo_move()

    def get_ai_move(self):
        """Best move for the side to move at the configured depth (None if nothing to search)."""
        return search_minimax.choose_move(self)

    def __repr__(self):
        return (
            f"GameManager({self.num_rows}x{self.num_cols}, to_win={self.num_to_win}, "
            f"moves={len(self.history)}, score={self.score}, winner={self.winner!r})"
        )
