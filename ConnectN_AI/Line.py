"""One potential winning run of exactly num_to_win cells."""

from ConnectN_AI.ai import heuristic


class Line:
    def __init__(self, index=0):
        # Slot of this line in GameManager.lines; cells refer back to it by index.
        self.index = index
        self.cells = []
        self.score = 0
        self.winner = None

    def add_cell(self, cell):
        """Append a cell and register this line with it."""
        self.cells.append(cell)
        cell.lines.append(self.index)

    def calculate_score(self):
        """Recompute score and winner from the current occupants."""
        self.score, self.winner = heuristic.evaluate_line([cell.char for cell in self.cells])
        return self.score

    def positions(self):
        return [cell.position for cell in self.cells]

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f"Line({self.index}, {self.positions()}, score={self.score})"
