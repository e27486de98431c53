"""Abstract player interface for human or AI controllers."""

from ConnectN_AI.engine import referee

# Returned by next_move to ask the driver to take moves back.
UNDO = "undo"


class Player:
    is_human = False

    def __init__(self, color):
        self.color = color

    def next_move(self, manager):
        """Return (row, col) for the next move, or UNDO."""
        raise NotImplementedError


class HumanPlayer(Player):
    is_human = True

    def __init__(self, color, input_fn=input, output_fn=print):
        super().__init__(color)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, manager):
        """Text-input player; re-prompts until it gets a legal move or 'undo'."""
        prompt = f"{self.color} to move, enter 'row col' (0-indexed) or 'undo': "
        while True:
            raw = self.input_fn(prompt).strip()
            if raw.lower() == UNDO:
                return UNDO
            try:
                row_str, col_str = raw.split()
                move = (int(row_str), int(col_str))
            except ValueError:
                self.output_fn("Invalid input format; expected two integers")
                continue
            try:
                referee.check_move(move, manager)
            except ValueError as exc:
                self.output_fn(f"Invalid move: {exc}")
                continue
            return move
