"""A single board position and the lines that pass through it."""

# Occupants: X always makes the first ply, O the second.
EMPTY = ""
PLAYER_A = "X"
PLAYER_B = "O"


def opponent(player):
    return PLAYER_B if player == PLAYER_A else PLAYER_A


class Cell:
    def __init__(self, position):
        # (row, col)
        self.position = position
        self.char = EMPTY
        # Indices into GameManager.lines; filled once while the board is built.
        self.lines = []

    def is_empty(self):
        return self.char == EMPTY

    def __repr__(self):
        return f"Cell({self.position}, {self.char or '.'!r})"
