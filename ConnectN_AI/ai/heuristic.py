"""Line scoring for connect-N evaluation (exponential, base 16)."""

from ConnectN_AI.Cell import PLAYER_A, PLAYER_B

SCORE_BASE = 16


def evaluate_line(chars):
    """
    Score one line from its occupants. Returns (score, winner).

    A line holding both players is blocked and worth 0. Otherwise each extra
    stone multiplies the value by SCORE_BASE: positive for X, negative for O.
    The winner is set only when every cell of the line belongs to one side.
    """
    count_a = 0
    count_b = 0
    for ch in chars:
        if ch == PLAYER_A:
            count_a += 1
        elif ch == PLAYER_B:
            count_b += 1

    if count_a and count_b:
        return 0, None
    if count_a:
        winner = PLAYER_A if count_a == len(chars) else None
        return SCORE_BASE ** (count_a - 1), winner
    if count_b:
        winner = PLAYER_B if count_b == len(chars) else None
        return -(SCORE_BASE ** (count_b - 1)), winner
    return 0, None


def score_board(manager):
    """Recompute the total score from scratch, ignoring the cached line scores."""
    total = 0
    for line in manager.lines:
        score, _ = evaluate_line([cell.char for cell in line.cells])
        total += score
    return total


def winners_on_board(manager):
    """Return the winner of every completed line, in line order."""
    found = []
    for line in manager.lines:
        _, winner = evaluate_line([cell.char for cell in line.cells])
        if winner is not None:
            found.append(winner)
    return found
