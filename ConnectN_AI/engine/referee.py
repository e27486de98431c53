"""Move validation for the match driver: shape, bounds, occupancy, finished games."""


def normalize_move(move):
    """Return move as a (row, col) tuple of ints; raise ValueError otherwise."""
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise ValueError("Move must be a (row, col) pair") from exc
    if not isinstance(row, int) or not isinstance(col, int):
        raise ValueError("Move must be a (row, col) pair")
    return row, col


def check_move(move, manager):
    """
    Validate a move before it reaches GameManager.make_move.
    Raises ValueError on invalid moves.
    """
    row, col = normalize_move(move)
    if manager.winner is not None:
        raise ValueError("Game already won")
    if not manager.in_bounds((row, col)):
        raise ValueError("Move out of bounds")
    if not manager.is_legal_move((row, col)):
        raise ValueError("Cell already occupied")
    return True
