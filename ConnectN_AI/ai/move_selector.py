"""Candidate move generation: empty cells on lines touched by past moves, weight-ranked."""

from collections import defaultdict


def center_move(manager):
    return (manager.num_rows // 2, manager.num_cols // 2)


def weighted_candidates(manager) -> list[tuple[tuple[int, int], int]]:
    """
    Return [(position, weight), ...] sorted by weight, descending.
    - No moves yet: the board center only (weight 0).
    - Someone already won: nothing.
    - Otherwise every empty cell sharing a line with a past move. Its weight is
      the sum of abs(line.score) over each (past move, line) pair that reached
      it, so a line touched by two past moves counts twice.
    Equal weights keep discovery order (history, then line, then cell order).
    """
    if not manager.history:
        return [(center_move(manager), 0)]

    if manager.winner is not None:
        return []

    grid = manager.grid
    lines = manager.lines
    # Keyed by position value; dict insertion order is the discovery order.
    weights: defaultdict[tuple[int, int], int] = defaultdict(int)

    for row, col in manager.history:
        for line_idx in grid[row][col].lines:
            line = lines[line_idx]
            weight = abs(line.score)
            for cell in line.cells:
                if cell.is_empty():
                    weights[cell.position] += weight

    # sorted() is stable with reverse=True as well.
    return sorted(weights.items(), key=lambda kv: kv[1], reverse=True)


def generate_candidates(manager):
    """Reduced, ordered move list used for search branching."""
    return [pos for pos, _ in weighted_candidates(manager)]
