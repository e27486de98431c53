"""Plain-text board dump for the console driver."""

EMPTY_MARK = "."


def board_to_text(manager, last_move=None):
    """Rows top to bottom with row/column indices; the last move is bracketed."""
    width = len(str(max(manager.num_rows, manager.num_cols) - 1)) + 2
    header = " " * width + "".join(str(j).rjust(width) for j in range(manager.num_cols))
    rows = [header]
    for i, row in enumerate(manager.grid):
        marks = []
        for cell in row:
            mark = cell.char or EMPTY_MARK
            if cell.position == last_move:
                mark = f"[{mark}]"
            marks.append(mark.rjust(width))
        rows.append(str(i).rjust(width) + "".join(marks))
    return "\n".join(rows)


def print_board(manager, last_move=None):
    print(board_to_text(manager, last_move))
    print(f"score={manager.score} to_move={manager.whose_turn()}")
