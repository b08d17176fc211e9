"""Backtracking sudoku solver working on flat lists of grid characters.

Cell (x, y) of a grid is stored at index x * cols + y. Empty cells are
written '.' or '0'.
"""

import sys

from .verbose import FatalError

SEPARATOR = "-" * 25


def _char(value):
    return chr(value + ord("0"))


def is_valid(grid, rows, cols):
    """Return True when the first rows*cols cells hold only digits or dots."""
    cells = rows * cols
    if len(grid) < cells:
        return False
    return all(c == "." or "0" <= c <= "9" for c in grid[:cells])


def clean(grid, rows, cols):
    """Replace every '.' with '0' in place; raise FatalError on an invalid grid."""
    if not is_valid(grid, rows, cols):
        raise FatalError("Invalid GRID")
    for index, cell in enumerate(grid[:rows * cols]):
        if cell == ".":
            grid[index] = "0"


def in_column(grid, rows, cols, x, value):
    """Return True when `value` appears among the cells (x, 0..rows-1)."""
    start = x * cols
    return _char(value) in grid[start:start + rows]


def in_line(grid, cols, y, value):
    """Return True when `value` appears among the cells (0..cols-1, y)."""
    return _char(value) in grid[y::cols][:cols]


def in_square(grid, cols, x, y, value):
    """Return True when `value` appears in the 3x3 box holding cell (x, y)."""
    target = _char(value)
    top = x - x % 3
    left = y - y % 3
    return any(
        grid[i * cols + j] == target
        for i in range(top, top + 3)
        for j in range(left, left + 3)
    )


def _solve_from(grid, rows, cols, x, y):
    if x > rows - 1:
        x, y = 0, y + 1
    if y > cols - 1:
        return True
    index = x * cols + y
    if grid[index] not in (".", "0"):
        return _solve_from(grid, rows, cols, x + 1, y)
    for value in range(1, rows + 1):
        if (
            in_column(grid, rows, cols, x, value)
            or in_line(grid, cols, y, value)
            or in_square(grid, cols, x, y, value)
        ):
            continue
        grid[index] = _char(value)
        if _solve_from(grid, rows, cols, x + 1, y):
            return True
        grid[index] = "0"
    return False


def solve(grid, rows, cols):
    """Solve `grid` (a mutable list of characters) in place.

    Returns True when a solution was found. Raises FatalError when the grid
    holds characters other than digits and dots.
    """
    clean(grid, rows, cols)
    return _solve_from(grid, rows, cols, 0, 0)


def format_grid(grid, rows, cols):
    """Render the grid with box separators, as a printable string."""
    parts = []
    for i in range(rows):
        if i % 3 == 0:
            parts.append("\n" + SEPARATOR)
        parts.append("\n")
        row = grid[i * cols:(i + 1) * cols]
        for j, cell in enumerate(row):
            if j % 3 == 0:
                parts.append("| ")
            parts.append(f"{cell} ")
        parts.append("|")
    parts.append(f"\n{SEPARATOR}\n")
    return "".join(parts)


def format_result(grid):
    """Render a 9x9 grid in the layout of the solver's result file."""
    parts = []
    for i, cell in enumerate(grid[:81]):
        if i:
            if i % 3 == 0:
                parts.append(" ")
            if i % 9 == 0:
                parts.append("\n")
            if i % 27 == 0:
                parts.append("\n")
        parts.append(cell)
    return "".join(parts)


def read_grid(path):
    """Read a grid file, dropping spaces and newlines."""
    with open(path, encoding="utf-8") as handle:
        return [c for c in handle.read() if c not in " \n"]


def main(argv=None):
    """Solve the grid in the named file and write it to '<file>.result'."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: solver <input_file>")
        return 1
    path = args[0]
    try:
        grid = read_grid(path)
    except OSError:
        print(f"Error: Could not open file {path}")
        return 1
    try:
        solved = solve(grid, 9, 9)
    except FatalError as exc:
        print(exc)
        return 1
    if not solved:
        print("Error: Could not solve the grid")
        return 1
    with open(path + ".result", "w", encoding="utf-8") as output:
        output.write(format_result(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())