"""Read, recognise and solve sudoku grids from photographs."""

__version__ = "0.1.0"