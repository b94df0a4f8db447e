"""A board for placing ships and firing at them."""

from __future__ import annotations


class Board:
    """A grid of cells; 0 is water, a ship's cells hold the ship's size."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the board needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self._cells = [[0] * cols for _ in range(rows)]

    def _ship_cells(self, x: int, y: int, size: int, vertical: bool) -> list[tuple[int, int]]:
        if size < 1:
            raise ValueError("a ship has at least one cell")
        cells = [(x + i, y) if vertical else (x, y + i) for i in range(size)]
        for row, col in cells:
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise IndexError(f"cell ({row}, {col}) is off the board")
        return cells

    def fits(self, x: int, y: int, size: int, vertical: bool) -> bool:
        """Apply the game's bounds rule: x + size < cols across, y + size < rows down."""
        if vertical:
            return y + size < self.rows
        return x + size < self.cols

    def is_available(self, x: int, y: int, size: int, vertical: bool) -> bool:
        """Tell whether every cell the ship would take is still water."""
        return all(
            self._cells[row][col] == 0 for row, col in self._ship_cells(x, y, size, vertical)
        )

    def place(self, x: int, y: int, size: int, vertical: bool) -> None:
        """Put a ship on the board; raise ValueError if it overlaps another."""
        cells = self._ship_cells(x, y, size, vertical)
        if any(self._cells[row][col] for row, col in cells):
            raise ValueError("Ships overlap!")
        for row, col in cells:
            self._cells[row][col] = size

    def fire(self, x: int, y: int) -> int:
        """Return the score of a shot: the value of the cell hit."""
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(f"cell ({x}, {y}) is off the board")
        return self._cells[x][y]

    def __str__(self) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in self._cells)