"""The playing field: a grid of filled and empty cells."""

from __future__ import annotations

#: Tallest board that may be created.
MAX_HEIGHT = 40

#: Widest board that may be created.
MAX_WIDTH = 32

#: Smallest width or height a board may have.
MIN_SIZE = 4


class Board:
    """A Tetris board; (0, 0) is the bottom-left corner."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if not (MIN_SIZE <= width <= MAX_WIDTH and MIN_SIZE <= height <= MAX_HEIGHT):
            raise ValueError("invalid board dimensions")
        self._width = width
        self._height = height
        self._full_row = (1 << width) - 1
        self._rows = [0] * height
        self._column_heights = [0] * width

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def roof(self) -> int:
        """One above the highest filled cell on the board, or 0 if it is empty."""
        return max(self._column_heights)

    @property
    def filled_cell_count(self) -> int:
        return sum(row.bit_count() if hasattr(row, "bit_count") else bin(row).count("1")
                   for row in self._rows)

    @property
    def column_heights(self) -> tuple[int, ...]:
        """For each column, one above its highest filled cell (0 if empty)."""
        return tuple(self._column_heights)

    @property
    def cells(self) -> int:
        """Bitmask of the board; bit ``y * width + x`` marks a filled cell."""
        mask = 0
        for y, row in enumerate(self._rows):
            mask |= row << (y * self._width)
        return mask

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_filled(self, x: int, y: int) -> bool:
        """Whether the cell is filled; cells off the board count as empty."""
        if not self._in_bounds(x, y):
            return False
        return bool((self._rows[y] >> x) & 1)

    def fill_cell(self, x: int, y: int) -> None:
        """Fill a cell; cells off the board are ignored."""
        if not self._in_bounds(x, y) or self.is_filled(x, y):
            return
        self._rows[y] |= 1 << x
        if y + 1 > self._column_heights[x]:
            self._column_heights[x] = y + 1

    def clear_cell(self, x: int, y: int) -> None:
        """Empty a cell; cells off the board are ignored."""
        if not self._in_bounds(x, y) or not self.is_filled(x, y):
            return
        self._rows[y] &= ~(1 << x)
        if y + 1 == self._column_heights[x]:
            self._column_heights[x] = self._scan_column(x, y - 1)

    def column_height(self, column: int) -> int:
        """Height of a column, or 0 for a column off the board."""
        if not 0 <= column < self._width:
            return 0
        return self._column_heights[column]

    def clear_filled_rows(self) -> int:
        """Remove every full row, drop the rows above, and return how many went."""
        kept = [row for row in self._rows if row != self._full_row]
        cleared = self._height - len(kept)
        if cleared:
            self._rows = kept + [0] * cleared
            self._update_heights()
        return cleared

    def is_row_filled(self, row: int) -> bool:
        """Whether every cell of a row is filled; rows off the board are not."""
        if not 0 <= row < self._height:
            return False
        return self._rows[row] == self._full_row

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        other = Board(self._width, self._height)
        other._rows = list(self._rows)
        other._column_heights = list(self._column_heights)
        return other

    def _scan_column(self, x: int, start: int) -> int:
        for y in range(start, -1, -1):
            if (self._rows[y] >> x) & 1:
                return y + 1
        return 0

    def _update_heights(self) -> None:
        self._column_heights = [
            self._scan_column(x, self._height - 1) for x in range(self._width)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return f"Board({self._width}, {self._height})"