
# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from dropfour.config import ROWS, COLS
from dropfour.types import Cell


@dataclass(slots=True)
class Board:
    """
    Column-major grid: column c, row r (0 = bottom) lives at c * rows + r.
    Each column is filled bottom-up with no gaps.
    """
    rows: int = ROWS
    cols: int = COLS
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * (self.rows * self.cols)
        elif len(self.cells) != self.rows * self.cols:
            raise ValueError(f"Expected {self.rows * self.cols} cells, got {len(self.cells)}.")

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[int]], rows: int = ROWS, cols: int = COLS) -> "Board":
        """
        Build a board from per-column piece lists, listed bottom-up.
        Missing trailing columns are empty.
        """
        if len(columns) > cols:
            raise ValueError("Too many columns.")
        b = cls(rows, cols)
        for c, pieces in enumerate(columns):
            if len(pieces) > rows:
                raise ValueError(f"Column {c} has more than {rows} pieces.")
            for r, p in enumerate(pieces):
                if p not in (0, 1):
                    raise ValueError(f"Bad owner {p!r} at column {c}, row {r}.")
                b.cells[b.index(c, r)] = p
        return b

    def index(self, col: int, row: int) -> int:
        return col * self.rows + row

    def cell(self, col: int, row: int) -> Cell:
        return self.cells[col * self.rows + row]

    def height(self, col: int) -> int:
        base = col * self.rows
        for r in range(self.rows):
            if self.cells[base + r] is None:
                return r
        return self.rows

    def top_is_empty(self, col: int) -> bool:
        return self.cells[col * self.rows + self.rows - 1] is None

    def is_full(self) -> bool:
        return all(not self.top_is_empty(c) for c in range(self.cols))

    def occupied(self) -> int:
        return sum(1 for p in self.cells if p is not None)

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, self.cells[:])
