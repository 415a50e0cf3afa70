# src/dropfour/types.py

from __future__ import annotations
from typing import Optional, Tuple

Cell = Optional[int]        # None or owning player index
Coord = Tuple[int, int]     # (col, row), row 0 = bottom
