"""
Memo table for global alignment scores.

Dense 2-D grid indexed by (prefix length of s, prefix length of t).
Scores live in an int64 numpy array; a parallel boolean grid marks the
cells that have been computed, so every integer is a legal score.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


class MemoTable:
    """Write-once score grid with an explicit "computed" flag per cell"""

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Memo table needs at least 1x1 cells, got {rows}x{cols}")
        self._scores = np.zeros((rows, cols), dtype=np.int64)
        self._present = np.zeros((rows, cols), dtype=bool)

    @classmethod
    def for_sequences(cls, s: str, t: str) -> "MemoTable":
        """Table sized for two placeholder-prefixed sequences"""
        return cls(len(s), len(t))

    @property
    def shape(self) -> Tuple[int, int]:
        return self._scores.shape

    @property
    def n_set(self) -> int:
        return int(self._present.sum())

    def _check(self, i: int, j: int) -> None:
        rows, cols = self._scores.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"cell ({i}, {j}) outside memo table of shape {rows}x{cols}")

    def is_set(self, i: int, j: int) -> bool:
        self._check(i, j)
        return bool(self._present[i, j])

    def peek(self, i: int, j: int) -> Optional[int]:
        """Stored score, or None while the cell is uncomputed"""
        self._check(i, j)
        if not self._present[i, j]:
            return None
        return int(self._scores[i, j])

    def get(self, i: int, j: int) -> int:
        self._check(i, j)
        if not self._present[i, j]:
            raise ValueError(f"cell ({i}, {j}) has not been computed")
        return int(self._scores[i, j])

    def set(self, i: int, j: int, value: int) -> None:
        self._check(i, j)
        if self._present[i, j]:
            raise ValueError(
                f"cell ({i}, {j}) already holds {int(self._scores[i, j])}; memo cells are write-once"
            )
        self._scores[i, j] = value
        self._present[i, j] = True

    def is_complete(self) -> bool:
        return bool(self._present.all())

    def to_array(self, fill: Optional[float] = None) -> np.ndarray:
        """
        Float copy of the grid. Uncomputed cells become `fill`
        (NaN when no fill value is given).
        """
        out = self._scores.astype(np.float64)
        out[~self._present] = np.nan if fill is None else fill
        return out

    def render(self, s: str, t: str, field_width: int = 6) -> str:
        """
        Console dump of the table: t's symbols and column indices across the
        top, then one row per prefix of s. Uncomputed cells print as "inf".
        """
        rows, cols = self._scores.shape
        if len(s) != rows or len(t) != cols:
            raise ValueError(
                f"sequences of length {len(s)} and {len(t)} do not label a {rows}x{cols} table"
            )
        left = 6
        lines = []
        lines.append(" " * left + "".join(f"{t[c]:>{field_width}}" for c in range(cols)))
        lines.append(" " * left + "".join(f"{c:>{field_width}}" for c in range(cols)))
        lines.append(f"{'+':>{left}}" + "".join(f"{'---':>{field_width}}" for _ in range(cols)))
        for r in range(rows):
            cells = []
            for c in range(cols):
                value = "inf" if not self._present[r, c] else str(int(self._scores[r, c]))
                cells.append(f"{value:>{field_width}}")
            lines.append(f"{s[r]}{r:>3} |" + "".join(cells))
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"MemoTable({rows}x{cols}, {self.n_set} set)"
