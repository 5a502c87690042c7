"""
Reconstruct one optimal alignment from a filled memo table.
"""

from __future__ import annotations

from typing import List, Tuple, Union

from .engine import Move
from .memo_table import MemoTable
from .scoring import GAP, Penalties

# predecessor checked first wins when several are optimal
TRACEBACK_PRIORITY = (Move.UP, Move.LEFT, Move.DIAG)


def _step(table: MemoTable, s: str, t: str, row: int, col: int, penalties: Penalties) -> Move:
    current = table.get(row, col)
    for move in TRACEBACK_PRIORITY:
        if move is Move.UP:
            if table.get(row - 1, col) + penalties.gap == current:
                return move
        elif move is Move.LEFT:
            if table.get(row, col - 1) + penalties.gap == current:
                return move
        elif table.get(row - 1, col - 1) + penalties.substitution(s[row], t[col]) == current:
            return move
    raise RuntimeError(
        f"cell ({row}, {col}) = {current} has no predecessor consistent with the penalties"
    )


def traceback_path(
    table: MemoTable,
    s: str,
    t: str,
    penalties: Penalties,
    flush: bool = True,
) -> List[Tuple[int, int, Move]]:
    """
    Cells visited walking back from (len(s) - 1, len(t) - 1), each with the
    move taken out of it. With ``flush`` the walk continues along row 0 or
    column 0 down to (0, 0); without it, it stops at the first boundary.
    """
    row, col = len(s) - 1, len(t) - 1
    if not table.is_set(row, col):
        raise ValueError(f"memo table has no score at ({row}, {col}); run the engine first")

    path = []
    while row > 0 and col > 0:
        move = _step(table, s, t, row, col, penalties)
        path.append((row, col, move))
        if move is Move.UP:
            row -= 1
        elif move is Move.LEFT:
            col -= 1
        else:
            row -= 1
            col -= 1

    if flush:
        while row > 0:
            path.append((row, col, Move.UP))
            row -= 1
        while col > 0:
            path.append((row, col, Move.LEFT))
            col -= 1
    return path


def traceback(
    table: MemoTable,
    s: str,
    t: str,
    penalties: Union[Penalties, int],
    flush: bool = True,
) -> Tuple[str, str]:
    """
    One optimal alignment of two placeholder-prefixed sequences.

    ``penalties`` may be a bare gap value; the diagonal move is then taken
    whenever neither gap move reproduces the cell, without checking it.
    Returns the two aligned strings (equal length, placeholders dropped).
    """
    if isinstance(penalties, Penalties):
        path = traceback_path(table, s, t, penalties, flush=flush)
    else:
        path = _gap_only_path(table, len(s) - 1, len(t) - 1, penalties, flush)

    optimal_s, optimal_t = [], []
    for row, col, move in path:
        if move is Move.UP:
            optimal_s.append(s[row])
            optimal_t.append(GAP)
        elif move is Move.LEFT:
            optimal_s.append(GAP)
            optimal_t.append(t[col])
        else:
            optimal_s.append(s[row])
            optimal_t.append(t[col])

    return "".join(reversed(optimal_s)), "".join(reversed(optimal_t))


def _gap_only_path(table: MemoTable, row: int, col: int, gap: int, flush: bool):
    if not table.is_set(row, col):
        raise ValueError(f"memo table has no score at ({row}, {col}); run the engine first")
    path = []
    while row > 0 and col > 0:
        current = table.get(row, col)
        if table.get(row - 1, col) + gap == current:
            path.append((row, col, Move.UP))
            row -= 1
        elif table.get(row, col - 1) + gap == current:
            path.append((row, col, Move.LEFT))
            col -= 1
        else:
            path.append((row, col, Move.DIAG))
            row -= 1
            col -= 1
    if flush:
        path.extend((r, col, Move.UP) for r in range(row, 0, -1))
        path.extend((0, c, Move.LEFT) for c in range(col, 0, -1))
    return path
