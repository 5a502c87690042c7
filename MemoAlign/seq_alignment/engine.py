"""
Global alignment scoring (Needleman-Wunsch style recurrence).

Two evaluators fill the same memo table with identical values:

- ``opt``        : top-down memoized recursion, depth up to |s| + |t|
- ``fill_table`` : bottom-up iteration, no recursion

Candidate priority in the max-of-three is DIAG, then UP, then LEFT:
the first candidate reaching the maximum wins.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Literal, Optional, Tuple

from .memo_table import MemoTable
from .scoring import Penalties, require_nonempty

logger = logging.getLogger(__name__)


class Move(Enum):
    DIAG = "diag"   # s[i] aligned with t[j]
    UP = "up"       # s[i] aligned with a gap
    LEFT = "left"   # t[j] aligned with a gap


SCORE_PRIORITY = (Move.DIAG, Move.UP, Move.LEFT)


def _best(candidates: Dict[Move, int]) -> Tuple[Move, int]:
    """Winning move and its value; on ties the move earlier in SCORE_PRIORITY wins"""
    best_move, best = None, None
    for move in SCORE_PRIORITY:
        value = candidates[move]
        if best is None or value > best:
            best_move, best = move, value
    return best_move, best


def opt(s: str, i: int, t: str, j: int, table: MemoTable, penalties: Penalties) -> int:
    """
    Optimal score for aligning s[0..i] with t[0..j].

    Index 0 of both sequences is the placeholder, so (0, 0) is the pair of
    empty prefixes. Every cell is computed once; later calls are memo hits.
    """
    cached = table.peek(i, j)
    if cached is not None:
        return cached

    if i == 0 and j == 0:
        value = 0
    elif i == 0:
        value = opt(s, i, t, j - 1, table, penalties) + penalties.gap
    elif j == 0:
        value = opt(s, i - 1, t, j, table, penalties) + penalties.gap
    else:
        score_type = penalties.substitution(s[i], t[j])
        _, value = _best({
            Move.DIAG: opt(s, i - 1, t, j - 1, table, penalties) + score_type,
            Move.UP: opt(s, i - 1, t, j, table, penalties) + penalties.gap,
            Move.LEFT: opt(s, i, t, j - 1, table, penalties) + penalties.gap,
        })

    table.set(i, j, value)
    return value


def fill_table(s: str, t: str, table: MemoTable, penalties: Penalties) -> int:
    """
    Bottom-up evaluation of the same recurrence as ``opt``.
    Cells already present in the table are kept as they are.
    Returns the score of the last cell.
    """
    rows, cols = len(s), len(t)
    gap = penalties.gap

    def put(i, j, value):
        if not table.is_set(i, j):
            table.set(i, j, value)

    put(0, 0, 0)
    for j in range(1, cols):
        put(0, j, table.get(0, j - 1) + gap)
    for i in range(1, rows):
        put(i, 0, table.get(i - 1, 0) + gap)

    for i in range(1, rows):
        for j in range(1, cols):
            if table.is_set(i, j):
                continue
            score_type = penalties.substitution(s[i], t[j])
            _, value = _best({
                Move.DIAG: table.get(i - 1, j - 1) + score_type,
                Move.UP: table.get(i - 1, j) + gap,
                Move.LEFT: table.get(i, j - 1) + gap,
            })
            table.set(i, j, value)

    return table.get(rows - 1, cols - 1)


def score(
    s: str,
    t: str,
    penalties: Penalties,
    table: Optional[MemoTable] = None,
    method: Literal["iterative", "recursive"] = "iterative",
) -> int:
    """
    Optimal global alignment score of two placeholder-prefixed sequences.

    Parameters:
    -----------
    s, t : str
        Sequences whose index 0 is the placeholder symbol
    penalties : Penalties
        Match / mismatch / gap values
    table : MemoTable, optional
        Pre-sized table to fill; allocated when omitted
    method : str
        "iterative" (default) or "recursive"

    Returns:
    --------
    int
        Score of cell (len(s) - 1, len(t) - 1)
    """
    require_nonempty(s, "s")
    require_nonempty(t, "t")
    penalties.check_capacity(len(s) + len(t) - 2)
    if table is None:
        table = MemoTable.for_sequences(s, t)
    elif table.shape[0] < len(s) or table.shape[1] < len(t):
        raise ValueError(
            f"memo table of shape {table.shape} cannot hold sequences of length {len(s)} and {len(t)}"
        )

    logger.debug("scoring %dx%d table with %s method", len(s), len(t), method)
    if method == "recursive":
        return opt(s, len(s) - 1, t, len(t) - 1, table, penalties)
    elif method == "iterative":
        return fill_table(s, t, table, penalties)
    else:
        raise ValueError(f"Unknown method: {method}")
