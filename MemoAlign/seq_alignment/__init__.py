"""
Sequence Alignment Module
Memoized global pairwise alignment with traceback
"""

from .memo_table import MemoTable
from .scoring import GAP, PLACEHOLDER, Penalties, with_placeholder
from .engine import Move, fill_table, opt, score
from .traceback import traceback, traceback_path
from .pairwise import (
    PairwiseAligner,
    AlignmentResult,
    global_align,
    align_many
)

__all__ = [
    "MemoTable",
    "Penalties",
    "GAP",
    "PLACEHOLDER",
    "with_placeholder",
    "Move",
    "opt",
    "fill_table",
    "score",
    "traceback",
    "traceback_path",
    "PairwiseAligner",
    "AlignmentResult",
    "global_align",
    "align_many"
]
