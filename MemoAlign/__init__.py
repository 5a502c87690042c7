"""
MemoAlign - memoized global sequence alignment
"""

import logging

from .seq_alignment import (
    AlignmentResult,
    MemoTable,
    PairwiseAligner,
    Penalties,
    global_align,
)

__version__ = "0.1.0"

__all__ = [
    "AlignmentResult",
    "MemoTable",
    "PairwiseAligner",
    "Penalties",
    "global_align",
    "seq_alignment",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("MemoAlign")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
_logger.propagate = False
