"""
Penalty set and sequence conventions shared by the engine and traceback.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np

# index 0 of every sequence is this symbol and stands for the empty prefix
PLACEHOLDER = " "
GAP = "-"

# memo table cells are int64
SCORE_MIN = int(np.iinfo(np.int64).min)
SCORE_MAX = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class Penalties:
    """Match reward, mismatch penalty and gap penalty for one run"""
    match: int
    mismatch: int
    gap: int

    def __post_init__(self):
        for name in ("match", "mismatch", "gap"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful score
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not SCORE_MIN <= value <= SCORE_MAX:
                raise ValueError(f"{name}={value} does not fit in a 64-bit score")
            object.__setattr__(self, name, int(value))

    def check_capacity(self, n_steps: int) -> None:
        """
        Fail early when an alignment of n_steps columns could leave the
        int64 score range.
        """
        largest = max(abs(self.match), abs(self.mismatch), abs(self.gap))
        if largest * n_steps > SCORE_MAX:
            raise ValueError(
                f"penalties up to {largest} over {n_steps} alignment columns overflow a 64-bit score"
            )

    def substitution(self, a: str, b: str) -> int:
        return self.match if a == b else self.mismatch


def with_placeholder(seq: str) -> str:
    return PLACEHOLDER + seq


def require_nonempty(seq: str, name: str = "sequence") -> str:
    """Reject non-str and empty input; index 0 is taken to be the placeholder"""
    if not isinstance(seq, str):
        raise TypeError(f"{name} must be a str, got {type(seq).__name__}")
    if len(seq) == 0:
        raise ValueError(f"{name} is empty; expected at least the leading placeholder")
    return seq
