"""
Pairwise Global Alignment Module
Memoized scoring, memo table dump and traceback behind one aligner class
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Tuple, Union

from .engine import score as _score
from .memo_table import MemoTable
from .scoring import GAP, Penalties, with_placeholder
from .traceback import traceback

logger = logging.getLogger(__name__)


@dataclass
class AlignmentResult:
    """Store alignment results and the memo table they came from"""
    seq1_aligned: str
    seq2_aligned: str
    score: int
    penalties: Penalties
    table: MemoTable
    match_string: str
    identity: float
    gaps: int
    seq1_original: str
    seq2_original: str

    def __str__(self) -> str:
        """String representation of alignment"""
        return (
            f"Alignment Score: {self.score}\n"
            f"Penalties: match={self.penalties.match} "
            f"mismatch={self.penalties.mismatch} gap={self.penalties.gap}\n"
            f"Identity: {self.identity:.2%}\n"
            f"Gaps: {self.gaps}\n"
            f"Length: {len(self.seq1_aligned)}\n"
        )

    def render_table(self) -> str:
        """Memo table labelled with both sequences"""
        return self.table.render(
            with_placeholder(self.seq1_original), with_placeholder(self.seq2_original)
        )

    def plot(self, width: int = 80) -> None:
        """Display alignment with match indicators"""
        lines = []
        lines.append("")
        lines.append(f"Sequence 1: {self.seq1_original}")
        lines.append(f"Sequence 2: {self.seq2_original}")
        lines.append("")
        lines.append(f"Identity: {self.identity:.2%}")
        lines.append(f"Gaps: {self.gaps}")
        lines.append(f"Score: {self.score}")
        lines.append("")

        for start in range(0, len(self.seq1_aligned), width):
            end = min(start + width, len(self.seq1_aligned))
            lines.append(f"s: {self.seq1_aligned[start:end]}")
            lines.append(f"   {self.match_string[start:end]}")
            lines.append(f"t: {self.seq2_aligned[start:end]}")
            lines.append("")

        for line in lines:
            print(line)

    def view(self, width: int = 80) -> None:
        """Alias for plot method"""
        self.plot(width)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return sum(1 for a, b in zip(self.seq1_aligned, self.seq2_aligned)
                   if a == b and a != GAP)


class PairwiseAligner:
    """Global aligner with a linear gap penalty"""

    def __init__(
        self,
        match: int = 1,
        mismatch: int = -1,
        gap: int = -2,
        method: Literal["iterative", "recursive"] = "iterative",
        flush: bool = True,
    ):
        """
        Parameters:
        -----------
        match : int
            Reward for aligning two equal symbols
        mismatch : int
            Score for aligning two different symbols
        gap : int
            Score for aligning a symbol with a gap
        method : str
            "iterative" fills the table bottom-up; "recursive" evaluates
            the memoized recursion (limited by the interpreter stack)
        flush : bool
            Align the leftover prefix against gaps once the traceback
            reaches row 0 or column 0 (default True)
        """
        if method not in ("iterative", "recursive"):
            raise ValueError(f"Unknown method: {method}")
        self.penalties = Penalties(match, mismatch, gap)
        self.method = method
        self.flush = flush

    def _calculate_match_string(self, aligned1: str, aligned2: str) -> str:
        """Generate match string"""
        match_str = []
        for a, b in zip(aligned1, aligned2):
            if a == GAP or b == GAP:
                match_str.append(' ')
            elif a == b:
                match_str.append('|')
            else:
                match_str.append('.')
        return ''.join(match_str)

    def _calculate_statistics(self, aligned1: str, aligned2: str) -> Tuple[float, int]:
        """Calculate identity and gap count"""
        matches = sum(1 for a, b in zip(aligned1, aligned2) if a == b and a != GAP)
        gaps = aligned1.count(GAP) + aligned2.count(GAP)
        identity = matches / len(aligned1) if len(aligned1) > 0 else 0.0
        return identity, gaps

    def align(
        self,
        seq1: str,
        seq2: str,
        score_only: bool = False,
        verbose: bool = False,
    ) -> Union[AlignmentResult, int]:
        """
        Perform global pairwise alignment

        Parameters:
        -----------
        seq1 : str
            First sequence (rows of the memo table)
        seq2 : str
            Second sequence (columns of the memo table)
        score_only : bool
            If True, return only the alignment score
        verbose : bool
            If True, print the penalties, the memo table and the alignment

        Returns:
        --------
        AlignmentResult or int
        """
        if not isinstance(seq1, str) or not isinstance(seq2, str):
            raise TypeError("sequences must be str")
        s = with_placeholder(seq1)
        t = with_placeholder(seq2)
        p = self.penalties

        if verbose:
            print(f"match: {p.match}")
            print(f"mismatch: {p.mismatch}")
            print(f"gap: {p.gap}")

        table = MemoTable.for_sequences(s, t)
        best = _score(s, t, p, table=table, method=self.method)
        logger.debug("score(%r, %r) = %d", seq1, seq2, best)

        if verbose:
            print(f"The optimal alignment score between {s} and {t} is {best}")
            print()
            print("The completed memo table: ")
            print()
            print(table.render(s, t))

        if score_only:
            return best

        aligned1, aligned2 = traceback(table, s, t, p, flush=self.flush)
        identity, gaps = self._calculate_statistics(aligned1, aligned2)

        if verbose:
            print()
            print("The aligned strings:")
            print(aligned1)
            print(aligned2)

        return AlignmentResult(
            seq1_aligned=aligned1,
            seq2_aligned=aligned2,
            score=best,
            penalties=p,
            table=table,
            match_string=self._calculate_match_string(aligned1, aligned2),
            identity=identity,
            gaps=gaps,
            seq1_original=seq1,
            seq2_original=seq2,
        )


def global_align(
    seq1: str,
    seq2: str,
    match: int = 1,
    mismatch: int = -1,
    gap: int = -2,
    method: Literal["iterative", "recursive"] = "iterative",
    flush: bool = True,
    verbose: bool = False,
) -> AlignmentResult:
    """
    Global alignment of two sequences in one call

    Examples:
    ---------
    >>> result = global_align("AC", "AGC", match=2, mismatch=-1, gap=-1)
    >>> result.score
    3
    >>> result.seq1_aligned, result.seq2_aligned
    ('A-C', 'AGC')
    """
    aligner = PairwiseAligner(match, mismatch, gap, method=method, flush=flush)
    return aligner.align(seq1, seq2, verbose=verbose)


def align_many(
    pairs: Iterable[Tuple[str, str]],
    match: int = 1,
    mismatch: int = -1,
    gap: int = -2,
    method: Literal["iterative", "recursive"] = "iterative",
    flush: bool = True,
    max_workers: Optional[int] = None,
) -> List[AlignmentResult]:
    """
    Align many independent pairs on a thread pool.
    Every pair gets its own memo table; results keep the input order.
    """
    aligner = PairwiseAligner(match, mismatch, gap, method=method, flush=flush)
    pairs = list(pairs)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda pair: aligner.align(*pair), pairs))
