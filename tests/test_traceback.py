import pytest

from MemoAlign.seq_alignment import GAP, MemoTable, Move, Penalties, score, with_placeholder
from MemoAlign.seq_alignment.traceback import traceback, traceback_path


def _run(a, b, p, flush=True):
    s, t = with_placeholder(a), with_placeholder(b)
    table = MemoTable.for_sequences(s, t)
    score(s, t, p, table=table)
    return traceback(table, s, t, p, flush=flush)


def test_ac_vs_agc_puts_gap_in_s(dna_penalties):
    assert _run("AC", "AGC", dna_penalties) == ("A-C", "AGC")


def test_single_symbol():
    assert _run("A", "A", Penalties(1, -1, -2)) == ("A", "A")


def test_both_empty():
    assert _run("", "", Penalties(1, -1, -1)) == ("", "")


def test_against_empty_counterpart():
    p = Penalties(1, -1, -1)
    assert _run("ACG", "", p) == ("ACG", "---")
    assert _run("", "TT", p) == ("--", "TT")


def test_trailing_gaps_after_first_match():
    # left moves out of (1, 3) and (1, 2), diagonal at (1, 1)
    assert _run("A", "AAA", Penalties(1, -1, -1)) == ("A--", "AAA")


def test_boundary_flush():
    p = Penalties(1, -1, -1)
    assert _run("B", "AB", p) == ("-B", "AB")
    # walk stops at row 0 and leaves t's first symbol out
    assert _run("B", "AB", p, flush=False) == ("B", "B")


@pytest.mark.parametrize("a, b", [
    ("GATTACA", "GCATGCU"),
    ("ACGTACGT", "TTT"),
    ("A", "CCCCCC"),
    ("HEAGAWGHEE", "PAWHEAE"),
])
@pytest.mark.parametrize("p", [Penalties(1, -1, -1), Penalties(2, -1, -2), Penalties(0, -3, 2)])
def test_aligned_pair_is_consistent(a, b, p):
    x, y = _run(a, b, p)
    assert len(x) == len(y)
    assert x.replace(GAP, "") == a
    assert y.replace(GAP, "") == b
    assert not any(c == GAP and d == GAP for c, d in zip(x, y))


@pytest.mark.parametrize("a, b", [("GATTACA", "GCATGCU"), ("AAB", "ABB"), ("XYZ", "ZYX")])
def test_alignment_scores_to_the_optimum(a, b):
    p = Penalties(2, -1, -2)
    x, y = _run(a, b, p)
    total = 0
    for c, d in zip(x, y):
        if c == GAP or d == GAP:
            total += p.gap
        else:
            total += p.substitution(c, d)
    assert total == score(with_placeholder(a), with_placeholder(b), p)


@pytest.mark.parametrize("flush", [True, False])
def test_bare_gap_value_gives_same_alignment(flush):
    p = Penalties(1, -1, -1)
    for a, b in [("GATTACA", "GCATGCU"), ("B", "AB"), ("AC", "AGC")]:
        s, t = with_placeholder(a), with_placeholder(b)
        table = MemoTable.for_sequences(s, t)
        score(s, t, p, table=table)
        assert traceback(table, s, t, p.gap, flush=flush) == traceback(table, s, t, p, flush=flush)


def test_path_moves(filled_ac_agc, dna_penalties):
    table, s, t = filled_ac_agc
    path = traceback_path(table, s, t, dna_penalties)
    assert path == [(2, 3, Move.DIAG), (1, 2, Move.LEFT), (1, 1, Move.DIAG)]


def test_unscored_table_rejected(ac_agc, dna_penalties):
    s, t = ac_agc
    with pytest.raises(ValueError):
        traceback(MemoTable.for_sequences(s, t), s, t, dna_penalties)
    with pytest.raises(ValueError):
        traceback(MemoTable.for_sequences(s, t), s, t, -1)


def test_inconsistent_table_detected():
    table = MemoTable(2, 2)
    for (i, j), value in {(0, 0): 0, (0, 1): -1, (1, 0): -1, (1, 1): 10}.items():
        table.set(i, j, value)
    with pytest.raises(RuntimeError):
        traceback(table, " A", " A", Penalties(1, -1, -1))


def test_up_wins_ties_against_diagonal():
    # corner cell 0 is reachable from above and from the diagonal
    assert _run("AA", "A", Penalties(1, -1, -1)) == ("AA", "A-")
