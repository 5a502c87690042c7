import pytest

from MemoAlign import global_align
from MemoAlign.seq_alignment import AlignmentResult, PairwiseAligner, align_many


def test_global_align_result(capsys):
    result = global_align("AC", "AGC", match=2, mismatch=-1, gap=-1)
    assert isinstance(result, AlignmentResult)
    assert result.score == 3
    assert (result.seq1_aligned, result.seq2_aligned) == ("A-C", "AGC")
    assert result.match_string == "| |"
    assert result.gaps == 1
    assert result.nmatch() == 2
    assert result.identity == pytest.approx(2 / 3)
    assert result.table.is_complete()
    assert "Alignment Score: 3" in str(result)

    result.view()
    out = capsys.readouterr().out
    assert "s: A-C" in out
    assert "t: AGC" in out


def test_score_only():
    aligner = PairwiseAligner(match=1, mismatch=-1, gap=-2)
    assert aligner.align("A", "A", score_only=True) == 1


def test_recursive_method_matches_iterative():
    a, b = "GATTACA", "GCATGCU"
    rec = PairwiseAligner(1, -1, -1, method="recursive").align(a, b)
    it = PairwiseAligner(1, -1, -1).align(a, b)
    assert rec.score == it.score
    assert (rec.seq1_aligned, rec.seq2_aligned) == (it.seq1_aligned, it.seq2_aligned)


def test_iterative_handles_long_sequences():
    a = "ACGT" * 150
    result = PairwiseAligner(1, -1, -1).align(a, a)
    assert result.score == len(a)
    assert result.seq1_aligned == a


def test_no_flush_keeps_literal_boundary_stop():
    result = PairwiseAligner(1, -1, -1, flush=False).align("B", "AB")
    assert (result.seq1_aligned, result.seq2_aligned) == ("B", "B")


def test_verbose_prints_report(capsys):
    PairwiseAligner(2, -1, -1).align("AC", "AGC", verbose=True)
    out = capsys.readouterr().out
    assert "match: 2" in out
    assert "The optimal alignment score between  AC and  AGC is 3" in out
    assert "The completed memo table:" in out
    assert "The aligned strings:\nA-C\nAGC" in out


def test_render_table():
    result = global_align("A", "A")
    assert result.render_table().splitlines()[-1] == "A  1 |    -2     1"


def test_empty_inputs():
    result = global_align("", "")
    assert result.score == 0
    assert (result.seq1_aligned, result.seq2_aligned) == ("", "")
    assert result.identity == 0.0


def test_invalid_arguments():
    with pytest.raises(ValueError):
        PairwiseAligner(method="banded")
    with pytest.raises(TypeError):
        PairwiseAligner(match=1.0)
    with pytest.raises(TypeError):
        PairwiseAligner().align(["A"], "A")


def test_align_many_keeps_order():
    pairs = [("AC", "AGC"), ("A", "A"), ("", "GG"), ("GATTACA", "GCATGCU")]
    results = align_many(pairs, match=2, mismatch=-1, gap=-1, max_workers=3)
    assert [r.seq1_original for r in results] == [a for a, _ in pairs]
    assert results[0].score == 3
    assert results[2].score == -2
    for (a, b), r in zip(pairs, results):
        assert r.score == global_align(a, b, 2, -1, -1).score
