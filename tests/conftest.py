"""Shared fixtures for the alignment tests"""

import matplotlib
import pytest

matplotlib.use("Agg")

from MemoAlign.seq_alignment import MemoTable, Penalties, with_placeholder


@pytest.fixture
def dna_penalties():
    """match=2, mismatch=-1, gap=-1"""
    return Penalties(2, -1, -1)


@pytest.fixture
def ac_agc():
    """Placeholder-prefixed pair used across the engine tests"""
    return with_placeholder("AC"), with_placeholder("AGC")


@pytest.fixture
def filled_ac_agc(ac_agc, dna_penalties):
    from MemoAlign.seq_alignment import score

    s, t = ac_agc
    table = MemoTable.for_sequences(s, t)
    score(s, t, dna_penalties, table=table)
    return table, s, t
