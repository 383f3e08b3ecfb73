from __future__ import annotations

"""
Unit tests for mutation models.
"""

import pytest

from mutation_harness.domain.mutation_models import Mutation, MutationsWave


def test_mutation_kind():
    assert Mutation(3, 3, "x").kind == "text-insert"
    assert Mutation(1, 4).kind == "text-delete"
    assert Mutation(1, 4, "y").kind == "text-replace"


@pytest.mark.parametrize("begin,end", [(-1, 2), (5, 4)])
def test_mutation_rejects_invalid_ranges(begin, end):
    with pytest.raises(ValueError):
        Mutation(begin, end)


def test_wave_emptiness():
    assert MutationsWave().is_empty
    assert MutationsWave({"a.txt": []}).is_empty
    assert not MutationsWave({"a.txt": [Mutation(0, 0, "x")]}).is_empty
