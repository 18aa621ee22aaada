from itertools import permutations

import pytest

from alnmatrix import TraceDirection, union

N, D, U, L = TraceDirection.NONE, TraceDirection.DIAGONAL, TraceDirection.UP, TraceDirection.LEFT


class TestUnion:
    def test_commutative(self):
        assert D | L == L | D
        assert union(D, L) == union(L, D)

    def test_associative(self):
        assert (D | U) | L == D | (U | L)
        for order in permutations((D, U, L)):
            assert union(*order) == D | U | L

    def test_idempotent(self):
        assert D | D == D
        assert union(L, L, L) == L

    def test_none_is_identity(self):
        for x in TraceDirection.combinations():
            assert N | x == x
        assert union() == N

    def test_union_stays_a_direction(self):
        assert isinstance(union(D, U), TraceDirection)


class TestMembership:
    def test_contains(self):
        combo = D | L
        assert D in combo
        assert L in combo
        assert U not in combo

    def test_restart(self):
        assert N.is_restart
        assert not (D | U).is_restart


class TestCombinations:
    def test_table_order(self):
        assert list(TraceDirection.combinations()) == [N, D, U, D | U, L, D | L, U | L, D | U | L]

    @pytest.mark.parametrize('raw', range(16))
    def test_all_raw_patterns_constructible(self, raw):
        assert int(TraceDirection(raw)) == raw
