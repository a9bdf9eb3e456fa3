"""
Tests for rng.py

Validates:
- Seed hashing matches the dashboard's generator (including out-of-int32 sums)
- Draws stay in [0, 1) for negative seed hashes
- Empty and missing seeds fall back to "default"
- next_int bounds are inclusive
- choice on an empty sequence raises EmptyPoolError
"""

import pytest

from branchseed.exceptions import BranchSeedError, EmptyPoolError
from branchseed.rng import (
    DEFAULT_SEED,
    LCG_MODULUS,
    SeededRandom,
    hash_seed,
    normalize_seed,
)


class TestHashSeed:
    """Tests for hash_seed."""

    @pytest.mark.parametrize("seed,expected", [
        ("", 0),
        ("x", 120),
        ("abc", 96354),
        ("default", 1544803905),
        ("branch-001", 1351922566),
    ])
    def test_known_hashes(self, seed, expected):
        assert hash_seed(seed) == expected

    def test_sum_may_leave_int32_range(self):
        """Only the shifted term wraps; the folded sum is not masked."""
        value = hash_seed("BR-2024-001")
        assert value == -3222406975
        assert value < -(2 ** 31)

    def test_astral_characters_hash_as_surrogate_pairs(self):
        # U+1F600 is the pair D83D DE00
        acc = 0xD83D
        expected = ((acc << 5) - acc) + 0xDE00
        assert hash_seed("\U0001F600") == expected

    def test_is_pure(self):
        assert hash_seed("branch-42") == hash_seed("branch-42")


class TestNormalizeSeed:
    """Tests for normalize_seed."""

    def test_empty_and_none_become_default(self):
        assert normalize_seed("") == DEFAULT_SEED
        assert normalize_seed(None) == DEFAULT_SEED

    def test_other_seeds_unchanged(self):
        assert normalize_seed("branch-001") == "branch-001"
        assert normalize_seed(" ") == " "


class TestSeededRandom:
    """Tests for SeededRandom."""

    def test_first_draw_for_branch_001(self):
        rng = SeededRandom("branch-001")
        value = rng.next()
        assert rng.state == 102863
        assert value == 102863 / LCG_MODULUS

    def test_next_int_example(self):
        assert SeededRandom("branch-001").next_int(1, 6) == 3

    def test_same_seed_same_sequence(self):
        a = SeededRandom("branch-7")
        b = SeededRandom("branch-7")
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_differ(self):
        a = SeededRandom("branch-1")
        b = SeededRandom("branch-2")
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_empty_and_none_seed_match_default(self):
        reference = SeededRandom("default")
        expected = [reference.next() for _ in range(5)]
        for seed in ("", None):
            rng = SeededRandom(seed)
            assert rng.seed == DEFAULT_SEED
            assert [rng.next() for _ in range(5)] == expected

    def test_draws_in_unit_interval_for_negative_hash(self):
        rng = SeededRandom("BR-2024-001")
        assert rng.state < 0
        for _ in range(1000):
            value = rng.next()
            assert 0 <= value < 1

    def test_state_stays_in_modulus_range(self):
        rng = SeededRandom("branch-3")
        for _ in range(1000):
            rng.next()
            assert 0 <= rng.state < LCG_MODULUS

    def test_next_int_inclusive_bounds(self):
        rng = SeededRandom("bounds")
        values = {rng.next_int(1, 3) for _ in range(500)}
        assert values == {1, 2, 3}

    def test_next_int_single_value_range(self):
        rng = SeededRandom("single")
        assert all(rng.next_int(5, 5) == 5 for _ in range(20))

    def test_next_float_range(self):
        rng = SeededRandom("floats")
        for _ in range(500):
            value = rng.next_float(20000, 150000)
            assert 20000 <= value < 150000

    def test_choice_returns_member(self):
        rng = SeededRandom("choice")
        pool = ["a", "b", "c"]
        assert all(rng.choice(pool) in pool for _ in range(100))

    def test_choice_empty_raises(self):
        rng = SeededRandom("empty")
        with pytest.raises(EmptyPoolError) as exc_info:
            rng.choice([])
        assert exc_info.value.code == "BS_EMPTY_POOL"
        assert isinstance(exc_info.value, BranchSeedError)
