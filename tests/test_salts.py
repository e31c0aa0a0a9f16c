import random

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from salted_bloom import InvalidParameters, create_salts


class ScriptedRng:
    """Replays fixed draws so collisions can be forced."""
    def __init__(self, draws):
        self._draws = iter(draws)

    def random(self):
        return next(self._draws)


class TestCreateSalts:
    def test_count_and_range(self) -> None:
        salts = create_salts(10)
        assert len(salts) == 10
        assert all(0.0 <= s < 1.0 for s in salts)
        assert all(type(s) is float for s in salts)

    def test_seed_reproducible(self) -> None:
        assert create_salts(8, 42) == create_salts(8, 42)

    def test_generator_reproducible(self) -> None:
        a = create_salts(8, np.random.default_rng(7))
        b = create_salts(8, np.random.default_rng(7))
        assert a == b

    def test_different_seeds_differ(self) -> None:
        assert create_salts(8, 1) != create_salts(8, 2)

    def test_stdlib_random_source(self) -> None:
        assert create_salts(5, random.Random(3)) == create_salts(5, random.Random(3))

    def test_numpy_count_and_seed(self) -> None:
        assert create_salts(np.int64(4), np.int64(5)) == create_salts(4, 5)

    def test_collisions_are_redrawn(self) -> None:
        rng = ScriptedRng([0.5, 0.5, 0.25, 0.5, 0.25, 0.75])
        assert create_salts(3, rng) == (0.5, 0.25, 0.75)

    @pytest.mark.parametrize("count", [0, -3, 2.0, True])
    def test_bad_count(self, count) -> None:
        with pytest.raises(InvalidParameters):
            create_salts(count)

    def test_bad_rng(self) -> None:
        with pytest.raises(InvalidParameters):
            create_salts(3, "not a generator")


@settings(max_examples=50, deadline=None)
@given(count=st.integers(min_value=1, max_value=100), seed=st.integers(min_value=0, max_value=2**32))
def test_salts_unique(count, seed) -> None:
    salts = create_salts(count, seed)
    assert len(salts) == count
    assert len(set(salts)) == count
