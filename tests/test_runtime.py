"""Tests for the random source and cancellation token."""

import numpy as np
import pytest

from sw_net.errors import Cancelled
from sw_net.utils.cancellation import CancellationToken
from sw_net.utils.random_source import RandomSource, as_random_source


class TestRandomSource:
    """The stream is held exclusively inside acquire()."""

    def test_locked_only_while_acquired(self) -> None:
        source = RandomSource(seed=0)
        assert not source.locked
        with source.acquire() as rng:
            assert source.locked
            assert isinstance(rng, np.random.Generator)
        assert not source.locked

    def test_released_on_error(self) -> None:
        source = RandomSource(seed=0)
        with pytest.raises(RuntimeError):
            with source.acquire():
                raise RuntimeError("boom")
        assert not source.locked

    def test_same_seed_same_draws(self) -> None:
        a, b = RandomSource(seed=11), RandomSource(seed=11)
        with a.acquire() as ra, b.acquire() as rb:
            np.testing.assert_array_equal(ra.random(5), rb.random(5))

    def test_seed_and_generator_conflict(self) -> None:
        with pytest.raises(ValueError):
            RandomSource(seed=1, generator=np.random.default_rng(1))

    def test_as_random_source(self) -> None:
        source = RandomSource(seed=2)
        assert as_random_source(source) is source
        assert isinstance(as_random_source(np.random.default_rng(2)), RandomSource)
        assert as_random_source(seed=4).seed == 4
        with pytest.raises(TypeError):
            as_random_source(42)


class TestCancellationToken:
    """Tokens raise Cancelled once set."""

    def test_not_cancelled_by_default(self) -> None:
        token = CancellationToken()
        assert not token.cancelled
        token.raise_if_cancelled()

    def test_cancel(self) -> None:
        token = CancellationToken()
        token.cancel()
        assert token.cancelled
        with pytest.raises(Cancelled):
            token.raise_if_cancelled()
