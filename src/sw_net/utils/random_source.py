import threading
from contextlib import contextmanager
from typing import Iterator

import numpy as np


class RandomSource:
    """A uniform random stream with exclusive, scoped access.

    Wraps a ``numpy.random.Generator``. Samplers take the stream with
    ``with source.acquire() as rng:`` so the lock is released on every exit
    path. Two sources built from the same seed produce the same draws.
    """

    def __init__(self, seed: int | None = None, generator: np.random.Generator | None = None):
        if generator is not None and seed is not None:
            raise ValueError("Pass either seed or generator, not both")
        self.seed = seed
        self._generator = generator if generator is not None else np.random.default_rng(seed)
        self._lock = threading.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def acquire(self) -> Iterator[np.random.Generator]:
        with self._lock:
            yield self._generator


def as_random_source(
    rng: "RandomSource | np.random.Generator | None" = None, seed: int | None = None
) -> RandomSource:
    if rng is not None and seed is not None:
        raise ValueError("Pass either seed or rng, not both")
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return RandomSource(generator=rng)
    if rng is not None:
        raise TypeError(f"rng must be a RandomSource or numpy Generator, got {type(rng).__name__}")
    return RandomSource(seed)
