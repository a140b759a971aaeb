# random_source.py
# Bounded uniform random sources for the Monte Carlo engine.
# A source is owned by one caller (or one worker); it is not safe for
# uncoordinated concurrent use.  Parallel runs take independent children
# from ``spawn``.

from __future__ import annotations
import numpy as np
from typing import Optional, Sequence, Union

__all__ = ["UniformSource", "UniformGenerator"]


class UniformSource:
    """Continuous uniform draws on ``[low, high)``.

    Subclasses must implement ``next``.  ``fill`` must return exactly the
    values that successive ``next`` calls would, in row-major order, so a
    pricer may draw in bulk without changing the stream.
    """

    def __init__(self, low: float = 0.0, high: float = 1.0):
        self.low, self.high = min(low, high), max(low, high)

    def next(self) -> float:
        raise NotImplementedError

    def fill(self, shape: Union[int, Sequence[int]]) -> np.ndarray:
        shape = (shape,) if np.isscalar(shape) else tuple(shape)
        n = int(np.prod(shape))
        flat = np.fromiter((self.next() for _ in range(n)), dtype=float, count=n)
        return flat.reshape(shape)

    def spawn(self, n: int) -> list[UniformSource]:
        """Return ``n`` statistically independent child sources."""
        raise NotImplementedError(
            f"{type(self).__name__} cannot spawn independent streams")


class UniformGenerator(UniformSource):
    """NumPy ``Generator`` backed source.

    Parameters
    ----------
    low, high : float
        Bounds, accepted in either order.
    seed : int | SeedSequence | None
        ``None`` draws fresh entropy from the OS.
    """

    def __init__(
        self, low: float = 0.0, high: float = 1.0,
        *, seed: Optional[Union[int, np.random.SeedSequence]] = None,
    ):
        super().__init__(low, high)
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq)

    def next(self) -> float:
        return float(self._rng.uniform(self.low, self.high))

    def fill(self, shape: Union[int, Sequence[int]]) -> np.ndarray:
        return self._rng.uniform(self.low, self.high, size=shape)

    def spawn(self, n: int) -> list[UniformGenerator]:
        return [
            UniformGenerator(self.low, self.high, seed=child)
            for child in self._seed_seq.spawn(n)
        ]

    def __repr__(self) -> str:
        return f"UniformGenerator(low={self.low}, high={self.high})"
