"""Uniform [0,1) random sources used by the surface sampler."""
from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional

import numpy as np

from pinneaple_surface.config import DEFAULT_CONFIG, SamplingConfig
from pinneaple_surface.errors import InvalidArgumentError


class UniformSource:
    """
    Capability object yielding independent uniform values in [0, 1).

    Subclasses must implement next_uniform(). uniform_block() has a generic
    implementation that draws row by row, so a block of shape (n, k) holds
    exactly the next n*k values of the stream in row-major order. Faster
    subclasses may override it but must keep that ordering.
    """

    def next_uniform(self) -> float:
        raise NotImplementedError

    def uniform_block(self, n: int, k: int = 3) -> np.ndarray:
        out = np.empty((int(n), int(k)), dtype=np.float64)
        flat = out.reshape(-1)
        for i in range(flat.size):
            flat[i] = self.next_uniform()
        return out


class NumpyUniformSource(UniformSource):
    """
    Default source: wraps its own numpy Generator (PCG64).

    - seed: int seed; the stream is fully determined by it. Defaults to
      DEFAULT_CONFIG.default_seed, so a bare NumpyUniformSource() is
      reproducible
    - generator: an existing numpy Generator to draw from instead
      (its state is shared with the caller)
    """

    def __init__(self, seed: Optional[int] = None, *, generator: Optional[np.random.Generator] = None):
        if generator is not None and seed is not None:
            raise InvalidArgumentError("pass either seed or generator, not both")
        if generator is None:
            if seed is None:
                seed = DEFAULT_CONFIG.default_seed
            generator = np.random.default_rng(seed)
        self._gen = generator
        self.seed = seed

    @property
    def generator(self) -> np.random.Generator:
        return self._gen

    def next_uniform(self) -> float:
        return float(self._gen.random())

    def uniform_block(self, n: int, k: int = 3) -> np.ndarray:
        return self._gen.random((int(n), int(k)))

    def spawn(self, n_children: int) -> List["NumpyUniformSource"]:
        """
        Independent child sources for parallel workers (SeedSequence spawning).
        Children are deterministic given this source's seed and the number
        of spawn() calls made before.
        """
        n_children = int(n_children)
        if n_children < 0:
            raise InvalidArgumentError("n_children must be >= 0")
        return [NumpyUniformSource(generator=g) for g in self._gen.spawn(n_children)]


class FunctionUniformSource(UniformSource):
    """
    Adapts any zero-argument callable returning floats in [0, 1),
    e.g. random.Random(7).random.
    """

    def __init__(self, fn: Callable[[], float]):
        if not callable(fn):
            raise InvalidArgumentError("fn must be callable")
        self._fn = fn

    def next_uniform(self) -> float:
        return float(self._fn())


class LockedUniformSource(UniformSource):
    """
    Serializes access to one source shared between threads.

    Each uniform_block() call takes one contiguous slice of the wrapped
    stream while holding the lock.
    """

    def __init__(self, source: UniformSource):
        self._source = source
        self._lock = threading.Lock()

    def next_uniform(self) -> float:
        with self._lock:
            return self._source.next_uniform()

    def uniform_block(self, n: int, k: int = 3) -> np.ndarray:
        with self._lock:
            return self._source.uniform_block(n, k)


def as_uniform_source(rng: Any = None, config: Optional[SamplingConfig] = None) -> UniformSource:
    """
    Normalize the `rng` argument of the sampling entry points.

      - None                    -> NumpyUniformSource(config.default_seed)
      - int                     -> NumpyUniformSource(seed)
      - numpy.random.Generator  -> wrapped, draws advance the caller's generator
      - UniformSource           -> returned as-is
      - callable                -> FunctionUniformSource
    """
    config = config or DEFAULT_CONFIG

    if rng is None:
        return NumpyUniformSource(config.default_seed)
    if isinstance(rng, UniformSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return NumpyUniformSource(generator=rng)
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        if int(rng) < 0:
            raise InvalidArgumentError(f"seed must be >= 0, got {rng}")
        return NumpyUniformSource(int(rng))
    if callable(rng):
        return FunctionUniformSource(rng)

    raise InvalidArgumentError(f"Unsupported random source type: {type(rng)}")
