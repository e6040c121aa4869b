import random
import threading

import numpy as np
import pytest

from pinneaple_surface.config import SamplingConfig
from pinneaple_surface.errors import InvalidArgumentError
from pinneaple_surface.sample.rng import (
    FunctionUniformSource,
    LockedUniformSource,
    NumpyUniformSource,
    UniformSource,
    as_uniform_source,
)


def test_as_uniform_source_dispatch(rng_seed):
    assert isinstance(as_uniform_source(None), NumpyUniformSource)
    assert as_uniform_source(None, SamplingConfig(default_seed=7)).seed == 7
    assert as_uniform_source(rng_seed).seed == rng_seed

    src = NumpyUniformSource(1)
    assert as_uniform_source(src) is src

    gen = np.random.default_rng(rng_seed)
    assert as_uniform_source(gen).generator is gen

    assert isinstance(as_uniform_source(random.Random(3).random), FunctionUniformSource)

    for bad in ("seed", -1, 1.5, True):
        with pytest.raises(InvalidArgumentError):
            as_uniform_source(bad)


def test_block_matches_sequential_draws(rng_seed):
    a = NumpyUniformSource(rng_seed)
    b = NumpyUniformSource(rng_seed)
    block = a.uniform_block(5, 3)
    seq = np.array([b.next_uniform() for _ in range(15)]).reshape(5, 3)
    np.testing.assert_array_equal(block, seq)


def test_unseeded_source_uses_default_seed():
    a, b = NumpyUniformSource(), NumpyUniformSource()
    assert a.seed == b.seed == 0
    np.testing.assert_array_equal(a.uniform_block(4, 3), b.uniform_block(4, 3))
    np.testing.assert_array_equal(NumpyUniformSource().uniform_block(4, 3), NumpyUniformSource(0).uniform_block(4, 3))


def test_generic_block_is_row_major():
    it = iter(np.arange(6) / 10.0)
    src = FunctionUniformSource(lambda: next(it))
    np.testing.assert_allclose(src.uniform_block(2, 3), [[0.0, 0.1, 0.2], [0.3, 0.4, 0.5]])


def test_values_in_unit_interval(rng_seed):
    u = NumpyUniformSource(rng_seed).uniform_block(1000, 3)
    assert u.min() >= 0.0 and u.max() < 1.0


def test_spawn_is_deterministic_and_independent(rng_seed):
    c1 = NumpyUniformSource(rng_seed).spawn(3)
    c2 = NumpyUniformSource(rng_seed).spawn(3)
    for a, b in zip(c1, c2):
        np.testing.assert_array_equal(a.uniform_block(4), b.uniform_block(4))
    x0 = c1[0].uniform_block(4)
    x1 = c1[1].uniform_block(4)
    assert not np.array_equal(x0, x1)


def test_locked_source_hands_out_disjoint_slices(rng_seed):
    shared = LockedUniformSource(NumpyUniformSource(rng_seed))
    results = []

    def work():
        results.append(shared.uniform_block(100, 3))

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    drawn = np.sort(np.concatenate([r.ravel() for r in results]))
    expected = np.sort(NumpyUniformSource(rng_seed).uniform_block(400, 3).ravel())
    np.testing.assert_array_equal(drawn, expected)


def test_base_class_requires_next_uniform():
    with pytest.raises(NotImplementedError):
        UniformSource().next_uniform()
