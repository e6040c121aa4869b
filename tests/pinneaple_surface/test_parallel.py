import numpy as np
import pytest

from pinneaple_surface.errors import InvalidArgumentError
from pinneaple_surface.sample.parallel import sample_surface_parallel


def test_parallel_is_independent_of_worker_count(icosphere, rng_seed):
    a = sample_surface_parallel(icosphere, 1000, seed=rng_seed, n_workers=1, chunk_size=128)
    b = sample_surface_parallel(icosphere, 1000, seed=rng_seed, n_workers=4, chunk_size=128)
    assert len(a) == 1000
    np.testing.assert_array_equal(a.face_ids, b.face_ids)
    np.testing.assert_array_equal(a.barycentric, b.barycentric)


def test_parallel_invariants(two_triangle_mesh, rng_seed):
    s = sample_surface_parallel(two_triangle_mesh, 60_000, seed=rng_seed, n_workers=3)
    np.testing.assert_allclose(s.barycentric.sum(axis=1), 1.0, atol=1e-12)
    assert set(np.unique(s.face_ids)) <= {0, 1}
    assert np.mean(s.face_ids == 0) == pytest.approx(0.5 / 3.0, abs=0.01)


def test_parallel_edge_cases(two_triangle_mesh):
    assert len(sample_surface_parallel(two_triangle_mesh, 0)) == 0
    assert len(sample_surface_parallel(two_triangle_mesh, 5, n_workers=8)) == 5
    with pytest.raises(InvalidArgumentError):
        sample_surface_parallel(two_triangle_mesh, 5, n_workers=0)
    with pytest.raises(InvalidArgumentError):
        sample_surface_parallel(two_triangle_mesh, -5)
