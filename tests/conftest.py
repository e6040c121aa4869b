import os

import numpy as np
import pytest

from pinneaple_surface.core.mesh import MeshData


@pytest.fixture(scope="session")
def rng_seed():
    return int(os.environ.get("PINNEAPLE_TEST_SEED", "1234"))


@pytest.fixture
def two_triangle_mesh():
    # face areas 0.5 and 2.5
    v = np.array(
        [
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [3.0, 3.0, 0.0],
        ],
        dtype=np.float64,
    )
    f = np.array([[0, 1, 2], [1, 3, 2]], dtype=np.int64)
    return MeshData(vertices=v, faces=f)


@pytest.fixture
def single_triangle_2d():
    v = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 2.0]], dtype=np.float64)
    f = np.array([[0, 1, 2]], dtype=np.int64)
    return MeshData(vertices=v, faces=f)


@pytest.fixture
def icosphere():
    import trimesh

    from pinneaple_surface.io.trimesh_bridge import TrimeshBridge

    tm = trimesh.creation.icosphere(subdivisions=2, radius=1.0)
    return TrimeshBridge().from_trimesh(tm)
