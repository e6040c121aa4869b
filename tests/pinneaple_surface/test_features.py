import numpy as np
import pytest

from pinneaple_surface.core.mesh import MeshData
from pinneaple_surface.errors import InvalidMeshError
from pinneaple_surface.ops.features import (
    compute_face_areas,
    compute_face_normals,
    compute_vertex_normals,
    surface_area,
)


def test_face_areas_3d(two_triangle_mesh):
    np.testing.assert_allclose(compute_face_areas(two_triangle_mesh), [0.5, 2.5])
    assert surface_area(two_triangle_mesh) == pytest.approx(3.0)


def test_face_areas_agree_across_dimensions():
    tri2 = np.array([[0.0, 0.0], [2.0, 0.0], [0.5, 3.0]])
    f = [[0, 1, 2]]
    a2 = compute_face_areas(MeshData(vertices=tri2, faces=f))
    a3 = compute_face_areas(MeshData(vertices=np.hstack([tri2, np.zeros((3, 1))]), faces=f))
    a5 = compute_face_areas(MeshData(vertices=np.hstack([tri2, np.ones((3, 3))]), faces=f))
    np.testing.assert_allclose(a2, [3.0])
    np.testing.assert_allclose(a3, a2)
    np.testing.assert_allclose(a5, a2)


@pytest.mark.parametrize("d", [2, 3, 4])
def test_degenerate_faces_have_zero_area(d):
    v = np.zeros((4, d))
    v[1, 0] = 1.0
    v[2, 0] = 2.0   # collinear with 0 and 1
    v[3, 1] = 1.0
    f = [[0, 1, 2], [0, 0, 3], [1, 1, 1]]
    areas = compute_face_areas(MeshData(vertices=v, faces=f))
    assert np.all(areas == 0.0)


def _sliver(d):
    v = np.zeros((3, d))
    v[1, 0] = 1.0
    v[2, 0] = 1.0
    v[2, 1] = 1e-8
    return MeshData(vertices=v, faces=[[0, 1, 2]])


@pytest.mark.parametrize("d", [3, 4, 6])
def test_sliver_area_is_accurate_in_every_dimension(d):
    areas = compute_face_areas(_sliver(d))
    assert areas[0] > 0.0
    np.testing.assert_allclose(areas, compute_face_areas(_sliver(3)), rtol=1e-12)
    np.testing.assert_allclose(areas, [5e-9], rtol=1e-12)


def test_normals_on_icosphere_point_outwards(icosphere):
    fn = compute_face_normals(icosphere)
    centers = icosphere.vertices[icosphere.faces].mean(axis=1)
    assert np.all(np.einsum("ij,ij->i", fn, centers) > 0)

    vn = compute_vertex_normals(icosphere)
    np.testing.assert_allclose(np.linalg.norm(vn, axis=1), 1.0)
    np.testing.assert_allclose(vn, icosphere.vertices, atol=0.05)


def test_normals_require_3d(single_triangle_2d):
    with pytest.raises(InvalidMeshError):
        compute_face_normals(single_triangle_2d)
