import trimesh
import numpy as np

from pinneaple_surface.io.trimesh_bridge import TrimeshBridge
from pinneaple_surface.ops.features import compute_vertex_normals
from pinneaple_surface.sample import sample_surface_operator

# one draw, many attributes
g = TrimeshBridge().from_trimesh(trimesh.creation.icosphere(subdivisions=2, radius=2.0))
S, face_id = sample_surface_operator(g, 2_000, rng=123)

X = S @ g.vertices                          # positions
N = S @ compute_vertex_normals(g)           # normals at the same points
T = S @ (g.vertices[:, 2] ** 2)             # any scalar field, e.g. a boundary temperature

print("operator:", S.shape, "nnz:", S.nnz)
print("positions:", X.shape, "normals:", N.shape, "field:", T.shape)
print("normal/position alignment:", float(np.mean(np.einsum("ij,ij->i", N, X / 2.0))))
