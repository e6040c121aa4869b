import logging

import trimesh
import numpy as np

from pinneaple_surface.io.trimesh_bridge import TrimeshBridge
from pinneaple_surface.logging_config import enable_logging
from pinneaple_surface.sample import sample_surface_points

enable_logging(logging.DEBUG)

# create trimesh geometry
mesh = trimesh.creation.icosphere(subdivisions=3, radius=1.0)

# bridge
bridge = TrimeshBridge()
g = bridge.from_trimesh(mesh)

# sample points (seeded, reproducible)
B, face_id, pts = sample_surface_points(g, n=10_000, rng=0)

print("mesh faces:", len(mesh.faces))
print("sample points:", pts.shape, "min/max", pts.min(), pts.max())
print("radius spread:", np.linalg.norm(pts, axis=1).min(), np.linalg.norm(pts, axis=1).max())
