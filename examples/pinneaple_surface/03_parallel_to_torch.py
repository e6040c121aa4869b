import numpy as np
import torch

from pinneaple_surface import MeshData, sample_surface_parallel
from pinneaple_surface.adapters import samples_to_torch

# flat 2-D plate made of two triangles
plate = MeshData(
    vertices=np.array([[0.0, 0.0], [2.0, 0.0], [2.0, 1.0], [0.0, 1.0]]),
    faces=np.array([[0, 1, 2], [0, 2, 3]]),
)

samples = sample_surface_parallel(plate, 100_000, seed=7, n_workers=4, chunk_size=8192)
X = samples.to_points(plate)

batch = samples_to_torch(samples.barycentric, samples.face_ids, X, dtype=torch.float32)
print({k: tuple(v.shape) for k, v in batch.items()})
