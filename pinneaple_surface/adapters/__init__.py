from .torch_adapter import operator_to_torch, samples_to_torch

__all__ = [
    "samples_to_torch",
    "operator_to_torch",
]
