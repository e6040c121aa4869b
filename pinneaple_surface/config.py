"""SamplingConfig: default seed, zero-weight policy and operator format."""
from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import InvalidArgumentError


ZERO_WEIGHT_POLICIES = ("raise", "uniform")
OPERATOR_FORMATS = ("csr", "csc", "coo")


@dataclass
class SamplingConfig:
    """
    Surface sampling configuration.

    - default_seed: seed of the internal random source when the caller
      does not pass one (keeps runs reproducible)
    - zero_weight_policy: what to do when n > 0 samples are requested but
      every face has zero weight
        * "raise":   DegenerateDistributionError
        * "uniform": pick faces uniformly by count instead (logs a warning)
    - operator_format: scipy.sparse format of the sampling operator
    """

    default_seed: int = 0
    zero_weight_policy: str = "raise"
    operator_format: str = "csr"

    def __post_init__(self):
        self.default_seed = int(self.default_seed)
        if self.default_seed < 0:
            raise InvalidArgumentError("default_seed must be >= 0")

        self.zero_weight_policy = str(self.zero_weight_policy).lower().strip()
        if self.zero_weight_policy not in ZERO_WEIGHT_POLICIES:
            raise InvalidArgumentError(
                f"Unknown zero_weight_policy '{self.zero_weight_policy}'. "
                f"Available: {list(ZERO_WEIGHT_POLICIES)}"
            )

        self.operator_format = str(self.operator_format).lower().strip()
        if self.operator_format not in OPERATOR_FORMATS:
            raise InvalidArgumentError(
                f"Unknown operator_format '{self.operator_format}'. "
                f"Available: {list(OPERATOR_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "SamplingConfig":
        """
        Build a config from environment variables:
          PINNEAPLE_SURFACE_SEED
          PINNEAPLE_SURFACE_ZERO_WEIGHT_POLICY
          PINNEAPLE_SURFACE_OPERATOR_FORMAT
        Unset variables keep the dataclass defaults.
        """
        kwargs = {}
        seed = os.environ.get("PINNEAPLE_SURFACE_SEED")
        if seed is not None:
            try:
                kwargs["default_seed"] = int(seed)
            except ValueError as e:
                raise InvalidArgumentError(f"PINNEAPLE_SURFACE_SEED must be an integer, got {seed!r}") from e
        policy = os.environ.get("PINNEAPLE_SURFACE_ZERO_WEIGHT_POLICY")
        if policy:
            kwargs["zero_weight_policy"] = policy
        fmt = os.environ.get("PINNEAPLE_SURFACE_OPERATOR_FORMAT")
        if fmt:
            kwargs["operator_format"] = fmt
        return cls(**kwargs)


DEFAULT_CONFIG = SamplingConfig()
