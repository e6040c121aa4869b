import io
import logging

import pytest

from pinneaple_surface.config import SamplingConfig
from pinneaple_surface.errors import InvalidArgumentError
from pinneaple_surface.logging_config import enable_logging


def test_defaults():
    cfg = SamplingConfig()
    assert (cfg.default_seed, cfg.zero_weight_policy, cfg.operator_format) == (0, "raise", "csr")


def test_invalid_values():
    with pytest.raises(InvalidArgumentError):
        SamplingConfig(zero_weight_policy="skip")
    with pytest.raises(InvalidArgumentError):
        SamplingConfig(operator_format="dense")
    with pytest.raises(InvalidArgumentError):
        SamplingConfig(default_seed=-3)


def test_from_env(monkeypatch):
    monkeypatch.setenv("PINNEAPLE_SURFACE_SEED", "99")
    monkeypatch.setenv("PINNEAPLE_SURFACE_ZERO_WEIGHT_POLICY", "Uniform")
    cfg = SamplingConfig.from_env()
    assert cfg.default_seed == 99
    assert cfg.zero_weight_policy == "uniform"

    monkeypatch.setenv("PINNEAPLE_SURFACE_SEED", "abc")
    with pytest.raises(InvalidArgumentError):
        SamplingConfig.from_env()


def test_enable_logging_replaces_its_own_handler():
    stream = io.StringIO()
    logger = logging.getLogger("pinneaple_surface")
    own = logging.NullHandler()
    logger.addHandler(own)
    try:
        enable_logging(logging.DEBUG, stream=io.StringIO())
        enable_logging(logging.DEBUG, stream=stream)
        assert own in logger.handlers
        assert len(logger.handlers) == 2

        logging.getLogger("pinneaple_surface.sample.surface").debug("drew %d", 5)
        assert "pinneaple_surface.sample.surface - DEBUG - drew 5" in stream.getvalue()
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
