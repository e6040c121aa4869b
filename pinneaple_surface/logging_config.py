"""
Opt-in console logging for pinneaple_surface.

The package itself only emits through module loggers (debug lines for
sample counts and distribution totals, a warning on the uniform
fallback); nothing is printed until a script calls enable_logging().
"""
import logging
from typing import IO, Optional

LOGGER_NAME = "pinneaple_surface"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def enable_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Attach one stream handler (stderr unless `stream` is given) to the
    package logger. Calling it again replaces the handler it installed
    earlier instead of stacking a second one; handlers added by the
    application are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for h in list(logger.handlers):
        if getattr(h, "_pinneaple_surface", False):
            logger.removeHandler(h)
            h.close()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    handler._pinneaple_surface = True
    logger.addHandler(handler)
    return logger
