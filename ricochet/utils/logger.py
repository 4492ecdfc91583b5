"""Logging setup shared by the engine, the CLI and the debug helpers.

Every engine module holds a ``LOGGER`` under the ``ricochet`` namespace.
Outcomes (accepted puzzle, win) go to INFO, per-attempt rejections and
search statistics to DEBUG, fallback use to WARNING and rejected layouts to
ERROR.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str], default: int = logging.WARNING) -> int:
    """Map ``"debug"``/``"INFO"``/``10`` style values to a logging level."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install the single root handler; ``stream`` defaults to stderr.

    The CLI writes its JSON payload to stdout, so log records never share
    that stream unless a caller asks for it.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "ricochet")
