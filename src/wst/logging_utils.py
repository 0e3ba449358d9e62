"""Logging setup shared by the tracker core and the CLI."""
import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging once; later calls only adjust the level."""

    level = _resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, installing the baseline config if missing."""

    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
