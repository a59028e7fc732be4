from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger configured with basicConfig."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Set the level of every ``legend`` logger."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("legend").setLevel(level)
