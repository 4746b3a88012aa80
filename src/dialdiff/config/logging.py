"""Root logger setup for the dialdiff CLI."""

from __future__ import annotations

import logging
from typing import Final

DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(message)s"
VERBOSE_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# vobject reports every unparsable card line at DEBUG
_QUIET_LOGGERS: Final[tuple[str, ...]] = ("vobject",)


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger: INFO progress lines, or DEBUG with logger names."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=VERBOSE_FORMAT if verbose else DEFAULT_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
