"""Process-wide logging setup shared by the CLI and the HTTP app."""

from __future__ import annotations

import logging
import sys

__all__ = ["configure_logging"]

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger.

    Unknown level names fall back to INFO. Calling twice replaces the
    handler instead of stacking a second one.
    """
    resolved = logging.getLevelName(str(level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_blog_handler", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._blog_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(resolved)
