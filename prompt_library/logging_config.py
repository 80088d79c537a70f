"""Root logger setup for the API process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a stream handler on the root logger at ``level``.

    Calling it again only adjusts the level, so repeated application factories
    in tests do not stack handlers.
    """

    root = logging.getLogger()
    if not any(getattr(handler, "_prompt_library", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._prompt_library = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level)


__all__ = ["LOG_FORMAT", "configure_logging"]
