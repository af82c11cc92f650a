from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Attach one stream handler to the root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _configured

    if level is None:
        level = os.getenv("SAFETY_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # requests/urllib3 log every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _configured = True
