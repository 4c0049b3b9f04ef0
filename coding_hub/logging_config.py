from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger


def configure_logging(level: int = logging.INFO, force_format: Optional[str] = None) -> None:
    """
    Install a single stream handler on the root logger.

    Output is JSON unless the format resolves to "plain". force_format wins over
    CODING_HUB_LOG_FORMAT; an existing handler set is replaced, not appended to.
    """
    format_mode = (force_format or os.getenv("CODING_HUB_LOG_FORMAT", "json")).lower()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)

    root.handlers.clear()
    root.addHandler(handler)
