from __future__ import annotations

import logging
import os
from pathlib import Path


def setup_logging(debug: bool, log_file: Path | None = None, *, debug_log_file: Path | None = None) -> Path | None:
    """
    Configure root logging and return the file records go to (None for stderr).

    `debug_log_file` is used when debugging without an explicit log file, so
    debug output does not draw over the picker screen.
    """
    level = logging.DEBUG if debug else logging.WARNING
    # Allow env override for e.g. scripted runs
    level_name = os.getenv("LYRICS_PICKER_LOG_LEVEL")
    if level_name:
        try:
            level = getattr(logging, level_name.upper())
        except AttributeError:
            pass

    if debug and log_file is None:
        log_file = debug_log_file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_file) if log_file else None,
    )
    return log_file
