"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Messages go to stdout and, if ``log_file`` is given, to that file as
    well (overwritten on each run).

    Args:
        level: Level name for tunnelgrid loggers (``"DEBUG"``, ``"INFO"``...).
        log_file: Optional path of a log file to write.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
    logging.getLogger("tunnelgrid").setLevel(level.upper())
