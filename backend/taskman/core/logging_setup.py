from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO, *, sql_echo: bool = False) -> None:
    """
    Configure root logging with one stderr handler.

    Call once at startup. SQL statements are logged through the
    sqlalchemy.engine logger, at INFO when sql_echo is set and held at
    WARNING otherwise.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # calling twice must not stack handlers
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    logging.captureWarnings(True)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
