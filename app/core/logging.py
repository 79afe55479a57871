# app/core/logging.py

import logging
import sys


class _SQLNoiseFilter(logging.Filter):
    """Drop SQLAlchemy statement echo below WARNING unless echo was asked for."""

    def __init__(self, echo: bool) -> None:
        super().__init__()
        self.echo = echo

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("sqlalchemy.") and not self.echo:
            return record.levelno >= logging.WARNING
        return True


def setup_logging(level: str | int = logging.INFO, *, sql_echo: bool = False) -> None:
    """
    Configure a single console handler on the root logger.

    Safe to call more than once: only the handler installed here is replaced,
    handlers added by uvicorn or pytest are left alone.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if getattr(h, "_taskflow", False):
            root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_SQLNoiseFilter(sql_echo))
    ch._taskflow = True
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
