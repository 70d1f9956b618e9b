"""Application logging for the quiz front end."""

import logging
from pathlib import Path

LOGGER_NAME = "learning_track"


def setup_app_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Configure logging to console and, if log_file is given, to a file."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, level.upper(), logging.WARNING))
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
        logger.addHandler(fh)

    return logger
