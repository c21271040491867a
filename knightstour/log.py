import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = '[%(levelname)s][%(filename)s:%(lineno)s][%(asctime)s] %(message)s'
DATE_FORMAT = '%Y:%m:%d, %H:%M'


def init_logger(level: int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """Send package logs to stderr, and to ``log_file`` when one is given."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=level,
        handlers=handlers,
        force=True,
    )
