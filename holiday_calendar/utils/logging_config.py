"""
Logging setup for the holiday calendar service.

Console output always; a rotating file (LOG_FILE, default logs/app.log) unless
file logging is turned off with an empty LOG_FILE.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

DEFAULT_LOG_FILE = Path(__file__).resolve().parent.parent.parent / "logs" / "app.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5

FORMAT_CONSOLE = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
FORMAT_FILE = "%(asctime)s | %(levelname)-7s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that only log at WARNING and above
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore", "apscheduler")


def _file_handler(path: Path, level: int) -> Optional[logging.Handler]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    except OSError:
        logging.getLogger(__name__).warning("Could not open log file %s; file logging disabled", path)
        return None
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT_FILE, datefmt=DATE_FMT))
    return handler


def setup_logging(level: str = "INFO", log_file: Union[str, Path, None] = DEFAULT_LOG_FILE) -> None:
    """
    Configure the root logger once per process.

    Calling it again (app factory in tests, --reload) only updates the level.
    """
    level_value = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level_value)

    if getattr(setup_logging, "_configured", False):
        return
    setup_logging._configured = True

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level_value)
    console.setFormatter(logging.Formatter(FORMAT_CONSOLE, datefmt=DATE_FMT))
    root.addHandler(console)

    if log_file:
        handler = _file_handler(Path(log_file), level_value)
        if handler is not None:
            root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
