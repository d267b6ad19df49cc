"""
Process-wide logging: console plus a rotating file.

Loggers used across the app: ``app`` (request log), ``app.departments``,
``app.employees`` and ``app.errors``.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE = "app.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5


def _owns_file(handler: logging.Handler, path: Path) -> bool:
    return isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == path.resolve()


def setup_logging(log_dir: str | Path | None = None, level: str | None = None, sql_echo: bool = False) -> Path:
    """
    Attach console and rotating-file handlers to the root logger.

    ``log_dir`` and ``level`` fall back to LOG_DIR / LOG_LEVEL, then to
    ``logs`` / INFO. Calling it again for the same file is a no-op.
    Returns the log file path.
    """
    log_dir = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE

    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    # SQL statements only reach the log when echo is on
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)

    if any(_owns_file(h, log_path) for h in root.handlers):
        return log_path

    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    for handler in (console, file_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return log_path
