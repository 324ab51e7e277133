# util/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from config.settings import settings

logging.captureWarnings(True)

TEXT_FMT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DATE_FMT = "%Y-%m-%dT%H:%M:%S%z"

# Admin SDK transport chatter
_QUIET = ("urllib3", "google.auth", "cachecontrol", "httpx")


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[37m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so the file handler still sees the plain levelname.
        tinted = logging.makeLogRecord(record.__dict__)
        lvl = record.levelname
        tinted.levelname = f"{self.COLORS.get(lvl, self.RESET)}{lvl}{self.RESET}"
        return super().format(tinted)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(TEXT_FMT, datefmt=DATE_FMT))
    return handler


def _file_handler(level: int) -> logging.Handler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(TEXT_FMT, datefmt=DATE_FMT))
    return handler


def init_logger() -> logging.Logger:
    """
    Idempotent logger init, safe to call from both the entry point and the
    app lifespan:
    - stdout always, colored level names.
    - Rotating file under settings.LOG_DIR when settings.LOG_TO_FILE is set.
    - Level from settings.LOG_LEVEL, unknown names fall back to INFO.
    """
    root = logging.getLogger()
    named = logging.getLogger(settings.LOGGER_NAME)
    if getattr(root, "_relay_inited", False):
        return named

    level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(level))
    if settings.LOG_TO_FILE:
        root.addHandler(_file_handler(level))

    for name in _QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    root._relay_inited = True  # type: ignore[attr-defined]
    named.debug("Logger initialized", extra={"component": "bootstrap"})
    return named
