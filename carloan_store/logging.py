"""Structured logging configuration for carloan-store."""

import logging
import sys
from pathlib import Path
from typing import Any

# Parent of every module logger in the package
STORE_LOGGER = "carloan_store"

# Libraries that log too much below WARNING
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    data_dir: Path | None = None,
) -> None:
    """Configure logging for carloan-store.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    data_dir : Path | None
        Store directory attached to every record, so JSON logs from
        several stores on one host can be told apart.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    if data_dir is not None:
        console_handler.addFilter(DataDirFilter(data_dir))
    root_logger.addHandler(console_handler)

    logging.getLogger(STORE_LOGGER).setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class DataDirFilter(logging.Filter):
    """Stamp records with the store directory they concern."""

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self.data_dir = str(data_dir)

    def filter(self, record: logging.LogRecord) -> bool:
        record.data_dir = self.data_dir
        return True


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        data_dir = getattr(record, "data_dir", None)
        if data_dir is not None:
            log_data["data_dir"] = data_dir

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        # Peso sign and Filipino names stay readable
        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str | None
        Logger name (usually __name__); the package logger when omitted.

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name or STORE_LOGGER)
