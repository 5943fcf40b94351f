"""Logging setup for the calendar command line tools."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

_CONFIGURED = False


class CalendarJsonFormatter(jsonlogger.JsonFormatter):
    """Stamps each JSON log line with the run id and invoking command."""

    def __init__(self, run_id: str | None, command: str | None) -> None:
        super().__init__()
        self._run_id = run_id
        self._command = command

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("run_id", self._run_id)
        log_record.setdefault("command", self._command)
        log_record.setdefault("logger", record.name)
        log_record.setdefault("level", record.levelname)


def build_logging_config(
    *, run_id: str | None, command: str | None, level: str, log_path: Path
) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CalendarJsonFormatter,
                "run_id": run_id,
                "command": command,
            },
            "console": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "console",
            },
            "file": {
                "class": "logging.handlers.TimedRotatingFileHandler",
                "level": level,
                "when": "midnight",
                "backupCount": int(os.environ.get("LOG_RETENTION_DAYS", "7")),
                "filename": str(log_path),
                "encoding": "utf-8",
                "formatter": "json",
            },
        },
        "loggers": {
            "holidaycal": {"level": level},
        },
        "root": {
            "level": level,
            "handlers": ["console", "file"],
        },
    }


def configure_logging(
    *, run_id: str | None = None, command: str | None = None, level: str | None = None
) -> None:
    """Configure console + rotating JSON file logging once per process."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    log_dir = Path(os.environ.get("LOG_DIR", "storage/logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(
            run_id=run_id,
            command=command,
            level=resolved_level,
            log_path=log_dir / "holidaycal.log",
        )
    )
    _CONFIGURED = True


__all__ = ["CalendarJsonFormatter", "build_logging_config", "configure_logging"]
