"""
Formatters used by the dictConfig built in builder.py.

  - JsonFormatter: one JSON object per record, with service/env/version,
    the operation id and every `extra` attribute.
  - ColorFormatter: compact ANSI-colored lines for development consoles.
"""

import json
import logging
from logging import LogRecord
from typing import Any

from tasktracker.utils.project_info import get_project_version

PROJECT_VERSION = get_project_version()

# LogRecord attributes that are either copied explicitly or not worth emitting
_RESERVED = {
    "args", "msg", "levelname", "levelno", "name", "pathname", "filename", "module",
    "lineno", "funcName", "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "exc_info", "exc_text", "stack_info", "taskName", "message",
}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Non-serializable extras are stringified so formatting never raises.
    """

    def __init__(self, *, env: str | None = None, service: str = "tasktracker", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "operation_id": getattr(record, "operation_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in log_record or key in _RESERVED or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """Human-friendly colored lines: TIMESTAMP | LEVEL | LOGGER | OPERATION_ID | MESSAGE."""

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red
        "RESET": "\033[0m",
    }

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        line = (
            f"{timestamp} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<30} | "
            f"{getattr(record, 'operation_id', '-'):<12} | "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            line = line + "\n" + self.formatException(record.exc_info)
        return line
