"""
Logging builder: assemble a dictConfig mapping from Settings and apply it.

    setup_logging(get_settings())

Console output is always on. File handlers (all levels + errors only) replace
the error console when LOG_TO_STDOUT is false and LOG_DIR is set.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from tasktracker.config.settings import Settings
from tasktracker.utils.project_info import get_project_name

from .filters import OperationIdFilter, RedactFilter
from .formatters import ColorFormatter, JsonFormatter
from .handlers import (
    get_console_handler,
    get_error_console_handler,
    get_error_file_handler,
    get_file_handler,
)


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping:
      - formatters: "standard" (color when LOG_FORMAT=text) and "json"
      - filters: "operation_id", "redact"
      - handlers: console + (file, error_file) or console + error_console
      - loggers: root, "tasktracker", sqlalchemy.engine
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(operation_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "operation_id": {"()": OperationIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "tasktracker": {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "sqlalchemy.engine": {
                "level": "DEBUG" if settings.ENABLE_SQL_LOGGING else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """Create LOG_DIR when writing files, then apply the dictConfig."""
    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    # records emitted straight on the root logger still get an operation_id
    logging.getLogger().addFilter(OperationIdFilter())
