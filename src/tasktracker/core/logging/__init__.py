# src/tasktracker/core/logging/
# ├─ builder.py      # make_dict_config(settings) + setup_logging(settings)
# ├─ formatters.py   # JsonFormatter, ColorFormatter
# ├─ filters.py      # OperationIdFilter (+ contextvar helpers), RedactFilter
# └─ handlers.py     # console / file handler dicts for dictConfig

from .builder import setup_logging, make_dict_config
from .filters import (
    OperationIdFilter,
    RedactFilter,
    get_operation_id,
    operation_scope,
    set_operation_id,
    reset_operation_id,
)

__all__ = [
    "setup_logging",
    "make_dict_config",
    "OperationIdFilter",
    "RedactFilter",
    "get_operation_id",
    "operation_scope",
    "set_operation_id",
    "reset_operation_id",
]
