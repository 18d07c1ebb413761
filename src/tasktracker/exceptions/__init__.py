# src/tasktracker/exceptions/
# ├─ base.py                   # RepositoryError taxonomy (validation, not found, query, connection)
# ├─ messages.py               # ErrorKey + bilingual catalog + render_message()
# ├─ integrity_classifier.py   # IntegrityError -> constraint violation tag
# └─ mapper.py                 # db_error_handler(): raw DB errors -> taxonomy

from .base import (
    RepositoryError,
    ValidationError,
    DuplicateError,
    NotFoundError,
    QueryError,
    StoreConnectionError,
)
from .messages import ErrorKey, render_message

__all__ = [
    "RepositoryError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "QueryError",
    "StoreConnectionError",
    "ErrorKey",
    "render_message",
]
