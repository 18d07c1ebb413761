"""
Logging filters.

OperationIdFilter stamps every record with the id of the repository operation
that produced it, read from a ContextVar so the id follows the coroutine
across awaits. RedactFilter masks sensitive record attributes.
"""

import contextvars
import logging
import uuid
from contextlib import contextmanager
from logging import LogRecord
from typing import Iterator

_operation_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation_id", default=None
)


def set_operation_id(operation_id: str | None) -> contextvars.Token:
    """Set the id for the current context; keep the token for reset_operation_id()."""
    return _operation_id_ctx.set(operation_id)


def reset_operation_id(token: contextvars.Token) -> None:
    _operation_id_ctx.reset(token)


def get_operation_id() -> str | None:
    return _operation_id_ctx.get()


def new_operation_id() -> str:
    return uuid.uuid4().hex[:12]


@contextmanager
def operation_scope(operation_id: str | None = None) -> Iterator[str]:
    """
    Give every log line inside the block the same operation id.

    A scope opened inside another one keeps the outer id, so nested
    repository calls stay correlated with the call that started them.
    """
    current = get_operation_id()
    if current is not None and operation_id is None:
        yield current
        return
    token = set_operation_id(operation_id or new_operation_id())
    try:
        yield get_operation_id()
    finally:
        reset_operation_id(token)


class OperationIdFilter(logging.Filter):
    """
    Guarantee `record.operation_id` exists: an explicit `extra` value first,
    then the context var, then the sentinel "-".
    """

    def filter(self, record: LogRecord) -> bool:
        record.operation_id = (
            getattr(record, "operation_id", None) or get_operation_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "password_hash",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
