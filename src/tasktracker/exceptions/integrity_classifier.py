"""
Classify SQLAlchemy IntegrityErrors by the kind of constraint that failed.

The classes below are tags only. They are never raised; `mapper.py` turns the
classification into an app-level RepositoryError.
"""

import logging
from enum import Enum
from typing import Type

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintViolation(Exception):
    """Base tag for integrity/constraint violations."""


class UniqueViolation(ConstraintViolation):
    """Unique constraint / duplicate value."""


class NotNullViolation(ConstraintViolation):
    """NOT NULL violation (missing required field)."""


class ForeignKeyViolation(ConstraintViolation):
    """Foreign key constraint violated."""


class CheckViolation(ConstraintViolation):
    """CHECK constraint violated."""


class UnknownViolation(ConstraintViolation):
    """Unrecognized integrity error."""


class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


PGCODE_VIOLATION_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION: UniqueViolation,
    PostgresErrorCodes.NOT_NULL_VIOLATION: NotNullViolation,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION: ForeignKeyViolation,
    PostgresErrorCodes.CHECK_VIOLATION: CheckViolation,
}

# message fragments checked in order (SQLite, MySQL, drivers without pgcode)
_MESSAGE_HINTS: list[tuple[Type[ConstraintViolation], tuple[str, ...]]] = [
    (UniqueViolation, ("unique constraint", "unique failed", "unique violation", "duplicate")),
    (NotNullViolation, ("not null constraint", "not null", "null value in column")),
    (ForeignKeyViolation, ("foreign key constraint", "foreign key", "is not present in table")),
    (CheckViolation, ("check constraint", "check failed")),
]


def _pgcode_of(orig) -> str | None:
    # psycopg exposes `pgcode`, asyncpg (through the SQLAlchemy adapter) `sqlstate`
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _classify_from_postgres_diag(orig) -> tuple[Type[ConstraintViolation] | None, str | None]:
    pgcode = _pgcode_of(orig)
    if not pgcode:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None) if diag else None
    constraint_name = constraint_name or getattr(orig, "constraint_name", None)

    violation = PGCODE_VIOLATION_MAP.get(pgcode)
    if violation:
        logger.debug(
            "integrity.postgres_diagnostic",
            extra={"pgcode": pgcode, "constraint_name": constraint_name},
        )
        return violation, constraint_name

    logger.warning(
        "integrity.unknown_pgcode",
        extra={"pgcode": pgcode, "constraint_name": constraint_name},
    )
    return UnknownViolation, constraint_name


def _classify_from_generic_message(msg: str) -> tuple[Type[ConstraintViolation], None]:
    normalized = msg.lower()
    for violation, hints in _MESSAGE_HINTS:
        if any(hint in normalized for hint in hints):
            return violation, None

    logger.warning("integrity.unknown_message", extra={"message_snippet": (msg or "")[:200]})
    return UnknownViolation, None


def classify_integrity_error(exc: IntegrityError) -> tuple[Type[ConstraintViolation], str | None]:
    """
    Return (violation tag, constraint name if the driver reported one).

    Postgres SQLSTATE codes are trusted first; otherwise the driver message is
    matched against known phrases.
    """
    orig = exc.orig
    violation, constraint_name = _classify_from_postgres_diag(orig)
    if violation is not None:
        return violation, constraint_name
    return _classify_from_generic_message(str(orig))
