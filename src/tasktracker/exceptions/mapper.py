"""
Translate raw SQLAlchemy / driver failures into the repository error taxonomy.

    IntegrityError (unique, duplicate_key given)  -> DuplicateError(duplicate_key)
    IntegrityError (anything else)                -> QueryError(failure_key)
    OperationalError / InterfaceError / pool
    timeouts / OSError / TimeoutError             -> StoreConnectionError (retryable)
    any other exception                           -> QueryError(failure_key)

RepositoryError subclasses raised inside the block (validation, not found)
pass through unchanged, after the session has been rolled back.
"""
import re
import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from .base import DuplicateError, QueryError, RepositoryError, StoreConnectionError
from .integrity_classifier import UniqueViolation, classify_integrity_error
from .messages import DEFAULT_LANGUAGE, ErrorKey

logger = logging.getLogger(__name__)

CONNECTION_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    OSError,
    TimeoutError,
)

# -----------------------
# Column extraction helpers
# -----------------------

_COLUMN_PATTERNS = (
    # Postgres: 'null value in column "username" violates not-null constraint'
    re.compile(r'null value in column "(?P<cols>[^"]+)"', re.IGNORECASE),
    # Postgres: 'DETAIL:  Key (user_id, task_id)=(1, 2) already exists.'
    re.compile(r'key \((?P<cols>[^)]+)\)=', re.IGNORECASE),
    # SQLite: 'UNIQUE constraint failed: user_assign.user_id, user_assign.task_id'
    re.compile(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', re.IGNORECASE | re.MULTILINE),
)


def extract_columns_from_integrity(exc: IntegrityError) -> list[str] | None:
    """Best-effort extraction of the involved column names from the driver message."""
    msg = str(exc.orig) if exc.orig is not None else str(exc)
    for pattern in _COLUMN_PATTERNS:
        m = pattern.search(msg)
        if m:
            return [c.split(".")[-1].strip().strip('"') for c in re.split(r",\s*", m.group("cols"))]
    return None


# -----------------------
# Mapper
# -----------------------

def map_integrity_error(exc: IntegrityError, *, model_name: str, failure_key: ErrorKey,
                        duplicate_key: ErrorKey | None = None,
                        language: str = DEFAULT_LANGUAGE) -> RepositoryError:
    """Build (not raise) the app-level error for an IntegrityError."""
    violation, constraint_name = classify_integrity_error(exc)
    columns = extract_columns_from_integrity(exc)
    context = f"{model_name}: {', '.join(columns)}" if columns else model_name

    if violation is UniqueViolation and duplicate_key is not None:
        # expected client-level scenario, usually a lost check-then-insert race
        logger.info(
            "mapper.duplicate_detected",
            extra={"model": model_name, "fields": columns, "constraint": constraint_name},
        )
        return DuplicateError(duplicate_key, context, language=language,
                              fields=columns, constraint=constraint_name)

    logger.warning(
        "mapper.integrity_violation",
        extra={
            "model": model_name,
            "violation": violation.__name__,
            "fields": columns,
            "constraint": constraint_name,
        },
    )
    return QueryError(failure_key, context, language=language,
                      fields=columns, constraint=constraint_name)


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, *, model_name: str, failure_key: ErrorKey,
                           duplicate_key: ErrorKey | None = None,
                           language: str = DEFAULT_LANGUAGE):
    """
    Usage:
        async with db_error_handler(session, model_name="Task", failure_key=ErrorKey.TASK_CREATE_FAILED):
            async with session.begin():
                ...
    Rolls back on any error and re-raises it as a RepositoryError.
    """
    try:
        yield
    except RepositoryError:
        await _safe_rollback(db, model_name)
        raise
    except IntegrityError as exc:
        await _safe_rollback(db, model_name)
        raise map_integrity_error(
            exc,
            model_name=model_name,
            failure_key=failure_key,
            duplicate_key=duplicate_key,
            language=language,
        ) from exc
    except CONNECTION_ERRORS as exc:
        await _safe_rollback(db, model_name)
        logger.error(
            "mapper.connection_failure",
            extra={"model": model_name, "error_type": type(exc).__name__},
        )
        raise StoreConnectionError(
            ErrorKey.STORE_CONNECTION_FAILED,
            f"{failure_key.value}: {type(exc).__name__}",
            language=language,
        ) from exc
    except Exception as exc:
        await _safe_rollback(db, model_name)
        logger.exception("mapper.unexpected_error", extra={"model": model_name})
        raise QueryError(failure_key, f"{model_name}: {type(exc).__name__}", language=language) from exc


async def _safe_rollback(db: AsyncSession, model_name: str) -> None:
    try:
        await db.rollback()
    except Exception:
        logger.exception("mapper.rollback_failed", extra={"model": model_name})
