# tasktracker/api/v1/error_handlers.py
"""
FastAPI exception handlers mapping repository errors to HTTP responses.

Repositories raise tasktracker.exceptions.base.* errors; the handlers only
serialize them, since status and payload are decided by the exception
classes themselves (`http_status()` / `to_payload()`).

    validation -> 422, duplicate -> 409, not_found -> 404,
    query -> 500, connection -> 503 (with Retry-After)

Usage (app factory):
    app = FastAPI()
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tasktracker.exceptions.base import (
    DuplicateError,
    NotFoundError,
    QueryError,
    RepositoryError,
    StoreConnectionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 1


def _response(exc: RepositoryError, **headers: str) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload(), headers=headers or None)


# Most specific first

async def duplicate_error_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    logger.info("DuplicateError for %s %s: key=%s fields=%s", request.method, request.url, exc.key, exc.fields)
    return _response(exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("ValidationError for %s %s: key=%s fields=%s", request.method, request.url, exc.key, exc.fields)
    return _response(exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("NotFoundError for %s %s: key=%s", request.method, request.url, exc.key)
    return _response(exc)


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    # constraint names stay in the log, never in the payload
    logger.error("QueryError for %s %s: %s constraint=%s", request.method, request.url, exc, exc.constraint)
    return _response(exc)


async def store_connection_error_handler(request: Request, exc: StoreConnectionError) -> JSONResponse:
    logger.error("StoreConnectionError for %s %s: %s", request.method, request.url, exc)
    return _response(exc, **{"Retry-After": str(RETRY_AFTER_SECONDS)})


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Fallback for any other RepositoryError (400 unless its code says otherwise)."""
    logger.warning("RepositoryError for %s %s: %s", request.method, request.url, exc)
    return _response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DuplicateError, duplicate_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(QueryError, query_error_handler)
    app.add_exception_handler(StoreConnectionError, store_connection_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
