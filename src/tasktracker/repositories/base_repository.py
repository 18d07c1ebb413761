"""
Base repository class providing the shared CRUD flow for every entity.

A repository is handed the session factory (the shared pool) and opens one
short-lived session per operation. Nothing is cached between calls.

Write flow:
    field validation (no I/O)
    -> open session + transaction
    -> referential / hierarchy checks on that same session
    -> mutation
    -> commit, or rollback + typed RepositoryError

Read flow (get_by_filter):
    filter validation + pagination validation (no I/O)
    -> compile filter to a WHERE fragment
    -> count + page fetch inside one transaction, so both see one snapshot

Subclasses only declare what differs: the model, the error keys and which
validators / filter compiler apply.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, Iterator, Type, TypeVar

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.elements import ColumnElement

from tasktracker.config.settings import Settings
from tasktracker.core.logging.filters import operation_scope
from tasktracker.database.base import Base
from tasktracker.exceptions.base import NotFoundError, RepositoryError
from tasktracker.exceptions.mapper import db_error_handler
from tasktracker.exceptions.messages import DEFAULT_LANGUAGE, ErrorKey
from tasktracker.queries.pagination import PageRequest, ensure_page_exists, validate_pagination
from tasktracker.queries.predicates import CompiledPredicate
from tasktracker.validators.fields import check_id_for_update

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGE_SIZE = 100


def now_epoch() -> int:
    """Current time as unix epoch seconds."""
    return int(time.time())


@dataclass(frozen=True)
class RepositoryKeys:
    """Error keys one repository reports with, per operation / failure."""

    id_invalid: ErrorKey
    not_found: ErrorKey
    pagination_not_found: ErrorKey
    delete_not_found: ErrorKey
    create_failed: ErrorKey
    get_by_id_failed: ErrorKey
    get_all_failed: ErrorKey
    get_by_filter_failed: ErrorKey
    get_count_failed: ErrorKey
    update_failed: ErrorKey
    delete_failed: ErrorKey
    duplicate: ErrorKey | None = None


class RepositorySupport:
    """
    Plumbing shared by entity repositories and the aggregating task/user
    repository: per-operation session, structured logging, paging.
    """

    model: Type[Base]
    pagination_not_found_key: ErrorKey

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], *,
                 language: str = DEFAULT_LANGUAGE, max_page_size: int = DEFAULT_MAX_PAGE_SIZE):
        """
        Args:
            session_factory: async_sessionmaker bound to the shared engine
            language: message set every raised error is rendered with ("en" / "ja")
            max_page_size: inclusive upper bound for page_size on this entity
        """
        self.session_factory = session_factory
        self.language = language
        self.max_page_size = max_page_size

    @property
    def model_name(self) -> str:
        return self.model.__name__

    # -----------------------
    # Logging
    # -----------------------

    @contextmanager
    def _track(self, operation: str, *, level: int = logging.INFO, **extra: Any) -> Iterator[dict]:
        """
        Wrap one repository operation in its own operation id and emit
        `repo.<operation>.start` / `.success` / `.failed` events.

        The yielded dict is merged into the success event, so callers can add
        e.g. the created id or the row count.
        """
        fields = {"model": self.model_name, "operation": operation, **extra}
        with operation_scope():
            logger.debug(f"repo.{operation}.start", extra=fields)
            start = time.perf_counter()
            try:
                yield fields
            except RepositoryError as exc:
                # expected domain failures at INFO; store failures were already logged by the mapper
                logger.info(
                    f"repo.{operation}.failed",
                    extra={**fields, "key": exc.key.value, "error_code": exc.error_code},
                )
                raise
            fields["duration_ms"] = int((time.perf_counter() - start) * 1000)
            logger.log(level, f"repo.{operation}.success", extra=fields)

    # -----------------------
    # Paging
    # -----------------------

    def _page_request(self, page: int | None, page_size: int | None) -> PageRequest | None:
        return validate_pagination(page, page_size, self.max_page_size, language=self.language)

    async def _count_where(self, session: AsyncSession, clauses: Iterable[ColumnElement]) -> int:
        stmt = select(func.count()).select_from(self.model)
        for clause in clauses:
            stmt = stmt.where(clause)
        return await session.scalar(stmt) or 0

    async def _execute_page(self, session: AsyncSession, stmt, clauses: list, request: PageRequest | None):
        """
        Apply `clauses` to `stmt`; when paging is active, count the matching
        rows first and refuse a page that starts past the end.
        """
        for clause in clauses:
            stmt = stmt.where(clause)
        if request is not None:
            total = await self._count_where(session, clauses)
            ensure_page_exists(request, total, self.pagination_not_found_key, language=self.language)
            stmt = stmt.limit(request.limit).offset(request.offset)
        return await session.execute(stmt)

    @staticmethod
    def _clauses(compiled: CompiledPredicate) -> list:
        clause = compiled.as_clause()
        return [] if clause is None else [clause]


class BaseRepository(RepositorySupport, Generic[ModelType]):
    """
    Generic repository providing create / get_by_id / get_by_filter / update /
    delete plus get_all / count.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.

    Class attributes set by subclasses:
        model, entity_name, keys
        validate_entity(entity, *, creating, language)         field rules
        check_references(session, entity, *, language)         transactional rules (optional)
        validate_filter(filter, *, language)                   filter rules (optional)
        compile_filter(filter) -> CompiledPredicate
        timestamped                                            stamp created_at / updated_at
    """

    model: Type[ModelType]
    entity_name: str
    keys: RepositoryKeys
    timestamped: bool = False

    validate_entity: Callable[..., None] | None = None
    check_references: Callable[..., Awaitable[None]] | None = None
    validate_filter: Callable[..., None] | None = None
    compile_filter: Callable[[Any], CompiledPredicate]

    @classmethod
    def from_settings(cls, session_factory: async_sessionmaker[AsyncSession], settings: Settings):
        return cls(
            session_factory,
            language=settings.ERROR_LANGUAGE,
            max_page_size=settings.max_page_size(cls.entity_name),
        )

    @property
    def pagination_not_found_key(self) -> ErrorKey:
        return self.keys.pagination_not_found

    def _handler(self, session: AsyncSession, failure_key: ErrorKey, *, duplicate: bool = False):
        return db_error_handler(
            session,
            model_name=self.model_name,
            failure_key=failure_key,
            duplicate_key=self.keys.duplicate if duplicate else None,
            language=self.language,
        )

    def _validate(self, entity: ModelType, *, creating: bool) -> None:
        if self.validate_entity is not None:
            self.validate_entity(entity, creating=creating, language=self.language)

    async def _check(self, session: AsyncSession, entity: ModelType) -> None:
        if self.check_references is not None:
            await self.check_references(session, entity, language=self.language)

    def _values(self, entity: ModelType, *, creating: bool) -> dict[str, Any]:
        """Column values to write, taken from the caller's entity (id excluded)."""
        values = {
            attr.key: getattr(entity, attr.key)
            for attr in inspect(self.model).column_attrs
            if attr.key != "id"
        }
        if self.timestamped:
            if creating:
                values["created_at"] = now_epoch()
                values["updated_at"] = None
            else:
                # created_at stays as stored
                values.pop("created_at", None)
                values["updated_at"] = now_epoch()
        return values

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, entity: ModelType) -> ModelType:
        """
        Insert a new row built from `entity` and return the stored row.

        Raises:
            ValidationError: a field or referential rule failed (nothing written)
            DuplicateError: a unique row already exists
            QueryError / StoreConnectionError: the store failed
        """
        with self._track("create") as fields:
            self._validate(entity, creating=True)
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.create_failed, duplicate=True):
                    async with session.begin():
                        await self._check(session, entity)
                        row = self.model(**self._values(entity, creating=True))
                        session.add(row)
                        await session.flush()
            fields["id"] = row.id
            return row

    # =================================================================================================================
    # Read
    # =================================================================================================================

    async def get_by_id(self, entity_id: int) -> ModelType:
        """Raises NotFoundError when no row has `entity_id`."""
        with self._track("get_by_id", level=logging.DEBUG, id=entity_id):
            check_id_for_update(entity_id, self.keys.id_invalid, language=self.language)
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.get_by_id_failed):
                    row = await session.get(self.model, entity_id)
            if row is None:
                raise NotFoundError(self.keys.not_found, f"id = {entity_id}", language=self.language)
            return row

    async def get_by_filter(self, filter_: Any = None, page: int | None = None,
                            page_size: int | None = None) -> list[ModelType]:
        """
        Rows matching `filter_`, ordered by id.

        Both `page` and `page_size` given -> one page; neither -> every
        matching row. A page starting past the last row raises NotFoundError.
        """
        with self._track("get_by_filter", level=logging.DEBUG, page=page, page_size=page_size) as fields:
            if self.validate_filter is not None:
                self.validate_filter(filter_, language=self.language)
            request = self._page_request(page, page_size)
            clauses = self._clauses(self.compile_filter(filter_))

            async with self.session_factory() as session:
                async with self._handler(session, self.keys.get_by_filter_failed):
                    async with session.begin():
                        result = await self._execute_page(
                            session, select(self.model).order_by(self.model.id), clauses, request
                        )
                        rows = list(result.scalars().all())
            fields["count"] = len(rows)
            return rows

    async def get_all(self) -> list[ModelType]:
        with self._track("get_all", level=logging.DEBUG):
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.get_all_failed):
                    result = await session.scalars(select(self.model).order_by(self.model.id))
                    return list(result.all())

    async def count(self, filter_: Any = None) -> int:
        """Number of rows matching `filter_` (all rows when None)."""
        with self._track("count", level=logging.DEBUG):
            if self.validate_filter is not None:
                self.validate_filter(filter_, language=self.language)
            clauses = self._clauses(self.compile_filter(filter_))
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.get_count_failed):
                    return await self._count_where(session, clauses)

    async def _get_one_where(self, operation: str, not_found_key: ErrorKey, failure_key: ErrorKey,
                             context: str, *conditions) -> ModelType:
        """Single-row lookup on arbitrary conditions, NotFoundError when absent."""
        with self._track(operation, level=logging.DEBUG):
            async with self.session_factory() as session:
                async with self._handler(session, failure_key):
                    row = await session.scalar(select(self.model).where(*conditions).limit(1))
            if row is None:
                raise NotFoundError(not_found_key, context, language=self.language)
            return row

    async def _get_many_where(self, operation: str, failure_key: ErrorKey, *conditions) -> list[ModelType]:
        with self._track(operation, level=logging.DEBUG) as fields:
            async with self.session_factory() as session:
                async with self._handler(session, failure_key):
                    result = await session.scalars(
                        select(self.model).where(*conditions).order_by(self.model.id)
                    )
                    rows = list(result.all())
            fields["count"] = len(rows)
            return rows

    # =================================================================================================================
    # Update
    # =================================================================================================================

    async def update(self, entity: ModelType) -> ModelType:
        """
        Replace every column of the row `entity.id` with the values of `entity`.

        There is no partial patch: the caller supplies the full entity.

        Raises:
            ValidationError: missing/invalid id, or a field / referential rule failed
            NotFoundError: no row with that id
            DuplicateError: the new values collide with another unique row
        """
        with self._track("update", id=entity.id):
            self._validate(entity, creating=False)
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.update_failed, duplicate=True):
                    async with session.begin():
                        row = await session.get(self.model, entity.id)
                        if row is None:
                            raise NotFoundError(self.keys.not_found, f"id = {entity.id}", language=self.language)
                        await self._check(session, entity)
                        for key, value in self._values(entity, creating=False).items():
                            setattr(row, key, value)
                        await session.flush()
            return row

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    async def delete(self, entity_id: int) -> None:
        """
        Hard delete by id.

        Raises:
            NotFoundError: zero rows were affected
            QueryError: other rows still reference this one
        """
        with self._track("delete", id=entity_id):
            check_id_for_update(entity_id, self.keys.id_invalid, language=self.language)
            async with self.session_factory() as session:
                async with self._handler(session, self.keys.delete_failed):
                    async with session.begin():
                        result = await session.execute(delete(self.model).where(self.model.id == entity_id))
                        if result.rowcount == 0:
                            raise NotFoundError(
                                self.keys.delete_not_found, f"id = {entity_id}", language=self.language
                            )
