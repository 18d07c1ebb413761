"""
Pagination contract.

    neither page nor page_size      -> DISABLED (no LIMIT/OFFSET)
    both, page >= 1, 1 <= size <= max -> ACTIVE  (offset = (page - 1) * page_size)
    anything else                   -> ERROR   (ValidationError naming the broken rule)

An ACTIVE request whose offset is past the number of matching rows is a
NotFoundError, never an empty page.
"""

from dataclasses import dataclass
from enum import Enum

from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.messages import DEFAULT_LANGUAGE, ErrorKey


class PaginationState(str, Enum):
    DISABLED = "disabled"
    ACTIVE = "active"
    ERROR = "error"


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def pagination_error(page: int | None, page_size: int | None, max_page_size: int) -> ErrorKey | None:
    """Return the key of the first broken pagination rule, or None."""
    if page is None and page_size is None:
        return None
    if page is None:
        return ErrorKey.NO_PAGE_SPECIFIED
    if page_size is None:
        return ErrorKey.NO_PAGE_SIZE_SPECIFIED
    if page < 1 or page_size < 1:
        return ErrorKey.INVALID_PAGINATION
    if page_size > max_page_size:
        return ErrorKey.PAGE_SIZE_TOO_LARGE
    return None


def classify_pagination(page: int | None, page_size: int | None, max_page_size: int) -> PaginationState:
    if pagination_error(page, page_size, max_page_size) is not None:
        return PaginationState.ERROR
    if page is None:
        return PaginationState.DISABLED
    return PaginationState.ACTIVE


def validate_pagination(page: int | None, page_size: int | None, max_page_size: int, *,
                        language: str = DEFAULT_LANGUAGE) -> PageRequest | None:
    """
    Return a PageRequest when pagination is active, None when disabled.

    Raises:
        ValidationError: exactly one of page/page_size given, a value below 1,
            or page_size above `max_page_size`.
    """
    key = pagination_error(page, page_size, max_page_size)
    if key is not None:
        raise ValidationError(
            key,
            f"page = {page}, page_size = {page_size}, max_page_size = {max_page_size}",
            language=language,
            fields=["page", "page_size"],
        )
    if page is None:
        return None
    return PageRequest(page=page, page_size=page_size)


def ensure_page_exists(request: PageRequest, total: int, not_found_key: ErrorKey, *,
                       language: str = DEFAULT_LANGUAGE) -> None:
    """Raise NotFoundError when the requested offset is beyond `total` matching rows."""
    if request.offset > total:
        raise NotFoundError(
            not_found_key,
            f"page = {request.page}, page_size = {request.page_size}, total = {total}",
            language=language,
        )
