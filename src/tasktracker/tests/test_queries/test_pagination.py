import pytest

from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.messages import ErrorKey
from tasktracker.queries.pagination import (
    PageRequest,
    PaginationState,
    classify_pagination,
    ensure_page_exists,
    pagination_error,
    validate_pagination,
)

MAX = 100


class TestClassifyPagination:

    @pytest.mark.parametrize(
        "page, page_size, expected",
        [
            (None, None, PaginationState.DISABLED),
            (1, 10, PaginationState.ACTIVE),
            (3, MAX, PaginationState.ACTIVE),
            (1, None, PaginationState.ERROR),
            (None, 10, PaginationState.ERROR),
            (0, 10, PaginationState.ERROR),
            (1, 0, PaginationState.ERROR),
            (1, MAX + 1, PaginationState.ERROR),
        ],
    )
    def test_states(self, page, page_size, expected):
        assert classify_pagination(page, page_size, MAX) is expected

    @pytest.mark.parametrize(
        "page, page_size, key",
        [
            (None, 5, ErrorKey.NO_PAGE_SPECIFIED),
            (2, None, ErrorKey.NO_PAGE_SIZE_SPECIFIED),
            (1, 0, ErrorKey.INVALID_PAGINATION),
            (-1, 5, ErrorKey.INVALID_PAGINATION),
            (1, 1000, ErrorKey.PAGE_SIZE_TOO_LARGE),
        ],
    )
    def test_error_names_the_broken_rule(self, page, page_size, key):
        assert pagination_error(page, page_size, MAX) is key


class TestValidatePagination:

    def test_disabled_returns_none(self):
        assert validate_pagination(None, None, MAX) is None

    @pytest.mark.parametrize("page, page_size", [(1, 1), (3, 5), (7, 20), (2, MAX)])
    def test_offset_is_page_minus_one_times_size(self, page, page_size):
        request = validate_pagination(page, page_size, MAX)
        assert request.offset == (page - 1) * page_size
        assert request.limit == page_size

    def test_zero_page_size_is_invalid_pagination(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(1, 0, MAX)
        assert exc_info.value.key is ErrorKey.INVALID_PAGINATION
        assert "Invalid pagination" in str(exc_info.value)
        assert exc_info.value.fields == ["page", "page_size"]

    def test_oversized_page_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(1, 1000, MAX)
        assert exc_info.value.key is ErrorKey.PAGE_SIZE_TOO_LARGE
        assert "Page size too large" in str(exc_info.value)

    def test_bound_is_per_call(self):
        assert validate_pagination(1, 101, 101) == PageRequest(page=1, page_size=101)
        with pytest.raises(ValidationError):
            validate_pagination(1, 101, 100)

    def test_message_language(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(1, 0, MAX, language="ja")
        assert exc_info.value.language == "ja"
        assert "無効なページングです" in str(exc_info.value)


class TestEnsurePageExists:

    def test_offset_within_total_passes(self):
        ensure_page_exists(PageRequest(page=3, page_size=5), 14, ErrorKey.TASK_GET_PAGINATION_NOT_FOUND)

    def test_offset_equal_to_total_passes(self):
        # an empty store still serves page 1
        ensure_page_exists(PageRequest(page=1, page_size=5), 0, ErrorKey.TASK_GET_PAGINATION_NOT_FOUND)

    def test_offset_past_total_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            ensure_page_exists(PageRequest(page=4, page_size=5), 14, ErrorKey.TASK_GET_PAGINATION_NOT_FOUND)
        assert exc_info.value.key is ErrorKey.TASK_GET_PAGINATION_NOT_FOUND
        assert "total = 14" in exc_info.value.context
