# src/tasktracker/tests/test_logging/test_filters.py
import logging

from tasktracker.core.logging.filters import (
    OperationIdFilter,
    RedactFilter,
    get_operation_id,
    operation_scope,
    reset_operation_id,
    set_operation_id,
)


def make_record():
    # name, level, pathname, lineno, msg, args, exc_info
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello %s", ("world",), None)


def test_operation_id_filter_defaults_to_dash():
    rec = make_record()
    token = set_operation_id(None)
    try:
        assert OperationIdFilter().filter(rec) is True
        assert rec.operation_id == "-"
    finally:
        reset_operation_id(token)


def test_operation_id_filter_uses_contextvar():
    rec = make_record()
    token = set_operation_id("op-123")
    try:
        OperationIdFilter().filter(rec)
    finally:
        reset_operation_id(token)
    assert rec.operation_id == "op-123"


def test_operation_id_filter_respects_record_extra():
    rec = make_record()
    rec.operation_id = "explicit"
    token = set_operation_id("context-id")
    try:
        OperationIdFilter().filter(rec)
    finally:
        reset_operation_id(token)
    assert rec.operation_id == "explicit"


def test_operation_scope_sets_and_restores():
    assert get_operation_id() is None
    with operation_scope() as operation_id:
        assert operation_id
        assert get_operation_id() == operation_id
    assert get_operation_id() is None


def test_nested_scope_keeps_outer_id():
    with operation_scope("outer") as outer:
        with operation_scope() as inner:
            assert inner == outer == "outer"
        with operation_scope("explicit") as named:
            assert named == "explicit"
        assert get_operation_id() == "outer"


def test_redact_filter_masks_sensitive_attributes():
    rec = make_record()
    rec.password_hash = "a" * 64
    rec.token = "t0k3n"
    rec.model = "User"
    RedactFilter().filter(rec)
    assert rec.password_hash == RedactFilter.MASK
    assert rec.token == RedactFilter.MASK
    assert rec.model == "User"
