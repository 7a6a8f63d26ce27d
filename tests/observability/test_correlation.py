import logging

from portal_messaging.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from portal_messaging.observability.log_utils import log_exception_with_context, preview
from portal_messaging.observability.logger import CorrelationIdFilter


def test_set_and_clear_correlation_id():
    assert set_correlation_id("abc-123") == "abc-123"
    assert get_correlation_id() == "abc-123"

    clear_correlation_id()

    assert get_correlation_id() == ""


def test_generates_id_when_missing():
    generated = set_correlation_id()
    try:
        assert generated
        assert get_correlation_id() == generated
    finally:
        clear_correlation_id()


def test_filter_attaches_correlation_id():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    set_correlation_id("req-9")
    try:
        assert CorrelationIdFilter().filter(record) is True
    finally:
        clear_correlation_id()

    assert record.correlation_id == "req-9"


def test_filter_placeholder_outside_request():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

    CorrelationIdFilter().filter(record)

    assert record.correlation_id == "-"


def test_preview_keeps_short_values():
    assert preview("hello") == "hello"
    assert preview(42) == "42"
    assert preview(b"frame") == "frame"


def test_preview_clips_long_frames_to_one_line():
    clipped = preview("line\n" * 50, limit=10)

    assert clipped == "line\\nline... (300 chars)"
    assert "\n" not in clipped


def test_log_exception_with_context_attaches_fields(caplog):
    logger = logging.getLogger("tests.log_utils")

    with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            log_exception_with_context(logger, "Frame failed", e, raw_frame="x" * 500)

    [record] = caplog.records
    assert record.error_type == "RuntimeError"
    assert record.error_msg == "boom"
    assert record.raw_frame.endswith("(500 chars)")
    assert record.exc_info is not None
