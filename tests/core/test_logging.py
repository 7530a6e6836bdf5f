import io
import json
import logging
import sys

from currency_converter.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    init_logging,
    request_id_ctx,
)


def _record(msg="hello", exc_info=None):
    return logging.LogRecord(
        name="currency_converter.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_fields():
    record = _record()
    RequestIdFilter().filter(record)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "hello"
    assert payload["logger"] == "currency_converter.test"
    assert payload["request_id"] == "-"
    assert "exc_info" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: kaboom" in payload["exc_info"]


def test_request_id_filter_reads_context():
    token = request_id_ctx.set("abc-123")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)

    assert record.request_id == "abc-123"


def test_init_logging_installs_single_handler():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        init_logging(debug=True)
        init_logging(debug=True)

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_json_formatter_promotes_lookup_fields():
    record = _record("rate resolved")
    record.source = "USD"
    record.target = "EUR"
    record.rate = 0.8

    payload = json.loads(JsonFormatter().format(record))

    assert payload["source"] == "USD"
    assert payload["target"] == "EUR"
    assert payload["rate"] == 0.8
    assert "url" not in payload


def test_init_logging_writes_json_lines_to_stream():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        init_logging(debug=True, stream=stream)
        logging.getLogger("currency_converter.test").debug(
            "rate lookup", extra={"source": "GBP", "target": "EUR"}
        )
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "rate lookup"
    assert payload["source"] == "GBP"
    assert payload["request_id"] == "-"
