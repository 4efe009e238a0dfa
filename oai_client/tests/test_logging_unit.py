"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import json
import logging

from oai_client.base.logging import BASE_LOGGER_NAME, LogContext, configure_logger, get_logger, log_event
from oai_client.base.log_support import JsonFormatter


def test_log_event_merges_context_and_drops_none(log_stream):
    logger = get_logger("oai_client.test")
    ctx = LogContext(client_id="0x1", method="GET", path="/models", extra={"attempt": 1, "skip": None})
    log_event(logger, "http.request", ctx, status=200, body=None)
    payload = json.loads(log_stream.getvalue().strip().splitlines()[-1])
    assert payload == {"event": "http.request", "client_id": "0x1", "method": "GET", "path": "/models", "attempt": 1, "status": 200}


def test_log_event_keep_none(log_stream):
    log_event(get_logger("oai_client.test"), "x", keep_none=True, value=None)
    payload = json.loads(log_stream.getvalue().strip().splitlines()[-1])
    assert payload == {"event": "x", "value": None}


def test_log_event_respects_level(log_stream):
    configure_logger(level="ERROR")
    log_event(get_logger("oai_client.test"), "quiet", level=logging.INFO)
    assert "quiet" not in log_stream.getvalue()


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="oai_client.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "client.init", "uri_base": "https://x/"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["event"] == "client.init"
    assert payload["uri_base"] == "https://x/"
    assert payload["logger"] == "oai_client.test.json"
    assert "msg" not in payload


def test_child_logger_propagates_without_own_handlers() -> None:
    logger = get_logger("oai_client.test.child")
    assert logger.propagate is True
    assert logger.handlers == []
    assert logging.getLogger(BASE_LOGGER_NAME).propagate is False


def test_configure_logger_file_handler(tmp_path, log_stream):
    path = tmp_path / "logs" / "client.log"
    logger = configure_logger(level=logging.INFO, file_path=str(path))
    try:
        log_event(get_logger("oai_client.test.file"), "to.file")
        for handler in logger.handlers:
            handler.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "to.file"
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "baseFilename", None) == str(path) for h in logger.handlers)


def test_plain_mode_file_handler(tmp_path):
    path = tmp_path / "plain.log"
    logger = configure_logger(level=logging.INFO, file_path=str(path), json_mode=False)
    try:
        logger.info("plain-line")
        for handler in logger.handlers:
            handler.flush()
        assert "INFO oai_client plain-line" in path.read_text(encoding="utf-8")
    finally:
        configure_logger(level=logging.WARNING, file_path=None)
