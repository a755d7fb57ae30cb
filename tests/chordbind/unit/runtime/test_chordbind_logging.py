from __future__ import annotations

import json
import logging

from chordbind.api.logging import LoggingConfig, configure_logging
from chordbind.runtime.logging import JsonFormatter, setup_logging, shutdown_logging


def test_setup_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("CHORDBIND_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_logging("DEBUG")
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_logging_with_file_uses_queue(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "chordbind.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))
        assert len(root.handlers) == 1
        assert type(root.handlers[0]).__name__ == "QueueHandler"
        logging.getLogger("chordbind.test").info("written")
        shutdown_logging()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["msg"] == "written"
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord("chordbind", logging.INFO, __file__, 1, "bound %s", ("jump",), None)
    record.action = "jump"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "chordbind"
    assert payload["msg"] == "bound jump"
    assert payload["fields"] == {"action": "jump"}
