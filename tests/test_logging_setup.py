import json
import logging

from sitebuild.logging_setup import JsonFormatter, setup_logging


def test_json_formatter_includes_build_attributes():
    record = logging.LogRecord("sitebuild.injector", logging.INFO, __file__, 1, "Wrote %s", ("page",), None)
    record.output = "public/index.html"
    record.bytes_written = 128

    payload = json.loads(JsonFormatter().format(record))

    assert payload == {
        "level": "INFO",
        "logger": "sitebuild.injector",
        "message": "Wrote page",
        "output": "public/index.html",
        "bytes_written": 128,
    }


def test_setup_logging_does_not_duplicate_handlers(restore_root_logger):
    root = restore_root_logger

    setup_logging()
    handler_count = len(root.handlers)
    setup_logging()

    assert len(root.handlers) == handler_count
    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert stream_handlers
    assert all(isinstance(h.formatter, JsonFormatter) for h in stream_handlers)


def test_log_level_env_overrides_default(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    setup_logging()

    assert restore_root_logger.level == logging.WARNING
