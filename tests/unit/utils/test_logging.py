import json
import logging

from editkit.utils.logging import JSONFormatter, configure_logging, get_logger, resolve_level


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("editkit.test", logging.INFO, __file__, 1, "ran %s", ("make",), None)
    record.component = "cli.compile"
    record.returncode = 2

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "ran make"
    assert payload["level"] == "INFO"
    assert payload["component"] == "cli.compile"
    assert payload["returncode"] == 2
    assert payload["timestamp"].endswith("Z")


def test_get_logger_adds_component(caplog):
    log = get_logger("editkit.test.component", component="marks")
    with caplog.at_level("INFO"):
        log.info("hello")

    assert caplog.records[-1].component == "marks"


def test_configure_logging_sets_level_and_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging(component="cli", level="debug")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_resolve_level():
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(10) == 10
