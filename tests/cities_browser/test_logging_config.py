import logging

from pythonjsonlogger import jsonlogger

from cities_browser.logging_config import configure_logging


def test_configure_logging_plain():
    configure_logging(level=logging.DEBUG, force_format="plain")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_configure_logging_json_from_env(monkeypatch):
    monkeypatch.setenv("CITIES_BROWSER_LOG_FORMAT", "json")

    configure_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
