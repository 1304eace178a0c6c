import io
import logging
import uuid
from sortedsearch.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "sortedsearch"
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_explicit_level():
    name = f"sortedsearch-test-{uuid.uuid4().hex}"
    configured = setup_logger(name=name, level="debug", format_string="%(message)s")

    assert configured.level == logging.DEBUG
    assert configured.handlers[0].formatter._fmt == "%(message)s"


def test_setup_logger_uses_environment(monkeypatch):
    monkeypatch.setenv("SORTEDSEARCH_LOG_LEVEL", "ERROR")
    name = f"sortedsearch-test-{uuid.uuid4().hex}"

    assert setup_logger(name=name).level == logging.ERROR


def test_setup_logger_configures_once():
    name = f"sortedsearch-test-{uuid.uuid4().hex}"
    first = setup_logger(name=name, level="INFO")
    second = setup_logger(name=name, level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_validation_failure_logged_under_package(caplog):
    from sortedsearch.core.types import validate_sorted

    child = logging.getLogger("sortedsearch.core.types")
    child.addHandler(caplog.handler)
    child.setLevel(logging.DEBUG)
    try:
        try:
            validate_sorted([2, 1])
        except ValueError:
            pass
    finally:
        child.removeHandler(caplog.handler)
        child.setLevel(logging.NOTSET)

    assert "index 1" in caplog.text


def test_explicit_level_ignores_foreign_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "trace")
    name = f"sortedsearch-test-{uuid.uuid4().hex}"

    assert setup_logger(name=name, level="DEBUG").level == logging.DEBUG


def test_default_level_with_foreign_log_level(monkeypatch):
    monkeypatch.delenv("SORTEDSEARCH_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "trace")
    name = f"sortedsearch-test-{uuid.uuid4().hex}"

    assert setup_logger(name=name).level == logging.INFO


def test_setup_logger_custom_stream():
    stream = io.StringIO()
    name = f"sortedsearch-test-{uuid.uuid4().hex}"
    configured = setup_logger(
        name=name, level="INFO", format_string="%(levelname)s %(message)s", stream=stream
    )

    configured.info("lower bound %d", 1)

    assert stream.getvalue() == "INFO lower bound 1\n"
