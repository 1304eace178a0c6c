import pytest
from pydantic import ValidationError
from sortedsearch.core.config import DEFAULT_LOG_FORMAT, Settings


def test_defaults():
    settings = Settings.load(environ={})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == DEFAULT_LOG_FORMAT


def test_package_level_takes_precedence():
    settings = Settings.load(
        environ={"LOG_LEVEL": "ERROR", "SORTEDSEARCH_LOG_LEVEL": "debug"}
    )
    assert settings.LOG_LEVEL == "DEBUG"


def test_generic_level_fallback():
    settings = Settings.load(environ={"LOG_LEVEL": "warning"})
    assert settings.LOG_LEVEL == "WARNING"


def test_custom_format():
    settings = Settings.load(environ={"SORTEDSEARCH_LOG_FORMAT": "%(message)s"})
    assert settings.LOG_FORMAT == "%(message)s"


def test_reads_process_environment(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("SORTEDSEARCH_LOG_LEVEL", "critical")
    assert Settings.load().LOG_LEVEL == "CRITICAL"


def test_invalid_level():
    with pytest.raises(ValidationError):
        Settings.load(environ={"SORTEDSEARCH_LOG_LEVEL": "LOUD"})


@pytest.mark.parametrize("foreign", ["trace", "verbose", "0"])
def test_unknown_generic_level_is_ignored(foreign):
    settings = Settings.load(environ={"LOG_LEVEL": foreign})
    assert settings.LOG_LEVEL == "INFO"


def test_package_level_overrides_foreign_generic_level():
    settings = Settings.load(
        environ={"LOG_LEVEL": "trace", "SORTEDSEARCH_LOG_LEVEL": "error"}
    )
    assert settings.LOG_LEVEL == "ERROR"
