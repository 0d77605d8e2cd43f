import logging

import pytest

from diffmemo import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: calls.append(1))
    for name in config.ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return calls


def test_defaults(clean_env):
    settings = config.load_settings()
    assert settings == config.DEFAULT_SETTINGS
    assert settings.extra_class == "extra"
    assert settings.missing_class == "missing"
    assert settings.line_break == "<br>"
    assert settings.level == logging.WARNING
    assert clean_env == [1]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DIFFMEMO_EXTRA_CLASS", "added")
    monkeypatch.setenv("DIFFMEMO_MISSING_CLASS", "omitted")
    monkeypatch.setenv("DIFFMEMO_LINE_BREAK", "<br/>")
    monkeypatch.setenv("DIFFMEMO_LOG_LEVEL", "debug")

    settings = config.load_settings()
    assert settings == config.Settings(
        extra_class="added",
        missing_class="omitted",
        line_break="<br/>",
        log_level="DEBUG",
    )
    assert settings.level == logging.DEBUG


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("DIFFMEMO_EXTRA_CLASS", "  ")
    monkeypatch.setenv("DIFFMEMO_LINE_BREAK", "")
    assert config.load_settings() == config.DEFAULT_SETTINGS


@pytest.mark.parametrize(
    "name, value",
    [
        ("DIFFMEMO_EXTRA_CLASS", "not a class"),
        ("DIFFMEMO_MISSING_CLASS", '"><script>'),
        ("DIFFMEMO_LOG_LEVEL", "LOUD"),
        ("DIFFMEMO_LINE_BREAK", "NL"),
        ("DIFFMEMO_LINE_BREAK", "<br"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match=name):
        config.load_settings()


def test_extra_and_missing_classes_must_differ(monkeypatch):
    monkeypatch.setenv("DIFFMEMO_EXTRA_CLASS", "missing")
    with pytest.raises(RuntimeError):
        config.load_settings()


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        config.DEFAULT_SETTINGS.extra_class = "x"
