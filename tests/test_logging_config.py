from __future__ import annotations

import logging

import pytest
import structlog

from pyclock import configure_structlog, new_fake


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _renderer():
    return structlog.get_config()["processors"][-1]


def test_console_renderer_by_default(monkeypatch):
    monkeypatch.delenv("PYCLOCK_LOG_JSON", raising=False)
    configure_structlog()
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


@pytest.mark.parametrize("value", ["1", "true", " YES "])
def test_json_renderer_when_enabled(monkeypatch, value):
    monkeypatch.setenv("PYCLOCK_LOG_JSON", value)
    configure_structlog()
    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


@pytest.mark.parametrize(
    ("value", "level"),
    [
        ("debug", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("nonsense", logging.INFO),
    ],
)
def test_level_from_env(monkeypatch, value, level):
    monkeypatch.setenv("PYCLOCK_LOG_LEVEL", value)
    configure_structlog()
    wrapper = structlog.get_config()["wrapper_class"]
    assert wrapper is structlog.make_filtering_bound_logger(level)


def test_fake_clock_logs_mutations():
    with structlog.testing.capture_logs() as logs:
        clock = new_fake()
        clock.advance(5)
        clock.set_to(clock.now())

    events = [entry["event"] for entry in logs]
    assert events == ["fake_clock_created", "fake_clock_advanced", "fake_clock_set"]
    assert logs[1]["delta_ns"] == 5


def test_fake_clock_is_silent_when_structlog_unconfigured(capsys):
    structlog.reset_defaults()
    clock = new_fake()
    clock.advance(1)
    clock.set_to(clock.now())
    assert capsys.readouterr().out == ""


def test_arguments_override_env(monkeypatch):
    monkeypatch.setenv("PYCLOCK_LOG_LEVEL", "debug")
    monkeypatch.setenv("PYCLOCK_LOG_JSON", "1")
    configure_structlog(level="error", json_logs=False)
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(logging.ERROR)


def test_numeric_level_argument():
    configure_structlog(level=logging.WARNING)
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(logging.WARNING)
