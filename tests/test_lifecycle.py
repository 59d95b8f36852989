"""Tests for process-wide setup and teardown."""

import pytest

from feedcore import lifecycle
from feedcore.config.settings import Settings


@pytest.fixture
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(lifecycle, "_initialized", False)
    monkeypatch.setattr(
        lifecycle,
        "configure_logging",
        lambda log_level, json_format: calls.append((log_level, json_format)),
    )
    return calls


def test_init_configures_logging_once(logging_calls):
    settings = Settings(_env_file=None, log_level="DEBUG", log_json=True)

    lifecycle.init(settings)
    lifecycle.init(settings)

    assert logging_calls == [("DEBUG", True)]
    assert lifecycle.is_initialized()


def test_shutdown_resets_state(logging_calls):
    lifecycle.init(Settings(_env_file=None))
    lifecycle.shutdown()

    assert not lifecycle.is_initialized()

    lifecycle.init(Settings(_env_file=None))
    assert len(logging_calls) == 2


def test_shutdown_without_init_is_a_no_op(logging_calls):
    lifecycle.shutdown()
    assert not lifecycle.is_initialized()
    assert logging_calls == []
