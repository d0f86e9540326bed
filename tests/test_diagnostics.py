from __future__ import annotations

import logging

import pytest

from emojindex.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    ensure_emitter,
    format_event_message,
)
from emojindex.core.exceptions import (
    ConfigError,
    EmojindexError,
    exception_hint,
    exception_messages,
)
from emojindex.ui.cli.diagnostics import CliEmitter
from emojindex.ui.cli.state import CLIState


def _raise_nested_config_error() -> None:
    try:
        raise ValueError("invalid platform version 'latest'")
    except ValueError as exc:
        raise ConfigError("Invalid emojindex configuration.") from exc


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.WARNING):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_ensure_emitter_defaults_to_null() -> None:
    assert isinstance(ensure_emitter(None), NullEmitter)
    emitter = LoggingEmitter()
    assert ensure_emitter(emitter) is emitter
    assert isinstance(emitter, DiagnosticEmitter)


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.ERROR):
        emitter.error("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True


def test_logging_emitter_formats_known_events(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter()
    with caplog.at_level(logging.INFO, logger="emojindex.core.diagnostics"):
        emitter.event("translations_loaded", {"language": "de", "entries": 18, "dropped": 1})
    assert caplog.records[-1].message == "Loaded 18 keyword entries for 'de', 1 dropped"


def test_format_event_message() -> None:
    assert (
        format_event_message("translations_loaded", {"language": "en", "entries": 3})
        == "Loaded 3 keyword entries for 'en'"
    )
    assert (
        format_event_message(
            "search_index_built", {"language": "fr", "size": 40, "fallback": "en"}
        )
        == "Search index for 'fr' holds 40 emoji (fallback: en)"
    )
    assert format_event_message("unknown", {}) is None


def test_exception_messages_follow_causes() -> None:
    with pytest.raises(ConfigError) as info:
        _raise_nested_config_error()

    assert isinstance(info.value, EmojindexError)
    assert exception_messages(info.value) == [
        "Invalid emojindex configuration.",
        "invalid platform version 'latest'",
    ]
    assert exception_hint(info.value) == "invalid platform version 'latest'"
    assert exception_hint(RuntimeError()) is None


def test_cli_emitter_records_events() -> None:
    state = CLIState()
    emitter = CliEmitter(state)

    emitter.event("search_index_built", {"language": "de", "size": 2, "fallback": "en"})

    assert state.consume_events("search_index_built") == [
        {"language": "de", "size": 2, "fallback": "en"}
    ]
    assert state.consume_events("search_index_built") == []
    assert emitter.debug_enabled is False
