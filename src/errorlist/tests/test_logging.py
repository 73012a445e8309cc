"""Tests for mutation logging and the structured logger."""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field

import pytest

from errorlist import Errors, ErrorSink, combine, new
from errorlist.config import clear_settings_cache
from errorlist.observability import (
    BoundLogger,
    ConsoleRenderer,
    LogEntry,
    configure_logging,
    get_logger,
)


class RecordingSink:
    """Minimal sink recording every error event."""

    def __init__(self, verbosity: int = 0) -> None:
        self.verbosity = verbosity
        self.events: list[tuple[str, dict[str, object]]] = []

    def v(self, level: int) -> bool:
        return self.verbosity >= level

    def error(self, event: str, **kw: object) -> None:
        self.events.append((event, kw))


@dataclass
class ListRenderer:
    entries: list[LogEntry] = field(default_factory=list)

    def render(self, entry: LogEntry) -> None:
        self.entries.append(entry)


# ═════════════════════════════════════════════════════════════════════════════
# Composite Mutation Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_no_logger_is_silent() -> None:
    errs = Errors().add("x")
    assert errs.logger is None
    assert len(errs) == 1


def test_add_logs_at_threshold() -> None:
    sink = RecordingSink(verbosity=3)
    errs = Errors(logger=sink)
    errs.add("disk full")
    assert sink.events == [("disk full", {"total": 1})]


def test_add_below_threshold_is_silent() -> None:
    sink = RecordingSink(verbosity=2)
    Errors(logger=sink).add("disk full")
    assert sink.events == []


def test_per_composite_threshold() -> None:
    sink = RecordingSink(verbosity=1)
    errs = Errors(logger=sink, verbosity=1)
    errs.add("x")
    assert errs.verbosity == 1
    assert len(sink.events) == 1


def test_threshold_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERRORLIST_LOG_ADD_THRESHOLD", "0")
    clear_settings_cache()
    sink = RecordingSink(verbosity=0)
    Errors(logger=sink).add("x")
    assert len(sink.events) == 1


def test_adding_composite_logs_once() -> None:
    sink = RecordingSink(verbosity=3)
    errs = Errors(logger=sink)
    errs.add(Errors().add("a").add("b"))
    assert sink.events == [("a\nb", {"total": 2})]


def test_add_none_and_empty_do_not_log() -> None:
    sink = RecordingSink(verbosity=3)
    errs = Errors(logger=sink)
    errs.add(None).add(Errors())
    assert sink.events == []


def test_new_inherits_and_logs() -> None:
    sink = RecordingSink(verbosity=3)
    source = Errors(logger=sink, verbosity=2)
    source.add("a")
    copy = new(source)
    assert copy.logger is sink
    assert copy.verbosity == 2
    assert [event for event, _ in sink.events] == ["a", "a"]


def test_combine_logs_only_second_operand() -> None:
    sink = RecordingSink(verbosity=0)
    first = Errors(logger=sink).add("a")
    sink.verbosity = 3
    result = combine(first, "b")
    assert result.logger is sink
    assert sink.events == [("b", {"total": 2})]


# ═════════════════════════════════════════════════════════════════════════════
# Structured Logger
# ═════════════════════════════════════════════════════════════════════════════


def test_bound_logger_is_sink() -> None:
    assert isinstance(get_logger(), ErrorSink)


def test_bound_logger_verbosity() -> None:
    log = BoundLogger(_verbosity=3)
    assert log.v(3)
    assert not log.v(4)
    assert log.with_verbosity(5).v(4)


def test_bound_logger_level_filter() -> None:
    renderer = ListRenderer()
    log = BoundLogger(_renderer=renderer, _level=logging.ERROR)
    log.info("ignored")
    log.error("kept", item=1)
    assert [e.event for e in renderer.entries] == ["kept"]
    assert renderer.entries[0].level == "error"
    assert renderer.entries[0].context == {"item": 1}


def test_bind_and_unbind() -> None:
    renderer = ListRenderer()
    log = BoundLogger(_renderer=renderer).bind(batch="nightly", worker=2).unbind("worker")
    log.warning("slow")
    assert renderer.entries[0].context == {"batch": "nightly"}


def test_get_logger_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERRORLIST_LOG_VERBOSITY", "3")
    clear_settings_cache()
    assert get_logger("x").v(3)


def test_console_output() -> None:
    buf = io.StringIO()
    configure_logging(format="console", verbosity=3, output=buf, colors=False)
    errs = Errors(logger=get_logger("batch"))
    errs.add("disk full")
    line = buf.getvalue()
    assert "[error] disk full" in line
    assert 'logger="batch"' in line
    assert "total=1" in line
    assert "\033[" not in line


def test_console_renderer_without_timestamp() -> None:
    buf = io.StringIO()
    ConsoleRenderer(output=buf, colors=False, show_timestamp=False).render(
        LogEntry(0.0, "info", "hello", {"n": 2}))
    assert buf.getvalue() == "[info] hello n=2\n"


def test_json_output() -> None:
    buf = io.StringIO()
    configure_logging(format="json", verbosity=3, output=buf)
    Errors(logger=get_logger("batch")).add("disk full")
    record = json.loads(buf.getvalue())
    assert record["event"] == "disk full"
    assert record["level"] == "error"
    assert record["logger"] == "batch"
    assert record["total"] == 1


def test_none_format_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(format="none", verbosity=3)
    Errors(logger=get_logger()).add("x")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")
