from __future__ import annotations

import io
import logging

import pytest

from pipelines.runner import Pipeline, RunContext
from services.events import LoggingEventSink, NullEventSink
from utils import logging_setup
from utils.logging_setup import SafeExtraFormatter


def test_logging_sink_puts_fields_on_record(caplog):
    caplog.set_level(logging.INFO, logger="registry.events")
    LoggingEventSink().emit("step", step="fetch_page", status="ok", duration_ms=4)

    record = caplog.records[-1]
    assert record.getMessage() == "step"
    assert record.levelno == logging.INFO
    assert record.step == "fetch_page"
    assert record.duration_ms == 4


def test_logging_sink_errors_are_warnings(caplog):
    caplog.set_level(logging.INFO, logger="registry.events")
    LoggingEventSink().emit("step", step="fetch_page", status="error", error="boom", name="clash")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.event_name == "clash"
    assert record.name == "registry.events"


def test_null_sink_accepts_anything():
    assert NullEventSink().emit("anything", a=1) is None


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s url=%(url)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    record.step = "parse_document"
    assert formatter.format(record) == "hello step=parse_document url=-"


class _Add:
    name = "add"

    def run(self, ctx):
        ctx.meta["n"] = ctx.meta.get("n", 0) + 1
        return ctx


class _Boom:
    def run(self, ctx):
        raise ValueError("boom")


def test_pipeline_emits_one_event_per_step(events):
    ctx = Pipeline([_Add(), _Add()], events=events).run(RunContext())
    assert ctx.meta["n"] == 2
    assert [e["step"] for e in events.named("step")] == ["add", "add"]
    assert all(isinstance(e["duration_ms"], int) for e in events.named("step"))


def test_pipeline_reports_and_reraises(events):
    with pytest.raises(ValueError, match="boom"):
        Pipeline([_Add(), _Boom(), _Add()], events=events).run(RunContext())
    steps = events.named("step")
    assert [(e["step"], e["status"]) for e in steps] == [("add", "ok"), ("_Boom", "error")]
    assert steps[-1]["error"] == "boom"


def test_init_logging_reuses_its_handler(monkeypatch):
    monkeypatch.setattr(logging_setup, "_HANDLER", None)
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    stream = io.StringIO()

    handler = logging_setup.init_logging("debug", stream=stream)
    try:
        assert logging_setup.init_logging("warning") is handler
        assert root.handlers.count(handler) == 1
        assert handler.level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING

        logging.getLogger("registry.test").warning("slow page", extra={"step": "fetch_page"})
        assert "slow page step=fetch_page status=- duration_ms=-" in stream.getvalue()
    finally:
        root.removeHandler(handler)


def test_unknown_level_falls_back_to_info():
    assert logging_setup.resolve_level("chatty") == logging.INFO
    assert logging_setup.resolve_level("warn") == logging.WARNING
