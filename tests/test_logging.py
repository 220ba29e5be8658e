from __future__ import annotations

import io
import re

import pytest

from findkit.config import load_config
from findkit.utils.logging import (
    LEVELS,
    PREFIXES,
    TRACE,
    Timing,
    configure_from,
    get_logger,
    init_loggers,
)

_STAMP = r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}"


def _streams() -> dict[str, io.StringIO]:
    return {level: io.StringIO() for level in LEVELS}


def test_each_handle_writes_to_its_own_sink() -> None:
    sinks = _streams()
    init_loggers(*(sinks[level] for level in LEVELS))
    get_logger("trace").log(TRACE, "t-msg")
    get_logger("info").info("i-msg")
    get_logger("debug").debug("d-msg")
    get_logger("warning").warning("w-msg")
    get_logger("error").error("e-msg")
    for level, tag in zip(LEVELS, ["t", "i", "d", "w", "e"]):
        text = sinks[level].getvalue()
        assert text.startswith(PREFIXES[level])
        assert f"{tag}-msg" in text
        assert text.count("\n") == 1


def test_record_format() -> None:
    sinks = _streams()
    init_loggers(*(sinks[level] for level in LEVELS))
    get_logger("warning").warning("careful")
    line = sinks["warning"].getvalue().rstrip("\n")
    assert re.fullmatch(rf"WARN : {_STAMP} test_logging\.py:\d+: careful", line)


def test_none_discards() -> None:
    sinks = _streams()
    init_loggers(None, sinks["info"], None, None, None)
    get_logger("trace").log(TRACE, "dropped")
    get_logger("error").error("dropped too")
    get_logger("info").info("kept")
    assert "kept" in sinks["info"].getvalue()
    assert all(not sinks[level].getvalue() for level in LEVELS if level != "info")


def test_reinitialising_replaces_handlers() -> None:
    first, second = io.StringIO(), io.StringIO()
    init_loggers(None, first, None, None, None)
    init_loggers(None, second, None, None, None)
    get_logger("info").info("once")
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1
    assert len(get_logger("info").handlers) == 1
    assert get_logger("info").propagate is False


def test_unknown_handle() -> None:
    with pytest.raises(KeyError):
        get_logger("fatal")


def test_timing_reports_on_debug_handle() -> None:
    sink = io.StringIO()
    init_loggers(None, None, sink, None, None)
    with Timing("load") as t:
        sum(range(1000))
    assert t.ms >= 0.0
    assert re.search(r"DEBUG: .* load took \d+\.\d{3}ms", sink.getvalue())


def test_unnamed_timing_is_silent() -> None:
    sink = io.StringIO()
    init_loggers(None, None, sink, None, None)
    with Timing():
        pass
    assert sink.getvalue() == ""


def test_configure_from_discards_by_config(tmp_path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "logging:\n  info: discard\n  debug: discard\n  warning: discard\n  error: discard\n"
    )
    configure_from(load_config(cfg_file, env={}))
    for level in LEVELS:
        handlers = get_logger(level).handlers
        assert len(handlers) == 1
        assert type(handlers[0]).__name__ == "NullHandler"


def test_configure_from_can_keep_stdout_free(monkeypatch: pytest.MonkeyPatch) -> None:
    out, err = io.StringIO(), io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    monkeypatch.setattr("sys.stderr", err)
    configure_from(load_config(env={}), reserve_stdout=True)
    get_logger("info").info("to stderr")
    get_logger("warning").warning("also stderr")
    assert out.getvalue() == ""
    assert "INFO : " in err.getvalue()
    assert "WARN : " in err.getvalue()
