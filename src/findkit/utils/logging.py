"""Logging utilities.

Purpose:
    Centralize the five leveled log handles used across the package.

Key responsibilities:
    - Provide one ``logging.Logger`` per severity (trace, info, debug,
      warning, error), each writing to its own sink.
    - Allow any handle to be pointed at an arbitrary text stream or discarded.
    - Time blocks of code and report the elapsed time on the debug handle.

Inputs/Outputs:
    - Inputs: text streams (or ``None`` to discard) per handle.
    - Outputs: configured `logging.Logger` instances.

Public contracts:
    - `init_loggers(trace, info, debug, warning, error)`: rewire all handles.
    - `get_logger(level)`: return the handle for ``level``.
    - `configure_from(cfg)`: rewire the handles from a loaded configuration.
    - `Timing(name)`: context manager measuring elapsed milliseconds.

Notes/Edge cases:
    - Logging configuration is idempotent; re-initialising replaces the
      previous handler of every handle.
    - Handles never propagate to the root logger.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys
from time import perf_counter
from types import TracebackType
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:  # pragma: no cover
    from findkit.config import ConfigModel

__all__ = [
    "TRACE",
    "LEVELS",
    "PREFIXES",
    "DATE_FORMAT",
    "Timing",
    "configure_from",
    "get_logger",
    "init_loggers",
]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS: tuple[str, ...] = ("trace", "info", "debug", "warning", "error")

PREFIXES: dict[str, str] = {
    "trace": "TRACE : ",
    "info": "INFO : ",
    "debug": "DEBUG: ",
    "warning": "WARN : ",
    "error": "ERR  : ",
}

DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def _handle(level: str) -> logging.Logger:
    return logging.getLogger(f"findkit.{level}")


def _wire(level: str, stream: TextIO | None) -> None:
    logger = _handle(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler: logging.Handler
    if stream is None:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter(
                fmt=PREFIXES[level] + "%(asctime)s %(filename)s:%(lineno)d: %(message)s",
                datefmt=DATE_FORMAT,
            )
        )
    logger.addHandler(handler)
    # The sink decides what is kept, not the severity threshold.
    logger.setLevel(TRACE)
    logger.propagate = False


def init_loggers(
    trace_handle: TextIO | None,
    info_handle: TextIO | None,
    debug_handle: TextIO | None,
    warning_handle: TextIO | None,
    error_handle: TextIO | None,
) -> None:
    """Point every log handle at its sink.

    Parameters
    ----------
    trace_handle, info_handle, debug_handle, warning_handle, error_handle:
        Text streams receiving the formatted records of each handle.  ``None``
        discards everything written to that handle.
    """

    handles = (trace_handle, info_handle, debug_handle, warning_handle, error_handle)
    for level, stream in zip(LEVELS, handles):
        _wire(level, stream)


def get_logger(level: str) -> logging.Logger:
    """Return the log handle for ``level``.

    Raises
    ------
    KeyError
        If ``level`` is not one of :data:`LEVELS`.
    """

    if level not in PREFIXES:
        raise KeyError(f"Unknown log handle: {level!r}")
    return _handle(level)


def _resolve_sink(name: str, reserve_stdout: bool = False) -> TextIO | None:
    if name == "stdout":
        return sys.stderr if reserve_stdout else sys.stdout
    if name == "stderr":
        return sys.stderr
    return None


def configure_from(cfg: ConfigModel, *, reserve_stdout: bool = False) -> None:
    """Rewire the log handles using ``cfg.logging`` sink names.

    With ``reserve_stdout`` handles configured for ``stdout`` write to stderr
    instead, leaving stdout to the command output.
    """

    sinks = cfg.logging
    init_loggers(
        *(_resolve_sink(getattr(sinks, level), reserve_stdout) for level in LEVELS)
    )


class Timing:
    """Context manager measuring elapsed milliseconds.

    When ``name`` is given the elapsed time is reported on the debug handle as
    ``"<name> took <elapsed>"`` once the block exits.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()
        if self.name is not None:
            get_logger("debug").debug("%s took %.3fms", self.name, self.ms, stacklevel=2)

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


init_loggers(None, sys.stdout, sys.stdout, sys.stdout, sys.stderr)
