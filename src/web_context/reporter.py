"""Last-resort reporter for errors nobody else handled.

Each report is a two-column, header-less table: a centered error glyph and
an ``Uncaught <Kind>: <message>`` description wrapped at 76 columns. It is
written with a single synchronous ``os.write`` so it lands on the terminal
before the interpreter tears the process down.
"""

from __future__ import annotations

import logging
import os
import sys
import textwrap
import threading
from typing import Any, Callable, Optional

from .errors import ErrorCategory
from .styles import EscapeTable, colorize_red, default_escape_table

logger = logging.getLogger(__name__)

SYMBOL_COLUMN_MIN_WIDTH = 3
DESCRIPTION_MAX_WIDTH = 76
COLUMN_GAP = " "

_previous_hooks: dict[str, Callable[..., Any]] = {}


def error_kind(err: BaseException) -> str:
    if isinstance(err, TypeError) or getattr(err, "category", None) is ErrorCategory.TYPE:
        return ErrorCategory.TYPE.value
    return ErrorCategory.GENERIC.value


def describe(err: BaseException) -> str:
    message = str(err) or type(err).__name__
    return f"Uncaught {error_kind(err)}: {message}"


def render_report(err: BaseException, *, table: Optional[EscapeTable] = None) -> str:
    t = table or default_escape_table()
    symbol = t.error_symbol
    width = max(SYMBOL_COLUMN_MIN_WIDTH, len(symbol))
    # Pad before coloring so escape codes do not count toward the width.
    symbol_cell = colorize_red(symbol.center(width), table=t)
    blank_cell = " " * width

    lines: list[str] = []
    for paragraph in describe(err).splitlines() or [""]:
        wrapped = textwrap.wrap(
            paragraph,
            width=DESCRIPTION_MAX_WIDTH,
            break_long_words=True,
            break_on_hyphens=False,
        )
        lines.extend(wrapped or [""])

    rows = []
    for index, line in enumerate(lines):
        cell = symbol_cell if index == 0 else blank_cell
        rows.append(f"{cell}{COLUMN_GAP}{line}".rstrip())
    return "\n".join(rows)


def report_uncaught(
    err: BaseException,
    *,
    fd: Optional[int] = None,
    table: Optional[EscapeTable] = None,
) -> None:
    """Write the report for ``err`` to the error stream. Does not re-raise."""

    target = sys.stderr.fileno() if fd is None else fd
    payload = render_report(err, table=table) + os.linesep
    os.write(target, payload.encode("utf-8"))


def _excepthook(exc_type, exc_value, exc_tb) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        _previous_hooks.get("sys", sys.__excepthook__)(exc_type, exc_value, exc_tb)
        return
    report_uncaught(exc_value if exc_value is not None else exc_type())


def _thread_excepthook(args) -> None:
    if args.exc_type is SystemExit:
        return
    report_uncaught(args.exc_value if args.exc_value is not None else args.exc_type())


def install_reporter() -> None:
    """Route uncaught exceptions (main thread and worker threads) to the reporter."""

    if _previous_hooks:
        return
    _previous_hooks["sys"] = sys.excepthook
    _previous_hooks["threading"] = threading.excepthook
    sys.excepthook = _excepthook
    threading.excepthook = _thread_excepthook
    logger.debug("uncaught-exception reporter installed")


def uninstall_reporter() -> None:
    if not _previous_hooks:
        return
    sys.excepthook = _previous_hooks.pop("sys")
    threading.excepthook = _previous_hooks.pop("threading")
    logger.debug("uncaught-exception reporter removed")
