"""Escape sequences and the small text formatters built on them."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Optional

# Unicode glyphs are emitted regardless of terminal capability.
LEFT_DOUBLE_QUOTE = "\u201c"  # “
RIGHT_DOUBLE_QUOTE = "\u201d"  # ”
ERROR_SYMBOL = "\u2715"  # ✕
WARNING_SYMBOL = "\u26a0"  # ⚠

_ESC = "\u001b["


@dataclass(frozen=True)
class EscapeTable:
    """Literal output sequences keyed by symbolic name.

    The plain variant keeps the glyphs and blanks every style sequence, so a
    formatter that wraps text with it returns the text unchanged.
    """

    rich: bool
    left_double_quote: str = LEFT_DOUBLE_QUOTE
    right_double_quote: str = RIGHT_DOUBLE_QUOTE
    error_symbol: str = ERROR_SYMBOL
    warning_symbol: str = WARNING_SYMBOL
    start_italics: str = ""
    stop_italics: str = ""
    start_underline: str = ""
    stop_underline: str = ""
    start_red: str = ""
    stop_color: str = ""


STYLED = EscapeTable(
    rich=True,
    start_italics=_ESC + "3m",
    stop_italics=_ESC + "0m",
    start_underline=_ESC + "4m",
    stop_underline=_ESC + "0m",
    start_red=_ESC + "31m",
    stop_color=_ESC + "39m",
)
PLAIN = EscapeTable(rich=False)


def build_escape_table(rich_output: bool) -> EscapeTable:
    return STYLED if rich_output else PLAIN


@functools.lru_cache(maxsize=1)
def default_escape_table() -> EscapeTable:
    from .config import get_runtime_config

    return build_escape_table(get_runtime_config().rich_output)


def _wrap(start: str, text: str, stop: str) -> str:
    if not start and not stop:
        return text
    return f"{start}{text}{stop}"


def curly_quote(text: str, *, table: Optional[EscapeTable] = None) -> str:
    """Return ``text`` wrapped in curly double quotes."""

    t = table or default_escape_table()
    return f"{t.left_double_quote}{text}{t.right_double_quote}"


def italicize(text: str, *, table: Optional[EscapeTable] = None) -> str:
    t = table or default_escape_table()
    return _wrap(t.start_italics, text, t.stop_italics)


def underline(text: str, *, table: Optional[EscapeTable] = None) -> str:
    t = table or default_escape_table()
    return _wrap(t.start_underline, text, t.stop_underline)


def colorize_red(text: str, *, table: Optional[EscapeTable] = None) -> str:
    t = table or default_escape_table()
    return _wrap(t.start_red, text, t.stop_color)
