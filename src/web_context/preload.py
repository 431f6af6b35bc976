"""Startup source that swaps a browser-like ``window`` into ``builtins``.

The generated text is meant to be executed verbatim by a host before any
application code runs (for example from ``sitecustomize``). The DOM itself is
BeautifulSoup's; nothing here parses HTML.
"""

from __future__ import annotations

from typing import Optional

from jinja2 import Environment, StrictUndefined

from .config import WebContextSettings

_JINJA = Environment(undefined=StrictUndefined, keep_trailing_newline=True)

PRELOAD_TEMPLATE = """\
import builtins
import types

from bs4 import BeautifulSoup

document = BeautifulSoup({{ html_literal }}, {{ engine_literal }})
window = types.SimpleNamespace(document=document)
window.window = window
window.self = window
window.globalThis = window
builtins.window = window
builtins.document = document
del builtins, types, BeautifulSoup, document, window
"""


def get_global_preload_code(
    *,
    html: Optional[str] = None,
    settings: Optional[WebContextSettings] = None,
) -> str:
    """Return Python source that installs ``window``/``document`` globals."""

    preload = (settings or WebContextSettings()).preload
    markup = html if html is not None else preload.html
    tpl = _JINJA.from_string(PRELOAD_TEMPLATE)
    return tpl.render(html_literal=repr(markup), engine_literal=repr(preload.engine))
