from __future__ import annotations

import ast

from web_context.config import DEFAULT_HTML, PreloadSettings, WebContextSettings
from web_context.preload import get_global_preload_code


def test_preload_code_is_valid_python() -> None:
    code = get_global_preload_code()
    ast.parse(code)
    assert "from bs4 import BeautifulSoup" in code
    assert "builtins.window = window" in code
    assert "builtins.document = document" in code


def test_default_html_embedded_as_literal() -> None:
    code = get_global_preload_code()
    assert repr(DEFAULT_HTML) in code
    assert "'html.parser'" in code


def test_html_override_survives_quotes() -> None:
    html = "<p class='x'>\"quoted\" {{ not jinja }}</p>"
    code = get_global_preload_code(html=html)
    tree = ast.parse(code)
    literals = [
        node.value
        for node in ast.walk(tree)
        if isinstance(node, ast.Constant) and isinstance(node.value, str)
    ]
    assert html in literals


def test_settings_supply_html_and_engine() -> None:
    settings = WebContextSettings(preload=PreloadSettings(html="<main></main>", engine="lxml"))
    code = get_global_preload_code(settings=settings)
    assert "'<main></main>'" in code
    assert "'lxml'" in code


def test_explicit_html_beats_settings() -> None:
    settings = WebContextSettings(preload=PreloadSettings(html="<main></main>"))
    code = get_global_preload_code(html="<p>x</p>", settings=settings)
    assert "'<p>x</p>'" in code
    assert "<main>" not in code
