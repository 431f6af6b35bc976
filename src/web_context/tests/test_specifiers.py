from __future__ import annotations

import pytest

from web_context.specifiers import is_reserved_specifier


@pytest.mark.parametrize(
    "specifier",
    [
        "/abs/path.py",
        "./sibling.py",
        "../parent/mod.py",
        "/",
        "./",
        "../",
        "file:///tmp/x.py",
        "file://",
        "file://evil",
        "file://../../x",
    ],
)
def test_path_like_and_file_urls_are_accepted(specifier: str) -> None:
    assert is_reserved_specifier(specifier) is False


@pytest.mark.parametrize(
    "specifier",
    [
        "lodash",
        "@scope/pkg",
        "",
        "http://example.com/x",
        "https://example.com/x.js",
        "FILE:///tmp/x.py",
        ".../x",
        ".\\x",
        "%2E/x",
        " ./x",
        "data:text/javascript,1",
    ],
)
def test_bare_and_other_schemes_are_reserved(specifier: str) -> None:
    assert is_reserved_specifier(specifier) is True


def test_classifier_is_stable_across_calls() -> None:
    for specifier in ("./a.py", "numpy"):
        assert is_reserved_specifier(specifier) == is_reserved_specifier(specifier)
