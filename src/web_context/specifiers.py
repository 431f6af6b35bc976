from __future__ import annotations

import re

FILE_SCHEME_PREFIX = "file://"

# Zero, one or two dots followed immediately by a slash: "/", "./", "../".
_PATH_LIKE = re.compile(r"^\.{0,2}/")


def is_reserved_specifier(specifier: str) -> bool:
    """Return True if ``specifier`` is bare and therefore reserved.

    A specifier is accepted only when it starts with ``/``, ``./``, ``../``
    or the literal ``file://`` prefix. Nothing is normalized first: ``.\\x``,
    ``FILE://x`` and ``%2E/x`` are all reserved, as is any other URL scheme.

    See https://html.spec.whatwg.org/multipage/webappapis.html#resolve-a-module-specifier
    """

    if specifier.startswith(FILE_SCHEME_PREFIX):
        return False
    return _PATH_LIKE.match(specifier) is None
