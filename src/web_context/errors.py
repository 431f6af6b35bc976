from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .styles import EscapeTable, curly_quote, italicize, underline


class Err(Enum):
    """Machine-readable error kinds. Callers branch on these, not on text."""

    INVALID_MODULE_SPECIFIER = "ERR_INVALID_MODULE_SPECIFIER"
    INVALID_SETTINGS = "ERR_INVALID_SETTINGS"


class ErrorCategory(Enum):
    """Broad category for callers that only need coarse matching."""

    TYPE = "TypeError"
    GENERIC = "Error"


def render_invalid_specifier_message(
    specifier: str,
    referrer: str,
    *,
    table: Optional[EscapeTable] = None,
) -> str:
    return (
        f"Failed to resolve module specifier {curly_quote(specifier, table=table)} "
        f"imported from {underline(referrer, table=table)}. Bare specifiers are "
        f"reserved for potential future use and relative references "
        f"{italicize('must', table=table)} begin with either "
        f"{curly_quote('/', table=table)}, {curly_quote('./', table=table)}, or "
        f"{curly_quote('../', table=table)}."
    )


@dataclass(eq=False)
class InvalidModuleSpecifierError(TypeError):
    """A bare specifier was rejected.

    Still a ``TypeError`` so hosts that only check for that keep working;
    ``code`` and ``category`` carry the same information as plain fields.

    See https://bugzilla.mozilla.org/show_bug.cgi?id=1566307
    """

    specifier: str
    referrer: str
    table: Optional[EscapeTable] = field(default=None, repr=False)
    code: Err = field(default=Err.INVALID_MODULE_SPECIFIER, init=False)
    category: ErrorCategory = field(default=ErrorCategory.TYPE, init=False)
    message: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.message = render_invalid_specifier_message(
            self.specifier, self.referrer, table=self.table
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (type(self), (self.specifier, self.referrer, self.table))

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "specifier": self.specifier,
            "referrer": self.referrer,
            "message": self.message,
        }


@dataclass(eq=False)
class SettingsError(Exception):
    """Structured error raised while loading a settings file."""

    code: Err
    ctx: dict[str, Any] | None = None
    cause: Exception | None = None
    category: ErrorCategory = field(default=ErrorCategory.GENERIC, init=False)

    def __post_init__(self) -> None:
        if self.ctx is None:
            self.ctx = {}
        if self.cause is not None:
            self.__cause__ = self.cause
        super().__init__(self.code.name)

    def __str__(self) -> str:
        if not self.ctx:
            return self.code.name
        parts = ", ".join(f"{k}={v!r}" for k, v in self.ctx.items())
        return f"{self.code.name}: {parts}"
