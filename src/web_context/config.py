"""Process-wide runtime configuration and optional YAML settings."""

from __future__ import annotations

import functools
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import Err, SettingsError

logger = logging.getLogger(__name__)

DEFAULT_HTML = "<!DOCTYPE html><p>Hello, world!</p>"

_FALSEY = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class RuntimeConfig:
    """Values computed once at startup and shared read-only by every component."""

    base_url: str
    rich_output: bool


def compute_base_url(cwd: Path | str | None = None) -> str:
    """Return ``file://`` + working directory + trailing separator."""

    directory = Path(cwd) if cwd is not None else Path.cwd()
    path = directory.as_posix()
    if not path.endswith("/"):
        path += "/"
    if not path.startswith("/"):
        # Windows drive paths (C:/...) still need an empty authority.
        path = "/" + path
    return "file://" + path


def detect_rich_output(
    stream: Optional[IO[Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Answer whether ``stream`` supports color/style escapes.

    ``FORCE_COLOR`` wins over everything, then ``NO_COLOR``, then a dumb
    terminal; otherwise the answer is whether the stream is a tty.
    """

    env = os.environ if environ is None else environ
    force = env.get("FORCE_COLOR")
    if force is not None:
        return force.strip().lower() not in _FALSEY
    if "NO_COLOR" in env:
        return False
    if env.get("TERM") == "dumb":
        return False
    target = sys.stderr if stream is None else stream
    isatty = getattr(target, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def build_runtime_config(
    *,
    cwd: Path | str | None = None,
    stream: Optional[IO[Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    rich_output: bool | None = None,
) -> RuntimeConfig:
    if rich_output is None:
        rich_output = detect_rich_output(stream, environ)
    return RuntimeConfig(base_url=compute_base_url(cwd), rich_output=rich_output)


@functools.lru_cache(maxsize=1)
def get_runtime_config() -> RuntimeConfig:
    """The process configuration. Computed on first use and never recomputed."""

    config = build_runtime_config()
    logger.debug(
        "runtime config: base_url=%s rich_output=%s", config.base_url, config.rich_output
    )
    return config


class PreloadSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    html: str = DEFAULT_HTML
    engine: str = "html.parser"


class WebContextSettings(BaseModel):
    """Optional settings file contents.

    Attributes:
        preload: HTML and BeautifulSoup tree builder used by the preload script.
        rich_output: Overrides the detected rich-output flag when not None.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    preload: PreloadSettings = Field(default_factory=PreloadSettings)
    rich_output: bool | None = None


def load_settings(path: Path | str) -> WebContextSettings:
    """Load a YAML settings file into :class:`WebContextSettings`."""

    settings_path = Path(path)
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(
            Err.INVALID_SETTINGS,
            ctx={"path": str(settings_path), "error": "unreadable"},
            cause=exc,
        )
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsError(
            Err.INVALID_SETTINGS,
            ctx={"path": str(settings_path), "error": "malformed yaml"},
            cause=exc,
        )
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise SettingsError(
            Err.INVALID_SETTINGS,
            ctx={"path": str(settings_path), "error": "top-level must be mapping"},
        )
    try:
        return WebContextSettings.model_validate(dict(data))
    except ValidationError as exc:
        raise SettingsError(
            Err.INVALID_SETTINGS,
            ctx={"path": str(settings_path), "error": f"{exc.error_count()} invalid field(s)"},
            cause=exc,
        )
