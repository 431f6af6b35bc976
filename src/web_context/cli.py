"""Command-line entry point for checking specifiers and emitting the preload script."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import Iterable, Optional

from .config import RuntimeConfig, WebContextSettings, get_runtime_config, load_settings
from .errors import InvalidModuleSpecifierError, SettingsError
from .hooks import ResolutionContext, default_resolve, resolve
from .preload import get_global_preload_code
from .reporter import render_report
from .specifiers import is_reserved_specifier
from .styles import build_escape_table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="web-context",
        description="Enforce web-style module specifiers and emit a DOM preload script",
    )
    parser.add_argument("--config", help="Optional YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Report whether specifiers are reserved")
    classify.add_argument("specifiers", nargs="+", metavar="SPECIFIER")

    res = sub.add_parser("resolve", help="Run the resolution hook for one specifier")
    res.add_argument("specifier")
    res.add_argument("--parent", help="Parent module URL (defaults to the working directory)")
    res.add_argument(
        "--condition",
        action="append",
        default=None,
        help="Export condition passed through to the resolver (may be repeated)",
    )

    pre = sub.add_parser("preload", help="Print the startup script source")
    pre.add_argument("--html", help="HTML document to build the window from")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(None if argv is None else list(argv))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings(args.config) if args.config else WebContextSettings()
    config = _runtime_config(settings)

    if args.command == "classify":
        return _classify(args.specifiers)
    if args.command == "resolve":
        return _resolve(args.specifier, args.parent, args.condition, config)
    if args.command == "preload":
        sys.stdout.write(get_global_preload_code(html=args.html, settings=settings))
        return 0
    parser.error(f"unknown command: {args.command}")  # pragma: no cover - argparse guards
    return 2


def _runtime_config(settings: WebContextSettings) -> RuntimeConfig:
    if settings.rich_output is None:
        return get_runtime_config()
    return dataclasses.replace(get_runtime_config(), rich_output=settings.rich_output)


def _classify(specifiers: list[str]) -> int:
    exit_code = 0
    for specifier in specifiers:
        reserved = is_reserved_specifier(specifier)
        if reserved:
            exit_code = 1
        print(f"{'reserved' if reserved else 'ok'}\t{specifier}")
    return exit_code


def _resolve(
    specifier: str,
    parent: Optional[str],
    conditions: Optional[list[str]],
    config: RuntimeConfig,
) -> int:
    context = ResolutionContext(parent_url=parent, conditions=tuple(conditions or ()))
    try:
        resolved = asyncio.run(resolve(specifier, context, default_resolve, config=config))
    except InvalidModuleSpecifierError as exc:
        table = build_escape_table(config.rich_output)
        print(render_report(exc, table=table), file=sys.stderr)
        return 1
    print(resolved.url)
    return 0


def entrypoint() -> None:  # pragma: no cover - console entry
    try:
        raise SystemExit(main())
    except SettingsError as exc:  # pragma: no cover - console behavior
        raise SystemExit(f"error: {exc}")
