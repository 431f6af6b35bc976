"""Module-specifier resolution hook and a reference resolver chain."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, Union
from urllib.parse import urljoin

from .config import RuntimeConfig, get_runtime_config
from .errors import InvalidModuleSpecifierError
from .specifiers import FILE_SCHEME_PREFIX, is_reserved_specifier
from .styles import build_escape_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    parent_url: Optional[str] = None
    conditions: tuple[str, ...] = ()

    @classmethod
    def coerce(cls, value: Union["ResolutionContext", Mapping[str, Any], None]) -> "ResolutionContext":
        """Accept a context object or a host mapping (``parentURL``/``parent_url``)."""

        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        parent = value.get("parent_url")
        if parent is None:
            parent = value.get("parentURL")
        conditions = tuple(value.get("conditions") or ())
        return cls(parent_url=parent, conditions=conditions)


@dataclass(frozen=True)
class ResolvedModule:
    url: str
    format: Optional[str] = None


ResolverFn = Callable[..., Union[Awaitable[Any], Any]]


async def _settle(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


async def resolve(
    specifier: str,
    context: Union[ResolutionContext, Mapping[str, Any], None],
    next_resolve: ResolverFn,
    *,
    config: Optional[RuntimeConfig] = None,
) -> Any:
    """Reject bare specifiers, otherwise hand off to ``next_resolve``.

    The referrer defaults to the process base URL when the context has no
    parent. A rejected specifier never reaches ``next_resolve``; an accepted
    one gets back exactly what ``next_resolve`` produced.
    """

    ctx = ResolutionContext.coerce(context)
    cfg = config or get_runtime_config()
    referrer = cfg.base_url if ctx.parent_url is None else ctx.parent_url

    if is_reserved_specifier(specifier):
        logger.debug("rejecting bare specifier %r from %s", specifier, referrer)
        raise InvalidModuleSpecifierError(
            specifier, referrer, table=build_escape_table(cfg.rich_output)
        )

    logger.debug("delegating %r from %s", specifier, referrer)
    # Only the parent URL travels on; hosts passing a mapping get a mapping back.
    forwarded: Any
    if isinstance(context, Mapping):
        forwarded = {"parentURL": referrer}
    else:
        forwarded = ResolutionContext(parent_url=referrer)
    return await _settle(next_resolve(specifier, forwarded, next_resolve))


def default_resolve(
    specifier: str,
    context: Union[ResolutionContext, Mapping[str, Any], None],
    next_resolve: Optional[ResolverFn] = None,
) -> ResolvedModule:
    """Resolve ``specifier`` against the parent URL without touching the filesystem."""

    ctx = ResolutionContext.coerce(context)
    if specifier.startswith(FILE_SCHEME_PREFIX):
        return ResolvedModule(url=specifier)
    base = get_runtime_config().base_url if ctx.parent_url is None else ctx.parent_url
    return ResolvedModule(url=urljoin(base, specifier))


def chain_resolvers(*hooks: ResolverFn, final: ResolverFn = default_resolve) -> ResolverFn:
    """Compose hooks so each one's ``next_resolve`` is the rest of the chain.

    The returned callable has the hook signature itself; its own
    ``next_resolve`` argument is ignored.
    """

    def link(index: int) -> ResolverFn:
        if index == len(hooks):
            async def tail(specifier: str, context: Any, _next: Any = None) -> Any:
                return await _settle(final(specifier, context, final))

            return tail

        hook = hooks[index]
        rest = link(index + 1)

        async def step(specifier: str, context: Any, _next: Any = None) -> Any:
            return await _settle(hook(specifier, context, rest))

        return step

    return link(0)
