"""Web-style module specifier restriction and browser-like startup globals."""

from .config import RuntimeConfig, WebContextSettings, get_runtime_config, load_settings
from .errors import Err, ErrorCategory, InvalidModuleSpecifierError, SettingsError
from .hooks import ResolutionContext, ResolvedModule, chain_resolvers, default_resolve, resolve
from .preload import get_global_preload_code
from .reporter import install_reporter, report_uncaught, uninstall_reporter
from .specifiers import is_reserved_specifier
from .styles import EscapeTable, curly_quote, italicize, underline

__all__ = [
    "Err",
    "ErrorCategory",
    "EscapeTable",
    "InvalidModuleSpecifierError",
    "ResolutionContext",
    "ResolvedModule",
    "RuntimeConfig",
    "SettingsError",
    "WebContextSettings",
    "chain_resolvers",
    "curly_quote",
    "default_resolve",
    "get_global_preload_code",
    "get_runtime_config",
    "install_reporter",
    "is_reserved_specifier",
    "italicize",
    "load_settings",
    "report_uncaught",
    "resolve",
    "underline",
    "uninstall_reporter",
]
