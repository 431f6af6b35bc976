from __future__ import annotations

import copy
import pickle

from web_context.errors import (
    Err,
    ErrorCategory,
    InvalidModuleSpecifierError,
    SettingsError,
)
from web_context.styles import PLAIN, STYLED


def test_plain_message_matches_template() -> None:
    err = InvalidModuleSpecifierError("lodash", "file:///a/b.py", table=PLAIN)
    assert str(err) == (
        "Failed to resolve module specifier “lodash” imported from "
        "file:///a/b.py. Bare specifiers are reserved for potential future use "
        "and relative references must begin with either “/”, "
        "“./”, or “../”."
    )
    assert err.message == str(err)


def test_styled_message_underlines_referrer_and_italicizes_must() -> None:
    err = InvalidModuleSpecifierError("lodash", "file:///a/b.py", table=STYLED)
    assert "\x1b[4mfile:///a/b.py\x1b[0m" in err.message
    assert "\x1b[3mmust\x1b[0m" in err.message


def test_error_carries_kind_and_category() -> None:
    err = InvalidModuleSpecifierError("pkg", "file:///x/", table=PLAIN)
    assert isinstance(err, TypeError)
    assert err.code is Err.INVALID_MODULE_SPECIFIER
    assert err.code.value == "ERR_INVALID_MODULE_SPECIFIER"
    assert err.category is ErrorCategory.TYPE
    assert err.specifier == "pkg"
    assert err.referrer == "file:///x/"
    payload = err.to_dict()
    assert payload["code"] == "ERR_INVALID_MODULE_SPECIFIER"
    assert payload["category"] == "TypeError"
    assert payload["message"] == err.message


def test_settings_error_str_includes_context() -> None:
    err = SettingsError(Err.INVALID_SETTINGS, ctx={"path": "cfg.yaml"})
    assert "cfg.yaml" in str(err)
    assert str(SettingsError(Err.INVALID_SETTINGS)) == "INVALID_SETTINGS"


def test_settings_error_chains_cause() -> None:
    cause = ValueError("bad")
    err = SettingsError(Err.INVALID_SETTINGS, cause=cause)
    assert err.__cause__ is cause
    assert err.category is ErrorCategory.GENERIC


def test_invalid_specifier_error_survives_pickle_and_copy() -> None:
    err = InvalidModuleSpecifierError("lodash", "file:///a/b.py", table=STYLED)
    for clone in (pickle.loads(pickle.dumps(err)), copy.copy(err)):
        assert isinstance(clone, InvalidModuleSpecifierError)
        assert clone.specifier == "lodash"
        assert clone.referrer == "file:///a/b.py"
        assert clone.message == err.message
        assert clone.code is Err.INVALID_MODULE_SPECIFIER
