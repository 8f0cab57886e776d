"""Request-scoped state read by the resolver: bound location and language override."""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Optional

from say_dictionary.app.core.location import Location

_LOCATION: ContextVar[Optional[Location]] = ContextVar("say_location", default=None)
_LANGUAGE_OVERRIDE: ContextVar[Optional[str]] = ContextVar("say_language_override", default=None)


def bind_location(location: Optional[Location]) -> Token:
    return _LOCATION.set(location)


def reset_location(token: Token) -> None:
    _LOCATION.reset(token)


def get_location() -> Optional[Location]:
    return _LOCATION.get()


def set_language_override(lang: Optional[str]) -> Token:
    return _LANGUAGE_OVERRIDE.set(lang)


def reset_language_override(token: Token) -> None:
    _LANGUAGE_OVERRIDE.reset(token)


def get_language_override() -> Optional[str]:
    return _LANGUAGE_OVERRIDE.get()
