"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator

import pytest

from say_dictionary.app.core import i18n
from say_dictionary.app.core.i18n import Resolver
from say_dictionary.app.core.location import StaticLocation


class RecordingLocation(StaticLocation):
    """StaticLocation that remembers where it was told to go."""

    def __init__(self, path: str | None = None, query: str = "", fragment: str = "") -> None:
        super().__init__(path, query, fragment)
        self.visited: list[str] = []

    def navigate(self, url: str) -> None:
        self.visited.append(url)


# ─── Dictionary ──────────────────────────────────────────────────────────────


@pytest.fixture()
def sample_dictionary() -> dict[str, dict[str, str]]:
    return {
        "Hello": {"en": "Hello", "is": "Halló"},
        "Goodbye": {"en": "Goodbye", "is": ""},
        "Only English": {"en": "Only English"},
        "Nothing yet": {"en": "", "is": ""},
        "Welcome, {name}!": {"en": "Welcome, {name}!", "is": "Velkomin, {name}!"},
    }


# ─── Resolver ────────────────────────────────────────────────────────────────


@pytest.fixture()
def make_resolver(
    sample_dictionary: dict[str, dict[str, str]],
) -> Callable[..., tuple[Resolver, RecordingLocation]]:
    """Return a factory building an initialized resolver at a given path."""

    def _make(
        path: str | None = "/",
        query: str = "",
        fragment: str = "",
        default_language: str | None = None,
    ) -> tuple[Resolver, RecordingLocation]:
        location = RecordingLocation(path, query, fragment)
        resolver = Resolver(location=location)
        resolver.init(sample_dictionary, default_language=default_language)
        return resolver, location

    return _make


@pytest.fixture()
def default_resolver(monkeypatch: pytest.MonkeyPatch) -> Resolver:
    """Swap the process-wide resolver for a fresh, uninitialized one."""
    resolver = Resolver()
    monkeypatch.setattr(i18n, "_default_resolver", resolver)
    return resolver


# ─── Logging ─────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers the CLI installs so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("say_dictionary")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
