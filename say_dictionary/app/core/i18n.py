"""Dictionary-driven translation resolver.

The active language is the first segment of the current URL path
(``/is/about`` -> ``is``); URLs in the default language carry no prefix.
Lookups fall back from the active language to the default language and
finally to the raw key, logging a warning at each miss.

Typical use::

    from say_dictionary.app.core import i18n

    i18n.init(json.loads(Path("dictionary.json").read_text()))
    i18n.say("Hello")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from contextvars import Token
from typing import Any

from say_dictionary.app.core.context import (
    get_language_override,
    get_location,
    set_language_override,
)
from say_dictionary.app.core.dictionary import SayConfig, build_config
from say_dictionary.app.core.location import Location, StaticLocation

logger = logging.getLogger(__name__)

# (message, language, variables) -> formatted message
MessageFormatter = Callable[[str, str, Mapping[str, Any]], str]

_STATIC_LOCATION = StaticLocation()


def format_message(message: str, lang: str, variables: Mapping[str, Any]) -> str:
    """Default formatter: ``{placeholder}`` interpolation via ``str.format``."""
    return message.format(**variables)


def path_segments(path: str | None) -> list[str]:
    if not path:
        return []
    return [segment for segment in path.split("/") if segment]


def rewrite_path(path: str, lang: str, languages: Iterable[str], default_language: str) -> str:
    """Return *path* with its language prefix switched to *lang*.

    A leading supported language is replaced, otherwise *lang* is
    prepended. The default language gets no prefix at all.
    """
    given = path_segments(path)
    segments = given
    if segments and segments[0] in set(languages):
        segments = segments[1:]

    if lang != default_language:
        segments = [lang, *segments]

    new_path = "/" + "/".join(segments)
    if given and segments and path.endswith("/"):
        new_path += "/"
    return new_path


class Resolver:
    """Resolve translation keys against a :class:`SayConfig`.

    *location* is consulted for the current path; when omitted, the location
    bound to the current context (see ``LanguageMiddleware``) is used, and
    outside of a request a :class:`StaticLocation` with no path.
    """

    def __init__(
        self,
        config: SayConfig | None = None,
        location: Location | None = None,
        formatter: MessageFormatter | None = None,
    ) -> None:
        self._config = config
        self._location = location
        self._formatter = formatter or format_message

    @property
    def config(self) -> SayConfig | None:
        return self._config

    @property
    def initialized(self) -> bool:
        return self._config is not None

    @property
    def location(self) -> Location:
        return self._location or get_location() or _STATIC_LOCATION

    def init(
        self,
        dictionary: Mapping[str, Mapping[str, str]],
        default_language: str | None = None,
        languages: Iterable[str] | None = None,
    ) -> SayConfig:
        """Load *dictionary*, replacing any previous configuration."""
        self._config = build_config(dictionary, default_language, languages)
        logger.debug(
            "Initialized with %d keys, languages=%s, default=%s",
            len(self._config.dictionary),
            list(self._config.languages),
            self._config.default_language,
        )
        return self._config

    def _require_config(self) -> SayConfig | None:
        if self._config is None:
            logger.warning("Not initialized. Call init() first.")
        return self._config

    def _active_language(self, config: SayConfig) -> str:
        override = get_language_override()
        if config.supports(override):
            return override  # type: ignore[return-value]

        segments = path_segments(self.location.path)
        if segments and config.supports(segments[0]):
            return segments[0]

        return config.default_language

    def get_language(self) -> str | None:
        """Return the active language, or ``None`` before ``init``."""
        config = self._require_config()
        if config is None:
            return None
        return self._active_language(config)

    def say(self, key: str, variables: Mapping[str, Any] | None = None) -> str:
        """Return the text for *key* in the active language.

        Falls back to the default language, then to *key* itself. Empty
        strings count as missing translations.
        """
        config = self._require_config()
        if config is None:
            return key

        lang = self._active_language(config)
        entry = config.dictionary.get(key)
        if entry is None:
            logger.warning("Missing key: %r", key)
            return key

        message = entry.get(lang)
        if not message:
            logger.warning("Missing %r translation for key %r", lang, key)
            lang = config.default_language
            message = entry.get(lang) or key

        if not variables:
            return message
        return self._format(key, message, lang, variables)

    def _format(self, key: str, message: str, lang: str, variables: Mapping[str, Any]) -> str:
        try:
            return str(self._formatter(message, lang, variables))
        except Exception as exc:  # formatter is user-supplied; lookups never raise
            logger.warning("Failed to format message for key %r: %s", key, exc)
            return message

    def set_language(self, lang: str) -> str | None:
        """Navigate to the current page in *lang*.

        Returns the rewritten URL, or ``None`` when nothing happened.
        """
        config = self._require_config()
        if config is None:
            return None

        if not config.supports(lang):
            logger.warning("Invalid language: %r", lang)
            return None

        location = self.location
        if location.path is None:
            logger.debug("No addressable location, not navigating to %r", lang)
            return None

        url = rewrite_path(location.path, lang, config.languages, config.default_language)
        if location.query:
            url += "?" + location.query
        if location.fragment:
            url += "#" + location.fragment

        location.navigate(url)
        return url


_default_resolver = Resolver()


def get_resolver() -> Resolver:
    """Return the process-wide resolver used by the module-level helpers."""
    return _default_resolver


def init(
    dictionary: Mapping[str, Mapping[str, str]],
    default_language: str | None = None,
    languages: Iterable[str] | None = None,
) -> SayConfig:
    return _default_resolver.init(dictionary, default_language, languages)


def say(key: str, variables: Mapping[str, Any] | None = None) -> str:
    return _default_resolver.say(key, variables)


def get_language() -> str | None:
    return _default_resolver.get_language()


def set_language(lang: str) -> str | None:
    return _default_resolver.set_language(lang)


def ssr_lang(lang: str | None) -> Token:
    """Force the active language for the current context.

    For server-side rendering where the language is known from elsewhere
    than the path. Unsupported values are ignored at lookup time; ``None``
    clears the override.
    """
    return set_language_override(lang)
