"""Dictionary types and the immutable resolver configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from say_dictionary.app.core.config import settings

logger = logging.getLogger(__name__)

# language code -> localized text
DictionaryEntry = dict[str, str]

# translation key -> entry
Dictionary = dict[str, DictionaryEntry]


@dataclass(frozen=True)
class SayConfig:
    """Loaded dictionary plus the language set derived from it.

    Built once by :func:`build_config`; a new ``init`` replaces it wholesale.
    """

    dictionary: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    languages: tuple[str, ...] = ()
    default_language: str = "en"

    def supports(self, lang: str | None) -> bool:
        return lang is not None and lang in self.languages


def detect_languages(dictionary: Mapping[str, Mapping[str, str]]) -> tuple[str, ...]:
    """Return the language codes of the first entry, in insertion order."""
    for entry in dictionary.values():
        return tuple(entry.keys())
    return ()


def build_config(
    dictionary: Mapping[str, Mapping[str, str]],
    default_language: str | None = None,
    languages: Iterable[str] | None = None,
) -> SayConfig:
    """Freeze *dictionary* into a :class:`SayConfig`.

    The supported languages come from *languages* when given, otherwise from
    the first dictionary entry. The default language is *default_language*,
    else the first supported language, else ``settings.FALLBACK_LANGUAGE``.
    """
    langs = tuple(languages) if languages is not None else detect_languages(dictionary)

    if default_language is None:
        default_language = langs[0] if langs else settings.FALLBACK_LANGUAGE
    elif langs and default_language not in langs:
        logger.warning(
            "Default language %r is not one of the supported languages %s",
            default_language,
            list(langs),
        )

    frozen = MappingProxyType(
        {key: MappingProxyType(dict(entry)) for key, entry in dictionary.items()}
    )
    return SayConfig(dictionary=frozen, languages=langs, default_language=default_language)
