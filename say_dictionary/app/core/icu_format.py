"""ICU MessageFormat formatter for :class:`~say_dictionary.app.core.i18n.Resolver`.

Handles plural and select syntax the default ``str.format`` formatter
cannot, e.g. ``{count, plural, one {# item} other {# items}}``::

    resolver = Resolver(formatter=IcuMessageFormatter())

Requires PyICU (``pip install say-dictionary[icu]``).
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import icu


@lru_cache(maxsize=256)
def _compile(message: str, lang: str) -> icu.MessageFormat:
    return icu.MessageFormat(message, icu.Locale(lang))


def _formattable(value: Any) -> icu.Formattable:
    if isinstance(value, bool):
        return icu.Formattable(str(value).lower())
    if isinstance(value, (int, float)):
        return icu.Formattable(value)
    return icu.Formattable(str(value))


class IcuMessageFormatter:
    """Format messages with named ICU arguments in the message's language."""

    def __call__(self, message: str, lang: str, variables: Mapping[str, Any]) -> str:
        names = list(variables.keys())
        values = [_formattable(variables[name]) for name in names]
        return str(_compile(message, lang).format(names, values))
