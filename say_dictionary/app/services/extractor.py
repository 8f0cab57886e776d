"""Find ``say("...")`` call sites in a source tree and merge them into a dictionary.

Extraction is a regex scan, not a parse: only plain string literals are
picked up. Calls with computed arguments are reported by
:func:`find_dynamic_calls` so they can be surfaced, but never extracted.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from say_dictionary.app.core.config import settings
from say_dictionary.app.core.dictionary import Dictionary

logger = logging.getLogger(__name__)

SAY_CALL_PATTERN = re.compile(r"""\bsay\s*\(\s*(["'`])([^"'`]+)\1\s*\)""")

# Any say( call, but not a definition of say itself
_SAY_CALL_START = re.compile(r"(?<!def )(?<!function )\bsay\s*\(\s*")

_TEMPLATE_INTERPOLATION = "${"


def extract_keys(content: str) -> set[str]:
    """Return the literal keys passed to ``say()`` in *content*."""
    keys: set[str] = set()
    for match in SAY_CALL_PATTERN.finditer(content):
        quote, key = match.group(1), match.group(2)
        if quote == "`" and _TEMPLATE_INTERPOLATION in key:
            continue
        keys.add(key)
    return keys


def find_dynamic_calls(content: str) -> list[str]:
    """Return a snippet for every ``say()`` call whose argument is not a plain literal."""
    literal_starts = {
        match.start()
        for match in SAY_CALL_PATTERN.finditer(content)
        if not (match.group(1) == "`" and _TEMPLATE_INTERPOLATION in match.group(2))
    }

    snippets: list[str] = []
    for match in _SAY_CALL_START.finditer(content):
        if match.start() in literal_starts:
            continue
        line_end = content.find("\n", match.start())
        if line_end == -1:
            line_end = len(content)
        snippets.append(content[match.start():line_end].strip())
    return snippets


def walk_source_files(
    root: Path | str,
    extensions: Iterable[str] | None = None,
    excluded: Iterable[str] | None = None,
) -> list[Path]:
    """Return all scannable files under *root*, sorted.

    Directories named in *excluded* and anything whose name starts with a
    dot are skipped.
    """
    allowed = set(extensions if extensions is not None else settings.SOURCE_EXTENSIONS)
    skipped = set(excluded if excluded is not None else settings.EXCLUDED_DIRECTORIES)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in skipped and not d.startswith(".")
        )
        for name in sorted(filenames):
            if name.startswith("."):
                continue
            path = Path(dirpath) / name
            if path.suffix in allowed:
                files.append(path)
    return files


def scan_files(files: Iterable[Path]) -> set[str]:
    """Collect keys from every file in *files*."""
    keys: set[str] = set()
    for path in files:
        content = path.read_text(encoding="utf-8", errors="replace")
        keys |= extract_keys(content)
        for snippet in find_dynamic_calls(content):
            logger.warning("Skipping non-literal say() call in %s: %s", path, snippet)
    return keys


def build_dictionary(
    existing: Mapping[str, Mapping[str, str]],
    keys: Iterable[str],
    languages: list[str],
) -> tuple[Dictionary, int]:
    """Merge *keys* into *existing* and return ``(dictionary, new_key_count)``.

    New keys get the key itself as text in ``languages[0]`` and empty
    strings elsewhere. Existing entries only gain the languages they lack;
    their translations are never overwritten. Keys without an entry in
    *keys* are kept. The result is sorted by key.
    """
    if not languages:
        raise ValueError("At least one language is required")

    merged: Dictionary = {key: dict(entry) for key, entry in existing.items()}
    display_language = languages[0]
    new_keys = 0

    for key in keys:
        entry = merged.get(key)
        if entry is None:
            merged[key] = {lang: key if lang == display_language else "" for lang in languages}
            new_keys += 1
            continue
        for lang in languages:
            entry.setdefault(lang, "")

    return dict(sorted(merged.items())), new_keys
