"""Read and write the JSON dictionary file."""

from __future__ import annotations

import json
from pathlib import Path

from say_dictionary.app.core.dictionary import Dictionary


class DictionaryFileError(Exception):
    """The dictionary file exists but is not a valid dictionary."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def load_dictionary(path: Path) -> Dictionary:
    """Return the dictionary stored at *path*, or ``{}`` if there is none."""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DictionaryFileError(path, f"invalid JSON ({exc})") from exc
    except OSError as exc:
        raise DictionaryFileError(path, f"cannot read file ({exc.strerror or exc})") from exc

    if not isinstance(data, dict):
        raise DictionaryFileError(path, "top level must be a JSON object")
    for key, entry in data.items():
        if not isinstance(entry, dict):
            raise DictionaryFileError(path, f"entry for {key!r} must be a JSON object")
        for lang, text in entry.items():
            if not isinstance(text, str):
                raise DictionaryFileError(path, f"{key!r}/{lang!r} must be a string")
    return data


def save_dictionary(path: Path, dictionary: Dictionary) -> None:
    """Write *dictionary* to *path* sorted by key, with a trailing newline."""
    ordered = dict(sorted(dictionary.items()))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(ordered, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise DictionaryFileError(path, f"cannot write file ({exc.strerror or exc})") from exc
