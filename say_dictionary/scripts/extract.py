"""Extract say() keys from a source tree into a dictionary file.

Usage:
    say-dictionary extract -l en,is -i ./app -o ./dictionary.json
    python -m say_dictionary.scripts.extract extract -l en,is -i ./app -o ./dictionary.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from say_dictionary.app.core.logging_config import setup_logging
from say_dictionary.app.services.dictionary_file import (
    DictionaryFileError,
    load_dictionary,
    save_dictionary,
)
from say_dictionary.app.services.extractor import (
    build_dictionary,
    scan_files,
    walk_source_files,
)

EXAMPLE = "Example:\n  say-dictionary extract -l en,is -i ./app -o ./dictionary.json"


def _languages(value: str) -> list[str]:
    return [lang.strip() for lang in value.split(",") if lang.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="say-dictionary",
        description="Extract translation keys from source files",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command")

    extract = subparsers.add_parser(
        "extract",
        help="scan a directory and update the dictionary file",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    extract.add_argument(
        "-l", "--lang", dest="languages", type=_languages,
        help="comma-separated languages (first language gets the key as text)",
    )
    extract.add_argument("-i", "--in", dest="src", help="source directory to scan")
    extract.add_argument("-o", "--out", dest="out", help="output dictionary file")
    extract.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    extract.set_defaults(print_usage=extract.print_usage)
    return parser


def run_extract(languages: list[str], src: Path, out: Path) -> int:
    if not src.is_dir():
        print(f"Error: Source directory does not exist: {src}", file=sys.stderr)
        return 1

    try:
        existing = load_dictionary(out)
    except DictionaryFileError as exc:
        print(f"Error: Could not read dictionary {exc}", file=sys.stderr)
        return 1

    print(f"Scanning {src} for say() calls...")
    files = walk_source_files(src)
    keys = scan_files(files)
    print(f"Found {len(keys)} unique keys in {len(files)} files")

    dictionary, new_keys = build_dictionary(existing, keys, languages)
    try:
        save_dictionary(out, dictionary)
    except DictionaryFileError as exc:
        print(f"Error: Could not write dictionary {exc}", file=sys.stderr)
        return 1

    print(f"Added {new_keys} new keys")
    print(f"Dictionary saved to {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if not args.languages or not args.src or not args.out:
        print("Error: -l, -i, and -o are all required", file=sys.stderr)
        args.print_usage(sys.stderr)
        return 1

    setup_logging(debug=args.verbose)
    return run_extract(args.languages, Path(args.src).resolve(), Path(args.out).resolve())


if __name__ == "__main__":
    sys.exit(main())
