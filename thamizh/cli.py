#!/usr/bin/env python3
"""
Thamizh CLI

Command-line interface for Romanized Tamil transliteration and
dictionary lookup.

Usage:
    python -m thamizh.cli transliterate "vanakkam, epdi irukinga?"
    python -m thamizh.cli transliterate --file notes.txt
    python -m thamizh.cli search anbu
    python -m thamizh.cli search lonely --locale english
    python -m thamizh.cli highlight "Thank you for the love" --script english
    python -m thamizh.cli highlight --file story.txt --lexicon words.csv
    python -m thamizh.cli formats

Options:
    -l, --lexicon FILE   Lexicon file (CSV or JSON); defaults to
                         THAMIZH_LEXICON_PATH or the built-in lexicon
    -v, --verbose        Debug logging
"""

import argparse
import logging
import os
import sys

# Allow running from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from thamizh.config import get_settings
from thamizh.core import TamilEngine, load_lexicon, spans_to_markdown
from thamizh.lexicon import Lexicon, Script, default_lexicon
from thamizh.loaders import LexiconLoadError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thamizh",
        description=(
            "Romanized Tamil transliteration and dictionary lookup\n\n"
            "Converts phonetic Latin input into Tamil script, searches a\n"
            "Tamil/English lexicon with fuzzy fallback, and marks lexicon\n"
            "words inside free text."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  thamizh transliterate \"amma appa\"\n"
            "  thamizh search thanimai\n"
            "  thamizh highlight \"அவர் தனிமையில் இருந்தார்\" --lexicon words.json\n"
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command")

    translit = commands.add_parser("transliterate", help="Convert romanized text to Tamil script")
    translit.add_argument("text", nargs="*", help="Text to transliterate")
    translit.add_argument("-f", "--file", help="Read the text from a file")

    search = commands.add_parser("search", help="Search the lexicon")
    search.add_argument("query", nargs="?", default="", help="Search query (empty lists everything)")
    search.add_argument("-l", "--lexicon", help="Lexicon file (CSV or JSON)")
    search.add_argument(
        "--locale",
        choices=[s.value for s in Script],
        help="Collation order for results",
    )

    highlight = commands.add_parser("highlight", help="Mark lexicon words in text as Markdown")
    highlight.add_argument("text", nargs="*", help="Text to scan")
    highlight.add_argument("-f", "--file", help="Read the text from a file")
    highlight.add_argument("-l", "--lexicon", help="Lexicon file (CSV or JSON)")
    highlight.add_argument(
        "--script",
        choices=[s.value for s in Script],
        help="Headword script to match",
    )

    commands.add_parser("formats", help="Show supported lexicon file formats")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "formats":
        _show_formats()
        return 0

    engine = TamilEngine(settings=settings)

    try:
        if args.command == "transliterate":
            text = _read_text(args)
            print(engine.transliterate(text))

        elif args.command == "search":
            lexicon = _resolve_lexicon(args.lexicon, settings.LEXICON_PATH)
            result = engine.search(args.query, lexicon, args.locale)
            _print_results(result)

        elif args.command == "highlight":
            text = _read_text(args)
            lexicon = _resolve_lexicon(args.lexicon, settings.LEXICON_PATH)
            spans = engine.highlight(text, lexicon, args.script)
            print(spans_to_markdown(text, spans, args.script or settings.script), end="")

    except (OSError, LexiconLoadError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0


def _read_text(args) -> str:
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    if not args.text:
        raise ValueError("No text provided. Pass text arguments or --file.")
    return " ".join(args.text)


def _resolve_lexicon(path, fallback) -> Lexicon:
    path = path or fallback
    if path:
        lexicon = load_lexicon(path)
        print(f"[LEXICON] {len(lexicon)} entries from {path}", file=sys.stderr)
        return lexicon
    return default_lexicon()


def _print_results(result):
    if not result.entries:
        print(f"No entries match \"{result.query}\".")
        return
    if result.is_fuzzy:
        print(f"No exact match for \"{result.query}\". Did you mean:")
        for entry, score in zip(result.entries, result.scores):
            print(f"  {entry.tamil_word}  {entry.english_word}  (distance {score})")
        return
    for entry in result.entries:
        print(f"  {entry.tamil_word}  {entry.english_word}")
        if entry.english_meaning:
            print(f"      {entry.english_meaning}")


def _show_formats():
    """Display all supported lexicon formats."""
    formats = TamilEngine.supported_formats()
    print("\nSupported Lexicon Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
