"""
Thamizh Core Engine

The orchestrator that ties the phoneme tables, the transliterator and the
lexicon layer together behind one object, and routes lexicon files to the
right loader. Every operation is a pure function of its inputs: the
engine keeps no copy of any lexicon between calls.
"""

import logging
import os
from typing import Iterable, Mapping, Optional, Union

from .config import Settings, get_settings
from .lexicon.entry import LexiconEntry, MatchSpan, Script, SearchResult
from .lexicon.highlighter import LongestMatchHighlighter
from .lexicon.search import LexiconIndex
from .lexicon.snapshot import Lexicon
from .loaders import CSVLexiconLoader, JSONLexiconLoader, LexiconLoadError
from .phonemes import DEFAULT_PHONEME_TABLE, PhonemeTable
from .transliteration import transliterate, transliterate_word

logger = logging.getLogger(__name__)

LexiconLike = Union[Lexicon, Iterable[LexiconEntry], None]


class TamilEngine:
    """
    Main engine.

    Transliterates romanized input, searches a lexicon snapshot and
    highlights lexicon phrases in free text.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        phoneme_table: Optional[PhonemeTable] = None,
        extra_exceptions: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the engine.

        Args:
            settings: Engine settings (defaults to environment settings).
            phoneme_table: Phoneme table override.
            extra_exceptions: Additional whole-word romanized → Tamil
                replacements layered over the table's exception words.
        """
        self.settings = settings or get_settings()
        table = phoneme_table or DEFAULT_PHONEME_TABLE
        if extra_exceptions:
            table = table.with_exceptions(extra_exceptions)
        self.phonemes = table
        self.fuzzy_policy = self.settings.fuzzy_policy()

    def transliterate(self, text: str) -> str:
        """Convert romanized text to Tamil script, keeping all delimiters."""
        return transliterate(text, self.phonemes)

    def transliterate_word(self, word: str) -> str:
        """Convert one romanized token with the phoneme rules only."""
        return transliterate_word(word, self.phonemes)

    def search(
        self,
        query: str,
        lexicon: LexiconLike,
        locale: Union[Script, str, None] = None,
    ) -> SearchResult:
        """
        Search a lexicon snapshot.

        Args:
            query: Search text.
            lexicon: Snapshot (or iterable of entries, or None).
            locale: Collation for exact results; defaults to settings.

        Returns:
            Ranked SearchResult.
        """
        locale = Script.parse(locale) if locale is not None else self.settings.locale
        result = LexiconIndex(lexicon, self.fuzzy_policy).search(query, locale)
        logger.debug(
            "Search %r returned %d %s result(s)",
            result.query, len(result), "fuzzy" if result.is_fuzzy else "exact",
        )
        return result

    def highlight(
        self,
        text: str,
        lexicon: LexiconLike,
        script: Union[Script, str, None] = None,
    ) -> list[MatchSpan]:
        """
        Partition text into plain and matched spans.

        Args:
            text: Text to scan.
            lexicon: Snapshot (or iterable of entries, or None).
            script: Headword script to match; defaults to settings.

        Returns:
            Gap-free spans in reading order.
        """
        script = Script.parse(script) if script is not None else self.settings.script
        spans = LongestMatchHighlighter(lexicon, script).highlight(text)
        logger.debug(
            "Highlighted %d span(s), %d matched",
            len(spans), sum(1 for span in spans if span.is_match),
        )
        return spans

    @staticmethod
    def supported_formats() -> dict:
        """Return the lexicon file formats the loaders accept."""
        return {
            "CSV (Tamil Word, English Word, Tamil Meaning, English Meaning)":
                sorted(CSVLexiconLoader.SUPPORTED_EXTENSIONS),
            "JSON (list of entry objects)": sorted(JSONLexiconLoader.SUPPORTED_EXTENSIONS),
        }


def load_lexicon(file_path: str) -> Lexicon:
    """
    Load a lexicon file into a snapshot sorted in Tamil order.

    Raises:
        FileNotFoundError: If the file does not exist.
        LexiconLoadError: If the format is unsupported or malformed.
    """
    if CSVLexiconLoader.can_handle(file_path):
        entries = CSVLexiconLoader.load(file_path)
    elif JSONLexiconLoader.can_handle(file_path):
        entries = JSONLexiconLoader.load(file_path)
    else:
        _, ext = os.path.splitext(file_path)
        raise LexiconLoadError(f"Unsupported lexicon format: {ext or file_path}")

    return Lexicon().merge(entries).sorted(Script.TAMIL)


def spans_to_markdown(text: str, spans: list[MatchSpan], script: Union[Script, str] = Script.TAMIL) -> str:
    """
    Render highlight spans as Markdown.

    Matched phrases become links to an anchor named after the entry's
    Tamil headword, followed by a glossary of the distinct entries found.
    """
    script = Script.parse(script)
    matched = [span for span in spans if span.is_match]

    header = (
        f"---\n"
        f"source_type: highlight\n"
        f"script: {script.value}\n"
        f"matches: {len(matched)}\n"
        f"---\n\n"
    )

    body = "".join(
        f"[{span.text_of(text)}](#{span.entry.tamil_word})" if span.is_match else span.text_of(text)
        for span in spans
    )

    glossary = []
    seen = set()
    for span in matched:
        entry = span.entry
        if entry.key in seen:
            continue
        seen.add(entry.key)
        meaning = entry.english_meaning if script is Script.ENGLISH else entry.tamil_meaning
        line = f"- **{entry.tamil_word}** ({entry.english_word})"
        if meaning:
            line += f": {meaning}"
        glossary.append(line)

    if not glossary:
        return header + body + "\n"
    return header + body + "\n\n## Glossary\n\n" + "\n".join(glossary) + "\n"
