"""
Longest-match highlighting of lexicon phrases inside free text.

The highlighter walks the text one character at a time and, at each
position, tries every headword phrase longest first. A phrase only
counts when the characters touching it on both sides are not letters,
so "cat" is found in "the cat sat" but not in "category". Letters here
include combining marks, which keeps Tamil vowel signs and pulli
attached to the syllable they belong to.
"""

import unicodedata
from typing import Iterable, Union

from .entry import LexiconEntry, MatchSpan, Script, SpanKind
from .snapshot import Lexicon


def is_letter(char: str) -> bool:
    """True for Unicode letters (L*) and combining marks (M*)."""
    return unicodedata.category(char)[0] in ("L", "M")


class LongestMatchHighlighter:
    """
    Partition text into plain and matched spans for one lexicon snapshot
    and script.
    """

    def __init__(
        self,
        lexicon: Union[Lexicon, Iterable[LexiconEntry], None],
        script: Script | str = Script.TAMIL,
    ):
        self.script = Script.parse(script)
        self.case_insensitive = self.script is Script.ENGLISH
        phrases = Lexicon.coerce(lexicon).phrases(self.script)
        # Stable sort: equal-length phrases keep lexicon order
        phrases.sort(key=lambda item: len(item[0]), reverse=True)
        self.candidates = [
            (self._fold(phrase), len(phrase), entry) for phrase, entry in phrases
        ]

    def _fold(self, value: str) -> str:
        return value.casefold() if self.case_insensitive else value

    def _bounded(self, text: str, start: int, end: int) -> bool:
        if start > 0 and is_letter(text[start - 1]):
            return False
        if end < len(text) and is_letter(text[end]):
            return False
        return True

    def match_at(self, text: str, position: int):
        """
        Return ``(length, entry)`` for the longest phrase matching at
        ``position``, or None.
        """
        for folded, length, entry in self.candidates:
            end = position + length
            if end > len(text):
                continue
            if self._fold(text[position:end]) != folded:
                continue
            if self._bounded(text, position, end):
                return length, entry
        return None

    def highlight(self, text: str) -> list[MatchSpan]:
        """
        Split ``text`` into spans.

        Consecutive unmatched characters are coalesced into one plain
        span. Concatenating every span's slice reproduces ``text``.
        """
        spans: list[MatchSpan] = []
        if not text:
            return spans
        if not self.candidates:
            return [MatchSpan(0, len(text))]

        plain_start = None
        cursor = 0
        while cursor < len(text):
            found = self.match_at(text, cursor)
            if found is None:
                if plain_start is None:
                    plain_start = cursor
                cursor += 1
                continue

            length, entry = found
            if plain_start is not None:
                spans.append(MatchSpan(plain_start, cursor))
                plain_start = None
            spans.append(MatchSpan(cursor, cursor + length, SpanKind.MATCHED, entry))
            cursor += length

        if plain_start is not None:
            spans.append(MatchSpan(plain_start, len(text)))
        return spans


def highlight(
    text: str,
    lexicon: Union[Lexicon, Iterable[LexiconEntry], None],
    script: Script | str = Script.TAMIL,
) -> list[MatchSpan]:
    """Highlight lexicon phrases in ``text``; see LongestMatchHighlighter."""
    return LongestMatchHighlighter(lexicon, script).highlight(text)
