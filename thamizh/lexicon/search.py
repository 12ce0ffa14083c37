"""
Exact and fuzzy lexicon search.

Search runs in two phases. The exact phase keeps every entry whose
headwords or meanings contain the query. Only when nothing matches
exactly does the fuzzy phase rank entries by Levenshtein distance to
either headword, within a tolerance that grows with word length.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .collation import sort_entries
from .entry import LexiconEntry, Script, SearchResult
from .snapshot import Lexicon


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic edit distance: insertion, deletion and substitution cost 1.

    ``table[i][j]`` holds the distance between the first ``i`` characters
    of ``b`` and the first ``j`` characters of ``a``.
    """
    rows, cols = len(b), len(a)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        table[i][0] = i
    for j in range(cols + 1):
        table[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if b[i - 1] == a[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],
                    table[i][j - 1],
                    table[i - 1][j],
                )
    return table[rows][cols]


@dataclass(frozen=True)
class FuzzyPolicy:
    """
    Length-scaled tolerance for fuzzy matches.

    A word shorter than ``short_limit`` tolerates ``short_tolerance``
    edits, shorter than ``medium_limit`` tolerates ``medium_tolerance``,
    anything longer ``long_tolerance``.
    """
    short_limit: int = 5
    medium_limit: int = 10
    short_tolerance: int = 1
    medium_tolerance: int = 2
    long_tolerance: int = 3

    def __post_init__(self):
        if not 0 < self.short_limit < self.medium_limit:
            raise ValueError(
                f"Limits must satisfy 0 < short < medium, got {self.short_limit}, {self.medium_limit}"
            )
        if min(self.short_tolerance, self.medium_tolerance, self.long_tolerance) < 0:
            raise ValueError("Tolerances cannot be negative")

    def tolerance_for(self, length: int) -> int:
        if length < self.short_limit:
            return self.short_tolerance
        if length < self.medium_limit:
            return self.medium_tolerance
        return self.long_tolerance


class LexiconIndex:
    """
    Search over one lexicon snapshot.

    The index keeps no state beyond the snapshot it was built with; build
    a new index whenever the dictionary changes.
    """

    def __init__(
        self,
        lexicon: Union[Lexicon, Iterable[LexiconEntry], None] = None,
        policy: Optional[FuzzyPolicy] = None,
    ):
        self.lexicon = Lexicon.coerce(lexicon)
        self.policy = policy or FuzzyPolicy()

    def search(self, query: str, locale: Script | str = Script.TAMIL) -> SearchResult:
        """
        Search the lexicon.

        Args:
            query: Free-text query; trimmed and lowercased before use.
            locale: Collation used to order exact results (and the full
                listing for an empty query).

        Returns:
            A SearchResult; ``is_fuzzy`` is set only when the exact phase
            found nothing.
        """
        needle = (query or "").strip().lower()

        if not needle:
            return SearchResult(query=needle, entries=tuple(sort_entries(self.lexicon, locale)))

        exact = self.exact_matches(needle)
        if exact:
            return SearchResult(query=needle, entries=tuple(sort_entries(exact, locale)))

        ranked = self.fuzzy_matches(needle)
        return SearchResult(
            query=needle,
            entries=tuple(entry for entry, _ in ranked),
            is_fuzzy=True,
            scores=tuple(score for _, score in ranked),
        )

    def exact_matches(self, needle: str) -> list[LexiconEntry]:
        """Entries whose headwords or meanings contain ``needle``."""
        return [
            entry for entry in self.lexicon
            if needle in entry.tamil_word.lower()
            or needle in entry.english_word.lower()
            or needle in entry.english_meaning.lower()
            or needle in entry.tamil_meaning.lower()
        ]

    def fuzzy_matches(self, needle: str) -> list[tuple[LexiconEntry, int]]:
        """
        Entries within tolerance of ``needle``, closest first.

        Ties keep snapshot order.
        """
        scored = []
        for entry in self.lexicon:
            score = min(
                levenshtein_distance(entry.tamil_word.lower(), needle),
                levenshtein_distance(entry.english_word.lower(), needle),
            )
            length = max(len(entry.tamil_word), len(entry.english_word))
            if score <= self.policy.tolerance_for(length):
                scored.append((entry, score))
        scored.sort(key=lambda item: item[1])
        return scored


def search(
    query: str,
    lexicon: Union[Lexicon, Iterable[LexiconEntry], None],
    locale: Script | str = Script.TAMIL,
    policy: Optional[FuzzyPolicy] = None,
) -> SearchResult:
    """Search ``lexicon`` for ``query``; see LexiconIndex.search."""
    return LexiconIndex(lexicon, policy).search(query, locale)
