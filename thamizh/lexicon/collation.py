"""
Locale collation for lexicon listings.

Tamil headwords are ordered by the traditional alphabet (uyir, aytham,
mei, then Grantha letters) rather than by codepoint, which would put
ஜ between ச and ஞ and ன right after ந. English headwords are ordered
case-insensitively.
"""

from typing import Iterable

from .entry import LexiconEntry, Script


TAMIL_VOWELS = "அஆஇஈஉஊஎஏஐஒஓஔ"
AYTHAM = "ஃ"
TAMIL_CONSONANTS = "கஙசஞடணதநபமயரலவழளறன" + "ஜஶஷஸஹ"
PULLI = "்"
VOWEL_SIGNS = "ாிீுூெேைொோௌ"

_LETTER_RANK = {
    char: rank for rank, char in enumerate(TAMIL_VOWELS + AYTHAM + TAMIL_CONSONANTS)
}
# Dead consonant (pulli) < inherent a < explicit vowel signs
_SIGN_RANK = {PULLI: 0, **{sign: rank + 2 for rank, sign in enumerate(VOWEL_SIGNS)}}
_INHERENT_A = 1

_NON_TAMIL, _TAMIL = 0, 1


def tamil_sort_key(word: str) -> tuple:
    """
    Collation key for a word in Tamil alphabetical order.

    Each consonant is weighed together with the sign that follows it, so
    க் < க < கா < கி. Characters outside the Tamil alphabet sort before
    Tamil letters, by case-folded codepoint.
    """
    key = []
    i = 0
    while i < len(word):
        char = word[i]
        rank = _LETTER_RANK.get(char)
        if rank is None:
            key.append((_NON_TAMIL, ord(char.casefold()[0]), 0))
            i += 1
            continue

        if char in TAMIL_CONSONANTS:
            following = word[i + 1] if i + 1 < len(word) else ""
            if following in _SIGN_RANK:
                key.append((_TAMIL, rank, _SIGN_RANK[following]))
                i += 2
                continue
            key.append((_TAMIL, rank, _INHERENT_A))
        else:
            key.append((_TAMIL, rank, 0))
        i += 1
    return tuple(key)


def english_sort_key(word: str) -> tuple:
    return (word.casefold(), word)


def entry_sort_key(script: Script | str):
    """Return a key function ordering entries by their headword in ``script``."""
    if Script.parse(script) is Script.TAMIL:
        return lambda entry: tamil_sort_key(entry.tamil_word)
    return lambda entry: english_sort_key(entry.english_word)


def sort_entries(entries: Iterable[LexiconEntry], script: Script | str) -> list[LexiconEntry]:
    """Sort entries by the collation order of ``script`` (stable)."""
    return sorted(entries, key=entry_sort_key(script))
