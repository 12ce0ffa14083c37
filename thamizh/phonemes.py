"""
Phoneme tables for Romanized Tamil.

Static romanization-to-glyph data used by the transliteration state
machine: consonant bases, standalone vowels, vowel diacritics and the
whole-word exception dictionary. Built once at import and never mutated.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


PULLI = "்"  # virama
DENTAL_NASAL = "ந"

# Vowel keys that take the palatal glide (ய) in hiatus.
FRONT_VOWELS = frozenset({"i", "ee", "e", "ae", "ai"})


CONSONANTS = {
    # Velar
    "k": "க", "g": "க",
    "ng": "ங",

    # Palatal
    "c": "ச", "s": "ச", "ch": "ச",
    "j": "ஜ",
    "nj": "ஞ",

    # Retroflex (single letter) vs dental (digraph)
    "t": "ட", "d": "ட",
    "th": "த", "dh": "த",

    # Alveolar by default; 'nh' for retroflex
    "n": "ன",
    "nh": "ண",

    "l": "ல", "lh": "ள",
    "r": "ர", "rh": "ற",

    # Labial
    "p": "ப", "b": "ப", "f": "ப",
    "m": "ம",

    # Approximants
    "y": "ய",
    "v": "வ", "w": "வ",
    "zh": "ழ",

    # Grantha
    "sh": "ஷ",
    "h": "ஹ",
}

STANDALONE_VOWELS = {
    "a": "அ", "aa": "ஆ", "i": "இ", "ee": "ஈ", "u": "உ", "oo": "ஊ",
    "e": "எ", "ae": "ஏ", "ai": "ஐ", "o": "ஒ", "oa": "ஓ", "au": "ஔ",
}

VOWEL_DIACRITICS = {
    "a": "",
    "aa": "ா", "i": "ி", "ee": "ீ", "u": "ு", "oo": "ூ",
    "e": "ெ", "ae": "ே", "ai": "ை", "o": "ொ", "oa": "ோ", "au": "ௌ",
}

EXCEPTION_WORDS = {
    # Greetings & common
    "vanakkam": "வணக்கம்",
    "nanri": "நன்றி",
    "nandri": "நன்றி",
    "tamil": "தமிழ்",
    "thamizh": "தமிழ்",
    "sri": "ஸ்ரீ",
    "romba": "ரொம்ப",
    "epadi": "எப்படி",
    "epdi": "எப்படி",
    "irukinga": "இருக்கீங்க",
    "nalama": "நலமா",
    "ama": "ஆமா",
    "aama": "ஆமா",
    "illai": "இல்லை",
    "sandhosham": "சந்தோஷம்",
    "santhosam": "சந்தோஷம்",
    "arputham": "அற்புதம்",

    # Family & relationships
    "amma": "அம்மா",
    "appa": "அப்பா",
    "akka": "அக்கா",
    "anna": "அண்ணா",
    "thambi": "தம்பி",
    "thangai": "தங்கை",
    "annan": "அண்ணன்",
    "anni": "அண்ணி",
    "machan": "மச்சான்",
    "kanavar": "கணவர்",
    "manaivi": "மனைவி",

    # Pronouns
    "naan": "நான்",
    "nee": "நீ",
    "neenga": "நீங்க",
    "neengal": "நீங்கள்",
    "avar": "அவர்",
    "aval": "அவள்",
    "athu": "அது",
    "avargal": "அவர்கள்",
    "en": "என்",
    "ennudaiya": "என்னுடைய",
    "un": "உன்",
    "unnudaiya": "உன்னுடைய",
    "ungal": "உங்கள்",
    "engal": "எங்கள்",

    # Other common words
    "sariyana": "சரியான",
    "sari": "சரி",
    "theriyum": "தெரியும்",
    "theriyathu": "தெரியாது",
    "ippothu": "இப்போது",
    "ipo": "இப்போ",
    "eppothu": "எப்போது",
    "epo": "எப்போ",
    "appothu": "அப்போது",
    "apo": "அப்போ",
    "pogiren": "போகிறேன்",
    "varen": "வரேன்",
    "irukku": "இருக்கு",
    "iruku": "இருக்கு",
    "muzhusa": "முழுசா",
}


def _longest_first(keys) -> tuple[str, ...]:
    # sorted() is stable, so equal-length keys keep declaration order
    return tuple(sorted(keys, key=len, reverse=True))


def _match_prefix(keys: tuple[str, ...], text: str, start: int) -> Optional[str]:
    for key in keys:
        if text.startswith(key, start):
            return key
    return None


@dataclass(frozen=True, eq=False)
class PhonemeTable:
    """
    Immutable romanization tables.

    Keys are lowercase Latin strings of one or two characters. Lookups
    always try longer keys first so digraphs ("th", "zh", ...) win over
    their single-letter prefixes.
    """
    consonants: Mapping[str, str]
    standalone_vowels: Mapping[str, str]
    vowel_diacritics: Mapping[str, str]
    exception_words: Mapping[str, str]
    pulli: str = PULLI
    dental_nasal: str = DENTAL_NASAL
    front_vowels: frozenset = FRONT_VOWELS
    consonant_keys: tuple[str, ...] = field(init=False, repr=False)
    vowel_keys: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        missing = set(self.standalone_vowels) ^ set(self.vowel_diacritics)
        if missing:
            raise ValueError(f"Vowel tables disagree on keys: {sorted(missing)}")
        for name in ("consonants", "standalone_vowels", "vowel_diacritics", "exception_words"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "consonant_keys", _longest_first(self.consonants))
        object.__setattr__(self, "vowel_keys", _longest_first(self.standalone_vowels))

    def match_consonant(self, text: str, start: int = 0) -> Optional[str]:
        """Return the longest consonant key at ``start``, or None."""
        return _match_prefix(self.consonant_keys, text, start)

    def match_vowel(self, text: str, start: int = 0) -> Optional[str]:
        """Return the longest vowel key at ``start``, or None."""
        return _match_prefix(self.vowel_keys, text, start)

    def glide_for(self, previous_vowel: str) -> str:
        """Glide consonant inserted between two adjacent vowel sounds."""
        if previous_vowel in self.front_vowels:
            return self.consonants["y"]
        return self.consonants["v"]

    def lookup_exception(self, word: str) -> Optional[str]:
        return self.exception_words.get(word.lower())

    def with_exceptions(self, extra: Mapping[str, str]) -> "PhonemeTable":
        """Return a copy whose exception dictionary also holds ``extra``."""
        merged = dict(self.exception_words)
        merged.update({key.lower(): value.strip() for key, value in extra.items()})
        return PhonemeTable(
            consonants=self.consonants,
            standalone_vowels=self.standalone_vowels,
            vowel_diacritics=self.vowel_diacritics,
            exception_words=merged,
            pulli=self.pulli,
            dental_nasal=self.dental_nasal,
            front_vowels=self.front_vowels,
        )


DEFAULT_PHONEME_TABLE = PhonemeTable(
    consonants=CONSONANTS,
    standalone_vowels=STANDALONE_VOWELS,
    vowel_diacritics=VOWEL_DIACRITICS,
    exception_words=EXCEPTION_WORDS,
)
