"""
Romanized Tamil to Tamil script.

Two layers:

- ``transliterate_word`` runs a left-to-right phoneme state machine over
  a single token (consonant + vowel diacritic, pulli for dead
  consonants, glides between adjacent vowels, passthrough for anything
  unmapped).
- ``transliterate`` splits free text into words and delimiters, applies
  whole-word exceptions first and falls back to the word machine.
  Delimiters are emitted untouched, so whitespace and line breaks are
  never lost or reordered.
"""

from typing import Iterator, Optional

from .phonemes import DEFAULT_PHONEME_TABLE, PhonemeTable


PUNCTUATION_DELIMITERS = frozenset('.,!?;:"')


def transliterate_word(word: str, table: Optional[PhonemeTable] = None) -> str:
    """
    Convert one romanized token into Tamil Unicode.

    The function is total: characters that match no phoneme key
    (punctuation, digits, text already in Tamil script) are copied
    through unchanged.

    Args:
        word: A lowercase token without embedded whitespace.
        table: Phoneme table to use (defaults to the built-in one).

    Returns:
        The Tamil-script rendering of the token.
    """
    table = table or DEFAULT_PHONEME_TABLE
    output = []
    i = 0
    last_was_vowel = False
    previous_vowel = ""

    while i < len(word):
        consonant = table.match_consonant(word, i)
        if consonant:
            base = table.consonants[consonant]
            i += len(consonant)

            # n before th/dh is the dental nasal ("panthu", "sandhai")
            if consonant == "n" and (word.startswith("th", i) or word.startswith("dh", i)):
                base = table.dental_nasal

            vowel = table.match_vowel(word, i)
            if vowel:
                output.append(base + table.vowel_diacritics[vowel])
                i += len(vowel)
                last_was_vowel = True
                previous_vowel = vowel
            else:
                output.append(base + table.pulli)
                last_was_vowel = False
                previous_vowel = ""
            continue

        vowel = table.match_vowel(word, i)
        if vowel:
            if last_was_vowel:
                output.append(table.glide_for(previous_vowel) + table.vowel_diacritics[vowel])
            else:
                output.append(table.standalone_vowels[vowel])
            i += len(vowel)
            last_was_vowel = True
            previous_vowel = vowel
            continue

        output.append(word[i])
        i += 1
        last_was_vowel = False
        previous_vowel = ""

    return "".join(output)


def is_delimiter(char: str) -> bool:
    return char.isspace() or char in PUNCTUATION_DELIMITERS


def split_segments(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split text into word and delimiter segments.

    Runs of whitespace form one delimiter segment; each punctuation mark
    from ``. , ! ? ; : "`` is a delimiter segment of its own. Joining the
    yielded segments reproduces ``text`` exactly.

    Yields:
        Tuples of (segment, is_delimiter).
    """
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char.isspace():
            start = i
            while i < length and text[i].isspace():
                i += 1
            yield text[start:i], True
        elif char in PUNCTUATION_DELIMITERS:
            i += 1
            yield char, True
        else:
            start = i
            while i < length and not is_delimiter(text[i]):
                i += 1
            yield text[start:i], False


def transliterate(text: str, table: Optional[PhonemeTable] = None) -> str:
    """
    Transliterate free-form romanized text, preserving all delimiters.

    Args:
        text: Mixed romanized/Tamil text, possibly spanning many lines.
        table: Phoneme table to use (defaults to the built-in one).

    Returns:
        The text with every word segment converted to Tamil script.
    """
    if not text:
        return ""

    table = table or DEFAULT_PHONEME_TABLE
    parts = []
    for segment, delimiter in split_segments(text):
        if delimiter:
            parts.append(segment)
            continue
        lowered = segment.lower()
        replacement = table.exception_words.get(lowered)
        parts.append(replacement if replacement is not None else transliterate_word(lowered, table))
    return "".join(parts)
