"""
Thamizh - Romanized Tamil Transliteration and Lexicon Matching

Converts phonetic Latin input ("vanakkam") into Tamil script
("வணக்கம்"), searches a Tamil/English lexicon with an edit-distance
fallback, and finds the longest lexicon phrases inside free text so a
front end can turn them into clickable annotations.
"""

from .core import TamilEngine, load_lexicon, spans_to_markdown
from .transliteration import transliterate, transliterate_word

__version__ = "1.0.0"

__all__ = [
    "TamilEngine",
    "load_lexicon",
    "spans_to_markdown",
    "transliterate",
    "transliterate_word",
]
