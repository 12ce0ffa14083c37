# Test fixtures
from .sample_lexicon import (
    SAMPLE_ENTRIES,
    SAMPLE_CSV,
    SAMPLE_JSON,
    TRANSLITERATION_CASES,
    create_entry,
)

__all__ = [
    "SAMPLE_ENTRIES",
    "SAMPLE_CSV",
    "SAMPLE_JSON",
    "TRANSLITERATION_CASES",
    "create_entry",
]
