"""
JSON Lexicon Loader

Reads dictionaries stored as a JSON array of entry objects (or an object
with an ``entries`` array), the shape the translation app keeps in
browser storage. Keys may be camelCase or snake_case.
"""

import json
import logging
import os

from ..lexicon.entry import LexiconEntry
from .errors import LexiconLoadError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("tamilWord", "tamil_word"),
    ("englishWord", "english_word"),
    ("tamilMeaning", "tamil_meaning"),
    ("englishMeaning", "english_meaning"),
)


class JSONLexiconLoader:
    """Loads lexicon entries from a JSON file."""

    SUPPORTED_EXTENSIONS = {".json"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in JSONLexiconLoader.SUPPORTED_EXTENSIONS

    @staticmethod
    def load(file_path: str) -> list[LexiconEntry]:
        """Read a JSON file and return its valid entries."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Lexicon file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8-sig") as f:
            content = f.read()
        return JSONLexiconLoader.parse(content, source=os.path.basename(file_path))

    @staticmethod
    def parse(content: str, source: str = "<string>") -> list[LexiconEntry]:
        """
        Parse JSON text into entries.

        Items that are not objects, or lack string headword and meaning
        fields, are skipped with a warning.

        Raises:
            LexiconLoadError: If the text is not JSON or has no entry list.
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise LexiconLoadError(f"Invalid JSON in {source}: {e}")

        if isinstance(data, dict):
            data = data.get("entries")
        if not isinstance(data, list):
            raise LexiconLoadError(f"Expected a list of entries in {source}")

        entries = []
        for position, item in enumerate(data):
            if not _has_required_fields(item):
                logger.warning("Skipping item %d in %s: missing headword or meaning", position, source)
                continue
            try:
                entries.append(LexiconEntry.from_dict(item))
            except ValueError as e:
                logger.warning("Skipping item %d in %s: %s", position, source, e)

        logger.info("Loaded %d entries from %s", len(entries), source)
        return entries


def _has_required_fields(item) -> bool:
    if not isinstance(item, dict):
        return False
    for aliases in REQUIRED_FIELDS:
        if not any(isinstance(item.get(alias), str) for alias in aliases):
            return False
    return True
