"""
CSV Lexicon Loader

Reads dictionaries in the spreadsheet layout the translation app exports:
one header row ``Tamil Word,English Word,Tamil Meaning,English Meaning``
followed by one entry per row. Read-only; nothing is written back.
"""

import csv
import io
import logging
import os

from ..lexicon.entry import LexiconEntry
from .errors import LexiconLoadError

logger = logging.getLogger(__name__)


class CSVLexiconLoader:
    """Loads lexicon entries from a CSV file."""

    SUPPORTED_EXTENSIONS = {".csv"}
    HEADER = ["Tamil Word", "English Word", "Tamil Meaning", "English Meaning"]

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in CSVLexiconLoader.SUPPORTED_EXTENSIONS

    @staticmethod
    def load(file_path: str) -> list[LexiconEntry]:
        """Read a CSV file and return its complete entries."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Lexicon file not found: {file_path}")

        # utf-8-sig drops the BOM spreadsheet tools prepend
        with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
            content = f.read()
        return CSVLexiconLoader.parse(content, source=os.path.basename(file_path))

    @staticmethod
    def parse(content: str, source: str = "<string>") -> list[LexiconEntry]:
        """
        Parse CSV text into entries.

        Rows without exactly four fields, or with an empty field, are
        skipped with a warning.

        Raises:
            LexiconLoadError: If the content is empty or the header does
                not match.
        """
        content = content.lstrip("\ufeff")
        rows = csv.reader(io.StringIO(content))
        try:
            header = [cell.strip() for cell in next(rows)]
        except StopIteration:
            raise LexiconLoadError(f"Empty lexicon file: {source}")
        except csv.Error as e:
            raise LexiconLoadError(f"Malformed CSV in {source}: {e}")

        if header != CSVLexiconLoader.HEADER:
            raise LexiconLoadError(
                f"Invalid CSV header in {source}. "
                f"Expected columns: {', '.join(CSVLexiconLoader.HEADER)}"
            )

        entries = []
        try:
            for line_no, row in enumerate(rows, start=2):
                if not any(cell.strip() for cell in row):
                    continue
                values = [cell.strip() for cell in row]
                if len(values) != len(CSVLexiconLoader.HEADER) or not all(values):
                    logger.warning("Skipping row %d in %s: expected 4 non-empty fields", line_no, source)
                    continue
                entries.append(LexiconEntry(
                    tamil_word=values[0],
                    english_word=values[1],
                    tamil_meaning=values[2],
                    english_meaning=values[3],
                ))
        except csv.Error as e:
            raise LexiconLoadError(f"Malformed CSV in {source}: {e}")

        logger.info("Loaded %d entries from %s", len(entries), source)
        return entries
