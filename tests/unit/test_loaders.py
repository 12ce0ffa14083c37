"""
Unit tests for the CSV and JSON lexicon loaders.
"""

import logging

import pytest

from thamizh.lexicon import UsageExample
from thamizh.loaders import CSVLexiconLoader, JSONLexiconLoader, LexiconLoadError

from tests.fixtures import SAMPLE_CSV


class TestCSVLexiconLoader:
    """Tests for CSVLexiconLoader class."""

    def test_can_handle(self):
        assert CSVLexiconLoader.can_handle("words.csv")
        assert CSVLexiconLoader.can_handle("WORDS.CSV")
        assert not CSVLexiconLoader.can_handle("words.json")

    def test_load_file_with_bom(self, csv_lexicon_file):
        entries = CSVLexiconLoader.load(str(csv_lexicon_file))

        assert [e.tamil_word for e in entries] == ["அன்பு", "தனிமை"]
        assert entries[0].english_meaning == "An expression of affection, love"
        assert all(e.is_complete for e in entries)

    def test_skips_incomplete_rows(self, caplog):
        with caplog.at_level(logging.WARNING):
            entries = CSVLexiconLoader.parse(SAMPLE_CSV)

        assert len(entries) == 2
        assert "Skipping row 4" in caplog.text
        assert "Skipping row 5" in caplog.text

    def test_bom_in_string(self):
        entries = CSVLexiconLoader.parse("\ufeff" + SAMPLE_CSV)
        assert len(entries) == 2

    def test_fields_are_trimmed(self):
        content = (
            "Tamil Word,English Word,Tamil Meaning,English Meaning\n"
            " பூனை , cat ,விலங்கு, A small pet \n"
        )
        entry = CSVLexiconLoader.parse(content)[0]
        assert entry.tamil_word == "பூனை"
        assert entry.english_meaning == "A small pet"

    def test_invalid_header(self):
        with pytest.raises(LexiconLoadError, match="Invalid CSV header"):
            CSVLexiconLoader.parse("Tamil,English\nஅன்பு,Love\n")

    def test_empty_content(self):
        with pytest.raises(LexiconLoadError, match="Empty lexicon"):
            CSVLexiconLoader.parse("")

    def test_header_only(self):
        assert CSVLexiconLoader.parse("Tamil Word,English Word,Tamil Meaning,English Meaning\n") == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CSVLexiconLoader.load(str(tmp_path / "nope.csv"))


class TestJSONLexiconLoader:
    """Tests for JSONLexiconLoader class."""

    def test_can_handle(self):
        assert JSONLexiconLoader.can_handle("words.json")
        assert not JSONLexiconLoader.can_handle("words.csv")

    def test_load_file(self, json_lexicon_file, caplog):
        with caplog.at_level(logging.WARNING):
            entries = JSONLexiconLoader.load(str(json_lexicon_file))

        assert [e.tamil_word for e in entries] == ["வணக்கம்", "நன்றி", "பசலை"]
        assert "Skipping item 3" in caplog.text
        assert "Skipping item 4" in caplog.text

    def test_keeps_optional_fields(self, json_lexicon_file):
        vanakkam, nanri, _ = JSONLexiconLoader.load(str(json_lexicon_file))

        assert vanakkam.example == UsageExample("காலை வணக்கம்!", "Good morning!")
        assert vanakkam.extras["variations"][0]["dialect"] == "Chennai Tamil"
        assert nanri.origin == "Old Tamil"

    def test_entries_wrapper_object(self):
        content = (
            '{"entries": [{"tamilWord": "பூனை", "englishWord": "cat", '
            '"tamilMeaning": "விலங்கு", "englishMeaning": "A small pet"}]}'
        )
        assert [e.english_word for e in JSONLexiconLoader.parse(content)] == ["cat"]

    def test_blank_headword_skipped(self):
        content = (
            '[{"tamilWord": " ", "englishWord": "cat", '
            '"tamilMeaning": "விலங்கு", "englishMeaning": "A small pet"}]'
        )
        assert JSONLexiconLoader.parse(content) == []

    def test_invalid_json(self):
        with pytest.raises(LexiconLoadError, match="Invalid JSON"):
            JSONLexiconLoader.parse("[{")

    def test_not_a_list(self):
        with pytest.raises(LexiconLoadError, match="Expected a list"):
            JSONLexiconLoader.parse('{"words": []}')

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JSONLexiconLoader.load(str(tmp_path / "nope.json"))
