"""
Unit tests for the core engine.
"""

import pytest

from thamizh.config import Settings
from thamizh.core import TamilEngine, load_lexicon, spans_to_markdown
from thamizh.lexicon import Lexicon, LexiconEntry, MatchSpan, Script, SpanKind
from thamizh.loaders import LexiconLoadError


class TestTamilEngine:
    """Tests for TamilEngine class."""

    def test_engine_initialization(self, engine, settings):
        assert engine.settings is settings
        assert engine.fuzzy_policy == settings.fuzzy_policy()

    def test_transliterate(self, engine):
        assert engine.transliterate("vanakkam, amma!") == "வணக்கம், அம்மா!"
        assert engine.transliterate_word("vanakkam") == "வனக்கம்"

    def test_extra_exceptions(self, settings):
        engine = TamilEngine(settings=settings, extra_exceptions={"Madurai": "மதுரை"})

        assert engine.transliterate("madurai") == "மதுரை"
        assert TamilEngine(settings=settings).transliterate("madurai") == "மடுரை"

    def test_search_uses_settings_locale(self, sample_lexicon):
        engine = TamilEngine(settings=Settings(_env_file=None, DEFAULT_LOCALE="english"))
        result = engine.search("a", sample_lexicon)
        assert result.entries[0].english_word == "Hello / Greeting"

    def test_search_locale_argument(self, engine, sample_lexicon):
        result = engine.search("a", sample_lexicon, "tamil")
        assert result.words[0] == "அன்பு"

    def test_search_uses_settings_policy(self, sample_lexicon):
        strict = Settings(
            _env_file=None,
            FUZZY_SHORT_TOLERANCE=0,
            FUZZY_MEDIUM_TOLERANCE=0,
            FUZZY_LONG_TOLERANCE=0,
        )
        assert len(TamilEngine(settings=strict).search("thnk you", sample_lexicon)) == 0

    def test_highlight_uses_settings_script(self, cat_lexicon):
        engine = TamilEngine(settings=Settings(_env_file=None, DEFAULT_SCRIPT="english"))
        spans = engine.highlight("the cat sat", cat_lexicon)
        assert [s.is_match for s in spans] == [False, True, False]

    def test_highlight_script_argument(self, engine, cat_lexicon):
        spans = engine.highlight("the cat sat", cat_lexicon, "tamil")
        assert spans == [MatchSpan(0, 11)]

    def test_supported_formats(self):
        formats = TamilEngine.supported_formats()
        extensions = [ext for exts in formats.values() for ext in exts]
        assert sorted(extensions) == [".csv", ".json"]


class TestLoadLexicon:
    """Tests for load_lexicon routing."""

    def test_csv(self, csv_lexicon_file):
        lexicon = load_lexicon(str(csv_lexicon_file))
        assert isinstance(lexicon, Lexicon)
        assert [e.tamil_word for e in lexicon] == ["அன்பு", "தனிமை"]

    def test_json_sorted_in_tamil_order(self, json_lexicon_file):
        lexicon = load_lexicon(str(json_lexicon_file))
        assert [e.tamil_word for e in lexicon] == ["நன்றி", "பசலை", "வணக்கம்"]

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(LexiconLoadError, match="Unsupported"):
            load_lexicon(str(tmp_path / "words.txt"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_lexicon(str(tmp_path / "words.csv"))


class TestSpansToMarkdown:
    """Tests for Markdown rendering of highlight spans."""

    def test_with_matches(self, engine, cat_lexicon):
        text = "the cat sat"
        spans = engine.highlight(text, cat_lexicon, Script.ENGLISH)

        markdown = spans_to_markdown(text, spans, Script.ENGLISH)

        assert markdown == (
            "---\n"
            "source_type: highlight\n"
            "script: english\n"
            "matches: 1\n"
            "---\n\n"
            "the [cat](#பூனை) sat\n\n"
            "## Glossary\n\n"
            "- **பூனை** (cat): A small pet animal\n"
        )

    def test_without_matches(self):
        markdown = spans_to_markdown("plain text", [MatchSpan(0, 10)])
        assert markdown.endswith("---\n\nplain text\n")
        assert "matches: 0" in markdown
        assert "Glossary" not in markdown

    def test_glossary_lists_each_entry_once(self, engine, cat_lexicon):
        text = "cat and cat"
        spans = engine.highlight(text, cat_lexicon, "english")

        markdown = spans_to_markdown(text, spans, "english")

        assert "matches: 2" in markdown
        assert markdown.count("- **பூனை**") == 1

    def test_tamil_glossary_uses_tamil_meaning(self, engine, cat_lexicon):
        text = "ஒரு பூனை"
        spans = engine.highlight(text, cat_lexicon)

        markdown = spans_to_markdown(text, spans, "tamil")

        assert "ஒரு [பூனை](#பூனை)" in markdown
        assert "- **பூனை** (cat): ஒரு விலங்கு" in markdown

    def test_glossary_without_meaning(self):
        entry = LexiconEntry("பூனை", "cat")
        spans = [MatchSpan(0, 3, SpanKind.MATCHED, entry)]
        markdown = spans_to_markdown("cat", spans, "english")
        assert markdown.endswith("- **பூனை** (cat)\n")
