"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from thamizh.config import Settings, get_settings
from thamizh.core import TamilEngine
from thamizh.lexicon import Lexicon, LexiconEntry, default_lexicon
from thamizh.phonemes import DEFAULT_PHONEME_TABLE

from tests.fixtures.sample_lexicon import SAMPLE_ENTRIES, SAMPLE_CSV, SAMPLE_JSON


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def settings():
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def engine(settings):
    """Create an engine with default settings."""
    return TamilEngine(settings=settings)


@pytest.fixture
def phoneme_table():
    return DEFAULT_PHONEME_TABLE


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make environment changes visible to get_settings()."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Lexicon Fixtures
# ============================================================================


@pytest.fixture
def sample_lexicon():
    """Small lexicon covering greetings, emotions and a region word."""
    return Lexicon(LexiconEntry(**fields) for fields in SAMPLE_ENTRIES)


@pytest.fixture
def builtin_lexicon():
    return default_lexicon()


@pytest.fixture
def thank_lexicon():
    """Two English phrases where one is a prefix of the other."""
    return Lexicon([
        LexiconEntry("நன்று", "Thank", "நல்லது", "Good"),
        LexiconEntry("நன்றி", "Thank You", "நன்றி சொல்", "Gratitude"),
    ])


@pytest.fixture
def cat_lexicon():
    return Lexicon([LexiconEntry("பூனை", "cat", "ஒரு விலங்கு", "A small pet animal")])


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def csv_lexicon_file(tmp_path):
    """CSV lexicon file with a BOM, as spreadsheet tools write it."""
    path = tmp_path / "words.csv"
    path.write_text("\ufeff" + SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def json_lexicon_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(SAMPLE_JSON, encoding="utf-8")
    return path
