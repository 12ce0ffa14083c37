"""
config.py - Engine Configuration

Settings are loaded from environment variables (prefix ``THAMIZH_``) or
a ``.env`` file in the working directory. Defaults reproduce the stock
search tolerances and scripts, so the engine runs with no configuration
at all.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .lexicon.entry import Script
from .lexicon.search import FuzzyPolicy

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Engine settings.

    Every field can be overridden by an environment variable, e.g.
    ``THAMIZH_DEFAULT_SCRIPT=english`` or ``THAMIZH_LEXICON_PATH=words.csv``.
    """

    model_config = SettingsConfigDict(
        env_prefix="THAMIZH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    APP_NAME: str = "Thamizh Transliteration Engine"
    VERSION: str = "1.0.0"

    # Script used for highlighting and collation when none is given
    DEFAULT_SCRIPT: str = "tamil"
    DEFAULT_LOCALE: str = "tamil"

    # Lexicon file (CSV or JSON) the CLI loads when --lexicon is absent
    LEXICON_PATH: Optional[str] = None

    # Fuzzy search tolerance by headword length
    FUZZY_SHORT_WORD_LIMIT: int = 5
    FUZZY_MEDIUM_WORD_LIMIT: int = 10
    FUZZY_SHORT_TOLERANCE: int = 1
    FUZZY_MEDIUM_TOLERANCE: int = 2
    FUZZY_LONG_TOLERANCE: int = 3

    LOG_LEVEL: str = "WARNING"

    @field_validator("DEFAULT_SCRIPT", "DEFAULT_LOCALE")
    @classmethod
    def _valid_script(cls, value: str) -> str:
        return Script.parse(value).value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _valid_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def _limits_increase(self) -> "Settings":
        if not 0 < self.FUZZY_SHORT_WORD_LIMIT < self.FUZZY_MEDIUM_WORD_LIMIT:
            raise ValueError("FUZZY_SHORT_WORD_LIMIT must be positive and below FUZZY_MEDIUM_WORD_LIMIT")
        return self

    @property
    def script(self) -> Script:
        return Script(self.DEFAULT_SCRIPT)

    @property
    def locale(self) -> Script:
        return Script(self.DEFAULT_LOCALE)

    def fuzzy_policy(self) -> FuzzyPolicy:
        return FuzzyPolicy(
            short_limit=self.FUZZY_SHORT_WORD_LIMIT,
            medium_limit=self.FUZZY_MEDIUM_WORD_LIMIT,
            short_tolerance=self.FUZZY_SHORT_TOLERANCE,
            medium_tolerance=self.FUZZY_MEDIUM_TOLERANCE,
            long_tolerance=self.FUZZY_LONG_TOLERANCE,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get engine settings.

    Uses lru_cache so the environment is read only once per process.
    """
    settings = Settings()
    logger.debug("Loaded settings: script=%s locale=%s lexicon=%s",
                 settings.DEFAULT_SCRIPT, settings.DEFAULT_LOCALE, settings.LEXICON_PATH)
    return settings
