"""
Core lexicon data structures: entries, scripts, match spans and search results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Script(Enum):
    """Script a headword is matched or collated in."""
    TAMIL = "tamil"
    ENGLISH = "english"

    @classmethod
    def parse(cls, value: "Script | str") -> "Script":
        """Accept a Script or its name ("tamil" / "english", any case)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Script must be one of {valid}, got {value!r}") from None


class SpanKind(Enum):
    """Kind of a highlight span."""
    PLAIN = "plain"
    MATCHED = "matched"


@dataclass(frozen=True)
class UsageExample:
    """A sentence showing the word in use, with its English rendering."""
    tamil: str
    english: str


# Keys accepted by LexiconEntry.from_dict, camelCase first.
_FIELD_ALIASES = {
    "tamil_word": ("tamilWord", "tamil_word"),
    "english_word": ("englishWord", "english_word"),
    "tamil_meaning": ("tamilMeaning", "tamil_meaning"),
    "english_meaning": ("englishMeaning", "english_meaning"),
    "origin": ("origin",),
}


@dataclass(frozen=True)
class LexiconEntry:
    """
    A single dictionary entry.

    ``tamil_word`` is the identity key within a lexicon snapshot. Either
    headword may pack several synonyms separated by ``/``; each segment
    is matched independently but resolves to the same entry.
    """
    tamil_word: str
    english_word: str
    tamil_meaning: str = ""
    english_meaning: str = ""
    origin: Optional[str] = None
    example: Optional[UsageExample] = None
    # Deep-dive fields (variations, etymology, sources, ...) carried opaquely
    extras: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not isinstance(self.tamil_word, str) or not self.tamil_word.strip():
            raise ValueError("Tamil headword must be a non-empty string")
        for name in ("english_word", "tamil_meaning", "english_meaning"):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")

    @property
    def key(self) -> str:
        return self.tamil_word

    @property
    def is_complete(self) -> bool:
        """True when both headwords and both meanings are filled in."""
        return all((self.tamil_word, self.english_word, self.tamil_meaning, self.english_meaning))

    def headword(self, script: Script | str) -> str:
        """Return the headword written in ``script``."""
        if Script.parse(script) is Script.TAMIL:
            return self.tamil_word
        return self.english_word

    def phrases(self, script: Script | str) -> list[str]:
        """Split the headword on '/' into trimmed, non-empty phrases."""
        return [p.strip() for p in self.headword(script).split("/") if p.strip()]

    @classmethod
    def from_dict(cls, data: dict) -> "LexiconEntry":
        """
        Build an entry from a mapping with camelCase or snake_case keys.

        Raises:
            ValueError: If the Tamil headword is missing or a field has
                the wrong type.
        """
        values = {}
        consumed = set()
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    values[name] = data[alias]
                    consumed.add(alias)
                    break

        example = data.get("example")
        consumed.add("example")
        if isinstance(example, dict):
            values["example"] = UsageExample(
                tamil=str(example.get("tamil", "")),
                english=str(example.get("english", "")),
            )

        values.setdefault("tamil_word", "")
        values.setdefault("english_word", "")
        values["extras"] = {k: v for k, v in data.items() if k not in consumed}
        return cls(**values)

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys of the application's dictionary format."""
        data = {
            "tamilWord": self.tamil_word,
            "englishWord": self.english_word,
            "tamilMeaning": self.tamil_meaning,
            "englishMeaning": self.english_meaning,
        }
        if self.origin is not None:
            data["origin"] = self.origin
        if self.example is not None:
            data["example"] = {"tamil": self.example.tamil, "english": self.example.english}
        data.update(self.extras)
        return data


@dataclass(frozen=True)
class MatchSpan:
    """
    A half-open range ``[start, end)`` over highlighted text.

    Matched spans carry the lexicon entry that owns the matched phrase.
    """
    start: int
    end: int
    kind: SpanKind = SpanKind.PLAIN
    entry: Optional[LexiconEntry] = None

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span offsets: [{self.start}, {self.end})")
        if self.kind is SpanKind.MATCHED and self.entry is None:
            raise ValueError("Matched span requires a lexicon entry")
        if self.kind is SpanKind.PLAIN and self.entry is not None:
            raise ValueError("Plain span cannot carry a lexicon entry")

    @property
    def is_match(self) -> bool:
        return self.kind is SpanKind.MATCHED

    @property
    def length(self) -> int:
        return self.end - self.start

    def text_of(self, text: str) -> str:
        """Return the slice of ``text`` this span covers."""
        return text[self.start:self.end]


@dataclass(frozen=True)
class SearchResult:
    """
    Ranked search output.

    ``is_fuzzy`` tells whether the entries came from the edit-distance
    fallback; in that case ``scores`` holds each entry's distance.
    """
    query: str
    entries: tuple[LexiconEntry, ...] = ()
    is_fuzzy: bool = False
    scores: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def words(self) -> list[str]:
        """Tamil headwords of the results, in rank order."""
        return [entry.tamil_word for entry in self.entries]
