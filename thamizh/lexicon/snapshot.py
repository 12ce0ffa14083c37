"""
Immutable lexicon snapshots.

A ``Lexicon`` is a point-in-time, ordered copy of the dictionary keyed by
Tamil headword. Every edit returns a new snapshot; the receiver is never
touched, so a snapshot handed to the highlighter or search can't change
underneath it.
"""

import logging
from dataclasses import fields, replace
from typing import Iterable, Iterator, Optional, Union

from .collation import sort_entries
from .entry import LexiconEntry, Script

logger = logging.getLogger(__name__)


class Lexicon:
    """Ordered, read-only collection of LexiconEntry objects."""

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Optional[Iterable[LexiconEntry]] = None):
        """
        Build a snapshot.

        Duplicate Tamil headwords collapse to one entry: the position of
        the first occurrence is kept, the value of the last one wins.

        Args:
            entries: Entries in display order; None means empty.
        """
        by_key: dict[str, LexiconEntry] = {}
        for entry in entries or ():
            if not isinstance(entry, LexiconEntry):
                raise TypeError(f"Expected LexiconEntry, got {type(entry).__name__}")
            by_key[entry.key] = entry
        self._entries = tuple(by_key.values())
        self._index = by_key

    @classmethod
    def coerce(cls, value: Union["Lexicon", Iterable[LexiconEntry], None]) -> "Lexicon":
        """Return ``value`` as a snapshot; None becomes an empty lexicon."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> "Lexicon":
        return cls(LexiconEntry.from_dict(item) for item in items)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        return iter(self._entries)

    def __contains__(self, tamil_word: object) -> bool:
        return tamil_word in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lexicon):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"

    @property
    def entries(self) -> tuple[LexiconEntry, ...]:
        return self._entries

    def get(self, tamil_word: str) -> Optional[LexiconEntry]:
        return self._index.get(tamil_word)

    def upsert(self, entry: LexiconEntry) -> "Lexicon":
        """
        Add an entry, or merge it into the existing one with the same key.

        Fields the new entry leaves unset (None, empty string, empty
        extras) keep the existing value so deep-dive details survive a
        partial update.
        """
        existing = self._index.get(entry.key)
        if existing is None:
            return Lexicon(self._entries + (entry,))

        changes = {}
        for f in fields(LexiconEntry):
            value = getattr(entry, f.name)
            if value is None or value == "" or value == {}:
                continue
            changes[f.name] = value
        if entry.extras:
            changes["extras"] = {**existing.extras, **entry.extras}
        merged = replace(existing, **changes)
        logger.debug("Merged entry %s into lexicon", entry.key)
        return Lexicon(merged if e.key == entry.key else e for e in self._entries)

    def merge(self, entries: Iterable[LexiconEntry]) -> "Lexicon":
        """
        Bulk-merge uploaded entries.

        Only complete entries (both headwords and both meanings present)
        are accepted; they replace existing entries wholesale.
        """
        by_key = dict(self._index)
        accepted = skipped = 0
        for entry in entries:
            if not entry.is_complete:
                skipped += 1
                continue
            by_key[entry.key] = entry
            accepted += 1
        if skipped:
            logger.warning("Skipped %d incomplete lexicon entries", skipped)
        logger.debug("Merged %d entries into lexicon", accepted)
        return Lexicon(by_key.values())

    def remove(self, tamil_word: str) -> "Lexicon":
        """Return a snapshot without the entry keyed by ``tamil_word``."""
        if tamil_word not in self._index:
            return self
        return Lexicon(e for e in self._entries if e.key != tamil_word)

    def sorted(self, script: Script | str = Script.TAMIL) -> "Lexicon":
        """Return a snapshot ordered by the collation of ``script``."""
        return Lexicon(sort_entries(self._entries, script))

    def phrases(self, script: Script | str) -> list[tuple[str, LexiconEntry]]:
        """
        Flatten headwords into (phrase, entry) pairs.

        Slash-separated synonyms become separate phrases sharing the same
        entry. Order follows the snapshot.
        """
        script = Script.parse(script)
        return [(phrase, entry) for entry in self._entries for phrase in entry.phrases(script)]
