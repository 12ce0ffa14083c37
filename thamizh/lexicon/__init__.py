from .entry import LexiconEntry, MatchSpan, Script, SearchResult, SpanKind, UsageExample
from .snapshot import Lexicon
from .collation import sort_entries, tamil_sort_key, english_sort_key
from .search import FuzzyPolicy, LexiconIndex, levenshtein_distance, search
from .highlighter import LongestMatchHighlighter, highlight, is_letter
from .defaults import default_lexicon

__all__ = [
    "LexiconEntry",
    "MatchSpan",
    "Script",
    "SearchResult",
    "SpanKind",
    "UsageExample",
    "Lexicon",
    "sort_entries",
    "tamil_sort_key",
    "english_sort_key",
    "FuzzyPolicy",
    "LexiconIndex",
    "levenshtein_distance",
    "search",
    "LongestMatchHighlighter",
    "highlight",
    "is_letter",
    "default_lexicon",
]
