class LexiconLoadError(Exception):
    """Raised when a lexicon file cannot be read or has the wrong layout."""
    pass
