from .errors import LexiconLoadError
from .csv_loader import CSVLexiconLoader
from .json_loader import JSONLexiconLoader

__all__ = ["LexiconLoadError", "CSVLexiconLoader", "JSONLexiconLoader"]
