from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_lines
from .library import OccurrenceTable, WordleDictionary, WordsLibrary

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "OccurrenceTable", "WordleDictionary", "WordsLibrary",
]
