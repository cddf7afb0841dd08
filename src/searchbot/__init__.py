"""
Searchbot - Find files by name from the command line.

Walks a directory tree and prints the files whose names match a pattern.
"""

__version__ = "0.1.0"

from .models import SearchOptions, SearchResult
from .search import EmptyPatternError, InvalidPathError, SearchError, search_files
from .display import format_size, print_results, truncate_string

__all__ = [
    "SearchOptions",
    "SearchResult",
    "SearchError",
    "EmptyPatternError",
    "InvalidPathError",
    "search_files",
    "print_results",
    "format_size",
    "truncate_string",
    "__version__",
]
