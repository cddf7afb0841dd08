"""Directory traversal and filename matching."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .models import SearchOptions, SearchResult

logger = logging.getLogger(__name__)

# Directories never descended into, on top of hidden ones
SKIP_DIRECTORIES = frozenset({"node_modules", "Library", "System", "Applications"})

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class SearchError(Exception):
    """Base class for errors that abort a search."""


class EmptyPatternError(SearchError, ValueError):
    """Raised when the search pattern is empty."""

    def __init__(self):
        super().__init__("search pattern cannot be empty")


class InvalidPathError(SearchError):
    """Raised when the search root does not exist or cannot be accessed."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"invalid search path: {self.path}")


def should_skip_directory(name: str) -> bool:
    """Check if a directory (by base name) should be excluded with its subtree."""
    return name.startswith(".") or name in SKIP_DIRECTORIES


def matches_name(name: str, pattern: str, options: SearchOptions) -> bool:
    """Check a base filename against the pattern."""
    if not options.case_sensitive:
        name = name.lower()
        pattern = pattern.lower()

    if options.exact_match:
        return name == pattern
    return pattern in name


def _build_result(path: str, name: str) -> Optional[SearchResult]:
    """Snapshot a file's metadata, or None if it can't be read."""
    try:
        stat = os.stat(path)
    except OSError as e:
        logger.debug(f"Skipping unreadable entry {path}: {e}")
        return None

    return SearchResult(
        path=path,
        name=name,
        size=stat.st_size,
        mod_time=datetime.fromtimestamp(stat.st_mtime).strftime(TIME_FORMAT),
    )


def _check_file(path: str, name: str, pattern: str, options: SearchOptions) -> Optional[SearchResult]:
    if name.startswith("."):
        return None
    if not matches_name(name, pattern, options):
        return None
    return _build_result(path, name)


def _log_walk_error(error: OSError):
    logger.debug(f"Skipping inaccessible path {error.filename}: {error}")


def search_files(pattern: str, root: Union[str, Path], options: SearchOptions) -> List[SearchResult]:
    """Find files under root whose names match pattern.

    The walk is depth-first and top-down. Hidden directories and the fixed
    set in SKIP_DIRECTORIES, the root included, are pruned along with
    everything below them; hidden files are never matched. Errors on
    individual entries are logged and skipped so that a partial result is
    still returned.

    Raises:
        EmptyPatternError: pattern is empty.
        InvalidPathError: root does not exist or cannot be stat'ed.
    """
    if not pattern:
        raise EmptyPatternError()

    root = os.fspath(root)
    try:
        os.stat(root)
    except OSError as e:
        logger.debug(f"Cannot stat search root {root}: {e}")
        raise InvalidPathError(root) from e

    logger.debug(
        f"Searching {root} for {pattern!r} "
        f"(recursive={options.recursive}, exact={options.exact_match}, "
        f"case_sensitive={options.case_sensitive})"
    )

    results: List[SearchResult] = []

    # A file given as root is its own single candidate
    if not os.path.isdir(root):
        result = _check_file(root, os.path.basename(root), pattern, options)
        return [result] if result else []

    if should_skip_directory(os.path.basename(os.path.normpath(root))):
        logger.debug(f"Search root {root} is a skipped directory")
        return results

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        if options.recursive:
            # Prune in place so os.walk never enters skipped subtrees
            dirnames[:] = [d for d in dirnames if not should_skip_directory(d)]
        else:
            dirnames[:] = []

        for filename in filenames:
            result = _check_file(os.path.join(dirpath, filename), filename, pattern, options)
            if result:
                results.append(result)

    logger.debug(f"Found {len(results)} matches under {root}")
    return results
