"""Data models for searchbot."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchOptions:
    """Options controlling a single search."""

    recursive: bool = True
    exact_match: bool = False
    case_sensitive: bool = True


@dataclass(frozen=True)
class SearchResult:
    """A file that matched the search pattern, as seen when it was visited."""

    path: str
    name: str
    size: int
    mod_time: str  # YYYY-MM-DD HH:MM:SS
