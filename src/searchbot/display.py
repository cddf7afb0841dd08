"""Rendering of search results as a fixed-width report."""

from typing import List, Optional

from rich.console import Console

from .models import SearchResult

RULE_WIDTH = 100
NAME_WIDTH = 50
SIZE_WIDTH = 20
MODIFIED_WIDTH = 15

SIZE_UNITS = "KMGTPE"

_stdout = Console()


def format_size(size: int) -> str:
    """Format a byte count in human-readable form, e.g. 1536 -> '1.5 KB'."""
    if size == 0:
        return "0 B"

    sign = ""
    if size < 0:
        sign = "-"
        size = -size

    unit = 1024
    if size < unit:
        return f"{sign}{size} B"

    div, exp = unit, 0
    n = size // unit
    while n >= unit and exp < len(SIZE_UNITS) - 1:
        div *= unit
        exp += 1
        n //= unit
    return f"{sign}{size / div:.1f} {SIZE_UNITS[exp]}B"


def truncate_string(text: str, max_len: int) -> str:
    """Shorten text to at most max_len characters, ending in '...' if cut."""
    if len(text) <= max_len:
        return text
    if max_len <= 0:
        return ""
    if max_len <= 3:
        return "." * max_len
    return text[:max_len - 3] + "..."


def _format_row(name: str, size: str, modified: str, path: str) -> str:
    return f"{name:<{NAME_WIDTH}} {size:<{SIZE_WIDTH}} {modified:<{MODIFIED_WIDTH}} {path}"


def print_results(results: List[SearchResult], console: Optional[Console] = None):
    """Print results sorted by name with a count and total size header."""
    out = console or _stdout

    # Headings only; no file name ever goes through rich markup
    def emit(text: str, style: Optional[str] = None):
        out.print(text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)

    if not results:
        emit("\nNo files found", style="yellow")
        return

    ordered = sorted(results, key=lambda r: (r.name, r.path))
    total_size = sum(r.size for r in ordered)

    emit(f"\nFound {len(ordered)} files (Total size: {format_size(total_size)})", style="green")
    emit("-" * RULE_WIDTH)
    emit(_format_row("NAME", "SIZE", "MODIFIED", "PATH"), style="blue")
    emit("-" * RULE_WIDTH)

    # Rows go straight to the stream: rich would drop control characters
    # and expand tabs in names and paths
    for result in ordered:
        out.file.write(_format_row(
            truncate_string(result.name, NAME_WIDTH - 3),
            format_size(result.size),
            result.mod_time,
            result.path,
        ) + "\n")
    out.file.flush()
    emit("-" * RULE_WIDTH)
