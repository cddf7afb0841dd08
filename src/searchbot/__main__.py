"""Allow running searchbot with ``python -m searchbot``."""

from .cli import app

app(prog_name="searchbot")
