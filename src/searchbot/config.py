"""Configuration management for searchbot using platformdirs."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_config_dir
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import SearchOptions

CONFIG_DIR = Path(user_config_dir("searchbot", "searchbot"))
USER_ENV_FILE = CONFIG_DIR / "config.env"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Default search behaviour, overridable from the environment.

    Values are read from SEARCHBOT_* environment variables, a local .env
    file and the per-user config.env, with the local file taking priority
    over the user one.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCHBOT_",
        env_file=(USER_ENV_FILE, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra environment variables
    )

    recursive: bool = Field(default=True, description="Descend into subdirectories")
    exact_match: bool = Field(default=False, description="Require the whole filename to equal the pattern")
    case_sensitive: bool = Field(default=True, description="Compare names verbatim")
    log_level: str = Field(default="WARNING", description="Logging level for diagnostics on stderr")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    def search_options(
        self,
        no_recursive: bool = False,
        exact: bool = False,
        ignore_case: bool = False,
    ) -> SearchOptions:
        """Combine these defaults with command-line flags, which only ever narrow them."""
        return SearchOptions(
            recursive=self.recursive and not no_recursive,
            exact_match=self.exact_match or exact,
            case_sensitive=self.case_sensitive and not ignore_case,
        )


def configure_logging(level: Optional[Union[str, int]] = None, settings: Optional[Settings] = None):
    """Send log records to stderr so they never interleave with the report."""
    if level is None:
        level = (settings or Settings()).log_level
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
