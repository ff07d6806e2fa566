"""Subwords solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

MAX_LETTERS_LIMIT = 64
"""Width of the subset-enumeration counter; no line may have more letters than this."""


class SolverConfig(BaseSettings):
    """Configuration settings for the subwords solver."""

    max_letters: int = Field(default=MAX_LETTERS_LIMIT, ge=0, le=MAX_LETTERS_LIMIT)
    """Maximum number of letters in a normalized input line. Default: 64 (also the ceiling)."""

    presentation: Literal["buckets", "extremes"] = "buckets"
    """How to summarize matches: by word length, or as shortest/longest groups."""

    deterministic: bool = True
    """Whether to enumerate subsets in sorted order, so that matches are always collected in
    the same order (a bit slower). Default: True."""

    max_workers: int = Field(default=1, ge=1)
    """Number of worker processes for solving lines. 1 (default) solves in-process."""

    chunksize: int = Field(default=16, ge=1)
    """Number of lines sent to a worker process at a time. Default: 16."""

    min_word_length: int = Field(default=1, ge=1)
    """Ignore dictionary words shorter than this. Default: 1."""

    max_word_length: int | None = None
    """Ignore dictionary words longer than this. If None (default), no limit."""

    log_path: str | None = None
    """File to write the run log to. If None (default), the run log goes to stderr."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
