"""Scan configuration — dataclass defaults backed by environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _env_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


# Directory names that are never descended into
DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset(
    {
        "target",
        "node_modules",
        "build",
        "dist",
        ".git",
        "venv",
        "__pycache__",
        "bin",
        "obj",
    }
)


@dataclass
class ScanConfig:
    """Settings for one directory scan.

    Numeric defaults can be overridden with ``LOCSTAT_MAX_DEPTH``,
    ``LOCSTAT_MAX_ENTRIES``, ``LOCSTAT_JOBS`` and ``LOCSTAT_PROGRESS_INTERVAL``.
    """

    ignore: list[str] = field(default_factory=list)
    max_depth: int = field(default_factory=lambda: _env_int("LOCSTAT_MAX_DEPTH", 100))
    max_entries: int = field(
        default_factory=lambda: _env_int("LOCSTAT_MAX_ENTRIES", 1_000_000)
    )
    non_recursive: bool = False
    filespec: str | None = None
    jobs: int = field(
        default_factory=lambda: _env_int("LOCSTAT_JOBS", min(32, (os.cpu_count() or 1) + 4))
    )
    max_file_size: int | None = None
    progress_interval: float = field(
        default_factory=lambda: _env_float("LOCSTAT_PROGRESS_INTERVAL", 1.0)
    )
    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS

    def validate(self) -> None:
        """Reject settings the scanner cannot work with."""
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {self.max_entries}")
        if self.jobs < 1:
            raise ValueError(f"jobs must be at least 1, got {self.jobs}")
        if self.max_file_size is not None and self.max_file_size < 0:
            raise ValueError(
                f"max_file_size must be non-negative, got {self.max_file_size}"
            )
        if self.progress_interval < 0:
            raise ValueError(
                f"progress_interval must be non-negative, got {self.progress_interval}"
            )
        if self.filespec is not None and not self.filespec.strip():
            raise ValueError("filespec must not be empty")
