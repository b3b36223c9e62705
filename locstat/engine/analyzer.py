"""File analyzer — drives the classifier across every line of one file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

import structlog

from locstat.engine.classifier import classify_line
from locstat.engine.models import NORMAL, FileResult, LanguageProfile, LineKind, Stats
from locstat.engine.registry import PROFILE_REGISTRY, ProfileRegistry

log = structlog.get_logger("locstat.engine.analyzer")

BOM = "\ufeff"


def decode_line(raw: bytes) -> str:
    """Lossy UTF-8 decode of one physical line, without its terminator."""
    text = raw.decode("utf-8", errors="replace")
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def iter_line_kinds(lines: Iterable[str], profile: LanguageProfile) -> Iterator[LineKind]:
    """Yield one verdict per line, threading a fresh state through the file."""
    state = NORMAL
    for index, line in enumerate(lines):
        if index == 0 and line.startswith(BOM):
            line = line[len(BOM):]
        kind, state = classify_line(line, profile, state, first_line=index == 0)
        yield kind


def analyze_lines(lines: Iterable[str], profile: LanguageProfile) -> Stats:
    """Count an already-decoded sequence of lines (terminators stripped)."""
    stats = Stats()
    for kind in iter_line_kinds(lines, profile):
        stats.record(kind)
    return stats


def split_lines(data: bytes) -> list[str]:
    """Split raw content into decoded physical lines.

    A trailing newline does not start an extra line; empty content has none.
    """
    if not data:
        return []
    chunks = data.split(b"\n")
    if chunks[-1] == b"":
        chunks.pop()
    return [decode_line(chunk) for chunk in chunks]


def analyze_bytes(data: bytes, profile: LanguageProfile) -> Stats:
    return analyze_lines(split_lines(data), profile)


def _read_lines(path: Path) -> Iterator[str]:
    with path.open("rb") as fh:
        for raw in fh:
            yield decode_line(raw)


def analyze_file(
    path: str | os.PathLike[str],
    language_id: str,
    registry: ProfileRegistry | None = None,
    *,
    max_file_size: int | None = None,
) -> FileResult:
    """Analyze one file on disk.

    The file is streamed line by line. I/O failures are captured in the
    returned :class:`FileResult` instead of being raised. An unregistered
    *language_id* raises :class:`~locstat.exceptions.UnknownLanguage`.
    """
    profile = (registry or PROFILE_REGISTRY).get(language_id)
    path = Path(path)
    result = FileResult(path=str(path), language=language_id)

    try:
        if max_file_size is not None and path.stat().st_size > max_file_size:
            log.info("analyzer.file_skipped", path=str(path), reason="size limit")
            result.skipped = True
            return result
        result.stats = analyze_lines(_read_lines(path), profile)
    except OSError as e:
        log.warning("analyzer.read_failed", path=str(path), error=str(e))
        result.error = str(e)
        result.stats = Stats()

    return result
