"""Scan result models — per-directory, per-language and global totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from locstat.engine.models import FileResult, Stats


@dataclass
class LanguageTotals:
    """File count plus summed line stats for one language."""

    files: int = 0
    stats: Stats = field(default_factory=Stats)

    def add(self, stats: Stats) -> None:
        self.files += 1
        self.stats.merge(stats)

    def merge(self, other: LanguageTotals) -> None:
        self.files += other.files
        self.stats.merge(other.stats)


@dataclass
class FileFailure:
    path: str
    reason: str


@dataclass
class ScanReport:
    """Everything a scan produced.

    Failed and skipped files never reach the aggregates; they are listed
    separately.
    """

    root: Path
    directories: dict[str, dict[str, LanguageTotals]] = field(default_factory=dict)
    files: list[FileResult] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    error_count: int = 0
    elapsed: float = 0.0

    def add_result(self, result: FileResult) -> None:
        """Merge one file outcome into the report."""
        if result.error is not None:
            self.failures.append(FileFailure(path=result.path, reason=result.error))
            self.error_count += 1
            return
        if result.skipped:
            self.skipped.append(result.path)
            return
        self.files.append(result)
        directory = str(Path(result.path).parent)
        by_lang = self.directories.setdefault(directory, {})
        by_lang.setdefault(result.language, LanguageTotals()).add(result.stats)

    @property
    def files_processed(self) -> int:
        return len(self.files)

    @property
    def lines_processed(self) -> int:
        return sum(r.stats.total for r in self.files)

    def by_language(self) -> dict[str, LanguageTotals]:
        totals: dict[str, LanguageTotals] = {}
        for by_lang in self.directories.values():
            for language, lang_totals in by_lang.items():
                totals.setdefault(language, LanguageTotals()).merge(lang_totals)
        return dict(sorted(totals.items()))

    def grand_total(self) -> Stats:
        total = Stats()
        for lang_totals in self.by_language().values():
            total.merge(lang_totals.stats)
        return total

    def sorted_directories(self) -> list[tuple[str, dict[str, LanguageTotals]]]:
        return [
            (directory, dict(sorted(by_lang.items())))
            for directory, by_lang in sorted(self.directories.items())
        ]
