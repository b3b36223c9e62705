"""JSON report schemas."""

from __future__ import annotations

from pydantic import BaseModel

from locstat.engine.models import Stats
from locstat.models import LanguageTotals, ScanReport
from locstat.progress import safe_rate


class LineCounts(BaseModel):
    code: int
    comment: int
    blank: int
    total: int

    @classmethod
    def from_stats(cls, stats: Stats) -> LineCounts:
        return cls(
            code=stats.code,
            comment=stats.comment,
            blank=stats.blank,
            total=stats.total,
        )


class LanguageRow(BaseModel):
    language: str
    files: int
    lines: LineCounts

    @classmethod
    def from_totals(cls, language: str, totals: LanguageTotals) -> LanguageRow:
        return cls(language=language, files=totals.files, lines=LineCounts.from_stats(totals.stats))


class DirectoryRow(BaseModel):
    directory: str
    languages: list[LanguageRow]


class FailureRow(BaseModel):
    path: str
    reason: str


class FileRow(BaseModel):
    path: str
    language: str
    lines: LineCounts


class RunMetrics(BaseModel):
    files_processed: int
    lines_processed: int
    error_count: int
    skipped_files: int
    elapsed_seconds: float
    files_per_second: float
    lines_per_second: float


class ScanReportResponse(BaseModel):
    tool: str
    version: str
    root: str
    directories: list[DirectoryRow]
    languages: list[LanguageRow]
    total: LineCounts
    failures: list[FailureRow]
    files: list[FileRow] | None = None
    metrics: RunMetrics


def build_response(
    report: ScanReport,
    *,
    tool: str,
    version: str,
    include_files: bool = False,
) -> ScanReportResponse:
    """Convert a :class:`ScanReport` into its JSON document."""
    files = None
    if include_files:
        files = [
            FileRow(path=r.path, language=r.language, lines=LineCounts.from_stats(r.stats))
            for r in report.files
        ]
    return ScanReportResponse(
        tool=tool,
        version=version,
        root=str(report.root),
        directories=[
            DirectoryRow(
                directory=directory,
                languages=[LanguageRow.from_totals(lang, t) for lang, t in by_lang.items()],
            )
            for directory, by_lang in report.sorted_directories()
        ],
        languages=[LanguageRow.from_totals(lang, t) for lang, t in report.by_language().items()],
        total=LineCounts.from_stats(report.grand_total()),
        failures=[FailureRow(path=f.path, reason=f.reason) for f in report.failures],
        files=files,
        metrics=RunMetrics(
            files_processed=report.files_processed,
            lines_processed=report.lines_processed,
            error_count=report.error_count,
            skipped_files=len(report.skipped),
            elapsed_seconds=round(report.elapsed, 3),
            files_per_second=round(safe_rate(report.files_processed, report.elapsed), 1),
            lines_per_second=round(safe_rate(report.lines_processed, report.elapsed), 1),
        ),
    )
