"""Report rendering — fixed-width text table and JSON document."""

from __future__ import annotations

import os
from pathlib import Path

import click

from locstat.models import LanguageTotals, ScanReport
from locstat.progress import safe_rate
from locstat.schemas import build_response

DIR_WIDTH = 40
LANG_WIDTH = 16
RULE_WIDTH = DIR_WIDTH + LANG_WIDTH + 8 + 3 * 10 + 5


def truncate_start(text: str, max_len: int) -> str:
    """Keep the tail of *text*, prefixed with ``...`` when it is too long."""
    if len(text) <= max_len:
        return text
    return "..." + text[len(text) - (max_len - 3):]


def safe_percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part * 100.0 / whole


def display_directory(directory: str | Path, cwd: Path | None = None) -> str:
    """Path relative to *cwd*, ``.`` for *cwd* itself, absolute otherwise."""
    path = Path(directory)
    base = cwd if cwd is not None else Path(os.getcwd())
    try:
        relative = path.relative_to(base)
    except ValueError:
        return str(path)
    text = str(relative)
    return "." if text in ("", ".") else text


def format_language_row(prefix: str, language: str, totals: LanguageTotals) -> str:
    stats = totals.stats
    return (
        f"{prefix:<{DIR_WIDTH}} {language:<{LANG_WIDTH}} {totals.files:>8} "
        f"{stats.code:>10} {stats.comment:>10} {stats.blank:>10}"
    )


def _header_row() -> str:
    return (
        f"{'Directory':<{DIR_WIDTH}} {'Language':<{LANG_WIDTH}} {'Files':>8} "
        f"{'Code':>10} {'Comments':>10} {'Blank':>10}"
    )


def _number(value: object) -> str:
    return click.style(str(value), fg="bright_yellow")


def render_banner(tool: str, version: str) -> str:
    return f"{click.style(tool, fg='bright_cyan', bold=True)} {_number(f'v{version}')}"


def render_performance(report: ScanReport) -> list[str]:
    elapsed = report.elapsed
    files = report.files_processed
    lines = report.lines_processed
    return [
        "",
        click.style("Performance Summary:", fg="blue", bold=True),
        f"Total time: {_number(f'{elapsed:.2f}')} seconds",
        f"Files processed: {_number(files)} ({_number(f'{safe_rate(files, elapsed):.1f} files/sec')})",
        f"Lines processed: {_number(lines)} ({_number(f'{safe_rate(lines, elapsed):.1f} lines/sec')})",
    ]


def render_table(
    report: ScanReport,
    *,
    tool: str,
    version: str,
    cwd: Path | None = None,
) -> str:
    """Render the human-readable report. Only headings and numbers in the
    summaries are styled; table rows stay plain."""
    out: list[str] = [render_banner(tool, version)]
    out.extend(render_performance(report))

    out.append("")
    out.append("Detailed source code analysis:")
    out.append("-" * RULE_WIDTH)
    out.append(_header_row())
    out.append("-" * RULE_WIDTH)
    for directory, by_lang in report.sorted_directories():
        prefix = truncate_start(display_directory(directory, cwd), DIR_WIDTH)
        for language, totals in by_lang.items():
            out.append(format_language_row(prefix, language, totals))

    out.append("-" * RULE_WIDTH)
    out.append("Totals by language:")
    for language, totals in report.by_language().items():
        out.append(format_language_row("", language, totals))

    lines = report.lines_processed
    if report.files_processed > 0 or lines > 0:
        total = report.grand_total()
        out.append("")
        out.append(click.style("Overall Summary:", fg="blue", bold=True))
        out.append(f"Total files processed: {_number(report.files_processed)}")
        out.append(f"Total lines processed: {_number(lines)}")
        for label, value in (
            ("Code lines:    ", total.code),
            ("Comment lines: ", total.comment),
            ("Blank lines:   ", total.blank),
        ):
            pct = f"{safe_percentage(value, lines):.1f}%"
            out.append(f"{label} {_number(value)} ({_number(pct)})")

    if report.error_count > 0:
        out.append("")
        out.append(f"{click.style('Warning', fg='red', bold=True)}: {_number(report.error_count)}")

    return "\n".join(out)


def render_file_details(report: ScanReport) -> str:
    """Per-file counts for verbose mode."""
    out: list[str] = []
    for result in report.files:
        out.append(f"File: {result.path}")
        out.append(f"  Code lines: {result.stats.code}")
        out.append(f"  Comment lines: {result.stats.comment}")
        out.append(f"  Blank lines: {result.stats.blank}")
        out.append("")
    return "\n".join(out)


def render_json(
    report: ScanReport,
    *,
    tool: str,
    version: str,
    include_files: bool = False,
) -> str:
    response = build_response(report, tool=tool, version=version, include_files=include_files)
    return response.model_dump_json(indent=2)
