"""CLI entry points: locstat, locstat-languages.

Usage:
    locstat [PATH]                  # Count lines under PATH (default: .)
    locstat src -f '*.py' -v        # Only Python files, with per-file counts
    locstat . --format json         # Machine-readable report
    locstat-languages               # List supported languages
"""

from __future__ import annotations

import sys

import click

from locstat import __version__
from locstat.core.config import ScanConfig
from locstat.core.logging import setup_logging
from locstat.detect import supported_extensions
from locstat.engine import PROFILE_REGISTRY, LanguageProfile
from locstat.exceptions import ScanLimitExceeded
from locstat.progress import ProgressTracker, Throughput
from locstat.report import render_file_details, render_json, render_table
from locstat.scanner import Scanner

TOOL_NAME = "locstat"


def _print_progress(snap: Throughput) -> None:
    click.echo(
        f"\rProcessed {snap.files} files ({snap.files_per_second:.1f} files/sec) "
        f"and {snap.lines} lines ({snap.lines_per_second:.1f} lines/sec)...",
        nl=False,
        err=True,
    )


@click.command()
@click.argument("path", default=".", type=click.Path())
@click.option("-i", "--ignore", multiple=True, help="Directory to skip (path suffix); repeatable")
@click.option("-v", "--verbose", is_flag=True, help="Print per-file counts and debug logs")
@click.option("-m", "--max-entries", type=int, default=None, help="Abort after this many files")
@click.option("-d", "--max-depth", type=int, default=None, help="Maximum directory depth")
@click.option("-n", "--non-recursive", is_flag=True, help="Only scan the top-level directory")
@click.option("-f", "--filespec", default=None, help="Glob matched against file name or relative path")
@click.option("-j", "--jobs", type=int, default=None, help="Files analysed concurrently")
@click.option("--max-file-size", type=int, default=None, help="Skip files larger than this (bytes)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
)
@click.option("--no-progress", is_flag=True, help="Disable the live progress line")
@click.version_option(__version__, prog_name=TOOL_NAME)
def main(
    path: str,
    ignore: tuple[str, ...],
    verbose: bool,
    max_entries: int | None,
    max_depth: int | None,
    non_recursive: bool,
    filespec: str | None,
    jobs: int | None,
    max_file_size: int | None,
    output_format: str,
    no_progress: bool,
) -> None:
    """Count code, comment and blank lines under PATH."""
    setup_logging("DEBUG" if verbose else None)

    show_progress = not no_progress and output_format == "table"
    try:
        config = ScanConfig(
            ignore=list(ignore),
            non_recursive=non_recursive,
            filespec=filespec,
            max_file_size=max_file_size,
        )
        if max_entries is not None:
            config.max_entries = max_entries
        if max_depth is not None:
            config.max_depth = max_depth
        if jobs is not None:
            config.jobs = jobs

        progress = ProgressTracker(interval=config.progress_interval)
        if show_progress:
            progress.tick_callbacks.append(_print_progress)
        scanner = Scanner(config, progress=progress)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "table":
        click.echo("Starting source code analysis...")

    try:
        report = scanner.scan(path)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ScanLimitExceeded as e:
        if show_progress:
            click.echo(err=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if show_progress:
        click.echo(err=True)

    if output_format == "json":
        click.echo(render_json(report, tool=TOOL_NAME, version=__version__, include_files=verbose))
        return

    if verbose and report.files:
        click.echo(render_file_details(report))
    click.echo(render_table(report, tool=TOOL_NAME, version=__version__))


def _describe(profile: LanguageProfile) -> str:
    parts: list[str] = []
    if profile.line_comments:
        parts.append("line " + " ".join(profile.line_comments))
    if profile.block_comments:
        parts.append(
            "block "
            + " ".join(
                f"{p.start}..{p.end}" + (" (nested)" if p.nestable else "")
                for p in profile.block_comments
            )
        )
    if profile.doc_comments:
        parts.append("doc " + " ".join(profile.doc_comments))
    if profile.fixed_column is not None:
        markers = "".join(sorted(profile.fixed_column.markers))
        parts.append(f"column {profile.fixed_column.column} [{markers}]")
    return "; ".join(parts) or "no comments"


@click.command()
def languages_main() -> None:
    """List supported languages, their file extensions and comment syntax."""
    extensions: dict[str, list[str]] = {}
    for ext, language in sorted(supported_extensions().items()):
        extensions.setdefault(language, []).append(f".{ext}")

    for profile in PROFILE_REGISTRY.list_all():
        exts = ", ".join(extensions.get(profile.name, [])) or "-"
        click.echo(f"{profile.name:<16} {exts}")
        click.echo(f"{'':<16} {_describe(profile)}")


if __name__ == "__main__":
    main()
