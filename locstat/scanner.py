"""Directory scanner — walk, filter, analyze in parallel, aggregate."""

from __future__ import annotations

import asyncio
import fnmatch
import os
import time
from pathlib import Path

import structlog

from locstat.core.config import ScanConfig
from locstat.detect import detect_language
from locstat.engine import PROFILE_REGISTRY, FileResult, ProfileRegistry, analyze_file
from locstat.exceptions import LocstatError, ScanLimitExceeded
from locstat.models import ScanReport
from locstat.progress import ProgressTracker

log = structlog.get_logger("locstat.scanner")


def filespec_matches(pattern: str, root: Path, file_path: Path) -> bool:
    """True if *pattern* matches the file name or its root-relative path."""
    if fnmatch.fnmatchcase(file_path.name, pattern):
        return True
    try:
        relative = file_path.relative_to(root)
    except ValueError:
        return False
    return fnmatch.fnmatchcase(relative.as_posix(), pattern)


def _ends_with(path: Path, suffix: str) -> bool:
    parts = Path(suffix).parts
    if not parts:
        return False
    return path.parts[-len(parts):] == parts


class Scanner:
    """Count lines under a path.

    Discovery runs first and produces ``(path, language)`` targets; file
    analyses then run in worker threads, at most ``config.jobs`` at a time.
    Results are merged on the coordinating task.
    """

    def __init__(
        self,
        config: ScanConfig | None = None,
        registry: ProfileRegistry | None = None,
        progress: ProgressTracker | None = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.config.validate()
        self.registry = registry or PROFILE_REGISTRY
        self.progress = progress or ProgressTracker(interval=self.config.progress_interval)

    def scan(self, path: str | os.PathLike[str]) -> ScanReport:
        return asyncio.run(self.scan_async(path))

    async def scan_async(self, path: str | os.PathLike[str]) -> ScanReport:
        start = time.monotonic()
        target = Path(path)
        if not target.exists():
            raise FileNotFoundError(f"Path does not exist: {target}")
        root = target.resolve()
        report = ScanReport(root=root)

        targets = await asyncio.to_thread(self.discover, root, report)
        await self._analyze(targets, report)
        self.progress.finish()

        report.files.sort(key=lambda r: r.path)
        report.failures.sort(key=lambda f: f.path)
        report.skipped.sort()
        report.elapsed = time.monotonic() - start
        log.info(
            "scanner.completed",
            root=str(root),
            files=report.files_processed,
            lines=report.lines_processed,
            errors=report.error_count,
        )
        return report

    # -- discovery ----------------------------------------------------------

    def discover(self, root: Path, report: ScanReport) -> list[tuple[Path, str]]:
        """Collect analysable files under *root*.

        Directory errors and depth overruns are counted on *report*.
        Raises :class:`ScanLimitExceeded` once more than
        ``config.max_entries`` files match the filespec.
        """
        targets: list[tuple[Path, str]] = []
        entries = 0

        def consider(file_path: Path) -> None:
            nonlocal entries
            if self.config.filespec and not filespec_matches(
                self.config.filespec, root, file_path
            ):
                return
            entries += 1
            if entries > self.config.max_entries:
                raise ScanLimitExceeded(self.config.max_entries)
            language = detect_language(file_path.name)
            if language is not None:
                targets.append((file_path, language))

        if root.is_file():
            consider(root)
            return targets

        self._walk(root, 0, consider, report)
        return targets

    def _is_ignored(self, directory: Path) -> bool:
        if directory.name in self.config.ignored_dirs:
            return True
        return any(_ends_with(directory, entry) for entry in self.config.ignore)

    def _walk(self, directory: Path, depth: int, consider, report: ScanReport) -> None:
        if depth > self.config.max_depth:
            log.warning(
                "scanner.max_depth_reached",
                max_depth=self.config.max_depth,
                path=str(directory),
            )
            report.error_count += 1
            return

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.warning("scanner.dir_unreadable", path=str(directory), error=str(e))
            report.error_count += 1
            return

        for entry in entries:
            entry_path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                log.warning("scanner.entry_unreadable", path=str(entry_path), error=str(e))
                report.error_count += 1
                continue

            if is_dir:
                if self.config.non_recursive or self._is_ignored(entry_path):
                    continue
                self._walk(entry_path, depth + 1, consider, report)
            elif is_file:
                consider(entry_path)

    # -- analysis -----------------------------------------------------------

    async def _analyze(self, targets: list[tuple[Path, str]], report: ScanReport) -> None:
        sem = asyncio.Semaphore(self.config.jobs)

        async def _run(file_path: Path, language: str) -> FileResult:
            async with sem:
                try:
                    return await asyncio.to_thread(
                        analyze_file,
                        file_path,
                        language,
                        self.registry,
                        max_file_size=self.config.max_file_size,
                    )
                except LocstatError as exc:
                    return FileResult(path=str(file_path), language=language, error=str(exc))

        tasks = [_run(file_path, language) for file_path, language in targets]
        for coro in asyncio.as_completed(tasks):
            result = await coro
            report.add_result(result)
            if result.ok:
                self.progress.record_file(result.stats.total)
            elif result.error is not None:
                log.warning("scanner.file_failed", path=result.path, error=result.error)
