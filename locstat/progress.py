"""Progress tracking for a directory scan."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

import structlog

log = structlog.get_logger("locstat.progress")


def safe_rate(count: int, seconds: float) -> float:
    """Items per second, 0 when no time has elapsed."""
    if seconds <= 0:
        return 0.0
    return count / seconds


@dataclass
class Throughput:
    """Snapshot of scan counters handed to tick callbacks."""

    files: int
    lines: int
    elapsed: float

    @property
    def files_per_second(self) -> float:
        return safe_rate(self.files, self.elapsed)

    @property
    def lines_per_second(self) -> float:
        return safe_rate(self.lines, self.elapsed)


class ProgressTracker:
    """Track file/line throughput while a scan runs.

    Tick callbacks fire at most once per ``interval`` seconds while files
    are being counted, plus once from :meth:`finish`.
    """

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.tick_callbacks: list[Callable[[Throughput], None]] = []
        self.interval = interval
        self._clock = clock
        self._started = clock()
        self._last_tick: float | None = None
        self.files = 0
        self.lines = 0

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started

    def snapshot(self) -> Throughput:
        return Throughput(files=self.files, lines=self.lines, elapsed=self.elapsed)

    def record_file(self, lines: int) -> None:
        """Count one analysed file and maybe fire a throttled tick."""
        self.files += 1
        self.lines += lines
        now = self._clock()
        if self._last_tick is None or now - self._last_tick >= self.interval:
            self._last_tick = now
            self._tick()

    def finish(self) -> None:
        self._last_tick = self._clock()
        self._tick()

    def _tick(self) -> None:
        snap = self.snapshot()
        for cb in self.tick_callbacks:
            try:
                cb(snap)
            except Exception:
                log.debug("progress.tick_callback_failed", exc_info=True)
