"""Progress reporting for long sector-by-sector operations."""

from __future__ import annotations

import math
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Optional, TextIO

SECTOR_BYTES = 2064
_MEGABYTE = 1024 * 1024
_BAR_WIDTH = 100 // 3
_ETA_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass
class ProgressStats:
    """Timing and size figures shared by successive progress calls."""

    start_time: float = 0.0
    end_time: float = 0.0
    mb_total: float = 0.0
    mb_total_real: float = 0.0
    sectors_skipped: int = 0
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    def duration(self) -> float:
        """Seconds between the first and the last call, never negative."""
        return max(0.0, self.end_time - self.start_time)


class _Snapshot(NamedTuple):
    percent: int
    elapsed: float
    mb_done: float
    mb_hour: float
    seconds_left: float
    eta: str


def _megabytes(sectors: int) -> float:
    return sectors * SECTOR_BYTES / _MEGABYTE


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator > 0:
            return math.inf
        if numerator < 0:
            return -math.inf
        return math.nan
    return numerator / denominator


def _format_eta(moment: float) -> str:
    if not math.isfinite(moment):
        return "N/A"
    try:
        return time.strftime(_ETA_FORMAT, time.localtime(int(moment)))
    except (OverflowError, OSError, ValueError):
        return "N/A"


def _begin(sectors_done: int, total_sectors: int, stats: ProgressStats) -> None:
    stats.start_time = stats.clock()
    stats.mb_total = _megabytes(total_sectors)
    stats.mb_total_real = _megabytes(total_sectors - sectors_done)
    stats.sectors_skipped = sectors_done


def _measure(sectors_done: int, total_sectors: int, stats: ProgressStats) -> _Snapshot:
    if total_sectors <= 0:
        raise ValueError("total_sectors must be positive")
    percent = int(100.0 * sectors_done / total_sectors)
    now = stats.clock()
    start_seconds = math.floor(stats.start_time)
    elapsed = float(math.floor(now) - start_seconds)
    mb_done = _megabytes(sectors_done)
    mb_done_real = _megabytes(sectors_done - stats.sectors_skipped)
    mb_hour = _divide(mb_done_real, elapsed) * 3600
    seconds_left = _divide(stats.mb_total_real, mb_hour) * 3600
    eta = _format_eta(start_seconds + seconds_left)
    return _Snapshot(percent, elapsed, mb_done, mb_hour, seconds_left, eta)


def progress_for_guis(
    start: bool,
    sectors_done: int,
    total_sectors: int,
    stats: ProgressStats,
    stream: Optional[TextIO] = None,
) -> None:
    """Write one machine-parsable, pipe-separated progress line per call."""
    out = sys.stdout if stream is None else stream
    if start:
        _begin(sectors_done, total_sectors, stats)
    else:
        snap = _measure(sectors_done, total_sectors, stats)
        out.write(
            f"{snap.percent}%|{sectors_done}/{total_sectors} sectors"
            f"|{snap.mb_done:.2f}/{stats.mb_total:.0f} MB"
            f"|{snap.elapsed:.0f}/{snap.seconds_left:.0f} seconds"
            f"|{snap.mb_hour:.2f} MB/h|{snap.eta}\n"
        )
        out.flush()
    stats.end_time = stats.clock()


def progress(
    start: bool,
    sectors_done: int,
    total_sectors: int,
    stats: ProgressStats,
    stream: Optional[TextIO] = None,
) -> None:
    """Redraw a single-line progress bar with rate and estimated finish time."""
    out = sys.stdout if stream is None else stream
    if start:
        _begin(sectors_done, total_sectors, stats)
    else:
        snap = _measure(sectors_done, total_sectors, stats)
        marker = snap.percent // 3
        bar = "".join("*" if position == marker else "-" for position in range(_BAR_WIDTH))
        out.write(f"\r{snap.percent:3d}% |{bar}| {snap.mb_hour:.2f} MB/h, ETA: {snap.eta}")
        out.flush()
    if sectors_done == total_sectors:
        out.write("\n")
    stats.end_time = stats.clock()