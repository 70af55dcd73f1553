import io
import re

import pytest

from multidigest.progress import ProgressStats, progress, progress_for_guis


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def make_stats(now=1000.0):
    clock = FakeClock(now)
    return ProgressStats(clock=clock), clock


def test_start_records_totals_without_output():
    stats, clock = make_stats()
    out = io.StringIO()
    progress_for_guis(True, 0, 1000, stats, out)
    assert out.getvalue() == ""
    assert stats.start_time == clock.now
    assert stats.end_time == clock.now
    assert stats.sectors_skipped == 0
    assert stats.mb_total == stats.mb_total_real


def test_resume_start_accounts_for_skipped_sectors():
    stats, _ = make_stats()
    progress_for_guis(True, 400, 1000, stats, io.StringIO())
    assert stats.sectors_skipped == 400
    assert stats.mb_total_real == pytest.approx(stats.mb_total * 0.6)


def test_gui_line_fields():
    stats, clock = make_stats()
    out = io.StringIO()
    progress_for_guis(True, 0, 1000, stats, out)
    clock.now = 1010.0
    progress_for_guis(False, 500, 1000, stats, out)
    line = out.getvalue()
    assert line.endswith("\n")
    fields = line.rstrip("\n").split("|")
    assert len(fields) == 6
    assert fields[0] == "50%"
    assert fields[1] == "500/1000 sectors"
    assert fields[2].endswith(" MB")
    assert fields[3] == "10/20 seconds"
    assert fields[4].endswith(" MB/h")
    assert float(fields[4].split()[0]) > 0
    assert re.fullmatch(r"\d\d/\d\d/\d{4} \d\d:\d\d:\d\d", fields[5])
    assert stats.end_time == clock.now


def test_gui_eta_unavailable_without_progress():
    stats, _ = make_stats()
    out = io.StringIO()
    progress_for_guis(True, 0, 1000, stats, out)
    progress_for_guis(False, 0, 1000, stats, out)
    fields = out.getvalue().rstrip("\n").split("|")
    assert fields[5] == "N/A"


def test_bar_marker_position():
    stats, clock = make_stats()
    out = io.StringIO()
    progress(True, 0, 900, stats, out)
    clock.now = 1005.0
    progress(False, 300, 900, stats, out)
    text = out.getvalue()
    assert text.startswith("\r")
    assert not text.endswith("\n")
    percent = int(text[1:5].strip().rstrip("%"))
    bar = text.split("|")[1]
    assert len(bar) == 100 // 3
    assert bar.count("*") == 1
    assert bar.index("*") == percent // 3
    assert "MB/h, ETA: " in text


def test_bar_complete_adds_newline():
    stats, clock = make_stats()
    out = io.StringIO()
    progress(True, 0, 900, stats, out)
    clock.now = 1030.0
    progress(False, 900, 900, stats, out)
    text = out.getvalue()
    assert text.endswith("\n")
    assert text.startswith("\r100% |")
    bar = text.split("|")[1]
    assert set(bar) == {"-"}


def test_zero_total_rejected():
    stats, _ = make_stats()
    progress(True, 0, 0, stats, io.StringIO())
    with pytest.raises(ValueError):
        progress(False, 0, 0, stats, io.StringIO())


def test_duration():
    stats = ProgressStats(start_time=5.0, end_time=7.5)
    assert stats.duration() == pytest.approx(2.5)


def test_duration_never_negative():
    stats = ProgressStats(start_time=9.0, end_time=3.0)
    assert stats.duration() == 0.0


def test_duration_after_run():
    stats, clock = make_stats()
    progress_for_guis(True, 0, 10, stats, io.StringIO())
    clock.now = 1042.0
    progress_for_guis(False, 10, 10, stats, io.StringIO())
    assert stats.duration() == pytest.approx(clock.now - 1000.0)