# mediaforge/common/progress/ffmpeg_progress.py
"""
Parsing of ffmpeg's human-readable status output.

ffmpeg writes a status line such as

    frame=  120 fps= 30.0 q=28.0 size=    1024kB time=00:00:04.00 bitrate=2048.0kbits/s speed=1.5x

to stderr while encoding. Each field is extracted independently so partial
or unrelated lines still yield a (possibly empty) FFmpegProgress; nothing in
this module raises on odd input.
"""
from __future__ import annotations

import re
from datetime import timedelta
from typing import Optional

from mediaforge.domain.entities.progress import FFmpegProgress

_FRAME_RE = re.compile(r"frame=\s*(\d+)", re.ASCII)
_FPS_RE = re.compile(r"fps=\s*(\d+\.?\d*)", re.ASCII)
_SIZE_RE = re.compile(r"size=\s*(\d+)kB", re.ASCII)
_TIME_RE = re.compile(r"time=\s*(\d{2}):(\d{2}):(\d{2})\.(\d{2})", re.ASCII)
_BITRATE_RE = re.compile(r"bitrate=\s*(\d+\.?\d*\w+/s)", re.ASCII)
_SPEED_RE = re.compile(r"speed=\s*(\d+\.?\d*x)", re.ASCII)
_DURATION_RE = re.compile(r"Duration:\s*(\d{2}):(\d{2}):(\d{2})\.(\d{2})", re.ASCII)


def _clock_to_timedelta(m: re.Match) -> timedelta:
    h, mi, s, cs = (int(g) for g in m.groups())
    return timedelta(hours=h, minutes=mi, seconds=s, milliseconds=cs * 10)


def parse_progress(line: str, total_duration: Optional[timedelta] = None) -> FFmpegProgress:
    """
    Extract progress fields from one ffmpeg output line.

    `percentage` is only computed when a time= field matched and the total
    duration is known; it is capped at 100.
    """
    frame = 0
    fps = 0.0
    total_size = 0
    elapsed = timedelta(0)
    bitrate = ""
    speed = ""
    percentage = 0.0

    if m := _FRAME_RE.search(line):
        frame = int(m.group(1))

    if m := _FPS_RE.search(line):
        fps = float(m.group(1))

    if m := _SIZE_RE.search(line):
        total_size = int(m.group(1)) * 1024

    if m := _TIME_RE.search(line):
        elapsed = _clock_to_timedelta(m)
        if total_duration and total_duration > timedelta(0):
            percentage = min(100.0, 100.0 * elapsed.total_seconds() / total_duration.total_seconds())

    if m := _BITRATE_RE.search(line):
        bitrate = m.group(1)

    if m := _SPEED_RE.search(line):
        speed = m.group(1)

    return FFmpegProgress(
        frame=frame,
        fps=fps,
        total_size=total_size,
        time=elapsed,
        bitrate=bitrate,
        speed=speed,
        percentage=percentage,
    )


def parse_duration(text: str) -> timedelta:
    """Read `Duration: HH:MM:SS.cc` from ffmpeg's input banner; zero when absent."""
    if m := _DURATION_RE.search(text):
        return _clock_to_timedelta(m)
    return timedelta(0)


def format_duration(d: timedelta) -> str:
    """HH:MM:SS.cc (centiseconds truncated)."""
    total_cs = (d // timedelta(milliseconds=10))
    h, rem = divmod(total_cs, 360_000)
    m, rem = divmod(rem, 6_000)
    s, cs = divmod(rem, 100)
    return f"{h:02d}:{m:02d}:{s:02d}.{cs:02d}"


def format_progress(p: FFmpegProgress) -> str:
    parts = []
    if p.percentage > 0:
        parts.append(f"{p.percentage:.1f}%")
    if p.time > timedelta(0):
        parts.append(format_duration(p.time))
    if p.frame > 0:
        parts.append(f"{p.frame} frames")
    if p.fps > 0:
        parts.append(f"{p.fps:.2f} fps")
    if p.speed:
        parts.append(p.speed)
    if p.bitrate:
        parts.append(p.bitrate)
    if not parts:
        return "Processing..."
    return " | ".join(parts)


class ProgressThrottle:
    """
    Decides which progress snapshots are worth reporting.

    A snapshot is emitted when it moved more than `min_percent` past the last
    emitted percentage, or more than `min_frames` past the last emitted frame
    count. The first non-empty snapshot is always emitted; empty ones never are.
    One instance per transcode.
    """

    def __init__(self, min_percent: float = 1.0, min_frames: int = 100) -> None:
        self.min_percent = min_percent
        self.min_frames = min_frames
        self.last: Optional[FFmpegProgress] = None

    def offer(self, p: FFmpegProgress) -> bool:
        if p.is_empty:
            return False
        if (
            self.last is None
            or p.percentage > self.last.percentage + self.min_percent
            or p.frame > self.last.frame + self.min_frames
        ):
            self.last = p
            return True
        return False
