# mediaforge/domain/entities/progress.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class FFmpegProgress:
    """One progress snapshot parsed from a line of ffmpeg stderr."""
    frame: int = 0
    fps: float = 0.0
    total_size: int = 0                 # bytes written so far
    time: timedelta = timedelta(0)      # elapsed media time
    bitrate: str = ""                   # e.g. "2048.0kbits/s"
    speed: str = ""                     # e.g. "1.5x"
    percentage: float = 0.0             # 0..100, only when total duration is known

    @property
    def is_empty(self) -> bool:
        return not (
            self.frame or self.fps or self.total_size or self.time
            or self.bitrate or self.speed or self.percentage
        )
