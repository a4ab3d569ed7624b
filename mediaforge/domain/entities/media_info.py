# mediaforge/domain/entities/media_info.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaInfo:
    """
    Normalized, framework-free description of one media file.

    String fields are empty when the probe did not report them; nothing here
    is Optional so that two records can be compared field by field.
    """
    filename: str
    size: int = 0
    format: str = ""
    duration: str = ""      # "<seconds>s", e.g. "12.345000s"
    resolution: str = ""    # "<W>x<H>"
    bitrate: str = ""       # bits/s as reported by ffprobe
    codec: str = ""
    frame_rate: str = ""    # "30 fps" / "29.97 fps" / raw ratio

    @property
    def duration_seconds(self) -> float | None:
        """Numeric duration, or None when missing or unparsable."""
        if not self.duration:
            return None
        try:
            return float(self.duration.removesuffix("s"))
        except ValueError:
            return None
