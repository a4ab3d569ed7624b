# mediaforge/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional

from mediaforge.domain.entities.media_info import MediaInfo


def build_ffprobe_cmd(input_path: str | Path, ffprobe_bin: str = "ffprobe") -> List[str]:
    """
    Build the ffprobe command that emits the JSON document we parse:
    quiet log level, format and stream sections.
    """
    return [
        ffprobe_bin,
        "-v", "quiet",
        "-print_format", "json",
        "-show_format",
        "-show_streams",
        str(input_path),
    ]


def parse_frame_rate(rate: Optional[str]) -> str:
    """
    Normalize an ffprobe `r_frame_rate` ratio for display.

    "30/1" -> "30 fps", "30000/1001" -> "29.97 fps"; anything that cannot be
    divided is returned as-is.
    """
    if not rate:
        return ""
    parts = rate.split("/")
    if len(parts) != 2:
        return rate
    num, den = parts
    if den == "1":
        return f"{num} fps"
    try:
        n = float(num)
        d = float(den)
    except ValueError:
        return rate
    if d > 0:
        return f"{n / d:.2f} fps"
    return rate


def _maybe_int(x: Any) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return 0


def _as_str(x: Any) -> str:
    return "" if x is None else str(x)


def parse_media_info(data: Dict[str, Any], filename: str, size: int) -> MediaInfo:
    """
    Turn ffprobe JSON into a MediaInfo. Safe to call in unit tests with fixture JSON.

    The video stream is the first stream with a positive width and height;
    audio-only files keep an empty resolution/codec/frame_rate. Format-level
    bitrate is only used when the video stream has none.
    """
    fmt = (data or {}).get("format") or {}
    streams = (data or {}).get("streams") or []

    resolution = codec = frame_rate = bitrate = ""
    for s in streams:
        width = _maybe_int(s.get("width"))
        height = _maybe_int(s.get("height"))
        if width > 0 and height > 0:
            resolution = f"{width}x{height}"
            codec = _as_str(s.get("codec_name"))
            bitrate = _as_str(s.get("bit_rate"))
            frame_rate = parse_frame_rate(_as_str(s.get("r_frame_rate")))
            break

    duration = _as_str(fmt.get("duration"))
    if duration:
        duration += "s"

    if not bitrate:
        bitrate = _as_str(fmt.get("bit_rate"))

    return MediaInfo(
        filename=filename,
        size=size,
        format=_as_str(fmt.get("format_name")),
        duration=duration,
        resolution=resolution,
        bitrate=bitrate,
        codec=codec,
        frame_rate=frame_rate,
    )
