# mediaforge/domain/entities/compare_result.py
from __future__ import annotations

from dataclasses import dataclass

from mediaforge.domain.entities.media_info import MediaInfo


@dataclass(frozen=True)
class CompareResult:
    original: MediaInfo
    processed: MediaInfo
    size_diff_percent: float = 0.0
    resolution_changed: bool = False
    format_changed: bool = False
    codec_changed: bool = False
    bitrate_reduction_percent: float = 0.0
