# mediaforge/domain/policies/comparison.py
from __future__ import annotations

import string
from typing import Optional

from mediaforge.domain.entities.compare_result import CompareResult
from mediaforge.domain.entities.media_info import MediaInfo

# Unit suffixes seen in bitrate strings ("5000 kb/s", "2048.0kbits/s").
_BITRATE_SUFFIX_CHARS = string.ascii_letters + " /"


def bitrate_value(bitrate: str) -> Optional[float]:
    """Numeric part of a bitrate string, or None when it does not parse."""
    if not bitrate:
        return None
    try:
        return float(bitrate.rstrip(_BITRATE_SUFFIX_CHARS))
    except ValueError:
        return None


def percent_reduction(before: float, after: float) -> float:
    if before == 0:
        return 0.0
    return (before - after) / before * 100


def compare_infos(original: MediaInfo, processed: MediaInfo) -> CompareResult:
    """Diff two probe results. Positive percentages mean the processed file got smaller."""
    bitrate_reduction = 0.0
    orig_bps = bitrate_value(original.bitrate)
    proc_bps = bitrate_value(processed.bitrate)
    if orig_bps is not None and proc_bps is not None and orig_bps > 0:
        bitrate_reduction = percent_reduction(orig_bps, proc_bps)

    return CompareResult(
        original=original,
        processed=processed,
        size_diff_percent=percent_reduction(float(original.size), float(processed.size)),
        resolution_changed=original.resolution != processed.resolution,
        format_changed=original.format != processed.format,
        codec_changed=original.codec != processed.codec,
        bitrate_reduction_percent=bitrate_reduction,
    )
