# mediaforge/services/compare/comparator.py
from __future__ import annotations

from typing import Optional

from mediaforge.common.logging import get_logger
from mediaforge.domain.entities.compare_result import CompareResult
from mediaforge.domain.policies.comparison import compare_infos
from mediaforge.domain.ports.probe import MediaProbePort
from mediaforge.services.probe.ffprobe_adapter import FFprobeAdapter

logger = get_logger()


class MediaComparator:
    """Probes an original and a processed file and diffs the two results."""

    def __init__(self, probe: Optional[MediaProbePort] = None) -> None:
        self.probe: MediaProbePort = probe or FFprobeAdapter()

    def compare_media(self, original_path: str, processed_path: str) -> CompareResult:
        original = self.probe.get_media_info(original_path)
        processed = self.probe.get_media_info(processed_path)
        result = compare_infos(original, processed)
        logger.debug(
            "compare %s -> %s: size %.1f%%, bitrate %.1f%%",
            original_path, processed_path,
            result.size_diff_percent, result.bitrate_reduction_percent,
        )
        return result
