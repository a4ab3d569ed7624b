# mediaforge/services/api/deps.py
from __future__ import annotations

from pathlib import Path

from fastapi import Depends

from mediaforge.common.settings import get_settings
from mediaforge.domain.ports.probe import MediaProbePort
from mediaforge.domain.ports.transcoder import TranscoderPort
from mediaforge.services.compare.comparator import MediaComparator
from mediaforge.services.probe.ffprobe_adapter import FFprobeAdapter
from mediaforge.services.toolchain.health import ToolchainInspector
from mediaforge.services.transcode.ffmpeg_transcoder import FFmpegTranscoder


def get_base_dir() -> Path:
    """Directory that relative request paths are resolved against."""
    return get_settings().base_dir


def get_media_probe() -> MediaProbePort:
    """
    Provide a MediaProbePort implementation (ffprobe) via DI.
    Tests override this to avoid spawning ffprobe.
    """
    return FFprobeAdapter()


def get_transcoder(probe: MediaProbePort = Depends(get_media_probe)) -> TranscoderPort:
    return FFmpegTranscoder(probe=probe)


def get_comparator(probe: MediaProbePort = Depends(get_media_probe)) -> MediaComparator:
    return MediaComparator(probe=probe)


def get_toolchain_inspector() -> ToolchainInspector:
    return ToolchainInspector()
