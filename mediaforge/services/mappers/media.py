# mediaforge/services/mappers/media.py
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from mediaforge.common.path.safe import resolve_against
from mediaforge.domain.entities.compare_result import CompareResult
from mediaforge.domain.entities.media_info import MediaInfo
from mediaforge.domain.entities.process_request import ProcessRequest
from mediaforge.domain.entities.toolchain import ToolchainStatus
from mediaforge.services.schemas import (
    CompareResultRead,
    HealthResponse,
    MediaInfoRead,
    ProcessRequestSchema,
)


def to_domain_process_request(payload: ProcessRequestSchema, base_dir: Path) -> ProcessRequest:
    """Schema -> domain; relative input/output are anchored at base_dir."""
    return ProcessRequest(
        input=resolve_against(base_dir, payload.input),
        output=resolve_against(base_dir, payload.output),
        resolution=payload.resolution or "",
        bitrate=payload.bitrate or "",
        format=payload.format or "",
        codec=payload.codec or "",
        frame_rate=payload.frame_rate or "",
        crf=payload.crf or "",
        preset=payload.preset or "",
        dry_run=payload.dry_run,
    )


def to_media_info_read(info: MediaInfo) -> MediaInfoRead:
    return MediaInfoRead(**asdict(info))


def to_compare_result_read(result: CompareResult) -> CompareResultRead:
    return CompareResultRead(
        original=to_media_info_read(result.original),
        processed=to_media_info_read(result.processed),
        size_diff_percent=result.size_diff_percent,
        resolution_changed=result.resolution_changed,
        bitrate_reduction_percent=result.bitrate_reduction_percent,
        format_changed=result.format_changed,
        codec_changed=result.codec_changed,
    )


def to_health_response(status: ToolchainStatus) -> HealthResponse:
    return HealthResponse(
        status=status.status,
        version=status.version,
        ffmpeg_available=status.ffmpeg_available,
        ffmpeg_version=status.ffmpeg_version or None,
        components=dict(status.components),
    )
