# mediaforge/services/api/routers/media.py
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Query

from mediaforge.common.path.safe import resolve_against
from mediaforge.common.settings import get_settings
from mediaforge.domain.errors import MediaError
from mediaforge.domain.ports.probe import MediaProbePort
from mediaforge.domain.ports.transcoder import TranscoderPort
from mediaforge.services.api.deps import (
    get_base_dir,
    get_comparator,
    get_media_probe,
    get_transcoder,
)
from mediaforge.services.api.errors import media_http_error
from mediaforge.services.compare.comparator import MediaComparator
from mediaforge.services.mappers.media import (
    to_compare_result_read,
    to_domain_process_request,
    to_media_info_read,
)
from mediaforge.services.schemas import (
    CompareRequest,
    CompareResultRead,
    CompressRequest,
    CompressResponse,
    MediaInfoRead,
    ProcessRequestSchema,
    ProcessResponse,
)

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["media"])


@router.post("/process", response_model=ProcessResponse)
def process_media(
    payload: ProcessRequestSchema,
    base_dir: Path = Depends(get_base_dir),
    transcoder: TranscoderPort = Depends(get_transcoder),
) -> ProcessResponse:
    req = to_domain_process_request(payload, base_dir)
    try:
        output = transcoder.process_media(req)
    except MediaError as e:
        raise media_http_error("Processing", e)
    return ProcessResponse(output=output)


@router.post("/compare", response_model=CompareResultRead)
def compare_media(
    payload: CompareRequest,
    base_dir: Path = Depends(get_base_dir),
    comparator: MediaComparator = Depends(get_comparator),
) -> CompareResultRead:
    try:
        result = comparator.compare_media(
            resolve_against(base_dir, payload.original),
            resolve_against(base_dir, payload.processed),
        )
    except MediaError as e:
        raise media_http_error("Comparison", e)
    return to_compare_result_read(result)


@router.post("/compress", response_model=CompressResponse)
def compress_media(
    payload: CompressRequest,
    base_dir: Path = Depends(get_base_dir),
    transcoder: TranscoderPort = Depends(get_transcoder),
) -> CompressResponse:
    try:
        output = transcoder.compress_media(
            resolve_against(base_dir, payload.input),
            resolve_against(base_dir, payload.output),
            payload.bitrate,
        )
    except MediaError as e:
        raise media_http_error("Compression", e)
    return CompressResponse(output=output)


@router.get("/info", response_model=MediaInfoRead)
def get_media_info(
    path: str = Query(..., min_length=1, description="Media file, absolute or relative to the base directory"),
    base_dir: Path = Depends(get_base_dir),
    probe: MediaProbePort = Depends(get_media_probe),
) -> MediaInfoRead:
    try:
        info = probe.get_media_info(resolve_against(base_dir, path))
    except MediaError as e:
        raise media_http_error("Get media info", e)
    return to_media_info_read(info)
