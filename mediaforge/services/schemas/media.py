# mediaforge/services/schemas/media.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ProcessRequestSchema(BaseModel):
    input: str = Field(..., min_length=1, examples=["videos/input.mov"])
    output: Optional[str] = Field(None, examples=["videos/output.webm"])
    resolution: Optional[str] = Field(None, examples=["1280x720"])
    bitrate: Optional[str] = Field(None, examples=["1500k"])
    format: Optional[str] = Field(None, examples=["mp4", "webm", "gif"])
    codec: Optional[str] = Field(None, examples=["libx265"])
    frame_rate: Optional[str] = Field(None, examples=["30"])
    crf: Optional[str] = Field(None, examples=["23"])
    preset: Optional[str] = Field(None, examples=["medium"])
    dry_run: bool = False


class ProcessResponse(BaseModel):
    output: str = Field(..., description="Output path, or the rendered command for a dry run")


class CompareRequest(BaseModel):
    original: str = Field(..., min_length=1)
    processed: str = Field(..., min_length=1)


class CompressRequest(BaseModel):
    input: str = Field(..., min_length=1)
    output: Optional[str] = None
    bitrate: str = Field(..., min_length=1, examples=["800k", "2M"])


class CompressResponse(BaseModel):
    output: str
    status: str = "success"
    message: str = "Video compressed successfully"


class MediaInfoRead(BaseModel):
    filename: str
    format: str = ""
    duration: str = ""
    resolution: str = ""
    bitrate: str = ""
    size: int = Field(0, ge=0)
    codec: str = ""
    frame_rate: str = ""


class CompareResultRead(BaseModel):
    original: MediaInfoRead
    processed: MediaInfoRead
    size_diff_percent: float
    resolution_changed: bool
    bitrate_reduction_percent: float
    format_changed: bool
    codec_changed: bool
