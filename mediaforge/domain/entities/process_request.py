# mediaforge/domain/entities/process_request.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessRequest:
    """
    Declarative transcode request. Empty strings mean "not set";
    any combination of the optional knobs is allowed.
    """
    input: str
    output: str = ""
    resolution: str = ""
    bitrate: str = ""
    format: str = ""
    codec: str = ""
    frame_rate: str = ""
    crf: str = ""
    preset: str = ""
    dry_run: bool = False
