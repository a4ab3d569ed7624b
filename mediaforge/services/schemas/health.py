# mediaforge/services/schemas/health.py
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["OK", "Warning"])
    version: str
    ffmpeg_available: bool
    ffmpeg_version: Optional[str] = None
    components: Dict[str, str] = Field(default_factory=dict)
