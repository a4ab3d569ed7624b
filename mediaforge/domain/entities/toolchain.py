# mediaforge/domain/entities/toolchain.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ToolchainStatus:
    status: str = "OK"                  # OK | Warning
    version: str = ""
    ffmpeg_available: bool = False
    ffmpeg_version: str = ""
    components: Dict[str, str] = field(default_factory=dict)
