from __future__ import annotations
from typing import Protocol
from mediaforge.domain.entities.media_info import MediaInfo

class MediaProbePort(Protocol):
    def get_media_info(self, path: str) -> MediaInfo: ...
