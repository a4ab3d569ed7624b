from __future__ import annotations

from typing import Callable, Optional, Protocol

from mediaforge.domain.entities.process_request import ProcessRequest
from mediaforge.domain.entities.progress import FFmpegProgress

ProgressCallback = Callable[[FFmpegProgress], None]


class TranscoderPort(Protocol):
    def process_media(
        self,
        req: ProcessRequest,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str: ...

    def compress_media(self, input_path: str, output_path: str, bitrate: str) -> str: ...
