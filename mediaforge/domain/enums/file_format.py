# mediaforge/domain/enums/file_format.py
from __future__ import annotations

from enum import StrEnum


class ContainerFormat(StrEnum):
    MP4 = "mp4"
    WEBM = "webm"
    GIF = "gif"


# Video codec used when the request names a format but no codec.
DEFAULT_VIDEO_CODECS: dict[str, str] = {
    ContainerFormat.WEBM: "libvpx-vp9",
    ContainerFormat.MP4: "libx264",
}

# Audio codec per output format; anything unlisted gets AUDIO_CODEC_FALLBACK.
DEFAULT_AUDIO_CODECS: dict[str, str] = {
    ContainerFormat.WEBM: "libopus",
}
AUDIO_CODEC_FALLBACK = "aac"

# Encoders reported by the health endpoint.
HEALTH_COMPONENTS: tuple[str, ...] = ("libx264", "libvpx", "libopus")
