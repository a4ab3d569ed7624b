from mediaforge.domain.enums.file_format import (
    ContainerFormat,
    DEFAULT_VIDEO_CODECS,
    DEFAULT_AUDIO_CODECS,
    AUDIO_CODEC_FALLBACK,
    HEALTH_COMPONENTS,
)
__all__ = [
    "ContainerFormat",
    "DEFAULT_VIDEO_CODECS",
    "DEFAULT_AUDIO_CODECS",
    "AUDIO_CODEC_FALLBACK",
    "HEALTH_COMPONENTS",
]
