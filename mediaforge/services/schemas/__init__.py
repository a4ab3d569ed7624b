from mediaforge.services.schemas.media import (
    ProcessRequestSchema,
    ProcessResponse,
    CompareRequest,
    CompressRequest,
    CompressResponse,
    MediaInfoRead,
    CompareResultRead,
)
from mediaforge.services.schemas.health import HealthResponse

__all__ = [
    "ProcessRequestSchema",
    "ProcessResponse",
    "CompareRequest",
    "CompressRequest",
    "CompressResponse",
    "MediaInfoRead",
    "CompareResultRead",
    "HealthResponse",
]
