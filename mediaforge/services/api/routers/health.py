# mediaforge/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from mediaforge.common.settings import get_settings
from mediaforge.services.api.deps import get_toolchain_inspector
from mediaforge.services.mappers.media import to_health_response
from mediaforge.services.schemas import HealthResponse
from mediaforge.services.toolchain.health import ToolchainInspector

cfg = get_settings()
router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.get(f"{cfg.api.prefix}/health", response_model=HealthResponse)
def health(inspector: ToolchainInspector = Depends(get_toolchain_inspector)) -> HealthResponse:
    return to_health_response(inspector.check())
