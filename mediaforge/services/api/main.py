# mediaforge/services/api/main.py
from __future__ import annotations

import uvicorn

from mediaforge.common.settings import get_settings


def main() -> None:
    """Console entry point: serve the API on HOST/PORT from settings."""
    cfg = get_settings()
    uvicorn.run(
        "mediaforge.services.api.app:app",
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
