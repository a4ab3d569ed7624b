# mediaforge/cli/client.py
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from mediaforge.common.logging import get_logger
from mediaforge.common.settings import get_settings

logger = get_logger(__name__)


class ApiError(RuntimeError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Backend returned error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class ApiClient:
    """Thin JSON client for the mediaforge HTTP API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        cfg = get_settings()
        self.base_url = (base_url or cfg.client_base_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout or cfg.client_timeout_sec,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- endpoints ------------------------------------------------------------
    def process_media(self, request: Dict[str, Any]) -> Dict[str, Any]:
        # drop unset options so the server applies its own defaults
        body = {k: v for k, v in request.items() if v not in (None, "", False)}
        return self._send("POST", "/api/process", json=body)

    def compare_media(self, original: str, processed: str) -> Dict[str, Any]:
        return self._send("POST", "/api/compare", json={"original": original, "processed": processed})

    def compress_media(self, input_path: str, bitrate: str, output: Optional[str] = None) -> Dict[str, Any]:
        body = {"input": input_path, "bitrate": bitrate}
        if output:
            body["output"] = output
        return self._send("POST", "/api/compress", json=body)

    def get_media_info(self, path: str) -> Dict[str, Any]:
        return self._send("GET", "/api/info", params={"path": path})

    def check_health(self) -> Dict[str, Any]:
        return self._send("GET", "/health")

    # ---- internals ------------------------------------------------------------
    def _send(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        logger.debug("%s %s%s", method, self.base_url, url)
        resp = self._client.request(method, url, **kwargs)
        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text)
        return resp.json()
