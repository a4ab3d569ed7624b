# mediaforge/services/toolchain/health.py
from __future__ import annotations

import subprocess
from typing import Iterable, Optional

from mediaforge.common.logging import get_logger
from mediaforge.common.settings import get_settings
from mediaforge.domain.entities.toolchain import ToolchainStatus
from mediaforge.domain.enums.file_format import HEALTH_COMPONENTS

logger = get_logger()

AVAILABLE = "available"
NOT_AVAILABLE = "not available"
UNKNOWN = "unknown"


def first_line(output: str) -> str:
    return output.split("\n", 1)[0].strip()


class ToolchainInspector:
    """
    Reports whether ffmpeg can be executed and which encoders it ships.
    A missing ffmpeg degrades the status to "Warning" rather than failing.
    """

    def __init__(self, ffmpeg_bin: Optional[str] = None, timeout_sec: Optional[int] = None) -> None:
        cfg = get_settings()
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg.ffmpeg_bin
        self.timeout_sec = int(timeout_sec or cfg.ffmpeg.health_timeout_sec)
        self.app_version = cfg.app_version

    def check(self, components: Iterable[str] = HEALTH_COMPONENTS) -> ToolchainStatus:
        status = ToolchainStatus(status="OK", version=self.app_version)

        version_out = self._run("-version")
        if version_out is None:
            status.status = "Warning"
            return status

        status.ffmpeg_available = True
        status.ffmpeg_version = first_line(version_out)

        encoders = self._run("-hide_banner", "-encoders")
        for name in components:
            if encoders is None:
                status.components[name] = UNKNOWN
            elif name.lower() in encoders.lower():
                status.components[name] = AVAILABLE
            else:
                status.components[name] = NOT_AVAILABLE
        return status

    def _run(self, *args: str) -> Optional[str]:
        """stdout of `ffmpeg <args>`, or None when it cannot run or exits non-zero."""
        try:
            proc = subprocess.run(
                [self.ffmpeg_bin, *args],
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout_sec,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("%s %s unavailable: %s", self.ffmpeg_bin, " ".join(args), e)
            return None
        return proc.stdout
