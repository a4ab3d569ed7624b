# mediaforge/services/probe/ffprobe_adapter.py
from __future__ import annotations

import json
import os
import shlex
import subprocess
from typing import Optional

from mediaforge.common.logging import get_logger
from mediaforge.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_media_info
from mediaforge.common.settings import get_settings
from mediaforge.domain.entities.media_info import MediaInfo
from mediaforge.domain.errors import (
    MediaIOError,
    ProbeParseError,
    ToolFailureError,
    ToolUnavailableError,
)
from mediaforge.domain.ports.probe import MediaProbePort

logger = get_logger()


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        self.ffprobe_bin = ffprobe_bin or cfg.ffmpeg.ffprobe_bin
        self.timeout_sec = int(timeout_sec or cfg.ffmpeg.probe_timeout_sec)

    # ---- Port API -------------------------------------------------------------
    def get_media_info(self, path: str) -> MediaInfo:
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise MediaIOError(f"failed to get file info: {e}") from e

        cmd = build_ffprobe_cmd(path, self.ffprobe_bin)
        logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
                check=False,  # we handle rc manually to attach stderr
            )
        except subprocess.TimeoutExpired as e:
            raise ToolFailureError(f"ffprobe timed out after {self.timeout_sec}s", detail=str(e)) from e
        except OSError as e:
            raise ToolUnavailableError(f"failed to execute {self.ffprobe_bin}: {e}") from e

        if proc.returncode != 0:
            raise ToolFailureError("ffprobe failed", detail=proc.stderr, returncode=proc.returncode)

        try:
            data = json.loads(proc.stdout or "{}")
        except json.JSONDecodeError as e:
            raise ProbeParseError(f"failed to parse ffprobe output: {e}", detail=proc.stdout) from e
        problem = _shape_problem(data)
        if problem:
            raise ProbeParseError(f"unexpected ffprobe output: {problem}", detail=proc.stdout)

        return parse_media_info(data, filename=path, size=size)


def _shape_problem(data: object) -> Optional[str]:
    """Describe why `data` is not an ffprobe format/streams document, or None if it is."""
    if not isinstance(data, dict):
        return "not a JSON object"
    fmt = data.get("format")
    if fmt is not None and not isinstance(fmt, dict):
        return "'format' is not an object"
    streams = data.get("streams")
    if streams is None:
        return None
    if not isinstance(streams, list):
        return "'streams' is not a list"
    if not all(isinstance(s, dict) for s in streams):
        return "'streams' entries must be objects"
    return None
