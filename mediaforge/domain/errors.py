# mediaforge/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import ClassVar, Optional


@dataclass(eq=False)
class MediaError(RuntimeError):
    """
    Base class for every failure the media engine reports.

    The engine never recovers internally; it tags the failure and lets the
    caller (the HTTP layer, the CLI) decide how to surface it.
    `detail` carries raw tool output for diagnosis (stderr tail, probe stdout).
    """
    message: str
    detail: Optional[str] = None

    tag: ClassVar[str] = "media"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class MediaValidationError(MediaError):
    """Malformed request: missing required field, bad bitrate format."""
    tag: ClassVar[str] = "validation"
    http_status: ClassVar[int] = HTTPStatus.BAD_REQUEST


@dataclass(eq=False)
class MediaIOError(MediaError):
    """stat() or mkdir() failed."""
    tag: ClassVar[str] = "io"


@dataclass(eq=False)
class ToolUnavailableError(MediaError):
    """The ffmpeg/ffprobe binary is missing or cannot be executed."""
    tag: ClassVar[str] = "tool_unavailable"


@dataclass(eq=False)
class ProbeParseError(MediaError):
    """ffprobe produced output that is not valid JSON."""
    tag: ClassVar[str] = "parse"


@dataclass(eq=False)
class ToolFailureError(MediaError):
    """An external tool exited non-zero; `detail` holds its stderr tail."""
    returncode: Optional[int] = None

    tag: ClassVar[str] = "tool_failure"

    def __str__(self) -> str:
        if self.returncode is None:
            return self.message
        return f"{self.message} (exit code {self.returncode})"
