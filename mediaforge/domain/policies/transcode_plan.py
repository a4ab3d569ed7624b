# mediaforge/domain/policies/transcode_plan.py
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List

from mediaforge.domain.entities.process_request import ProcessRequest
from mediaforge.domain.enums.file_format import (
    AUDIO_CODEC_FALLBACK,
    DEFAULT_AUDIO_CODECS,
    DEFAULT_VIDEO_CODECS,
    ContainerFormat,
)
from mediaforge.domain.errors import MediaValidationError

_BITRATE_RE = re.compile(r"\d+[kM]", re.ASCII)

DISPLAY_BINARY = "ffmpeg"


@dataclass(frozen=True)
class TranscodePlan:
    """An ffmpeg argument vector (binary excluded) and the file it writes."""
    args: List[str]
    output: str

    def render(self) -> str:
        """Shell-like rendering for dry runs and logs. Never executed."""
        return " ".join([DISPLAY_BINARY, *self.args])


def split_ext(filename: str) -> tuple[str, str]:
    """
    Split at the last dot of the final path element.

    Unlike os.path.splitext a leading dot counts: ".clip" -> ("", ".clip").
    """
    base = os.path.basename(filename)
    dot = base.rfind(".")
    if dot == -1:
        return filename, ""
    cut = len(filename) - len(base) + dot
    return filename[:cut], filename[cut:]


def derive_process_output(input_path: str, fmt: str = "") -> str:
    """`processed_<stem>.<format|mp4>` next to the working directory."""
    stem, _ = split_ext(os.path.basename(input_path))
    ext = f".{fmt}" if fmt else f".{ContainerFormat.MP4}"
    return f"processed_{stem}{ext}"


def derive_compress_output(input_path: str) -> str:
    """`<dir>/<stem>_compressed<ext>` beside the input; extension kept verbatim."""
    directory, filename = os.path.split(input_path)
    stem, ext = split_ext(filename)
    return os.path.join(directory, f"{stem}_compressed{ext}")


def validate_bitrate(bitrate: str) -> None:
    if not _BITRATE_RE.fullmatch(bitrate or ""):
        raise MediaValidationError(
            f"invalid bitrate format '{bitrate}': must be digits followed by 'k' or 'M'"
        )


def plan_process(req: ProcessRequest) -> TranscodePlan:
    """
    Synthesize the ffmpeg arguments for a ProcessRequest.

    The order of options is fixed; identical requests produce identical
    vectors.
    """
    if not req.input:
        raise MediaValidationError("input path is required")

    output = req.output or derive_process_output(req.input, req.format)

    args: List[str] = [
        "-hide_banner",
        "-y",
        "-i", req.input,
        "-progress", "pipe:1",
    ]

    if req.resolution:
        args += ["-s", req.resolution]
    if req.bitrate:
        args += ["-b:v", req.bitrate]

    video_codec = req.codec or DEFAULT_VIDEO_CODECS.get(req.format, "")
    if video_codec:
        args += ["-c:v", video_codec]

    if req.frame_rate:
        args += ["-r", req.frame_rate]
    if req.crf:
        args += ["-crf", req.crf]
    if req.preset:
        args += ["-preset", req.preset]

    if req.format == ContainerFormat.GIF:
        args.append("-an")
    else:
        args += ["-c:a", DEFAULT_AUDIO_CODECS.get(req.format, AUDIO_CODEC_FALLBACK)]

    if req.format and not split_ext(output)[1]:
        output = f"{output}.{req.format}"

    args.append(output)
    return TranscodePlan(args=args, output=output)


def plan_compress(input_path: str, output_path: str, bitrate: str) -> TranscodePlan:
    """H.264 re-encode at a fixed bitrate, audio copied."""
    validate_bitrate(bitrate)
    if not input_path:
        raise MediaValidationError("input path is required")

    output = output_path or derive_compress_output(input_path)
    args = [
        "-i", input_path,
        "-b:v", bitrate,
        "-c:v", "libx264",
        "-preset", "medium",
        "-c:a", "copy",
        output,
    ]
    return TranscodePlan(args=args, output=output)
