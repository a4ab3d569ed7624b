# mediaforge/services/transcode/ffmpeg_transcoder.py
from __future__ import annotations

import subprocess
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from pathlib import Path
from typing import IO, List, Optional

from mediaforge.common.logging import get_logger
from mediaforge.common.progress.ffmpeg_progress import (
    ProgressThrottle,
    format_progress,
    parse_progress,
)
from mediaforge.common.settings import get_settings
from mediaforge.domain.entities.process_request import ProcessRequest
from mediaforge.domain.entities.progress import FFmpegProgress
from mediaforge.domain.errors import MediaIOError, ToolFailureError, ToolUnavailableError
from mediaforge.domain.policies.transcode_plan import plan_compress, plan_process
from mediaforge.domain.ports.probe import MediaProbePort
from mediaforge.domain.ports.transcoder import ProgressCallback, TranscoderPort
from mediaforge.services.probe.ffprobe_adapter import FFprobeAdapter

logger = get_logger()


def _log_progress(p: FFmpegProgress) -> None:
    logger.info("Progress: %s", format_progress(p))


def ensure_parent_dir(path: str) -> None:
    """Create the output's parent directory (0755). An existing directory is fine."""
    try:
        Path(path).parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise MediaIOError(f"failed to create output directory: {e}") from e


class FFmpegTranscoder(TranscoderPort):
    """
    Runs ffmpeg for process/compress requests.

    All state is per call: the progress throttle, the stderr tail and the
    reader thread live only as long as one transcode. Concurrent requests must
    use distinct output paths; nothing here locks them.
    """

    def __init__(
        self,
        probe: Optional[MediaProbePort] = None,
        ffmpeg_bin: Optional[str] = None,
        stderr_tail_lines: Optional[int] = None,
    ) -> None:
        cfg = get_settings()
        self.probe: MediaProbePort = probe or FFprobeAdapter()
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg.ffmpeg_bin
        self.stderr_tail_lines = int(stderr_tail_lines or cfg.ffmpeg.stderr_tail_lines)

    # ---- Port API -------------------------------------------------------------
    def process_media(
        self,
        req: ProcessRequest,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str:
        """
        Transcode `req.input` and return the output path.

        For a dry run the rendered command line is returned instead and
        neither the filesystem nor ffprobe is touched.
        """
        plan = plan_process(req)
        command = plan.render()

        if req.dry_run:
            logger.info("[dry-run] %s", command)
            return command

        total = self._input_duration(req.input)

        ensure_parent_dir(plan.output)
        logger.info("Executing: %s", command)

        emit = on_progress or _log_progress
        try:
            proc = subprocess.Popen(
                [self.ffmpeg_bin, *plan.args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,  # -progress pipe:1 key/value stream, unused
                stderr=subprocess.PIPE,
                text=True,                  # universal newlines: '\r' status updates become lines
                errors="replace",
            )
        except OSError as e:
            raise ToolUnavailableError(f"failed to start {self.ffmpeg_bin}: {e}") from e

        with proc, ThreadPoolExecutor(max_workers=1, thread_name_prefix="ffmpeg-stderr") as pool:
            reader = pool.submit(self._drain_stderr, proc.stderr, total, emit)
            returncode = proc.wait()
            tail = reader.result()

        if returncode != 0:
            logger.warning("ffmpeg exited with %s for %s", returncode, req.input)
            raise ToolFailureError(
                "ffmpeg processing failed",
                detail="\n".join(tail),
                returncode=returncode,
            )

        logger.info("Processing complete: %s", plan.output)
        return plan.output

    def compress_media(self, input_path: str, output_path: str, bitrate: str) -> str:
        """
        Re-encode to H.264 at `bitrate` (e.g. "800k", "2M"), copying audio.
        Returns the output path (derived as `<stem>_compressed<ext>` when empty).
        """
        plan = plan_compress(input_path, output_path, bitrate)
        ensure_parent_dir(plan.output)
        logger.info("Executing: %s", plan.render())

        try:
            proc = subprocess.run(
                [self.ffmpeg_bin, *plan.args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ToolUnavailableError(f"failed to start {self.ffmpeg_bin}: {e}") from e

        if proc.returncode != 0:
            logger.warning("compression of %s exited with %s", input_path, proc.returncode)
            raise ToolFailureError("compression failed", detail=proc.stdout, returncode=proc.returncode)

        logger.info("Successfully compressed video to %s with bitrate %s", plan.output, bitrate)
        return plan.output

    # ---- internals ------------------------------------------------------------
    def _input_duration(self, input_path: str) -> timedelta:
        info = self.probe.get_media_info(input_path)
        seconds = info.duration_seconds
        if not seconds or seconds < 0:
            return timedelta(0)
        return timedelta(seconds=seconds)

    def _drain_stderr(
        self,
        stream: IO[str],
        total: timedelta,
        emit: ProgressCallback,
    ) -> List[str]:
        """
        Read ffmpeg stderr to EOF, emitting throttled progress.

        Keeps reading after a failing callback so the pipe never backs up;
        the first callback error is re-raised once the stream is exhausted.
        Returns the last `stderr_tail_lines` lines.
        """
        tail: deque[str] = deque(maxlen=self.stderr_tail_lines)
        throttle = ProgressThrottle()
        callback_error: Optional[BaseException] = None

        for raw in stream:
            line = raw.rstrip("\n")
            if not line:
                continue
            tail.append(line)
            progress = parse_progress(line, total)
            if not throttle.offer(progress) or callback_error is not None:
                continue
            try:
                emit(progress)
            except Exception as e:
                logger.exception("progress callback failed")
                callback_error = e

        if callback_error is not None:
            raise callback_error
        return list(tail)
