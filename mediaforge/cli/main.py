"""
Command-line client for a running mediaforge server.

Usage:
  mediaforge process -i clip.mov --format webm         # transcode
  mediaforge process -i clip.mov --format gif --dry-run
  mediaforge compress -i clip.mp4 --bitrate 800k
  mediaforge compare clip.mp4 clip_compressed.mp4
  mediaforge info clip.mp4
  mediaforge health
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import httpx

from mediaforge.cli.client import ApiClient, ApiError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediaforge",
        description="Inspect, transcode, compress and compare media through a mediaforge server.",
    )
    parser.add_argument("--url", help="Server base URL (default: settings CLIENT_BASE_URL)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON responses")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("process", help="Transcode a media file")
    p.add_argument("-i", "--input", required=True, help="Input file")
    p.add_argument("-o", "--output", help="Output file")
    p.add_argument("--resolution", help="Target resolution, e.g. 1280x720")
    p.add_argument("--bitrate", help="Video bitrate, e.g. 1000k")
    p.add_argument("--format", help="Output format, e.g. webm, mp4, gif")
    p.add_argument("--codec", help="Video codec, e.g. libx265")
    p.add_argument("--frame-rate", dest="frame_rate", help="Output frame rate")
    p.add_argument("--crf", help="Constant rate factor")
    p.add_argument("--preset", help="Encoder preset, e.g. medium")
    p.add_argument("--dry-run", dest="dry_run", action="store_true", help="Only show the ffmpeg command")

    c = sub.add_parser("compare", help="Compare an original and a processed file")
    c.add_argument("original")
    c.add_argument("processed")

    z = sub.add_parser("compress", help="Compress a video to a fixed bitrate")
    z.add_argument("-i", "--input", required=True)
    z.add_argument("-o", "--output")
    z.add_argument("--bitrate", required=True, help="e.g. 800k or 2M")

    n = sub.add_parser("info", help="Show media information")
    n.add_argument("path")

    sub.add_parser("health", help="Check server and ffmpeg availability")
    return parser


def _format_info(info: Dict[str, Any]) -> List[str]:
    rows = [
        ("File", info.get("filename")),
        ("Format", info.get("format")),
        ("Duration", info.get("duration")),
        ("Resolution", info.get("resolution")),
        ("Codec", info.get("codec")),
        ("Frame rate", info.get("frame_rate")),
        ("Bitrate", info.get("bitrate")),
        ("Size", f"{info.get('size', 0)} bytes"),
    ]
    return [f"  {label:<11} {value}" for label, value in rows if value]


def _format_compare(result: Dict[str, Any]) -> List[str]:
    lines = ["Original:"] + _format_info(result.get("original", {}))
    lines += ["Processed:"] + _format_info(result.get("processed", {}))
    lines.append(f"Size reduction:    {result.get('size_diff_percent', 0.0):.1f}%")
    lines.append(f"Bitrate reduction: {result.get('bitrate_reduction_percent', 0.0):.1f}%")
    for key, label in (
        ("resolution_changed", "Resolution"),
        ("format_changed", "Format"),
        ("codec_changed", "Codec"),
    ):
        lines.append(f"{label} changed: {'yes' if result.get(key) else 'no'}")
    return lines


def _format_health(health: Dict[str, Any]) -> List[str]:
    lines = [f"Status: {health.get('status')} (server {health.get('version')})"]
    if health.get("ffmpeg_available"):
        lines.append(f"ffmpeg: {health.get('ffmpeg_version')}")
    else:
        lines.append("ffmpeg: not available")
    for name, state in sorted((health.get("components") or {}).items()):
        lines.append(f"  {name}: {state}")
    return lines


def _run(args: argparse.Namespace, client: ApiClient) -> List[str]:
    if args.command == "process":
        request = {
            key: getattr(args, key)
            for key in (
                "input", "output", "resolution", "bitrate", "format",
                "codec", "frame_rate", "crf", "preset", "dry_run",
            )
        }
        data = client.process_media(request)
        label = "Command" if args.dry_run else "Output"
        return [json.dumps(data)] if args.json else [f"{label}: {data.get('output')}"]

    if args.command == "compare":
        data = client.compare_media(args.original, args.processed)
        return [json.dumps(data, indent=2)] if args.json else _format_compare(data)

    if args.command == "compress":
        data = client.compress_media(args.input, args.bitrate, args.output)
        return [json.dumps(data)] if args.json else [f"{data.get('message')}: {data.get('output')}"]

    if args.command == "info":
        data = client.get_media_info(args.path)
        return [json.dumps(data, indent=2)] if args.json else _format_info(data)

    data = client.check_health()
    return [json.dumps(data, indent=2)] if args.json else _format_health(data)


def main(argv: Optional[List[str]] = None, client: Optional[ApiClient] = None) -> int:
    """Main entry point for the mediaforge CLI."""
    args = _build_parser().parse_args(argv)
    client = client or ApiClient(base_url=args.url)
    try:
        with client:
            lines = _run(args, client)
    except ApiError as e:
        print(str(e), file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Failed to reach backend: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
