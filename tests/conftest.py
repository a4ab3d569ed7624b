# tests/conftest.py
from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Dict, List, Optional

import pytest

from mediaforge.common import settings as settings_mod
from mediaforge.domain.entities.media_info import MediaInfo
from mediaforge.domain.errors import MediaIOError


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings built from its own (monkeypatched) environment."""
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


class FakeProbe:
    """In-memory MediaProbePort: path -> MediaInfo, records every call."""

    def __init__(self, infos: Optional[Dict[str, MediaInfo]] = None, default: Optional[MediaInfo] = None):
        self.infos = dict(infos or {})
        self.default = default
        self.calls: List[str] = []

    def get_media_info(self, path: str) -> MediaInfo:
        self.calls.append(path)
        if path in self.infos:
            return self.infos[path]
        if self.default is not None:
            return replace(self.default, filename=path)
        raise MediaIOError(f"failed to get file info: no such file {path}")


class ExplodingProbe:
    """A probe that must never be called (dry runs)."""

    def get_media_info(self, path: str) -> MediaInfo:
        raise AssertionError(f"probe called for {path}")


@pytest.fixture()
def fake_probe() -> FakeProbe:
    return FakeProbe(default=MediaInfo(filename="", size=1000, format="mov,mp4,m4a,3gp,3g2,mj2", duration="40.000000s"))


@pytest.fixture()
def ffprobe_payload() -> Dict[str, Any]:
    """A typical ffprobe -show_format -show_streams document (video + audio)."""
    return {
        "streams": [
            {
                "index": 0,
                "codec_name": "h264",
                "codec_type": "video",
                "width": 1920,
                "height": 1080,
                "r_frame_rate": "30000/1001",
                "bit_rate": "4800000",
            },
            {
                "index": 1,
                "codec_name": "aac",
                "codec_type": "audio",
                "bit_rate": "128000",
                "r_frame_rate": "0/0",
            },
        ],
        "format": {
            "filename": "clip.mp4",
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "duration": "12.345000",
            "bit_rate": "4950000",
        },
    }


@pytest.fixture()
def ffprobe_json(ffprobe_payload) -> str:
    return json.dumps(ffprobe_payload)


@pytest.fixture()
def probe_factory():
    """Build a FakeProbe: probe_factory({path: MediaInfo}, default=MediaInfo(...))."""
    return FakeProbe


@pytest.fixture()
def exploding_probe() -> ExplodingProbe:
    return ExplodingProbe()
