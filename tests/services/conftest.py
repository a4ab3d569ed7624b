# tests/services/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from mediaforge.domain.entities.media_info import MediaInfo
from mediaforge.domain.entities.toolchain import ToolchainStatus
from mediaforge.services.api.app import create_app
from mediaforge.services.api.deps import (
    get_base_dir,
    get_media_probe,
    get_toolchain_inspector,
)


class _FakeInspector:
    def __init__(self, status: ToolchainStatus):
        self.status = status

    def check(self) -> ToolchainStatus:
        return self.status


@pytest.fixture()
def api_probe(probe_factory):
    return probe_factory(default=MediaInfo(filename="", size=4096, format="mov,mp4,m4a,3gp,3g2,mj2",
                                           duration="40.000000s", resolution="1920x1080",
                                           bitrate="5000000", codec="h264", frame_rate="30 fps"))


@pytest.fixture()
def toolchain_status() -> ToolchainStatus:
    return ToolchainStatus(
        status="OK",
        version="0.1.0",
        ffmpeg_available=True,
        ffmpeg_version="ffmpeg version 6.1.1",
        components={"libx264": "available", "libvpx": "available", "libopus": "not available"},
    )


@pytest.fixture()
def api_app(tmp_path, api_probe, toolchain_status):
    """
    App with ffprobe/ffmpeg-facing dependencies replaced: relative paths
    resolve under tmp_path, probing is in-memory, health is canned.
    Individual tests may add more overrides (e.g. get_transcoder).
    """
    app = create_app()
    app.dependency_overrides[get_base_dir] = lambda: tmp_path
    app.dependency_overrides[get_media_probe] = lambda: api_probe
    app.dependency_overrides[get_toolchain_inspector] = lambda: _FakeInspector(toolchain_status)
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(api_app):
    with TestClient(api_app) as client:
        yield client
