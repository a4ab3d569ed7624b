import os
from pathlib import Path

from mediaforge.common.path.safe import resolve_against, resolve_root


def test_resolve_root(tmp_path):
    p = resolve_root(tmp_path)
    assert isinstance(p, Path)
    assert p.is_absolute()
    assert p.exists()


def test_resolve_against_relative_joins_base(tmp_path):
    assert resolve_against(tmp_path, "videos/a.mp4") == os.path.join(str(tmp_path), "videos/a.mp4")


def test_resolve_against_absolute_passes_through(tmp_path):
    absolute = str(tmp_path / "elsewhere" / "b.mp4")
    assert resolve_against("/srv/media", absolute) == absolute


def test_resolve_against_empty_stays_empty(tmp_path):
    assert resolve_against(tmp_path, "") == ""
    assert resolve_against(tmp_path, None) == ""
