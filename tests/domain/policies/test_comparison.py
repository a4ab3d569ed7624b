import pytest

from mediaforge.domain.entities.media_info import MediaInfo
from mediaforge.domain.policies.comparison import bitrate_value, compare_infos


def _info(**kw) -> MediaInfo:
    base = dict(filename="f.mp4", size=1000, format="mp4", resolution="1920x1080", codec="h264", bitrate="5000")
    base.update(kw)
    return MediaInfo(**base)


def test_compare_reference_scenario():
    orig = _info(size=1000, resolution="1920x1080", bitrate="5000")
    proc = _info(size=400, resolution="1280x720", bitrate="1500")
    r = compare_infos(orig, proc)
    assert r.size_diff_percent == pytest.approx(60.0)
    assert r.resolution_changed is True
    assert r.format_changed is False
    assert r.codec_changed is False
    assert r.bitrate_reduction_percent == pytest.approx(70.0)


def test_compare_identical():
    info = _info()
    r = compare_infos(info, info)
    assert r.size_diff_percent == 0
    assert not (r.resolution_changed or r.format_changed or r.codec_changed)
    assert r.bitrate_reduction_percent == 0


def test_compare_bitrate_with_units():
    r = compare_infos(_info(bitrate="5000 kb/s"), _info(bitrate="2500 kb/s"))
    assert r.bitrate_reduction_percent == pytest.approx(50.0)


def test_compare_growth_is_negative():
    r = compare_infos(_info(size=100), _info(size=150))
    assert r.size_diff_percent == pytest.approx(-50.0)


def test_compare_zero_original_size_does_not_divide():
    r = compare_infos(_info(size=0), _info(size=10))
    assert r.size_diff_percent == 0


@pytest.mark.parametrize(
    "orig, proc",
    [("", "1500"), ("5000", ""), ("0", "1500"), ("fast", "1500"), ("5000", "n/a")],
)
def test_compare_bitrate_missing_or_unparsable(orig, proc):
    r = compare_infos(_info(bitrate=orig), _info(bitrate=proc))
    assert r.bitrate_reduction_percent == 0


def test_compare_format_and_codec_changes():
    r = compare_infos(_info(format="mov,mp4", codec="prores"), _info(format="matroska,webm", codec="vp9"))
    assert r.format_changed is True
    assert r.codec_changed is True


@pytest.mark.parametrize(
    "raw, value",
    [("5000", 5000.0), ("5000 kb/s", 5000.0), ("2048.0kbits/s", 2048.0), ("", None), ("kb/s", None)],
)
def test_bitrate_value(raw, value):
    assert bitrate_value(raw) == value
