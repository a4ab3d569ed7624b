import os

import pytest

from mediaforge.domain.entities.process_request import ProcessRequest
from mediaforge.domain.errors import MediaValidationError
from mediaforge.domain.policies.transcode_plan import (
    derive_compress_output,
    derive_process_output,
    plan_compress,
    plan_process,
    split_ext,
    validate_bitrate,
)


def test_plan_process_webm_defaults():
    plan = plan_process(ProcessRequest(input="a.mp4", format="webm"))
    assert plan.args == [
        "-hide_banner", "-y", "-i", "a.mp4", "-progress", "pipe:1",
        "-c:v", "libvpx-vp9",
        "-c:a", "libopus",
        "processed_a.webm",
    ]
    assert plan.output == "processed_a.webm"
    assert plan.render() == (
        "ffmpeg -hide_banner -y -i a.mp4 -progress pipe:1 "
        "-c:v libvpx-vp9 -c:a libopus processed_a.webm"
    )


def test_plan_process_gif_drops_audio():
    plan = plan_process(ProcessRequest(input="a.mov", format="gif"))
    assert "-an" in plan.args
    assert "-c:a" not in plan.args
    assert "-c:v" not in plan.args
    assert plan.output == "processed_a.gif"


def test_plan_process_no_format_uses_tool_defaults():
    plan = plan_process(ProcessRequest(input="/in/clip.mkv"))
    assert plan.args == [
        "-hide_banner", "-y", "-i", "/in/clip.mkv", "-progress", "pipe:1",
        "-c:a", "aac",
        "processed_clip.mp4",
    ]


def test_plan_process_option_order_is_fixed():
    req = ProcessRequest(
        input="in.mov",
        output="out/final.mp4",
        resolution="1280x720",
        bitrate="1500k",
        format="mp4",
        codec="libx265",
        frame_rate="24",
        crf="23",
        preset="slow",
    )
    assert plan_process(req).args == [
        "-hide_banner", "-y", "-i", "in.mov", "-progress", "pipe:1",
        "-s", "1280x720",
        "-b:v", "1500k",
        "-c:v", "libx265",
        "-r", "24",
        "-crf", "23",
        "-preset", "slow",
        "-c:a", "aac",
        "out/final.mp4",
    ]


def test_plan_process_explicit_codec_beats_format_default():
    plan = plan_process(ProcessRequest(input="a.mp4", format="webm", codec="libvpx"))
    i = plan.args.index("-c:v")
    assert plan.args[i + 1] == "libvpx"
    assert plan.args.count("-c:v") == 1


def test_plan_process_appends_format_to_extensionless_output():
    plan = plan_process(ProcessRequest(input="a.mp4", output="out/result", format="webm"))
    assert plan.output == "out/result.webm"
    assert plan.args[-1] == "out/result.webm"


def test_plan_process_keeps_output_extension():
    plan = plan_process(ProcessRequest(input="a.mp4", output="out/result.mkv", format="webm"))
    assert plan.output == "out/result.mkv"


def test_plan_process_is_deterministic():
    req = ProcessRequest(input="a.mp4", resolution="640x360", format="mp4", crf="28")
    assert plan_process(req) == plan_process(req)


def test_plan_process_requires_input():
    with pytest.raises(MediaValidationError):
        plan_process(ProcessRequest(input=""))


def test_derive_process_output():
    assert derive_process_output("/videos/holiday.final.mov") == "processed_holiday.final.mp4"
    assert derive_process_output("clip", "gif") == "processed_clip.gif"


def test_plan_compress_vector():
    plan = plan_compress("in.mp4", "", "800k")
    assert plan.args == [
        "-i", "in.mp4", "-b:v", "800k", "-c:v", "libx264",
        "-preset", "medium", "-c:a", "copy", "in_compressed.mp4",
    ]
    assert plan.output == "in_compressed.mp4"


def test_plan_compress_explicit_output():
    plan = plan_compress("in.mp4", "small/out.mp4", "2M")
    assert plan.output == "small/out.mp4"
    assert plan.args[-1] == "small/out.mp4"


def test_derive_compress_output_keeps_directory_and_extension():
    assert derive_compress_output(os.path.join("media", "a.MOV")) == os.path.join("media", "a_compressed.MOV")
    assert derive_compress_output("noext") == "noext_compressed"


def test_dotfile_inputs_treat_leading_dot_as_extension():
    assert derive_compress_output(os.path.join("d", ".clip")) == os.path.join("d", "_compressed.clip")
    assert derive_process_output("/d/.clip", "webm") == "processed_.webm"


def test_split_ext():
    assert split_ext("a.tar.gz") == ("a.tar", ".gz")
    assert split_ext(".clip") == ("", ".clip")
    assert split_ext(os.path.join("dir.v2", "noext")) == (os.path.join("dir.v2", "noext"), "")
    assert split_ext("a.") == ("a", ".")


def test_plan_process_dotfile_output_keeps_name():
    plan = plan_process(ProcessRequest(input="a.mov", output=".hidden", format="webm"))
    assert plan.output == ".hidden"


@pytest.mark.parametrize("bitrate", ["800k", "2M", "12000k"])
def test_validate_bitrate_ok(bitrate):
    validate_bitrate(bitrate)


@pytest.mark.parametrize("bitrate", ["800", "800K", "2m", "k", "", "1.5M", "800k ", "800k\n", "-800k"])
def test_validate_bitrate_rejects(bitrate):
    with pytest.raises(MediaValidationError):
        validate_bitrate(bitrate)


def test_plan_compress_rejects_bad_bitrate():
    with pytest.raises(MediaValidationError):
        plan_compress("in.mp4", "", "800")
