import pytest

from mediaforge.domain.errors import (
    MediaError,
    MediaIOError,
    MediaValidationError,
    ProbeParseError,
    ToolFailureError,
    ToolUnavailableError,
)


@pytest.mark.parametrize(
    "cls, tag, status",
    [
        (MediaValidationError, "validation", 400),
        (MediaIOError, "io", 500),
        (ToolUnavailableError, "tool_unavailable", 500),
        (ProbeParseError, "parse", 500),
        (ToolFailureError, "tool_failure", 500),
    ],
)
def test_error_tags_and_status(cls, tag, status):
    err = cls("boom")
    assert isinstance(err, MediaError)
    assert err.tag == tag
    assert err.http_status == status
    assert str(err) == "boom"
    assert err.args == ("boom",)


def test_tool_failure_carries_output():
    err = ToolFailureError("ffmpeg processing failed", detail="Invalid data found", returncode=1)
    assert err.detail == "Invalid data found"
    assert str(err) == "ffmpeg processing failed (exit code 1)"
    with pytest.raises(MediaError):
        raise err
