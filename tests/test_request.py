"""TDD: RequestSpec tests written FIRST"""
import pytest

from audio_api.constants import WHISPER_1
from audio_api.errors import ValidationError
from audio_api.request import FileBytes, FilePath, RequestSpec, ResponseFormat


def test_spec_immutable():
    spec = RequestSpec.from_path(WHISPER_1, "a.wav")

    with pytest.raises(Exception):
        spec.model = "other"


def test_from_path_builds_file_path_source():
    spec = RequestSpec.from_path(WHISPER_1, "a.wav", language="en")

    assert spec.source == FilePath("a.wav")
    assert spec.language == "en"


def test_from_bytes_builds_file_bytes_source():
    spec = RequestSpec.from_bytes(WHISPER_1, "clip.ogg", b"\x00\x01")

    assert spec.source == FileBytes(filename="clip.ogg", data=b"\x00\x01")


def test_missing_source_fails_validation():
    spec = RequestSpec(model=WHISPER_1)

    with pytest.raises(ValidationError, match="either path or bytes should be specified"):
        spec.validate()


def test_bytes_without_extension_fails_validation():
    spec = RequestSpec.from_bytes(WHISPER_1, "clip", b"data")

    with pytest.raises(ValidationError, match="extension"):
        spec.validate()


def test_empty_model_fails_validation():
    spec = RequestSpec.from_path("", "a.wav")

    with pytest.raises(ValidationError, match="model"):
        spec.validate()


def test_valid_specs_pass_validation_without_touching_disk():
    """The path is never opened during validation."""
    RequestSpec.from_path(WHISPER_1, "/does/not/exist.wav").validate()
    RequestSpec.from_bytes(WHISPER_1, "clip.mp3", b"").validate()


@pytest.mark.parametrize(
    "fmt, expected",
    [(None, True), (ResponseFormat.JSON, True), (ResponseFormat.SRT, False), (ResponseFormat.VTT, False)],
)
def test_has_json_response(fmt, expected):
    spec = RequestSpec.from_path(WHISPER_1, "a.wav", response_format=fmt)

    assert spec.has_json_response() is expected


def test_unknown_source_type_fails_validation():
    """A bare path string is not a FilePath."""
    spec = RequestSpec(model=WHISPER_1, source="a.wav")

    with pytest.raises(ValidationError, match="either path or bytes should be specified"):
        spec.validate()


@pytest.mark.parametrize("fmt, expected", [("srt", ResponseFormat.SRT), ("json", ResponseFormat.JSON), (None, None)])
def test_resolved_format_accepts_wire_strings(fmt, expected):
    spec = RequestSpec.from_path(WHISPER_1, "a.wav", response_format=fmt)

    assert spec.resolved_format() is expected


def test_unknown_format_fails_validation():
    spec = RequestSpec.from_path(WHISPER_1, "a.wav", response_format="txt")

    with pytest.raises(ValidationError, match="txt"):
        spec.validate()
