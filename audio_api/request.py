"""Request and result types for the audio endpoints."""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from audio_api.constants import (
    MSG_ERR_BAD_FORMAT,
    MSG_ERR_NO_EXTENSION,
    MSG_ERR_NO_MODEL,
    MSG_ERR_NO_SOURCE,
)
from audio_api.errors import ValidationError


class Operation(str, Enum):
    TRANSCRIPTIONS = "transcriptions"
    TRANSLATIONS = "translations"


class ResponseFormat(str, Enum):
    """Output formats; the service answers JSON when none is requested."""

    JSON = "json"
    SRT = "srt"
    VTT = "vtt"


@dataclass(frozen=True)
class FilePath:
    path: Union[str, os.PathLike]


@dataclass(frozen=True)
class FileBytes:
    """In-memory audio. The filename extension tells the service the format."""

    filename: str
    data: bytes

    def has_extension(self) -> bool:
        return "." in self.filename


AudioInput = Union[FilePath, FileBytes]


@dataclass(frozen=True)
class RequestSpec:
    model: str
    source: Optional[AudioInput] = None
    prompt: Optional[str] = None
    temperature: Optional[float] = None
    language: Optional[str] = None
    response_format: Optional[Union[ResponseFormat, str]] = None

    @classmethod
    def from_path(cls, model: str, path: Union[str, os.PathLike], **params) -> "RequestSpec":
        return cls(model=model, source=FilePath(path), **params)

    @classmethod
    def from_bytes(cls, model: str, filename: str, data: bytes, **params) -> "RequestSpec":
        return cls(model=model, source=FileBytes(filename=filename, data=data), **params)

    def resolved_format(self) -> Optional[ResponseFormat]:
        """The requested format as a ResponseFormat; wire strings such as "srt" are accepted."""
        match self.response_format:
            case None:
                return None
            case _:
                try:
                    return ResponseFormat(self.response_format)
                except ValueError as exc:
                    raise ValidationError(MSG_ERR_BAD_FORMAT % (self.response_format,)) from exc

    def has_json_response(self) -> bool:
        return self.resolved_format() in (None, ResponseFormat.JSON)

    def validate(self) -> None:
        """Raise ValidationError when the spec cannot produce a form. No I/O."""
        match self.model:
            case str() as m if m:
                pass
            case _:
                raise ValidationError(MSG_ERR_NO_MODEL)

        match self.source:
            case None:
                raise ValidationError(MSG_ERR_NO_SOURCE)
            case FileBytes() as b if not b.has_extension():
                raise ValidationError(MSG_ERR_NO_EXTENSION % b.filename)
            case FilePath() | FileBytes():
                pass
            case _:
                raise ValidationError(MSG_ERR_NO_SOURCE)

        self.resolved_format()


@dataclass(frozen=True)
class AudioResult:
    text: str
