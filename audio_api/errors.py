"""Error taxonomy for audio requests — one class per failing stage."""
from typing import Optional


class AudioError(Exception):
    """Base class for every error raised by the audio client."""


class ValidationError(AudioError):
    """The request description is unusable; raised before any I/O."""


class ResourceError(AudioError):
    """The path-based audio input could not be opened or read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class EncodingError(AudioError):
    """A multipart writer operation failed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(AudioError):
    """The outbound HTTP call failed (network, timeout)."""


class APIError(TransportError):
    """The service answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.code = code


class DecodingError(AudioError):
    """A JSON-format response body did not have the expected shape."""
