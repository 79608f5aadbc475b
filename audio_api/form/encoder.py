"""FormEncoder — abstract base for multipart/form-data body writers."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass(frozen=True)
class FormBody:
    content: bytes
    content_type: str


class FormEncoder(ABC):
    @abstractmethod
    def write_field(self, name: str, value: str) -> None:
        """Append a text field. Raises EncodingError once closed."""
        ...

    @abstractmethod
    def write_file(self, name: str, stream: BinaryIO, filename: Optional[str] = None) -> None:
        """Read stream to the end and append it as a file field.

        The caller keeps ownership of the stream and must close it. OSError
        from the read propagates unchanged.
        """
        ...

    @abstractmethod
    def write_file_bytes(self, name: str, filename: str, data: bytes) -> None:
        """Append an in-memory file field. Raises EncodingError on a repeated name."""
        ...

    @abstractmethod
    def close(self) -> FormBody:
        """Seal the encoder and return the body with its boundary-bearing content type."""
        ...
