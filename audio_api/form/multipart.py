"""MultipartFormEncoder — FormEncoder backed by urllib3's multipart writer."""
import logging
import os
from typing import BinaryIO, Optional

from urllib3.filepost import encode_multipart_formdata

from audio_api.constants import (
    MSG_ERR_DUPLICATE_FILE,
    MSG_ERR_FORM_CLOSED,
    MSG_ERR_FORM_ENCODE,
    MSG_FILE_FIELD,
)
from audio_api.errors import EncodingError
from audio_api.form.encoder import FormBody, FormEncoder

logger = logging.getLogger(__name__)


class MultipartFormEncoder(FormEncoder):
    """Collects fields in write order and renders them on close.

    A fixed boundary makes the rendered body reproducible; by default urllib3
    picks a random one.
    """

    def __init__(self, boundary: Optional[str] = None) -> None:
        self._boundary = boundary
        self._fields: list[tuple] = []
        self._file_names: set[str] = set()
        self._body: Optional[FormBody] = None

    @property
    def closed(self) -> bool:
        return self._body is not None

    def write_field(self, name: str, value: str) -> None:
        self._ensure_open(name)
        self._fields.append((name, value))

    def write_file(self, name: str, stream: BinaryIO, filename: Optional[str] = None) -> None:
        self._ensure_open(name)
        data = stream.read()
        self._add_file(name, filename or os.path.basename(str(getattr(stream, "name", name))), data)

    def write_file_bytes(self, name: str, filename: str, data: bytes) -> None:
        self._ensure_open(name)
        self._add_file(name, filename, data)

    def close(self) -> FormBody:
        match self._body:
            case FormBody() as body:
                return body
            case None:
                pass
        try:
            content, content_type = encode_multipart_formdata(self._fields, boundary=self._boundary)
        except (TypeError, ValueError) as exc:
            raise EncodingError(MSG_ERR_FORM_ENCODE % exc) from exc
        self._body = FormBody(content=content, content_type=content_type)
        return self._body

    def _ensure_open(self, name: str) -> None:
        if self.closed:
            raise EncodingError(MSG_ERR_FORM_CLOSED % name, field=name)

    def _add_file(self, name: str, filename: str, data: bytes) -> None:
        if name in self._file_names:
            raise EncodingError(MSG_ERR_DUPLICATE_FILE % name, field=name)
        self._file_names.add(name)
        self._fields.append((name, (filename, data)))
        logger.debug(MSG_FILE_FIELD, name, filename, len(data))
