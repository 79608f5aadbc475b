"""Turns a RequestSpec into a finalized multipart body, fields in wire order."""
import logging
import os

from audio_api.constants import (
    FIELD_FILE,
    FIELD_LANGUAGE,
    FIELD_MODEL,
    FIELD_PROMPT,
    FIELD_RESPONSE_FORMAT,
    FIELD_TEMPERATURE,
    MSG_ERR_OPEN_FILE,
    MSG_FIELD_OMITTED,
    MSG_FIELD_WRITTEN,
    TEMPERATURE_FORMAT,
)
from audio_api.errors import ResourceError
from audio_api.form.encoder import FormBody, FormEncoder
from audio_api.request import FileBytes, FilePath, RequestSpec

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def optional_fields(spec: RequestSpec) -> list[tuple[str, str | None]]:
    """Optional (name, value) pairs in wire order; None marks an omitted field."""
    resolved = spec.resolved_format()
    fmt = resolved.value if resolved else None
    temperature = TEMPERATURE_FORMAT % spec.temperature if spec.temperature else None
    return [
        (FIELD_PROMPT, spec.prompt or None),
        (FIELD_RESPONSE_FORMAT, fmt),
        (FIELD_TEMPERATURE, temperature),
        (FIELD_LANGUAGE, spec.language or None),
    ]


def _write_path(encoder: FormEncoder, path: str | os.PathLike) -> None:
    filename = os.path.basename(os.fspath(path))
    try:
        with open(path, "rb") as stream:
            encoder.write_file(FIELD_FILE, stream, filename=filename)
    except OSError as exc:
        raise ResourceError(MSG_ERR_OPEN_FILE % (path, exc), path=os.fspath(path)) from exc


# ── assembler ─────────────────────────────────────────────────────────────────


def build_form(spec: RequestSpec, encoder: FormEncoder) -> FormBody:
    """Validate spec, write every field into encoder and close it.

    Raises ValidationError, ResourceError or EncodingError; the first failure
    stops assembly and nothing is returned.
    """
    spec.validate()

    match spec.source:
        case FilePath(path=path):
            _write_path(encoder, path)
        case FileBytes(filename=filename, data=data):
            encoder.write_file_bytes(FIELD_FILE, filename, data)

    encoder.write_field(FIELD_MODEL, spec.model)

    for name, value in optional_fields(spec):
        match value:
            case None:
                logger.debug(MSG_FIELD_OMITTED, name)
            case str():
                encoder.write_field(name, value)
                logger.debug(MSG_FIELD_WRITTEN, name)

    return encoder.close()
