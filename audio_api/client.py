"""AudioClient — sends transcription/translation requests over httpx."""
import json
import logging
from typing import Any, Optional

import httpx

from audio_api.assembler import build_form
from audio_api.config import Config
from audio_api.constants import (
    AUDIO_PATH_TEMPLATE,
    BEARER_TEMPLATE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_ORGANIZATION,
    MSG_ERR_DECODE,
    MSG_ERR_NOT_OBJECT,
    MSG_ERR_STATUS,
    MSG_ERR_TRANSPORT,
    MSG_RECEIVED,
    MSG_SENDING,
    RESPONSE_TEXT_KEY,
)
from audio_api.errors import APIError, DecodingError, TransportError
from audio_api.form.encoder import FormBody
from audio_api.form.multipart import MultipartFormEncoder
from audio_api.log import configure_logging
from audio_api.request import AudioResult, Operation, RequestSpec, ResponseFormat

logger = logging.getLogger(__name__)


# ── response decoding ─────────────────────────────────────────────────────────


def decode_json_text(body: str) -> str:
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise DecodingError(MSG_ERR_DECODE % exc) from exc
    match payload:
        case {"text": str() as text}:
            return text
        case _:
            raise DecodingError(MSG_ERR_DECODE % (MSG_ERR_NOT_OBJECT % RESPONSE_TEXT_KEY))


def decode_result(spec: RequestSpec, response: httpx.Response) -> AudioResult:
    """JSON formats carry {"text": ...}; subtitle formats are the body verbatim."""
    match spec.has_json_response():
        case True:
            return AudioResult(text=decode_json_text(response.text))
        case False:
            return AudioResult(text=response.text)


def api_error(response: httpx.Response) -> APIError:
    """Build an APIError from the service's error envelope, or the raw body."""
    try:
        payload: Any = response.json()
    except ValueError:
        payload = None
    match payload:
        case {"error": {"message": str() as message, **details}}:
            return APIError(
                MSG_ERR_STATUS % (response.status_code, message),
                status_code=response.status_code,
                error_type=details.get("type"),
                code=details.get("code"),
            )
        case _:
            return APIError(
                MSG_ERR_STATUS % (response.status_code, response.text[:200]),
                status_code=response.status_code,
            )


# ── client ────────────────────────────────────────────────────────────────────


class AudioClient:
    """Submits one audio form per call; no retries, no caching, no shared state.

    An injected httpx.AsyncClient is reused across calls and owned by the
    caller; without one, a client is opened and closed around each request.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        self._http_client = http_client

    @classmethod
    def from_env(
        cls,
        http_client: Optional[httpx.AsyncClient] = None,
        setup_logging: bool = False,
    ) -> "AudioClient":
        """Client from OPENAI_* env vars; setup_logging applies LOG_LEVEL to the root logger."""
        config = Config.from_env()
        if setup_logging:
            configure_logging(config.log_level)
        return cls(config, http_client=http_client)

    async def create_transcription(self, spec: RequestSpec, **kwargs) -> AudioResult:
        return await self.send(spec, Operation.TRANSCRIPTIONS, **kwargs)

    async def create_translation(self, spec: RequestSpec, **kwargs) -> AudioResult:
        return await self.send(spec, Operation.TRANSLATIONS, **kwargs)

    async def send(
        self,
        spec: RequestSpec,
        operation: Operation,
        *,
        timeout: Optional[float] = None,
        boundary: Optional[str] = None,
    ) -> AudioResult:
        operation = Operation(operation)
        form = build_form(spec, MultipartFormEncoder(boundary=boundary))
        url = self.url_for(operation)
        logger.info(MSG_SENDING, url, (spec.resolved_format() or ResponseFormat.JSON).value)
        response = await self._post(url, form, timeout or self._config.request_timeout)
        logger.info(MSG_RECEIVED, operation.value, response.status_code, len(response.content))

        match response.is_success:
            case True:
                pass
            case False:
                error = api_error(response)
                logger.error("%s", error)
                raise error

        try:
            return decode_result(spec, response)
        except DecodingError as exc:
            logger.error("%s", exc)
            raise

    def url_for(self, operation: Operation) -> str:
        return self._config.base_url + AUDIO_PATH_TEMPLATE % operation.value

    def headers_for(self, form: FormBody) -> dict[str, str]:
        headers = {
            HEADER_AUTHORIZATION: BEARER_TEMPLATE % self._config.api_key,
            HEADER_CONTENT_TYPE: form.content_type,
        }
        match self._config.organization:
            case str() as org if org:
                headers[HEADER_ORGANIZATION] = org
            case _:
                pass
        return headers

    async def _post(self, url: str, form: FormBody, timeout: float) -> httpx.Response:
        headers = self.headers_for(form)
        try:
            match self._http_client:
                case httpx.AsyncClient() as client:
                    return await client.post(url, content=form.content, headers=headers, timeout=timeout)
                case _:
                    async with httpx.AsyncClient() as client:
                        return await client.post(
                            url, content=form.content, headers=headers, timeout=timeout
                        )
        except httpx.RequestError as exc:
            logger.error(MSG_ERR_TRANSPORT, url, exc)
            raise TransportError(MSG_ERR_TRANSPORT % (url, exc)) from exc
