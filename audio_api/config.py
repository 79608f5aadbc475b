from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from audio_api.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str
    organization: Optional[str]
    request_timeout: float
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL
        organization = os.getenv("OPENAI_ORG_ID") or None
        request_timeout = os.getenv("AUDIO_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            request_timeout=float(request_timeout),
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        base_url: str,
        organization: Optional[str],
        request_timeout: float,
        log_level: str,
    ) -> "Config":
        match api_key:
            case None | "":
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case _:
                pass

        match request_timeout:
            case t if t <= 0:
                raise ValueError("AUDIO_REQUEST_TIMEOUT must be positive")
            case _:
                pass

        return Config(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            organization=organization,
            request_timeout=request_timeout,
            log_level=log_level,
        )
