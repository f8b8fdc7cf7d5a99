"""DeepgramTranscriptionAdapter — pre-recorded transcription with diarization.

Sends either a URL wrapper or raw audio bytes to Deepgram's /v1/listen
endpoint in a single POST. Diarization, punctuation and smart formatting
are always requested; the language is passed through unmodified.
"""

import logging
import time
from typing import Any, Optional

import httpx

from adapters.deepgram.response import extract_words
from domain.errors import ProviderTransportError
from domain.models import DiarizedWord
from ports.transcription import TranscriptionPort

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.deepgram.com/v1/listen"
DEFAULT_MODEL = "nova-2"
DEFAULT_TIMEOUT = 120.0


class DeepgramTranscriptionAdapter(TranscriptionPort):
    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._model = model
        self._timeout = timeout
        self._transport = transport

        if not api_key:
            logger.warning("No Deepgram API key configured, transcription requests will fail")

    def _params(self, language: str) -> dict[str, str]:
        return {
            "diarize": "true",
            "punctuate": "true",
            "model": self._model,
            "language": language,
            "smart_format": "true",
        }

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": content_type,
        }

    async def transcribe_url(self, url: str, language: str) -> dict[str, Any]:
        logger.info(f"Requesting Deepgram transcription for URL (language={language})")
        return await self._post(
            language,
            headers=self._headers("application/json"),
            json={"url": url},
        )

    async def transcribe_bytes(
        self,
        audio: bytes,
        content_type: str,
        language: str,
    ) -> dict[str, Any]:
        logger.info(
            f"Requesting Deepgram transcription for {len(audio)} bytes "
            f"of {content_type} (language={language})"
        )
        return await self._post(
            language,
            headers=self._headers(content_type),
            content=audio,
        )

    async def _post(self, language: str, headers: dict[str, str], **body: Any) -> dict[str, Any]:
        start_time = time.time()
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._api_url,
                    params=self._params(language),
                    headers=headers,
                    **body,
                )
        except httpx.TimeoutException as e:
            logger.error(f"Deepgram request timed out after {self._timeout}s")
            raise ProviderTransportError(f"Deepgram request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Deepgram request failed: {e}")
            raise ProviderTransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Deepgram returned {response.status_code}: {response.text}")
            raise ProviderTransportError(response.text, provider_status=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Deepgram returned a non-JSON body")
            raise ProviderTransportError(response.text, provider_status=response.status_code) from e

        logger.info(f"Deepgram responded in {time.time() - start_time:.2f}s")
        return payload

    def extract_words(self, payload: dict[str, Any]) -> list[DiarizedWord]:
        return extract_words(payload)

    def model_name(self) -> str:
        return self._model

    def is_configured(self) -> bool:
        return bool(self._api_key)
