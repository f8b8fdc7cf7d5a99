"""TranscriptionPort — abstract interface for remote diarizing ASR providers."""

from abc import ABC, abstractmethod
from typing import Any

from domain.models import DiarizedWord


class TranscriptionPort(ABC):
    @abstractmethod
    async def transcribe_url(self, url: str, language: str) -> dict[str, Any]:
        """Transcribe a remotely fetchable audio resource. Returns the raw provider payload."""

    @abstractmethod
    async def transcribe_bytes(
        self,
        audio: bytes,
        content_type: str,
        language: str,
    ) -> dict[str, Any]:
        """Transcribe uploaded audio bytes. Returns the raw provider payload."""

    @abstractmethod
    def extract_words(self, payload: dict[str, Any]) -> list[DiarizedWord]:
        """Normalize the provider payload into a list of DiarizedWord."""

    @abstractmethod
    def model_name(self) -> str:
        """Return the provider model used for recognition."""

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are present for calling the provider."""
