"""Error taxonomy for the transcription pipeline.

Each error carries the HTTP status it maps to. None of them are retried;
the API layer turns them into ``{"error": message}`` responses.
"""

from typing import Optional

EMPTY_TRANSCRIPT_MESSAGE = (
    "Deepgram no detectó ninguna palabra. "
    "Verificá el idioma seleccionado o que el audio tenga voz clara."
)
NO_ALTERNATIVE_MESSAGE = "No transcription result"


class TranscriptionError(Exception):
    """Base class for request-terminal transcription failures."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProviderTransportError(TranscriptionError):
    """The provider call failed (network error or non-2xx status)."""
    status_code = 500

    def __init__(self, message: str, provider_status: Optional[int] = None):
        super().__init__(message)
        self.provider_status = provider_status


class NoAlternativeError(TranscriptionError):
    """The provider payload lacked the channel/alternative structure."""
    status_code = 500

    def __init__(self, message: str = NO_ALTERNATIVE_MESSAGE):
        super().__init__(message)


class EmptyTranscriptError(TranscriptionError):
    """The provider found no speech at all."""
    status_code = 422

    def __init__(self, message: str = EMPTY_TRANSCRIPT_MESSAGE):
        super().__init__(message)


class InvalidRequestError(TranscriptionError):
    """The inbound request did not describe a usable audio source."""
    status_code = 400
