"""TranscribeAudioUseCase — orchestrates provider call, word extraction and aggregation.

Accepts its ports via dependency injection so the route stays free of
provider details and tests can swap in a stub provider.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from domain.errors import InvalidRequestError
from domain.models import TranscriptResult
from ports.progress import ProgressPort
from ports.transcription import TranscriptionPort
from post_processing import aggregate

logger = logging.getLogger(__name__)


@dataclass
class TranscribeRequest:
    """All parameters for a transcription request.

    Exactly one of url / audio is set.
    """
    language: str
    url: Optional[str] = None
    audio: Optional[bytes] = None
    content_type: str = "audio/webm"


class TranscribeAudioUseCase:
    def __init__(
        self,
        transcription: TranscriptionPort,
        progress: ProgressPort,
    ):
        self._transcription = transcription
        self._progress = progress

    async def execute(self, req: TranscribeRequest) -> TranscriptResult:
        """Run the full pipeline. Returns the speaker-grouped transcript."""
        job_id = uuid.uuid4().hex[:12]

        # 1. Forward the source to the provider
        if req.url is not None:
            self._progress.report(job_id, "requesting", detail=f"url, language={req.language}")
            payload = await self._transcription.transcribe_url(req.url, req.language)
        elif req.audio is not None:
            self._progress.report(
                job_id, "requesting",
                detail=f"{len(req.audio)} bytes {req.content_type}, language={req.language}",
            )
            payload = await self._transcription.transcribe_bytes(
                req.audio, req.content_type, req.language,
            )
        else:
            raise InvalidRequestError("No audio source provided")

        # 2. Normalize provider words
        self._progress.report(job_id, "extracting")
        words = self._transcription.extract_words(payload)

        # 3. Group into speaker turns
        self._progress.report(job_id, "aggregating", detail=f"{len(words)} words")
        result = aggregate(words)

        logger.info(
            f"[{job_id}] {len(result.turns)} turns, {result.speaker_count} speakers, "
            f"{result.duration_seconds:.1f}s"
        )
        return result
