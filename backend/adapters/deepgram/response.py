"""Deepgram response extraction.

Boundary between the provider's untrusted payload and the aggregation
logic: every DiarizedWord leaving this module has a text, an integer
speaker and float timestamps.
"""

import logging
from typing import Any

from domain.errors import EmptyTranscriptError, NoAlternativeError
from domain.models import DiarizedWord

logger = logging.getLogger(__name__)


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def extract_alternative(payload: Any) -> dict:
    """Return the best alternative of the first channel.

    Raises:
        NoAlternativeError: if results/channels/alternatives is missing or malformed.
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    channels = results.get("channels") if isinstance(results, dict) else None
    channel = _first(channels)
    alternatives = channel.get("alternatives") if isinstance(channel, dict) else None
    alternative = _first(alternatives)
    if not isinstance(alternative, dict):
        logger.warning("Deepgram response has no channel/alternative")
        raise NoAlternativeError()
    return alternative


def normalize_word(raw: dict) -> DiarizedWord:
    """Convert one provider word record into a DiarizedWord.

    Prefers the punctuated form of the word; a missing speaker means the
    provider returned no diarization info, so everything is speaker 0.

    Raises:
        ValueError: if the text is not a non-empty string or the speaker
            is not a non-negative integer.
    """
    text = raw.get("punctuated_word")
    if text is None:
        text = raw["word"]
    if not isinstance(text, str) or not text:
        raise ValueError(f"word text must be a non-empty string, got {text!r}")

    speaker = raw.get("speaker")
    if speaker is None:
        speaker = 0
    if isinstance(speaker, bool) or not isinstance(speaker, int) or speaker < 0:
        raise ValueError(f"speaker must be a non-negative integer, got {speaker!r}")

    return DiarizedWord(
        text=text,
        speaker=speaker,
        start=float(raw["start"]),
        end=float(raw["end"]),
    )


def extract_words(payload: Any) -> list[DiarizedWord]:
    """Extract the normalized word list from a Deepgram payload.

    Raises:
        NoAlternativeError: if the payload has no usable alternative.
        EmptyTranscriptError: if there are no words and the transcript is blank.
    """
    alternative = extract_alternative(payload)
    raw_words = alternative.get("words") or []

    if not raw_words:
        transcript = alternative.get("transcript") or ""
        if not isinstance(transcript, str):
            logger.warning(f"Deepgram transcript is not a string: {transcript!r}")
            raise NoAlternativeError()
        if not transcript.strip():
            logger.warning("Deepgram detected no words in the audio")
            raise EmptyTranscriptError()
        logger.info("Deepgram returned a transcript without word timings")

    try:
        return [normalize_word(raw) for raw in raw_words]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Malformed Deepgram word record: {e!r}")
        raise NoAlternativeError() from e
