"""Deepgram adapter for remote transcription with speaker diarization."""

from .transcription import DeepgramTranscriptionAdapter

__all__ = ["DeepgramTranscriptionAdapter"]
