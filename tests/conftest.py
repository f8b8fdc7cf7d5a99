"""Shared fixtures: a stub provider port and Deepgram-shaped payload builders."""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from adapters.deepgram.response import extract_words
from api import create_app
from domain.models import DiarizedWord
from ports.progress import ProgressPort
from ports.transcription import TranscriptionPort


def word(text: str, speaker: int, start: float, end: float) -> DiarizedWord:
    return DiarizedWord(text=text, speaker=speaker, start=start, end=end)


def deepgram_payload(words: list[dict], transcript: Optional[str] = None) -> dict:
    if transcript is None:
        transcript = " ".join(w.get("punctuated_word", w.get("word", "")) for w in words)
    return {
        "metadata": {"request_id": "test"},
        "results": {
            "channels": [
                {"alternatives": [{"transcript": transcript, "confidence": 0.98, "words": words}]}
            ]
        },
    }


class RecordingProgress(ProgressPort):
    def __init__(self):
        self.stages: list[str] = []

    def report(self, job_id: str, stage: str, detail: Optional[str] = None) -> None:
        self.stages.append(stage)


class StubTranscription(TranscriptionPort):
    """Returns a canned payload (or raises) and records what it was asked."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None):
        self.payload = payload if payload is not None else deepgram_payload([])
        self.error = error
        self.calls: list[dict] = []

    async def transcribe_url(self, url: str, language: str) -> dict:
        self.calls.append({"kind": "url", "url": url, "language": language})
        if self.error:
            raise self.error
        return self.payload

    async def transcribe_bytes(self, audio: bytes, content_type: str, language: str) -> dict:
        self.calls.append({
            "kind": "bytes",
            "audio": audio,
            "content_type": content_type,
            "language": language,
        })
        if self.error:
            raise self.error
        return self.payload

    def extract_words(self, payload: dict) -> list[DiarizedWord]:
        return extract_words(payload)

    def model_name(self) -> str:
        return "stub-model"

    def is_configured(self) -> bool:
        return True


@pytest.fixture
def hello_world_payload():
    return deepgram_payload([
        {"word": "hello", "speaker": 0, "start": 0, "end": 0.5},
        {"word": "world", "speaker": 0, "start": 0.5, "end": 1.0},
        {"word": "hi", "speaker": 1, "start": 1.0, "end": 1.3},
    ])


@pytest.fixture
def make_client():
    def _make(stub: StubTranscription, **kwargs) -> TestClient:
        return TestClient(create_app(transcription=stub, progress=RecordingProgress()), **kwargs)
    return _make
