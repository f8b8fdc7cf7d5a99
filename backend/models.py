from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class UrlSource(BaseModel):
    """JSON request body naming a remotely fetchable audio resource"""
    url: str


class SpeakerTurnModel(BaseModel):
    """A contiguous run of words from one speaker."""
    speaker: int
    text: str
    start: float
    end: float


class TranscriptResponse(BaseModel):
    """Response format for a diarized transcription"""
    model_config = ConfigDict(populate_by_name=True)

    turns: List[SpeakerTurnModel] = []
    speaker_count: int = Field(0, alias="speakerCount")
    duration_seconds: float = Field(0.0, alias="durationSeconds")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    model: Optional[str] = None
    provider_configured: bool = False
