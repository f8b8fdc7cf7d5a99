"""Framework-agnostic domain models for Echo Turns.

Processing logic works on these dataclasses only. The pydantic DTOs in
models.py stay at the API boundary, with mappers converting between them.
"""

from dataclasses import dataclass, field


@dataclass
class DiarizedWord:
    """A single recognized word with its speaker and timing."""
    text: str
    speaker: int
    start: float
    end: float


@dataclass
class SpeakerTurn:
    """A maximal contiguous run of words from one speaker."""
    speaker: int
    text: str
    start: float
    end: float
    word_count: int = 1


@dataclass
class TranscriptResult:
    """Speaker-grouped transcript built from a diarized word list."""
    turns: list[SpeakerTurn] = field(default_factory=list)
    speaker_count: int = 0
    duration_seconds: float = 0.0
