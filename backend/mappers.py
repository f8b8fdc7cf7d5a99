"""Domain <-> DTO mappers.

Converts TranscriptResult / SpeakerTurn (domain) into the Pydantic
response DTOs. Internal bookkeeping such as word_count is not exposed.
"""

from domain.models import SpeakerTurn, TranscriptResult
from models import SpeakerTurnModel, TranscriptResponse


def turn_to_dto(turn: SpeakerTurn) -> SpeakerTurnModel:
    """Convert a domain SpeakerTurn to a SpeakerTurnModel DTO."""
    return SpeakerTurnModel(
        speaker=turn.speaker,
        text=turn.text,
        start=turn.start,
        end=turn.end,
    )


def result_to_dto(result: TranscriptResult) -> TranscriptResponse:
    """Convert a domain TranscriptResult to the API response DTO, preserving turn order."""
    return TranscriptResponse(
        turns=[turn_to_dto(turn) for turn in result.turns],
        speaker_count=result.speaker_count,
        duration_seconds=result.duration_seconds,
    )
