"""Post-processing for diarized word lists.

Groups consecutive same-speaker words into turns and derives the
transcript-level speaker count and duration.
"""

import logging
from typing import List, Sequence

from domain.models import DiarizedWord, SpeakerTurn, TranscriptResult

logger = logging.getLogger(__name__)


def build_turns(words: Sequence[DiarizedWord]) -> List[SpeakerTurn]:
    """Group consecutive same-speaker words into turns.

    Breaks only on speaker change. Words are taken in input order and are
    never re-sorted by timestamp.

    Args:
        words: Diarized words, assumed ordered by start/end.

    Returns:
        List of SpeakerTurn, one per maximal same-speaker run.
    """
    if not words:
        return []

    turns = []

    current = SpeakerTurn(
        speaker=words[0].speaker,
        text=words[0].text,
        start=words[0].start,
        end=words[0].end,
    )

    for word in words[1:]:
        if word.speaker == current.speaker:
            # Extend current turn
            current.text += " " + word.text
            current.end = word.end
            current.word_count += 1
        else:
            turns.append(current)
            current = SpeakerTurn(
                speaker=word.speaker,
                text=word.text,
                start=word.start,
                end=word.end,
            )

    # Close final turn
    turns.append(current)

    return turns


def count_speakers(words: Sequence[DiarizedWord]) -> int:
    """Number of distinct speaker ids across the word list."""
    return len({word.speaker for word in words})


def aggregate(words: Sequence[DiarizedWord]) -> TranscriptResult:
    """Build the speaker-grouped transcript for a diarized word list."""
    turns = build_turns(words)
    result = TranscriptResult(
        turns=turns,
        speaker_count=count_speakers(words),
        duration_seconds=words[-1].end if words else 0.0,
    )
    logger.debug(
        f"Aggregated {len(words)} words into {len(turns)} turns "
        f"({result.speaker_count} speakers, {result.duration_seconds:.2f}s)"
    )
    return result
