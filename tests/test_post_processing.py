"""Tests for turn aggregation over diarized word lists."""

import pytest

from post_processing import aggregate, build_turns, count_speakers

from conftest import word


def test_empty_input():
    result = aggregate([])
    assert result.turns == []
    assert result.speaker_count == 0
    assert result.duration_seconds == 0


def test_single_speaker_collapses_to_one_turn():
    words = [word(t, 0, i * 0.5, i * 0.5 + 0.4) for i, t in enumerate(["one", "two", "three", "four"])]
    turns = build_turns(words)
    assert len(turns) == 1
    assert turns[0].text == "one two three four"
    assert turns[0].start == 0.0
    assert turns[0].end == pytest.approx(1.9)
    assert turns[0].word_count == 4


def test_returning_speaker_gets_new_turn_but_counted_once():
    words = [word("hi", 0, 0.0, 0.2), word("yo", 1, 0.3, 0.5), word("again", 0, 0.6, 0.9)]
    result = aggregate(words)
    assert [t.speaker for t in result.turns] == [0, 1, 0]
    assert len(result.turns) == 3
    assert result.speaker_count == 2


def test_turn_bounds_follow_first_and_last_word():
    words = [
        word("Good", 2, 1.0, 1.2),
        word("morning.", 2, 1.25, 1.8),
        word("Hey!", 5, 2.0, 2.3),
        word("How", 2, 2.5, 2.6),
        word("are", 2, 2.6, 2.7),
        word("you?", 2, 2.7, 3.1),
    ]
    turns = build_turns(words)
    assert [(t.speaker, t.text, t.start, t.end) for t in turns] == [
        (2, "Good morning.", 1.0, 1.8),
        (5, "Hey!", 2.0, 2.3),
        (2, "How are you?", 2.5, 3.1),
    ]


def test_word_count_conserved_and_no_adjacent_same_speaker():
    speakers = [0, 0, 1, 1, 1, 0, 2, 2, 0, 1]
    words = [word(f"w{i}", s, float(i), i + 0.9) for i, s in enumerate(speakers)]
    turns = build_turns(words)

    assert sum(t.word_count for t in turns) == len(words)
    assert sum(len(t.text.split()) for t in turns) == len(words)
    for left, right in zip(turns, turns[1:]):
        assert left.speaker != right.speaker
    assert len(turns) == 6


def test_duration_is_end_of_last_word():
    words = [word("long", 0, 0.0, 20.0), word("tail", 1, 11.0, 12.4)]
    assert aggregate(words).duration_seconds == 12.4


def test_end_is_overwritten_not_maxed():
    words = [word("a", 0, 0.0, 5.0), word("b", 0, 1.0, 2.0)]
    turns = build_turns(words)
    assert turns[0].end == 2.0


def test_input_order_is_not_resorted():
    words = [word("later", 1, 5.0, 6.0), word("earlier", 0, 0.0, 1.0)]
    turns = build_turns(words)
    assert [t.text for t in turns] == ["later", "earlier"]


def test_count_speakers_ignores_order_and_duplicates():
    words = [word("a", 3, 0, 1), word("b", 1, 1, 2), word("c", 3, 2, 3), word("d", 1, 3, 4)]
    assert count_speakers(words) == 2
    assert count_speakers(list(reversed(words))) == 2


def test_aggregate_does_not_mutate_input():
    words = [word("hello", 0, 0.0, 0.5), word("world", 0, 0.5, 1.0)]
    aggregate(words)
    assert words[0].text == "hello"
    assert words[0].end == 0.5
