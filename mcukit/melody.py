"""A fixed ringtone expressed as square-wave periods and note durations."""

from __future__ import annotations

from enum import IntEnum


class Note(IntEnum):
    """Note frequencies in hertz."""

    F4 = 349
    A4S = 466
    C5 = 523
    D5 = 587
    D5S = 622
    F5 = 698
    A5S = 932


TEMPO = 208  # quarter notes per minute
WHOLE_NOTE_MS = 240000 // TEMPO
WHOLE_NOTE_BEATS = 255
LOOP_PAUSE_MS = 1000
NOTE_PAUSE_MS = 1

_NOTES = (
    Note.F4, Note.F4, Note.F4, Note.A4S, Note.F5, Note.D5S, Note.D5, Note.C5, Note.A5S, Note.F5,
    Note.D5S, Note.D5, Note.C5, Note.A5S, Note.F5, Note.D5S, Note.D5, Note.D5S, Note.C5,
)
_BEATS = (21, 21, 21, 128, 128, 21, 21, 21, 128, 64, 21, 21, 21, 128, 64, 21, 21, 21, 128)


def signal_periods() -> tuple[int, ...]:
    """Return the square-wave period of each note in microseconds."""
    return tuple(1_000_000 // note for note in _NOTES)


def note_durations() -> tuple[int, ...]:
    """Return the length of each note in milliseconds."""
    return tuple(WHOLE_NOTE_MS * beats // WHOLE_NOTE_BEATS for beats in _BEATS)


def melody() -> tuple[tuple[Note, int], ...]:
    """Return the tune as (note, duration in milliseconds) pairs."""
    return tuple(zip(_NOTES, note_durations()))