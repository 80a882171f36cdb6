from mcukit.melody import WHOLE_NOTE_MS, Note, melody, note_durations, signal_periods


def test_lengths_match():
    assert len(signal_periods()) == len(note_durations()) == len(melody()) == 19


def test_note_sequence():
    assert [note for note, _ in melody()] == [
        Note.F4, Note.F4, Note.F4, Note.A4S, Note.F5, Note.D5S, Note.D5, Note.C5, Note.A5S,
        Note.F5, Note.D5S, Note.D5, Note.C5, Note.A5S, Note.F5, Note.D5S, Note.D5, Note.D5S,
        Note.C5,
    ]


def test_periods_are_whole_microseconds_of_each_frequency():
    for (note, _), period in zip(melody(), signal_periods()):
        assert period * note <= 1_000_000 < (period + 1) * note


def test_first_period():
    assert signal_periods()[0] == 2865


def test_quarter_note_duration():
    assert note_durations()[3] == 578


def test_durations_follow_beats():
    durations = note_durations()
    short, quarter, eighth = durations[0], durations[3], durations[9]
    assert short < eighth < quarter < WHOLE_NOTE_MS
    assert durations[1] == durations[2] == short
    assert durations[14] == eighth
    assert durations[18] == quarter


def test_melody_pairs_carry_durations():
    assert [duration for _, duration in melody()] == list(note_durations())