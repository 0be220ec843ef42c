#!/usr/bin/env python3
"""
Example: A quick tour of the theory primitives.

Builds pitches, intervals, chords and scales and prints what they
resolve to, then repeats a few of them under a baroque tuning.

Usage:
    python examples/theory_tour.py
"""

from chuk_music_theory import (
    Accidental,
    Chord,
    ChordQuality,
    Interval,
    Note,
    NoteValue,
    Pitch,
    Scale,
    use_tuning,
)


def show_pitches() -> None:
    """Pitches from names, MIDI numbers and frequencies."""
    print("Pitches")
    for pitch in (Pitch.parse("C4"), Pitch.from_midi(69), Pitch.from_frequency(330.0)):
        print(f"  {pitch}  midi={pitch.midi_note_number}")


def show_intervals() -> None:
    """Intervals between pitches, and their inversions."""
    print("\nIntervals")
    c4 = Pitch.parse("C4")
    for target in ("E4", "G4", "F#4", "C5", "D5"):
        interval = Interval.from_pitches(c4, Pitch.parse(target))
        print(
            f"  C4 -> {target}: {interval} ({interval.semitones} semitones), "
            f"inverts to {interval.invert()}"
        )


def show_chords() -> None:
    """A few chord qualities on the same root."""
    print("\nChords")
    root = Pitch.parse("C4")
    for quality in (ChordQuality.MAJOR, ChordQuality.MINOR_7, ChordQuality.DOMINANT_9):
        chord = Chord(root, quality)
        print(f"  {chord}  midi={chord.get_midi_notes()}")


def show_scales() -> None:
    """Scales and degrees past the octave."""
    print("\nScales")
    major = Scale.major(Pitch.parse("C4"))
    minor = Scale.natural_minor(Pitch.parse("A3"))
    print(f"  {major}")
    print(f"  {minor}")
    print(f"  degree 9 of {major.name}: {major.get_pitch_at_degree(9).scientific_pitch_notation}")


def show_notes() -> None:
    """Notes carry an accidental and performance attributes."""
    print("\nNotes")
    note = Note(Pitch.parse("F4"), NoteValue.EIGHTH, Accidental.SHARP)
    print(f"  {note}  sounds as {note.pitch.scientific_pitch_notation}")
    print(f"  up a fifth: {Interval.P5.apply_to_note(note)}")


def show_tuning() -> None:
    """The same pitch under a different reference frequency."""
    print("\nTuning")
    with use_tuning(415.0):
        print(f"  A4 at A=415: {Pitch.parse('A4')}")
    print(f"  A4 at A=440: {Pitch.parse('A4')}")


def main() -> None:
    """Run the tour."""
    show_pitches()
    show_intervals()
    show_chords()
    show_scales()
    show_notes()
    show_tuning()


if __name__ == "__main__":
    main()
