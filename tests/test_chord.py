"""
Tests for Chord.

Tests cover:
- The quality -> interval table
- Pitches and notes of a chord
- Transposition and factories
- Structure validation
"""

import pytest

from chuk_music_theory import (
    Accidental,
    Chord,
    ChordQuality,
    Dynamics,
    Interval,
    InvalidChordStructureError,
    InvalidDegreeError,
    NoteValue,
    Pitch,
)
from chuk_music_theory.core.chord import CHORD_INTERVALS, MAJOR_TRIAD, intervals_for_quality


class TestIntervalTable:
    """Tests for the static chord table."""

    def test_every_quality_present(self) -> None:
        """All 18 qualities have an entry."""
        assert set(CHORD_INTERVALS) == set(ChordQuality)
        assert len(CHORD_INTERVALS) == 18

    def test_every_entry_well_formed(self) -> None:
        """Three or more intervals, starting with P1."""
        for intervals in CHORD_INTERVALS.values():
            assert len(intervals) >= 3
            assert intervals[0] == Interval.P1

    def test_table_is_read_only(self) -> None:
        """The mapping cannot be modified."""
        with pytest.raises(TypeError):
            CHORD_INTERVALS[ChordQuality.MAJOR] = ()  # type: ignore[index]

    def test_unknown_quality_falls_back(self) -> None:
        """Unknown qualities use the major triad."""
        assert intervals_for_quality("power") == MAJOR_TRIAD

    def test_lookup_by_value(self) -> None:
        """Enum values look up the same entry."""
        assert intervals_for_quality("minor 7") == CHORD_INTERVALS[ChordQuality.MINOR_7]


class TestPitches:
    """Tests for chord tones."""

    @pytest.mark.parametrize(
        ("quality", "midi"),
        [
            (ChordQuality.MAJOR, [60, 64, 67]),
            (ChordQuality.MINOR, [60, 63, 67]),
            (ChordQuality.DIMINISHED, [60, 63, 66]),
            (ChordQuality.AUGMENTED, [60, 64, 68]),
            (ChordQuality.DOMINANT, [60, 64, 67]),
            (ChordQuality.MAJOR_7, [60, 64, 67, 71]),
            (ChordQuality.MINOR_7, [60, 63, 67, 70]),
            (ChordQuality.DOMINANT_7, [60, 64, 67, 70]),
            (ChordQuality.DIMINISHED_7, [60, 63, 66, 69]),
            (ChordQuality.HALF_DIMINISHED_7, [60, 63, 66, 70]),
            (ChordQuality.AUGMENTED_7, [60, 64, 68, 70]),
            (ChordQuality.SUSPENDED_2, [60, 62, 67]),
            (ChordQuality.SUSPENDED_4, [60, 65, 67]),
            (ChordQuality.MAJOR_6, [60, 64, 67, 69]),
            (ChordQuality.MINOR_6, [60, 63, 67, 69]),
            (ChordQuality.DOMINANT_9, [60, 64, 67, 70, 74]),
            (ChordQuality.MAJOR_9, [60, 64, 67, 71, 74]),
            (ChordQuality.MINOR_9, [60, 63, 67, 70, 74]),
        ],
    )
    def test_midi_notes(self, c4: Pitch, quality: ChordQuality, midi: list[int]) -> None:
        """Each quality's tones over C4."""
        chord = Chord(c4, quality)
        assert [p.midi_note_number for p in chord.get_pitches()] == midi
        assert chord.get_midi_notes() == midi

    def test_table_order(self) -> None:
        """Tones come back in table order, root first."""
        chord = Chord.minor7(Pitch.parse("A3"))
        names = [p.scientific_pitch_notation for p in chord.get_pitches()]
        assert names == ["A3", "C4", "E4", "G4"]

    def test_tone(self, c4: Pitch) -> None:
        """Single tones by 1-based position."""
        chord = Chord.dominant7(c4)
        assert chord.tone(1) == c4
        assert chord.tone(4).scientific_pitch_notation == "A#4"
        assert len(chord) == 4

    @pytest.mark.parametrize("degree", [0, -1, 4])
    def test_tone_out_of_range(self, c4: Pitch, degree: int) -> None:
        """Degrees outside the chord fail."""
        with pytest.raises(InvalidDegreeError):
            Chord.major(c4).tone(degree)


class TestNotes:
    """Tests for get_notes."""

    def test_notes_share_attributes(self, c4: Pitch) -> None:
        """Every note gets the same performance attributes."""
        notes = Chord.major(c4).get_notes(NoteValue.HALF, dynamics=Dynamics.FORTE)
        assert [n.pitch.midi_note_number for n in notes] == [60, 64, 67]
        assert all(n.duration is NoteValue.HALF for n in notes)
        assert all(n.dynamics is Dynamics.FORTE for n in notes)

    def test_notes_apply_accidental(self, c4: Pitch) -> None:
        """The accidental shifts each chord tone."""
        notes = Chord.major(c4).get_notes(accidental=Accidental.SHARP)
        assert [n.pitch.midi_note_number for n in notes] == [61, 65, 68]


class TestTranspose:
    """Tests for transpose and the factories."""

    def test_transpose(self, c4: Pitch) -> None:
        """Same quality, new root."""
        chord = Chord.minor(c4).transpose(Pitch.parse("D4"))
        assert chord.quality is ChordQuality.MINOR
        assert chord.get_midi_notes() == [62, 65, 69]

    def test_transpose_rederives_intervals(self, c4: Pitch) -> None:
        """A custom stack is replaced by the table entry on transpose."""
        custom = Chord.from_intervals(c4, ChordQuality.MAJOR, [Interval.P1, Interval.P5, Interval.P8])
        moved = custom.transpose(Pitch.parse("D4"))
        assert moved.intervals == CHORD_INTERVALS[ChordQuality.MAJOR]

    def test_immutable(self, c4: Pitch) -> None:
        """Chords cannot be modified."""
        chord = Chord.major(c4)
        with pytest.raises(AttributeError):
            chord.root = Pitch.parse("D4")  # type: ignore[misc]

    def test_value_semantics(self, c4: Pitch) -> None:
        """Chords compare and hash by value."""
        assert Chord.major(c4) == Chord(Pitch.from_midi(60), ChordQuality.MAJOR)
        assert len({Chord.major(c4), Chord.major(c4), Chord.minor(c4)}) == 2

    def test_factories(self, c4: Pitch) -> None:
        """Every factory builds its quality."""
        factories = {
            Chord.major: ChordQuality.MAJOR,
            Chord.minor: ChordQuality.MINOR,
            Chord.diminished: ChordQuality.DIMINISHED,
            Chord.augmented: ChordQuality.AUGMENTED,
            Chord.dominant: ChordQuality.DOMINANT,
            Chord.major7: ChordQuality.MAJOR_7,
            Chord.minor7: ChordQuality.MINOR_7,
            Chord.dominant7: ChordQuality.DOMINANT_7,
            Chord.diminished7: ChordQuality.DIMINISHED_7,
            Chord.half_diminished7: ChordQuality.HALF_DIMINISHED_7,
            Chord.augmented7: ChordQuality.AUGMENTED_7,
            Chord.suspended2: ChordQuality.SUSPENDED_2,
            Chord.suspended4: ChordQuality.SUSPENDED_4,
            Chord.major6: ChordQuality.MAJOR_6,
            Chord.minor6: ChordQuality.MINOR_6,
            Chord.dominant9: ChordQuality.DOMINANT_9,
            Chord.major9: ChordQuality.MAJOR_9,
            Chord.minor9: ChordQuality.MINOR_9,
        }
        for factory, quality in factories.items():
            assert factory(c4).quality is quality


class TestValidation:
    """Tests for structure validation on custom stacks."""

    def test_too_few_intervals(self, c4: Pitch) -> None:
        """Fewer than three intervals fail."""
        with pytest.raises(InvalidChordStructureError, match="at least three"):
            Chord.from_intervals(c4, ChordQuality.MAJOR, [Interval.P1, Interval.P5])

    def test_first_not_unison(self, c4: Pitch) -> None:
        """The stack must start with P1."""
        with pytest.raises(InvalidChordStructureError, match="P1"):
            Chord.from_intervals(c4, ChordQuality.MAJOR, [Interval.M3, Interval.P5, Interval.M7])

    def test_custom_stack(self, c4: Pitch) -> None:
        """A valid custom stack is used as given."""
        chord = Chord.from_intervals(c4, ChordQuality.MAJOR, [Interval.P1, Interval.P5, Interval.P8])
        assert chord.get_midi_notes() == [60, 67, 72]

    def test_table_intervals_stored(self, c4: Pitch) -> None:
        """Table lookups are stored as a concrete tuple."""
        chord = Chord.minor(c4)
        assert chord.intervals == (Interval.P1, Interval.m3, Interval.P5)
        assert len(chord) == 3

    def test_custom_stack_compares_by_intervals(self, c4: Pitch) -> None:
        """Custom stacks take part in equality and hashing."""
        stack = [Interval.P1, Interval.M3, Interval.P5]
        custom = Chord.from_intervals(c4, ChordQuality.MAJOR, stack)
        assert custom == Chord.major(c4)
        assert hash(custom) == hash(Chord.major(c4))
        assert custom != Chord.from_intervals(c4, ChordQuality.MAJOR, [*stack, Interval.M7])


class TestFormatting:
    """Tests for str(chord)."""

    def test_str(self, c4: Pitch) -> None:
        """Root, quality and tones."""
        assert str(Chord.major(c4)) == "C4 major chord: C4 E4 G4"
        assert str(Chord.minor7(c4)) == "C4 minor 7 chord: C4 D#4 G4 A#4"
