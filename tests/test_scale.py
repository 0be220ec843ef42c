"""
Tests for Scale.

Tests cover:
- Major and natural minor factories
- Degree lookup and multi-octave wraparound
- Single-octave pitch lists
- Construction validation
- Transposition and formatting
"""

import pytest

from chuk_music_theory import (
    Accidental,
    EmptyIntervalSetError,
    Interval,
    InvalidDegreeError,
    InvalidNoteNameError,
    InvalidTonicIntervalError,
    NoteValue,
    Pitch,
    Scale,
    ScaleType,
)
from chuk_music_theory.core.scale import MAJOR_PATTERN


def _midi(pitches: list[Pitch]) -> list[int]:
    return [p.midi_note_number for p in pitches]


class TestFactories:
    """Tests for the named scale factories."""

    def test_major(self, c4: Pitch) -> None:
        """C major, octave included."""
        scale = Scale.major(c4)
        assert _midi(scale.get_pitches()) == [60, 62, 64, 65, 67, 69, 71, 72]
        assert scale.name == "C Major"
        assert scale.scale_type is ScaleType.MAJOR
        assert scale.count == 8

    def test_natural_minor(self) -> None:
        """A natural minor."""
        scale = Scale.natural_minor(Pitch.parse("A3"))
        assert _midi(scale.get_pitches()) == [57, 59, 60, 62, 64, 65, 67, 69]
        assert scale.name == "A Minor"
        assert scale.scale_type is ScaleType.MINOR

    def test_reference_semitones(self, c4: Pitch) -> None:
        """Major pattern spans 0 2 4 5 7 9 11 12 above the tonic."""
        offsets = [p - c4 for p in Scale.major(c4).get_pitches()]
        assert offsets == [0, 2, 4, 5, 7, 9, 11, 12]

    def test_without_octave(self, c4: Pitch) -> None:
        """include_octave=False drops the last interval."""
        assert _midi(Scale.major(c4).get_pitches(include_octave=False)) == [
            60,
            62,
            64,
            65,
            67,
            69,
            71,
        ]

    def test_from_note_name(self) -> None:
        """Tonic by name and octave."""
        scale = Scale.from_note_name("D", 4, MAJOR_PATTERN, "D Major", ScaleType.MAJOR)
        assert scale.tonic.midi_note_number == 62
        assert scale.get_pitch_at_degree(3).note_name == "F#"

    def test_from_note_name_rejects_unknown(self) -> None:
        """Unknown tonic names fail."""
        with pytest.raises(InvalidNoteNameError):
            Scale.from_note_name("Eb", 4, MAJOR_PATTERN)


class TestDegrees:
    """Tests for get_pitch_at_degree."""

    def test_first_octave(self, c4: Pitch) -> None:
        """Degrees 1-8 follow the pattern."""
        scale = Scale.major(c4)
        assert [scale.get_pitch_at_degree(d).midi_note_number for d in range(1, 9)] == [
            60,
            62,
            64,
            65,
            67,
            69,
            71,
            72,
        ]

    def test_wraparound(self, c4: Pitch) -> None:
        """Degree 9 is degree 2 an octave up."""
        scale = Scale.major(c4)
        assert (
            scale.get_pitch_at_degree(9).midi_note_number
            == scale.get_pitch_at_degree(2).midi_note_number + 12
        )

    def test_two_octaves_up(self, c4: Pitch) -> None:
        """Degree 15 is the tonic two octaves up, 17 is the third."""
        scale = Scale.major(c4)
        assert scale.get_pitch_at_degree(15).midi_note_number == 84
        assert scale.get_pitch_at_degree(17).scientific_pitch_notation == "E6"

    def test_minor_wraparound(self) -> None:
        """Wrapping works for any pattern."""
        scale = Scale.natural_minor(Pitch.parse("A3"))
        assert scale.get_pitch_at_degree(10).scientific_pitch_notation == "C5"

    @pytest.mark.parametrize("degree", [0, -1])
    def test_invalid_degree(self, c4: Pitch, degree: int) -> None:
        """Degrees below 1 fail."""
        with pytest.raises(InvalidDegreeError):
            Scale.major(c4).get_pitch_at_degree(degree)

    def test_short_pattern(self, c4: Pitch) -> None:
        """A pentatonic pattern closing on the octave wraps every five degrees."""
        pattern = [Interval.P1, Interval.M2, Interval.M3, Interval.P5, Interval.M6, Interval.P8]
        scale = Scale(c4, pattern, "C Pentatonic", ScaleType.PENTATONIC)
        assert scale.get_pitch_at_degree(6).midi_note_number == 72
        assert scale.get_pitch_at_degree(7).midi_note_number == 74

    def test_unison_only_pattern(self, c4: Pitch) -> None:
        """A pattern of just P1 steps by octaves."""
        scale = Scale(c4, [Interval.P1], "C drone", ScaleType.CHROMATIC)
        assert _midi([scale.get_pitch_at_degree(d) for d in (1, 2, 3)]) == [60, 72, 84]

    def test_note_at_degree(self, c4: Pitch) -> None:
        """Notes carry the requested attributes and accidental."""
        note = Scale.major(c4).get_note_at_degree(
            4, NoteValue.HALF, accidental=Accidental.SHARP
        )
        assert note.pitch.scientific_pitch_notation == "F#4"
        assert note.duration is NoteValue.HALF


class TestValidation:
    """Tests for construction failures."""

    def test_empty(self, c4: Pitch) -> None:
        """No intervals fails."""
        with pytest.raises(EmptyIntervalSetError):
            Scale(c4, [], "empty", ScaleType.MAJOR)

    def test_first_not_unison(self, c4: Pitch) -> None:
        """The pattern must start on P1."""
        with pytest.raises(InvalidTonicIntervalError):
            Scale(c4, [Interval.M2, Interval.M3], "bad", ScaleType.MAJOR)

    def test_scale_type_from_string(self, c4: Pitch) -> None:
        """Scale type values are coerced to the enum."""
        scale = Scale(c4, MAJOR_PATTERN, "C Major", "major")  # type: ignore[arg-type]
        assert scale.scale_type is ScaleType.MAJOR
        assert str(scale).startswith("C Major (major): C4")

    def test_rejects_unknown_scale_type(self, c4: Pitch) -> None:
        """Unknown scale types fail."""
        with pytest.raises(ValueError):
            Scale(c4, MAJOR_PATTERN, "C Mystery", "mystery")  # type: ignore[arg-type]

    def test_intervals_stored_as_tuple(self, c4: Pitch) -> None:
        """Lists are frozen into tuples."""
        scale = Scale(c4, list(MAJOR_PATTERN), "C Major")
        assert scale.intervals == MAJOR_PATTERN
        assert hash(scale) == hash(Scale.major(c4))


class TestTranspose:
    """Tests for Scale.transpose."""

    def test_transpose_keeps_name(self, c4: Pitch) -> None:
        """Without a new name the old one is kept."""
        moved = Scale.major(c4).transpose(Pitch.parse("G4"))
        assert moved.name == "C Major"
        assert moved.tonic.midi_note_number == 67
        assert moved.get_pitch_at_degree(7).note_name == "F#"

    def test_transpose_renames(self, c4: Pitch) -> None:
        """A new name replaces the old one."""
        moved = Scale.natural_minor(c4).transpose(Pitch.parse("E4"), "E Minor")
        assert moved.name == "E Minor"
        assert moved.scale_type is ScaleType.MINOR
        assert moved.intervals == Scale.natural_minor(c4).intervals


class TestFormatting:
    """Tests for str(scale)."""

    def test_str(self, c4: Pitch) -> None:
        """Name, type and pitches."""
        assert str(Scale.major(c4)) == "C Major (major): C4 D4 E4 F4 G4 A4 B4 C5"
