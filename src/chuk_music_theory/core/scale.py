"""
Scale - a tonic pitch plus an ordered pattern of intervals.

The intervals are measured from the tonic (cumulative), and by convention
the pattern closes with the octave: a major scale is
P1 M2 M3 P4 P5 M6 M7 P8. Degrees beyond the pattern continue into the
next octaves.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from chuk_music_theory.config import Tuning
from chuk_music_theory.constants import (
    SEMITONES_PER_OCTAVE,
    Accidental,
    Articulation,
    Dynamics,
    ErrorMessages,
    NoteValue,
    ScaleType,
)
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.theory import is_perfect_unison
from chuk_music_theory.errors import (
    EmptyIntervalSetError,
    InvalidDegreeError,
    InvalidTonicIntervalError,
)

MAJOR_PATTERN: tuple[Interval, ...] = (
    Interval.P1,
    Interval.M2,
    Interval.M3,
    Interval.P4,
    Interval.P5,
    Interval.M6,
    Interval.M7,
    Interval.P8,
)

NATURAL_MINOR_PATTERN: tuple[Interval, ...] = (
    Interval.P1,
    Interval.M2,
    Interval.m3,
    Interval.P4,
    Interval.P5,
    Interval.m6,
    Interval.m7,
    Interval.P8,
)


@dataclass(frozen=True)
class Scale:
    """
    A scale rooted on a concrete tonic.

    The interval pattern is supplied by the caller; scale_type only labels
    it. The first interval must be P1.

    Examples:
        Scale.major(Pitch.parse("C4")).get_pitches() -> C4 D4 E4 F4 G4 A4 B4 C5
        Scale.major(Pitch.parse("C4")).get_pitch_at_degree(9) -> D5
    """

    tonic: Pitch
    intervals: tuple[Interval, ...]
    name: str = ""
    scale_type: ScaleType = ScaleType.MAJOR

    def __post_init__(self) -> None:
        intervals = tuple(self.intervals)
        if not intervals:
            raise EmptyIntervalSetError(ErrorMessages.EMPTY_INTERVAL_SET)
        if not is_perfect_unison(intervals[0]):
            raise InvalidTonicIntervalError(
                ErrorMessages.SCALE_TONIC_NOT_UNISON.format(interval=intervals[0])
            )
        object.__setattr__(self, "intervals", intervals)
        object.__setattr__(self, "scale_type", ScaleType(self.scale_type))

    @property
    def count(self) -> int:
        """Number of intervals in the pattern (8 for a major scale, octave included)."""
        return len(self.intervals)

    def get_pitch_at_degree(self, degree: int) -> Pitch:
        """
        Pitch at a 1-based scale degree, wrapping into higher octaves.

        The last interval of the pattern is taken to be the octave: it is
        never selected directly once the degree wraps, the octave is added
        as 12 semitones instead. In a major scale degree 8 is the upper
        tonic and degree 9 is degree 2 an octave up.

        Raises:
            InvalidDegreeError: if degree < 1
        """
        if degree < 1:
            raise InvalidDegreeError(ErrorMessages.INVALID_DEGREE.format(degree=degree))

        steps = max(len(self.intervals) - 1, 1)
        octave_shifts, index = divmod(degree - 1, steps)
        pitch = self.intervals[index].apply_to_pitch(self.tonic)
        return pitch.transpose(SEMITONES_PER_OCTAVE * octave_shifts)

    def get_pitches(self, include_octave: bool = True) -> list[Pitch]:
        """
        The pattern applied to the tonic, one octave only.

        Args:
            include_octave: Include the last interval (the octave)
        """
        limit = len(self.intervals) if include_octave else len(self.intervals) - 1
        return [interval.apply_to_pitch(self.tonic) for interval in self.intervals[:limit]]

    def get_note_at_degree(
        self,
        degree: int,
        duration: NoteValue = NoteValue.QUARTER,
        accidental: Accidental = Accidental.NATURAL,
        dynamics: Dynamics = Dynamics.MEZZO_FORTE,
        articulation: Articulation = Articulation.NORMAL,
    ) -> Note:
        """The pitch at a degree, as a note."""
        return Note(self.get_pitch_at_degree(degree), duration, accidental, dynamics, articulation)

    def transpose(self, new_tonic: Pitch, new_name: str | None = None) -> Scale:
        """Same pattern and type on a new tonic, optionally renamed."""
        return dataclasses.replace(
            self, tonic=new_tonic, name=self.name if new_name is None else new_name
        )

    def __str__(self) -> str:
        pitches = " ".join(p.scientific_pitch_notation for p in self.get_pitches())
        return f"{self.name} ({self.scale_type.value}): {pitches}"

    @classmethod
    def from_note_name(
        cls,
        note_name: str,
        octave: int,
        intervals: Iterable[Interval],
        name: str = "",
        scale_type: ScaleType = ScaleType.MAJOR,
        tuning: Tuning | None = None,
    ) -> Scale:
        """Build a scale with the tonic given by name and octave."""
        return cls(Pitch.from_name(note_name, octave, tuning), tuple(intervals), name, scale_type)

    @classmethod
    def major(cls, tonic: Pitch) -> Scale:
        """Major scale: P1 M2 M3 P4 P5 M6 M7 P8."""
        return cls(tonic, MAJOR_PATTERN, f"{tonic.note_name} Major", ScaleType.MAJOR)

    @classmethod
    def natural_minor(cls, tonic: Pitch) -> Scale:
        """Natural minor scale: P1 M2 m3 P4 P5 m6 m7 P8."""
        return cls(tonic, NATURAL_MINOR_PATTERN, f"{tonic.note_name} Minor", ScaleType.MINOR)
