"""
Interval - a diatonic interval (number + quality).

Unlike a bare semitone count, a diatonic interval knows its letter span:
an augmented fourth and a diminished fifth are both 6 semitones but are
different intervals. Semitone spans, inversions and derivation from two
pitches all follow the diatonic rules in core.theory.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from chuk_music_theory.constants import CENTS_PER_SEMITONE, ErrorMessages, IntervalQuality
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.theory import (
    base_semitones,
    invert_quality,
    is_perfect_class,
    letter_distance,
    quality_from_offset,
    quality_offset,
    reduce_number,
)
from chuk_music_theory.errors import InvalidIntervalNameError, InvalidIntervalNumberError

_SHORTHAND_RE = re.compile(r"^\s*(AA|dd|P|M|m|A|d)(\d+)\s*$")

_QUALITY_BY_ABBREVIATION: dict[str, IntervalQuality] = {q.abbreviation: q for q in IntervalQuality}


@dataclass(frozen=True)
class Interval:
    """
    A diatonic interval: a number (1 = unison, 8 = octave, 9+ compound)
    and a quality.

    The quality is taken as given, so a "major unison" can be built; it
    simply adds no adjustment.

    Immutable and hashable.
    """

    number: int
    quality: IntervalQuality

    # Named intervals (defined after class)
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    A5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    d7: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]
    M9: ClassVar[Interval]

    def __post_init__(self) -> None:
        if self.number < 1:
            raise InvalidIntervalNumberError(
                ErrorMessages.INVALID_INTERVAL_NUMBER.format(number=self.number)
            )
        # Accept plain strings like "major"
        object.__setattr__(self, "quality", IntervalQuality(self.quality))

    @property
    def semitones(self) -> int:
        """
        Semitones spanned in 12-TET.

        Base interval (perfect or major) for the simple number, plus 12 per
        octave, plus the quality's adjustment.
        """
        simple, _ = reduce_number(self.number)
        return base_semitones(self.number) + quality_offset(self.quality, simple)

    @property
    def is_compound(self) -> bool:
        """True for intervals wider than an octave."""
        return self.number > 8

    def to_cents(self) -> float:
        """Size in cents (100 per semitone)."""
        return self.semitones * CENTS_PER_SEMITONE

    def invert(self) -> Interval:
        """
        Invert the interval.

        Simple numbers sum to 9 with their inversion (M3 -> m6, P4 -> P5,
        P8 -> P1). Compound intervals keep their extra octaves (M10 -> m13).
        """
        simple, _ = reduce_number(self.number)
        quality = invert_quality(self.quality, simple)
        if self.number == 1:
            return Interval(8, quality)

        # Octaves count as simple here (2-8), so P8 inverts to P1
        octaves, remainder = divmod(self.number - 2, 7)
        return Interval(9 - (remainder + 2) + 7 * octaves, quality)

    def apply_to_pitch(self, pitch: Pitch) -> Pitch:
        """Return the pitch this interval above the given one."""
        return Pitch.from_midi(pitch.midi_note_number + self.semitones, pitch.tuning)

    def apply_to_note(self, note: Note) -> Note:
        """
        Return a note this interval above the given one.

        Duration, accidental, dynamics and articulation are carried over.
        The note's pitch already includes its accidental, so it is not
        applied a second time.
        """
        return Note.from_sounding_pitch(
            self.apply_to_pitch(note.pitch),
            duration=note.duration,
            accidental=note.accidental,
            dynamics=note.dynamics,
            articulation=note.articulation,
        )

    @classmethod
    def from_pitches(cls, lower: Pitch, higher: Pitch) -> Interval:
        """
        Derive the interval between two pitches.

        The number comes from counting letters (C4 -> E4 is a third), the
        quality from how far the real semitone distance is from the
        perfect/major interval of that number. Pitches are swapped if
        given high-to-low by MIDI number.

        Pitches are always spelled with sharps, so C#4 -> F4 is a
        diminished fourth rather than a major third.
        """
        if higher.midi_note_number < lower.midi_note_number:
            lower, higher = higher, lower

        semitone_distance = higher.midi_note_number - lower.midi_note_number
        number = letter_distance(lower.note_name, lower.octave, higher.note_name, higher.octave)

        simple, _ = reduce_number(number)
        offset = semitone_distance - base_semitones(number)
        return cls(number, quality_from_offset(offset, is_perfect_class(simple)))

    @classmethod
    def from_notes(cls, lower: Note, higher: Note) -> Interval:
        """Derive the interval between two notes' pitches."""
        return cls.from_pitches(lower.pitch, higher.pitch)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse shorthand like 'P5', 'm3', 'A4', 'dd7' or 'M9'."""
        match = _SHORTHAND_RE.match(name)
        if not match:
            raise InvalidIntervalNameError(ErrorMessages.INVALID_INTERVAL_NAME.format(text=name))
        abbreviation, number = match.groups()
        return cls(int(number), _QUALITY_BY_ABBREVIATION[abbreviation])

    def __str__(self) -> str:
        """Shorthand name: M3, P5, m2, A4, ..."""
        return f"{self.quality.abbreviation}{self.number}"

    def __repr__(self) -> str:
        return f"Interval({self.number}, IntervalQuality.{self.quality.name})"


# Initialize class constants after class is defined
Interval.P1 = Interval(1, IntervalQuality.PERFECT)
Interval.m2 = Interval(2, IntervalQuality.MINOR)
Interval.M2 = Interval(2, IntervalQuality.MAJOR)
Interval.m3 = Interval(3, IntervalQuality.MINOR)
Interval.M3 = Interval(3, IntervalQuality.MAJOR)
Interval.P4 = Interval(4, IntervalQuality.PERFECT)
Interval.A4 = Interval(4, IntervalQuality.AUGMENTED)
Interval.d5 = Interval(5, IntervalQuality.DIMINISHED)
Interval.P5 = Interval(5, IntervalQuality.PERFECT)
Interval.A5 = Interval(5, IntervalQuality.AUGMENTED)
Interval.m6 = Interval(6, IntervalQuality.MINOR)
Interval.M6 = Interval(6, IntervalQuality.MAJOR)
Interval.d7 = Interval(7, IntervalQuality.DIMINISHED)
Interval.m7 = Interval(7, IntervalQuality.MINOR)
Interval.M7 = Interval(7, IntervalQuality.MAJOR)
Interval.P8 = Interval(8, IntervalQuality.PERFECT)
Interval.M9 = Interval(9, IntervalQuality.MAJOR)
