"""
Chord - a root pitch plus a quality.

Each quality maps to a fixed, ordered stack of diatonic intervals measured
from the root (not stacked on each other). The table is built once and
never mutated; chords look their intervals up from it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import InitVar, dataclass, field
from types import MappingProxyType

from chuk_music_theory.constants import (
    Accidental,
    Articulation,
    ChordQuality,
    Dynamics,
    ErrorMessages,
    NoteValue,
)
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.theory import is_perfect_unison
from chuk_music_theory.errors import InvalidChordStructureError, InvalidDegreeError

logger = logging.getLogger(__name__)

_P1, _M2, _m3, _M3 = Interval.P1, Interval.M2, Interval.m3, Interval.M3
_P4, _d5, _P5, _A5 = Interval.P4, Interval.d5, Interval.P5, Interval.A5
_M6, _d7, _m7, _M7, _M9 = Interval.M6, Interval.d7, Interval.m7, Interval.M7, Interval.M9

MAJOR_TRIAD: tuple[Interval, ...] = (_P1, _M3, _P5)

CHORD_INTERVALS: Mapping[ChordQuality, tuple[Interval, ...]] = MappingProxyType(
    {
        ChordQuality.MAJOR: MAJOR_TRIAD,
        ChordQuality.MINOR: (_P1, _m3, _P5),
        ChordQuality.DIMINISHED: (_P1, _m3, _d5),
        ChordQuality.AUGMENTED: (_P1, _M3, _A5),
        ChordQuality.DOMINANT: MAJOR_TRIAD,  # the triad under a dominant 7th
        ChordQuality.MAJOR_7: (_P1, _M3, _P5, _M7),
        ChordQuality.MINOR_7: (_P1, _m3, _P5, _m7),
        ChordQuality.DOMINANT_7: (_P1, _M3, _P5, _m7),
        ChordQuality.DIMINISHED_7: (_P1, _m3, _d5, _d7),
        ChordQuality.HALF_DIMINISHED_7: (_P1, _m3, _d5, _m7),
        ChordQuality.AUGMENTED_7: (_P1, _M3, _A5, _m7),
        ChordQuality.SUSPENDED_2: (_P1, _M2, _P5),
        ChordQuality.SUSPENDED_4: (_P1, _P4, _P5),
        ChordQuality.MAJOR_6: (_P1, _M3, _P5, _M6),
        ChordQuality.MINOR_6: (_P1, _m3, _P5, _M6),
        ChordQuality.DOMINANT_9: (_P1, _M3, _P5, _m7, _M9),
        ChordQuality.MAJOR_9: (_P1, _M3, _P5, _M7, _M9),
        ChordQuality.MINOR_9: (_P1, _m3, _P5, _m7, _M9),
    }
)


def intervals_for_quality(quality: ChordQuality | str) -> tuple[Interval, ...]:
    """
    Look up the interval stack for a chord quality.

    Unknown qualities fall back to the major triad.
    """
    intervals = CHORD_INTERVALS.get(quality)  # type: ignore[call-overload]
    if intervals is None:
        logger.debug(f"Unknown chord quality {quality!r}, using major triad")
        return MAJOR_TRIAD
    return intervals


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a root pitch and a quality.

    Intervals come from the quality table unless given explicitly. Either
    way there must be at least three, starting with P1.

    Examples:
        Chord(Pitch.parse("C4"), ChordQuality.MAJOR) -> C4 E4 G4
        Chord.minor7(Pitch.parse("A3")) -> A3 C4 E4 G4
    """

    root: Pitch
    quality: ChordQuality
    custom_intervals: InitVar[Iterable[Interval] | None] = None
    intervals: tuple[Interval, ...] = field(init=False)

    def __post_init__(self, custom_intervals: Iterable[Interval] | None) -> None:
        intervals = (
            intervals_for_quality(self.quality)
            if custom_intervals is None
            else tuple(custom_intervals)
        )
        if len(intervals) < 3:
            raise InvalidChordStructureError(
                ErrorMessages.CHORD_TOO_SMALL.format(count=len(intervals))
            )
        if not is_perfect_unison(intervals[0]):
            raise InvalidChordStructureError(
                ErrorMessages.CHORD_ROOT_NOT_UNISON.format(interval=intervals[0])
            )
        object.__setattr__(self, "intervals", intervals)

    def get_pitches(self) -> list[Pitch]:
        """Chord tones, in table order (root first)."""
        return [interval.apply_to_pitch(self.root) for interval in self.intervals]

    def get_midi_notes(self) -> list[int]:
        """MIDI note numbers of the chord tones."""
        return [pitch.midi_note_number for pitch in self.get_pitches()]

    def get_notes(
        self,
        duration: NoteValue = NoteValue.QUARTER,
        accidental: Accidental = Accidental.NATURAL,
        dynamics: Dynamics = Dynamics.MEZZO_FORTE,
        articulation: Articulation = Articulation.NORMAL,
    ) -> list[Note]:
        """Chord tones as notes sharing the same performance attributes."""
        return [
            Note(pitch, duration, accidental, dynamics, articulation)
            for pitch in self.get_pitches()
        ]

    def tone(self, degree: int) -> Pitch:
        """
        A single chord tone, 1-based (1 = root, 2 = third, ...).

        Raises:
            InvalidDegreeError: if degree is outside 1..number of tones
        """
        if degree < 1:
            raise InvalidDegreeError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
        if degree > len(self.intervals):
            raise InvalidDegreeError(
                ErrorMessages.CHORD_DEGREE_OUT_OF_RANGE.format(
                    count=len(self.intervals), degree=degree
                )
            )
        return self.intervals[degree - 1].apply_to_pitch(self.root)

    def transpose(self, new_root: Pitch) -> Chord:
        """Same quality on a new root. Intervals are looked up again from the table."""
        return Chord(new_root, self.quality)

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        quality = self.quality.value if isinstance(self.quality, ChordQuality) else self.quality
        tones = " ".join(p.scientific_pitch_notation for p in self.get_pitches())
        return f"{self.root.scientific_pitch_notation} {quality} chord: {tones}"

    @classmethod
    def from_intervals(
        cls, root: Pitch, quality: ChordQuality, intervals: Iterable[Interval]
    ) -> Chord:
        """Build a chord with a custom interval stack (validated like any other)."""
        return cls(root, quality, tuple(intervals))

    # Factories, one per quality
    @classmethod
    def major(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MAJOR)

    @classmethod
    def minor(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MINOR)

    @classmethod
    def diminished(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DIMINISHED)

    @classmethod
    def augmented(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.AUGMENTED)

    @classmethod
    def dominant(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DOMINANT)

    @classmethod
    def major7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MAJOR_7)

    @classmethod
    def minor7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MINOR_7)

    @classmethod
    def dominant7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DOMINANT_7)

    @classmethod
    def diminished7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DIMINISHED_7)

    @classmethod
    def half_diminished7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.HALF_DIMINISHED_7)

    @classmethod
    def augmented7(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.AUGMENTED_7)

    @classmethod
    def suspended2(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.SUSPENDED_2)

    @classmethod
    def suspended4(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.SUSPENDED_4)

    @classmethod
    def major6(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MAJOR_6)

    @classmethod
    def minor6(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MINOR_6)

    @classmethod
    def dominant9(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.DOMINANT_9)

    @classmethod
    def major9(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MAJOR_9)

    @classmethod
    def minor9(cls, root: Pitch) -> Chord:
        return cls(root, ChordQuality.MINOR_9)
