"""
Constants and enums for the music theory library.

No magic strings - use enums for constrained values and keep the
fixed tables (note names, accidental offsets, glyphs) in one place.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from fractions import Fraction

# Canonical chromatic spelling. Flats are deliberately not recognised.
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

SEMITONES_PER_OCTAVE = 12
DIATONIC_STEPS_PER_OCTAVE = 7
CENTS_PER_SEMITONE = 100.0

# A4 under the default tuning
REFERENCE_MIDI_NOTE = 69
REFERENCE_FREQUENCY_HZ = 440.0


class IntervalQuality(str, Enum):
    """Quality modifier of a diatonic interval."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"
    DOUBLY_AUGMENTED = "doubly augmented"
    DOUBLY_DIMINISHED = "doubly diminished"

    @property
    def abbreviation(self) -> str:
        """Shorthand used in interval names (P, M, m, A, d, AA, dd)."""
        return _QUALITY_ABBREVIATIONS[self]


_QUALITY_ABBREVIATIONS: dict[IntervalQuality, str] = {
    IntervalQuality.PERFECT: "P",
    IntervalQuality.MAJOR: "M",
    IntervalQuality.MINOR: "m",
    IntervalQuality.AUGMENTED: "A",
    IntervalQuality.DIMINISHED: "d",
    IntervalQuality.DOUBLY_AUGMENTED: "AA",
    IntervalQuality.DOUBLY_DIMINISHED: "dd",
}


class ChordQuality(str, Enum):
    """The chord types with a fixed interval table."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOMINANT = "dominant"
    MAJOR_7 = "major 7"
    MINOR_7 = "minor 7"
    DOMINANT_7 = "dominant 7"
    DIMINISHED_7 = "diminished 7"
    HALF_DIMINISHED_7 = "half-diminished 7"
    AUGMENTED_7 = "augmented 7"
    SUSPENDED_2 = "sus2"
    SUSPENDED_4 = "sus4"
    MAJOR_6 = "major 6"
    MINOR_6 = "minor 6"
    DOMINANT_9 = "dominant 9"
    MAJOR_9 = "major 9"
    MINOR_9 = "minor 9"


class ScaleType(str, Enum):
    """Broad family a scale belongs to. Does not fix the interval pattern."""

    MAJOR = "major"
    MINOR = "minor"
    PENTATONIC = "pentatonic"
    CHROMATIC = "chromatic"
    WHOLE_TONE = "whole tone"
    OCTATONIC = "octatonic"


class Accidental(str, Enum):
    """
    Accidental attached to a note.

    Half sharp / half flat are placeholders: they render a glyph but
    do not move the pitch (no microtonal resolution).
    """

    NATURAL = "natural"
    SHARP = "sharp"
    FLAT = "flat"
    DOUBLE_SHARP = "double sharp"
    DOUBLE_FLAT = "double flat"
    HALF_SHARP = "half sharp"
    HALF_FLAT = "half flat"

    @property
    def semitone_offset(self) -> int:
        """Semitones the accidental moves a pitch by."""
        return _ACCIDENTAL_OFFSETS[self]

    @property
    def symbol(self) -> str:
        """Unicode glyph (empty for natural)."""
        return _ACCIDENTAL_SYMBOLS[self]


_ACCIDENTAL_OFFSETS: dict[Accidental, int] = {
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.DOUBLE_SHARP: 2,
    Accidental.DOUBLE_FLAT: -2,
    Accidental.HALF_SHARP: 0,
    Accidental.HALF_FLAT: 0,
}

_ACCIDENTAL_SYMBOLS: dict[Accidental, str] = {
    Accidental.NATURAL: "",
    Accidental.SHARP: "♯",
    Accidental.FLAT: "♭",
    Accidental.DOUBLE_SHARP: "\U0001d12a",  # 𝄪
    Accidental.DOUBLE_FLAT: "\U0001d12b",  # 𝄫
    Accidental.HALF_SHARP: "\U0001d132",  # 𝄲
    Accidental.HALF_FLAT: "\U0001d133",  # 𝄳
}

ACCIDENTAL_SYMBOLS: frozenset[str] = frozenset(s for s in _ACCIDENTAL_SYMBOLS.values() if s)


class Articulation(str, Enum):
    """How a note is attacked and released."""

    STACCATO = "staccato"
    LEGATO = "legato"
    TENUTO = "tenuto"
    ACCENT = "accent"
    MARCATO = "marcato"
    NORMAL = "normal"


class Dynamics(str, Enum):
    """Standard dynamic markings, softest to loudest."""

    PIANISSISSIMO = "ppp"
    PIANISSIMO = "pp"
    PIANO = "p"
    MEZZO_PIANO = "mp"
    MEZZO_FORTE = "mf"
    FORTE = "f"
    FORTISSIMO = "ff"
    FORTISSISSIMO = "fff"


class NoteValue(IntEnum):
    """
    Written note value, numbered by its denominator.

    A quarter note is 4 (one quarter of a whole note). The breve has
    no denominator and is numbered 0.
    """

    DOUBLE_WHOLE = 0  # Breve
    WHOLE = 1  # Semibreve
    HALF = 2  # Minim
    QUARTER = 4  # Crotchet
    EIGHTH = 8  # Quaver
    SIXTEENTH = 16  # Semiquaver
    THIRTY_SECOND = 32  # Demisemiquaver
    SIXTY_FOURTH = 64  # Hemidemisemiquaver
    HUNDRED_TWENTY_EIGHTH = 128  # Semihemidemisemiquaver

    @property
    def beats(self) -> Fraction:
        """Length in quarter-note beats, as an exact fraction."""
        if self is NoteValue.DOUBLE_WHOLE:
            return Fraction(8)
        return Fraction(4, self.value)

    @property
    def label(self) -> str:
        """Human-readable name (e.g. 'quarter', 'thirty second')."""
        return self.name.lower().replace("_", " ")


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE_NAME = "Invalid note name: '{name}'. Expected one of {names}."
    INVALID_PITCH_NOTATION = "Invalid pitch notation: '{text}'. Expected a form like 'C#4'."
    INVALID_FREQUENCY = "Invalid frequency: {frequency}. Must be a finite value above 0 Hz."
    INVALID_INTERVAL_NUMBER = "Interval number must be at least 1, got {number}."
    INVALID_INTERVAL_NAME = "Invalid interval name: '{text}'. Expected a form like 'M3' or 'P5'."
    CHORD_TOO_SMALL = "A chord must have at least three notes, got {count}."
    CHORD_ROOT_NOT_UNISON = "First interval of a chord must be a perfect unison (P1), got {interval}."
    EMPTY_INTERVAL_SET = "A scale needs at least one interval."
    SCALE_TONIC_NOT_UNISON = "First interval of a scale must be a perfect unison (P1), got {interval}."
    INVALID_DEGREE = "Degree must be >= 1, got {degree}."
    CHORD_DEGREE_OUT_OF_RANGE = "Chord tone must be between 1 and {count}, got {degree}."
