"""
Music theory computation library.

Pitches, intervals, notes, chords and scales, and the 12-TET arithmetic
that converts between them (frequency, MIDI number, note name, scientific
pitch notation, diatonic interval, semitone span).
"""

from chuk_music_theory.config import (
    DEFAULT_TUNING,
    Tuning,
    get_default_tuning,
    set_default_tuning,
    use_tuning,
)
from chuk_music_theory.constants import (
    Accidental,
    Articulation,
    ChordQuality,
    Dynamics,
    IntervalQuality,
    NoteValue,
    ScaleType,
)
from chuk_music_theory.core import Chord, Interval, Note, Pitch, Scale
from chuk_music_theory.errors import (
    EmptyIntervalSetError,
    InvalidChordStructureError,
    InvalidDegreeError,
    InvalidFrequencyError,
    InvalidIntervalNameError,
    InvalidIntervalNumberError,
    InvalidNoteNameError,
    InvalidTonicIntervalError,
    MusicTheoryError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Pitch",
    "Interval",
    "Note",
    "Chord",
    "Scale",
    # Enums
    "Accidental",
    "Articulation",
    "ChordQuality",
    "Dynamics",
    "IntervalQuality",
    "NoteValue",
    "ScaleType",
    # Tuning
    "DEFAULT_TUNING",
    "Tuning",
    "get_default_tuning",
    "set_default_tuning",
    "use_tuning",
    # Errors
    "MusicTheoryError",
    "InvalidNoteNameError",
    "InvalidFrequencyError",
    "InvalidIntervalNumberError",
    "InvalidIntervalNameError",
    "InvalidChordStructureError",
    "EmptyIntervalSetError",
    "InvalidTonicIntervalError",
    "InvalidDegreeError",
]
