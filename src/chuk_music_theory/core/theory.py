"""
Diatonic theory helpers - the single source of the music theory constants.

Pure functions shared by Interval, Chord and Scale:
- reducing an interval number to its simple form (1-7) plus octaves
- the perfect-class predicate (unison, fourth, fifth)
- the base semitone table for perfect/major intervals
- quality <-> semitone offset mappings
- letter counting between note names
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Protocol

from chuk_music_theory.constants import (
    DIATONIC_STEPS_PER_OCTAVE,
    NOTE_NAMES,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
    IntervalQuality,
)
from chuk_music_theory.errors import InvalidNoteNameError

logger = logging.getLogger(__name__)

# Degree of each natural letter, C = 1
LETTER_DEGREES = MappingProxyType({"C": 1, "D": 2, "E": 3, "F": 4, "G": 5, "A": 6, "B": 7})

# Semitones of the perfect/major interval for simple numbers 1-7
BASE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

PERFECT_CLASS_NUMBERS = frozenset({1, 4, 5})

_PERFECT_CLASS_OFFSETS = MappingProxyType(
    {
        IntervalQuality.PERFECT: 0,
        IntervalQuality.AUGMENTED: 1,
        IntervalQuality.DIMINISHED: -1,
        IntervalQuality.DOUBLY_AUGMENTED: 2,
        IntervalQuality.DOUBLY_DIMINISHED: -2,
    }
)

_MAJOR_CLASS_OFFSETS = MappingProxyType(
    {
        IntervalQuality.MAJOR: 0,
        IntervalQuality.MINOR: -1,
        IntervalQuality.AUGMENTED: 1,
        IntervalQuality.DIMINISHED: -2,
        IntervalQuality.DOUBLY_AUGMENTED: 2,
        IntervalQuality.DOUBLY_DIMINISHED: -3,
    }
)

# Reverse lookups: semitone offset -> quality
_PERFECT_CLASS_QUALITIES = MappingProxyType({v: k for k, v in _PERFECT_CLASS_OFFSETS.items()})
_MAJOR_CLASS_QUALITIES = MappingProxyType({v: k for k, v in _MAJOR_CLASS_OFFSETS.items()})

_INVERTED_QUALITIES = MappingProxyType(
    {
        IntervalQuality.AUGMENTED: IntervalQuality.DIMINISHED,
        IntervalQuality.DIMINISHED: IntervalQuality.AUGMENTED,
        IntervalQuality.DOUBLY_AUGMENTED: IntervalQuality.DOUBLY_DIMINISHED,
        IntervalQuality.DOUBLY_DIMINISHED: IntervalQuality.DOUBLY_AUGMENTED,
    }
)


class IntervalLike(Protocol):
    number: int
    quality: IntervalQuality


def reduce_number(number: int) -> tuple[int, int]:
    """
    Split an interval number into its simple number (1-7) and octaves.

    Examples:
        reduce_number(3) == (3, 0)
        reduce_number(8) == (1, 1)   # octave
        reduce_number(9) == (2, 1)   # ninth
    """
    octaves, remainder = divmod(number - 1, DIATONIC_STEPS_PER_OCTAVE)
    return remainder + 1, octaves


def is_perfect_class(simple_number: int) -> bool:
    """Unisons, fourths and fifths take Perfect rather than Major/Minor."""
    return simple_number in PERFECT_CLASS_NUMBERS


def base_semitones(number: int) -> int:
    """Semitones of the perfect (or major) interval with this number, octaves included."""
    simple, octaves = reduce_number(number)
    return BASE_SEMITONES[simple - 1] + SEMITONES_PER_OCTAVE * octaves


def quality_offset(quality: IntervalQuality, simple_number: int) -> int:
    """
    Semitone adjustment a quality applies to the base interval.

    A quality that does not belong to the class (e.g. Major on a fifth)
    is taken as given and adjusts nothing.
    """
    offsets = _PERFECT_CLASS_OFFSETS if is_perfect_class(simple_number) else _MAJOR_CLASS_OFFSETS
    offset = offsets.get(quality)
    if offset is None:
        logger.debug(f"Quality {quality.value} does not apply to number {simple_number}")
        return 0
    return offset


def quality_from_offset(offset: int, perfect_class: bool) -> IntervalQuality:
    """
    Quality whose adjustment equals the given semitone offset.

    Offsets outside the table fall back to Perfect (perfect class) or
    Major (major class).
    """
    if perfect_class:
        qualities, fallback = _PERFECT_CLASS_QUALITIES, IntervalQuality.PERFECT
    else:
        qualities, fallback = _MAJOR_CLASS_QUALITIES, IntervalQuality.MAJOR

    quality = qualities.get(offset)
    if quality is None:
        logger.debug(f"No quality for offset {offset}, falling back to {fallback.value}")
        return fallback
    return quality


def invert_quality(quality: IntervalQuality, simple_number: int) -> IntervalQuality:
    """
    Quality of the inverted interval.

    Augmented/diminished (and doubled forms) swap in either class.
    Major and minor swap on major-class numbers; anything else becomes Perfect.
    """
    if quality in _INVERTED_QUALITIES:
        return _INVERTED_QUALITIES[quality]
    if not is_perfect_class(simple_number):
        if quality is IntervalQuality.MAJOR:
            return IntervalQuality.MINOR
        if quality is IntervalQuality.MINOR:
            return IntervalQuality.MAJOR
    return IntervalQuality.PERFECT


def letter_to_degree(note_name: str) -> int:
    """Degree (C=1 .. B=7) of a note name's letter, ignoring any accidental."""
    letter = note_name[:1].upper()
    if letter not in LETTER_DEGREES:
        raise InvalidNoteNameError(
            ErrorMessages.INVALID_NOTE_NAME.format(name=note_name, names=", ".join(NOTE_NAMES))
        )
    return LETTER_DEGREES[letter]


def letter_distance(lower_name: str, lower_octave: int, higher_name: str, higher_octave: int) -> int:
    """
    Inclusive count of letters from the lower to the higher note.

    C4 to E4 is 3 (C, D, E); C4 to C5 is 8.
    """
    octave_steps = (higher_octave - lower_octave) * DIATONIC_STEPS_PER_OCTAVE
    return letter_to_degree(higher_name) + octave_steps - letter_to_degree(lower_name) + 1


def is_perfect_unison(interval: IntervalLike) -> bool:
    """True if the interval is P1."""
    return interval.number == 1 and interval.quality is IntervalQuality.PERFECT
