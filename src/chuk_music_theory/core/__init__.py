"""
Core music theory primitives.

Leaf-first:
- Pitch: An absolute pitch (frequency, MIDI number, name, octave)
- Interval: Diatonic interval (number + quality), semitone span, inversion
- Note: A pitch plus duration, accidental, dynamics, articulation
- Chord: Root pitch plus a quality's fixed interval stack
- Scale: Tonic pitch plus an ordered interval pattern, multi-octave degrees

Shared diatonic helpers live in theory.
"""

from chuk_music_theory.core.chord import CHORD_INTERVALS, Chord, intervals_for_quality
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.note import Note
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.scale import MAJOR_PATTERN, NATURAL_MINOR_PATTERN, Scale

__all__ = [
    # Pitch
    "Pitch",
    # Interval
    "Interval",
    # Note
    "Note",
    # Chord
    "CHORD_INTERVALS",
    "Chord",
    "intervals_for_quality",
    # Scale
    "MAJOR_PATTERN",
    "NATURAL_MINOR_PATTERN",
    "Scale",
]
