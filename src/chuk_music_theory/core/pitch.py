"""
Pitch - an absolute musical pitch.

A Pitch is identified by its MIDI note number. Note name, octave, pitch
class and frequency are all derived from it, so they can never disagree.
The frequency uses the tuning snapshotted when the pitch was built.
"""

from __future__ import annotations

import operator
import re
from functools import total_ordering

from chuk_music_theory.config import Tuning, resolve_tuning
from chuk_music_theory.constants import NOTE_NAMES, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_music_theory.errors import InvalidNoteNameError

_NOTATION_RE = re.compile(r"^\s*([A-Ga-g]#?)\s*(-?\d+)\s*$")


@total_ordering
class Pitch:
    """
    An absolute pitch in 12-TET.

    Build one with from_midi, from_name, from_frequency or parse.
    Equality, ordering and hashing use only the MIDI number, so C4 built
    from a name equals C4 built from 261.6 Hz.

    Immutable and hashable.
    """

    __slots__ = ("_midi", "_tuning")
    _midi: int
    _tuning: Tuning

    def __init__(self, midi_note_number: int, tuning: Tuning | None = None) -> None:
        """
        Create a pitch from a MIDI number (C4 = 60).

        Raises:
            TypeError: if the number is not an integer (floats are not truncated)
        """
        object.__setattr__(self, "_midi", operator.index(midi_note_number))
        object.__setattr__(self, "_tuning", resolve_tuning(tuning))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Pitch], tuple[int, Tuning]]:
        return (Pitch, (self._midi, self._tuning))

    @classmethod
    def from_midi(cls, midi_note_number: int, tuning: Tuning | None = None) -> Pitch:
        """Create a pitch from a MIDI note number."""
        return cls(midi_note_number, tuning)

    @classmethod
    def from_frequency(cls, frequency: float, tuning: Tuning | None = None) -> Pitch:
        """
        Create a pitch from a frequency in Hz.

        The frequency is snapped to the nearest semitone: the resulting
        pitch reports the equal-tempered frequency, not the input.
        """
        tuning = resolve_tuning(tuning)
        return cls(tuning.midi_for(frequency), tuning)

    @classmethod
    def from_name(cls, note_name: str, octave: int, tuning: Tuning | None = None) -> Pitch:
        """
        Create a pitch from a canonical note name and octave.

        Only the sharp spellings are recognised (C, C#, D, ... B).

        Raises:
            InvalidNoteNameError: if the name is not canonical
        """
        if note_name not in NOTE_NAMES:
            raise InvalidNoteNameError(
                ErrorMessages.INVALID_NOTE_NAME.format(name=note_name, names=", ".join(NOTE_NAMES))
            )
        pitch_class = NOTE_NAMES.index(note_name)
        return cls(pitch_class + SEMITONES_PER_OCTAVE * (operator.index(octave) + 1), tuning)

    @classmethod
    def parse(cls, notation: str, tuning: Tuning | None = None) -> Pitch:
        """Parse scientific pitch notation like 'C4', 'F#3' or 'B-1'."""
        match = _NOTATION_RE.match(notation)
        if not match:
            raise InvalidNoteNameError(ErrorMessages.INVALID_PITCH_NOTATION.format(text=notation))
        name, octave = match.groups()
        return cls.from_name(name[0].upper() + name[1:], int(octave), tuning)

    @property
    def midi_note_number(self) -> int:
        """MIDI note number (C4 = 60, A4 = 69)."""
        return self._midi

    @property
    def pitch_class(self) -> int:
        """Pitch class 0-11, where 0 is C."""
        return self._midi % SEMITONES_PER_OCTAVE

    @property
    def octave(self) -> int:
        """Octave number; C4 is middle C."""
        return self._midi // SEMITONES_PER_OCTAVE - 1

    @property
    def note_name(self) -> str:
        """Canonical note name using sharps."""
        return NOTE_NAMES[self.pitch_class]

    @property
    def frequency(self) -> float:
        """Frequency in Hz under this pitch's tuning."""
        return self._tuning.frequency_for(self._midi)

    @property
    def tuning(self) -> Tuning:
        """The tuning this pitch was built with."""
        return self._tuning

    @property
    def scientific_pitch_notation(self) -> str:
        """Name plus octave, e.g. 'A4' or 'C#5'."""
        return f"{self.note_name}{self.octave}"

    def transpose(self, semitones: int) -> Pitch:
        """Return a new pitch shifted by a number of semitones."""
        return Pitch(self._midi + semitones, self._tuning)

    def __add__(self, semitones: int) -> Pitch:
        if not isinstance(semitones, int):
            return NotImplemented
        return self.transpose(semitones)

    def __radd__(self, semitones: int) -> Pitch:
        return self.__add__(semitones)

    def __sub__(self, other: int | Pitch) -> Pitch | int:
        """Pitch - int shifts down; Pitch - Pitch is the signed semitone distance."""
        if isinstance(other, Pitch):
            return self._midi - other._midi
        if isinstance(other, int):
            return self.transpose(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._midi == other._midi

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._midi < other._midi

    def __hash__(self) -> int:
        return hash(self._midi)

    def __repr__(self) -> str:
        return f"Pitch.parse({self.scientific_pitch_notation!r})"

    def __str__(self) -> str:
        return f"{self.scientific_pitch_notation} ({self.frequency:.2f} Hz)"
