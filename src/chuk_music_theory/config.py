"""
Tuning configuration.

A Tuning maps MIDI note numbers to frequencies in 12-TET. There is a
process default that callers may change; every Pitch snapshots the
tuning in force when it was constructed, so changing the default only
affects pitches built afterwards (last write wins).

The library does not synchronise access to the default. Hosts that
change it while other threads build pitches must serialise that
themselves.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import BaseModel, Field

from chuk_music_theory.constants import (
    REFERENCE_FREQUENCY_HZ,
    REFERENCE_MIDI_NOTE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.errors import InvalidFrequencyError

logger = logging.getLogger(__name__)


class Tuning(BaseModel):
    """
    A 12-TET tuning standard anchored on one reference note.

    The default anchors A4 (MIDI 69) at 440 Hz.
    """

    reference_frequency: float = Field(
        REFERENCE_FREQUENCY_HZ,
        gt=0,
        allow_inf_nan=False,
        description="Frequency of the reference note in Hz",
    )
    reference_midi: int = Field(
        REFERENCE_MIDI_NOTE, ge=0, le=127, description="MIDI number of the reference note"
    )

    model_config = {"frozen": True}

    def frequency_for(self, midi_note: int) -> float:
        """Frequency in Hz of a MIDI note number."""
        return self.reference_frequency * 2 ** (
            (midi_note - self.reference_midi) / SEMITONES_PER_OCTAVE
        )

    def midi_for(self, frequency: float) -> int:
        """
        Nearest MIDI note number to a frequency.

        Raises:
            InvalidFrequencyError: if frequency is not a positive finite number
        """
        if not math.isfinite(frequency) or frequency <= 0:
            raise InvalidFrequencyError(ErrorMessages.INVALID_FREQUENCY.format(frequency=frequency))
        return round(
            self.reference_midi
            + SEMITONES_PER_OCTAVE * math.log2(frequency / self.reference_frequency)
        )

    def __str__(self) -> str:
        return f"MIDI {self.reference_midi} = {self.reference_frequency:g} Hz"


DEFAULT_TUNING = Tuning()

_default_tuning: Tuning = DEFAULT_TUNING


def get_default_tuning() -> Tuning:
    """The tuning used by pitch factories when none is passed."""
    return _default_tuning


def set_default_tuning(tuning: Tuning | float) -> Tuning:
    """
    Replace the process default tuning.

    Args:
        tuning: A Tuning, or the frequency of A4 in Hz

    Returns:
        The previous default, so callers can restore it
    """
    global _default_tuning

    if not isinstance(tuning, Tuning):
        tuning = Tuning(reference_frequency=tuning)

    previous = _default_tuning
    _default_tuning = tuning
    logger.info(f"Default tuning changed: {previous} -> {tuning}")
    return previous


@contextmanager
def use_tuning(tuning: Tuning | float) -> Iterator[Tuning]:
    """Temporarily swap the default tuning for the duration of a block."""
    previous = set_default_tuning(tuning)
    try:
        yield get_default_tuning()
    finally:
        set_default_tuning(previous)


def resolve_tuning(tuning: Tuning | None) -> Tuning:
    """Return the given tuning, or the current default when None."""
    return get_default_tuning() if tuning is None else tuning
