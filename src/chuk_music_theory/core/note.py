"""
Note - a pitch plus how it is performed.

The accidental moves the pitch once, when the note is constructed.
After that the stored pitch is the sounding pitch: transposing or
re-rendering the note never applies the accidental again. Dumps carry
the written pitch, so a dump fed back to the constructor or to
model_validate rebuilds the same note.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from chuk_music_theory.constants import Accidental, Articulation, Dynamics, NoteValue
from chuk_music_theory.core.pitch import Pitch


class Note(BaseModel):
    """
    A performed pitch.

    Pitch and accidental are fixed once set. Duration, dynamics and
    articulation can be changed afterwards and are validated on assignment.
    """

    pitch: Pitch = Field(..., frozen=True, description="Sounding pitch (accidental applied)")
    duration: NoteValue = Field(NoteValue.QUARTER, description="Written note value")
    accidental: Accidental = Field(Accidental.NATURAL, frozen=True, description="Accidental")
    dynamics: Dynamics = Field(Dynamics.MEZZO_FORTE, description="Dynamic marking")
    articulation: Articulation = Field(Articulation.NORMAL, description="Articulation")

    model_config = {"arbitrary_types_allowed": True, "validate_assignment": True}

    def __init__(
        self,
        pitch: Pitch,
        duration: NoteValue = NoteValue.QUARTER,
        accidental: Accidental = Accidental.NATURAL,
        dynamics: Dynamics = Dynamics.MEZZO_FORTE,
        articulation: Articulation = Articulation.NORMAL,
        **data: Any,
    ) -> None:
        """
        Create a note, shifting the written pitch by the accidental.

        Args:
            pitch: The written pitch, before the accidental
            duration: Note value (default quarter)
            accidental: Accidental applied to the pitch (default natural)
            dynamics: Dynamic marking (default mf)
            articulation: Articulation (default normal)
        """
        accidental = Accidental(accidental)
        if isinstance(pitch, Pitch):
            pitch = pitch.transpose(accidental.semitone_offset)
        super().__init__(
            pitch=pitch,
            duration=duration,
            accidental=accidental,
            dynamics=dynamics,
            articulation=articulation,
            **data,
        )

    @property
    def written_pitch(self) -> Pitch:
        """The pitch before the accidental was applied."""
        return self.pitch.transpose(-self.accidental.semitone_offset)

    @field_serializer("pitch")
    def _serialize_pitch(self, pitch: Pitch) -> Pitch:
        return pitch.transpose(-self.accidental.semitone_offset)

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> Note:  # type: ignore[override]
        """Validate a mapping through the constructor so the accidental is applied once."""
        if isinstance(obj, Mapping):
            return cls(**obj)
        return super().model_validate(obj, **kwargs)

    @classmethod
    def from_sounding_pitch(
        cls,
        pitch: Pitch,
        duration: NoteValue = NoteValue.QUARTER,
        accidental: Accidental = Accidental.NATURAL,
        dynamics: Dynamics = Dynamics.MEZZO_FORTE,
        articulation: Articulation = Articulation.NORMAL,
    ) -> Note:
        """
        Create a note whose pitch already includes its accidental.

        Used when deriving notes from other notes, so the accidental is
        recorded but the pitch is taken as-is.
        """
        accidental = Accidental(accidental)
        written = pitch.transpose(-accidental.semitone_offset)
        return cls(written, duration, accidental, dynamics, articulation)

    def transpose(self, semitones: int) -> Note:
        """Return a copy moved by a number of semitones, accidental not reapplied."""
        return Note.from_sounding_pitch(
            self.pitch.transpose(semitones),
            self.duration,
            self.accidental,
            self.dynamics,
            self.articulation,
        )

    def __str__(self) -> str:
        """
        E.g. 'C♯4 quarter mf normal'.

        The sharp in the pitch's own name is dropped so a sharpened note
        shows one accidental glyph, not two.
        """
        base_name = self.pitch.note_name.replace("#", "")
        return (
            f"{base_name}{self.accidental.symbol}{self.pitch.octave} "
            f"{self.duration.label} {self.dynamics.value} {self.articulation.value}"
        )
