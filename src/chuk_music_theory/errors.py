"""
Error taxonomy.

Every failure is an input-validation failure raised at the point of
construction or of the offending call. All of them are ValueErrors.
"""


class MusicTheoryError(ValueError):
    """Base class for all music theory errors."""


class InvalidNoteNameError(MusicTheoryError):
    """Note name (or pitch notation) is not one of the canonical names."""


class InvalidFrequencyError(MusicTheoryError):
    """Frequency is not a positive finite number."""


class InvalidIntervalNumberError(MusicTheoryError):
    """Interval number is below 1."""


class InvalidIntervalNameError(MusicTheoryError):
    """Interval shorthand could not be parsed."""


class InvalidChordStructureError(MusicTheoryError):
    """Chord has fewer than three intervals or does not start on P1."""


class EmptyIntervalSetError(MusicTheoryError):
    """Scale was given no intervals."""


class InvalidTonicIntervalError(MusicTheoryError):
    """Scale's first interval is not P1."""


class InvalidDegreeError(MusicTheoryError):
    """Scale degree or chord tone is out of range."""
