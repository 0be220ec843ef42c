"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Iterator

import pytest

from chuk_music_theory import Pitch, set_default_tuning
from chuk_music_theory.config import DEFAULT_TUNING


@pytest.fixture(autouse=True)
def restore_default_tuning() -> Iterator[None]:
    """Tests that change the process default tuning must not leak it."""
    previous = set_default_tuning(DEFAULT_TUNING)
    yield
    set_default_tuning(previous)


@pytest.fixture
def c4() -> Pitch:
    """Middle C (MIDI 60)."""
    return Pitch.from_name("C", 4)


@pytest.fixture
def a4() -> Pitch:
    """Concert A (MIDI 69)."""
    return Pitch.from_name("A", 4)
