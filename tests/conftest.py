"""
Pytest configuration and shared fixtures.
"""

import random

import pytest

from chuk_music_intervals import Cent, Frequency, FrequencyRatio, StandardPitch, TuningStrategy


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so sampled checks are repeatable."""
    return random.Random(1200)


@pytest.fixture
def semitone_samples(rng: random.Random) -> list[int]:
    """Signed semitone counts, including the octave boundaries."""
    return [0, 1, -1, 6, -6, 11, 12, -12, 13, -13, 24, -25] + [
        rng.randint(-120, 120) for _ in range(60)
    ]


@pytest.fixture
def ratio_samples(rng: random.Random) -> list[FrequencyRatio]:
    """Positive frequency ratios."""
    return [FrequencyRatio(rng.uniform(0.01, 8.0)) for _ in range(60)]


@pytest.fixture
def cent_samples(rng: random.Random) -> list[Cent]:
    """Signed cent values."""
    return [Cent(rng.randint(-12000, 12000)) for _ in range(60)]


@pytest.fixture
def equal_temperament() -> TuningStrategy:
    """A 12-TET tuning strategy anchored at 440 Hz, for collaborator tests."""

    def tune(pitch: StandardPitch) -> Frequency:
        return Frequency(440.0 * 2 ** (pitch.interval_from_a4.value / 12))

    return tune
