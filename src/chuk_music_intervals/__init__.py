"""
chuk-music-intervals - interval and pitch algebra for 12-tone equal temperament.
"""

from chuk_music_intervals.core import (
    Accidental,
    Cent,
    CompoundInterval,
    Direction,
    Frequency,
    FrequencyRatio,
    Key,
    Mode,
    NamedPitch,
    PitchInterval,
    PitchName,
    Quality,
    SemitoneInterval,
    SimpleInterval,
    SpellingResolver,
    StandardPitch,
    TuningStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Cent",
    "CompoundInterval",
    "Direction",
    "Frequency",
    "FrequencyRatio",
    "Key",
    "Mode",
    "NamedPitch",
    "PitchInterval",
    "PitchName",
    "Quality",
    "SemitoneInterval",
    "SimpleInterval",
    "SpellingResolver",
    "StandardPitch",
    "TuningStrategy",
]
