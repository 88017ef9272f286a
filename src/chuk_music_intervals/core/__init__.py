"""
Core interval algebra.

Pitch domain (discrete, 12-TET):
- SemitoneInterval: Signed semitone count
- SimpleInterval: Number + quality within one octave
- CompoundInterval: Simple part + octave span + direction
- StandardPitch: Absolute pitch as an interval from A4
- NamedPitch: Scientific pitch notation (C4 = middle C)
- Mode, Key: Context for spelling

Frequency domain (continuous):
- Frequency: Positive Hertz value
- FrequencyRatio: Multiplicative interval
- Cent: Logarithmic interval, 1200 to the octave

The two domains only meet through a TuningStrategy supplied by the caller.
"""

from chuk_music_intervals.core.collaborators import SpellingResolver, TuningStrategy
from chuk_music_intervals.core.frequency import (
    AnyFrequencyInterval,
    Cent,
    Frequency,
    FrequencyInterval,
    FrequencyRatio,
)
from chuk_music_intervals.core.interval import (
    AnyPitchInterval,
    CompoundInterval,
    Direction,
    PitchInterval,
    Quality,
    SemitoneInterval,
    SimpleInterval,
)
from chuk_music_intervals.core.key import Key, Mode
from chuk_music_intervals.core.pitch import Accidental, NamedPitch, PitchName, StandardPitch

__all__ = [
    # Pitch intervals
    "PitchInterval",
    "AnyPitchInterval",
    "SemitoneInterval",
    "Quality",
    "SimpleInterval",
    "Direction",
    "CompoundInterval",
    # Pitches
    "PitchName",
    "Accidental",
    "StandardPitch",
    "NamedPitch",
    # Keys
    "Mode",
    "Key",
    # Frequency domain
    "Frequency",
    "FrequencyInterval",
    "AnyFrequencyInterval",
    "FrequencyRatio",
    "Cent",
    # Collaborators
    "TuningStrategy",
    "SpellingResolver",
]
