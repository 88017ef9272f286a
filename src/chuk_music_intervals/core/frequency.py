"""
Frequency primitives - Frequency, FrequencyRatio, Cent.

These relate intervals to real frequencies, as opposed to pitches on a
scale (which depend on the tuning). FrequencyRatio is multiplicative,
Cent is its additive logarithm (1200 to the octave).

The two interval types interconvert; whichever is on the left of an
operator decides the type of the result, and the right operand is
converted to match.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from pydantic import BaseModel, Field, field_validator

from chuk_music_intervals.constants import CENTS_PER_OCTAVE, STANDARD_HERTZ, ErrorMessages


def _round_half_away_from_zero(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


class FrequencyInterval:
    """
    Common capability of the frequency-domain intervals.

    The family is closed: FrequencyRatio and Cent are the only implementations.
    """

    def to_cents(self) -> Cent:
        raise NotImplementedError

    def to_frequency_ratio(self) -> FrequencyRatio:
        raise NotImplementedError


@dataclass(frozen=True, order=True)
class FrequencyRatio(FrequencyInterval):
    """
    An interval as the ratio between two frequencies.

    Stacking intervals multiplies their ratios, so `+` is multiplication,
    `-` is division and negation is the reciprocal.
    """

    value: float

    UNISON: ClassVar[FrequencyRatio]
    OCTAVE: ClassVar[FrequencyRatio]

    def __add__(self, other: FrequencyInterval) -> FrequencyRatio:
        if not isinstance(other, FrequencyInterval):
            return NotImplemented
        return FrequencyRatio(self.value * other.to_frequency_ratio().value)

    def __sub__(self, other: FrequencyInterval) -> FrequencyRatio:
        if not isinstance(other, FrequencyInterval):
            return NotImplemented
        return FrequencyRatio(self.value / other.to_frequency_ratio().value)

    def __neg__(self) -> FrequencyRatio:
        return FrequencyRatio(1.0 / self.value)

    def to_cents(self) -> Cent:
        """Convert to the nearest whole cent (half away from zero)."""
        return Cent(_round_half_away_from_zero(CENTS_PER_OCTAVE * math.log2(self.value)))

    def to_frequency_ratio(self) -> FrequencyRatio:
        return self

    def __str__(self) -> str:
        return f"{self.value:g}:1"


FrequencyRatio.UNISON = FrequencyRatio(1.0)
FrequencyRatio.OCTAVE = FrequencyRatio(2.0)


@dataclass(frozen=True, order=True)
class Cent(FrequencyInterval):
    """
    An interval in cents, exactly 1/1200 of an octave.

    Whole cents only, so converting a ratio to cents rounds.
    """

    value: int

    UNISON: ClassVar[Cent]
    ZERO: ClassVar[Cent]
    OCTAVE: ClassVar[Cent]

    def __add__(self, other: FrequencyInterval) -> Cent:
        if not isinstance(other, FrequencyInterval):
            return NotImplemented
        return Cent(self.value + other.to_cents().value)

    def __sub__(self, other: FrequencyInterval) -> Cent:
        if not isinstance(other, FrequencyInterval):
            return NotImplemented
        return Cent(self.value - other.to_cents().value)

    def __neg__(self) -> Cent:
        return Cent(-self.value)

    def to_cents(self) -> Cent:
        return self

    def to_frequency_ratio(self) -> FrequencyRatio:
        return FrequencyRatio(2.0 ** (self.value / CENTS_PER_OCTAVE))

    def __str__(self) -> str:
        return f"{self.value:+d}c"


Cent.UNISON = Cent(0)
Cent.ZERO = Cent.UNISON
Cent.OCTAVE = Cent(CENTS_PER_OCTAVE)


AnyFrequencyInterval: TypeAlias = FrequencyRatio | Cent


class Frequency(BaseModel):
    """
    A physical frequency of oscillation, in Hertz.

    Must be strictly positive; anything else fails validation.
    """

    hertz: float = Field(..., description="Cycles per second")

    model_config = {"frozen": True}

    STANDARD: ClassVar[Frequency]

    def __init__(self, hertz: float, **data: Any) -> None:
        super().__init__(hertz=hertz, **data)

    @field_validator("hertz")
    @classmethod
    def validate_hertz(cls, v: float) -> float:
        """Reject zero, negative and NaN frequencies."""
        if not v > 0.0:
            raise ValueError(ErrorMessages.NON_POSITIVE_FREQUENCY.format(hertz=v))
        return v

    def interval_to(self, other: Frequency) -> FrequencyRatio:
        """Get the interval from this frequency up to another."""
        return FrequencyRatio(other.hertz / self.hertz)

    def transpose(self, interval: FrequencyInterval) -> Frequency:
        """Move this frequency by an interval."""
        return Frequency(self.hertz * interval.to_frequency_ratio().value)

    def __str__(self) -> str:
        return f"{self.hertz:g} Hz"


Frequency.STANDARD = Frequency(STANDARD_HERTZ)
