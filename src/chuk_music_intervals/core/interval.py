"""
Interval primitives - SemitoneInterval, SimpleInterval, CompoundInterval.

Three views of the same distance between pitches in 12-TET:
- SemitoneInterval: a signed semitone count, the lossless form
- SimpleInterval: a named (number, quality) within one octave, unsigned
- CompoundInterval: a simple part plus an octave span and a direction

All arithmetic goes through semitones. The result of `a + b` or `a - b`
always has the type of `a`, whatever the type of `b`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, TypeAlias

from chuk_music_intervals.constants import SEMITONES_PER_OCTAVE, ErrorMessages

logger = logging.getLogger(__name__)


class PitchInterval:
    """
    Common capability of the pitch-domain intervals.

    The family is closed: SemitoneInterval, SimpleInterval and
    CompoundInterval are the only implementations.
    """

    def to_semitone_interval(self) -> SemitoneInterval:
        raise NotImplementedError

    def to_compound_interval(self) -> CompoundInterval:
        raise NotImplementedError

    @property
    def signed_semitones(self) -> int:
        """Semitone total with any direction applied."""
        return self.to_semitone_interval().value


@dataclass(frozen=True, order=True)
class SemitoneInterval(PitchInterval):
    """
    Distance between pitches as a signed number of semitones.

    The exact frequency spacing of a semitone is left to the tuning.
    Forms the additive group of the integers.
    """

    value: int

    UNISON: ClassVar[SemitoneInterval]
    OCTAVE: ClassVar[SemitoneInterval]

    def __add__(self, other: PitchInterval) -> SemitoneInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SemitoneInterval(self.value + other.signed_semitones)

    def __sub__(self, other: PitchInterval) -> SemitoneInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SemitoneInterval(self.value - other.signed_semitones)

    def __neg__(self) -> SemitoneInterval:
        return SemitoneInterval(-self.value)

    def __mul__(self, n: int) -> SemitoneInterval:
        """Stack the interval n times (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return SemitoneInterval(self.value * n)

    def __rmul__(self, n: int) -> SemitoneInterval:
        return self.__mul__(n)

    def to_semitone_interval(self) -> SemitoneInterval:
        return self

    def to_compound_interval(self) -> CompoundInterval:
        """
        Normalize into octaves, a simple remainder and a direction.

        The remainder is taken from the magnitude, so it is always 0-11
        and the sign only ever shows up in the direction:
            SemitoneInterval(-13) -> m2 + 1 octave, down
        """
        octaves, remainder = divmod(abs(self.value), SEMITONES_PER_OCTAVE)
        direction = Direction.UP if self.value >= 0 else Direction.DOWN
        return CompoundInterval(
            simple_part=SimpleInterval.from_interval(remainder),
            octave_span=octaves,
            direction=direction,
        )

    def __str__(self) -> str:
        return f"{self.value:+d} semitones"


SemitoneInterval.UNISON = SemitoneInterval(0)
SemitoneInterval.OCTAVE = SemitoneInterval(SEMITONES_PER_OCTAVE)


class Quality(str, Enum):
    """Interval quality, valued by its abbreviation."""

    PERFECT = "P"
    MINOR = "m"
    MAJOR = "M"
    DIMINISHED = "d"
    AUGMENTED = "A"

    @property
    def abbreviation(self) -> str:
        return self.value


class SimpleInterval(PitchInterval, Enum):
    """
    An interval of one octave or less, named by number and quality.

    Simple intervals are unsigned, so negation gives the complementary
    interval within the octave rather than a descending one:
        -MAJOR_THIRD == MINOR_SIXTH
    """

    PERFECT_UNISON = (1, Quality.PERFECT, 0)
    MINOR_SECOND = (2, Quality.MINOR, 1)
    MAJOR_SECOND = (2, Quality.MAJOR, 2)
    MINOR_THIRD = (3, Quality.MINOR, 3)
    MAJOR_THIRD = (3, Quality.MAJOR, 4)
    PERFECT_FOURTH = (4, Quality.PERFECT, 5)
    AUGMENTED_FOURTH = (4, Quality.AUGMENTED, 6)
    DIMINISHED_FIFTH = (5, Quality.DIMINISHED, 6)
    PERFECT_FIFTH = (5, Quality.PERFECT, 7)
    MINOR_SIXTH = (6, Quality.MINOR, 8)
    MAJOR_SIXTH = (6, Quality.MAJOR, 9)
    MINOR_SEVENTH = (7, Quality.MINOR, 10)
    MAJOR_SEVENTH = (7, Quality.MAJOR, 11)
    PERFECT_OCTAVE = (8, Quality.PERFECT, 12)

    def __init__(self, number: int, quality: Quality, semitones: int) -> None:
        self.number = number
        self.quality = quality
        self.semitones = semitones

    @property
    def abbreviation(self) -> str:
        """Short name like 'P5', 'm3' or 'd5'."""
        return f"{self.quality.abbreviation}{self.number}"

    def __add__(self, other: PitchInterval) -> SimpleInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SimpleInterval.from_interval(self.semitones + other.signed_semitones)

    def __sub__(self, other: PitchInterval) -> SimpleInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SimpleInterval.from_interval(self.semitones - other.signed_semitones)

    def __neg__(self) -> SimpleInterval:
        return SimpleInterval.PERFECT_UNISON - self

    def to_semitone_interval(self) -> SemitoneInterval:
        return SemitoneInterval(self.semitones)

    def to_compound_interval(self) -> CompoundInterval:
        return CompoundInterval(self, octave_span=0, direction=Direction.UP)

    @classmethod
    def from_interval(cls, interval: PitchInterval | int) -> SimpleInterval:
        """
        Reduce any interval (or raw semitone count) to a simple interval.

        Simple intervals come back unchanged. Anything else is reduced
        with floor-modulo 12, except that exactly 12 semitones stays a
        PERFECT_OCTAVE. Six semitones always spell as DIMINISHED_FIFTH.

        Args:
            interval: A pitch interval or a signed semitone count

        Returns:
            The canonical simple interval
        """
        if isinstance(interval, SimpleInterval):
            return interval

        semitones = interval if isinstance(interval, int) else interval.signed_semitones
        if semitones == SEMITONES_PER_OCTAVE:
            return cls.PERFECT_OCTAVE

        reduced = _REDUCTION_TABLE.get(semitones % SEMITONES_PER_OCTAVE)
        if reduced is None:
            # floor-modulo keeps us inside the table
            message = ErrorMessages.UNREDUCIBLE_INTERVAL.format(semitones=semitones)
            logger.error(message)
            raise RuntimeError(message)
        return reduced

    @classmethod
    def parse(cls, text: str) -> SimpleInterval:
        """Parse a simple interval from 'P5', 'm3', 'A4' or a member name."""
        text = text.strip()

        for member in cls:
            if member.abbreviation == text:
                return member

        name_upper = text.upper().replace(" ", "_")
        for member in cls:
            if member.name == name_upper:
                return member

        logger.debug("Unparseable simple interval %r", text)
        raise ValueError(ErrorMessages.UNKNOWN_SIMPLE_INTERVAL.format(text=text))

    def __str__(self) -> str:
        return self.abbreviation

    def __repr__(self) -> str:
        return f"SimpleInterval.{self.name}"


_REDUCTION_TABLE: dict[int, SimpleInterval] = {
    0: SimpleInterval.PERFECT_UNISON,
    1: SimpleInterval.MINOR_SECOND,
    2: SimpleInterval.MAJOR_SECOND,
    3: SimpleInterval.MINOR_THIRD,
    4: SimpleInterval.MAJOR_THIRD,
    5: SimpleInterval.PERFECT_FOURTH,
    6: SimpleInterval.DIMINISHED_FIFTH,  # tritone tie-break, never AUGMENTED_FOURTH
    7: SimpleInterval.PERFECT_FIFTH,
    8: SimpleInterval.MINOR_SIXTH,
    9: SimpleInterval.MAJOR_SIXTH,
    10: SimpleInterval.MINOR_SEVENTH,
    11: SimpleInterval.MAJOR_SEVENTH,
}


class Direction(str, Enum):
    """Orientation of a compound interval."""

    UP = "up"
    DOWN = "down"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.UP else -1

    def __neg__(self) -> Direction:
        return Direction.DOWN if self is Direction.UP else Direction.UP


@dataclass(frozen=True)
class CompoundInterval(PitchInterval):
    """
    An interval as a simple part, a whole number of octaves and a direction.

    This is the native representation of anything wider than an octave or
    descending; it has no illegal states beyond a negative span.

    Values built by normalization keep the simple part within 0-11
    semitones. A directly constructed PERFECT_OCTAVE simple part is kept
    as given and is not folded into the span.
    """

    simple_part: SimpleInterval
    octave_span: int = 0
    direction: Direction = Direction.UP

    def __post_init__(self) -> None:
        if self.octave_span < 0:
            raise ValueError(ErrorMessages.NEGATIVE_OCTAVE_SPAN.format(octave_span=self.octave_span))

    @property
    def signed_semitones(self) -> int:
        return self.direction.sign * self.to_semitone_interval().value

    def __add__(self, other: PitchInterval) -> CompoundInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SemitoneInterval(self.signed_semitones + other.signed_semitones).to_compound_interval()

    def __sub__(self, other: PitchInterval) -> CompoundInterval:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return SemitoneInterval(self.signed_semitones - other.signed_semitones).to_compound_interval()

    def __neg__(self) -> CompoundInterval:
        """Flip the direction; the simple part and span are untouched."""
        return replace(self, direction=-self.direction)

    def to_semitone_interval(self) -> SemitoneInterval:
        """
        The unsigned width of the interval.

        Use `signed_semitones` when the direction matters.
        """
        return SemitoneInterval(self.simple_part.semitones + SEMITONES_PER_OCTAVE * self.octave_span)

    def to_compound_interval(self) -> CompoundInterval:
        return self

    def __str__(self) -> str:
        base = str(self.simple_part)
        if self.octave_span:
            base = f"{base}+{self.octave_span}oct"
        if self.direction is Direction.DOWN:
            return f"{base} down"
        return base


AnyPitchInterval: TypeAlias = SemitoneInterval | SimpleInterval | CompoundInterval
