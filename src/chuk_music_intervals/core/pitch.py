"""
Pitch primitives - PitchName, Accidental, StandardPitch, NamedPitch.

A pitch anchors an interval to the real world. StandardPitch measures
from A4, the modern concert reference. NamedPitch spells a pitch in
scientific pitch notation (letter, accidental, octave; C4 = middle C)
and always resolves to a StandardPitch.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar

from chuk_music_intervals.constants import (
    CONCERT_A_MIDI,
    MIDDLE_C_FROM_A4,
    REFERENCE_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)

from .interval import CompoundInterval, PitchInterval, SemitoneInterval

if TYPE_CHECKING:
    from .collaborators import SpellingResolver, TuningStrategy
    from .frequency import Frequency
    from .key import Key

logger = logging.getLogger(__name__)

_NAMED_PITCH_PATTERN = re.compile(r"^([A-Ga-g])([^\d-]*)(-?\d+)$")


class PitchName(IntEnum):
    """
    The seven natural letter names, valued by semitones above C.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @classmethod
    def parse(cls, text: str) -> PitchName:
        """Parse a letter name, case-insensitive."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            logger.debug("Unparseable pitch name %r", text)
            raise ValueError(ErrorMessages.UNKNOWN_PITCH_NAME.format(text=text)) from None


# Display and parse mappings (module level to avoid IntEnum member issues)
_ACCIDENTAL_SYMBOLS: dict[int, str] = {-2: "bb", -1: "b", 0: "", 1: "#", 2: "##"}
_ACCIDENTAL_ALIASES: dict[str, int] = {
    "bb": -2,
    "\U0001d12b": -2,  # double flat sign
    "b": -1,
    "♭": -1,
    "": 0,
    "♮": 0,
    "#": 1,
    "♯": 1,
    "##": 2,
    "x": 2,
    "\U0001d12a": 2,  # double sharp sign
}


class Accidental(IntEnum):
    """
    Modifier on a letter name, valued by its semitone offset.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def symbol(self) -> str:
        """ASCII spelling: 'bb', 'b', '', '#', '##'."""
        return _ACCIDENTAL_SYMBOLS[self.value]

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """Parse an accidental from '#', 'b', 'x', '##', 'bb' or the Unicode signs."""
        offset = _ACCIDENTAL_ALIASES.get(text.strip())
        if offset is None:
            logger.debug("Unparseable accidental %r", text)
            raise ValueError(ErrorMessages.UNKNOWN_ACCIDENTAL.format(text=text))
        return cls(offset)


@dataclass(frozen=True, order=True)
class StandardPitch:
    """
    An absolute pitch, stored as its interval from A4.

    Examples:
        StandardPitch(SemitoneInterval(0)) = A4 (concert A)
        StandardPitch(SemitoneInterval(-9)) = C4 (middle C)
    """

    interval_from_a4: SemitoneInterval

    CONCERT_A: ClassVar[StandardPitch]
    MIDDLE_C: ClassVar[StandardPitch]

    def __post_init__(self) -> None:
        # Compound and simple intervals are stored by their signed total
        if not isinstance(self.interval_from_a4, SemitoneInterval):
            object.__setattr__(
                self, "interval_from_a4", SemitoneInterval(self.interval_from_a4.signed_semitones)
            )

    def __add__(self, other: PitchInterval) -> StandardPitch:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return StandardPitch(self.interval_from_a4 + other)

    def __sub__(
        self, other: PitchInterval | StandardPitch | NamedPitch
    ) -> StandardPitch | SemitoneInterval:
        """
        Subtract an interval (giving a pitch) or a pitch (giving an interval).

        Returns:
            StandardPitch when `other` is an interval,
            SemitoneInterval when `other` is a pitch
        """
        if isinstance(other, PitchInterval):
            return StandardPitch(self.interval_from_a4 - other)
        if isinstance(other, NamedPitch):
            other = other.to_standard_pitch()
        if isinstance(other, StandardPitch):
            return self.interval_from_a4 - other.interval_from_a4
        return NotImplemented

    def to_standard_pitch(self) -> StandardPitch:
        return self

    def to_midi(self) -> int:
        """Convert to MIDI note number. A4 = 69, C4 = 60."""
        return CONCERT_A_MIDI + self.interval_from_a4.value

    @classmethod
    def from_midi(cls, midi_note: int) -> StandardPitch:
        """Create a pitch from a MIDI note number."""
        return cls(SemitoneInterval(midi_note - CONCERT_A_MIDI))

    def tune(self, strategy: TuningStrategy) -> Frequency:
        """
        Resolve this pitch to a physical frequency.

        The mapping belongs to the tuning, so it is supplied by the caller.
        """
        return strategy(self)

    def __str__(self) -> str:
        return f"A4{self.interval_from_a4.value:+d}"


StandardPitch.CONCERT_A = StandardPitch(SemitoneInterval(0))
StandardPitch.MIDDLE_C = StandardPitch(SemitoneInterval(MIDDLE_C_FROM_A4))


@dataclass(frozen=True)
class NamedPitch:
    """
    A pitch spelled in scientific pitch notation.

    Arithmetic with an interval gives a StandardPitch, not a NamedPitch:
    the right spelling of the result depends on the key. Use
    transpose_in_key() with a SpellingResolver when a spelled result is
    needed.

    Examples:
        NamedPitch(PitchName.A) = A4
        NamedPitch(PitchName.C, Accidental.SHARP, 5) = C#5
    """

    name: PitchName
    accidental: Accidental = Accidental.NATURAL
    octave: int = REFERENCE_OCTAVE

    CONCERT_A: ClassVar[NamedPitch]
    MIDDLE_C: ClassVar[NamedPitch]

    def to_standard_pitch(self) -> StandardPitch:
        """Anchor to A4: middle C offset + letter + octaves + accidental."""
        semitones = (
            MIDDLE_C_FROM_A4
            + self.name.value
            + SEMITONES_PER_OCTAVE * (self.octave - REFERENCE_OCTAVE)
            + self.accidental.value
        )
        return StandardPitch(SemitoneInterval(semitones))

    def __add__(self, other: PitchInterval) -> StandardPitch:
        if not isinstance(other, PitchInterval):
            return NotImplemented
        return self.to_standard_pitch() + other

    def __sub__(
        self, other: PitchInterval | StandardPitch | NamedPitch
    ) -> StandardPitch | CompoundInterval:
        """
        Subtract an interval (giving a StandardPitch) or a pitch.

        The distance between two pitches is a CompoundInterval.
        """
        if isinstance(other, PitchInterval):
            return self.to_standard_pitch() - other
        if isinstance(other, (StandardPitch, NamedPitch)):
            difference = self.to_standard_pitch() - other.to_standard_pitch()
            return difference.to_compound_interval()
        return NotImplemented

    def to_midi(self) -> int:
        return self.to_standard_pitch().to_midi()

    def transpose_in_key(
        self, interval: PitchInterval, key: Key, resolver: SpellingResolver
    ) -> NamedPitch:
        """
        Transpose and respell within a key.

        Args:
            interval: Interval to move by
            key: Key that decides the spelling
            resolver: Collaborator that performs the spelling

        Returns:
            The spelled NamedPitch chosen by the resolver
        """
        return resolver(self, interval, key)

    @classmethod
    def parse(cls, text: str) -> NamedPitch:
        """
        Parse scientific pitch notation like 'A4', 'C#5', 'Bb3', 'Fx-1'.
        """
        match = _NAMED_PITCH_PATTERN.match(text.strip())
        if match is None:
            logger.debug("Unparseable named pitch %r", text)
            raise ValueError(ErrorMessages.INVALID_NAMED_PITCH.format(text=text))

        letter, accidental, octave = match.groups()
        return cls(PitchName.parse(letter), Accidental.parse(accidental), int(octave))

    def __str__(self) -> str:
        return f"{self.name.name}{self.accidental.symbol}{self.octave}"


NamedPitch.CONCERT_A = NamedPitch(PitchName.A, Accidental.NATURAL, REFERENCE_OCTAVE)
NamedPitch.MIDDLE_C = NamedPitch(PitchName.C, Accidental.NATURAL, REFERENCE_OCTAVE)
