"""
Key primitives - Mode and Key.

A key is the context a spelling resolver needs to pick between enharmonic
names. Modes are step patterns of simple intervals; a key applies a mode
to a spelled tonic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from chuk_music_intervals.constants import REFERENCE_OCTAVE, SEMITONES_PER_OCTAVE, ErrorMessages

from .interval import SemitoneInterval, SimpleInterval
from .pitch import Accidental, NamedPitch, PitchName, StandardPitch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mode:
    """
    A mode defined by the steps from one degree to the next.

    A major mode is: M2 M2 m2 M2 M2 M2 m2 (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    steps: tuple[SimpleInterval, ...]
    name: str = ""

    MAJOR: ClassVar[Mode]
    NATURAL_MINOR: ClassVar[Mode]
    HARMONIC_MINOR: ClassVar[Mode]
    MELODIC_MINOR: ClassVar[Mode]
    DORIAN: ClassVar[Mode]
    PHRYGIAN: ClassVar[Mode]
    LYDIAN: ClassVar[Mode]
    MIXOLYDIAN: ClassVar[Mode]
    LOCRIAN: ClassVar[Mode]

    def __post_init__(self) -> None:
        total = sum(step.semitones for step in self.steps)
        if total != SEMITONES_PER_OCTAVE:
            raise ValueError(ErrorMessages.MODE_NOT_AN_OCTAVE.format(total=total))

    def degree_intervals(self) -> list[SemitoneInterval]:
        """
        Get the interval from the tonic to each degree.

        Returns one interval per degree, starting with the unison.
        """
        intervals = [SemitoneInterval.UNISON]
        for step in self.steps[:-1]:  # last step returns to the octave
            intervals.append(intervals[-1] + step)
        return intervals

    def __str__(self) -> str:
        return self.name or f"Mode({', '.join(str(s) for s in self.steps)})"


_M2 = SimpleInterval.MAJOR_SECOND
_m2 = SimpleInterval.MINOR_SECOND
_m3 = SimpleInterval.MINOR_THIRD  # augmented second by sound

Mode.MAJOR = Mode((_M2, _M2, _m2, _M2, _M2, _M2, _m2), "major")
Mode.NATURAL_MINOR = Mode((_M2, _m2, _M2, _M2, _m2, _M2, _M2), "minor")
Mode.HARMONIC_MINOR = Mode((_M2, _m2, _M2, _M2, _m2, _m3, _m2), "harmonic minor")
Mode.MELODIC_MINOR = Mode((_M2, _m2, _M2, _M2, _M2, _M2, _m2), "melodic minor")
Mode.DORIAN = Mode((_M2, _m2, _M2, _M2, _M2, _m2, _M2), "dorian")
Mode.PHRYGIAN = Mode((_m2, _M2, _M2, _M2, _m2, _M2, _M2), "phrygian")
Mode.LYDIAN = Mode((_M2, _M2, _M2, _m2, _M2, _M2, _m2), "lydian")
Mode.MIXOLYDIAN = Mode((_M2, _M2, _m2, _M2, _M2, _m2, _M2), "mixolydian")
Mode.LOCRIAN = Mode((_m2, _M2, _M2, _m2, _M2, _M2, _M2), "locrian")

_MODE_MAP: dict[str, Mode] = {
    "major": Mode.MAJOR,
    "minor": Mode.NATURAL_MINOR,
    "natural_minor": Mode.NATURAL_MINOR,
    "harmonic_minor": Mode.HARMONIC_MINOR,
    "melodic_minor": Mode.MELODIC_MINOR,
    "dorian": Mode.DORIAN,
    "phrygian": Mode.PHRYGIAN,
    "lydian": Mode.LYDIAN,
    "mixolydian": Mode.MIXOLYDIAN,
    "locrian": Mode.LOCRIAN,
}


@dataclass(frozen=True)
class Key:
    """
    A spelled tonic plus a mode.

    Examples:
        Key(PitchName.C, Mode.MAJOR) = C major
        Key(PitchName.F, Mode.NATURAL_MINOR, Accidental.SHARP) = F# minor
    """

    tonic: PitchName
    mode: Mode
    accidental: Accidental = Accidental.NATURAL

    def tonic_pitch(self, octave: int = REFERENCE_OCTAVE) -> NamedPitch:
        """The tonic spelled in a given octave."""
        return NamedPitch(self.tonic, self.accidental, octave)

    def degree_pitches(self, octave: int = REFERENCE_OCTAVE) -> list[StandardPitch]:
        """
        Get the pitch of each degree, starting from the tonic.

        Args:
            octave: Octave of the tonic (default 4)

        Returns:
            One StandardPitch per degree, ascending
        """
        tonic = self.tonic_pitch(octave).to_standard_pitch()
        return [tonic + interval for interval in self.mode.degree_intervals()]

    def __str__(self) -> str:
        return f"{self.tonic.name}{self.accidental.symbol} {self.mode}"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'Bb_minor', 'F#_dorian'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Key object
        """
        parts = name.strip().split("_")
        if len(parts) < 2 or not parts[0]:
            logger.debug("Unparseable key %r", name)
            raise ValueError(ErrorMessages.INVALID_KEY.format(text=name))

        tonic_str = parts[0]
        mode_str = "_".join(parts[1:]).lower()

        tonic = PitchName.parse(tonic_str[0])
        accidental = Accidental.parse(tonic_str[1:])

        if mode_str not in _MODE_MAP:
            logger.debug("Unknown mode %r in key %r", mode_str, name)
            raise ValueError(ErrorMessages.UNKNOWN_MODE.format(text=mode_str))

        return cls(tonic, _MODE_MAP[mode_str], accidental)
