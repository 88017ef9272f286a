"""
Collaborator protocols - the seams this package leaves to its callers.

- TuningStrategy bridges the pitch domain to the frequency domain
- SpellingResolver spells the result of interval arithmetic within a key

Neither is implemented here; any callable with the matching signature fits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .frequency import Frequency
    from .interval import AnyPitchInterval
    from .key import Key
    from .pitch import NamedPitch, StandardPitch


class TuningStrategy(Protocol):
    """Maps an absolute pitch to a physical frequency."""

    def __call__(self, pitch: StandardPitch) -> Frequency: ...


class SpellingResolver(Protocol):
    """Transposes a named pitch by an interval and spells the result in a key."""

    def __call__(self, pitch: NamedPitch, interval: AnyPitchInterval, key: Key) -> NamedPitch: ...
