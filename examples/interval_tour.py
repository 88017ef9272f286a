#!/usr/bin/env python3
"""
Example: A tour of the interval algebra.

Walks through the pitch domain (semitones, simple and compound intervals,
named pitches) and the frequency domain (ratios and cents), then bridges
them with a caller-supplied 12-TET tuning.

Usage:
    python examples/interval_tour.py
"""

import logging

from chuk_music_intervals import (
    Cent,
    Frequency,
    FrequencyRatio,
    NamedPitch,
    SemitoneInterval,
    SimpleInterval,
    StandardPitch,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def equal_temperament(pitch: StandardPitch) -> Frequency:
    """12-TET tuning anchored at concert A."""
    return Frequency(Frequency.STANDARD.hertz * 2 ** (pitch.interval_from_a4.value / 12))


def main() -> None:
    """Print a few conversions from each domain."""
    # Pitch domain
    for n in (7, 12, -13, 30):
        compound = SemitoneInterval(n).to_compound_interval()
        logger.info(f"{SemitoneInterval(n)} -> {compound}")

    logger.info(f"Tritone spells as {SimpleInterval.from_interval(6)}")
    logger.info(f"Complement of M3 is {-SimpleInterval.MAJOR_THIRD}")

    c4 = NamedPitch.parse("C4")
    g5 = NamedPitch.parse("G5")
    logger.info(f"{g5} - {c4} = {g5 - c4}")
    logger.info(f"{c4} + P5 = {c4 + SimpleInterval.PERFECT_FIFTH} (MIDI {c4.to_midi() + 7})")

    # Frequency domain
    fifth = FrequencyRatio(3 / 2)
    logger.info(f"Just fifth {fifth} = {fifth.to_cents()}")
    logger.info(f"{Cent(-498)} = {Cent(-498).to_frequency_ratio()}")

    # Bridge via a tuning strategy
    for text in ("A4", "C4", "E5"):
        pitch = NamedPitch.parse(text).to_standard_pitch()
        logger.info(f"{text} -> {pitch.tune(equal_temperament)}")


if __name__ == "__main__":
    main()
