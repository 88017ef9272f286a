"""
Tests for Mode and Key.
"""

import pytest

from chuk_music_intervals import Accidental, Key, Mode, NamedPitch, PitchName, SimpleInterval


class TestMode:
    """Tests for Mode."""

    def test_major_degrees(self) -> None:
        """Major degrees from the tonic."""
        assert [i.value for i in Mode.MAJOR.degree_intervals()] == [0, 2, 4, 5, 7, 9, 11]

    def test_harmonic_minor_degrees(self) -> None:
        """Harmonic minor has the raised seventh."""
        assert [i.value for i in Mode.HARMONIC_MINOR.degree_intervals()] == [0, 2, 3, 5, 7, 8, 11]

    def test_steps_must_fill_octave(self) -> None:
        """Steps that do not sum to an octave are rejected."""
        with pytest.raises(ValueError, match="sum to 12"):
            Mode((SimpleInterval.MAJOR_SECOND,) * 5, "broken")

    def test_str(self) -> None:
        """Named modes print their name."""
        assert str(Mode.DORIAN) == "dorian"


class TestKey:
    """Tests for Key."""

    def test_parse(self) -> None:
        """Parse tonic, accidental and mode."""
        assert Key.parse("C_major") == Key(PitchName.C, Mode.MAJOR)
        assert Key.parse("F#_minor") == Key(PitchName.F, Mode.NATURAL_MINOR, Accidental.SHARP)
        assert Key.parse("Bb_harmonic_minor") == Key(PitchName.B, Mode.HARMONIC_MINOR, Accidental.FLAT)

    def test_parse_invalid(self) -> None:
        """Malformed keys raise ValueError."""
        with pytest.raises(ValueError, match="Invalid key"):
            Key.parse("Cmajor")
        with pytest.raises(ValueError, match="Unknown mode"):
            Key.parse("C_bogus")
        with pytest.raises(ValueError, match="Unknown pitch name"):
            Key.parse("H_major")

    def test_str(self) -> None:
        """Keys print as tonic and mode."""
        assert str(Key.parse("F#_minor")) == "F# minor"
        assert str(Key.parse("Eb_major")) == "Eb major"

    def test_tonic_pitch(self) -> None:
        """The tonic is spelled in the requested octave."""
        key = Key.parse("Eb_major")
        assert key.tonic_pitch(3) == NamedPitch(PitchName.E, Accidental.FLAT, 3)

    def test_degree_pitches(self) -> None:
        """Degrees anchor to absolute pitches from the tonic."""
        c_major = Key(PitchName.C, Mode.MAJOR)
        assert [p.to_midi() for p in c_major.degree_pitches()] == [60, 62, 64, 65, 67, 69, 71]
        a_minor = Key.parse("A_minor")
        assert [p.to_midi() for p in a_minor.degree_pitches(3)] == [57, 59, 60, 62, 64, 65, 67]
