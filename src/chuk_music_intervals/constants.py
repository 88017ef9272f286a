"""
Constants for the interval algebra.

No magic numbers - every fixed quantity of 12-TET and scientific pitch
notation lives here.
"""

# Equal temperament
SEMITONES_PER_OCTAVE = 12

# Frequency domain
CENTS_PER_OCTAVE = 1200
STANDARD_HERTZ = 440.0  # A4, modern concert pitch

# Scientific pitch notation: octave 4 contains middle C
REFERENCE_OCTAVE = 4
MIDDLE_C_FROM_A4 = -9  # C4 is nine semitones below A4
CONCERT_A_MIDI = 69  # MIDI note number of A4


class ErrorMessages:
    """Standardized error messages."""

    NEGATIVE_OCTAVE_SPAN = "Octave span must be non-negative, got {octave_span}."
    UNREDUCIBLE_INTERVAL = "Failed to reduce {semitones} semitones to a simple interval."
    UNKNOWN_SIMPLE_INTERVAL = "Unknown simple interval: '{text}'. Expected e.g. 'P5', 'm3', 'd5'."
    UNKNOWN_PITCH_NAME = "Unknown pitch name: '{text}'. Expected one of C D E F G A B."
    UNKNOWN_ACCIDENTAL = "Unknown accidental: '{text}'."
    INVALID_NAMED_PITCH = "Invalid pitch: '{text}'. Expected scientific pitch notation like 'C#4'."
    INVALID_KEY = "Invalid key: '{text}'. Expected format like 'C_major' or 'F#_minor'."
    UNKNOWN_MODE = "Unknown mode: '{text}'."
    MODE_NOT_AN_OCTAVE = "Mode steps must sum to 12 semitones, got {total}."
    NON_POSITIVE_FREQUENCY = "Frequencies must be a positive number, but {hertz} was given."
