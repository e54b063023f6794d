"""Pitch as a raw frequency in Hz.

Bridges frequencies to MIDI note numbers and note names using 12-tone equal
temperament anchored at A4 = MIDI 69 = 440 Hz.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from pitchy.config import get_backend
from pitchy.errors import OutOfRangeError
from pitchy.symbol import SEMITONES_PER_OCTAVE

if TYPE_CHECKING:
    from pitchy.note import Note

REFERENCE_FREQUENCY = 440.0
"""Frequency of the tuning reference A4 (Hz)."""

REFERENCE_MIDI = 69
"""MIDI number of the tuning reference A4."""

MIDI_MIN = 0
"""Lowest valid MIDI note number (C-1)."""

MIDI_MAX = 127
"""Highest valid MIDI note number (G9)."""


def check_midi_number(number: int) -> int:
    """Return the number as an int if it is a valid MIDI note number.

    Whole-valued floats such as ``60.0`` are accepted.

    Raises:
        OutOfRangeError: If the number is not whole or is outside 0-127.
    """
    if isinstance(number, float) and not number.is_integer():
        raise OutOfRangeError(number, "is not a whole MIDI number")
    if not (MIDI_MIN <= number <= MIDI_MAX):
        raise OutOfRangeError(number, f"out of MIDI range ({MIDI_MIN}-{MIDI_MAX})")
    return int(number)


def _as_float(value: float) -> float:
    """Coerce to float, saturating ints too large for a double to infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


@dataclass(frozen=True)
class Pitch:
    """A musical pitch represented only by its frequency in Hz.

    Construction never validates the frequency; a non-positive or non-finite
    value is only rejected when a MIDI number is derived from it. For a
    spelled, notation-aware value see Note.
    """

    frequency: float
    """The raw frequency in Hz."""

    @staticmethod
    def from_string(text: str) -> Pitch:
        """Parse a note name such as ``"C#4"`` or ``"Db4"`` into a pitch.

        Raises:
            ParseError: If the text is not a valid note name.
            OutOfRangeError: If the note lies outside the MIDI range.
        """
        from pitchy.parser import parse_note

        return Pitch.try_from_note(parse_note(text))

    @staticmethod
    def try_from_midi_number(number: int) -> Pitch:
        """Create the equal-tempered pitch of a MIDI note number.

        Raises:
            OutOfRangeError: If the number is not whole or is outside 0-127.
        """
        number = check_midi_number(number)
        exp = (number - REFERENCE_MIDI) / SEMITONES_PER_OCTAVE
        return Pitch(get_backend().pow2(exp) * REFERENCE_FREQUENCY)

    @staticmethod
    def try_from_note(note: Note) -> Pitch:
        """Convert a spelled note into its pitch.

        Raises:
            OutOfRangeError: If the note lies outside the MIDI range.
        """
        return Pitch.try_from_midi_number(note.try_midi_number())

    def try_midi_number(self) -> int:
        """Return the nearest MIDI note number.

        Raises:
            OutOfRangeError: If the frequency is not positive and finite, or
                the nearest note lies outside 0-127. The value is never clamped.
        """
        freq = _as_float(self.frequency)
        if not (math.isfinite(freq) and freq > 0.0):
            raise OutOfRangeError(freq, "Hz has no MIDI number")
        backend = get_backend()
        # log2 of each side stays finite for subnormal frequencies
        octaves = backend.log2(freq) - backend.log2(REFERENCE_FREQUENCY)
        offset = SEMITONES_PER_OCTAVE * octaves
        return check_midi_number(int(backend.round(offset + REFERENCE_MIDI)))

    def octave(self) -> Optional[int]:
        """Return the octave of the nearest MIDI note (A4 -> 4, C-1 -> -1).

        Returns None if the pitch has no MIDI number.
        """
        try:
            number = self.try_midi_number()
        except OutOfRangeError:
            return None
        return number // SEMITONES_PER_OCTAVE - 1

    def transpose(self, semitones: float) -> Pitch:
        """Shift by a (possibly fractional or negative) number of semitones."""
        factor = get_backend().pow2(_as_float(semitones) / SEMITONES_PER_OCTAVE)
        return Pitch(_as_float(self.frequency) * factor)

    def transpose_octaves(self, octaves: float) -> Pitch:
        """Shift by whole or fractional octaves."""
        return self.transpose(SEMITONES_PER_OCTAVE * _as_float(octaves))

    def __str__(self) -> str:
        return f"{self.frequency} Hz"
