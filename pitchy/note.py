"""Symbolic notes spelled as letter, accidental and octave, e.g. ``C#4``."""

from __future__ import annotations

from dataclasses import dataclass

from pitchy.pitch import Pitch, check_midi_number
from pitchy.symbol import SEMITONES_PER_OCTAVE, SHARP_SPELLINGS, Accidental, NoteLetter


@dataclass(frozen=True)
class Note:
    """A musical note spelled with a letter, an accidental and an octave.

    Octaves follow scientific pitch notation (middle C is C4, MIDI 60).
    Any octave is accepted here; only conversion to a MIDI number or a
    Pitch checks the range.
    """

    letter: NoteLetter
    accidental: Accidental
    octave: int

    @staticmethod
    def from_string(text: str) -> Note:
        """Parse a note name, keeping its spelling (``"Db4"`` stays flat).

        Raises:
            ParseError: If the text is not a valid note name.
        """
        from pitchy.parser import parse_note

        return parse_note(text)

    @staticmethod
    def try_from_pitch(pitch: Pitch) -> Note:
        """Spell the nearest note to a pitch, preferring sharps.

        Flats are never produced: a pitch between D and E always comes
        back as D#, whatever spelling it was created from.

        Raises:
            OutOfRangeError: If the pitch has no MIDI number.
        """
        number = pitch.try_midi_number()
        octave, semitone = divmod(number, SEMITONES_PER_OCTAVE)
        letter, accidental = SHARP_SPELLINGS[semitone]
        return Note(letter, accidental, octave - 1)

    def semitone(self) -> int:
        """Semitones above C of the same octave (may be -1 or 12)."""
        return self.letter.value + self.accidental.value

    def try_midi_number(self) -> int:
        """Return the MIDI number of this note.

        Raises:
            OutOfRangeError: If the note lies outside 0-127 (e.g. ``Cb-1``).
        """
        number = (self.octave + 1) * SEMITONES_PER_OCTAVE + self.semitone()
        return check_midi_number(number)

    def to_pitch(self) -> Pitch:
        """Return the equal-tempered pitch of this note.

        Raises:
            OutOfRangeError: If the note lies outside the MIDI range.
        """
        return Pitch.try_from_note(self)

    def name(self) -> str:
        """Render as ``"{letter}{accidental}{octave}"``, e.g. ``"C#4"``."""
        return f"{self.letter}{self.accidental}{self.octave}"

    def __str__(self) -> str:
        return self.name()
