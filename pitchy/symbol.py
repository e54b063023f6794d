"""Symbolic building blocks of a spelled note: letters and accidentals.

Enum values are semitone offsets, so a note's pitch class is simply
``letter.value + accidental.value``.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Dict, List, Tuple


@unique
class NoteLetter(Enum):
    """The seven natural note letters.

    Values are semitone offsets from C within an octave.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @staticmethod
    def all() -> List[NoteLetter]:
        """Return all letters in ascending order from C."""
        return list(NoteLetter)

    @staticmethod
    def parse(text: str) -> NoteLetter:
        """Parse a single case-insensitive letter.

        Raises:
            ValueError: If the text is not one of A-G.
        """
        try:
            return NoteLetter[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid note letter: {text!r}") from None

    def __str__(self) -> str:
        return self.name


@unique
class Accidental(Enum):
    """A single accidental. Values are semitone adjustments."""

    Flat = -1
    Natural = 0
    Sharp = 1

    @staticmethod
    def parse(text: str) -> Accidental:
        """Parse an accidental token: ``#``/``s`` for sharp, ``b`` for flat.

        Raises:
            ValueError: If the token is not recognized.
        """
        acc = _ACCIDENTAL_TOKENS.get(text.lower())
        if acc is None:
            raise ValueError(f"Invalid accidental: {text!r}")
        return acc

    def as_str(self) -> str:
        """Render as it appears in a note name (empty for natural)."""
        return _ACCIDENTAL_STRS[self]

    def __str__(self) -> str:
        return self.as_str()


_ACCIDENTAL_TOKENS: Dict[str, Accidental] = {
    "#": Accidental.Sharp,
    "s": Accidental.Sharp,
    "b": Accidental.Flat,
}

_ACCIDENTAL_STRS: Dict[Accidental, str] = {
    Accidental.Flat: "b",
    Accidental.Natural: "",
    Accidental.Sharp: "#",
}

SEMITONES_PER_OCTAVE = 12
"""Number of equal-tempered semitones in an octave."""

SHARP_SPELLINGS: Tuple[Tuple[NoteLetter, Accidental], ...] = (
    (NoteLetter.C, Accidental.Natural),
    (NoteLetter.C, Accidental.Sharp),
    (NoteLetter.D, Accidental.Natural),
    (NoteLetter.D, Accidental.Sharp),
    (NoteLetter.E, Accidental.Natural),
    (NoteLetter.F, Accidental.Natural),
    (NoteLetter.F, Accidental.Sharp),
    (NoteLetter.G, Accidental.Natural),
    (NoteLetter.G, Accidental.Sharp),
    (NoteLetter.A, Accidental.Natural),
    (NoteLetter.A, Accidental.Sharp),
    (NoteLetter.B, Accidental.Natural),
)
"""Default spelling of each pitch class (index = semitones above C).

Sharps only: a pitch converted back to a Note never comes out as a flat.
"""

assert len(SHARP_SPELLINGS) == SEMITONES_PER_OCTAVE
assert all(
    letter.value + acc.value == semitone
    for semitone, (letter, acc) in enumerate(SHARP_SPELLINGS)
)
