"""Parser for note names like ``C4``, ``f#3``, ``Bb-1`` using Lark."""

from __future__ import annotations

import logging

from lark import Lark, Token, Transformer
from lark.exceptions import (
    LarkError,
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedToken,
    VisitError,
)

from pitchy.errors import ParseError
from pitchy.note import Note
from pitchy.symbol import Accidental, NoteLetter

# Lark grammar for note names: letter, optional accidental, signed octave.
# The LALR contextual lexer only offers LETTER in the first position and
# ACCIDENTAL/OCTAVE in the second, which is what keeps "b" the letter in
# "B4" and the flat in "Bb4".
NOTE_GRAMMAR = """
start: LETTER ACCIDENTAL? OCTAVE

LETTER: /[A-Ga-g]/
ACCIDENTAL: /[#sSbB]/
OCTAVE: /[+-]?[0-9]+/
"""


class NoteTransformer(Transformer):
    """Transform a parsed note name into a Note."""

    def start(self, items):
        """Assemble letter, accidental and octave."""
        if len(items) == 3:
            letter, accidental, octave = items
        else:
            letter, octave = items
            accidental = Accidental.Natural
        return Note(letter, accidental, octave)

    def LETTER(self, token: Token) -> NoteLetter:
        return NoteLetter.parse(str(token))

    def ACCIDENTAL(self, token: Token) -> Accidental:
        return Accidental.parse(str(token))

    def OCTAVE(self, token: Token) -> int:
        return int(str(token))


_PARSER = Lark(NOTE_GRAMMAR, parser="lalr")
_TRANSFORMER = NoteTransformer()


def _describe(exc: LarkError) -> str:
    """Short human reason for a Lark failure."""
    if isinstance(exc, VisitError) and isinstance(exc.orig_exc, ValueError):
        # int() refuses literals past sys.get_int_max_str_digits()
        return "octave too large"
    if isinstance(exc, UnexpectedEOF):
        return "missing octave"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "missing octave"
        return f"unexpected {str(exc.token)!r} at column {exc.column}"
    if isinstance(exc, UnexpectedCharacters):
        if exc.column <= 1:
            return f"unknown note letter {exc.char!r}"
        return f"unexpected character {exc.char!r} at column {exc.column}"
    return "expected letter, optional accidental and octave"


def parse_note(text: str) -> Note:
    """Parse a note name into a Note, keeping its written spelling.

    Args:
        text: A note name such as ``"A4"``, ``"c#3"``, ``"Eb5"`` or ``"Bb-1"``.
            Surrounding whitespace is ignored.

    Returns:
        The parsed Note.

    Raises:
        ParseError: If the text does not match the grammar.

    Examples:
        >>> parse_note("Db4").name()
        'Db4'
        >>> parse_note("fs2").name()
        'F#2'
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError(text, "empty note name")
    try:
        tree = _PARSER.parse(stripped)
        return _TRANSFORMER.transform(tree)
    except LarkError as exc:
        logging.debug("Rejected note name %r: %s", text, exc)
        raise ParseError(text, _describe(exc)) from exc
