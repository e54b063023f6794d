import pytest

from pitchy.errors import ParseError
from pitchy.note import Note
from pitchy.parser import parse_note
from pitchy.symbol import Accidental, NoteLetter


@pytest.mark.parametrize(
    "text, letter, accidental, octave",
    [
        ("A4", NoteLetter.A, Accidental.Natural, 4),
        ("a4", NoteLetter.A, Accidental.Natural, 4),
        ("C#4", NoteLetter.C, Accidental.Sharp, 4),
        ("cs4", NoteLetter.C, Accidental.Sharp, 4),
        ("CS4", NoteLetter.C, Accidental.Sharp, 4),
        ("Db3", NoteLetter.D, Accidental.Flat, 3),
        ("dB3", NoteLetter.D, Accidental.Flat, 3),
        ("C-1", NoteLetter.C, Accidental.Natural, -1),
        ("C#-1", NoteLetter.C, Accidental.Sharp, -1),
        ("G+9", NoteLetter.G, Accidental.Natural, 9),
        ("E10", NoteLetter.E, Accidental.Natural, 10),
        ("  F#2 ", NoteLetter.F, Accidental.Sharp, 2),
    ],
)
def test_parse_note(
    text: str, letter: NoteLetter, accidental: Accidental, octave: int
) -> None:
    assert parse_note(text) == Note(letter, accidental, octave)


@pytest.mark.parametrize(
    "text, accidental",
    [
        ("B4", Accidental.Natural),
        ("b4", Accidental.Natural),
        ("Bb4", Accidental.Flat),
        ("BB4", Accidental.Flat),
        ("bb4", Accidental.Flat),
        ("Bs4", Accidental.Sharp),
    ],
)
def test_parse_letter_b(text: str, accidental: Accidental) -> None:
    """B is read as the letter first and as a flat only in second position."""
    note = parse_note(text)
    assert note.letter == NoteLetter.B
    assert note.accidental == accidental
    assert note.octave == 4


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "H4",
        "C##4",
        "C4.5",
        "C",
        "Bb",
        "bb",
        "4",
        "#4",
        "Cx4",
        "C 4",
        "C4b",
        "C--1",
        "C4 5",
        "C٤",
    ],
)
def test_parse_note_invalid(text: str) -> None:
    with pytest.raises(ParseError) as info:
        parse_note(text)
    assert info.value.text == text
    assert isinstance(info.value, ValueError)


def test_parse_error_reasons() -> None:
    with pytest.raises(ParseError, match="empty"):
        parse_note("")
    with pytest.raises(ParseError, match="missing octave"):
        parse_note("Bb")
    with pytest.raises(ParseError, match="note letter"):
        parse_note("H4")


def test_parse_error_chains_cause() -> None:
    with pytest.raises(ParseError) as info:
        parse_note("C4.5")
    assert info.value.__cause__ is not None


def test_parse_octave_too_long() -> None:
    """Octave literals past the int() digit limit fail as parse errors."""
    text = "C" + "9" * 5000
    with pytest.raises(ParseError, match="octave too large"):
        parse_note(text)


def test_parse_large_octave() -> None:
    assert parse_note("C" + "9" * 40).octave == int("9" * 40)
