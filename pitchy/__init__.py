"""Conversions between frequencies, note names and MIDI note numbers."""

from pitchy.config import get_backend, set_backend, use_backend
from pitchy.errors import OutOfRangeError, ParseError, PitchyError
from pitchy.note import Note
from pitchy.parser import parse_note
from pitchy.pitch import (
    MIDI_MAX,
    MIDI_MIN,
    REFERENCE_FREQUENCY,
    REFERENCE_MIDI,
    Pitch,
)
from pitchy.symbol import Accidental, NoteLetter

__all__ = [
    "Accidental",
    "MIDI_MAX",
    "MIDI_MIN",
    "Note",
    "NoteLetter",
    "OutOfRangeError",
    "ParseError",
    "Pitch",
    "PitchyError",
    "REFERENCE_FREQUENCY",
    "REFERENCE_MIDI",
    "get_backend",
    "parse_note",
    "set_backend",
    "use_backend",
]
