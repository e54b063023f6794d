"""Exceptions raised by pitchy conversions and parsers.

Every fallible operation raises one of the two concrete kinds below. Both
derive from ValueError so existing ``except ValueError`` handlers still apply.
"""

from __future__ import annotations


class PitchyError(Exception):
    """Base class for all pitchy errors."""


class ParseError(PitchyError, ValueError):
    """Raised when text does not match the note name grammar."""

    def __init__(self, text: str, reason: str) -> None:
        """Initialize a ParseError.

        Args:
            text: The original input text.
            reason: Short description of what was wrong with it.
        """
        super().__init__(f"Invalid note name {text!r}: {reason}")
        self.text = text
        self.reason = reason


class OutOfRangeError(PitchyError, ValueError):
    """Raised when a MIDI number falls outside 0-127.

    Also raised when a frequency cannot be mapped to a MIDI number at all
    (non-positive, infinite or NaN).
    """

    def __init__(self, value: int | float, reason: str) -> None:
        """Initialize an OutOfRangeError.

        Args:
            value: The offending MIDI number or frequency.
            reason: Short description of the violated range.
        """
        super().__init__(f"{value} {reason}")
        self.value = value
        self.reason = reason
