"""Floating-point backends for the equal-tempered tuning math.

All numeric work in pitchy goes through three primitives: ``pow2``,
``log2`` and ``round``. They live behind MathBackend so the implementation
can be swapped in one place (see pitchy.config) without touching any
conversion code.

Both backends round half away from zero and return plain Python floats,
so MIDI numbers and note spellings never depend on the backend.
"""

from __future__ import annotations

import math
from abc import ABCMeta, abstractmethod
from typing import override

import numpy as np


class MathBackend(metaclass=ABCMeta):
    """The narrow numeric interface used by Pitch and Note."""

    name: str

    @abstractmethod
    def pow2(self, exp: float) -> float:
        """Return 2 raised to ``exp``, or infinity on overflow."""
        raise NotImplementedError()

    @abstractmethod
    def log2(self, x: float) -> float:
        """Return the base-2 logarithm of a positive finite ``x``."""
        raise NotImplementedError()

    @abstractmethod
    def round(self, x: float) -> float:
        """Round a finite ``x`` to the nearest integer, halves away from zero."""
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class StdMathBackend(MathBackend):
    """Backend on top of the standard library math module."""

    name = "std"

    @override
    def pow2(self, exp: float) -> float:
        try:
            return math.pow(2.0, exp)
        except OverflowError:
            return math.inf

    @override
    def log2(self, x: float) -> float:
        return math.log2(x)

    @override
    def round(self, x: float) -> float:
        if x < 0:
            return -self.round(-x)
        floor = float(math.floor(x))
        return floor + 1.0 if x - floor >= 0.5 else floor


class NumpyMathBackend(MathBackend):
    """Backend on top of numpy ufuncs."""

    name = "numpy"

    @override
    def pow2(self, exp: float) -> float:
        with np.errstate(over="ignore"):
            return float(np.power(np.float64(2.0), np.float64(exp)))

    @override
    def log2(self, x: float) -> float:
        return float(np.log2(np.float64(x)))

    @override
    def round(self, x: float) -> float:
        # np.rint rounds halves to even
        value = np.float64(x)
        floor = np.floor(np.abs(value))
        if np.abs(value) - floor >= 0.5:
            floor += 1.0
        return float(np.copysign(floor, value))


BACKENDS: dict[str, type[MathBackend]] = {
    StdMathBackend.name: StdMathBackend,
    NumpyMathBackend.name: NumpyMathBackend,
}
"""Registry of available backends by configuration name."""
