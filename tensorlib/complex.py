"""Complex number value with cached polar form."""

from __future__ import annotations
import math
from typing import Union


class Complex:
    """
    A complex number that keeps its modulus and phase up to date.

    ``modulus`` and ``phase`` are recomputed whenever ``real`` or
    ``imag`` is assigned.

    Example:
        >>> z = Complex(3.0, 4.0)
        >>> z.modulus
        5.0
    """

    __slots__ = ("_real", "_imag", "_modulus", "_phase")

    def __init__(self, real: float = 0.0, imag: float = 0.0):
        self._real = real
        self._imag = imag
        self._calculate_polar()

    def _calculate_polar(self) -> None:
        self._modulus = math.sqrt(self._real * self._real + self._imag * self._imag)
        self._phase = math.atan2(self._imag, self._real)

    @classmethod
    def from_python(cls, value: Union[complex, float, int]) -> 'Complex':
        value = complex(value)
        return cls(value.real, value.imag)

    @property
    def real(self) -> float:
        return self._real

    @real.setter
    def real(self, value: float) -> None:
        self._real = value
        self._calculate_polar()

    @property
    def imag(self) -> float:
        return self._imag

    @imag.setter
    def imag(self, value: float) -> None:
        self._imag = value
        self._calculate_polar()

    @property
    def modulus(self) -> float:
        """Distance from the origin."""
        return self._modulus

    @property
    def phase(self) -> float:
        """Angle in radians, in [-pi, pi]."""
        return self._phase

    def __complex__(self) -> complex:
        return complex(self._real, self._imag)

    def __eq__(self, other) -> bool:
        if isinstance(other, Complex):
            return self._real == other._real and self._imag == other._imag
        if isinstance(other, (int, float, complex)):
            return complex(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(complex(self))

    def __repr__(self) -> str:
        return f"Complex(real={self._real}, imag={self._imag})"
