"""Shift and Vigenère ciphers over lowercase letters."""

from __future__ import annotations

import math
from dataclasses import dataclass

_FIRST = ord("a")
_LAST = ord("z")


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return int(math.fmod(a, b))


def _wrap(code: int) -> str:
    if code < _FIRST:
        code = _LAST - _trunc_mod(_FIRST, code) + 1
    if code > _LAST:
        code = _FIRST - 1 + _trunc_mod(code, _LAST)
    return chr(code)


@dataclass(frozen=True)
class Cipher:
    """A cipher that shifts each letter by a repeating sequence of distances."""

    shifts: tuple[int, ...]

    def _shift_at(self, position: int) -> int:
        return self.shifts[position % len(self.shifts)]

    def encode(self, text: str) -> str:
        """Lowercase text, drop non-letters and shift what remains."""
        letters = (char for char in text.lower() if char.isalpha())
        return "".join(
            _wrap(ord(char) + self._shift_at(position))
            for position, char in enumerate(letters)
        )

    def decode(self, text: str) -> str:
        """Shift every character of text back."""
        return "".join(
            _wrap(ord(char) - self._shift_at(position))
            for position, char in enumerate(text)
        )


def caesar() -> Cipher:
    """Return the classic Caesar cipher, a shift of three."""
    return Cipher((3,))


def shift(distance: int) -> Cipher:
    """Return a cipher shifting by distance; it must be nonzero and within ±25."""
    if distance == 0 or distance >= 26 or distance <= -26:
        raise ValueError(f"invalid shift distance: {distance}")
    return Cipher((distance,))


def vigenere(key: str) -> Cipher:
    """Return a Vigenère cipher for key, at least three lowercase letters."""
    if len(key) <= 2:
        raise ValueError(f"key must have at least 3 letters, got {len(key)}")
    if any(not char.isalpha() or char.isupper() for char in key):
        raise ValueError("key must consist of lowercase letters only")
    return Cipher(tuple(ord(char) - _FIRST for char in key))