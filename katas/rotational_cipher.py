"""Rotational (Caesar-style) cipher over letters."""

_LOWER_LAST, _LOWER_BASE = ord("z"), ord("a") - 1
_UPPER_LAST, _UPPER_BASE = ord("Z"), ord("A") - 1


def _rotate_letter(char: str, shift: int) -> str:
    if char.islower():
        last, base = _LOWER_LAST, _LOWER_BASE
    else:
        last, base = _UPPER_LAST, _UPPER_BASE
    shifted = ord(char) + shift
    if shifted > last:
        return chr(base + shifted % last)
    return chr(shifted)


def rotate(text: str, shift: int) -> str:
    """Shift every letter of text by shift places; other characters stay."""
    return "".join(
        _rotate_letter(char, shift) if char.isalpha() else char for char in text
    )