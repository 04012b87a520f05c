"""Raindrop sounds from the factors of a number."""

_SOUNDS = ((3, "Pling"), (5, "Plang"), (7, "Plong"))


def convert(number: int) -> str:
    """Return the raindrop sounds for number, or the number itself."""
    sounds = "".join(sound for factor, sound in _SOUNDS if number % factor == 0)
    return sounds or str(number)