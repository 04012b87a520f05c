"""Scrabble word scores."""

_LETTER_VALUES = {
    letter: value
    for letters, value in (
        ("AEIOULNRST", 1),
        ("DG", 2),
        ("BCMP", 3),
        ("FHVWY", 4),
        ("K", 5),
        ("JX", 8),
        ("QZ", 10),
    )
    for letter in letters
}


def score(word: str) -> int:
    """Return the Scrabble score of word; unknown characters score nothing."""
    return sum(_LETTER_VALUES.get(char.upper(), 0) for char in word)