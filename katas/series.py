"""Contiguous substrings of a fixed length."""


def all_series(n: int, text: str) -> list[str]:
    """Return every substring of text that is n characters long, in order."""
    return [text[start : start + n] for start in range(len(text) - n + 1)]


def unsafe_first(n: int, text: str) -> str:
    """Return the first substring of length n; raise ValueError if there is none."""
    found = first(n, text)
    if found is None:
        raise ValueError(f"no substring of length {n} in {text!r}")
    return found


def first(n: int, text: str) -> str | None:
    """Return the first substring of length n, or None if text is too short."""
    series = all_series(n, text)
    return series[0] if series else None