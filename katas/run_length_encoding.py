"""Run-length encoding and decoding of strings."""

import itertools
import re

_RUN = re.compile(r"(\d*)(\D)")


def encode(text: str) -> str:
    """Encode runs of repeated characters as count followed by character."""
    parts = []
    for char, group in itertools.groupby(text):
        count = sum(1 for _ in group)
        parts.append(f"{count}{char}" if count > 1 else char)
    return "".join(parts)


def decode(text: str) -> str:
    """Expand count-prefixed characters; trailing digits are ignored."""
    return "".join(
        char * int(count) if count else char for count, char in _RUN.findall(text)
    )