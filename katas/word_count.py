"""Counting words in a sentence."""

import re
from collections import Counter

_WORD = re.compile(r"\w+(?:'\w+)?", re.ASCII)


def word_count(sentence: str) -> Counter[str]:
    """Return how often each lowercased word occurs in sentence."""
    return Counter(_WORD.findall(sentence.lower()))