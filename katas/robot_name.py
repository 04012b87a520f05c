"""Unique random names for robots."""

import random
import string

_CAPACITY = 26 * 26 * 10 * 10 * 10

_random = random.Random()
_used_names: set[str] = set()


class NamesExhaustedError(Exception):
    """Raised when every possible robot name has been handed out."""


def _generate_name() -> str:
    letters = "".join(_random.choice(string.ascii_uppercase) for _ in range(2))
    return f"{letters}{_random.randrange(1000):03d}"


class Robot:
    """A robot whose name is chosen on first request and never reused."""

    def __init__(self, taken: set[str] | None = None) -> None:
        self._taken = _used_names if taken is None else taken
        self._name = ""

    def name(self) -> str:
        """Return the robot's name, assigning a fresh one if it has none."""
        if len(self._taken) >= _CAPACITY:
            raise NamesExhaustedError("names exhausted")
        if self._name:
            return self._name
        candidate = _generate_name()
        while candidate in self._taken:
            candidate = _generate_name()
        self._taken.add(candidate)
        self._name = candidate
        return candidate

    def reset(self) -> None:
        """Forget the current name; the next request picks a new one."""
        self._name = ""