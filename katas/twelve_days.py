"""Verses of 'The Twelve Days of Christmas'."""

_ORDINALS = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
)

_GIFTS = (
    "a Partridge in a Pear Tree",
    "two Turtle Doves",
    "three French Hens",
    "four Calling Birds",
    "five Gold Rings",
    "six Geese-a-Laying",
    "seven Swans-a-Swimming",
    "eight Maids-a-Milking",
    "nine Ladies Dancing",
    "ten Lords-a-Leaping",
    "eleven Pipers Piping",
    "twelve Drummers Drumming",
)


def verse(day: int) -> str:
    """Return the verse for day, counted from 1 to 12."""
    if not 1 <= day <= len(_ORDINALS):
        raise ValueError(f"day must be between 1 and {len(_ORDINALS)}, got {day}")
    if day == 1:
        gifts = _GIFTS[0]
    else:
        later = list(reversed(_GIFTS[1:day]))
        gifts = ", ".join([*later, f"and {_GIFTS[0]}"])
    return (
        f"On the {_ORDINALS[day - 1]} day of Christmas "
        f"my true love gave to me: {gifts}."
    )


def song() -> str:
    """Return the whole song, one verse per line."""
    return "\n".join(verse(day) for day in range(1, len(_ORDINALS) + 1))