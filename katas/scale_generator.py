"""Musical scales built from a tonic and an interval pattern."""

import enum


class Pitch(enum.Enum):
    """Whether a tonic is written with flats, sharps or neither."""

    FLAT = enum.auto()
    SHARP = enum.auto()
    NONE = enum.auto()


_FLAT_NOTES = ("A", "Bb", "B", "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab")
_SHARP_NOTES = ("A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#")

_SHARP_TONICS = frozenset(
    {"G", "D", "A", "E", "B", "F#", "e", "b", "f#", "c#", "g#", "d#"}
)
_FLAT_TONICS = frozenset(
    {"F", "Bb", "Eb", "Ab", "Db", "Gb", "d", "g", "c", "f", "bb", "eb"}
)

_STEPS = {"A": 3, "M": 2, "m": 1}


def _pitch_of(tonic: str) -> Pitch:
    if tonic in _SHARP_TONICS:
        return Pitch.SHARP
    if tonic in _FLAT_TONICS:
        return Pitch.FLAT
    return Pitch.NONE


def scale(tonic: str, interval: str) -> list[str]:
    """Return the notes of the scale on tonic following interval.

    An empty interval gives the chromatic scale.
    """
    if not tonic:
        raise ValueError("tonic must not be empty")
    notes = _FLAT_NOTES if _pitch_of(tonic) is Pitch.FLAT else _SHARP_NOTES
    tonic = tonic[0].upper() + tonic[1:]
    start = notes.index(tonic) if tonic in notes else 0
    start_note = notes[start]

    if not interval:
        return [notes[(start + offset) % len(notes)] for offset in range(len(notes))]

    result = [start_note]
    position = start
    for token in interval:
        position += _STEPS.get(token, 0)
        note = notes[position % len(notes)]
        if note == start_note:
            break
        result.append(note)
    return result