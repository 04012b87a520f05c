"""Classification of triangles by their sides."""

import enum
import math


class Kind(enum.IntEnum):
    """The kind of a triangle."""

    NAT = 0  # not a triangle
    EQU = 1  # equilateral
    ISO = 2  # isosceles
    SCA = 3  # scalene


def _is_triangle(a: float, b: float, c: float) -> bool:
    if any(math.isinf(side) for side in (a, b, c)):
        return False
    if a <= 0 and b <= 0 and c <= 0:
        return False
    return a + b >= c and a + c >= b and b + c >= a


def kind_from_sides(a: float, b: float, c: float) -> Kind:
    """Return the kind of triangle with sides a, b and c."""
    if not _is_triangle(a, b, c):
        return Kind.NAT
    low, middle, high = sorted((a, b, c))
    if low == high:
        return Kind.EQU
    if low == middle or middle == high:
        return Kind.ISO
    return Kind.SCA