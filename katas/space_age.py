"""Ages expressed in the orbital years of the planets."""

import enum

_EARTH_YEAR_SECONDS = 31557600


class Planet(str, enum.Enum):
    """A planet of the solar system."""

    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"


_ORBITAL_PERIODS = {
    Planet.EARTH: 1.0,
    Planet.MERCURY: 0.2408467,
    Planet.VENUS: 0.61519726,
    Planet.MARS: 1.8808158,
    Planet.JUPITER: 11.862615,
    Planet.SATURN: 29.447498,
    Planet.URANUS: 84.016846,
    Planet.NEPTUNE: 164.79132,
}


def age(seconds: float, planet: Planet | str) -> float:
    """Return seconds as years on planet; an unknown planet gives 0."""
    period = _ORBITAL_PERIODS.get(planet)
    if period is None:
        return 0.0
    return seconds / _EARTH_YEAR_SECONDS / period