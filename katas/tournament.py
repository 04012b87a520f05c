"""Tallying of football tournament results into a league table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TextIO

_HEADER = "Team                           | MP |  W |  D |  L |  P"


class TallyError(ValueError):
    """Raised when a result line cannot be understood."""


@dataclass
class _Stat:
    name: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    points: int = 0
    played: int = 0


def _lines(source: Iterable[str]) -> Iterable[str]:
    for raw in source:
        line = raw.rstrip("\n")
        yield line.removesuffix("\r")


def _read_stats(source: Iterable[str]) -> dict[str, _Stat]:
    stats: dict[str, _Stat] = {}
    for line in _lines(source):
        if not line or line.startswith("#"):
            continue
        fields = line.split(";")
        if len(fields) != 3:
            raise TallyError(
                f"expected line {line!r} to have 3 items but got {len(fields)}"
            )
        home, away, outcome = fields
        first = replace(stats.get(home, _Stat(home)), name=home)
        second = replace(stats.get(away, _Stat(away)), name=away)

        if outcome == "win":
            first.wins += 1
            first.points += 3
            second.losses += 1
        elif outcome == "loss":
            second.wins += 1
            second.points += 3
            first.losses += 1
        elif outcome == "draw":
            first.draws += 1
            first.points += 1
            second.draws += 1
            second.points += 1
        else:
            raise TallyError(f"could not match {outcome!r} to a valid outcome")

        first.played += 1
        second.played += 1
        stats[home] = first
        stats[away] = second
    return stats


def tally(source: Iterable[str], sink: TextIO) -> None:
    """Read result lines from source and write the league table to sink.

    Blank lines and lines starting with '#' are ignored. Nothing is written
    if any line is invalid.
    """
    stats = _read_stats(source)
    ranked = sorted(stats.values(), key=lambda stat: (-stat.points, stat.name))
    rows = [_HEADER]
    rows.extend(
        f"{stat.name:<31}|  {stat.played} |  {stat.wins} |  {stat.draws} "
        f"|  {stat.losses} |  {stat.points}"
        for stat in ranked
    )
    sink.write("".join(f"{row}\n" for row in rows))