"""Distances between pairs of sensors."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterator

_INT = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

# Size of one stored record: two ints, a float and a link.
_NODE_SIZE = 24


@dataclass
class Distancia:
    """Distance between two sensors."""

    cod_sensor1: int
    cod_sensor2: int
    distancia: float


def _parse_line(line: str) -> Distancia | None:
    first = _INT.match(line)
    if not first:
        return None
    second = _INT.match(line, first.end())
    if not second:
        return None
    third = _FLOAT.match(line, second.end())
    if not third:
        return None
    return Distancia(int(first.group(1)), int(second.group(1)), float(third.group(1)))


class DistanciaList:
    """Collection of distances, most recently inserted first."""

    def __init__(self) -> None:
        self._items: deque[Distancia] = deque()

    def insert(self, distancia: Distancia) -> None:
        """Add a distance in front of the others."""
        self._items.appendleft(distancia)

    def find(self, cod_sensor1: int, cod_sensor2: int) -> float | None:
        """Return the distance between two sensors in either order, or None."""
        for item in self._items:
            if (item.cod_sensor1, item.cod_sensor2) in (
                (cod_sensor1, cod_sensor2),
                (cod_sensor2, cod_sensor1),
            ):
                return item.distancia
        return None

    def load(self, filename: str | PathLike) -> int:
        """Read tab separated distances from a file; return how many were added."""
        added = 0
        with open(filename, encoding="utf-8") as file:
            for line in file:
                distancia = _parse_line(line)
                if distancia is not None:
                    self.insert(distancia)
                    added += 1
        return added

    def memory_usage(self) -> int:
        """Estimated bytes used by the stored distances."""
        return len(self._items) * _NODE_SIZE

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Distancia]:
        return iter(self._items)