"""Road sensors and their locations."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterator

_INT = re.compile(r"\s*([+-]?[0-9]+)")

# Size of one stored record without its text: id, fixed text fields and link.
_NODE_SIZE = 216


@dataclass
class Sensor:
    """A sensor with its designation and coordinates."""

    cod_sensor: int
    designacao: str
    latitude: str
    longitude: str


def _parse_line(line: str) -> Sensor | None:
    match = _INT.match(line)
    if not match:
        return None
    rest = line[match.end():]
    fields = []
    for index in range(3):
        rest = rest.lstrip()
        field, sep, rest = rest.partition("\t")
        if index == 2:
            field = field.rstrip("\r\n")
        if not field:
            return None
        fields.append(field)
        if not sep and index < 2:
            return None
    return Sensor(int(match.group(1)), *fields)


class SensorList:
    """Collection of sensors, most recently inserted first."""

    def __init__(self) -> None:
        self._items: deque[Sensor] = deque()

    def insert(self, sensor: Sensor) -> None:
        """Add a sensor in front of the others."""
        self._items.appendleft(sensor)

    def find(self, cod_sensor: int) -> Sensor | None:
        """Return the sensor with the given code, or None."""
        return next((s for s in self._items if s.cod_sensor == cod_sensor), None)

    def load(self, filename: str | PathLike) -> int:
        """Read tab separated sensors from a file; return how many were added."""
        added = 0
        with open(filename, encoding="utf-8") as file:
            for line in file:
                sensor = _parse_line(line)
                if sensor is not None:
                    self.insert(sensor)
                    added += 1
        return added

    def memory_usage(self) -> int:
        """Estimated bytes used by the stored sensors."""
        return sum(
            _NODE_SIZE
            + len(s.designacao.encode())
            + len(s.latitude.encode())
            + len(s.longitude.encode())
            for s in self._items
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Sensor]:
        return iter(self._items)