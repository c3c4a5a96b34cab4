"""Vehicle owners kept in a hash table keyed by taxpayer number."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Iterator

from portagens.utils import comparar_strings, merge_sort, paginar

_INT = re.compile(r"\s*([+-]?[0-9]+)")

# Fixed sizes: table header, one bucket slot and one stored owner record.
_TABLE_SIZE = 16
_BUCKET_SIZE = 8
_NODE_SIZE = 136

PAGE_SIZE = 30


@dataclass
class Dono:
    """A vehicle owner."""

    num_contribuinte: int
    nome: str
    cod_postal: str


def hash_dono(num_contribuinte: int, size: int) -> int:
    """Bucket index for a taxpayer number."""
    return num_contribuinte % size


def format_dono(dono: Dono) -> str:
    """One listing line for an owner."""
    return f"{dono.num_contribuinte:<8d} | {dono.nome:<100} | {dono.cod_postal}"


def comparar_donos_nome(a: Dono, b: Dono) -> int:
    """Compare owners by name."""
    return comparar_strings(a.nome, b.nome)


def comparar_donos_num_contribuinte(a: Dono, b: Dono) -> int:
    """Compare owners by taxpayer number."""
    return a.num_contribuinte - b.num_contribuinte


def _parse_line(line: str) -> Dono | None:
    match = _INT.match(line)
    if not match:
        return None
    rest = line[match.end():].lstrip()
    nome, sep, tail = rest.partition("\t")
    if not nome or not sep:
        return None
    tokens = tail.split()
    if not tokens:
        return None
    return Dono(int(match.group(1)), nome, tokens[0])


class DonoTable:
    """Hash table of owners with chained buckets."""

    def __init__(self, size: int = 1000) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[deque[Dono]] = [deque() for _ in range(size)]

    def insert(self, dono: Dono) -> None:
        """Add an owner at the front of its bucket."""
        self._buckets[hash_dono(dono.num_contribuinte, self.size)].appendleft(dono)

    def find(self, num_contribuinte: int) -> Dono | None:
        """Return the owner with this taxpayer number, or None."""
        bucket = self._buckets[hash_dono(num_contribuinte, self.size)]
        return next((d for d in bucket if d.num_contribuinte == num_contribuinte), None)

    def save(self, filename: str | PathLike) -> None:
        """Write all owners to a tab separated file."""
        with open(filename, "w", encoding="utf-8") as file:
            for dono in self:
                file.write(f"{dono.num_contribuinte}\t{dono.nome}\t{dono.cod_postal}\n")

    def load(self, filename: str | PathLike) -> int:
        """Read tab separated owners from a file; return how many were added."""
        added = 0
        with open(filename, encoding="utf-8") as file:
            for line in file:
                dono = _parse_line(line)
                if dono is not None:
                    self.insert(dono)
                    added += 1
        return added

    def memory_usage(self) -> int:
        """Estimated bytes used by the table and its owners."""
        total = _TABLE_SIZE + self.size * _BUCKET_SIZE
        return total + sum(
            _NODE_SIZE + len(d.nome.encode()) + len(d.cod_postal.encode()) for d in self
        )

    def collect(self) -> list[Dono]:
        """All owners in bucket order."""
        return list(self)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Dono]:
        for bucket in self._buckets:
            yield from bucket

    def _list(self, compare: Callable[[Dono, Dono], int], ask: Callable[[str], str]) -> None:
        donos = merge_sort(self.collect(), compare)
        paginar(donos, PAGE_SIZE, lambda d: print(format_dono(d)), ask)

    def list_alphabetical(self, ask: Callable[[str], str] = input) -> None:
        """Page through the owners sorted by name."""
        self._list(comparar_donos_nome, ask)

    def list_by_num_contribuinte(self, ask: Callable[[str], str] = input) -> None:
        """Page through the owners sorted by taxpayer number."""
        self._list(comparar_donos_num_contribuinte, ask)

    def register(self, ask: Callable[[str], str] = input) -> Dono | None:
        """Ask for a new owner and add it; return it, or None if it exists."""
        print("\n=== Registar Novo Dono ===")
        num = int(ask("Número de contribuinte: ").strip())
        if self.find(num) is not None:
            print("Erro: Dono já existe!")
            return None
        nome = ask("Nome: ").strip()
        tokens = ask("Código Postal: ").split()
        dono = Dono(num, nome, tokens[0] if tokens else "")
        self.insert(dono)
        print("Dono registado com sucesso!")
        return dono