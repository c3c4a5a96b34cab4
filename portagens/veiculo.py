"""Vehicles kept in a hash table keyed by number plate."""

from __future__ import annotations

import re
import sys
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Iterator

from portagens.dono import Dono, DonoTable
from portagens.utils import comparar_strings, merge_sort, paginar

MATRICULA_MAX = 19
TEXT_MAX = 49
PAGE_SIZE = 30

_MATRICULA = re.compile(r"[^\t]{1,%d}" % MATRICULA_MAX)
_TEXT = re.compile(r"[^\t]{1,%d}" % TEXT_MAX)
_SPACE = re.compile(r"\s*")
_INT = re.compile(r"\s*([+-]?[0-9]+)")
_MASK = (1 << 64) - 1

# Fixed sizes: table header, one bucket slot and one stored vehicle record.
_TABLE_SIZE = 16
_BUCKET_SIZE = 8
_NODE_SIZE = 152


@dataclass
class Veiculo:
    """A vehicle and its owner."""

    matricula: str
    marca: str
    modelo: str
    ano: int
    dono: Dono | None
    cod_veiculo: int


def hash_veiculo(matricula: str, size: int) -> int:
    """Bucket index for a number plate (djb2 over its bytes)."""
    value = 5381
    for byte in matricula.encode():
        signed = byte - 256 if byte > 127 else byte
        value = (value * 33 + signed) & _MASK
    return value % size


def format_veiculo(veiculo: Veiculo) -> str:
    """One listing line for a vehicle."""
    dono = veiculo.dono.nome if veiculo.dono is not None else "N/A"
    return (
        f"{veiculo.cod_veiculo:<10d} | {veiculo.matricula:<10} | {veiculo.marca:<50} | "
        f"{veiculo.modelo:<50} | {veiculo.ano:<4d} | {dono}"
    )


def comparar_veiculos_matricula(a: Veiculo, b: Veiculo) -> int:
    """Compare vehicles by number plate."""
    return comparar_strings(a.matricula, b.matricula)


def comparar_veiculos_marca(a: Veiculo, b: Veiculo) -> int:
    """Compare vehicles by make, then model."""
    return comparar_strings(a.marca, b.marca) or comparar_strings(a.modelo, b.modelo)


def comparar_veiculos_modelo(a: Veiculo, b: Veiculo) -> int:
    """Compare vehicles by model, then make."""
    return comparar_strings(a.modelo, b.modelo) or comparar_strings(a.marca, b.marca)


_CRITERIA: dict[str, Callable[[Veiculo, Veiculo], int]] = {
    "matricula": comparar_veiculos_matricula,
    "marca": comparar_veiculos_marca,
    "modelo": comparar_veiculos_modelo,
}


def _parse_line(line: str) -> tuple[str, str, str, int, int, int] | None:
    pos = 0
    texts: list[str] = []
    for index, pattern in enumerate((_MATRICULA, _TEXT, _TEXT)):
        if index:
            pos = _SPACE.match(line, pos).end()
        match = pattern.match(line, pos)
        if not match:
            return None
        texts.append(match.group(0))
        pos = match.end()
    numbers: list[int] = []
    for _ in range(3):
        match = _INT.match(line, pos)
        if not match:
            return None
        numbers.append(int(match.group(1)))
        pos = match.end()
    matricula, marca, modelo = texts
    ano, num_contribuinte, cod_veiculo = numbers
    return matricula, marca, modelo, ano, num_contribuinte, cod_veiculo


def _read_text(ask: Callable[[str], str], prompt: str, width: int) -> str:
    text = ask(prompt).lstrip().split("\n", 1)[0][:width]
    if not text:
        raise ValueError(f"empty answer to {prompt.strip()!r}")
    return text


class VeiculoTable:
    """Hash table of vehicles with chained buckets."""

    def __init__(self, size: int = 1000) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[deque[Veiculo]] = [deque() for _ in range(size)]
        self._ultimo_codigo = 0

    def insert(self, veiculo: Veiculo) -> None:
        """Add a vehicle at the front of its bucket."""
        self._buckets[hash_veiculo(veiculo.matricula, self.size)].appendleft(veiculo)

    def save(self, filename: str | PathLike) -> None:
        """Write all vehicles to a tab separated file."""
        with open(filename, "w", encoding="utf-8") as file:
            for v in self:
                if v.dono is None:
                    raise ValueError(f"vehicle {v.matricula} has no owner")
                file.write(
                    f"{v.matricula}\t{v.marca}\t{v.modelo}\t{v.ano}\t"
                    f"{v.dono.num_contribuinte}\t{v.cod_veiculo}\n"
                )

    def find_by_matricula(self, matricula: str) -> Veiculo | None:
        """Return the vehicle with this number plate, or None."""
        bucket = self._buckets[hash_veiculo(matricula, self.size)]
        return next((v for v in bucket if v.matricula == matricula), None)

    def find_by_codigo(self, cod_veiculo: int) -> Veiculo | None:
        """Return the first vehicle with this code, or None."""
        return next((v for v in self if v.cod_veiculo == cod_veiculo), None)

    def load(self, donos: DonoTable, filename: str | PathLike) -> int:
        """Read vehicles from a file, linking each to its owner.

        Vehicles whose owner is unknown are reported and skipped. Returns
        how many vehicles were added.
        """
        added = 0
        with open(filename, encoding="utf-8") as file:
            for line in file:
                fields = _parse_line(line)
                if fields is None:
                    continue
                matricula, marca, modelo, ano, num_contribuinte, cod_veiculo = fields
                dono = donos.find(num_contribuinte)
                if dono is None:
                    print(f"Dono não encontrado para veículo {matricula}", file=sys.stderr)
                    continue
                self.insert(Veiculo(matricula, marca, modelo, ano, dono, cod_veiculo))
                added += 1
        return added

    def memory_usage(self) -> int:
        """Estimated bytes used by the table and its vehicles."""
        total = _TABLE_SIZE + self.size * _BUCKET_SIZE
        return total + sum(
            _NODE_SIZE
            + len(v.matricula.encode())
            + len(v.marca.encode())
            + len(v.modelo.encode())
            for v in self
        )

    def collect(self) -> list[Veiculo]:
        """All vehicles in bucket order."""
        return list(self)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Veiculo]:
        for bucket in self._buckets:
            yield from bucket

    def sorted_by(self, criterio: str) -> list[Veiculo]:
        """Vehicles sorted by "matricula", "marca" or "modelo"."""
        try:
            compare = _CRITERIA[criterio]
        except KeyError:
            raise ValueError(f"unknown criterion: {criterio!r}") from None
        return merge_sort(self.collect(), compare)

    def list_sorted(self, criterio: str, ask: Callable[[str], str] = input) -> None:
        """Page through the vehicles sorted by the given criterion."""
        veiculos = self.sorted_by(criterio)
        paginar(veiculos, PAGE_SIZE, lambda v: print(format_veiculo(v)), ask)

    def register(self, donos: DonoTable, ask: Callable[[str], str] = input) -> Veiculo | None:
        """Ask for a new vehicle and add it; return it, or None on refusal."""
        print("\n=== Registar Novo Veículo ===")
        matricula = _read_text(ask, "Matrícula: ", MATRICULA_MAX)
        if self.find_by_matricula(matricula) is not None:
            print("Erro: Veículo já existe!")
            return None
        marca = _read_text(ask, "Marca: ", TEXT_MAX)
        modelo = _read_text(ask, "Modelo: ", TEXT_MAX)
        ano = int(ask("Ano: ").strip())
        num_contribuinte = int(ask("Número de contribuinte do dono: ").strip())
        dono = donos.find(num_contribuinte)
        if dono is None:
            print("Erro: Dono não encontrado!")
            return None
        self._ultimo_codigo += 1
        veiculo = Veiculo(matricula, marca, modelo, ano, dono, self._ultimo_codigo)
        self.insert(veiculo)
        print(f"Veículo registado com sucesso! Código: {veiculo.cod_veiculo}")
        return veiculo