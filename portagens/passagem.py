"""Passages of vehicles by road sensors."""

from __future__ import annotations

import re
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Callable, Iterator

from portagens.utils import merge_sort
from portagens.veiculo import Veiculo, VeiculoTable, comparar_veiculos_matricula

_N = r"\s*([+-]?[0-9]+)(?![0-9])"
_LINE = re.compile(_N + _N + _N + "-" + _N + "-" + _N + _N + ":" + _N + ":" + _N + r"\." + _N + _N)

# Size of one stored record: two ints, a timestamp, an int and a link.
_NODE_SIZE = 32

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Passagem:
    """A vehicle seen by a sensor; tipo_registo is 0 for entry, 1 for exit."""

    id_sensor: int
    cod_veiculo: int
    data: datetime
    tipo_registo: int

    @property
    def tipo(self) -> str:
        return "Saída" if self.tipo_registo else "Entrada"


def parse_passagem(line: str) -> Passagem:
    """Parse "sensor<TAB>vehicle<TAB>DD-MM-YYYY hh:mm:ss.ms<TAB>type".

    Raises ValueError when the line does not hold such a record.
    """
    match = _LINE.match(line)
    if not match:
        raise ValueError(f"invalid passage record: {line!r}")
    (id_sensor, cod_veiculo, day, month, year,
     hour, minute, second, _ms, tipo) = (int(g) for g in match.groups())
    try:
        stamp = time.mktime((year, month, day, hour, minute, second, 0, 0, -1))
        data = datetime.fromtimestamp(stamp)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"invalid passage date: {line!r}") from exc
    return Passagem(id_sensor, cod_veiculo, data, tipo)


class PassagemList:
    """Collection of passages, most recently inserted first."""

    def __init__(self) -> None:
        self._items: deque[Passagem] = deque()

    def insert(self, passagem: Passagem) -> None:
        """Add a passage in front of the others."""
        self._items.appendleft(passagem)

    def load(self, filename: str | PathLike, batch_size: int = 100000) -> int:
        """Read passages from a file, reporting progress every batch_size records."""
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        count = 0
        with open(filename, encoding="utf-8") as file:
            for line in file:
                try:
                    passagem = parse_passagem(line)
                except ValueError:
                    continue
                self.insert(passagem)
                count += 1
                if count % batch_size == 0:
                    print(f"Carregadas {count} passagens...")
        print(f"Total de passagens carregadas: {count}")
        return count

    def memory_usage(self) -> int:
        """Estimated bytes used by the stored passages."""
        return len(self._items) * _NODE_SIZE

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Passagem]:
        return iter(self._items)

    def in_period(self, inicio: datetime, fim: datetime) -> Iterator[Passagem]:
        """Passages whose date lies between inicio and fim, inclusive."""
        return (p for p in self._items if inicio <= p.data <= fim)

    def list_period(self, inicio: datetime, fim: datetime) -> None:
        """Print the passages in a period."""
        for p in self.in_period(inicio, fim):
            print(
                f"Sensor: {p.id_sensor}, Veículo: {p.cod_veiculo}, "
                f"Data: {p.data:{DATE_FORMAT}}, Tipo: {p.tipo}"
            )

    def vehicles_in_period(
        self, veiculos: VeiculoTable, inicio: datetime, fim: datetime
    ) -> list[Veiculo]:
        """Distinct known vehicles seen in a period, sorted by number plate."""
        found: dict[int, Veiculo] = {}
        for p in self.in_period(inicio, fim):
            veiculo = veiculos.find_by_codigo(p.cod_veiculo)
            if veiculo is not None:
                found.setdefault(id(veiculo), veiculo)
        return merge_sort(found.values(), comparar_veiculos_matricula)

    def list_vehicles_period(
        self, veiculos: VeiculoTable, inicio: datetime, fim: datetime
    ) -> None:
        """Print the distinct vehicles seen in a period."""
        if not self._items:
            return
        rows = self.vehicles_in_period(veiculos, inicio, fim)
        print("\n=== Veículos no período selecionado ===")
        print(f"{'Matrícula':<10} {'Marca':<15} {'Modelo':<15} {'Ano':<4} Dono")
        for v in rows:
            dono = v.dono.nome if v.dono is not None else "N/A"
            print(f"{v.matricula:<10} {v.marca:<15} {v.modelo:<15} {v.ano:<4d} {dono}")

    def register(
        self, veiculos: VeiculoTable, ask: Callable[[str], str] = input
    ) -> Passagem | None:
        """Ask for a new passage stamped now; return it, or None if the vehicle is unknown."""
        print("\n=== Registar Nova Passagem ===")
        id_sensor = int(ask("ID do Sensor: ").strip())
        cod_veiculo = int(ask("Código do Veículo: ").strip())
        tipo = int(ask("Tipo de Registo (0=Entrada, 1=Saída): ").strip())
        passagem = Passagem(id_sensor, cod_veiculo, datetime.now().replace(microsecond=0), tipo)
        if veiculos.find_by_codigo(cod_veiculo) is None:
            print(f"Erro: Veículo com código {cod_veiculo} não encontrado!")
            return None
        self.insert(passagem)
        print("Passagem registada com sucesso!")
        return passagem

    def save(self, filename: str | PathLike) -> None:
        """Write all passages to a tab separated file."""
        with open(filename, "w", encoding="utf-8") as file:
            for p in self._items:
                file.write(
                    f"{p.id_sensor}\t{p.cod_veiculo}\t{p.data:{DATE_FORMAT}}\t{p.tipo_registo}\n"
                )
        print(f"Passagens salvas com sucesso em {filename}")