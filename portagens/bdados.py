"""The in-memory database that holds owners, vehicles, sensors, passages and distances."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Callable

from portagens.distancia import DistanciaList
from portagens.dono import DonoTable
from portagens.passagem import PassagemList
from portagens.sensor import SensorList
from portagens.veiculo import VeiculoTable

TABLE_SIZE = 1000
BATCH_SIZE = 100000

# Size of the database record itself: two table links, three list links and a total.
_BASE_SIZE = 48


class BDados:
    """All the data the toll system works with."""

    def __init__(self, nome: str = "Dados Portagens") -> None:
        self.nome = nome
        self.donos = DonoTable(TABLE_SIZE)
        self.veiculos = VeiculoTable(TABLE_SIZE)
        self.sensores = SensorList()
        self.passagens = PassagemList()
        self.distancias = DistanciaList()
        self.total_memoria = _BASE_SIZE
        print(f"Sistema {nome} inicializado")

    @staticmethod
    def _load_file(what: str, action: Callable[[], object]) -> None:
        try:
            action()
        except OSError as exc:
            reason = exc.strerror or str(exc)
            print(f"Erro ao abrir arquivo de {what}: {reason}", file=sys.stderr)

    def load(self, dir_dados: str | PathLike) -> None:
        """Load every data file found in a directory; missing files are reported and skipped."""
        base = Path(dir_dados)
        self._load_file("donos", lambda: self.donos.load(base / "donos.txt"))
        self._load_file(
            "veículos", lambda: self.veiculos.load(self.donos, base / "carros.txt")
        )
        self._load_file("sensores", lambda: self.sensores.load(base / "sensores.txt"))
        self._load_file(
            "distâncias", lambda: self.distancias.load(base / "distancias.txt")
        )
        self._load_file(
            "passagens", lambda: self.passagens.load(base / "passagem.txt", BATCH_SIZE)
        )
        self.calculate_memory()

    def calculate_memory(self) -> int:
        """Print the estimated memory use of each collection and return the total in bytes."""
        parts = (
            ("pelos donos", self.donos.memory_usage()),
            ("pelos veículos", self.veiculos.memory_usage()),
            ("pelos sensores", self.sensores.memory_usage()),
            ("pelas passagens", self.passagens.memory_usage()),
            ("pelas distâncias", self.distancias.memory_usage()),
        )
        total = _BASE_SIZE
        for label, size in parts:
            total += size
            print(f"Memória utilizada {label}: {size} bytes")
        self.total_memoria = total
        print(f"Memória total utilizada: {total / (1024.0 * 1024.0):.2f} MB")
        return total