"""Command entry point of the toll system."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from os import PathLike
from pathlib import Path
from typing import Callable

from portagens.bdados import BDados
from portagens.menu import (
    menu_consultas,
    menu_donos,
    menu_estatisticas,
    menu_exportar,
    menu_passagens,
    menu_principal,
    menu_veiculos,
)

DEFAULT_DATA_DIR = "../data"


def _clear_screen() -> None:
    if sys.stdout.isatty():
        subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def run(
    data_dir: str | PathLike = DEFAULT_DATA_DIR,
    ask: Callable[[str], str] = input,
) -> BDados:
    """Load the data, run the main menu until exit, then save and return the database."""
    bd = BDados("Dados Portagens")
    bd.load(data_dir)
    _clear_screen()
    base = Path(data_dir)
    actions: dict[int, Callable[[], None]] = {
        1: lambda: menu_donos(bd, ask),
        2: lambda: menu_veiculos(bd, ask),
        3: lambda: menu_passagens(bd, ask),
        4: lambda: menu_consultas(bd),
        5: lambda: menu_estatisticas(bd),
        6: lambda: menu_exportar(bd),
    }
    while True:
        opcao = menu_principal(ask)
        if opcao == 0:
            print("A sair...")
            bd.donos.save(base / "donos.txt")
            bd.veiculos.save(base / "carros.txt")
            bd.passagens.save(base / "passagem.txt")
            return bd
        action = actions.get(opcao)
        if action is None:
            print("Opção inválida!")
        else:
            action()


def main(argv: list[str] | None = None) -> int:
    """Run the toll system on a data directory."""
    parser = argparse.ArgumentParser(prog="portagens", description="Gestão de portagens.")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=DEFAULT_DATA_DIR,
        help="directory holding the data files",
    )
    args = parser.parse_args(argv)
    run(args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())