"""Interactive text menus of the toll system."""

from __future__ import annotations

from typing import Callable

from portagens.bdados import BDados

Ask = Callable[[str], str]

INVALID_OPTION = -1


def _read_option(ask: Ask, prompt: str = "Escolha: ") -> int:
    """Read a menu choice; end of input means 0, anything unreadable is invalid."""
    try:
        answer = ask(prompt)
    except EOFError:
        return 0
    try:
        return int(answer.strip())
    except ValueError:
        return INVALID_OPTION


def _run_submenu(header: str, actions: dict[int, Callable[[], object]], ask: Ask) -> None:
    while True:
        print(header)
        opcao = _read_option(ask)
        if opcao == 0:
            return
        action = actions.get(opcao)
        if action is None:
            print("Opção inválida!")
            continue
        try:
            action()
        except EOFError:
            return
        except ValueError:
            print("Entrada inválida!")


def menu_principal(ask: Ask = input) -> int:
    """Show the main menu and return the chosen option."""
    print("\n=== Menu Principal ===")
    print("1. Donos")
    print("2. Veículos")
    print("3. Passagens")
    print("4. Consultas")
    print("5. Estatísticas")
    print("6. Exportar")
    print("0. Sair")
    return _read_option(ask)


def menu_donos(bd: BDados, ask: Ask = input) -> None:
    """Owner menu: register and list owners."""
    header = (
        "\n=== Menu Donos ===\n"
        "1. Registar dono\n"
        "2. Listar ordenados alfabeticamente\n"
        "3. Listar ordenados por número contribuinte\n"
        "0. Voltar"
    )
    _run_submenu(
        header,
        {
            1: lambda: bd.donos.register(ask),
            2: lambda: bd.donos.list_alphabetical(ask),
            3: lambda: bd.donos.list_by_num_contribuinte(ask),
        },
        ask,
    )


def menu_veiculos(bd: BDados, ask: Ask = input) -> None:
    """Vehicle menu: register and list vehicles."""
    header = (
        "\n=== Menu Veículos ===\n"
        "1. Registar veículo\n"
        "2. Listar por matrícula\n"
        "3. Listar por marca\n"
        "4. Listar por modelo\n"
        "0. Voltar"
    )
    _run_submenu(
        header,
        {
            1: lambda: bd.veiculos.register(bd.donos, ask),
            2: lambda: bd.veiculos.list_sorted("matricula", ask),
            3: lambda: bd.veiculos.list_sorted("marca", ask),
            4: lambda: bd.veiculos.list_sorted("modelo", ask),
        },
        ask,
    )


def menu_passagens(bd: BDados, ask: Ask = input) -> None:
    """Passage menu: register passages."""
    header = "\n=== Menu Passagens ===\n1. Registar passagem\n0. Voltar"
    _run_submenu(
        header,
        {1: lambda: bd.passagens.register(bd.veiculos, ask)},
        ask,
    )


def menu_consultas(bd: BDados) -> None:
    """Queries menu; not available yet."""
    print("\n=== Menu Consultas ===")
    print("Funcionalidade a implementar na próxima fase")


def menu_estatisticas(bd: BDados) -> None:
    """Statistics menu: show memory use."""
    print("\n=== Menu Estatísticas ===")
    bd.calculate_memory()


def menu_exportar(bd: BDados) -> None:
    """Export menu; not available yet."""
    print("\n=== Menu Exportar ===")
    print("Funcionalidade a implementar na próxima fase")