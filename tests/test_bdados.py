from pathlib import Path

import pytest

from portagens.bdados import BDados


def _write_data(directory: Path) -> None:
    (directory / "donos.txt").write_text("123\tAna Silva\t1000-001\n", encoding="utf-8")
    (directory / "carros.txt").write_text(
        "XX-00-XX\tMarca\tModelo\t2020\t123\t5\n", encoding="utf-8"
    )
    (directory / "sensores.txt").write_text("1\tPorto\t41.1\t-8.6\n", encoding="utf-8")
    (directory / "distancias.txt").write_text("1\t2\t12.5\n", encoding="utf-8")
    (directory / "passagem.txt").write_text(
        "1\t5\t01-02-2024 10:00:00.000\t0\n", encoding="utf-8"
    )


@pytest.fixture
def data_dir(tmp_path):
    _write_data(tmp_path)
    return tmp_path


def test_init_starts_empty_and_announces(capsys):
    bd = BDados("Teste")
    out = capsys.readouterr().out
    assert "Sistema Teste inicializado" in out
    assert len(bd.donos) == 0
    assert len(bd.veiculos) == 0
    assert len(bd.sensores) == 0
    assert len(bd.passagens) == 0
    assert len(bd.distancias) == 0


def test_load_reads_every_file(data_dir, capsys):
    bd = BDados("Teste")
    bd.load(data_dir)
    assert bd.donos.find(123).nome == "Ana Silva"
    assert bd.veiculos.find_by_matricula("XX-00-XX").dono is bd.donos.find(123)
    assert bd.sensores.find(1).designacao == "Porto"
    assert bd.distancias.find(2, 1) == 12.5
    assert len(bd.passagens) == 1
    out = capsys.readouterr().out
    assert "Total de passagens carregadas: 1" in out
    assert "Memória total utilizada:" in out


def test_load_accepts_trailing_separator(data_dir):
    bd = BDados("Teste")
    bd.load(str(data_dir) + "/")
    assert len(bd.donos) == 1
    assert len(bd.veiculos) == 1


def test_load_missing_files_reports_and_continues(tmp_path, capsys):
    bd = BDados("Teste")
    bd.load(tmp_path / "nada")
    err = capsys.readouterr().err
    assert "Erro ao abrir arquivo de donos" in err
    assert "Erro ao abrir arquivo de passagens" in err
    assert len(bd.donos) == 0
    assert len(bd.passagens) == 0


def test_calculate_memory_sums_components(data_dir):
    empty = BDados("Vazio")
    empty_total = empty.calculate_memory()
    bd = BDados("Teste")
    bd.load(data_dir)
    total = bd.calculate_memory()
    assert total == bd.total_memoria
    collections_now = (
        bd.donos.memory_usage()
        + bd.veiculos.memory_usage()
        + bd.sensores.memory_usage()
        + bd.passagens.memory_usage()
        + bd.distancias.memory_usage()
    )
    collections_empty = (
        empty.donos.memory_usage()
        + empty.veiculos.memory_usage()
        + empty.sensores.memory_usage()
        + empty.passagens.memory_usage()
        + empty.distancias.memory_usage()
    )
    assert total - empty_total == collections_now - collections_empty
    assert total > empty_total


def test_calculate_memory_prints_each_part(capsys):
    bd = BDados("Teste")
    bd.calculate_memory()
    out = capsys.readouterr().out
    assert f"Memória utilizada pelos donos: {bd.donos.memory_usage()} bytes" in out
    assert f"Memória utilizada pelas passagens: {bd.passagens.memory_usage()} bytes" in out