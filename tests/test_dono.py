import pytest

from portagens.dono import (
    Dono,
    DonoTable,
    comparar_donos_nome,
    comparar_donos_num_contribuinte,
    format_dono,
    hash_dono,
)


def _asker(*answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return ask


def test_hash_dono_wraps():
    assert hash_dono(1005, 1000) == 5
    assert hash_dono(7, 1000) == 7


def test_insert_and_find():
    table = DonoTable(1000)
    d = Dono(123, "Ana Silva", "4000-001")
    table.insert(d)
    assert table.find(123) == d
    assert table.find(124) is None
    assert len(table) == 1


def test_iteration_follows_buckets_newest_first():
    table = DonoTable(10)
    for num in (5, 3, 13):
        table.insert(Dono(num, f"n{num}", "x"))
    assert [d.num_contribuinte for d in table] == [13, 3, 5]
    assert table.collect() == list(table)


def test_bad_size_rejected():
    with pytest.raises(ValueError):
        DonoTable(0)


def test_save_load_round_trip(tmp_path):
    table = DonoTable(50)
    donos = [
        Dono(1, "Ana Maria Silva", "4000-001"),
        Dono(51, "Bruno Costa", "1000-200"),
        Dono(7, "Carla", "3000-300"),
    ]
    for d in donos:
        table.insert(d)
    path = tmp_path / "donos.txt"
    table.save(path)
    loaded = DonoTable(50)
    assert loaded.load(path) == 3
    key = lambda d: d.num_contribuinte
    assert sorted(loaded, key=key) == sorted(donos, key=key)


def test_load_skips_malformed(tmp_path):
    path = tmp_path / "donos.txt"
    path.write_text(
        "10\tJoão Pires\t4000-100\nsem numero\n11 sozinho\n12\tRui\t2000-002\n",
        encoding="utf-8",
    )
    table = DonoTable()
    assert table.load(path) == 2
    assert table.find(10) == Dono(10, "João Pires", "4000-100")
    assert table.find(11) is None


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DonoTable().load(tmp_path / "none.txt")


def test_comparators():
    a = Dono(1, "Ana", "x")
    b = Dono(2, "Bruno", "y")
    assert comparar_donos_nome(a, b) < 0
    assert comparar_donos_nome(b, a) > 0
    assert comparar_donos_num_contribuinte(a, b) < 0
    assert comparar_donos_num_contribuinte(a, a) == 0


def test_format_dono_fields():
    line = format_dono(Dono(123, "Ana Silva", "4000-001"))
    parts = line.split(" | ")
    assert parts[0].strip() == "123"
    assert parts[1].strip() == "Ana Silva"
    assert parts[2] == "4000-001"


def test_list_alphabetical_order(capsys):
    table = DonoTable()
    table.insert(Dono(2, "Bruno", "b"))
    table.insert(Dono(1, "Zeca", "z"))
    table.insert(Dono(3, "Ana", "a"))
    table.list_alphabetical(_asker("-1"))
    out = capsys.readouterr().out
    assert out.index("Ana") < out.index("Bruno") < out.index("Zeca")


def test_list_by_num_contribuinte_order(capsys):
    table = DonoTable()
    table.insert(Dono(30, "Carlos", "c"))
    table.insert(Dono(10, "Zeca", "z"))
    table.insert(Dono(20, "Ana", "a"))
    table.list_by_num_contribuinte(_asker("-1"))
    out = capsys.readouterr().out
    assert out.index("Zeca") < out.index("Ana") < out.index("Carlos")


def test_register_adds_owner():
    table = DonoTable()
    dono = table.register(_asker("5", "  Carla Dias", "4000-100 extra"))
    assert dono == Dono(5, "Carla Dias", "4000-100")
    assert table.find(5) == dono


def test_register_duplicate_is_refused(capsys):
    table = DonoTable()
    table.insert(Dono(5, "Carla", "x"))
    assert table.register(_asker("5")) is None
    assert len(table) == 1
    assert "Dono já existe" in capsys.readouterr().out


def test_register_rejects_non_number():
    with pytest.raises(ValueError):
        DonoTable().register(_asker("abc"))


def test_memory_usage_grows_with_text():
    empty = DonoTable(100).memory_usage()
    short = DonoTable(100)
    short.insert(Dono(1, "Ab", "x"))
    long = DonoTable(100)
    long.insert(Dono(1, "Abcd", "x"))
    assert short.memory_usage() > empty
    assert long.memory_usage() - short.memory_usage() == 2
    assert DonoTable(200).memory_usage() > empty