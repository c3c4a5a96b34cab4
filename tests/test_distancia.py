import pytest

from portagens.distancia import Distancia, DistanciaList


def test_find_is_symmetric():
    dl = DistanciaList()
    dl.insert(Distancia(1, 2, 5.5))
    assert dl.find(1, 2) == 5.5
    assert dl.find(2, 1) == 5.5


def test_find_missing_returns_none():
    dl = DistanciaList()
    dl.insert(Distancia(1, 2, 5.5))
    assert dl.find(1, 3) is None


def test_newest_first():
    dl = DistanciaList()
    a = Distancia(1, 2, 1.0)
    b = Distancia(3, 4, 2.0)
    dl.insert(a)
    dl.insert(b)
    assert list(dl) == [b, a]
    assert len(dl) == 2


def test_duplicate_pair_returns_latest():
    dl = DistanciaList()
    dl.insert(Distancia(1, 2, 1.0))
    dl.insert(Distancia(2, 1, 7.25))
    assert dl.find(1, 2) == 7.25


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "distancias.txt"
    path.write_text("1\t2\t3.5\nbad line\n1234\n3\t4\t10\n", encoding="utf-8")
    dl = DistanciaList()
    assert dl.load(path) == 2
    assert len(dl) == 2
    assert dl.find(3, 4) == 10.0
    assert dl.find(2, 1) == 3.5


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DistanciaList().load(tmp_path / "nope.txt")


def test_memory_usage_scales_with_size():
    dl = DistanciaList()
    assert dl.memory_usage() == 0
    dl.insert(Distancia(1, 2, 1.0))
    one = dl.memory_usage()
    dl.insert(Distancia(3, 4, 2.0))
    assert one > 0
    assert dl.memory_usage() == 2 * one