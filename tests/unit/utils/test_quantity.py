import pytest

from bluecanary.utils.quantity import parse_cpu, parse_memory


def test_memory_plain_bytes():
    assert parse_memory("100") == 100
    assert parse_memory("0") == 0
    assert parse_memory(1024) == 1024


def test_memory_binary_suffixes():
    assert parse_memory("1Ki") == 1024
    assert parse_memory("70Mi") == 70 * 1024**2
    assert parse_memory("128Mi") == 128 * 1024**2
    assert parse_memory("2Gi") == 2 * 1024**3
    assert parse_memory("1Ti") == 1024**4


def test_memory_decimal_suffixes():
    assert parse_memory("1k") == 1000
    assert parse_memory("128M") == 128 * 1000**2
    assert parse_memory("1G") == 1000**3


def test_memory_decimal_values_and_whitespace():
    assert parse_memory("1.5Gi") == int(1.5 * 1024**3)
    assert parse_memory(" 64Mi ") == 64 * 1024**2


def test_memory_invalid_format():
    with pytest.raises(ValueError, match="Invalid memory quantity format"):
        parse_memory("abc")
    with pytest.raises(ValueError, match="Invalid memory quantity format"):
        parse_memory("1.2.3Mi")
    with pytest.raises(ValueError, match="Invalid memory quantity format"):
        parse_memory("")


def test_memory_unknown_unit():
    with pytest.raises(ValueError, match="Unknown memory unit"):
        parse_memory("100x")
    with pytest.raises(ValueError, match="Unknown memory unit"):
        parse_memory("100mb")


def test_cpu_millicores():
    assert parse_cpu("50m") == pytest.approx(0.05)
    assert parse_cpu("70m") == pytest.approx(0.07)
    assert parse_cpu("1500m") == pytest.approx(1.5)


def test_cpu_cores():
    assert parse_cpu("2") == 2.0
    assert parse_cpu("0.5") == 0.5
    assert parse_cpu(1) == 1.0


def test_cpu_invalid():
    with pytest.raises(ValueError, match="Invalid cpu quantity format"):
        parse_cpu("fast")
    with pytest.raises(ValueError, match="Unknown cpu unit"):
        parse_cpu("2Gi")
