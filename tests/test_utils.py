import pytest

from tourism.utils import generate_id


def test_generate_id_examples():
    assert generate_id("S", 1, 5) == "S0001"
    assert generate_id("VIS", 42, 8) == "VIS00042"
    assert generate_id("VIS", 7, 8) == "VIS00007"
    assert generate_id("U", 12, 5) == "U0012"


@pytest.mark.parametrize("prefix,value,size", [
    ("V", 1, 5),
    ("V", 9999, 5),
    ("VIS", 123, 8),
    ("VIS", 99999, 8),
])
def test_generate_id_has_fixed_width(prefix, value, size):
    result = generate_id(prefix, value, size)
    assert len(result) == size
    assert result.startswith(prefix)
    assert result.endswith(str(value))


def test_generate_id_overflow_is_not_truncated():
    assert generate_id("S", 12345, 5) == "S12345"
    assert generate_id("VIS", 123456, 8) == "VIS123456"
