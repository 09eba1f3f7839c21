import pytest

from barcoders.sym.helpers import collapse_bits, join_slices


def test_join_slices() -> None:
    assert join_slices([(1, 0), [1], ()]) == [1, 0, 1]


def test_join_slices_empty() -> None:
    assert join_slices([]) == []


def test_collapse_bits() -> None:
    assert collapse_bits([1, 1, 0, 1]) == "1101"


def test_collapse_bits_rejects_other_values() -> None:
    with pytest.raises(ValueError, match="0 or 1"):
        collapse_bits([1, 2])
