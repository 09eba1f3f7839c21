import pytest

from barcoders.sym import code128_tables as tables


class TestPatterns:
    def test_table_size(self) -> None:
        assert len(tables.PATTERNS) == 107

    def test_symbol_widths(self) -> None:
        for value in range(tables.STOP):
            assert len(tables.pattern(value)) == tables.SYMBOL_WIDTH
        assert len(tables.pattern(tables.STOP)) == tables.STOP_WIDTH

    def test_patterns_start_with_bar_and_end_with_space(self) -> None:
        for value in range(tables.STOP):
            pat = tables.pattern(value)
            assert pat[0] == 1 and pat[-1] == 0

    def test_bar_module_count_is_even(self) -> None:
        for value in range(tables.STOP):
            assert sum(tables.pattern(value)) % 2 == 0

    def test_patterns_are_unique(self) -> None:
        assert len(set(tables.PATTERNS)) == len(tables.PATTERNS)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "11011001100"),
            (tables.START_A, "11010000100"),
            (tables.START_B, "11010010000"),
            (tables.START_C, "11010011100"),
            (tables.SWITCH_C, "10111011110"),
            (tables.STOP, "1100011101011"),
        ],
    )
    def test_known_patterns(self, value: int, expected: str) -> None:
        assert "".join(str(m) for m in tables.pattern(value)) == expected

    @pytest.mark.parametrize("value", [-1, 107, 1000])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(IndexError):
            tables.pattern(value)


class TestCharsetTables:
    def test_sizes(self) -> None:
        assert len(tables.CHARS_A) == 96
        assert len(tables.CHARS_B) == 96
        assert len(tables.CHARS_C) == 100

    def test_set_a_layout(self) -> None:
        assert tables.CHARS_A[" "] == 0
        assert tables.CHARS_A["_"] == 63
        assert tables.CHARS_A["\x00"] == 64
        assert "a" not in tables.CHARS_A

    def test_set_b_layout(self) -> None:
        assert tables.CHARS_B[" "] == 0
        assert tables.CHARS_B["~"] == 94
        assert tables.CHARS_B["\x7f"] == 95
        assert "\x00" not in tables.CHARS_B

    def test_set_c_layout(self) -> None:
        assert tables.CHARS_C["00"] == 0
        assert tables.CHARS_C["99"] == 99
        assert "7" not in tables.CHARS_C

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            tables.CHARS_A["a"] = 1  # type: ignore[index]
