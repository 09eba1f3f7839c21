import pytest

from barcoders.model.enums import Charset
from barcoders.sym import code128_tables as tables


class TestCharset:
    @pytest.mark.parametrize(
        "charset,start,switch",
        [
            (Charset.A, 103, 101),
            (Charset.B, 104, 100),
            (Charset.C, 105, 99),
        ],
    )
    def test_code_values(self, charset: Charset, start: int, switch: int) -> None:
        assert charset.start_value == start
        assert charset.switch_value == switch

    def test_tables(self) -> None:
        assert Charset.A.table is tables.CHARS_A
        assert Charset.B.table is tables.CHARS_B
        assert Charset.C.table is tables.CHARS_C

    def test_double_density(self) -> None:
        assert Charset.C.is_double_density
        assert not Charset.A.is_double_density
        assert not Charset.B.is_double_density

    @pytest.mark.parametrize(
        "letter,expected",
        [("a", Charset.A), ("b", Charset.B), ("c", Charset.C)],
    )
    def test_from_directive(self, letter: str, expected: Charset) -> None:
        assert Charset.from_directive(letter) is expected

    @pytest.mark.parametrize("letter", ["A", "d", "\\", "1", ""])
    def test_from_directive_unknown(self, letter: str) -> None:
        assert Charset.from_directive(letter) is None

    def test_str_enum_value(self) -> None:
        assert Charset("B") is Charset.B
        assert Charset.B == "B"

    def test_localized_name(self) -> None:
        assert "A" in Charset.A.localized_name("en")
        assert Charset.C.localized_name() == "Набор C (пары цифр)"
