"""
Модульные тесты для barcoders/error.py
"""

import pytest

from barcoders.error import BarcodeError, CharacterError, ErrorKind, LengthError


class TestHierarchy:
    def test_subclasses(self) -> None:
        assert issubclass(CharacterError, BarcodeError)
        assert issubclass(LengthError, BarcodeError)
        assert issubclass(BarcodeError, Exception)

    def test_kinds(self) -> None:
        assert CharacterError("x").kind is ErrorKind.CHARACTER
        assert LengthError("x").kind is ErrorKind.LENGTH

    def test_catch_by_base(self) -> None:
        with pytest.raises(BarcodeError):
            raise LengthError("empty")


class TestFormatting:
    def test_str_plain(self) -> None:
        assert str(LengthError("empty")) == "LengthError: empty"

    def test_str_with_position_and_context(self) -> None:
        err = CharacterError("bad char", position=3, context={"charset": "C"})
        assert str(err) == "CharacterError: bad char [position=3] (charset='C')"

    def test_repr(self) -> None:
        err = CharacterError("bad", position=1)
        assert repr(err) == "CharacterError(message='bad', position=1, context={})"

    def test_attributes(self) -> None:
        err = CharacterError("bad")
        assert err.message == "bad"
        assert err.position is None
        assert err.context == {}
        assert err.args == ("bad",)
