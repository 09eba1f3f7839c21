"""
model/enums.py

(Краткое RU: Перечисления наборов символов Code128.)

EN: Domain enums for the Code128 encoder. Each charset knows its start
code, its mid-stream switch code and its symbol table; no encoding logic
lives here.

See Also:
    - barcoders/sym/code128_tables.py (static symbol data)
    - barcoders/sym/code128.py (tokenizer and encoder)
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Mapping, Optional

from barcoders.sym import code128_tables as tables

__all__ = ["Charset"]


class Charset(str, Enum):
    A = "A"
    B = "B"
    C = "C"

    @property
    def start_value(self) -> int:
        if self is Charset.A:
            return tables.START_A
        if self is Charset.B:
            return tables.START_B
        if self is Charset.C:
            return tables.START_C
        raise ValueError(f"Unknown charset: {self!r}")

    @property
    def switch_value(self) -> int:
        """Unified value of the code that switches *into* this charset."""
        if self is Charset.A:
            return tables.SWITCH_A
        if self is Charset.B:
            return tables.SWITCH_B
        if self is Charset.C:
            return tables.SWITCH_C
        raise ValueError(f"Unknown charset: {self!r}")

    @property
    def table(self) -> Mapping[str, int]:
        if self is Charset.A:
            return tables.CHARS_A
        if self is Charset.B:
            return tables.CHARS_B
        if self is Charset.C:
            return tables.CHARS_C
        raise ValueError(f"Unknown charset: {self!r}")

    @property
    def is_double_density(self) -> bool:
        return self is Charset.C

    @classmethod
    def from_directive(cls, letter: str) -> Optional["Charset"]:
        """Map an escape directive letter (``a``/``b``/``c``) to a charset."""
        if letter not in ("a", "b", "c"):
            return None
        return cls(letter.upper())

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Charset.A: "Набор A (прописные, управляющие)",
            Charset.B: "Набор B (прописные, строчные)",
            Charset.C: "Набор C (пары цифр)",
        }
        names_en = {
            Charset.A: "Charset A (uppercase, control)",
            Charset.B: "Charset B (upper/lowercase)",
            Charset.C: "Charset C (digit pairs)",
        }
        return (names_ru if lang == "ru" else names_en)[self]
