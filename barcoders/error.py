"""
Исключения кодировщика штрихкодов.

Typed exception hierarchy for barcode construction. Every recoverable
failure raised while turning text into a barcode derives from
``BarcodeError`` and carries an ``ErrorKind`` so callers can branch on the
kind without matching on classes.

Иерархия:
    BarcodeError (базовое)
    ├── CharacterError  (ErrorKind.CHARACTER)
    └── LengthError     (ErrorKind.LENGTH)

Example:
    >>> from barcoders.error import BarcodeError, ErrorKind
    >>> try:
    ...     Code128("\\\\c123")
    ... except BarcodeError as e:
    ...     assert e.kind is ErrorKind.CHARACTER
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

__all__: list[str] = [
    "ErrorKind",
    "BarcodeError",
    "CharacterError",
    "LengthError",
]


class ErrorKind(str, Enum):
    """Recoverable error kinds surfaced by barcode constructors."""

    CHARACTER = "character"
    LENGTH = "length"


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class BarcodeError(Exception):
    """
    Базовое исключение для всех ошибок построения штрихкода.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        kind: Вид ошибки (ErrorKind)
        position: Индекс символа во входном тексте (опционально)
        context: Дополнительный контекст для отладки (опционально)
    """

    kind: ErrorKind = ErrorKind.CHARACTER

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]

        if self.position is not None:
            parts.append(f" [position={self.position}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"position={self.position!r}, "
            f"context={self.context!r})"
        )


class CharacterError(BarcodeError):
    """
    Символ (или пара цифр) не кодируется в активном наборе,
    либо escape-директива некорректна.

    Example:
        >>> raise CharacterError("'☺' is not in charset A", position=0)
    """

    kind = ErrorKind.CHARACTER


class LengthError(BarcodeError):
    """Input produced no data symbols (empty or directive-only text)."""

    kind = ErrorKind.LENGTH
