"""
Encoder for Code128 barcodes.

Code128 is a high-density symbology that encodes alphanumeric data and
control characters through three interchangeable character sets, and
digits at double density through set C.

The input text selects character sets inline:

    \\a  switch to character-set A
    \\b  switch to character-set B
    \\c  switch to character-set C
    \\\\  literal back-slash in the active set

Examples:
    >>> Code128("\\\\bHE1234A*1")          # set B throughout
    >>> Code128("\\\\aHE@$A\\\\c123456")   # starts in A, digits in C
    >>> Code128("\\\\a1234\\\\\\\\45AA")    # back-slash as data

Public API:
    - Unit: charset-tagged symbol (frozen dataclass)
    - parse: tokenizer, text -> (start charset, units)
    - checksum: modulo-103 check value
    - encode_units: full module stream for a unit sequence
    - Code128: immutable barcode built from text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from barcoders.error import CharacterError, LengthError
from barcoders.model.enums import Charset
from barcoders.sym import code128_tables as tables
from barcoders.sym.helpers import join_slices

logger = logging.getLogger(__name__)

__all__ = [
    "Unit",
    "Code128",
    "parse",
    "symbol_values",
    "checksum",
    "encode_units",
    "charset_from_config",
]

_ESCAPE = "\\"
_DIGITS = frozenset("0123456789")
_TERMINATION = (0,)
_START_CHARSETS = {cs.start_value: cs for cs in Charset}


@dataclass(frozen=True)
class Unit:
    """
    A single symbol tagged with its character set.

    ``symbol`` is one character for sets A/B and a two-digit string for
    set C. Construction fails with CharacterError when the symbol is not
    part of the charset table.
    """

    charset: Charset
    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.charset, Charset):
            raise TypeError(f"charset must be Charset enum, got {type(self.charset)!r}")
        if self.symbol not in self.charset.table:
            raise CharacterError(
                f"{self.symbol!r} is not encodable in charset {self.charset.value}",
                context={"charset": self.charset.value},
            )

    @property
    def value(self) -> int:
        """Unified Code128 symbol value (0..106)."""
        return self.charset.table[self.symbol]

    @classmethod
    def a(cls, symbol: str) -> "Unit":
        return cls(Charset.A, symbol)

    @classmethod
    def b(cls, symbol: str) -> "Unit":
        return cls(Charset.B, symbol)

    @classmethod
    def c(cls, symbol: str) -> "Unit":
        return cls(Charset.C, symbol)

    def __str__(self) -> str:
        return f"{self.charset.value}({self.symbol!r})"


def charset_from_config(config: Mapping[str, Any]) -> Charset:
    """Resolve ``default_charset`` from a config mapping, falling back to A."""
    raw = config.get("default_charset", Charset.A.value)
    try:
        return Charset(str(raw).upper())
    except ValueError:
        logger.warning("Unknown default_charset %r in config; using A", raw)
        return Charset.A


def _unit_at(charset: Charset, symbol: str, position: int) -> Unit:
    try:
        return Unit(charset, symbol)
    except CharacterError as e:
        raise CharacterError(e.message, position=position, context=e.context) from None


# =============================================================================
# TOKENIZER
# =============================================================================


def parse(
    chars: Union[str, Iterable[str]],
    default_charset: Charset = Charset.A,
) -> Tuple[Charset, Tuple[Unit, ...]]:
    """
    Tokenize barcode text into charset-tagged units.

    Args:
        chars: Barcode text (string or iterable of characters).
        default_charset: Active charset until the first directive.

    Returns:
        Tuple ``(start_charset, units)``; ``start_charset`` is the charset
        of the first unit.

    Raises:
        CharacterError: unencodable character, odd digit run in set C,
            dangling or unknown escape directive.
        LengthError: the text yields no units.
    """
    text = chars if isinstance(chars, str) else "".join(chars)
    active = default_charset
    units: List[Unit] = []
    i = 0
    end = len(text)

    while i < end:
        ch = text[i]

        if ch == _ESCAPE:
            if i + 1 >= end:
                raise CharacterError("Dangling escape at end of input", position=i)
            directive = text[i + 1]
            if directive == _ESCAPE:
                units.append(_unit_at(active, _ESCAPE, i))
            else:
                target = Charset.from_directive(directive)
                if target is None:
                    raise CharacterError(
                        f"Unknown escape directive {_ESCAPE + directive!r}",
                        position=i,
                    )
                active = target
            i += 2
            continue

        if active.is_double_density:
            if ch not in _DIGITS:
                raise CharacterError(
                    f"{ch!r} is not a digit (charset C)",
                    position=i,
                    context={"charset": active.value},
                )
            if i + 1 >= end or text[i + 1] not in _DIGITS:
                raise CharacterError(
                    "Charset C requires an even number of digits",
                    position=i,
                    context={"charset": active.value},
                )
            units.append(_unit_at(active, text[i : i + 2], i))
            i += 2
        elif active is Charset.A or active is Charset.B:
            units.append(_unit_at(active, ch, i))
            i += 1
        else:
            raise ValueError(f"Unknown charset: {active!r}")

    if not units:
        raise LengthError("Barcode text produced no data symbols")

    logger.debug("Tokenized %d chars into %d units", end, len(units))
    return units[0].charset, tuple(units)


# =============================================================================
# CHECKSUM
# =============================================================================


def symbol_values(start_charset: Charset, units: Sequence[Unit]) -> List[int]:
    """
    Unified values of everything between START and the checksum.

    A switch code is inserted before each unit whose charset differs
    from the one currently active.
    """
    values: List[int] = []
    active = start_charset
    for unit in units:
        if unit.charset is not active:
            values.append(unit.charset.switch_value)
            active = unit.charset
        values.append(unit.value)
    return values


def checksum(units: Sequence[Unit], start_value: int) -> int:
    """
    Modulo-103 check value.

    ``start_value + sum(value_i * i)`` over the symbols that follow the
    start code (switch codes included), reduced modulo 103.

    Raises:
        ValueError: empty unit sequence or unknown start value.
    """
    if not units:
        raise ValueError("Cannot compute checksum of an empty unit sequence")
    try:
        start_charset = _START_CHARSETS[start_value]
    except KeyError:
        raise ValueError(f"Not a Code128 start value: {start_value}") from None

    total = start_value
    for position, value in enumerate(symbol_values(start_charset, units), start=1):
        total += value * position
    return total % tables.CHECKSUM_MODULUS


# =============================================================================
# SYMBOL ENCODER
# =============================================================================


def encode_units(
    start_charset: Charset,
    units: Sequence[Unit],
    checksum_value: int,
) -> List[int]:
    """
    Concatenate START, data (with switch codes), checksum, STOP and the
    termination module into one module list.
    """
    slices: List[Sequence[int]] = [tables.pattern(start_charset.start_value)]
    slices.extend(tables.pattern(v) for v in symbol_values(start_charset, units))
    slices.append(tables.pattern(checksum_value))
    slices.append(tables.pattern(tables.STOP))
    slices.append(_TERMINATION)
    return join_slices(slices)


# =============================================================================
# BARCODE
# =============================================================================


class Code128:
    """
    The Code128 barcode type.

    Built once from text and never mutated afterwards; all accessors are
    pure reads.

    Args:
        data: Barcode text with optional charset directives.
        default_charset: Charset used before the first directive.

    Raises:
        CharacterError, LengthError: see ``parse``.
    """

    __slots__ = ("_start", "_units", "_checksum")

    def __init__(self, data: str, default_charset: Charset = Charset.A) -> None:
        if not isinstance(data, str):
            raise TypeError(f"data must be str, got {type(data)!r}")
        start, units = parse(data, default_charset)
        self._start: Charset = start
        self._units: Tuple[Unit, ...] = units
        self._checksum: Optional[int] = checksum(units, start.start_value)

    @classmethod
    def from_config(
        cls, data: str, config: Optional[Mapping[str, Any]] = None
    ) -> "Code128":
        """Build a barcode using ``default_charset`` from the package config."""
        if config is None:
            from barcoders import load_config

            config = load_config()
        return cls(data, charset_from_config(config))

    @property
    def start_charset(self) -> Charset:
        return self._start

    def raw_data(self) -> Tuple[Unit, ...]:
        """Return the tokenized data (no start, checksum or stop)."""
        return self._units

    def checksum_unit(self) -> Optional[int]:
        """Return the modulo-103 check value (0..102)."""
        return self._checksum

    def switch_count(self) -> int:
        return len(symbol_values(self._start, self._units)) - len(self._units)

    def encode(self) -> List[int]:
        """
        Encode the barcode.

        Returns:
            List of modules (0 = space, 1 = bar): start, data, switches,
            checksum, stop and one termination module.
        """
        check = self._checksum
        if check is None:
            raise ValueError("Cannot compute checksum")
        encoded = encode_units(self._start, self._units, check)
        logger.debug(
            "Encoded %d units (start=%s, checksum=%d) into %d modules",
            len(self._units),
            self._start.value,
            check,
            len(encoded),
        )
        return encoded

    def __repr__(self) -> str:
        return f"Code128(start={self._start.value}, units={len(self._units)})"
