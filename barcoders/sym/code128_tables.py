"""
Code128 symbol tables.

Static data only: the unified symbol value table (0..106) with the
bar/space module patterns, and per-charset mappings from a symbol to its
unified value. All tables are built once at import and are read-only.

Layout of the unified table:
    0..95    data symbols (meaning depends on charset)
    96..102  function codes (FNC1..FNC4, SHIFT, CODE A/B/C)
    103..105 START A / START B / START C
    106      STOP (13 modules, including the final bar)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Tuple

__all__ = [
    "PATTERNS",
    "CHARS_A",
    "CHARS_B",
    "CHARS_C",
    "SWITCH_A",
    "SWITCH_B",
    "SWITCH_C",
    "START_A",
    "START_B",
    "START_C",
    "STOP",
    "CHECKSUM_MODULUS",
    "SYMBOL_WIDTH",
    "STOP_WIDTH",
    "pattern",
]

# === FUNCTION CODES ===
SWITCH_C: Final[int] = 99
SWITCH_B: Final[int] = 100
SWITCH_A: Final[int] = 101
START_A: Final[int] = 103
START_B: Final[int] = 104
START_C: Final[int] = 105
STOP: Final[int] = 106

CHECKSUM_MODULUS: Final[int] = 103
SYMBOL_WIDTH: Final[int] = 11
STOP_WIDTH: Final[int] = 13

_RAW_PATTERNS: Final[Tuple[str, ...]] = (
    "11011001100", "11001101100", "11001100110", "10010011000", "10010001100",  # 0-4
    "10001001100", "10011001000", "10011000100", "10001100100", "11001001000",  # 5-9
    "11001000100", "11000100100", "10110011100", "10011011100", "10011001110",  # 10-14
    "10111001100", "10011101100", "10011100110", "11001110010", "11001011100",  # 15-19
    "11001001110", "11011100100", "11001110100", "11101101110", "11101001100",  # 20-24
    "11100101100", "11100100110", "11101100100", "11100110100", "11100110010",  # 25-29
    "11011011000", "11011000110", "11000110110", "10100011000", "10001011000",  # 30-34
    "10001000110", "10110001000", "10001101000", "10001100010", "11010001000",  # 35-39
    "11000101000", "11000100010", "10110111000", "10110001110", "10001101110",  # 40-44
    "10111011000", "10111000110", "10001110110", "11101110110", "11010001110",  # 45-49
    "11000101110", "11011101000", "11011100010", "11011101110", "11101011000",  # 50-54
    "11101000110", "11100010110", "11101101000", "11101100010", "11100011010",  # 55-59
    "11101111010", "11001000010", "11110001010", "10100110000", "10100001100",  # 60-64
    "10010110000", "10010000110", "10000101100", "10000100110", "10110010000",  # 65-69
    "10110000100", "10011010000", "10011000010", "10000110100", "10000110010",  # 70-74
    "11000010010", "11001010000", "11110111010", "11000010100", "10001111010",  # 75-79
    "10100111100", "10010111100", "10010011110", "10111100100", "10011110100",  # 80-84
    "10011110010", "11110100100", "11110010100", "11110010010", "11011011110",  # 85-89
    "11011110110", "11110110110", "10101111000", "10100011110", "10001011110",  # 90-94
    "10111101000", "10111100010", "11110101000", "11110100010", "10111011110",  # 95-99
    "10111101110", "11101011110", "11110101110", "11010000100", "11010010000",  # 100-104
    "11010011100",  # 105
    "1100011101011",  # 106 STOP
)

PATTERNS: Final[Tuple[Tuple[int, ...], ...]] = tuple(
    tuple(int(m) for m in raw) for raw in _RAW_PATTERNS
)


def _build_a() -> Mapping[str, int]:
    table = {chr(code): code - 32 for code in range(32, 96)}
    # Control characters NUL..US follow the printable range.
    table.update({chr(code): code + 64 for code in range(0, 32)})
    return MappingProxyType(table)


def _build_b() -> Mapping[str, int]:
    return MappingProxyType({chr(code): code - 32 for code in range(32, 128)})


def _build_c() -> Mapping[str, int]:
    return MappingProxyType({f"{value:02d}": value for value in range(100)})


CHARS_A: Final[Mapping[str, int]] = _build_a()
CHARS_B: Final[Mapping[str, int]] = _build_b()
CHARS_C: Final[Mapping[str, int]] = _build_c()


def pattern(value: int) -> Tuple[int, ...]:
    """Return the module pattern for a unified symbol value (0..106)."""
    if not 0 <= value <= STOP:
        raise IndexError(f"Code128 symbol value out of range: {value}")
    return PATTERNS[value]
