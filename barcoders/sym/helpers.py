"""Small helpers shared by symbology encoders."""

from __future__ import annotations

from typing import Iterable, List, Sequence

__all__ = ["join_slices", "collapse_bits"]


def join_slices(slices: Iterable[Sequence[int]]) -> List[int]:
    """Concatenate module slices into one flat list."""
    joined: List[int] = []
    for part in slices:
        joined.extend(part)
    return joined


def collapse_bits(bits: Iterable[int]) -> str:
    """
    Render a module sequence as a string of ``0``/``1`` characters.

    Example:
        >>> collapse_bits([1, 1, 0, 1])
        '1101'
    """
    out = []
    for bit in bits:
        if bit not in (0, 1):
            raise ValueError(f"Module value must be 0 or 1, got {bit!r}")
        out.append("1" if bit else "0")
    return "".join(out)
