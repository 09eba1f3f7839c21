"""
model

Доменные перечисления кодировщика (наборы символов Code128).

Public API:
    - Charset: набор символов A, B или C
"""

from barcoders.model.enums import Charset

__all__ = ["Charset"]
