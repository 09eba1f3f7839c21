"""
sym

Symbology encoders.

Modules:
    - code128_tables: static Code128 symbol data
    - code128: tokenizer, checksum and encoder for Code128
    - helpers: module-slice utilities

Submodules are imported explicitly (``from barcoders.sym.code128 import
Code128``); this package does not re-export them so the tables can be
loaded by ``barcoders.model`` without pulling in the encoder.
"""
