# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# hexutil.py - Convert between the hex text we are given and the raw bytes we encode.
#
from binascii import a2b_hex, b2a_hex as _b2a_hex
from .exceptions import BadHexError

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')

def hex_to_bytes(txt):
    # Hex text (optional 0x prefix) to bytes.
    # - odd length or non-hex chars is always an error, never padded or truncated
    if not isinstance(txt, str):
        raise BadHexError("expected str, got %s" % type(txt).__name__)

    if txt[0:2] in ('0x', '0X'):
        txt = txt[2:]

    bad = [ch for ch in txt if ch not in HEX_DIGITS]
    if bad:
        raise BadHexError("not a hex digit: %r" % bad[0])

    if len(txt) % 2:
        raise BadHexError("odd number of hex digits (%d)" % len(txt))

    return a2b_hex(txt)

def b2a_hex(data):
    # bytes to lower-case hex, as str
    return str(_b2a_hex(data), 'ascii')

# EOF
