# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Hex text <=> bytes
#
import pytest
from txqr.hexutil import hex_to_bytes, b2a_hex
from txqr.exceptions import BadHexError

@pytest.mark.parametrize('txt,expect', [
    ('', b''),
    ('0x', b''),
    ('00ff', b'\x00\xff'),
    ('0x00ff', b'\x00\xff'),
    ('0X00FF', b'\x00\xff'),
    ('DeadBeef', b'\xde\xad\xbe\xef'),
])
def test_good_hex(txt, expect):
    assert hex_to_bytes(txt) == expect

@pytest.mark.parametrize('txt', [
    'abc',          # odd
    '0x1',
    '0xzz',
    'g0',
    '00 11',        # inner space
    '0x0x00',
    '0o17',
    '  0xabcd',     # surrounding whitespace is the caller's problem
    'abcd\n',
])
def test_bad_hex(txt):
    with pytest.raises(BadHexError):
        hex_to_bytes(txt)

def test_bad_hex_is_valueerror():
    # callers catching ValueError still see it
    with pytest.raises(ValueError):
        hex_to_bytes('123')

def test_not_str():
    with pytest.raises(BadHexError):
        hex_to_bytes(b'00ff')

def test_b2a(signed_txn_hex):
    raw = hex_to_bytes(signed_txn_hex)
    assert len(raw) == 114
    assert '0x' + b2a_hex(raw) == signed_txn_hex
    assert b2a_hex(b'\xAB') == 'ab'

# EOF
