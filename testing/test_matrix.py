# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# QR encoder wrapper, and what happens when data won't fit.
#
import pytest, logging
from txqr.matrix import encode, make_symbol, ecc_code
from txqr.exceptions import EncodeError

def finder_ok(modules, x0, y0):
    # 7x7 finder pattern: dark ring, light ring, dark 3x3 center
    for y in range(7):
        for x in range(7):
            ring = max(abs(x-3), abs(y-3))
            expect = (ring != 2)
            assert modules[y0+y][x0+x] == expect, (x0+x, y0+y)
    return True

def test_hello():
    modules, size, version = encode(b'Hello')
    assert version == 1
    assert size == 21
    assert len(modules) == size
    assert all(len(row) == size for row in modules)
    assert all(isinstance(m, bool) for row in modules for m in row)

    # no quiet zone: finder patterns sit right in the corners
    assert finder_ok(modules, 0, 0)
    assert finder_ok(modules, size-7, 0)
    assert finder_ok(modules, 0, size-7)

def test_deterministic(payload):
    data = payload(80)
    assert encode(data, 'Q') == encode(data, 'Q')

def test_ecc_level_matters(payload):
    data = payload(100)
    _, size_l, ver_l = encode(data, 'L')
    _, size_h, ver_h = encode(data, 'H')
    assert ver_l < ver_h
    assert size_l < size_h
    assert size_l == 17 + (4 * ver_l)

def test_alnum_still_bytes():
    # would fit in v1 as alnum at Q, but we always use binary mode
    _, _, version = encode(b'P1/2:' + b'B'*10, 'Q')
    assert version > 1

def test_too_big():
    with pytest.raises(EncodeError) as ee:
        encode(b'x' * 3000, 'L')

    assert ee.value.data_len == 3000
    assert ee.value.ecc == 'L'
    assert '3000 bytes' in str(ee.value)

@pytest.mark.parametrize('ecc,v40_cap', [('L', 2953), ('M', 2331), ('Q', 1663), ('H', 1273)])
def test_overflow_every_level(ecc, v40_cap):
    # one byte past what a version 40 QR holds, at each ECC level
    with pytest.raises(EncodeError):
        encode(b'\xa5' * (v40_cap + 1), ecc)

    sym = make_symbol(b'\xa5' * (v40_cap + 1), 1, 1, ecc)
    assert sym.is_blank
    assert sym.ecc == ecc

@pytest.mark.parametrize('ecc', ['', 'q', 'X', None, 1])
def test_bad_ecc(ecc):
    with pytest.raises(ValueError):
        ecc_code(ecc)
    with pytest.raises(ValueError):
        encode(b'abc', ecc)

def test_make_symbol():
    sym = make_symbol(b'P2/3:abc', 2, 3, 'M')
    assert (sym.part, sym.total_parts) == (2, 3)
    assert sym.size == 21
    assert sym.version == 1
    assert sym.ecc == 'M'
    assert sym.frame == b'P2/3:abc'
    assert not sym.is_blank

def test_make_symbol_fails_softly(caplog):
    frame = b'P4/7:' + b'z' * 2000
    with caplog.at_level(logging.WARNING, logger='txqr.matrix'):
        sym = make_symbol(frame, 4, 7, 'Q')

    assert sym.is_blank
    assert sym.size == 0
    assert sym.modules == ()
    assert (sym.part, sym.total_parts) == (4, 7)
    assert sym.frame == frame
    assert sym.version == 0

    assert 'part 4 of 7 not encodable' in caplog.text

# EOF
