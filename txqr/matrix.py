# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# matrix.py - Wrap the QR encoder library: bytes in, module grid out.
#
import logging
from qrcode import QRCode
from qrcode.constants import ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q, ERROR_CORRECT_H
from qrcode.exceptions import DataOverflowError
from qrcode.util import QRData, MODE_8BIT_BYTE

from .constants import DEFAULT_ECC
from .exceptions import EncodeError
from .symbol import QRSymbol

logger = logging.getLogger(__name__)

ECC_CODES = dict(L=ERROR_CORRECT_L, M=ERROR_CORRECT_M, Q=ERROR_CORRECT_Q, H=ERROR_CORRECT_H)

def ecc_code(ecc):
    # our letter => library constant
    try:
        return ECC_CODES[ecc]
    except KeyError:
        raise ValueError('unknown ECC level: %r (want one of L M Q H)' % (ecc,))

def encode(data, ecc=DEFAULT_ECC):
    # Make a QR holding exactly these bytes.
    # - always 'binary' mode, even if data happens to be alnum
    # - smallest version (1..40) that fits is picked by library
    # - no quiet zone in the result; the renderers add their own
    # - returns (modules, size, version); raises EncodeError if too big for v40
    data = bytes(data)

    qr = QRCode(version=None, error_correction=ecc_code(ecc), box_size=1, border=0)
    qr.add_data(QRData(data, mode=MODE_8BIT_BYTE))

    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError):
        # newer qrcode trips its own version check (v41) before DataOverflowError
        raise EncodeError(len(data), ecc)

    modules = [[bool(m) for m in row] for row in qr.modules]

    return modules, qr.modules_count, qr.version

def make_symbol(frame, part=1, total_parts=1, ecc=DEFAULT_ECC):
    # Encode one frame into a QRSymbol. Does not raise when frame won't fit;
    # gives a blank placeholder at the same position instead.
    try:
        modules, size, version = encode(frame, ecc)
    except EncodeError as exc:
        logger.warning("QR part %d of %d not encodable: %s", part, total_parts, exc)
        return QRSymbol.failed(part, total_parts, frame=frame, ecc=ecc)

    assert len(modules) == size

    return QRSymbol(modules, part, total_parts, frame=frame, version=version, ecc=ecc)

# EOF
