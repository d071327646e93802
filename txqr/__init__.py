# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# txqr - split signed transactions into a sequence of QR codes for terminal display
#
from .qrs import QRBatch, generate_qrs, generate_qrs_from_hex
from .symbol import QRSymbol

__version__ = '1.0.0'

__all__ = ['QRBatch', 'QRSymbol', 'generate_qrs', 'generate_qrs_from_hex']

# EOF
