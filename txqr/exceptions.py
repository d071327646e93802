# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# exceptions.py - Exceptions defined by us.
#

# Hex text of a transaction is malformed; always a bug in the caller
class BadHexError(ValueError):
    pass

# QR encoder could not fit the data into any version at the requested ECC level
class EncodeError(ValueError):
    def __init__(self, data_len, ecc):
        super().__init__('%d bytes will not fit in a QR at ECC level %s' % (data_len, ecc))
        self.data_len = data_len
        self.ecc = ecc

# Frame doesn't start with a positional header we understand
class FramingError(ValueError):
    pass

# EOF
