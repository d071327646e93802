# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
import pytest, random
from helpers import prandom, check_numbering
from txqr import generate_qrs

# lock down randomness
random.seed(42)

# A signed Base mainnet transfer, as given to us by the signing app (hex, with 0x)
SIGNED_TXN_HEX = '0x02f87282210580840a1e4b4b840a1e4b4b825208948c47b9fadf822681c68f34fd9b0d3063569245a18301e07880c080a0f827b2181487b88bcef666d5729a8b9fcb7ac7cfd94dd4c4e9e9dbcfc9be154da05981479fb853e3779b176e12cd6feb4424159679c6bf8f4f468f92f700d9722d'

@pytest.fixture
def signed_txn_hex():
    return SIGNED_TXN_HEX

@pytest.fixture
def payload():
    # make some bytes, randomly, but not: deterministic
    def doit(count, fill=None):
        if fill is not None:
            return bytes([fill]) * count
        return prandom(count)

    return doit

@pytest.fixture
def split_payload():
    # run the pipeline, and check invariants that must always hold
    def doit(data, **kws):
        batch = generate_qrs(data, **kws)

        if batch.problem:
            assert len(batch) == 0
            assert not batch.ok
        else:
            check_numbering(batch)

        return batch

    return doit

@pytest.fixture
def tiny_grid():
    # 3x3, not a real QR; small enough to draw by hand
    return [[True, False, True],
            [False, True, False],
            [True, True, False]]

# EOF
