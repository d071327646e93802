# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# qrs.py - Turn a signed transaction into the sequence of QR codes to show.
#
# Payload bytes => chunks => framed chunks => QRSymbol each.
#
import logging
from concurrent.futures import ThreadPoolExecutor

from .constants import (DEFAULT_CHUNK_LEN, DEFAULT_ECC, MAX_TOTAL_SIZE, MAX_PARTS,
                        FRAMING_TEXT, FRAMING_BINARY, FRAMINGS)
from .chunker import plan_chunks
from .framing import make_frame, BINARY_MAX_PARTS
from .hexutil import hex_to_bytes
from .matrix import ecc_code, make_symbol

logger = logging.getLogger(__name__)

class QRBatch:
    # Result of one split: the QRSymbols in part order, or a problem.
    # - problem is None when we could split it; else one of PROBLEM_* text and no symbols
    # - some symbols may still be blank (size=0) if encoder failed on them

    def __init__(self, symbols=(), problem=None, data_len=0):
        self.symbols = list(symbols)
        self.problem = problem
        self.data_len = data_len

        assert not (problem and self.symbols)

    def __len__(self):
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __getitem__(self, idx):
        return self.symbols[idx]

    def __repr__(self):
        if self.problem:
            return '<QRBatch: %d bytes, %s>' % (self.data_len, self.problem)
        return '<QRBatch: %d bytes in %d parts>' % (self.data_len, len(self.symbols))

    @property
    def total_parts(self):
        return len(self.symbols)

    @property
    def failed_parts(self):
        # part numbers that could not be encoded
        return [s.part for s in self.symbols if s.is_blank]

    @property
    def ok(self):
        # everything encoded, user can scan the lot
        return bool(self.symbols) and not self.problem and not self.failed_parts

def generate_qrs(data, max_chunk_len=DEFAULT_CHUNK_LEN, ecc=DEFAULT_ECC,
                 framing=FRAMING_TEXT, workers=None,
                 max_total=MAX_TOTAL_SIZE, max_parts=MAX_PARTS):
    # Split data into one or more QR's.
    # - single QR holds data as-is, no header
    # - workers > 1 will encode the parts in parallel; order of result unchanged
    ecc_code(ecc)
    if framing not in FRAMINGS:
        raise ValueError('unknown framing: %r' % framing)

    if framing == FRAMING_BINARY:
        # header can't number past this
        max_parts = min(max_parts, BINARY_MAX_PARTS)

    data = bytes(data)
    chunks, problem = plan_chunks(data, max_chunk_len, max_total=max_total, max_parts=max_parts)
    if problem:
        return QRBatch([], problem, len(data))

    jobs = [(make_frame(c, framing), c.part, c.total_parts, ecc) for c in chunks]

    if workers and workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            symbols = list(pool.map(lambda j: make_symbol(*j), jobs))
    else:
        symbols = [make_symbol(*j) for j in jobs]

    rv = QRBatch(symbols, None, len(data))

    logger.info("Generated %d QR code parts from %d bytes (ECC=%s)", len(rv), len(data), ecc)
    if rv.failed_parts:
        logger.warning("QR parts could not be encoded: %r", rv.failed_parts)

    return rv

def generate_qrs_from_hex(txt, **kws):
    # Same, but from hex text of a transaction. Bad hex raises BadHexError.
    return generate_qrs(hex_to_bytes(txt), **kws)

# EOF
