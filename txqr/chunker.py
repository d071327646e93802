# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# chunker.py - Decide how many QR's a payload needs, and slice it up.
#
import logging
from collections import namedtuple
from math import ceil

from .constants import (DEFAULT_CHUNK_LEN, MIN_CHUNK_LEN, MAX_TOTAL_SIZE, MAX_PARTS,
                        PROBLEM_EMPTY, PROBLEM_TOO_BIG, PROBLEM_TOO_MANY_PARTS)

logger = logging.getLogger(__name__)

# One slice of the payload, and where it goes in the sequence (1-based)
Chunk = namedtuple('Chunk', 'part total_parts body')

def clamp_chunk_len(max_chunk_len):
    # never go below the minimum, even if asked
    if max_chunk_len is None:
        return DEFAULT_CHUNK_LEN
    return max(int(max_chunk_len), MIN_CHUNK_LEN)

def why_not_encodable(data_len, max_chunk_len=DEFAULT_CHUNK_LEN,
                      max_total=MAX_TOTAL_SIZE, max_parts=MAX_PARTS):
    # Returns reason text if a payload of this size cannot be split, else None.
    if data_len <= 0:
        return PROBLEM_EMPTY

    if data_len > max_total:
        return PROBLEM_TOO_BIG

    if ceil(data_len / clamp_chunk_len(max_chunk_len)) > max_parts:
        return PROBLEM_TOO_MANY_PARTS

    return None

def num_parts_needed(data_len, max_chunk_len=DEFAULT_CHUNK_LEN,
                     max_total=MAX_TOTAL_SIZE, max_parts=MAX_PARTS):
    # Number of QR's needed to hold data_len bytes; zero if we won't do it.
    if why_not_encodable(data_len, max_chunk_len, max_total, max_parts):
        return 0

    cap = clamp_chunk_len(max_chunk_len)
    if data_len <= cap:
        # fits in one, no header needed
        return 1

    return ceil(data_len / cap)

def plan_chunks(data, max_chunk_len=DEFAULT_CHUNK_LEN,
                max_total=MAX_TOTAL_SIZE, max_parts=MAX_PARTS):
    # Split data into chunks.
    # - returns (list of Chunk, problem) .. problem is None if we could do it
    # - all but last chunk are exactly max_chunk_len bytes; final one is the runt
    data = bytes(data)
    cap = clamp_chunk_len(max_chunk_len)

    problem = why_not_encodable(len(data), cap, max_total, max_parts)
    if problem:
        logger.warning("Cannot split %d byte payload into QR's: %s", len(data), problem)
        return [], problem

    num_parts = num_parts_needed(len(data), cap, max_total, max_parts)
    assert num_parts >= 1

    if num_parts == 1:
        return [Chunk(1, 1, data)], None

    chunks = []
    for i in range(num_parts):
        body = data[i*cap:(i+1)*cap]
        assert body
        chunks.append(Chunk(i+1, num_parts, body))

    assert sum(len(c.body) for c in chunks) == len(data)

    logger.debug("Split %d bytes into %d chunks of <= %d bytes", len(data), num_parts, cap)

    return chunks, None

# EOF
