# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# stuff I need sometimes
import random
from txqr.framing import FrameHeader

def prandom(count):
    # make some bytes, randomly, but not: deterministic
    return bytes(random.randint(0, 255) for i in range(count))

def check_numbering(batch):
    # parts are exactly 1..N, once each, and all agree on N
    n = len(batch)
    assert n >= 1
    assert sorted(s.part for s in batch) == list(range(1, n+1))
    assert all(s.total_parts == n for s in batch)
    assert [s.part for s in batch] == list(range(1, n+1)), 'not in order'

def join_frames(frames, framing='text'):
    # What the phone does: put frames (any order) back together.
    # - lone frame has no header
    # - must have every part, else fail
    frames = list(frames)
    assert frames

    if len(frames) == 1:
        return frames[0]

    parts = {}
    total = None
    for fr in frames:
        hdr = FrameHeader.parse(fr, framing)
        if total is None:
            total = hdr.total
        assert hdr.total == total, 'mixed sequences'
        parts[hdr.part] = hdr.body(fr)

    missing = set(range(1, total+1)) - set(parts)
    if missing:
        raise ValueError('missing parts: %r' % sorted(missing))

    return b''.join(parts[i] for i in range(1, total+1))

# EOF
