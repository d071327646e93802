# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# framing.py - Positional headers so each QR in a sequence says where it belongs.
#
# Text style (default, what the phone app understands):
#
#   P<part>/<total>:<chunk bytes>
#
# Binary style: part and total as little-endian uint16, then the chunk bytes.
#
# Either way, a lone QR (total == 1) carries the payload with no header at all.
#
import re, struct
from .constants import FRAMING_TEXT, FRAMING_BINARY
from .exceptions import FramingError

TEXT_HEADER_RX = re.compile(rb'^P([1-9]\d*)/([1-9]\d*):')

BINARY_HEADER_FMT = '<HH'
BINARY_HEADER_LEN = struct.calcsize(BINARY_HEADER_FMT)

# uint16 can't count higher
BINARY_MAX_PARTS = 0xffff

def header_bytes(part, total, framing=FRAMING_TEXT):
    # just the header for a chunk; empty when it's the only one
    assert 1 <= part <= total, (part, total)

    if total == 1:
        return b''

    if framing == FRAMING_TEXT:
        return b'P%d/%d:' % (part, total)
    elif framing == FRAMING_BINARY:
        return struct.pack(BINARY_HEADER_FMT, part, total)

    raise ValueError('unknown framing: %r' % framing)

def make_frame(chunk, framing=FRAMING_TEXT):
    # header + body, ready for the QR encoder
    return header_bytes(chunk.part, chunk.total_parts, framing) + chunk.body

class FrameHeader:
    def __init__(self, part, total, body_offset):
        self.part = part
        self.total = total
        self.body_offset = body_offset

    @classmethod
    def parse(cls, frame, framing=FRAMING_TEXT):
        # Recognise the header at start of one frame. Raises FramingError if none.
        frame = bytes(frame)

        if framing == FRAMING_TEXT:
            m = TEXT_HEADER_RX.match(frame)
            if not m:
                raise FramingError("No P<n>/<m>: header")
            part, total = int(m.group(1)), int(m.group(2))
            offset = m.end()

        elif framing == FRAMING_BINARY:
            if len(frame) < BINARY_HEADER_LEN:
                raise FramingError("Too short for header")
            part, total = struct.unpack_from(BINARY_HEADER_FMT, frame)
            offset = BINARY_HEADER_LEN

        else:
            raise ValueError('unknown framing: %r' % framing)

        if not (1 <= part <= total) or total < 2:
            raise FramingError("Bad position: %d of %d" % (part, total))

        return cls(part, total, offset)

    def __repr__(self):
        return '<FrameHeader: %dof%d>' % (self.part, self.total)

    def __eq__(self, other):
        return (isinstance(other, FrameHeader) and self.part == other.part
                    and self.total == other.total and self.body_offset == other.body_offset)

    def is_compat(self, other):
        # Could these two frames be from the same sequence?
        return self.total == other.total

    def body(self, frame):
        # the chunk bytes, with header removed
        return bytes(memoryview(frame)[self.body_offset:])

# EOF
