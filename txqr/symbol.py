# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# symbol.py - One QR code: its module grid, plus where it sits in a multi-part sequence.
#
import threading
from .constants import DEFAULT_ECC
from .render import render_robust, render_compact, render_halfblock

class QRSymbol:
    # Immutable once built. A size of zero means the encoder failed for this part,
    # but part/total_parts are still correct so the gap is visible to the user.

    def __init__(self, modules, part=1, total_parts=1, frame=b'', version=0, ecc=DEFAULT_ECC):
        modules = tuple(tuple(bool(m) for m in row) for row in modules)
        size = len(modules)

        for row in modules:
            if len(row) != size:
                raise ValueError("QR grid not square: row of %d in %dx%d" % (len(row), size, size))

        if not (1 <= part <= total_parts):
            raise ValueError("Bad position: part %d of %d" % (part, total_parts))

        self._modules = modules
        self._size = size
        self._part = part
        self._total_parts = total_parts
        self._frame = bytes(frame)
        self._version = version if size else 0
        self._ecc = ecc

        # halfblock text, filled on first use
        self._halfblock = None
        self._lock = threading.Lock()

    @classmethod
    def failed(cls, part, total_parts, frame=b'', ecc=DEFAULT_ECC):
        # sentinel: placeholder for a part we could not encode
        return cls((), part, total_parts, frame=frame, ecc=ecc)

    @property
    def modules(self):
        return self._modules

    @property
    def size(self):
        return self._size

    @property
    def part(self):
        return self._part

    @property
    def total_parts(self):
        return self._total_parts

    @property
    def frame(self):
        # exact bytes given to the QR encoder (header included)
        return self._frame

    @property
    def version(self):
        return self._version

    @property
    def ecc(self):
        return self._ecc

    @property
    def is_blank(self):
        return self._size == 0

    def __repr__(self):
        if self.is_blank:
            return '<QRSymbol: %dof%d, FAILED>' % (self._part, self._total_parts)
        return '<QRSymbol: %dof%d, v%d %dx%d>' % (self._part, self._total_parts,
                                                  self._version, self._size, self._size)

    def __eq__(self, other):
        if not isinstance(other, QRSymbol):
            return NotImplemented
        return (self._part == other._part and self._total_parts == other._total_parts
                    and self._modules == other._modules)

    def __hash__(self):
        return hash((self._part, self._total_parts, self._modules))

    def robust_ascii(self, invert=False):
        return render_robust(self._modules, self._size, invert=invert)

    def compact_ascii(self, invert=False):
        return render_compact(self._modules, self._size, invert=invert)

    def halfblock_ascii(self):
        # Slowest to make, and we redraw often, so compute once and keep it.
        rv = self._halfblock
        if rv is not None:
            return rv

        with self._lock:
            if self._halfblock is None:
                self._halfblock = render_halfblock(self._modules, self._size)
            return self._halfblock

# EOF
