# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# constants.py - Limits and defaults for chunking and rendering.
#

# payload bytes carried per QR, before the header is added
DEFAULT_CHUNK_LEN = 100

# smaller requests are clamped up to this; avoids 1-byte-per-QR silliness
MIN_CHUNK_LEN = 10

# biggest payload we will even try to split
MAX_TOTAL_SIZE = 100000

# nobody is going to scan more than this many frames
MAX_PARTS = 1000

# Error correction levels, named like the QR standard does.
# - Q (quartile) recovers ~25% damage; good balance for camera-scanned screens
ECC_LEVELS = ('L', 'M', 'Q', 'H')
DEFAULT_ECC = 'Q'

# header styles supported by framing.py
FRAMING_TEXT = 'text'
FRAMING_BINARY = 'binary'
FRAMINGS = (FRAMING_TEXT, FRAMING_BINARY)

# rendering styles, in order of preference when there is room
STYLE_ROBUST = 'robust'
STYLE_COMPACT = 'compact'
STYLE_HALFBLOCK = 'halfblock'
STYLES = (STYLE_ROBUST, STYLE_COMPACT, STYLE_HALFBLOCK)

# quiet zone (blank border) width, in modules, for each style
QUIET_ZONE = {
    STYLE_ROBUST: 4,
    STYLE_COMPACT: 2,
    STYLE_HALFBLOCK: 1,
}

# shown instead of a QR when the encoder could not make one
NO_QR_PLACEHOLDER = '(No QR data)'

# reasons a payload could not be split at all
PROBLEM_EMPTY = 'empty payload'
PROBLEM_TOO_BIG = 'too big'
PROBLEM_TOO_MANY_PARTS = 'too many parts'

# EOF
