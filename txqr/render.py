# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# render.py - Draw a QR module grid as text, for a character terminal.
#
# Three styles:
# - robust: two chars per module. Terminal cells are ~2x taller than wide, so this
#   keeps the modules square. Biggest, but scans best.
# - compact: one full-block char per module. Half the width, squashed vertically.
# - halfblock: one char holds two modules stacked vertically, using the upper/lower
#   half-block glyphs. About half the lines of robust, modules still near-square.
#
# All take (modules, size) and return text with a newline after each line.
# A size of zero (encode failed) gives NO_QR_PLACEHOLDER instead.
#
from math import ceil
from .constants import (QUIET_ZONE, NO_QR_PLACEHOLDER, STYLES,
                        STYLE_ROBUST, STYLE_COMPACT, STYLE_HALFBLOCK)

ROBUST_GLYPHS = ('##', '  ')           # (set, clear)
COMPACT_GLYPHS = ('█', ' ')       # full block, space

# index is: top + (2 * bottom)
HALF_BLOCKS = (' ', '▀', '▄', '█')

def bordered_rows(modules, size, quiet):
    # Yield each row as tuple of bools, with quiet zone added on all four sides.
    blank = (False,) * (size + 2*quiet)
    pad = (False,) * quiet

    for _ in range(quiet):
        yield blank
    for row in modules:
        yield pad + tuple(row) + pad
    for _ in range(quiet):
        yield blank

def _one_per_module(modules, size, quiet, glyphs, invert):
    on, off = glyphs
    if invert:
        on, off = off, on

    lines = [''.join(on if m else off for m in row)
                for row in bordered_rows(modules, size, quiet)]

    return '\n'.join(lines) + '\n'

def render_robust(modules, size, invert=False):
    if not size:
        return NO_QR_PLACEHOLDER
    return _one_per_module(modules, size, QUIET_ZONE[STYLE_ROBUST], ROBUST_GLYPHS, invert)

def render_compact(modules, size, invert=False):
    if not size:
        return NO_QR_PLACEHOLDER
    return _one_per_module(modules, size, QUIET_ZONE[STYLE_COMPACT], COMPACT_GLYPHS, invert)

def render_halfblock(modules, size):
    if not size:
        return NO_QR_PLACEHOLDER

    rows = list(bordered_rows(modules, size, QUIET_ZONE[STYLE_HALFBLOCK]))
    if len(rows) % 2:
        # odd number of rows: bottom half of last line is blank
        rows.append((False,) * len(rows[0]))

    lines = []
    for top, bot in zip(rows[0::2], rows[1::2]):
        lines.append(''.join(HALF_BLOCKS[t + (2*b)] for t, b in zip(top, bot)))

    return '\n'.join(lines) + '\n'

def rendered_width(style, size):
    # columns needed to show a QR of this size
    if not size:
        return len(NO_QR_PLACEHOLDER)

    span = size + (2 * QUIET_ZONE[style])
    return span * 2 if style == STYLE_ROBUST else span

def rendered_height(style, size):
    # lines needed
    if not size:
        return 1

    span = size + (2 * QUIET_ZONE[style])
    return ceil(span / 2) if style == STYLE_HALFBLOCK else span

def pick_style(size, columns, rows=None):
    # Largest style that fits the terminal; halfblock if nothing does.
    for style in STYLES:
        if rendered_width(style, size) > columns:
            continue
        if rows is not None and rendered_height(style, size) > rows:
            continue
        return style

    return STYLE_HALFBLOCK

def render(symbol, style=STYLE_ROBUST, invert=False):
    # Draw a QRSymbol in named style. Halfblock comes from the symbol's cache.
    if style == STYLE_ROBUST:
        return symbol.robust_ascii(invert=invert)
    elif style == STYLE_COMPACT:
        return symbol.compact_ascii(invert=invert)
    elif style == STYLE_HALFBLOCK:
        return symbol.halfblock_ascii()

    raise ValueError('unknown style: %r' % style)

def part_label(symbol):
    return 'Part %d of %d' % (symbol.part, symbol.total_parts)

# EOF
