# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# cli.py - Show a signed transaction as QR code(s) in the terminal.
#
import sys, shutil, logging, click
from .constants import (DEFAULT_CHUNK_LEN, DEFAULT_ECC, ECC_LEVELS, FRAMING_TEXT,
                        FRAMING_BINARY, STYLES)
from .exceptions import BadHexError
from .qrs import generate_qrs_from_hex
from .render import pick_style, render, part_label

def qr_options(f):
    # options shared by every command that makes QR's
    f = click.option('--max-chunk', '-c', type=int, default=DEFAULT_CHUNK_LEN,
                        help='Payload bytes per QR')(f)
    f = click.option('--ecc', '-e', type=click.Choice(ECC_LEVELS), default=DEFAULT_ECC,
                        help='Error correction level')(f)
    f = click.option('--binary-header', is_flag=True, default=False,
                        help='Use 4-byte binary part header, not P<n>/<m>: text')(f)
    f = click.option('--workers', '-j', type=int, default=1,
                        help='Encode parts in parallel')(f)
    f = click.argument('hex_txt', metavar='HEX')(f)
    return f

def split_txn(hex_txt, max_chunk, ecc, binary_header, workers):
    # HEX of '-' means read stdin; tolerate line ending and spaces from a paste/pipe
    if hex_txt == '-':
        with click.open_file('-', 'r') as fd:
            hex_txt = fd.read()
    hex_txt = hex_txt.strip()

    try:
        return generate_qrs_from_hex(hex_txt, max_chunk_len=max_chunk, ecc=ecc,
                                     framing=FRAMING_BINARY if binary_header else FRAMING_TEXT,
                                     workers=workers)
    except BadHexError as exc:
        raise click.BadParameter(str(exc), param_hint='HEX')

def give_up(batch):
    click.echo("Cannot show as QR: %s (%d bytes)" % (batch.problem, batch.data_len), err=True)
    sys.exit(1)

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug messages')
def main(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')

@main.command('info')
@qr_options
def show_info(hex_txt, max_chunk, ecc, binary_header, workers):
    "Describe the QR's needed, without drawing them"
    batch = split_txn(hex_txt, max_chunk, ecc, binary_header, workers)
    if batch.problem:
        give_up(batch)

    click.echo('Payload: %d bytes' % batch.data_len)
    click.echo('Parts: %d (ECC=%s, %s header)' % (len(batch), ecc,
                                'binary' if binary_header else 'text'))

    for sym in batch:
        if sym.is_blank:
            click.echo('  %s: %d bytes => FAILED' % (part_label(sym), len(sym.frame)))
        else:
            click.echo('  %s: %d bytes => v%d %dx%d' % (part_label(sym), len(sym.frame),
                                                        sym.version, sym.size, sym.size))

    if batch.failed_parts:
        sys.exit(1)

@main.command('show')
@qr_options
@click.option('--style', '-s', type=click.Choice(('auto',) + STYLES), default='auto',
                help='How to draw; auto picks biggest that fits')
@click.option('--width', '-w', type=int, default=None,
                help='Terminal columns (default: detect)')
@click.option('--invert', '-i', is_flag=True, default=False,
                help='Swap dark/light (robust and compact only)')
def show_qrs(hex_txt, max_chunk, ecc, binary_header, workers, style, width, invert):
    "Draw each QR of the transaction"
    batch = split_txn(hex_txt, max_chunk, ecc, binary_header, workers)
    if batch.problem:
        give_up(batch)

    if width is None:
        width = shutil.get_terminal_size().columns

    for sym in batch:
        st = pick_style(sym.size, width) if style == 'auto' else style
        click.echo(render(sym, st, invert=invert), nl=False)
        if sym.is_blank:
            click.echo()
        if sym.total_parts > 1:
            click.echo(part_label(sym))
        click.echo()

    if batch.failed_parts:
        click.echo("Could not encode part(s): %s" % ', '.join(str(p) for p in batch.failed_parts),
                        err=True)
        sys.exit(1)

# EOF
