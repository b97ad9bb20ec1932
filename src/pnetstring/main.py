"""CLI handling for pnetstring.

This module provides the command-line interface for pnetstring, handling
argument parsing via click, logging configuration, and dispatching to
encode or decode mode based on user-specified options.

Usage:
    pnetstring --encode [--input PATH] [--output PATH] [--verbose]
    pnetstring --decode [--input PATH] [--output PATH] [--max-length N] [--newline] [--verbose]
"""

import click
import sys

from pnetstring.main_options import MutuallyExclusiveOption, check_decode_only
from pnetstring.main_logging import configure_logging



@click.command()
@click.option(
    "--encode",
    is_flag=True,
    cls=MutuallyExclusiveOption,
    exclusive_with=["decode"],
    help="Wrap the whole input in one netstring",
)
@click.option(
    "--decode",
    is_flag=True,
    cls=MutuallyExclusiveOption,
    exclusive_with=["encode"],
    help="Unwrap consecutive netstrings from the input",
)
@click.option(
    "--input",
    "input_file",
    type=click.File("rb"),
    default="-",
    help="File to read (default: stdin)",
)
@click.option(
    "--output",
    "output_file",
    type=click.File("wb"),
    default="-",
    help="File to write (default: stdout)",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=0),
    default=None,
    help="Reject netstrings whose content exceeds N bytes (decode only)",
)
@click.option(
    "--newline",
    is_flag=True,
    help="Write a newline after each decoded content (decode only)",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(
    encode: bool,
    decode: bool,
    input_file,
    output_file,
    max_length: int | None,
    newline: bool,
    verbose: bool,
) -> None:
    """Encode data as netstrings or decode netstrings back to data."""
    if not encode and not decode:
        raise click.UsageError("Either --encode or --decode must be specified")
    check_decode_only(encode, max_length, newline)

    configure_logging(verbose)

    _run_mode(encode, input_file, output_file, max_length, newline)


def _run_mode(encode: bool, input_file, output_file, max_length, newline: bool) -> None:
    """Run the appropriate mode (encode or decode).

    Args:
        encode: True for encode mode, False for decode mode.
        input_file: Binary file to read from.
        output_file: Binary file to write to.
        max_length: Content ceiling for decode mode, or None.
        newline: Whether decode mode appends a newline to each content.
    """
    from pnetstring.protocol import ProtocolError
    from pnetstring.stream import decode_stream, encode_stream

    try:
        if encode:
            encode_stream(input_file, output_file)
        else:
            delimiter = b"\n" if newline else b""
            decode_stream(input_file, output_file, max_length, delimiter)
    except (ProtocolError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        output_file.flush()
