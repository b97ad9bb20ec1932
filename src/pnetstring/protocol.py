#!/usr/bin/env python3
"""
Netstring wire format.

Netstrings provide a simple, reliable framing format for transmitting
arbitrary binary data over a stream connection. Format: <length>:<content>,
where length is ASCII decimal digits, followed by a colon, the raw content
bytes, and a trailing comma.

Example: "12:Hello world!," encodes the 12-byte string "Hello world!".

This module provides the encoder, the base ProtocolError, and asyncio
helpers that read and write a single netstring over a stream connection.
Incremental decoding itself lives in pnetstring.decoder.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import asyncio

# Maximum digits in the length field (10 digits allows up to 9999999999 bytes).
# Enforced during parsing to prevent unbounded growth when the colon never comes.
MAX_LENGTH_DIGITS: int = 10

# Separator between the length field and the content.
COLON: bytes = b":"

# Terminator following the content.
COMMA: bytes = b","


def encode_netstring(data: bytes) -> bytes:
    """
    Encode raw bytes as a netstring.

    Args:
        data: Raw content bytes to encode.

    Returns:
        Netstring-encoded bytes in format "<length>:<content>,".
    """
    length = len(data)
    return f"{length}:".encode("ascii") + bytes(data) + COMMA


class ProtocolError(Exception):
    """
    Exception raised for protocol-level errors.

    Raised when netstring parsing fails due to invalid format, size
    violations, or connection issues during message reading.
    """

    pass


async def read_netstring(
    reader: asyncio.StreamReader,
    max_length: int | None = None,
) -> bytes:
    """
    Read and decode a single netstring from an async stream.

    Only the bytes belonging to the netstring are taken from the reader,
    so consecutive netstrings on one connection can be read by calling
    this again.

    Args:
        reader: asyncio StreamReader to read from.
        max_length: Optional ceiling on the declared content length.

    Returns:
        Decoded content bytes.

    Raises:
        ProtocolError: On invalid format, size violation, or connection closed.
    """
    from pnetstring.decoder import Decoder
    from pnetstring.decoder_state import FeedStatus
    from pnetstring.source import StreamBuffer

    decoder = Decoder(max_length)
    buffer = StreamBuffer()
    while decoder.feed(buffer) is FeedStatus.INCOMPLETE:
        chunk = await reader.read(decoder.wanted)
        if not chunk:
            raise ProtocolError(
                f"Connection closed after {decoder.consumed} bytes of netstring"
            )
        buffer.write(chunk)
    return decoder.bytes()


async def write_netstring(writer: asyncio.StreamWriter, data: bytes) -> None:
    """
    Encode data as a netstring, write it and wait for the buffer to drain.

    Args:
        writer: asyncio StreamWriter to send on.
        data: Raw content bytes to send.
    """
    writer.write(encode_netstring(data))
    await writer.drain()
