#!/usr/bin/env python3
"""
Encoding and decoding whole streams.

decode_stream reads consecutive netstrings from a blocking binary source,
reusing one Decoder and resetting it after each value. encode_stream wraps
an entire source in a single netstring. Both back the pnetstring command.
"""
from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from pnetstring.decoder import Decoder
from pnetstring.decoder_state import FeedStatus
from pnetstring.errors import IncompleteError
from pnetstring.protocol import encode_netstring
from pnetstring.retry import feed_with_retry

if TYPE_CHECKING:
    from pnetstring.source import ByteSource

logger = logging.getLogger(__name__)


def encode_stream(source: IO[bytes], sink: IO[bytes]) -> int:
    """
    Read all of source and write it to sink as one netstring.

    Args:
        source: Binary input to encode.
        sink: Binary output receiving the netstring.

    Returns:
        Length of the encoded content.
    """
    data = source.read()
    sink.write(encode_netstring(data))
    logger.debug("Encoded %d bytes", len(data))
    return len(data)


def decode_stream(
    source: ByteSource,
    sink: IO[bytes],
    max_length: int | None = None,
    delimiter: bytes = b"",
) -> int:
    """
    Decode consecutive netstrings from source, writing each content to sink.

    The source is expected to block until data is available. Short reads
    are fed again; a feed that takes no bytes at all means end of input.
    Ending cleanly between two netstrings is fine; ending inside one is an
    error.

    Args:
        source: Blocking binary input holding zero or more netstrings.
        sink: Binary output receiving decoded content.
        max_length: Optional ceiling applied to every netstring.
        delimiter: Bytes written after each decoded content.

    Returns:
        Number of netstrings decoded.

    Raises:
        IncompleteError: If input ends partway through a netstring.
        GarbledError: If input is not a sequence of valid netstrings.
        TooLargeError: If a netstring exceeds max_length.
    """
    decoder = Decoder(max_length)
    count = 0
    while True:
        before = decoder.consumed
        if feed_with_retry(decoder, source) is FeedStatus.INCOMPLETE:
            # A short read still made progress; only an empty one is end of input.
            if decoder.consumed > before:
                continue
            if decoder.consumed:
                raise IncompleteError(
                    f"Input ended inside netstring {count} "
                    f"after {decoder.consumed} bytes"
                )
            logger.debug("End of input after %d netstrings", count)
            return count
        sink.write(decoder.bytes())
        if delimiter:
            sink.write(delimiter)
        count += 1
        logger.debug("Decoded netstring %d: %d bytes", count, decoder.length)
        decoder.reset()
