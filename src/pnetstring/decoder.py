#!/usr/bin/env python3
"""
Incremental netstring decoder.

A Decoder reads exactly one netstring from a source that may deliver its
bytes in arbitrarily small pieces, for example a socket. Each call to
feed() consumes as much of the currently available input as forms
complete syntactic units and reports whether the value is complete or
more input is needed. Partial progress is kept between calls, so feeding
"1", then "1:hello", then " world", then "," yields "hello world".

Malformed input raises GarbledError and a declared length above the
configured ceiling raises TooLargeError. Both are terminal: the decoder
keeps the error and raises it again on every later feed without reading.
Exceptions raised by the source itself pass through untouched and leave
the decoder where it was, so the call can be retried.

The length and trailer phases read one byte at a time so the decoder never
takes bytes belonging to whatever follows the netstring in the stream.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pnetstring.decoder_state import FeedStatus, Phase
from pnetstring.errors import GarbledError, IncompleteError, NetstringError, TooLargeError
from pnetstring.protocol import COLON, COMMA, MAX_LENGTH_DIGITS, encode_netstring

if TYPE_CHECKING:
    from pnetstring.source import ByteSource

logger = logging.getLogger(__name__)


class Decoder:
    """
    Stateful parser for a single netstring.

    A Decoder is owned by one caller and must not be fed from several
    threads at once. Use one instance per stream, and reset() it (or create
    a new one) before reading the next value.

    Attributes:
        max_length: Ceiling on the declared length, or None for no limit.
    """

    def __init__(self, max_length: int | None = None) -> None:
        """
        Create an empty decoder.

        Args:
            max_length: Optional ceiling on the declared content length.
                Without it the buffer size is bounded only by the length the
                peer declares.

        Raises:
            ValueError: If max_length is negative.
        """
        if max_length is not None and max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {max_length}")
        self._max_length = max_length
        self.reset()

    @classmethod
    def from_bytes(cls, data: bytes) -> Decoder:
        """
        Wrap existing content in an already complete decoder.

        Useful for output: marshal() on the result gives the wire form.

        Args:
            data: Content bytes.

        Returns:
            A Decoder whose is_complete() is True and bytes() is data.
        """
        decoder = cls()
        decoder._length = len(data)
        decoder._payload = None
        decoder._filled = decoder._length
        decoder._value = bytes(data)
        decoder._phase = Phase.COMPLETE
        return decoder

    def reset(self) -> None:
        """Discard all progress and return to the initial state, keeping max_length."""
        self._phase = Phase.READING_LENGTH
        self._digits = bytearray()
        self._length: int | None = None
        self._payload: bytearray | None = None
        self._filled = 0
        self._value: bytes | None = None
        self._error: NetstringError | None = None
        self._consumed = 0

    @property
    def max_length(self) -> int | None:
        return self._max_length

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def length(self) -> int | None:
        """Declared content length, or None while the length field is still being read."""
        return self._length

    @property
    def consumed(self) -> int:
        """Number of bytes taken from sources so far."""
        return self._consumed

    @property
    def error(self) -> NetstringError | None:
        return self._error

    @property
    def wanted(self) -> int:
        """
        Number of bytes that can be read next without overrunning the netstring.

        One byte while reading the length field or the trailer, the rest of
        the content while reading the payload, zero once terminal.
        """
        if self._phase is Phase.READING_PAYLOAD:
            return self._length - self._filled
        if self._phase.is_terminal:
            return 0
        return 1

    def is_complete(self) -> bool:
        return self._phase is Phase.COMPLETE

    def bytes(self) -> bytes:
        """
        Return the decoded content.

        Raises:
            IncompleteError: If the netstring has not been fully read.
        """
        if self._value is None:
            raise IncompleteError("The netstring is incomplete")
        return self._value

    def marshal(self) -> bytes:
        """
        Format the decoded content as a netstring.

        Raises:
            IncompleteError: If the netstring has not been fully read.
        """
        return encode_netstring(self.bytes())

    def feed(self, source: ByteSource) -> FeedStatus:
        """
        Consume available input from source and advance as far as it allows.

        A single call moves through as many phases as the available input
        permits. Calling feed on a complete decoder returns COMPLETE without
        reading; calling it on a failed decoder raises the stored error
        without reading.

        Args:
            source: Object whose read(size) returns up to size bytes, or
                b"" or None when nothing is available right now.

        Returns:
            FeedStatus.COMPLETE once the trailing comma has been read,
            FeedStatus.INCOMPLETE if the source ran dry first.

        Raises:
            GarbledError: If the input is not a valid netstring.
            TooLargeError: If the declared length exceeds max_length.
            ValueError: If the source returns more bytes than requested.
        """
        if self._phase is Phase.COMPLETE:
            return FeedStatus.COMPLETE
        if self._phase is Phase.FAILED:
            raise self._error.with_traceback(None)

        if self._phase is Phase.READING_LENGTH and not self._read_length(source):
            return FeedStatus.INCOMPLETE
        if self._phase is Phase.READING_PAYLOAD and not self._read_payload(source):
            return FeedStatus.INCOMPLETE
        if not self._read_trailer(source):
            return FeedStatus.INCOMPLETE
        return FeedStatus.COMPLETE

    def _fail(self, error: NetstringError) -> NetstringError:
        self._phase = Phase.FAILED
        self._error = error
        logger.warning("Netstring decoding failed after %d bytes: %s", self._consumed, error)
        return error

    def _read_byte(self, source: ByteSource) -> bytes | None:
        byte = source.read(1)
        if not byte:
            return None
        if len(byte) > 1:
            raise ValueError(f"Source returned {len(byte)} bytes, asked for 1")
        self._consumed += 1
        return byte

    def _read_length(self, source: ByteSource) -> bool:
        while True:
            byte = self._read_byte(source)
            if byte is None:
                return False
            if byte == COLON:
                self._accept_length()
                return True
            if not byte.isdigit():
                raise self._fail(GarbledError(f"Invalid character in length field: {byte!r}"))
            self._digits += byte
            if len(self._digits) > MAX_LENGTH_DIGITS:
                raise self._fail(GarbledError(
                    f"Length field exceeds maximum digits ({MAX_LENGTH_DIGITS})"
                ))

    def _accept_length(self) -> None:
        if not self._digits:
            raise self._fail(GarbledError("Empty length field"))
        length = int(self._digits.decode("ascii"))
        if self._max_length is not None and length > self._max_length:
            raise self._fail(TooLargeError(
                f"Content size {length} exceeds limit {self._max_length}"
            ))
        self._length = length
        self._payload = bytearray(length)
        self._phase = Phase.READING_PAYLOAD if length else Phase.READING_TRAILER
        logger.debug("Netstring length field accepted: %d bytes", length)

    def _read_payload(self, source: ByteSource) -> bool:
        remaining = self._length - self._filled
        chunk = source.read(remaining)
        if chunk:
            count = len(chunk)
            if count > remaining:
                raise ValueError(f"Source returned {count} bytes, asked for {remaining}")
            self._payload[self._filled:self._filled + count] = chunk
            self._filled += count
            self._consumed += count
        if self._filled < self._length:
            return False
        self._phase = Phase.READING_TRAILER
        return True

    def _read_trailer(self, source: ByteSource) -> bool:
        byte = self._read_byte(source)
        if byte is None:
            return False
        if byte != COMMA:
            raise self._fail(GarbledError(f"Expected comma terminator, got {byte!r}"))
        self._value = bytes(self._payload)
        self._payload = None
        self._phase = Phase.COMPLETE
        logger.debug("Netstring complete: %d bytes of content", self._length)
        return True
