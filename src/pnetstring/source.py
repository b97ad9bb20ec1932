#!/usr/bin/env python3
"""
Byte sources a Decoder can be fed from.

A source is anything with read(size) returning at most size bytes, where
an empty result (b"" or None) means nothing is available right now and an
exception means the source itself failed. Binary file objects already
behave this way; this module adds an appendable in-memory buffer for
chunked input and an adapter for sockets.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import socket

logger = logging.getLogger(__name__)

# Consumed prefix size above which StreamBuffer drops already-read bytes.
COMPACT_THRESHOLD: int = 65536


class ByteSource(Protocol):
    """Input accepted by Decoder.feed()."""

    def read(self, size: int, /) -> bytes | None:
        ...


class StreamBuffer:
    """
    First-in first-out byte buffer.

    Chunks are appended with write() as they arrive and consumed from the
    front with read(), so one buffer can be fed to a decoder repeatedly
    while more data trickles in.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self._offset = 0

    def __len__(self) -> int:
        return len(self._data) - self._offset

    def write(self, data: bytes) -> int:
        """Append data to the end of the buffer and return its length."""
        self._data += data
        return len(data)

    def read(self, size: int = -1) -> bytes:
        """
        Remove and return up to size bytes from the front of the buffer.

        Args:
            size: Maximum number of bytes to return; negative means all.

        Returns:
            The bytes read, b"" if the buffer is empty.
        """
        available = len(self)
        if size < 0 or size > available:
            size = available
        start = self._offset
        self._offset += size
        chunk = bytes(self._data[start:self._offset])
        self._compact()
        return chunk

    def getvalue(self) -> bytes:
        """Return the unread bytes without consuming them."""
        return bytes(self._data[self._offset:])

    def _compact(self) -> None:
        if self._offset == len(self._data):
            self._data.clear()
            self._offset = 0
        elif self._offset > COMPACT_THRESHOLD:
            del self._data[:self._offset]
            self._offset = 0


class SocketSource:
    """
    Adapt a connected socket to the ByteSource interface.

    A non-blocking socket with no pending data, or a socket whose timeout
    elapses, reads as exhausted rather than failed; the decoder then
    reports INCOMPLETE and can be fed again later. An orderly shutdown by
    the peer also reads as exhausted and sets eof.

    Attributes:
        sock: The wrapped socket.
        eof: True once the peer has closed its side of the connection.
    """

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self.eof = False

    def read(self, size: int) -> bytes:
        if size <= 0:
            return b""
        try:
            data = self.sock.recv(size)
        except (BlockingIOError, TimeoutError):
            return b""
        if not data:
            if not self.eof:
                logger.debug("Peer closed connection")
            self.eof = True
        return data
