#!/usr/bin/env python3
"""Pytest fixtures for pnetstring tests.

Provides fresh decoders, chunk buffers, and a source that fails on demand.
"""

import pytest

from pnetstring.decoder import Decoder
from pnetstring.source import StreamBuffer


class FlakySource:
    """Source that raises the queued errors before delegating to a buffer."""

    def __init__(self, data: bytes, errors: list[Exception]) -> None:
        self.buffer = StreamBuffer(data)
        self.errors = list(errors)
        self.calls = 0

    def read(self, size: int) -> bytes:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return self.buffer.read(size)


@pytest.fixture
def decoder() -> Decoder:
    """Create a fresh Decoder without a length ceiling."""
    return Decoder()


@pytest.fixture
def buffer() -> StreamBuffer:
    """Create an empty StreamBuffer to append chunks to."""
    return StreamBuffer()
