#!/usr/bin/env python3
"""
Netstring decoding errors.

Every failure the decoder can report belongs to one ErrorKind. Exceptions
are created per decoder instance; a failed decoder keeps its own error and
raises it again on every later feed.
"""
import enum

from pnetstring.protocol import ProtocolError


class ErrorKind(enum.Enum):
    """Closed set of decoding outcomes that are not success."""

    INCOMPLETE = "incomplete"
    GARBLED = "garbled"
    TOO_LARGE = "too_large"


class NetstringError(ProtocolError):
    """Base class for errors carrying an ErrorKind."""

    kind: ErrorKind


class IncompleteError(NetstringError):
    """
    More input is required before the value is available.

    Not an error of the data: feeding more bytes can still succeed.
    """

    kind = ErrorKind.INCOMPLETE


class GarbledError(NetstringError):
    """The input violates netstring syntax. Terminal for the decoder."""

    kind = ErrorKind.GARBLED


class TooLargeError(NetstringError):
    """The declared length exceeds the configured ceiling. Terminal for the decoder."""

    kind = ErrorKind.TOO_LARGE
