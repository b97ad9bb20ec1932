#!/usr/bin/env python3
"""Decoder phases and feed results."""
import enum


class Phase(enum.Enum):
    """
    Position of a Decoder within the netstring it is reading.

    READING_LENGTH collects length digits up to the colon. READING_PAYLOAD
    fills the content buffer. READING_TRAILER expects the comma. COMPLETE
    and FAILED are terminal.
    """

    READING_LENGTH = enum.auto()
    READING_PAYLOAD = enum.auto()
    READING_TRAILER = enum.auto()
    COMPLETE = enum.auto()
    FAILED = enum.auto()

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.COMPLETE, Phase.FAILED)


class FeedStatus(enum.Enum):
    """Result of a feed call that did not raise."""

    INCOMPLETE = enum.auto()
    COMPLETE = enum.auto()
