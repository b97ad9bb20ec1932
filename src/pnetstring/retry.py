#!/usr/bin/env python3
"""Feed retry logic for pnetstring.

A Decoder leaves its state untouched when the source raises, so a failed
feed can simply be repeated. This module wraps Decoder.feed with tenacity
for exponential backoff on transient source errors. Netstring errors are
terminal for the decoder and are never retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pnetstring.retry_constants import (
    INITIAL_WAIT,
    MAX_ATTEMPTS,
    MAX_WAIT,
    TRANSIENT_ERRORS,
    WAIT_MULTIPLIER,
)

if TYPE_CHECKING:
    from pnetstring.decoder import Decoder
    from pnetstring.decoder_state import FeedStatus
    from pnetstring.source import ByteSource

logger = logging.getLogger(__name__)


@retry(
    wait=wait_exponential(
        multiplier=WAIT_MULTIPLIER,
        min=INITIAL_WAIT,
        max=MAX_WAIT,
    ),
    retry=retry_if_exception_type(TRANSIENT_ERRORS),
    stop=stop_after_attempt(MAX_ATTEMPTS),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def feed_with_retry(decoder: Decoder, source: ByteSource) -> FeedStatus:
    """Feed decoder from source, retrying transient source errors.

    Args:
        decoder: The decoder to advance.
        source: The source to read from.

    Returns:
        The FeedStatus of the first attempt that did not raise.

    Raises:
        OSError: The last transient error once MAX_ATTEMPTS is reached, or
            any non-transient source error immediately.
        NetstringError: If the input is garbled or too large.
    """
    return decoder.feed(source)
