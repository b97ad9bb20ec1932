#!/usr/bin/env python3
"""Constants for retrying a feed after a transient source failure.

These constants control the exponential backoff used when the source
raises an error that is expected to clear up on its own, such as an
interrupted system call or a read timeout.
"""

# Retry parameters for exponential backoff.
# Initial delay between feed attempts in seconds.
INITIAL_WAIT: float = 0.01

# Maximum delay between feed attempts in seconds.
MAX_WAIT: float = 1.0

# Multiplier for exponential backoff (delay = initial * multiplier^attempt).
WAIT_MULTIPLIER: float = 0.01

# Total number of feed attempts before the source error is re-raised.
MAX_ATTEMPTS: int = 5

# Source exceptions considered transient.
TRANSIENT_ERRORS: tuple[type[OSError], ...] = (
    InterruptedError,
    BlockingIOError,
    TimeoutError,
)
