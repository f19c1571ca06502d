"""Helpers for shell output lines, streams and threads."""

import functools
import io
import logging
import os
import threading
from collections.abc import Sequence
from typing import IO

logger = logging.getLogger(__name__)

_DRAIN_CHUNK = 4096


def is_valid_output(out: Sequence[str] | None) -> bool:
    """Check whether command output holds anything besides empty lines.

    Args:
        out: Output lines of a shell command

    Returns:
        False if out is None, empty, or every line is an empty string
    """
    if not out:
        return False
    return any(line for line in out)


def last_line(out: Sequence[str] | None) -> str:
    """Get the last line of command output.

    Returns:
        The last line, or "" if the output is not valid
    """
    return out[-1] if out and is_valid_output(out) else ""


def clean_input_stream(stream: IO[bytes] | int) -> None:
    """Discard all data currently available on a stream without blocking.

    Bytes a buffered reader has already pulled from the descriptor are
    discarded too, so the next read only sees data written afterwards.

    Args:
        stream: Readable file object backed by a descriptor, or a raw fd
    """
    try:
        fd = stream if isinstance(stream, int) else stream.fileno()
        was_blocking = os.get_blocking(fd)
    except (OSError, ValueError) as e:
        logger.debug("Stream has no usable descriptor: %s", e)
        return

    if isinstance(stream, io.BufferedReader):
        read_chunk = stream.read1
    else:
        read_chunk = functools.partial(os.read, fd)

    discarded = 0
    os.set_blocking(fd, False)
    try:
        while True:
            try:
                chunk = read_chunk(_DRAIN_CHUNK)
            except BlockingIOError:
                break
            # None means nothing more right now, b"" means EOF
            if not chunk:
                break
            discarded += len(chunk)
    except OSError as e:
        logger.debug("Stopped draining stream: %s", e)
    finally:
        os.set_blocking(fd, was_blocking)

    if discarded:
        logger.debug("Discarded %d byte(s) from stream", discarded)


def on_main_thread() -> bool:
    """Check if the current thread is the main thread."""
    return threading.current_thread() is threading.main_thread()


def gcd(u: int, v: int) -> int:
    """Greatest common divisor of two non-negative integers (binary algorithm).

    Args:
        u: Non-negative integer
        v: Non-negative integer

    Returns:
        The greatest common divisor; gcd(0, v) is v

    Raises:
        ValueError: If either argument is negative
    """
    if u < 0 or v < 0:
        raise ValueError(f"gcd requires non-negative integers, got {u} and {v}")
    if u == 0:
        return v
    if v == 0:
        return u

    shift = 0
    while (u | v) & 1 == 0:
        u >>= 1
        v >>= 1
        shift += 1

    while u & 1 == 0:
        u >>= 1

    while v != 0:
        while v & 1 == 0:
            v >>= 1
        if u > v:
            u, v = v, u
        v -= u

    return u << shift
