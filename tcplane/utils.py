"""Small helpers for byte buffers and the host machine."""

from __future__ import annotations

import os


def remove_trailing_zeros(data: bytes | bytearray | memoryview) -> bytes:
    """Return the data with every trailing zero byte removed."""
    return bytes(data).rstrip(b"\x00")


def get_thread_count() -> int:
    """Return the number of CPUs available to this process, at least 1."""
    try:
        count = len(os.sched_getaffinity(0))
    except (AttributeError, OSError):
        count = os.cpu_count() or 0
    return count if count > 0 else 1