"""UUID utilities for domain-kernel."""

import os
import threading
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

_SEQUENCE_MAX = 0xFFF
# Fresh milliseconds start the sequence in the lower half so a burst still has room.
_SEQUENCE_SEED_MAX = 0x7FF

_lock = threading.Lock()
_last_timestamp_ms = -1
_last_sequence = 0


def _next_timestamp_and_sequence() -> tuple[int, int]:
    """Return a (timestamp_ms, sequence) pair strictly greater than the last one."""
    global _last_timestamp_ms, _last_sequence

    with _lock:
        timestamp_ms = time.time_ns() // 1_000_000

        if timestamp_ms > _last_timestamp_ms:
            sequence = int.from_bytes(os.urandom(2), byteorder='big') & _SEQUENCE_SEED_MAX
        else:
            # Same millisecond or the clock stepped back: stay on the last tick
            timestamp_ms = _last_timestamp_ms
            sequence = _last_sequence + 1
            if sequence > _SEQUENCE_MAX:
                timestamp_ms += 1
                sequence = 0

        _last_timestamp_ms = timestamp_ms
        _last_sequence = sequence
        return timestamp_ms, sequence


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 with time-based ordering.

    The first 48 bits hold the Unix time in milliseconds and the 12 bits of
    ``rand_a`` hold a per-process sequence, so every UUID returned by this
    process sorts strictly after the previous one, even within one millisecond.

    Returns:
        String representation of UUIDv7
    """
    timestamp_ms, sequence = _next_timestamp_and_sequence()

    # 48 bits timestamp, 4 bits version, 12 bits sequence
    high = (timestamp_ms << 16) | 0x7000 | sequence

    # 2 bits variant, 62 bits random
    low = int.from_bytes(os.urandom(8), byteorder='big')
    low = (low & 0x3FFFFFFFFFFFFFFF) | 0x8000000000000000

    return str(uuid.UUID(int=(high << 64) | low))


def extract_timestamp_from_uuid_v7(uuid_str: str) -> Optional[datetime]:
    """
    Extract timestamp from UUIDv7.

    Args:
        uuid_str: String representation of UUIDv7

    Returns:
        Datetime object representing the timestamp, or None if invalid
    """
    try:
        uuid_obj = uuid.UUID(uuid_str)
    except (ValueError, TypeError, AttributeError):
        return None

    if uuid_obj.version != 7:
        return None

    timestamp_ms = int.from_bytes(uuid_obj.bytes[:6], byteorder='big')
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def is_valid_uuid(uuid_str: str, version: Optional[int] = None) -> bool:
    """
    Check if string is a valid UUID.

    Args:
        uuid_str: String to validate
        version: Optional specific version to check (4, 7, etc.)

    Returns:
        True if valid UUID, False otherwise
    """
    try:
        uuid_obj = uuid.UUID(uuid_str)
    except (ValueError, TypeError, AttributeError):
        return False

    if version is not None:
        return uuid_obj.version == version
    return True
