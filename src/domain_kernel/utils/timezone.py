"""Timezone utilities for domain-kernel.

All timestamps produced by the kernel are UTC-aware.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone awareness.

    Returns:
        Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)
