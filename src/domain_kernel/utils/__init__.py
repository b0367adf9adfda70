"""Utilities module for domain-kernel.

This module provides the identifier and clock helpers used by the
domain primitives.
"""

from .uuid import (
    generate_uuid_v7,
    extract_timestamp_from_uuid_v7,
    is_valid_uuid,
)
from .timezone import utc_now

__all__ = [
    # UUID Generation
    "generate_uuid_v7",
    "extract_timestamp_from_uuid_v7",
    "is_valid_uuid",
    # Timezone Utilities
    "utc_now",
]
