"""
Utility functions for reminder2json.
"""

from .date import (
    describe_timestamp, strip_utc_offset, format_full, format_simple,
    from_epoch, to_utc
)
from .io import atomic_write_bytes, write_output

__all__ = [
    # Date utilities
    'describe_timestamp',
    'strip_utc_offset',
    'format_full',
    'format_simple',
    'from_epoch',
    'to_utc',
    # Output utilities
    'atomic_write_bytes',
    'write_output'
]
