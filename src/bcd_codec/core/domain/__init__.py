"""
Domain models.

Contains record-level descriptions built on top of the decimal codec.
"""

from bcd_codec.core.domain.field import DecimalField, decode_record

__all__ = [
    "DecimalField",
    "decode_record",
]
