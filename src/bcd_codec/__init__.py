"""
bcd-codec: zoned and packed decimal encoding of signed 64-bit integers.
"""

from bcd_codec.core.codec import (
    ASCII_ZONED,
    EBCDIC_ZONED,
    INT64_MAX,
    INT64_MIN,
    STANDARD_PACKED,
    DecimalCodecError,
    DecimalEncoding,
    DecimalErrorKind,
    DecimalOverflow,
    DecodeResult,
    EmptyInput,
    InvalidDigitPart,
    InvalidSignPart,
    InvalidZonePart,
    MalformedDecimal,
    PackedFormat,
    ZonedFormat,
    decode_packed,
    decode_zoned,
    encode_packed,
    encode_zoned,
    hex_dump,
    packed_digit_capacity,
    packed_length,
    try_decode_packed,
    try_decode_zoned,
    zoned_length,
)
from bcd_codec.core.domain import DecimalField, decode_record

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode_zoned",
    "decode_zoned",
    "encode_packed",
    "decode_packed",
    "try_decode_zoned",
    "try_decode_packed",
    "zoned_length",
    "packed_length",
    "packed_digit_capacity",
    "hex_dump",
    "INT64_MIN",
    "INT64_MAX",
    "DecodeResult",
    # Formats
    "ZonedFormat",
    "PackedFormat",
    "ASCII_ZONED",
    "EBCDIC_ZONED",
    "STANDARD_PACKED",
    "DecimalEncoding",
    # Errors
    "DecimalCodecError",
    "DecimalErrorKind",
    "MalformedDecimal",
    "InvalidZonePart",
    "InvalidSignPart",
    "InvalidDigitPart",
    "EmptyInput",
    "DecimalOverflow",
    # Domain
    "DecimalField",
    "decode_record",
]
