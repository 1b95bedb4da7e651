"""
Decimal codec для bcd-codec

Зонное и упакованное десятичное представление знаковых 64-битных целых.
"""

# Errors
from bcd_codec.core.codec.errors import (
    DecimalCodecError,
    DecimalErrorKind,
    DecimalOverflow,
    EmptyInput,
    InvalidDigitPart,
    InvalidSignPart,
    InvalidZonePart,
    MalformedDecimal,
)

# Nibbles
from bcd_codec.core.codec.nibbles import (
    INT64_MAX,
    INT64_MIN,
    hex_dump,
)

# Formats
from bcd_codec.core.codec.formats import (
    ASCII_ZONED,
    EBCDIC_ZONED,
    STANDARD_PACKED,
    DecimalEncoding,
    PackedFormat,
    ZonedFormat,
)

# Zoned / Packed
from bcd_codec.core.codec.zoned import decode_zoned, encode_zoned, zoned_length
from bcd_codec.core.codec.packed import (
    decode_packed,
    encode_packed,
    packed_digit_capacity,
    packed_length,
)

# Results
from bcd_codec.core.codec.result import (
    DecodeResult,
    try_decode_packed,
    try_decode_zoned,
)

__all__ = [
    # Errors
    "DecimalCodecError",
    "DecimalErrorKind",
    "DecimalOverflow",
    "EmptyInput",
    "InvalidDigitPart",
    "InvalidSignPart",
    "InvalidZonePart",
    "MalformedDecimal",
    # Nibbles
    "INT64_MAX",
    "INT64_MIN",
    "hex_dump",
    # Formats
    "ASCII_ZONED",
    "EBCDIC_ZONED",
    "STANDARD_PACKED",
    "DecimalEncoding",
    "PackedFormat",
    "ZonedFormat",
    # Zoned
    "decode_zoned",
    "encode_zoned",
    "zoned_length",
    # Packed
    "decode_packed",
    "encode_packed",
    "packed_digit_capacity",
    "packed_length",
    # Results
    "DecodeResult",
    "try_decode_packed",
    "try_decode_zoned",
]
