"""Hypothesis property tests for the decimal codec.

Properties:

- **Round trip**: ``decode(encode(n)) == n`` for every int64 ``n``, for both
  formats and every preset.
- **Fixed width**: encoding with a declared width yields the width-derived
  length and still round-trips.
- **Garbage never escapes the taxonomy**: decoding arbitrary bytes either
  returns an int64 or raises a ``DecimalCodecError``.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bcd_codec.core.codec import (
    ASCII_ZONED,
    EBCDIC_ZONED,
    INT64_MAX,
    INT64_MIN,
    DecimalCodecError,
    decode_packed,
    decode_zoned,
    encode_packed,
    encode_zoned,
    packed_length,
    try_decode_packed,
    try_decode_zoned,
)

pytestmark = [pytest.mark.property]

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
zoned_formats = st.sampled_from([ASCII_ZONED, EBCDIC_ZONED])


class TestRoundTrip:
    """Round trip для обоих форматов"""

    @given(value=int64s, fmt=zoned_formats)
    def test_zoned(self, value: int, fmt) -> None:
        assert decode_zoned(encode_zoned(value, fmt=fmt), fmt) == value

    @given(value=int64s)
    def test_packed(self, value: int) -> None:
        assert decode_packed(encode_packed(value)) == value

    @given(value=st.integers(min_value=-999_999, max_value=999_999), width=st.integers(6, 19))
    def test_fixed_width(self, value: int, width: int) -> None:
        zoned = encode_zoned(value, digits=width)
        packed = encode_packed(value, digits=width)

        assert len(zoned) == width
        assert len(packed) == packed_length(width)
        assert decode_zoned(zoned) == value
        assert decode_packed(packed) == value


class TestArbitraryInput:
    """Произвольные байты не приводят к неожиданным исключениям"""

    @given(data=st.binary(max_size=24))
    def test_zoned(self, data: bytes) -> None:
        result = try_decode_zoned(data)
        if result.ok:
            assert INT64_MIN <= result.unwrap() <= INT64_MAX
        else:
            assert isinstance(result.error, DecimalCodecError)

    @given(data=st.binary(max_size=24))
    def test_packed(self, data: bytes) -> None:
        try:
            value = decode_packed(data)
        except DecimalCodecError:
            return
        assert INT64_MIN <= value <= INT64_MAX
        assert try_decode_packed(data).value == value
