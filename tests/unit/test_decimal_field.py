"""
Тесты для DecimalField

Проверяет:
1. Ширину поля в цифрах для zoned/packed
2. Извлечение значения по смещению
3. Запись значения на месте с фиксированной шириной
4. Ошибки короткой записи и переполнения поля
5. decode_record и повторяющиеся имена
"""

import logging

import pytest
from pydantic import ValidationError

from bcd_codec.core.codec import (
    EBCDIC_ZONED,
    DecimalEncoding,
    DecimalOverflow,
    InvalidSignPart,
)
from bcd_codec.core.domain import DecimalField, decode_record


@pytest.fixture
def zoned_field() -> DecimalField:
    return DecimalField(name="qty", offset=2, length=3, encoding=DecimalEncoding.ZONED)


@pytest.fixture
def packed_field() -> DecimalField:
    return DecimalField(name="amount", offset=5, length=3, encoding=DecimalEncoding.PACKED)


@pytest.fixture
def record() -> bytes:
    # "AB" + zoned -123 + packed 12345
    return b"AB" + b"\x31\x32\x73" + b"\x12\x34\x5c" + b"ZZ"


class TestDecimalFieldModel:
    """Тесты модели"""

    def test_digits(self, zoned_field: DecimalField, packed_field: DecimalField) -> None:
        assert zoned_field.digits == 3
        assert packed_field.digits == 5
        assert zoned_field.end == 5
        assert packed_field.end == 8

    def test_encoding_from_string(self) -> None:
        field = DecimalField(name="x", offset=0, length=1, encoding="packed")
        assert field.encoding == DecimalEncoding.PACKED

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": "", "offset": 0, "length": 1, "encoding": "zoned"},
            {"name": "x", "offset": -1, "length": 1, "encoding": "zoned"},
            {"name": "x", "offset": 0, "length": 0, "encoding": "zoned"},
            {"name": "x", "offset": 0, "length": 1, "encoding": "binary"},
        ],
    )
    def test_invalid_definitions(self, kwargs: dict) -> None:
        with pytest.raises(ValidationError):
            DecimalField(**kwargs)

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            (
                {"encoding": "zoned", "packed_format": {"sign_positive": 0xF, "sign_negative": 0xB}},
                "packed_format is not allowed for zoned field 'x'",
            ),
            (
                {"encoding": "packed", "zoned_format": EBCDIC_ZONED},
                "zoned_format is not allowed for packed field 'x'",
            ),
        ],
    )
    def test_format_must_match_encoding(self, kwargs: dict, match: str) -> None:
        """Формат другого способа кодирования отклоняется"""
        with pytest.raises(ValidationError, match=match):
            DecimalField(name="x", offset=0, length=2, **kwargs)

    def test_frozen(self, zoned_field: DecimalField) -> None:
        with pytest.raises(ValidationError):
            zoned_field.offset = 0  # type: ignore[misc]


class TestExtract:
    """Тесты extract"""

    def test_extract(
        self, zoned_field: DecimalField, packed_field: DecimalField, record: bytes
    ) -> None:
        assert zoned_field.extract(record) == -123
        assert packed_field.extract(record) == 12345

    def test_extract_logs_debug(
        self, zoned_field: DecimalField, record: bytes, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="bcd_codec.core.domain.field"):
            zoned_field.extract(record)
        assert "Extracted field qty=-123" in caplog.text

    def test_record_too_short(self, packed_field: DecimalField) -> None:
        with pytest.raises(ValueError, match="record too short for field 'amount'"):
            packed_field.extract(b"\x00" * 7)

    def test_codec_error_propagates(self, zoned_field: DecimalField) -> None:
        with pytest.raises(InvalidSignPart, match="313243"):
            zoned_field.extract(b"AB\x31\x32\x43")

    def test_custom_zoned_format(self) -> None:
        field = DecimalField(
            name="x", offset=0, length=2, encoding="zoned", zoned_format=EBCDIC_ZONED
        )
        assert field.extract(b"\xf4\xd2") == -42


class TestPackAndInsert:
    """Тесты pack и insert"""

    def test_pack_fixed_width(
        self, zoned_field: DecimalField, packed_field: DecimalField
    ) -> None:
        assert zoned_field.pack(7) == b"\x30\x30\x37"
        assert packed_field.pack(-7) == b"\x00\x00\x7d"

    def test_pack_overflow(self, packed_field: DecimalField) -> None:
        with pytest.raises(DecimalOverflow, match="does not fit in 5 digits"):
            packed_field.pack(123456)

    def test_insert_in_place(
        self, zoned_field: DecimalField, packed_field: DecimalField, record: bytes
    ) -> None:
        buffer = bytearray(record)
        zoned_field.insert(buffer, 45)
        packed_field.insert(buffer, -99999)

        assert bytes(buffer[:2]) == b"AB"
        assert bytes(buffer[-2:]) == b"ZZ"
        assert zoned_field.extract(buffer) == 45
        assert packed_field.extract(buffer) == -99999
        assert len(buffer) == len(record)

    def test_insert_record_too_short(self, packed_field: DecimalField) -> None:
        with pytest.raises(ValueError, match="record too short"):
            packed_field.insert(bytearray(4), 1)


class TestDecodeRecord:
    """Тесты decode_record"""

    def test_decode_record(
        self, zoned_field: DecimalField, packed_field: DecimalField, record: bytes
    ) -> None:
        assert decode_record(record, [zoned_field, packed_field]) == {
            "qty": -123,
            "amount": 12345,
        }

    def test_duplicate_names(self, zoned_field: DecimalField, record: bytes) -> None:
        with pytest.raises(ValueError, match="duplicate field name: 'qty'"):
            decode_record(record, [zoned_field, zoned_field])
