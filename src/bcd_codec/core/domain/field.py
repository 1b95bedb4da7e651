"""
DecimalField - числовое поле фиксированной позиции в записи

Immutable Pydantic модель, описывающая, где в записи лежит зонное или
упакованное число и какой ширины оно. Используется читателями и
писателями записей для извлечения и записи значений.
"""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, Field, model_validator

from bcd_codec.core.codec import (
    ASCII_ZONED,
    STANDARD_PACKED,
    DecimalEncoding,
    PackedFormat,
    ZonedFormat,
    decode_packed,
    decode_zoned,
    encode_packed,
    encode_zoned,
    packed_digit_capacity,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FIELD MODEL
# =============================================================================


class DecimalField(BaseModel):
    """
    Описание числового поля записи.

    Ширина поля в цифрах определяется длиной в байтах:
    - ZONED: digits == length
    - PACKED: digits == 2 * length - 1
    """

    name: str = Field(..., min_length=1, description="Имя поля")
    offset: int = Field(..., ge=0, description="Смещение от начала записи (байты)")
    length: int = Field(..., ge=1, description="Длина поля (байты)")
    encoding: DecimalEncoding = Field(..., description="Способ кодирования (zoned/packed)")

    zoned_format: Optional[ZonedFormat] = Field(
        None, description="Полубайты зонного формата (default: ASCII_ZONED)"
    )
    packed_format: Optional[PackedFormat] = Field(
        None, description="Полубайты упакованного формата (default: STANDARD_PACKED)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_format_matches_encoding(self) -> "DecimalField":
        """Формат другого способа кодирования не применяется и считается ошибкой."""
        if self.encoding == DecimalEncoding.ZONED and self.packed_format is not None:
            raise ValueError(f"packed_format is not allowed for zoned field {self.name!r}")
        if self.encoding == DecimalEncoding.PACKED and self.zoned_format is not None:
            raise ValueError(f"zoned_format is not allowed for packed field {self.name!r}")
        return self

    @property
    def end(self) -> int:
        """Смещение первого байта после поля."""
        return self.offset + self.length

    @property
    def digits(self) -> int:
        """Ширина поля в цифрах."""
        if self.encoding == DecimalEncoding.ZONED:
            return self.length
        return packed_digit_capacity(self.length)

    def decode(self, data: bytes) -> int:
        """Декодирование байтов поля (без учёта смещения)."""
        if self.encoding == DecimalEncoding.ZONED:
            return decode_zoned(data, self.zoned_format or ASCII_ZONED)
        return decode_packed(data, self.packed_format or STANDARD_PACKED)

    def extract(self, record: bytes) -> int:
        """
        Извлечение значения поля из записи.

        Args:
            record: Запись целиком (bytes-like)

        Returns:
            Значение поля

        Raises:
            ValueError: Если запись короче, чем offset + length
            DecimalCodecError: Если байты поля некорректны
        """
        if len(record) < self.end:
            raise ValueError(
                f"record too short for field {self.name!r}: "
                f"need {self.end} bytes, got {len(record)}"
            )

        value = self.decode(bytes(record[self.offset : self.end]))
        logger.debug("Extracted field %s=%d at [%d:%d]", self.name, value, self.offset, self.end)
        return value

    def pack(self, value: int) -> bytes:
        """
        Кодирование значения в байты поля ровно длиной length.

        Raises:
            DecimalOverflow: Если значение не помещается в поле
        """
        if self.encoding == DecimalEncoding.ZONED:
            return encode_zoned(value, self.digits, self.zoned_format or ASCII_ZONED)
        return encode_packed(value, self.digits, self.packed_format or STANDARD_PACKED)

    def insert(self, record: bytearray, value: int) -> None:
        """
        Запись значения в поле записи на месте.

        Raises:
            ValueError: Если запись короче, чем offset + length
            DecimalOverflow: Если значение не помещается в поле
        """
        if len(record) < self.end:
            raise ValueError(
                f"record too short for field {self.name!r}: "
                f"need {self.end} bytes, got {len(record)}"
            )

        record[self.offset : self.end] = self.pack(value)
        logger.debug("Inserted field %s=%d at [%d:%d]", self.name, value, self.offset, self.end)


# =============================================================================
# RECORD DECODING
# =============================================================================


def decode_record(record: bytes, fields: Iterable[DecimalField]) -> dict[str, int]:
    """
    Извлечение всех числовых полей записи.

    Args:
        record: Запись целиком
        fields: Описания полей

    Returns:
        Словарь имя поля -> значение (в порядке fields)

    Raises:
        ValueError: Если имена полей повторяются или запись слишком короткая
        DecimalCodecError: Если байты какого-либо поля некорректны
    """
    values: dict[str, int] = {}
    for field in fields:
        if field.name in values:
            raise ValueError(f"duplicate field name: {field.name!r}")
        values[field.name] = field.extract(record)
    return values
