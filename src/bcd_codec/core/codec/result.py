"""
Decode Result - декодирование без исключений

Обёртки над decode_zoned/decode_packed, возвращающие результат с явным
видом ошибки вместо исключения. Удобно при пакетной обработке записей,
когда повреждённое поле нужно пометить, а не прерывать весь проход.
"""

from dataclasses import dataclass
from typing import Optional, cast

from bcd_codec.core.codec.errors import DecimalCodecError, DecimalErrorKind
from bcd_codec.core.codec.formats import (
    ASCII_ZONED,
    STANDARD_PACKED,
    PackedFormat,
    ZonedFormat,
)
from bcd_codec.core.codec.packed import decode_packed
from bcd_codec.core.codec.zoned import decode_zoned


@dataclass(frozen=True)
class DecodeResult:
    """Результат декодирования: ровно одно из value/error заполнено."""

    value: Optional[int] = None
    error: Optional[DecimalCodecError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value and error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[DecimalErrorKind]:
        """Вид ошибки или None при успехе."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> int:
        """
        Значение при успехе.

        Raises:
            DecimalCodecError: Сохранённая ошибка декодирования
        """
        if self.error is not None:
            raise self.error
        return cast(int, self.value)


def try_decode_zoned(data: bytes, fmt: ZonedFormat = ASCII_ZONED) -> DecodeResult:
    """decode_zoned, но ошибки кодека возвращаются в DecodeResult."""
    try:
        return DecodeResult(value=decode_zoned(data, fmt))
    except DecimalCodecError as e:
        return DecodeResult(error=e)


def try_decode_packed(data: bytes, fmt: PackedFormat = STANDARD_PACKED) -> DecodeResult:
    """decode_packed, но ошибки кодека возвращаются в DecodeResult."""
    try:
        return DecodeResult(value=decode_packed(data, fmt))
    except DecimalCodecError as e:
        return DecodeResult(error=e)
