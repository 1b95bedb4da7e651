"""
Formats - конфигурация полубайтов зонного и упакованного форматов

Immutable Pydantic модели, описывающие, какие значения полубайтов
считаются зоной и знаком. Значения по умолчанию соответствуют
ASCII-варианту (зона 0x3, знаки 0x3/0x7) и стандартному упакованному
формату (знаки 0xC/0xD).

Пресеты:
- ASCII_ZONED: зона 0x3, "+" 0x3, "-" 0x7
- EBCDIC_ZONED: зона 0xF, "+" 0xC, "-" 0xD, беззнаковое 0xF
- STANDARD_PACKED: "+" 0xC, "-" 0xD
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from bcd_codec.core.codec.nibbles import (
    DIGIT_MAX,
    NIBBLE_MAX,
    PACKED_SIGN_NEGATIVE,
    PACKED_SIGN_POSITIVE,
    ZONE_NIBBLE_ASCII,
    ZONE_NIBBLE_EBCDIC,
    ZONED_SIGN_NEGATIVE_ASCII,
    ZONED_SIGN_NEGATIVE_EBCDIC,
    ZONED_SIGN_POSITIVE_ASCII,
    ZONED_SIGN_POSITIVE_EBCDIC,
    ZONED_SIGN_UNSIGNED_EBCDIC,
)


# =============================================================================
# ENUMS
# =============================================================================


class DecimalEncoding(str, Enum):
    """Способ кодирования числового поля"""

    ZONED = "zoned"
    PACKED = "packed"


# =============================================================================
# FORMAT MODELS
# =============================================================================


class ZonedFormat(BaseModel):
    """
    Полубайты зонного десятичного формата.

    Зона может совпадать со знаком "+" (ASCII-вариант), но знаки
    "+" и "-" обязаны различаться.

    sign_unsigned - дополнительный полубайт, который при декодировании
    читается как "+" (беззнаковые поля). При кодировании не используется.
    """

    zone_nibble: int = Field(
        ZONE_NIBBLE_ASCII, ge=0, le=NIBBLE_MAX, description="Зона (старший полубайт)"
    )
    sign_positive: int = Field(
        ZONED_SIGN_POSITIVE_ASCII, ge=0, le=NIBBLE_MAX, description="Знак '+'"
    )
    sign_negative: int = Field(
        ZONED_SIGN_NEGATIVE_ASCII, ge=0, le=NIBBLE_MAX, description="Знак '-'"
    )
    sign_unsigned: Optional[int] = Field(
        None, ge=0, le=NIBBLE_MAX, description="Знак беззнакового поля (читается как '+')"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_distinct_signs(self) -> "ZonedFormat":
        if self.sign_positive == self.sign_negative:
            raise ValueError(
                f"sign_positive and sign_negative must differ, "
                f"both are 0x{self.sign_positive:X}"
            )
        if self.sign_unsigned == self.sign_negative:
            raise ValueError(
                f"sign_unsigned must differ from sign_negative, "
                f"both are 0x{self.sign_negative:X}"
            )
        return self

    def sign_nibble(self, negative: bool) -> int:
        """Полубайт знака для кодирования."""
        return self.sign_negative if negative else self.sign_positive

    def is_positive_sign(self, nibble: int) -> bool:
        """Полубайт в позиции знака означает "+" (включая беззнаковое поле)."""
        return nibble == self.sign_positive or nibble == self.sign_unsigned


class PackedFormat(BaseModel):
    """
    Полубайты знака упакованного десятичного формата.

    Знак обязан быть не цифрой (0xA..0xF), иначе последний полубайт
    невозможно отличить от цифры.
    """

    sign_positive: int = Field(
        PACKED_SIGN_POSITIVE, gt=DIGIT_MAX, le=NIBBLE_MAX, description="Знак '+'"
    )
    sign_negative: int = Field(
        PACKED_SIGN_NEGATIVE, gt=DIGIT_MAX, le=NIBBLE_MAX, description="Знак '-'"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_distinct_signs(self) -> "PackedFormat":
        if self.sign_positive == self.sign_negative:
            raise ValueError(
                f"sign_positive and sign_negative must differ, "
                f"both are 0x{self.sign_positive:X}"
            )
        return self

    def sign_nibble(self, negative: bool) -> int:
        """Полубайт знака для кодирования."""
        return self.sign_negative if negative else self.sign_positive


# =============================================================================
# PRESETS
# =============================================================================

ASCII_ZONED = ZonedFormat()

EBCDIC_ZONED = ZonedFormat(
    zone_nibble=ZONE_NIBBLE_EBCDIC,
    sign_positive=ZONED_SIGN_POSITIVE_EBCDIC,
    sign_negative=ZONED_SIGN_NEGATIVE_EBCDIC,
    sign_unsigned=ZONED_SIGN_UNSIGNED_EBCDIC,
)

STANDARD_PACKED = PackedFormat()
