"""
Errors - таксономия ошибок десятичного кодека

Ошибки разделены на два семейства:
- MalformedDecimal (ValueError): вход повреждён или не соответствует формату
- DecimalOverflow (OverflowError): значение вне диапазона int64

Каждая ошибка декодирования несёт полный вход (data) и его hex-дамп,
чтобы по сообщению можно было восстановить исходные байты записи.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class DecimalErrorKind(str, Enum):
    """Вид ошибки кодека"""

    INVALID_ZONE_PART = "INVALID_ZONE_PART"
    INVALID_SIGN_PART = "INVALID_SIGN_PART"
    INVALID_DIGIT_PART = "INVALID_DIGIT_PART"
    EMPTY_INPUT = "EMPTY_INPUT"
    OVERFLOW = "OVERFLOW"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalCodecError(Exception):
    """
    Базовая ошибка кодека.

    Attributes:
        kind: Вид ошибки (DecimalErrorKind)
        data: Вход целиком (пустые bytes для ошибок кодирования)
    """

    kind: DecimalErrorKind

    def __init__(self, message: str, data: bytes = b"") -> None:
        super().__init__(message)
        self.data = bytes(data)

    @property
    def hex_dump(self) -> str:
        """Hex-дамп входа (верхний регистр, без разделителей)."""
        return self.data.hex().upper()


class MalformedDecimal(DecimalCodecError, ValueError):
    """Вход не является корректным зонным или упакованным десятичным."""


class InvalidZonePart(MalformedDecimal):
    """Старший полубайт не последнего байта зонного числа не равен зоне."""

    kind = DecimalErrorKind.INVALID_ZONE_PART


class InvalidSignPart(MalformedDecimal):
    """Полубайт в позиции знака не является ни "+", ни "-"."""

    kind = DecimalErrorKind.INVALID_SIGN_PART


class InvalidDigitPart(MalformedDecimal):
    """Полубайт в позиции цифры вне диапазона 0..9."""

    kind = DecimalErrorKind.INVALID_DIGIT_PART


class EmptyInput(MalformedDecimal):
    """Пустой вход: нет ни одной цифры и нет знака."""

    kind = DecimalErrorKind.EMPTY_INPUT


class DecimalOverflow(DecimalCodecError, OverflowError):
    """
    Значение вне диапазона знакового 64-битного целого.

    Отдельный вид ошибки: вход синтаксически корректен, но число
    слишком велико по модулю.
    """

    kind = DecimalErrorKind.OVERFLOW
