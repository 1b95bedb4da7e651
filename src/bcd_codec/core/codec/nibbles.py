"""
Nibbles - примитивы полубайтов и диапазона int64

Общие константы и вспомогательные функции для зонных и упакованных
десятичных форматов:
- Значения полубайтов по умолчанию (зона, знаки)
- Границы знакового 64-битного целого
- Разбиение байта на полубайты и сборка обратно
- Hex-дамп входа для сообщений об ошибках
- Сборка int64 из цифр с проверкой переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цифра - полубайт в диапазоне 0..9, всё остальное не цифра
2. Результат декодирования всегда в диапазоне [INT64_MIN, INT64_MAX]
3. Hex-дамп покрывает вход целиком (верхний регистр, без разделителей)
"""

from typing import Final, Iterable

from bcd_codec.core.codec.errors import DecimalOverflow

# =============================================================================
# ДИАПАЗОН INT64
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# =============================================================================
# ПОЛУБАЙТЫ ПО УМОЛЧАНИЮ
# =============================================================================

NIBBLE_MAX: Final[int] = 0xF
DIGIT_MAX: Final[int] = 9

# Зонный формат (ASCII): зона 0x3, знак "+" 0x3, знак "-" 0x7
ZONE_NIBBLE_ASCII: Final[int] = 0x3
ZONED_SIGN_POSITIVE_ASCII: Final[int] = 0x3
ZONED_SIGN_NEGATIVE_ASCII: Final[int] = 0x7

# Зонный формат (EBCDIC): зона 0xF, знак "+" 0xC, знак "-" 0xD
ZONE_NIBBLE_EBCDIC: Final[int] = 0xF
ZONED_SIGN_POSITIVE_EBCDIC: Final[int] = 0xC
ZONED_SIGN_NEGATIVE_EBCDIC: Final[int] = 0xD
# Беззнаковое поле (PIC 9(n)): в позиции знака стоит зона 0xF
ZONED_SIGN_UNSIGNED_EBCDIC: Final[int] = 0xF

# Упакованный формат: знак "+" 0xC, знак "-" 0xD
PACKED_SIGN_POSITIVE: Final[int] = 0xC
PACKED_SIGN_NEGATIVE: Final[int] = 0xD


# =============================================================================
# РАБОТА С ПОЛУБАЙТАМИ
# =============================================================================


def high_nibble(byte: int) -> int:
    """Старшие 4 бита байта."""
    return (byte >> 4) & NIBBLE_MAX


def low_nibble(byte: int) -> int:
    """Младшие 4 бита байта."""
    return byte & NIBBLE_MAX


def join_nibbles(high: int, low: int) -> int:
    """Сборка байта из двух полубайтов (high - старший)."""
    return ((high & NIBBLE_MAX) << 4) | (low & NIBBLE_MAX)


def is_digit(nibble: int) -> bool:
    """Проверка, что полубайт является десятичной цифрой (0..9)."""
    return 0 <= nibble <= DIGIT_MAX


def hex_dump(data: bytes) -> str:
    """
    Hex-представление входа для сообщений об ошибках.

    Examples:
        >>> hex_dump(b"\\x1f\\x34")
        '1F34'
        >>> hex_dump(b"")
        ''
    """
    return bytes(data).hex().upper()


# =============================================================================
# ЦИФРЫ ↔ INT64
# =============================================================================


def validate_int64(value: int) -> int:
    """
    Валидация входного значения для кодирования.

    Args:
        value: Кодируемое целое

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        DecimalOverflow: Если value вне диапазона int64
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")

    if value < INT64_MIN or value > INT64_MAX:
        raise DecimalOverflow(f"value {value} is outside signed 64-bit range")

    return value


def magnitude_digits(value: int, digits: int | None = None) -> list[int]:
    """
    Цифры модуля значения (старшая первой), с дополнением нулями слева.

    Args:
        value: Целое (знак игнорируется)
        digits: Фиксированная ширина в цифрах (optional)

    Returns:
        Список цифр длиной len(str(abs(value))) или digits

    Raises:
        ValueError: Если digits < 1
        DecimalOverflow: Если значение не помещается в digits цифр

    Examples:
        >>> magnitude_digits(-123)
        [1, 2, 3]
        >>> magnitude_digits(5, digits=3)
        [0, 0, 5]
    """
    text = str(abs(value))

    if digits is not None:
        if digits < 1:
            raise ValueError(f"digits must be positive, got {digits}")
        if len(text) > digits:
            raise DecimalOverflow(f"value {value} does not fit in {digits} digits")
        text = text.rjust(digits, "0")

    return [int(c) for c in text]


def digits_to_int64(digits: Iterable[int], negative: bool, data: bytes) -> int:
    """
    Сборка int64 из последовательности цифр.

    Проверяется именно величина числа (а не количество цифр), поэтому
    ведущие нули не приводят к переполнению.

    Args:
        digits: Цифры 0..9, старшая первой
        negative: Знак результата
        data: Исходный вход (для сообщения об ошибке)

    Returns:
        Значение в диапазоне [INT64_MIN, INT64_MAX]

    Raises:
        DecimalOverflow: Если значение вне диапазона int64
    """
    magnitude = 0
    for digit in digits:
        magnitude = magnitude * 10 + digit

    value = -magnitude if negative else magnitude

    if value < INT64_MIN or value > INT64_MAX:
        raise DecimalOverflow(
            f"value out of signed 64-bit range: {hex_dump(data)}", data=data
        )

    return value
