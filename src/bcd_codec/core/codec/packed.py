"""
Packed Decimal - упакованное десятичное представление int64

Две цифры на байт (старший полубайт - первая), последний полубайт
последнего байта - знак. Если количество цифр чётное, слева добавляется
ведущий ноль, чтобы вместе со знаком получилось целое число байтов.

Пример (знаки 0xC/0xD):
    0    -> 0C
    -1   -> 1D
    123  -> 12 3C
    1234 -> 01 23 4C

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode_packed(encode_packed(n)) == n для любого int64 n
2. Сначала проверяются все полубайты цифр, затем полубайт знака
3. Любая ошибка фатальна для вызова и содержит hex-дамп входа целиком
"""

from bcd_codec.core.codec.errors import EmptyInput, InvalidDigitPart, InvalidSignPart
from bcd_codec.core.codec.formats import STANDARD_PACKED, PackedFormat
from bcd_codec.core.codec.nibbles import (
    digits_to_int64,
    hex_dump,
    high_nibble,
    is_digit,
    join_nibbles,
    low_nibble,
    magnitude_digits,
    validate_int64,
)


def packed_length(digits: int) -> int:
    """
    Длина упакованного поля в байтах для заданного количества цифр.

    Examples:
        >>> packed_length(1)
        1
        >>> packed_length(4)
        3
    """
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    return digits // 2 + 1


def packed_digit_capacity(length: int) -> int:
    """Максимальное количество цифр в упакованном поле длиной length байт."""
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    return 2 * length - 1


def encode_packed(
    value: int,
    digits: int | None = None,
    fmt: PackedFormat = STANDARD_PACKED,
) -> bytes:
    """
    Кодирование целого в упакованное десятичное.

    Args:
        value: Знаковое 64-битное целое
        digits: Фиксированная ширина в цифрах (optional, дополняется нулями)
        fmt: Полубайты знака (default: STANDARD_PACKED)

    Returns:
        Байты длиной packed_length(количество цифр)

    Raises:
        TypeError: Если value не int
        ValueError: Если digits < 1
        DecimalOverflow: Если value вне int64 или не помещается в digits

    Examples:
        >>> encode_packed(-123).hex()
        '123d'
        >>> encode_packed(5, digits=4).hex()
        '00005c'
    """
    validate_int64(value)
    nibbles = magnitude_digits(value, digits)

    # Вместе со знаком количество полубайтов должно быть чётным
    if len(nibbles) % 2 == 0:
        nibbles.insert(0, 0)
    nibbles.append(fmt.sign_nibble(value < 0))

    return bytes(
        join_nibbles(nibbles[i], nibbles[i + 1]) for i in range(0, len(nibbles), 2)
    )


def decode_packed(data: bytes, fmt: PackedFormat = STANDARD_PACKED) -> int:
    """
    Декодирование упакованного десятичного в целое.

    Args:
        data: Упакованное десятичное (bytes-like)
        fmt: Полубайты знака (default: STANDARD_PACKED)

    Returns:
        Знаковое 64-битное целое

    Raises:
        EmptyInput: Если вход пуст
        InvalidDigitPart: Если полубайт цифры вне 0..9
        InvalidSignPart: Если последний полубайт не является знаком
        DecimalOverflow: Если значение вне int64
    """
    data = bytes(data)
    if not data:
        raise EmptyInput("empty decimal input", data=data)

    nibbles: list[int] = []
    for byte in data:
        nibbles.append(high_nibble(byte))
        nibbles.append(low_nibble(byte))

    numbers, sign = nibbles[:-1], nibbles[-1]

    if not all(is_digit(n) for n in numbers):
        raise InvalidDigitPart(f"invalid digit part: {hex_dump(data)}", data=data)

    if sign == fmt.sign_negative:
        negative = True
    elif sign == fmt.sign_positive:
        negative = False
    else:
        raise InvalidSignPart(f"invalid sign part: {hex_dump(data)}", data=data)

    return digits_to_int64(numbers, negative, data)
