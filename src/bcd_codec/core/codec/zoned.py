"""
Zoned Decimal - зонное десятичное представление int64

Одна цифра на байт:
- старший полубайт каждого байта, кроме последнего, - зона;
- старший полубайт последнего байта - знак;
- младший полубайт каждого байта - цифра 0..9.

Пример (ASCII, зона 0x3, знаки 0x3/0x7):
    123  -> 31 32 33
    -123 -> 31 32 73

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode_zoned(encode_zoned(n)) == n для любого int64 n
2. Проверки выполняются побайтно: сначала зона/знак, затем цифра
3. Любая ошибка фатальна для вызова и содержит hex-дамп входа целиком
"""

from bcd_codec.core.codec.errors import (
    EmptyInput,
    InvalidDigitPart,
    InvalidSignPart,
    InvalidZonePart,
)
from bcd_codec.core.codec.formats import ASCII_ZONED, ZonedFormat
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


def zoned_length(digits: int) -> int:
    """Длина зонного поля в байтах для заданного количества цифр."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    return digits


def encode_zoned(
    value: int,
    digits: int | None = None,
    fmt: ZonedFormat = ASCII_ZONED,
) -> bytes:
    """
    Кодирование целого в зонное десятичное.

    Args:
        value: Знаковое 64-битное целое
        digits: Фиксированная ширина в цифрах (optional, дополняется нулями)
        fmt: Полубайты зоны и знака (default: ASCII_ZONED)

    Returns:
        Байты длиной в количество цифр

    Raises:
        TypeError: Если value не int
        ValueError: Если digits < 1
        DecimalOverflow: Если value вне int64 или не помещается в digits

    Examples:
        >>> encode_zoned(-123).hex()
        '313273'
        >>> encode_zoned(5, digits=3).hex()
        '303035'
    """
    validate_int64(value)
    numbers = magnitude_digits(value, digits)

    encoded = bytearray(join_nibbles(fmt.zone_nibble, d) for d in numbers[:-1])
    encoded.append(join_nibbles(fmt.sign_nibble(value < 0), numbers[-1]))
    return bytes(encoded)


def decode_zoned(data: bytes, fmt: ZonedFormat = ASCII_ZONED) -> int:
    """
    Декодирование зонного десятичного в целое.

    Args:
        data: Зонное десятичное (bytes-like)
        fmt: Полубайты зоны и знака (default: ASCII_ZONED)

    Returns:
        Знаковое 64-битное целое

    Raises:
        EmptyInput: Если вход пуст
        InvalidZonePart: Если зона не последнего байта некорректна
        InvalidSignPart: Если знак последнего байта некорректен
        InvalidDigitPart: Если младший полубайт не цифра
        DecimalOverflow: Если значение вне int64
    """
    data = bytes(data)
    if not data:
        raise EmptyInput("empty decimal input", data=data)

    last = len(data) - 1
    negative = False
    numbers: list[int] = []

    for index, byte in enumerate(data):
        upper = high_nibble(byte)
        if index < last:
            if upper != fmt.zone_nibble:
                raise InvalidZonePart(f"invalid zone part: {hex_dump(data)}", data=data)
        elif upper == fmt.sign_negative:
            negative = True
        elif not fmt.is_positive_sign(upper):
            raise InvalidSignPart(f"invalid sign part: {hex_dump(data)}", data=data)

        digit = low_nibble(byte)
        if not is_digit(digit):
            raise InvalidDigitPart(f"invalid digit part: {hex_dump(data)}", data=data)
        numbers.append(digit)

    return digits_to_int64(numbers, negative, data)
