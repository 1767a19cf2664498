"""16-bit CRC helpers and seed-value parsing used by the benchmark kernels."""

from itertools import takewhile

_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdef")


def crcu8(data: int, crc: int) -> int:
    """Fold one byte into a 16-bit CRC."""
    data &= 0xFF
    crc &= 0xFFFF
    for _ in range(8):
        carry = (data ^ crc) & 1
        data >>= 1
        if carry:
            crc ^= 0x4002
        crc >>= 1
        if carry:
            crc |= 0x8000
    return crc


def crcu16(newval: int, crc: int) -> int:
    """Fold an unsigned 16-bit value into the CRC, low byte first."""
    newval &= 0xFFFF
    crc = crcu8(newval & 0xFF, crc)
    return crcu8(newval >> 8, crc)


def crc16(newval: int, crc: int) -> int:
    """Fold a signed 16-bit value into the CRC."""
    return crcu16(newval & 0xFFFF, crc)


def crcu32(newval: int, crc: int) -> int:
    """Fold a 32-bit value into the CRC, low half first."""
    newval &= 0xFFFFFFFF
    crc = crc16(newval & 0xFFFF, crc)
    return crc16(newval >> 16, crc)


def parseval(text: str) -> int:
    """Parse a seed argument: optional '-', optional '0x', digits, then 'K' or 'M'."""
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if text.startswith("0x"):
        text = text[2:]
        allowed, base = _HEX_DIGITS, 16
    else:
        allowed, base = _DEC_DIGITS, 10
    digits = "".join(takewhile(allowed.__contains__, text))
    value = int(digits, base) if digits else 0
    suffix = text[len(digits):len(digits) + 1]
    if suffix == "K":
        value *= 1024
    elif suffix == "M":
        value *= 1024 * 1024
    return -value if negative else value