import pytest

from nxbench.crc import crc16, crcu8, crcu16, crcu32, parseval


@pytest.mark.parametrize(
    "seeds, size, expected",
    [
        ((0, 0, 0x66), 2000, 0x8A02),
        ((0x3415, 0x3415, 0x66), 2000, 0x7B05),
        ((0x8, 0x8, 0x8), 400, 0x4EAF),
        ((0, 0, 0x66), 666, 0xE9F5),
        ((0x3415, 0x3415, 0x66), 666, 0x18F2),
    ],
)
def test_known_seed_crcs(seeds, size, expected):
    crc = 0
    for value in (*seeds, size):
        crc = crc16(value, crc)
    assert crc == expected


def test_crcu8_zero_is_fixed_point():
    assert crcu8(0, 0) == 0


@pytest.mark.parametrize("a, b, c1, c2", [(0x12, 0xF0, 0x1234, 0xBEEF), (0xFF, 0x01, 0, 0xFFFF)])
def test_crcu8_is_linear(a, b, c1, c2):
    assert crcu8(a ^ b, c1 ^ c2) == crcu8(a, c1) ^ crcu8(b, c2)


def test_crcu8_stays_in_16_bits():
    results = {crcu8(d, 0xFFFF) for d in range(256)}
    assert all(0 <= r <= 0xFFFF for r in results)
    assert len(results) == 256


def test_crcu16_is_two_bytes():
    assert crcu16(0xABCD, 0x55AA) == crcu8(0xAB, crcu8(0xCD, 0x55AA))


def test_crc16_treats_negative_as_unsigned():
    assert crc16(-1, 0x1234) == crcu16(0xFFFF, 0x1234)
    assert crc16(-2, 0) == crcu16(0xFFFE, 0)


def test_crcu32_is_two_halves():
    value = 0xDEADBEEF
    assert crcu32(value, 7) == crcu16(value >> 16, crcu16(value & 0xFFFF, 7))


def test_parseval_decimal_and_hex():
    assert parseval("123") == 123
    assert parseval("0x1f") == int("1f", 16)
    assert parseval("-0x10") == -parseval("0x10")


def test_parseval_suffixes():
    assert parseval("3K") == parseval("3") * 1024
    assert parseval("2M") == parseval("2K") * 1024


def test_parseval_stops_at_non_digit():
    assert parseval("12abc") == 12
    assert parseval("0x1F") == 1
    assert parseval("") == 0
    assert parseval("-") == 0