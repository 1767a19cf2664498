"""Matrix manipulation kernel on 16-bit data with 32-bit results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, Sequence

from nxbench.crc import crc16


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _s32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _c_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend, as integer division truncates."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _check(n: int, *matrices: Sequence[int]) -> int:
    if n < 0:
        raise ValueError("matrix dimension must not be negative")
    size = n * n
    for matrix in matrices:
        if len(matrix) < size:
            raise ValueError(f"matrix holds {len(matrix)} elements, {size} needed")
    return size


def _rows(matrix: Sequence[int], n: int) -> list[Sequence[int]]:
    return [matrix[start:start + n] for start in range(0, n * n, n)] if n else []


@dataclass
class MatrixParams:
    """Dimension and storage of the input, operator and result matrices."""

    n: int
    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)
    c: list[int] = field(default_factory=list)


def init_matrix(blksize: int, seed: int) -> MatrixParams:
    """Pick the largest dimension that fits ``blksize`` and fill A and B from ``seed``."""
    if blksize <= 0:
        raise ValueError("block size must be positive")
    seed = _s32(seed) or 1
    i = j = 0
    while j < blksize:
        i += 1
        j = i * i * 2 * 4
    n = i - 1
    a: list[int] = []
    b: list[int] = []
    for order in range(1, n * n + 1):
        seed = _c_mod(_s32(order * seed), 65536)
        b_val = _s16(seed + order)
        b.append(b_val)
        a.append(_s16(b_val + order) & 0xFF)
    return MatrixParams(n=n, a=a, b=b, c=[0] * (n * n))


def matrix_sum(n: int, c: Sequence[int], clipval: int) -> int:
    """Score the result matrix: +1 per rising element, +10 whenever the running sum clips."""
    size = _check(n, c)
    tmp = prev = 0
    ret = 0
    for cur in c[:size]:
        tmp = _s32(tmp + cur)
        if tmp > clipval:
            ret += 10
            tmp = 0
        elif cur > prev:
            ret += 1
        prev = cur
    return _s16(ret)


def matrix_mul_const(n: int, c: MutableSequence[int], a: Sequence[int], val: int) -> None:
    """C = A * val."""
    size = _check(n, c, a)
    c[:size] = [_s32(x * val) for x in a[:size]]


def matrix_add_const(n: int, a: MutableSequence[int], val: int) -> None:
    """A += val, element-wise, wrapping at 16 bits."""
    size = _check(n, a)
    a[:size] = [_s16(x + val) for x in a[:size]]


def matrix_mul_vect(n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]) -> None:
    """C[i] = row i of A times the vector formed by the first n elements of B."""
    _check(n, c, a, b)
    vector = b[:n]
    c[:n] = [_s32(sum(x * y for x, y in zip(row, vector))) for row in _rows(a, n)]


def matrix_mul_matrix(n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]) -> None:
    """C = A x B."""
    size = _check(n, c, a, b)
    columns = [b[col:size:n] for col in range(n)]
    c[:size] = [
        _s32(sum(x * y for x, y in zip(row, column)))
        for row in _rows(a, n)
        for column in columns
    ]


def _bit_products(row: Sequence[int], column: Sequence[int]) -> int:
    total = 0
    for x, y in zip(row, column):
        tmp = _s32(x * y)
        total += ((tmp >> 2) & 0xF) * ((tmp >> 5) & 0x7F)
    return _s32(total)


def matrix_mul_matrix_bitextract(
    n: int, c: MutableSequence[int], a: Sequence[int], b: Sequence[int]
) -> None:
    """Multiply A by B, summing products of two bit fields of each term."""
    size = _check(n, c, a, b)
    columns = [b[col:size:n] for col in range(n)]
    c[:size] = [_bit_products(row, column) for row in _rows(a, n) for column in columns]


def matrix_test(
    n: int, c: MutableSequence[int], a: MutableSequence[int], b: Sequence[int], val: int
) -> int:
    """Run every matrix step, CRC the scores; A is restored afterwards."""
    val = _s16(val)
    clipval = _s16(0xF000 | val)
    crc = 0
    matrix_add_const(n, a, val)
    matrix_mul_const(n, c, a, val)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_vect(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix_bitextract(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_add_const(n, a, -val)
    return _s16(crc)


def bench_matrix(params: MatrixParams, seed: int, crc: int) -> int:
    """Run one matrix test with ``seed`` as the constant and fold it into ``crc``."""
    result = matrix_test(params.n, params.c, params.a, params.b, _s16(seed))
    return crc16(result, crc)