import pytest

from nxbench.matrix import (
    MatrixParams,
    bench_matrix,
    init_matrix,
    matrix_add_const,
    matrix_mul_const,
    matrix_mul_matrix,
    matrix_mul_matrix_bitextract,
    matrix_mul_vect,
    matrix_sum,
    matrix_test,
)


@pytest.mark.parametrize("blksize", [9, 100, 666, 2000])
def test_init_dimension_fits_block(blksize):
    params = init_matrix(blksize, 3)
    n = params.n
    assert n * n * 8 < blksize <= (n + 1) * (n + 1) * 8
    assert len(params.a) == len(params.b) == len(params.c) == n * n


def test_init_values_ranges():
    params = init_matrix(2000, 0x3415)
    assert all(0 <= x <= 0xFF for x in params.a)
    assert all(-0x8000 <= x <= 0x7FFF for x in params.b)
    assert params.c == [0] * (params.n * params.n)


def test_init_deterministic_and_zero_seed_is_one():
    assert init_matrix(666, 0) == init_matrix(666, 1)
    assert init_matrix(666, 7) == init_matrix(666, 7)
    assert init_matrix(666, 7).b != init_matrix(666, 8).b


def test_init_rejects_empty_block():
    with pytest.raises(ValueError):
        init_matrix(0, 1)


def test_add_const_wraps_sixteen_bits():
    a = [32767, 5]
    matrix_add_const(1, a, 1)
    assert a == [-32768, 5]


def test_add_const_round_trip():
    a = [1, -2, 300, 4000]
    matrix_add_const(2, a, 123)
    matrix_add_const(2, a, -123)
    assert a == [1, -2, 300, 4000]


def test_mul_const_by_one_copies():
    a = [3, -4, 5, 6]
    c = [0] * 4
    matrix_mul_const(2, c, a, 1)
    assert c == a


def test_mul_matrix_identity():
    a = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    identity = [1, 0, 0, 0, 1, 0, 0, 0, 1]
    c = [0] * 9
    matrix_mul_matrix(3, c, a, identity)
    assert c == a
    matrix_mul_matrix(3, c, identity, a)
    assert c == a


def test_mul_vect_picks_first_column():
    a = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    b = [1, 0, 0, 9, 9, 9, 9, 9, 9]
    c = [0] * 9
    matrix_mul_vect(3, c, a, b)
    assert c[:3] == [a[0], a[3], a[6]]
    assert c[3:] == [0] * 6


def test_bitextract_bounds():
    params = init_matrix(2000, 11)
    n = params.n
    matrix_mul_matrix_bitextract(n, params.c, params.a, params.b)
    assert all(0 <= x <= n * 15 * 127 for x in params.c)


def test_matrix_sum_counts_rises():
    assert matrix_sum(2, [1, 2, 3, 4], 1000) == 4


def test_matrix_sum_rejects_short_matrix():
    with pytest.raises(ValueError):
        matrix_sum(3, [1, 2], 10)


def test_matrix_test_restores_input():
    params = init_matrix(2000, 5)
    original = list(params.a)
    result = matrix_test(params.n, params.c, params.a, params.b, 7)
    assert params.a == original
    assert -0x8000 <= result <= 0x7FFF


def test_bench_matrix_repeatable():
    params = init_matrix(666, 0x3415)
    first = bench_matrix(params, 0x22, 0)
    second = bench_matrix(params, 0x22, 0)
    assert first == second
    assert 0 <= first <= 0xFFFF


def test_params_dataclass_defaults():
    params = MatrixParams(n=2)
    assert params.a == params.b == params.c == []