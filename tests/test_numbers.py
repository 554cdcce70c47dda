import pytest

from cpalgo.numbers import (
    MOD,
    binpow,
    fibonacci,
    linear_sieve,
    mat_mul,
    matrix_power,
    sieve,
    submasks,
)


def test_binpow_source_example():
    assert binpow(2, 10, MOD) == 2**10


@pytest.mark.parametrize(
    "a,b,m",
    [(3, 0, 7), (3, 13, 7), (123456789, 987654321, MOD), (-5, 3, 11), (10, 100, 97)],
)
def test_binpow_matches_builtin(a, b, m):
    assert binpow(a, b, m) == pow(a, b, m)


def test_binpow_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        binpow(2, 3, 0)


def test_mat_mul_identity():
    a = ((2, 3), (5, 7))
    identity = ((1, 0), (0, 1))
    assert mat_mul(a, identity) == a
    assert mat_mul(identity, a) == a


def test_mat_mul_dimension_mismatch():
    with pytest.raises(ValueError):
        mat_mul(((1, 2),), ((1, 2),))


def test_matrix_power_matches_repeated_product():
    a = ((1, 2), (3, 4))
    expected = a
    for _ in range(4):
        expected = mat_mul(expected, a)
    assert matrix_power(a, 5) == expected
    assert matrix_power(a, 0) == ((1, 0), (0, 1))


def test_matrix_power_negative_raises():
    with pytest.raises(ValueError):
        matrix_power(((1, 1), (1, 0)), -1)


def test_fibonacci_start_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(0, 60):
        assert fibonacci(n + 2) == (fibonacci(n + 1) + fibonacci(n)) % MOD
    big = 10**12
    assert fibonacci(big + 2) == (fibonacci(big + 1) + fibonacci(big)) % MOD


def test_sieve_small_primes():
    flags = sieve(20)
    assert len(flags) == 21
    assert [i for i, is_prime in enumerate(flags) if is_prime] == [
        2, 3, 5, 7, 11, 13, 17, 19,
    ]


def test_sieve_negative_raises():
    with pytest.raises(ValueError):
        sieve(-1)


def test_linear_sieve_agrees_with_sieve():
    n = 2000
    flags = sieve(n)
    lowest, primes = linear_sieve(n)
    assert primes == [i for i, is_prime in enumerate(flags) if is_prime]
    for i in range(2, n + 1):
        assert i % lowest[i] == 0
        assert flags[lowest[i]]
        assert all(i % p for p in primes if p < lowest[i])


def test_submasks_properties():
    mask = 0b101101
    subs = list(submasks(mask))
    assert len(subs) == 2 ** bin(mask).count("1") - 1
    assert subs == sorted(set(subs), reverse=True)
    assert all(s & ~mask == 0 and s > 0 for s in subs)


def test_submask_total_is_three_to_the_n():
    n = 6
    total = sum(len(list(submasks(mask))) + 1 for mask in range(1 << n))
    assert total == 3**n


def test_submasks_of_zero_is_empty():
    assert list(submasks(0)) == []