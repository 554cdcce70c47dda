"""Modular exponentiation, matrix powers, prime sieves and submask enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple

MOD = 1_000_000_007

Matrix = tuple[tuple[int, ...], ...]


def binpow(a: int, b: int, m: int = MOD) -> int:
    """Return ``a`` raised to ``b`` modulo ``m`` by repeated squaring."""
    a %= m
    result = 1
    while b > 0:
        if b & 1:
            result = result * a % m
        a = a * a % m
        b >>= 1
    return result


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two matrices, reducing every entry modulo ``MOD``."""
    if not a or not b or any(len(row) != len(b) for row in a):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) % MOD for column in columns)
        for row in a
    )


def matrix_power(a: Sequence[Sequence[int]], power: int) -> Matrix:
    """Raise a square matrix to a non-negative power modulo ``MOD``."""
    if power < 0:
        raise ValueError("power must be non-negative")
    size = len(a)
    result: Matrix = tuple(
        tuple(int(i == j) for j in range(size)) for i in range(size)
    )
    base: Matrix = tuple(tuple(row) for row in a)
    while power:
        if power & 1:
            result = mat_mul(result, base)
        base = mat_mul(base, base)
        power >>= 1
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number modulo ``MOD``."""
    return matrix_power(((0, 1), (1, 1)), n)[0][1]


def sieve(n: int) -> list[bool]:
    """Return primality flags for every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    flags = [True] * (n + 1)
    flags[0] = False
    if n >= 1:
        flags[1] = False
    for i in range(2, n + 1):
        if flags[i]:
            multiples = range(i + i, n + 1, i)
            flags[i + i :: i] = [False] * len(multiples)
    return flags


class LinearSieve(NamedTuple):
    """Lowest prime factor of each integer up to a bound, and the primes found."""

    lowest_prime: list[int]
    primes: list[int]


def linear_sieve(n: int) -> LinearSieve:
    """Compute lowest prime factors and all primes up to ``n`` in linear time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    lowest = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if lowest[i] == 0:
            lowest[i] = i
            primes.append(i)
        for p in primes:
            if p > lowest[i] or i * p > n:
                break
            lowest[i * p] = p
    return LinearSieve(lowest, primes)


def submasks(mask: int) -> Iterator[int]:
    """Yield every non-empty submask of ``mask`` in decreasing order."""
    sub = mask
    while sub > 0:
        yield sub
        sub = (sub - 1) & mask