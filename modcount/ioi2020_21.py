"""Counting sequence built from the Bernoulli series and falling factorials."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import accumulate

from modcount.modular import MOD, Combinatorics, mod_inverse
from modcount.ntt import convolve
from modcount.poly import Poly

_comb = Combinatorics(MOD)


def _add(a: int, b: int) -> int:
    return (a + b) % MOD


def _pad(values: list[int], length: int) -> list[int]:
    if len(values) >= length:
        return values[:length]
    return values + [0] * (length - len(values))


def bernoulli(n: int) -> Poly:
    """Return ``x / (e^x - 1)`` to degree ``n``; coefficient ``k`` is ``B_k / k!``."""
    if n < 0:
        raise ValueError("degree must be non-negative")
    return Poly([_comb.inverse_factorial(i + 1) for i in range(n + 1)]).inverse()


def solve(n: int, w: int) -> list[int]:
    """Return the ``n`` answers for size ``n`` and weight ``w`` modulo 998244353.

    Raises ValueError when ``n`` is not positive or ``w`` has no inverse.
    """
    if n < 1:
        raise ValueError("n must be positive")
    w %= MOD
    w_inv = mod_inverse(w, MOD)

    inter = [0] + [pow(w, i, MOD) * _comb.inverse_factorial(i) % MOD for i in range(1, n + 1)]
    series = convolve(inter, bernoulli(n).coeffs)

    s = []
    power = 1
    for i in range(n):
        s.append(series[i + 1] * _comb.factorial(i) % MOD * power % MOD)
        power = power * w_inv % MOD

    base = 0
    for i, value in enumerate(s):
        term = _comb.binom(n, i + 1) * value
        base += -term if i % 2 else term
    base %= MOD

    reversed_s = [v * _comb.inverse_factorial(i) % MOD for i, v in enumerate(s[::-1])]
    signs = [
        -_comb.inverse_factorial(i) % MOD if i % 2 else _comb.inverse_factorial(i)
        for i in range(n)
    ]
    product = _pad(convolve(reversed_s, signs), n + 1)
    shifted = [v * _comb.factorial(i) % MOD for i, v in enumerate(product[:n])]

    answers = [base] + [
        shifted[n - i] * (-_comb.binom(n, i) % MOD) % MOD for i in range(1, n + 1)
    ]
    prefix = list(accumulate(answers, _add))
    suffix = list(accumulate(reversed(prefix[1:]), _add))[::-1]
    scale = pow(w, n - 1, MOD)
    return [v * scale % MOD for v in suffix]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n w`` from standard input and print the answers on one line."""
    parser = argparse.ArgumentParser(
        description="Compute the counting sequence for size n and weight w."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected n and w on input")
    n, w = int(tokens[0]), int(tokens[1])
    print(" ".join(str(v) for v in solve(n, w)))
    return 0