"""Signed binomial sum over block counts, modulo 998244353."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD


def solve(n: int, m: int, k: int) -> int:
    """Return the answer for ``n``, ``m`` and ``k`` modulo 998244353.

    Raises ValueError when ``n`` or ``k`` is negative or ``m`` is below one.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if m < 1:
        raise ValueError("m must be positive")
    if k < 0:
        raise ValueError("k must be non-negative")
    k += 1
    n += 1
    top = max(m * (n + 1 - k), 0)
    fac = [1] * (top + 1)
    for i in range(1, top + 1):
        fac[i] = fac[i - 1] * i % MOD
    ifac = [1] * (top + 1)
    ifac[top] = pow(fac[top], MOD - 2, MOD)
    for i in range(top, 0, -1):
        ifac[i - 1] = ifac[i] * i % MOD

    def binom(a: int, b: int) -> int:
        return fac[a] * ifac[b] % MOD * ifac[a - b] % MOD

    def query(a: int, b: int) -> int:
        if a < b or n <= b:
            return 0
        if a == b:
            return 1
        if a < n:
            return 0
        signed = binom(a - b - 1, n - b - 1)
        if (n - b - 1) & 1:
            signed = -signed
        return signed * binom(a, b) % MOD

    answer = 0
    for j in range(1, n + 1 - k):
        answer += query(m * j, j + k - 1) - query(m * j, j + k)
    return answer % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m k`` from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        description="Signed binomial sum over block counts."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 3:
        raise ValueError("expected n, m and k on input")
    print(solve(int(tokens[0]), int(tokens[1]), int(tokens[2])))
    return 0