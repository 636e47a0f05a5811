"""Inversion-weighted answer for permutations under a geometric success model."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD
from modcount.ntt import convolve


def _signed_differences(limit: int) -> list[int]:
    """Return the alternating differences of ``d[i] = 1 - i * d[i - 1]`` up to ``limit``."""
    d = [1]
    for i in range(1, limit + 2):
        d.append((1 - i * d[-1]) % MOD)
    return [
        (d[i + 1] - d[i]) % MOD if i % 2 else (d[i] - d[i + 1]) % MOD
        for i in range(limit + 1)
    ]


def _factorials(n: int) -> tuple[list[int], list[int]]:
    fac = [1] * (n + 1)
    for i in range(1, n + 1):
        fac[i] = fac[i - 1] * i % MOD
    ifac = [1] * (n + 1)
    ifac[n] = pow(fac[n], MOD - 2, MOD)
    for i in range(n, 0, -1):
        ifac[i - 1] = ifac[i] * i % MOD
    return fac, ifac


def _coefficients(n: int, prob: int, rest: int) -> list[int]:
    """Return the per-position weights used when scanning the permutation."""
    m = n - 1
    if m == 0:
        return []
    fac, ifac = _factorials(m)
    signed = _signed_differences(m)
    factors = [(1 - pow(rest, i + 1, MOD)) % MOD for i in range(1, m + 1)]
    total = 1
    for f in factors:
        total = total * f % MOD
    if total == 0:
        inverses = [0] * m
    else:
        inverses = [pow(f, MOD - 2, MOD) for f in factors]

    x = [signed[i] * inverses[i] % MOD * ifac[i] % MOD for i in range(m)]
    first = convolve(x, ifac[:m])[:m]
    first = [v * fac[i] % MOD for i, v in enumerate(first)][::-1]

    scaled = []
    power = 1
    for i, v in enumerate(first):
        scaled.append(v * power % MOD * ifac[i] % MOD)
        power = power * prob % MOD
    weights = []
    power = 1
    for i in range(m):
        weights.append(ifac[i] * power % MOD)
        power = power * rest % MOD
    second = convolve(scaled, weights)[:m]
    return [v * fac[i] % MOD for i, v in enumerate(second)]


def solve(n: int, p: int, q: int, permutation: Sequence[int]) -> int:
    """Return the answer for a permutation of ``1..n`` and success chance ``p / q``.

    The result is modulo 998244353. Raises ValueError when ``permutation``
    is not a permutation of ``1..n`` or ``q`` vanishes modulo 998244353.
    """
    if n < 1:
        raise ValueError("n must be positive")
    perm = list(permutation)
    if sorted(perm) != list(range(1, n + 1)):
        raise ValueError(f"expected a permutation of 1..{n}")
    if q % MOD == 0:
        raise ValueError("q must be nonzero modulo 998244353")
    prob = p % MOD * pow(q % MOD, MOD - 2, MOD) % MOD
    rest = (1 - prob) % MOD
    coef = _coefficients(n, prob, rest)

    tree = [0] * (n + 1)
    answer = 0
    for i, value in enumerate(perm, 1):
        below = 0
        j = value
        while j:
            below += tree[j]
            j &= j - 1
        above = value - 1 - below
        if i > 1:
            answer += below * coef[i - 2] % MOD * rest
        if i < n:
            answer += above * coef[i - 1]
        j = value
        while j <= n:
            tree[j] += 1
            j += j & -j
    return (answer % MOD * prob + 1) % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    parser = argparse.ArgumentParser(
        description="Evaluate permutations under a geometric success model."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    results = []
    try:
        cases = int(next(tokens))
        for _ in range(cases):
            n, p, q = int(next(tokens)), int(next(tokens)), int(next(tokens))
            perm = [int(next(tokens)) for _ in range(n)]
            results.append(solve(n, p, q, perm))
    except StopIteration as exc:
        raise ValueError("input ended early") from exc
    if results:
        print("\n".join(str(v) for v in results))
    return 0