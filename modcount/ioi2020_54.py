"""Expected value over multisets of a fixed size, modulo 998244353."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD


def solve(n: int, d: int, r: int) -> int:
    """Return the answer for parameters ``n``, ``d`` and ``r`` modulo 998244353.

    Raises ValueError when ``n`` is not positive or ``d`` or ``r`` is negative.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if d < 0:
        raise ValueError("d must be non-negative")
    if r < 0:
        raise ValueError("r must be non-negative")

    top = max(n + d, n + 1)
    fac = [1] * (top + 1)
    for i in range(1, top + 1):
        fac[i] = fac[i - 1] * i % MOD
    ifac = [1] * (top + 1)
    ifac[top] = pow(fac[top], MOD - 2, MOD)
    for i in range(top, 0, -1):
        ifac[i - 1] = ifac[i] * i % MOD

    def comb(a: int, b: int) -> int:
        if b < 0 or b > a:
            return 0
        return fac[a] * ifac[b] % MOD * ifac[a - b] % MOD

    def signed_comb(a: int, b: int) -> int:
        value = comb(a, b)
        return -value % MOD if b & 1 else value

    def multichoose(a: int, b: int) -> int:
        return comb(a + b - 1, b)

    def inverse(i: int) -> int:
        return 0 if i == 0 else fac[i - 1] * ifac[i] % MOD

    length = max(n, d) + 1

    def series(m: int, s: int) -> list[int]:
        f = [0] * length
        f[0] = 1
        c = -m * comb(m - 1, s) % MOD
        for i in range(m - s):
            idx = i + s + 1
            f[idx] = signed_comb(m - s - 1, i) * c % MOD * inverse(idx) % MOD
        return f

    f = series(n, r)
    g = series(n - 1, r - 1)
    h = [0] * (d + 1)
    for i in range(1, d + 1):
        h[i] = (-r * f[i] + g[i - 1] * n) % MOD

    visited = [False] * (d + 1)
    for x in range(2, d + 1):
        if visited[x]:
            continue
        for i, y in enumerate(range(x, d + 1, x), 1):
            h[y] = (h[y] + h[i]) % MOD
            visited[y] = True

    answer = sum(h[d - i] * multichoose(n, i) for i in range(d + 1)) % MOD
    answer = answer * pow(multichoose(n, d), MOD - 2, MOD) % MOD
    return (answer + r) % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n d r`` from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        description="Expected value over multisets of a fixed size."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 3:
        raise ValueError("expected n, d and r on input")
    print(solve(int(tokens[0]), int(tokens[1]), int(tokens[2])))
    return 0