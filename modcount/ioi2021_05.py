"""XOR of per-size permutation counts modulo a given number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def solve(n: int, mod: int) -> int:
    """Return the XOR, over sizes ``1..n``, of the counts reduced modulo ``mod``.

    Raises ValueError when ``n`` is negative or ``mod`` is below 2.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if mod < 2:
        raise ValueError("modulus must be at least 2")
    size = max(n, 1) + 1
    fac = [1] * size
    der = [1] * size
    for i in range(1, n + 1):
        fac[i] = fac[i - 1] * i % mod
        der[i] = (der[i - 1] * i + (-1 if i & 1 else 1)) % mod

    extra = [0] * size
    extra[0] = 1 % mod
    extra[1] = 1 % mod
    pw = 1
    for i in range(2, n + 1):
        if i & 1:
            value = extra[i - 1] + 2 * extra[i - 2] - 2 * extra[i - 3]
            extra[i] = (value * (i - 1) + extra[i - 1]) % mod
        else:
            pw = pw * 2 % mod
            extra[i] = (extra[i - 1] * i - extra[i - 2] * 2 * i + pw) % mod

    answer = 0
    for i in range(1, n + 1):
        f = fac[i] - 2 * der[i] + extra[i]
        if i & 1:
            f -= extra[i - 1]
        answer ^= f % mod
    return answer


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n mod`` from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        description="XOR of per-size permutation counts modulo a number."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected n and the modulus on input")
    print(solve(int(tokens[0]), int(tokens[1])))
    return 0