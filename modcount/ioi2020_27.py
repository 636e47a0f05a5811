"""Count permutations that contain a long ascending run, for every run length."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def solve(n: int, mod: int) -> list[int]:
    """Return, for ``k = n - 1`` down to ``0``, the permutations of ``n`` with an ascending run longer than ``k``.

    Counts are modulo ``mod``. Raises ValueError when ``mod`` is below 2
    or ``n!`` has no inverse modulo ``mod``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if mod < 2:
        raise ValueError("modulus must be at least 2")
    fac = [1] * (n + 1)
    for i in range(1, n + 1):
        fac[i] = fac[i - 1] * i % mod
    try:
        top = pow(fac[n], -1, mod)
    except ValueError as exc:
        raise ValueError(f"{n}! has no inverse modulo {mod}") from exc
    ifac = [0] * (n + 1)
    ifac[n] = top
    for i in range(n, 0, -1):
        ifac[i - 1] = ifac[i] * i % mod

    answers = []
    for k in range(n - 1, -1, -1):
        gf = [1] + [0] * n
        for i in range(1, n + 1):
            total = 0
            j = 1
            while j + k <= i:
                total += gf[i - j] * ifac[j] - gf[i - j - k] * ifac[j + k]
                j += k + 1
            if j <= i:
                total += gf[i - j] * ifac[j]
            gf[i] = total % mod
        answers.append((1 - gf[n]) * fac[n] % mod)
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n mod`` from standard input and print one count per line."""
    parser = argparse.ArgumentParser(
        description="Count permutations with a long ascending run."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected n and the modulus on input")
    answers = solve(int(tokens[0]), int(tokens[1]))
    if answers:
        print("\n".join(str(v) for v in answers))
    return 0