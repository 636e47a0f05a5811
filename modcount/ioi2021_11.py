"""Count arrangements of numbers whose neighbouring products stay within a bound."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD, Combinatorics
from modcount.ntt import convolve
from modcount.poly import Poly
from modcount.transposition import evaluate

_comb = Combinatorics(MOD)


def _product(roots: Sequence[int]) -> Poly:
    """Return the product of ``x + r`` over all roots."""

    def build(lo: int, hi: int) -> Poly:
        if hi - lo == 1:
            return Poly([roots[lo], 1])
        mid = (lo + hi) // 2
        return build(lo, mid) * build(mid, hi)

    if not roots:
        return Poly(1)
    return build(0, len(roots))


def count_by_falling_factorial(roots: Sequence[int]) -> list[int]:
    """Expand the product of ``x + r`` in the falling-factorial basis.

    Entry ``j`` of the result is the coefficient of the falling factorial
    of degree ``len(roots) - j``.
    """
    n = len(roots)
    values = evaluate(_product(roots), range(n + 1))
    scaled = [v * _comb.inverse_factorial(i) % MOD for i, v in enumerate(values)]
    signs = [
        _comb.inverse_factorial(i) if i % 2 == 0 else -_comb.inverse_factorial(i) % MOD
        for i in range(n + 1)
    ]
    coefficients = convolve(scaled, signs)[: n + 1]
    return coefficients[::-1]


def _count_blocks(thresholds: list[int], n: int) -> Poly:
    h = n
    while thresholds[h] < h:
        h -= 1
    if h == 0:
        return Poly(1)
    roots = [0] * (2 * h)
    for j, i in enumerate(range(h, 0, -1)):
        value = (thresholds[i] - h - j) % MOD
        roots[2 * i - 2] = (value - 1) % MOD
        roots[2 * i - 1] = value
    return Poly(count_by_falling_factorial(roots)).slice(n)


def _same_sign_part(descending: list[int], w: int) -> Poly:
    """Inclusion-exclusion series of bad adjacencies among same-sign values."""
    n = len(descending)
    if n == 0:
        return Poly(1)
    thresholds = [0] * (n + 1)
    p = 0
    for i in range(n - 1, -1, -1):
        while p != n and descending[p] * descending[i] > w:
            p += 1
        thresholds[i + 1] = p
    return _count_blocks(thresholds, n)


def solve(w: int, values: Sequence[int]) -> int:
    """Count orderings of ``values`` where every neighbouring product is at most ``w``.

    The count is taken modulo 998244353; equal values count as distinct.
    """
    ordered = sorted(values)
    n = len(ordered)
    negatives = [-v for v in ordered if v < 0]
    non_negatives = sorted((v for v in ordered if v >= 0), reverse=True)
    total = _same_sign_part(non_negatives, w) * _same_sign_part(negatives, w)
    answer = 0
    for i in range(n + 1):
        term = total[i] * _comb.factorial(n - i)
        answer += -term if i % 2 else term
    return answer % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n w`` and ``n`` values from standard input and print the count."""
    parser = argparse.ArgumentParser(
        description="Count orderings whose neighbouring products stay within a bound."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected n and w on input")
    n, w = int(tokens[0]), int(tokens[1])
    values = [int(t) for t in tokens[2 : 2 + n]]
    if len(values) != n:
        raise ValueError(f"expected {n} values, got {len(values)}")
    print(solve(w, values))
    return 0