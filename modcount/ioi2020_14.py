"""Chance that the first group reaches its quota no later than every other group."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD


def _inv(x: int) -> int:
    return pow(x % MOD, MOD - 2, MOD)


def solve(groups: Sequence[tuple[int, int]]) -> int:
    """Return the answer for groups of ``(quota, percent)`` pairs modulo 998244353.

    Each round every group succeeds independently with its percentage; the
    result is the chance that the first group meets its quota no later than
    all others. Raises ValueError on an empty list or a quota below one.
    """
    items = [(int(a), int(p)) for a, p in groups]
    if not items:
        raise ValueError("at least one group is required")
    if any(a < 1 for a, _ in items):
        raise ValueError("every quota must be at least one")
    inv100 = _inv(100)
    probs = [p % MOD * inv100 % MOD for _, p in items]
    fails = [(1 - pr) % MOD for pr in probs]
    quotas = [a for a, _ in items]
    n = sum(quotas)

    fac = [1] * (n + 1)
    for i in range(1, n + 1):
        fac[i] = fac[i - 1] * i % MOD
    ifac = [1] * (n + 1)
    ifac[n] = _inv(fac[n])
    for i in range(n, 0, -1):
        ifac[i - 1] = ifac[i] * i % MOD

    def binom(top: int, bottom: int) -> int:
        return fac[top] * ifac[bottom] % MOD * ifac[top - bottom] % MOD

    first_quota, first_prob, first_fail = quotas[0], probs[0], fails[0]
    v = [0] * (n + 1)
    power = pow(first_prob, first_quota, MOD)
    for i in range(first_quota - 1, n + 1):
        v[i] = binom(i, first_quota - 1) * power % MOD
        power = power * first_fail % MOD

    for quota, prob, fail in zip(quotas[1:], probs[1:], fails[1:]):
        w = pow(prob, quota, MOD)
        remaining = 1
        for j in range(quota, n + 1):
            remaining = (remaining - w * binom(j - 1, quota - 1)) % MOD
            w = w * fail % MOD
            v[j] = v[j] * remaining % MOD

    all_fail = 1
    for fail in fails:
        all_fail = all_fail * fail % MOD
    all_fail_inv = _inv(all_fail)
    power = 1
    for i in range(n + 1):
        v[i] = v[i] * power % MOD
        power = power * all_fail_inv % MOD
    all_fail = _inv(all_fail_inv)

    t = all_fail * _inv(1 - all_fail) % MOD
    mu = pow(t, n, MOD)
    e = []
    for i in range(n + 1):
        term = mu * binom(n, i) % MOD
        e.append((-term) % MOD if (n ^ i) & 1 else term)
    e[0] = (e[0] - 1) % MOD
    mu = _inv(-t - 1)
    e = [x * mu % MOD for x in e]
    mu = (-t) * mu % MOD
    for i in range(1, n + 1):
        e[i] = (e[i] + e[i - 1] * mu) % MOD

    answer = sum(e[i] * v[i] for i in range(n)) % MOD
    return answer * _inv(1 - all_fail) % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read the groups from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        description="Chance that the first group reaches its quota first."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        k = int(next(tokens))
        groups = [(int(next(tokens)), int(next(tokens))) for _ in range(k)]
    except StopIteration as exc:
        raise ValueError("input ended early") from exc
    print(solve(groups))
    return 0