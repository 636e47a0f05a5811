"""Per-node counts on a full binary tree evaluated at a colour count modulo any number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


def _prime_factors(m: int) -> list[int]:
    primes = []
    i = 2
    while i * i <= m:
        if m % i == 0:
            primes.append(i)
            while m % i == 0:
                m //= i
        i += 1
    if m != 1:
        primes.append(m)
    return primes


class _FactoredProduct:
    """A running product modulo ``mod`` that keeps the modulus' primes as exponents."""

    def __init__(self, mod: int) -> None:
        self.mod = mod
        self.primes = _prime_factors(mod)
        self.exponents = [0] * len(self.primes)
        self.unit = 1

    def _strip(self, x: int, sign: int) -> int:
        for idx, p in enumerate(self.primes):
            while x % p == 0:
                x //= p
                self.exponents[idx] += sign
        return x

    def multiply(self, x: int) -> None:
        x = self._strip(x, 1)
        self.unit = self.unit * x % self.mod

    def divide(self, x: int) -> None:
        x = self._strip(x, -1)
        self.unit = self.unit * pow(x, -1, self.mod) % self.mod

    def value(self) -> int:
        result = self.unit
        for p, e in zip(self.primes, self.exponents):
            result = result * pow(p, e, self.mod) % self.mod
        return result


def _interpolation_weights(n: int, k: int, mod: int) -> list[int]:
    """Weights turning values at ``1..n`` into their prefix-sum polynomial at ``k``."""
    coeff = [0] * (n + 1)
    if k <= n:
        coeff[k] = 1
    else:
        product = _FactoredProduct(mod)
        for i in range(1, n + 1):
            product.divide(i)
            product.multiply(k - i)
        for i in range(n + 1):
            value = product.value()
            coeff[i] = (-value) % mod if i & 1 else value
            if i == n:
                break
            product.multiply(n - i)
            product.divide(k - i - 1)
            product.divide(i + 1)
            product.multiply(k - i)
    for i in range(n, 0, -1):
        coeff[i - 1] = (coeff[i - 1] + coeff[i]) % mod
    return coeff


@dataclass
class _Subtree:
    x: list[int]
    y: list[int]
    even: int
    odd: int
    leaves: int


def solve(n: int, k: int, mod: int, parents: Sequence[int]) -> list[int]:
    """Return the answer for every node of the tree modulo ``mod``.

    ``parents[i - 2]`` is the parent of node ``i``; node 1 is the root and
    every node must have zero or two children. Raises ValueError otherwise.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if k < 0:
        raise ValueError("k must be non-negative")
    if mod < 2:
        raise ValueError("modulus must be at least 2")
    if len(parents) != n - 1:
        raise ValueError(f"expected {n - 1} parents, got {len(parents)}")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for node, parent in enumerate(parents, 2):
        if not 1 <= parent <= n or parent == node:
            raise ValueError(f"node {node} has an invalid parent {parent}")
        children[parent].append(node)
    for node in range(1, n + 1):
        if len(children[node]) not in (0, 2):
            raise ValueError(f"node {node} must have zero or two children")

    order: list[tuple[int, int]] = []
    stack = [(1, 0)]
    while stack:
        u, dep = stack.pop()
        order.append((u, dep))
        stack.extend((v, 1 - dep) for v in children[u])
    if len(order) != n:
        raise ValueError("parents do not form a tree rooted at node 1")

    weights = _interpolation_weights(n, k, mod)

    def calc(values: list[int]) -> int:
        return sum(v * c for v, c in zip(values, weights)) % mod

    answers = [0] * n
    done: dict[int, _Subtree] = {}
    for u, dep in reversed(order):
        if not children[u]:
            ones = [0] + [1] * n
            sub = _Subtree(ones, list(ones), 0, 0, 1)
        else:
            s, t = (done.pop(v) for v in children[u])
            leaves = s.leaves + t.leaves
            even = s.even + t.even + (dep == 0)
            odd = s.odd + t.odd + (dep == 1)
            if dep == 0:
                ws = pow(2, s.even, mod) * pow(k, s.leaves, mod) % mod
                wt = pow(2, t.even, mod) * pow(k, t.leaves, mod) % mod
                x = [a * b % mod * i % mod for i, (a, b) in enumerate(zip(s.x, t.x))]
                y = [(a * wt + b * ws) % mod for a, b in zip(s.y, t.y)]
            else:
                ws = pow(2, s.odd, mod) * pow(k, s.leaves, mod) % mod
                wt = pow(2, t.odd, mod) * pow(k, t.leaves, mod) % mod
                y = [a * b % mod * i % mod for i, (a, b) in enumerate(zip(s.y, t.y))]
                x = [(a * wt + b * ws) % mod for a, b in zip(s.x, t.x)]
            sub = _Subtree(x, y, even, odd, leaves)
        answers[u - 1] = calc(sub.x) * calc(sub.y) % mod
        done[u] = sub
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n k mod`` and the parents from standard input and print each answer."""
    parser = argparse.ArgumentParser(
        description="Per-node counts on a full binary tree modulo any number."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 3:
        raise ValueError("expected n, k and the modulus on input")
    n, k, mod = int(tokens[0]), int(tokens[1]), int(tokens[2])
    parents = [int(t) for t in tokens[3 : 3 + n - 1]]
    print("\n".join(str(v) for v in solve(n, k, mod, parents)))
    return 0