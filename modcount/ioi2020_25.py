"""Probability that the number of chosen nodes on each root path is prime."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from modcount.modular import MOD, mod_inverse
from modcount.ntt import convolve
from modcount.transposition import transposed_mul


def _pad(values: list[int], length: int) -> list[int]:
    if len(values) >= length:
        return values[:length]
    return values + [0] * (length - len(values))


def _prime_indicator(size: int) -> list[int]:
    flags = [1] * size
    for i in range(min(size, 2)):
        flags[i] = 0
    for i in range(2, size):
        if flags[i]:
            for j in range(i * i, size, i):
                flags[j] = 0
    return flags


@dataclass
class _Segment:
    lo: int
    hi: int
    need: int
    prod: list[int]
    left: _Segment | None = None
    right: _Segment | None = None


def _build(chain: list[int], lo: int, hi: int, leaf_need: list[int], leaf_poly: list[list[int]]) -> _Segment:
    if lo == hi:
        u = chain[lo]
        return _Segment(lo, hi, leaf_need[u], leaf_poly[u])
    mid = (lo + hi) // 2
    left = _build(chain, lo, mid, leaf_need, leaf_poly)
    right = _build(chain, mid + 1, hi, leaf_need, leaf_poly)
    need = max(left.need, right.need + (mid - lo + 1))
    return _Segment(lo, hi, need, convolve(left.prod, right.prod), left, right)


def solve(
    n: int, edges: Sequence[tuple[int, int]], probabilities: Sequence[tuple[int, int]]
) -> list[int]:
    """Return, for each node, the probability its root path holds a prime count of chosen nodes.

    Node ``i`` (1-based, root 1) is chosen independently with probability
    ``a / b`` given as the pair ``probabilities[i - 1]``; results are modulo
    998244353. Raises ValueError on a malformed tree.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if len(edges) != n - 1:
        raise ValueError(f"expected {n - 1} edges, got {len(edges)}")
    if len(probabilities) != n:
        raise ValueError(f"expected {n} probabilities, got {len(probabilities)}")

    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)

    chance = [0] + [a % MOD * mod_inverse(b % MOD, MOD) % MOD for a, b in probabilities]

    children: list[list[int]] = [[] for _ in range(n + 1)]
    visited = [False] * (n + 1)
    visited[1] = True
    order = []
    stack = [1]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adjacency[u]:
            if not visited[v]:
                visited[v] = True
                children[u].append(v)
                stack.append(v)
    if len(order) != n:
        raise ValueError("the edges do not form a tree")

    height = [0] * (n + 1)
    heavy = [0] * (n + 1)
    for u in reversed(order):
        for v in children[u]:
            if height[u] < height[v] + 1:
                height[u] = height[v] + 1
                heavy[u] = v

    light = [[v for v in children[u] if v != heavy[u]] for u in range(n + 1)]
    leaf_need = [
        max([1] + [height[v] + 2 for v in light[u]]) for u in range(n + 1)
    ]
    leaf_poly = [[(1 - chance[u]) % MOD, chance[u]] for u in range(n + 1)]

    answers = [0] * n
    pending: dict[int, list[int]] = {1: _prime_indicator(height[1] + 2)}
    heads = deque([1])

    def descend(segment: _Segment, chain: list[int], down: list[int]) -> None:
        down = _pad(down, segment.need + 1)
        if segment.left is None or segment.right is None:
            result = transposed_mul(down, segment.prod)
            u = chain[segment.lo]
            answers[u - 1] = result[0]
            for v in light[u]:
                pending[v] = result
                heads.append(v)
            return
        descend(segment.left, chain, down)
        descend(segment.right, chain, transposed_mul(down, segment.left.prod))

    while heads:
        head = heads.popleft()
        chain = [head]
        while heavy[chain[-1]]:
            chain.append(heavy[chain[-1]])
        tree = _build(chain, 0, len(chain) - 1, leaf_need, leaf_poly)
        descend(tree, chain, pending.pop(head))
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read a tree with node probabilities from standard input and print each answer."""
    parser = argparse.ArgumentParser(
        description="Probability of a prime number of chosen nodes on each root path."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        n = int(next(tokens))
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        probabilities = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
    except StopIteration as exc:
        raise ValueError("input ended early") from exc
    print("\n".join(str(v) for v in solve(n, edges, probabilities)))
    return 0