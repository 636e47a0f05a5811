"""Weighted count over the edge and node choices of a tree, modulo 998244353."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from modcount.modular import MOD

# A state is a series in two markers (edge, node), each truncated after
# degree one, stored as (e0n0, e0n1, e1n0, e1n1).
_State = tuple[int, int, int, int]

_UNIT: _State = (1, 0, 0, 0)


def _mul(a: _State, b: _State) -> _State:
    a00, a01, a10, a11 = a
    b00, b01, b10, b11 = b
    return (
        a00 * b00 % MOD,
        (a00 * b01 + a01 * b00) % MOD,
        (a00 * b10 + a10 * b00) % MOD,
        (a00 * b11 + a01 * b10 + a10 * b01 + a11 * b00) % MOD,
    )


def _close(state: _State) -> _State:
    """Add the node marker to every term of the finished subtree."""
    a00, a01, a10, a11 = state
    return a00, (a01 + a00) % MOD, a10, (a11 + a10) % MOD


def _through_edge(state: _State, n: int) -> _State:
    """Combine a child's state with the choices on the edge to its parent."""
    r00, r01, r10, r11 = state
    return (
        (r00 + n * r01) % MOD,
        r01,
        (r10 + 2 * r00 + n * r11) % MOD,
        (r11 + 2 * r01) % MOD,
    )


def solve(n: int, edges: Sequence[tuple[int, int]]) -> int:
    """Return the answer for a tree on nodes ``1..n`` modulo 998244353.

    Raises ValueError when the edges do not form a tree on ``1..n``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if len(edges) != n - 1:
        raise ValueError(f"expected {n - 1} edges, got {len(edges)}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent = [0] * (n + 1)
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
                parent[v] = u
                stack.append(v)
    if len(order) != n:
        raise ValueError("the edges do not form a tree")

    acc: list[_State] = [_UNIT] * (n + 1)
    for u in reversed(order):
        finished = _close(acc[u])
        if u == 1:
            return finished[3] * pow(n, MOD - 2, MOD) % MOD
        p = parent[u]
        acc[p] = _mul(acc[p], _through_edge(finished, n))
    raise AssertionError("root was not reached")


def main(argv: Sequence[str] | None = None) -> int:
    """Read a tree from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        description="Weighted count over the edge and node choices of a tree."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        n = int(next(tokens))
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
    except StopIteration as exc:
        raise ValueError("input ended early") from exc
    print(solve(n, edges))
    return 0