"""Transposed multiplication, multipoint evaluation and interpolation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from modcount.modular import MOD
from modcount.ntt import convolve
from modcount.poly import Poly

_BRUTE_LIMIT = 50


def _pad(values: list[int], length: int) -> list[int]:
    if len(values) >= length:
        return values[:length]
    return values + [0] * (length - len(values))


def transposed_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``r`` with ``r[i] = sum_j a[i + j] * b[j]`` modulo 998244353.

    The result has ``len(a) - len(b) + 1`` entries; when ``a`` is shorter
    than ``b`` the result is ``[0]``.
    """
    lhs = [x % MOD for x in a]
    rhs = [x % MOD for x in b]
    if not rhs:
        raise ValueError("the second operand must not be empty")
    n, m = len(lhs), len(rhs)
    if n < m:
        return [0]
    size = n - m + 1
    if n <= _BRUTE_LIMIT:
        return [
            sum(x * y for x, y in zip(lhs[i : i + m], rhs)) % MOD
            for i in range(size)
        ]
    product = convolve(lhs, rhs[::-1])
    return _pad(product[m - 1 : m - 1 + size], size)


@dataclass
class _Node:
    lo: int
    hi: int
    q: list[int]
    left: _Node | None = None
    right: _Node | None = None


def _build(points: list[int], lo: int, hi: int) -> _Node:
    """Build the subproduct tree of ``1 - x_i t`` over ``points[lo..hi]``."""
    if lo == hi:
        return _Node(lo, hi, [1, -points[lo] % MOD])
    mid = (lo + hi) // 2
    left = _build(points, lo, mid)
    right = _build(points, mid + 1, hi)
    return _Node(lo, hi, convolve(left.q, right.q), left, right)


def _descend(node: _Node, p: list[int], out: list[int]) -> None:
    if node.left is None or node.right is None:
        out[node.lo] = p[0]
        return
    left_part = transposed_mul(p, node.right.q)
    right_part = transposed_mul(p, node.left.q)
    _descend(node.left, left_part, out)
    _descend(node.right, right_part, out)


def _evaluate_on_tree(coeffs: list[int], tree: _Node, n: int) -> list[int]:
    inverse = Poly(tree.q).inverse().coeffs
    root = transposed_mul(_pad(coeffs, 2 * n), inverse)
    out = [0] * n
    _descend(tree, root, out)
    return out


def evaluate(f: Iterable[int], xs: Iterable[int]) -> list[int]:
    """Return ``f(x)`` modulo 998244353 for every ``x`` in ``xs``."""
    coeffs = [c % MOD for c in f]
    points = [x % MOD for x in xs]
    m = len(points)
    if m == 0:
        return []
    n = max(len(coeffs), m)
    coeffs = _pad(coeffs, n)
    padded_points = _pad(points, n)
    tree = _build(padded_points, 0, n - 1)
    return _evaluate_on_tree(coeffs, tree, n)[:m]


def _combine(node: _Node, leaves: list[int]) -> list[int]:
    if node.left is None or node.right is None:
        return [leaves[node.lo]]
    left = _combine(node.left, leaves)
    right = _combine(node.right, leaves)
    a = convolve(left, node.right.q[::-1])
    b = convolve(right, node.left.q[::-1])
    size = max(len(a), len(b))
    return [(x + y) % MOD for x, y in zip(_pad(a, size), _pad(b, size))]


def interpolate(xs: Sequence[int], ys: Sequence[int]) -> Poly:
    """Return the polynomial of degree below ``len(xs)`` through the points.

    Raises ValueError when the lengths differ or the points repeat.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    n = len(xs)
    if n == 0:
        return Poly(0)
    points = [x % MOD for x in xs]
    tree = _build(points, 0, n - 1)
    monic = tree.q[::-1]
    derivative = [c * i % MOD for i, c in enumerate(monic) if i]
    weights = _evaluate_on_tree(derivative, tree, n)
    if any(w == 0 for w in weights):
        raise ValueError("interpolation points must be distinct")
    leaves = [y % MOD * pow(w, MOD - 2, MOD) % MOD for y, w in zip(ys, weights)]
    return Poly(_pad(_combine(tree, leaves), n))