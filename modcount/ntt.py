"""Number-theoretic transform and convolution modulo 998244353."""

from __future__ import annotations

from collections.abc import Sequence

from modcount.modular import MOD

PRIMITIVE_ROOT = 3
MAX_LOG = 23

_SMALL = 32


def _bit_reversal(n: int) -> list[int]:
    rev = [0] * n
    half = n >> 1
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | (half if i & 1 else 0)
    return rev


def transform(values: Sequence[int], invert: bool = False) -> list[int]:
    """Return the transform of ``values`` (length a power of two).

    The forward transform evaluates the polynomial at the powers of a
    primitive ``n``-th root of unity in natural order; ``invert=True``
    undoes it.
    """
    n = len(values)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    if n > 1 << MAX_LOG:
        raise ValueError("length exceeds the largest supported transform")
    reduced = [v % MOD for v in values]
    a = [reduced[r] for r in _bit_reversal(n)]
    length = 2
    while length <= n:
        half = length >> 1
        w = pow(PRIMITIVE_ROOT, (MOD - 1) // length, MOD)
        if invert:
            w = pow(w, MOD - 2, MOD)
        twiddles = [1] * half
        for k in range(1, half):
            twiddles[k] = twiddles[k - 1] * w % MOD
        for start in range(0, n, length):
            mid = start + half
            end = start + length
            lo = a[start:mid]
            hi = [x * t % MOD for x, t in zip(a[mid:end], twiddles)]
            a[start:mid] = [(u + v) % MOD for u, v in zip(lo, hi)]
            a[mid:end] = [(u - v) % MOD for u, v in zip(lo, hi)]
        length <<= 1
    if invert:
        scale = pow(n, MOD - 2, MOD)
        a = [x * scale % MOD for x in a]
    return a


def convolve(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the product of two coefficient lists modulo 998244353."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    if min(len(a), len(b)) <= _SMALL:
        result = [0] * size
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b):
                    result[i + j] += x * y
        return [v % MOD for v in result]
    n = 1
    while n < size:
        n <<= 1
    fa = transform(list(a) + [0] * (n - len(a)))
    fb = transform(list(b) + [0] * (n - len(b)))
    product = transform([x * y % MOD for x, y in zip(fa, fb)], invert=True)
    return product[:size]