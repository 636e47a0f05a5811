"""Modular arithmetic helpers: powers, inverses, square roots and binomials."""

from __future__ import annotations

import random

MOD = 998244353

_rng = random.Random()


def mod_pow(x: int, k: int, p: int = MOD) -> int:
    """Return ``x ** k`` modulo ``p``."""
    return pow(x, k, p)


def mod_inverse(a: int, p: int = MOD) -> int:
    """Return the inverse of ``a`` modulo ``p``.

    Raises ValueError when ``a`` and ``p`` are not coprime.
    """
    try:
        return pow(a, -1, p)
    except ValueError as exc:
        raise ValueError(f"{a} has no inverse modulo {p}") from exc


def quadratic_residue(a: int, b: int) -> bool:
    """Tell whether ``a`` is a quadratic residue modulo the odd number ``b``.

    Evaluates the Jacobi symbol by quadratic reciprocity; values ``a <= 1``
    count as residues.
    """
    result = True
    while a > 1:
        while a % 4 == 0:
            a //= 4
        if a % 2 == 0:
            if b % 8 not in (1, 7):
                result = not result
            a //= 2
            continue
        if a % 4 != 1 and b % 4 != 1:
            result = not result
        a, b = b % a, a
    return result


def _field_mul(
    lhs: tuple[int, int], rhs: tuple[int, int], v: int, p: int
) -> tuple[int, int]:
    a0, a1 = lhs
    b0, b1 = rhs
    return (a0 * b0 + a1 * b1 % p * v) % p, (a0 * b1 + a1 * b0) % p


def mod_sqrt(x: int, p: int = MOD) -> int:
    """Return the smaller square root of ``x`` modulo the prime ``p``.

    Raises ValueError when ``x`` is not a quadratic residue.
    """
    x %= p
    if p == 2 or x <= 1:
        return x
    if pow(x, (p - 1) // 2, p) != 1:
        raise ValueError(f"{x} is not a quadratic residue modulo {p}")
    while True:
        w = _rng.randrange(p)
        v = (w * w - x) % p
        if not quadratic_residue(v, p):
            break
    result = (1, 0)
    base = (w, 1)
    k = (p + 1) // 2
    while k:
        if k & 1:
            result = _field_mul(result, base, v, p)
        k >>= 1
        if k:
            base = _field_mul(base, base, v, p)
    return min(result[0], p - result[0])


class Combinatorics:
    """Factorials, inverse factorials and inverses modulo a prime, grown on demand."""

    def __init__(self, modulus: int = MOD) -> None:
        self.modulus = modulus
        self._fac = [1, 1]
        self._ifac = [1, 1]
        self._inv = [0, 1]

    def _ensure(self, k: int) -> None:
        if k < 0:
            raise ValueError("index must be non-negative")
        if k >= self.modulus:
            raise ValueError(f"index {k} is not below the modulus {self.modulus}")
        size = len(self._fac) - 1
        if k <= size:
            return
        target = size
        while target < k:
            target *= 2
        target = min(target, self.modulus - 1)
        p = self.modulus
        for x in range(size + 1, target + 1):
            self._fac.append(self._fac[-1] * x % p)
            self._inv.append(-(p // x) * self._inv[p % x] % p)
            self._ifac.append(self._ifac[-1] * self._inv[x] % p)

    def factorial(self, k: int) -> int:
        """Return ``k!`` modulo the modulus."""
        self._ensure(k)
        return self._fac[k]

    def inverse_factorial(self, k: int) -> int:
        """Return the inverse of ``k!`` modulo the modulus."""
        self._ensure(k)
        return self._ifac[k]

    def inverse(self, k: int) -> int:
        """Return the inverse of ``k`` modulo the modulus."""
        if k == 0:
            raise ZeroDivisionError("0 has no modular inverse")
        self._ensure(k)
        return self._inv[k]

    def binom(self, n: int, m: int) -> int:
        """Return the binomial coefficient ``C(n, m)``; zero when ``m`` is out of range."""
        if m < 0 or m > n:
            return 0
        p = self.modulus
        return self.factorial(n) * self.inverse_factorial(m) % p * self.inverse_factorial(n - m) % p