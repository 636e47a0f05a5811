"""Dense polynomials and formal power series modulo 998244353."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from modcount.modular import MOD, Combinatorics, mod_inverse, mod_sqrt
from modcount.ntt import convolve

_comb = Combinatorics(MOD)
_INV2 = (MOD + 1) // 2


def _padded(values: list[int], length: int) -> list[int]:
    """Return ``values`` cut or zero-padded to exactly ``length`` entries."""
    if len(values) >= length:
        return values[:length]
    return values + [0] * (length - len(values))


class Poly:
    """A polynomial with coefficients modulo 998244353, lowest degree first.

    The degree is the length of the coefficient list minus one; trailing
    zeros are kept, since power-series operations work to that precision.
    """

    __slots__ = ("coeffs",)

    def __init__(self, coeffs: int | Iterable[int] = 0) -> None:
        if isinstance(coeffs, int):
            values = [coeffs % MOD]
        else:
            values = [c % MOD for c in coeffs]
        self.coeffs: list[int] = values or [0]

    @staticmethod
    def _coerce(other: object) -> Poly | None:
        if isinstance(other, Poly):
            return other
        if isinstance(other, int):
            return Poly(other)
        return None

    def __getitem__(self, k: int) -> int:
        return self.coeffs[k] if 0 <= k < len(self.coeffs) else 0

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coeffs)

    def __repr__(self) -> str:
        return f"Poly({self.coeffs!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self.coeffs == other.coeffs

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        size = max(len(self), len(rhs))
        return Poly(self[i] + rhs[i] for i in range(size))

    __radd__ = __add__

    def __neg__(self) -> Poly:
        return Poly(-c for c in self.coeffs)

    def __sub__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> Poly:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Poly(convolve(self.coeffs, rhs.coeffs))

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        n, m = self.degree(), rhs.degree()
        if n < m:
            return Poly(0)
        size = n - m + 1
        top = Poly(_padded(self.coeffs[::-1], size))
        bottom = Poly(_padded(rhs.coeffs[::-1], size))
        return Poly(top.quo(bottom).coeffs[::-1])

    def __mod__(self, other: object) -> Poly:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self.degree() < rhs.degree():
            return Poly(self.coeffs)
        return self.divmod(rhs)[1]

    def degree(self) -> int:
        """Return the length of the coefficient list minus one."""
        return len(self.coeffs) - 1

    def slice(self, d: int) -> Poly:
        """Return the first ``d + 1`` coefficients, zero-padded if needed."""
        return Poly(_padded(self.coeffs, d + 1))

    def derivative(self) -> Poly:
        """Return the formal derivative."""
        if self.degree() == 0:
            return Poly(0)
        return Poly(c * i for i, c in enumerate(self.coeffs) if i)

    def integral(self) -> Poly:
        """Return the antiderivative with zero constant term."""
        return Poly(
            [0] + [c * _comb.inverse(i + 1) for i, c in enumerate(self.coeffs)]
        )

    def inverse(self) -> Poly:
        """Return the power-series inverse to the same precision.

        Raises ValueError when the constant term is zero.
        """
        n = len(self)
        g = [mod_inverse(self.coeffs[0], MOD)]
        m = 1
        while m < n:
            m <<= 1
            fg = _padded(convolve(self.coeffs[:m], g), m)
            correction = [-x % MOD for x in fg]
            correction[0] = (correction[0] + 2) % MOD
            g = _padded(convolve(g, correction), m)
        return Poly(_padded(g, n))

    def quo(self, other: Poly) -> Poly:
        """Return ``self / other`` as a power series to ``other``'s precision."""
        size = len(other)
        if size == 1:
            return Poly(self[0] * mod_inverse(other[0], MOD))
        numerator = _padded(self.coeffs, size)
        return Poly(_padded(convolve(numerator, other.inverse().coeffs), size))

    def divmod(self, other: Poly) -> tuple[Poly, Poly]:
        """Return quotient and remainder of polynomial division.

        The remainder has ``other.degree()`` coefficients.
        """
        if self.degree() < other.degree():
            return Poly(0), Poly(self.coeffs)
        q = self // other
        m = other.degree()
        remainder = (self - q * other).coeffs[:m]
        return q, Poly(remainder)

    def ln(self) -> Poly:
        """Return the power-series logarithm (constant term assumed 1)."""
        if self.degree() == 0:
            return Poly(0)
        return self.derivative().quo(self.slice(self.degree() - 1)).integral()

    def exp(self) -> Poly:
        """Return the power-series exponential; the constant term is ignored."""
        n = len(self)
        f = [0] + self.coeffs[1:]
        g = [1]
        m = 1
        while m < n:
            m <<= 1
            log_g = Poly(_padded(g, m)).ln().coeffs
            factor = [
                ((f[i] if i < n else 0) - log_g[i]) % MOD for i in range(m)
            ]
            factor[0] = (factor[0] + 1) % MOD
            g = _padded(convolve(g, factor), m)
        return Poly(_padded(g, n))

    def sqrt(self) -> Poly:
        """Return a power-series square root to the same precision.

        Raises ValueError when the constant term has no usable root.
        """
        n = len(self)
        g = [mod_sqrt(self.coeffs[0], MOD)]
        m = 1
        while m < n:
            m <<= 1
            g_inv = Poly(_padded(g, m)).inverse().coeffs
            ratio = _padded(convolve(self.coeffs[:m], g_inv), m)
            old = _padded(g, m)
            g = [(a + b) * _INV2 % MOD for a, b in zip(old, ratio)]
        return Poly(_padded(g, n))

    def pow(self, k: int) -> Poly:
        """Return the exact ``k``-th power as a polynomial."""
        if k < 0:
            raise ValueError("exponent must be non-negative")
        if k == 0:
            return Poly(1)
        result: Poly | None = None
        base = Poly(self.coeffs)
        while k:
            if k & 1:
                result = base if result is None else result * base
            k >>= 1
            if k:
                base = base * base
        assert result is not None
        return result

    def series_pow(self, k: int) -> Poly:
        """Return the ``k``-th power truncated to the same precision."""
        if k < 0:
            raise ValueError("exponent must be non-negative")
        deg = self.degree()
        lz = next((i for i, c in enumerate(self.coeffs) if c), None)
        if lz is None:
            return Poly(self.coeffs)
        if lz * k > deg:
            return Poly([0] * (deg + 1))
        lead = self.coeffs[lz]
        part = Poly(self.coeffs[lz : deg - lz * (k - 1) + 1]) * mod_inverse(lead, MOD)
        part = (part.ln() * k).exp() * pow(lead, k, MOD)
        result = [0] * (lz * k) + part.coeffs
        return Poly(_padded(result, deg + 1))

    def taylor(self, k: int) -> Poly:
        """Return the coefficients of ``f(x + k)``."""
        n = self.degree()
        shifted = [
            self.coeffs[n - i] * _comb.factorial(n - i) for i in range(n + 1)
        ]
        helper = []
        power = 1
        for i in range(n + 1):
            helper.append(_comb.inverse_factorial(i) * power % MOD)
            power = power * k % MOD
        product = convolve(shifted, helper)
        return Poly(product[n - i] * _comb.inverse_factorial(i) for i in range(n + 1))