import random

import pytest

from modcount.modular import MOD, Combinatorics
from modcount.poly import Poly


def _random_poly(rng, length, constant=None):
    coeffs = [rng.randrange(MOD) for _ in range(length)]
    if constant is not None:
        coeffs[0] = constant
    return Poly(coeffs)


def _identity(length):
    return Poly([1] + [0] * (length - 1))


def test_getitem_beyond_end_is_zero():
    p = Poly([7, 2])
    assert p[1] == 2
    assert p[10] == 0
    assert len(p) == 2


def test_coefficients_are_reduced():
    assert Poly([-1, MOD + 5]).coeffs == [MOD - 1, 5]


def test_add_and_subtract_round_trip():
    rng = random.Random(1)
    a = _random_poly(rng, 9)
    b = _random_poly(rng, 5)
    assert (a + b) - b == a
    assert a - a == Poly([0] * 9)
    assert -(-a) == a


def test_difference_of_squares():
    assert Poly([1, -1]) * Poly([1, 1]) == Poly([1, 0, -1])


@pytest.mark.parametrize("sizes", [(4, 6), (80, 90)])
def test_multiplication_is_commutative_and_distributive(sizes):
    rng = random.Random(sum(sizes))
    a = _random_poly(rng, sizes[0])
    b = _random_poly(rng, sizes[1])
    c = _random_poly(rng, sizes[1])
    assert a * b == b * a
    assert a * (b + c) == a * b + a * c
    assert (a * b).degree() == a.degree() + b.degree()


def test_scalar_multiplication():
    p = Poly([1, 2, 3])
    assert p * 2 == p + p
    assert 3 * p == p + p + p


def test_geometric_series_inverse():
    assert Poly([1, -1, 0, 0, 0]).inverse() == Poly([1, 1, 1, 1, 1])


@pytest.mark.parametrize("length", [1, 7, 150])
def test_inverse_is_series_inverse(length):
    rng = random.Random(length)
    f = _random_poly(rng, length, constant=rng.randrange(1, MOD))
    assert (f * f.inverse()).slice(length - 1) == _identity(length)


def test_inverse_of_zero_constant_raises():
    with pytest.raises(ValueError):
        Poly([0, 1, 2]).inverse()


@pytest.mark.parametrize("sizes", [(10, 4), (200, 70), (5, 0)])
def test_divmod_reconstructs_dividend(sizes):
    rng = random.Random(sizes[0] * 7 + sizes[1])
    a = _random_poly(rng, sizes[0] + 1)
    b = _random_poly(rng, sizes[1] + 1)
    b.coeffs[-1] = rng.randrange(1, MOD)
    q, r = a.divmod(b)
    assert q.degree() == sizes[0] - sizes[1]
    assert (q * b + r).slice(a.degree()) == a
    assert a // b == q
    if sizes[1]:
        assert len(r) == sizes[1]
        assert a % b == r


def test_division_by_larger_degree():
    a = Poly([1, 2])
    b = Poly([1, 2, 3])
    assert a // b == Poly(0)
    assert a % b == a
    assert a.divmod(b) == (Poly(0), a)


def test_quo_times_divisor_recovers_numerator():
    rng = random.Random(3)
    h = _random_poly(rng, 40)
    g = _random_poly(rng, 40, constant=5)
    assert (h.quo(g) * g).slice(39) == h


def test_derivative_integral_round_trip():
    rng = random.Random(4)
    f = _random_poly(rng, 12, constant=0)
    assert f.derivative().integral() == f
    g = _random_poly(rng, 12)
    assert g.integral().derivative() == g


def test_derivative_of_constant():
    assert Poly([9]).derivative() == Poly(0)


@pytest.mark.parametrize("length", [2, 33, 130])
def test_exp_ln_round_trip(length):
    rng = random.Random(length + 100)
    f = _random_poly(rng, length, constant=1)
    assert f.ln().exp() == f
    g = _random_poly(rng, length, constant=0)
    assert g.exp().ln() == g


def test_ln_of_product_is_sum():
    rng = random.Random(5)
    a = _random_poly(rng, 20, constant=1)
    b = _random_poly(rng, 20, constant=1)
    assert (a * b).slice(19).ln() == a.ln() + b.ln()


def test_exp_of_x_gives_inverse_factorials():
    comb = Combinatorics(MOD)
    e = Poly([0, 1] + [0] * 14).exp()
    assert e.coeffs == [comb.inverse_factorial(i) for i in range(16)]


@pytest.mark.parametrize("length", [1, 9, 100])
def test_sqrt_squares_back(length):
    rng = random.Random(length + 7)
    g = _random_poly(rng, length, constant=2)
    f = (g * g).slice(length - 1)
    root = f.sqrt()
    assert root[0] == 2
    assert (root * root).slice(length - 1) == f


def test_sqrt_of_non_residue_raises():
    with pytest.raises(ValueError):
        Poly([3, 1]).sqrt()


def test_pow_matches_repeated_product():
    p = Poly([1, 2, 3])
    assert p.pow(0) == Poly(1)
    assert p.pow(1) == p
    assert p.pow(4) == p * p * p * p


def test_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        Poly([1, 1]).pow(-1)


@pytest.mark.parametrize("k", [0, 1, 3, 7])
def test_series_pow_matches_truncated_pow(k):
    rng = random.Random(k + 50)
    f = _random_poly(rng, 15, constant=rng.randrange(1, MOD))
    assert f.series_pow(k) == f.pow(k).slice(14)


def test_series_pow_with_leading_zeros():
    f = Poly([0, 0, 3, 1, 4, 1, 5, 9, 2, 6])
    assert f.series_pow(2) == f.pow(2).slice(9)
    assert f.series_pow(5) == Poly([0] * 10)


def test_series_pow_of_zero_polynomial():
    z = Poly([0, 0, 0])
    assert z.series_pow(3) == z


def test_taylor_shift_round_trip_and_value():
    rng = random.Random(8)
    f = _random_poly(rng, 25)
    k = 12345
    shifted = f.taylor(k)
    assert shifted.taylor(-k) == f
    assert shifted[0] == sum(c * pow(k, i, MOD) for i, c in enumerate(f)) % MOD


def test_taylor_of_line():
    assert Poly([0, 1]).taylor(5) == Poly([5, 1])