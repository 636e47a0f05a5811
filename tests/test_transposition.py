import random

import pytest

from modcount.modular import MOD
from modcount.ntt import convolve
from modcount.poly import Poly
from modcount.transposition import evaluate, interpolate, transposed_mul


def _random_list(rng, length):
    return [rng.randrange(MOD) for _ in range(length)]


def test_transposed_mul_by_unit_keeps_values():
    assert transposed_mul([1, 2, 3], [1]) == [1, 2, 3]


def test_transposed_mul_shorter_operand_gives_zero():
    assert transposed_mul([1], [1, 2]) == [0]


def test_transposed_mul_rejects_empty_operand():
    with pytest.raises(ValueError):
        transposed_mul([1, 2], [])


@pytest.mark.parametrize("lb, lc", [(3, 4), (20, 25), (40, 60)])
def test_transposed_mul_is_dual_of_convolution(lb, lc):
    rng = random.Random(lb * 1000 + lc)
    b = _random_list(rng, lb)
    c = _random_list(rng, lc)
    a = _random_list(rng, lb + lc - 1)
    lhs = sum(x * y for x, y in zip(transposed_mul(a, b), c)) % MOD
    rhs = sum(x * y for x, y in zip(a, convolve(b, c))) % MOD
    assert lhs == rhs
    assert len(transposed_mul(a, b)) == lc


@pytest.mark.parametrize("degree, count", [(5, 8), (20, 15), (70, 90)])
def test_evaluate_matches_taylor_shift(degree, count):
    rng = random.Random(degree + count)
    f = Poly(_random_list(rng, degree + 1))
    xs = _random_list(rng, count)
    values = evaluate(f, xs)
    assert len(values) == count
    for x, v in zip(xs, values):
        assert f.taylor(x)[0] == v


def test_evaluate_product_vanishes_at_roots():
    rng = random.Random(7)
    roots = _random_list(rng, 60)
    product = Poly(1)
    for r in roots:
        product = product * Poly([-r, 1])
    assert evaluate(product, roots) == [0] * len(roots)


def test_evaluate_empty_points():
    assert evaluate(Poly([1, 2, 3]), []) == []


@pytest.mark.parametrize("n", [1, 10, 70])
def test_interpolate_then_evaluate_round_trip(n):
    rng = random.Random(n)
    xs = rng.sample(range(1, 10**6), n)
    ys = _random_list(rng, n)
    poly = interpolate(xs, ys)
    assert len(poly) == n
    assert evaluate(poly, xs) == ys


@pytest.mark.parametrize("n", [4, 64])
def test_interpolate_recovers_polynomial(n):
    rng = random.Random(100 + n)
    f = Poly(_random_list(rng, n))
    xs = rng.sample(range(MOD), n)
    assert interpolate(xs, evaluate(f, xs)) == f


def test_interpolate_rejects_repeated_points():
    with pytest.raises(ValueError):
        interpolate([1, 2, 1], [3, 4, 5])


def test_interpolate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        interpolate([1, 2], [3])