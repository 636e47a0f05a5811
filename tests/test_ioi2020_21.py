import io

import pytest

from modcount.ioi2020_21 import bernoulli, main, solve
from modcount.modular import MOD, Combinatorics, mod_inverse
from modcount.poly import Poly


def test_bernoulli_is_inverse_of_shifted_exponential():
    comb = Combinatorics(MOD)
    n = 8
    series = Poly([comb.inverse_factorial(i + 1) for i in range(n + 1)])
    product = (series * bernoulli(n)).slice(n)
    assert product == Poly([1] + [0] * n)


def test_bernoulli_known_coefficients():
    b = bernoulli(7)
    assert b[0] == 1
    assert b[1] == (-mod_inverse(2, MOD)) % MOD
    assert b[2] == mod_inverse(12, MOD)
    assert b[3] == 0
    assert b[5] == 0
    assert b[7] == 0


def test_bernoulli_length():
    assert len(bernoulli(5)) == 6


def test_bernoulli_negative_degree():
    with pytest.raises(ValueError):
        bernoulli(-1)


def test_single_element():
    assert solve(1, 5) == [0]


@pytest.mark.parametrize("n,w", [(2, 3), (5, 7), (12, 2), (40, 123456)])
def test_length_and_range(n, w):
    result = solve(n, w)
    assert len(result) == n
    assert all(0 <= v < MOD for v in result)


def test_weight_is_reduced_modulo():
    assert solve(6, 4) == solve(6, 4 + MOD)


def test_zero_weight_has_no_inverse():
    with pytest.raises(ValueError):
        solve(3, 0)


def test_non_positive_size():
    with pytest.raises(ValueError):
        solve(0, 2)


def test_main_prints_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == " ".join(str(v) for v in solve(6, 3)) + "\n"


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    with pytest.raises(ValueError):
        main([])