import io
import itertools
import math
import random

import pytest

from modcount.ioi2021_11 import count_by_falling_factorial, main, solve
from modcount.modular import MOD


def _brute(w, values):
    return sum(
        all(a * b <= w for a, b in zip(order, order[1:]))
        for order in itertools.permutations(values)
    )


def _falling(x, k):
    result = 1
    for i in range(k):
        result *= x - i
    return result


def test_falling_factorial_of_no_roots():
    assert count_by_falling_factorial([]) == [1]


@pytest.mark.parametrize("roots", [[0], [3, 5], [MOD - 1, 0, 2, 7], list(range(12))])
def test_falling_factorial_expansion_reproduces_product(roots):
    n = len(roots)
    coefficients = count_by_falling_factorial(roots)
    assert len(coefficients) == n + 1
    for x in range(-3, 15):
        expanded = sum(coefficients[n - k] * _falling(x, k) for k in range(n + 1)) % MOD
        assert expanded == math.prod(x + r for r in roots) % MOD


@pytest.mark.parametrize(
    "w, values",
    [
        (5, [2, 3]),
        (6, [2, 3]),
        (3, [1, 2, 3]),
        (5, [-2, -3, 1]),
        (3, [-1, 2, 0, 4]),
        (6, [3, 3, 1, -2, -4]),
        (4, [5, -5, 2, -2, 1, 0]),
        (0, [0, 0, 7]),
        (10, [7]),
    ],
)
def test_solve_matches_brute_force(w, values):
    assert solve(w, values) == _brute(w, values)


def test_solve_random_cases_match_brute_force():
    rng = random.Random(2021)
    for _ in range(20):
        n = rng.randint(1, 6)
        values = [rng.randint(-4, 4) for _ in range(n)]
        w = rng.randint(0, 10)
        assert solve(w, values) == _brute(w, values)


def test_solve_ignores_input_order():
    values = [4, -3, 2, 2, -1, 0, 5, -6]
    shuffled = values[::-1]
    assert solve(8, values) == solve(8, shuffled)


def test_main_prints_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 100\n1 2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(math.factorial(3))


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 100\n1 2\n"))
    with pytest.raises(ValueError):
        main([])