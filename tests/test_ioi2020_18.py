import io
import sys

import pytest

from modcount.ioi2020_18 import main, solve


@pytest.mark.parametrize("mod", [998244353, 12, 1000])
@pytest.mark.parametrize("k", [0, 1, 2, 5, 1000])
def test_single_leaf_gives_square(k, mod):
    assert solve(1, k, mod, []) == [k * k % mod]


@pytest.mark.parametrize("mod", [1000000007, 10**6])
@pytest.mark.parametrize("k", range(8))
def test_cherry_tree(k, mod):
    answers = solve(3, k, mod, [1, 1])
    assert answers[1] == k * k % mod
    assert answers[2] == k * k % mod
    assert answers[0] == k**3 * (k + 1) % mod


@pytest.mark.parametrize("k", [3, 20, 123])
def test_results_consistent_across_moduli(k):
    parents = [1, 1, 2, 2, 3, 3]
    m1, m2 = 10007, 10009
    combined = solve(7, k, m1 * m2, parents)
    assert [v % m1 for v in combined] == solve(7, k, m1, parents)
    assert [v % m2 for v in combined] == solve(7, k, m2, parents)


def test_all_leaves_agree():
    answers = solve(7, 9, 998244353, [1, 1, 2, 2, 3, 3])
    assert answers[3] == answers[4] == answers[5] == answers[6] == 81


def test_rejects_single_child():
    with pytest.raises(ValueError):
        solve(2, 3, 7, [1])


def test_rejects_small_modulus():
    with pytest.raises(ValueError):
        solve(1, 3, 1, [])


def test_rejects_wrong_parent_count():
    with pytest.raises(ValueError):
        solve(3, 3, 7, [1])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3 5 1000000007\n1 1\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == [str(v) for v in solve(3, 5, 1000000007, [1, 1])]