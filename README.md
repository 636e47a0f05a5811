# modcount

modcount gives exact answers to counting and expected-value problems. Every
answer is taken modulo a prime, usually 998244353. A few solvers take a
modulus that you supply instead. The package is pure Python and needs
nothing outside the standard library.

It has two layers.

**Building blocks** for modular combinatorics and polynomial algebra:

- `modcount.modular` provides `mod_pow`, `mod_inverse`, `quadratic_residue`
  and `mod_sqrt`. It also has `Combinatorics`, a factorial table that grows
  when needed. `Combinatorics` offers `factorial`, `inverse_factorial`,
  `inverse` and `binom`.
- `modcount.ntt` provides the number theoretic transform (`transform`) and
  `convolve`.
- `modcount.poly` provides the `Poly` class for polynomials and formal power
  series modulo 998244353. It supports `+`, `-`, `*`, `//` and `%`. Its
  methods are `degree`, `slice`, `derivative`, `integral`, `inverse`, `quo`,
  `divmod`, `ln`, `exp`, `sqrt`, `pow`, `series_pow` and `taylor`.
- `modcount.transposition` provides `transposed_mul`, multipoint `evaluate`
  and `interpolate`.

**Problem solvers**, one module per problem. Each module has a `solve`
function that you can call from Python. Each also has a `main` function,
which reads whitespace-separated integers from standard input and prints
the answer.

## Installation

```
pip install .
```

## Using the library

```python
from modcount.poly import Poly
from modcount.ntt import convolve
from modcount.transposition import evaluate, interpolate

f = Poly([1, 1])                 # 1 + x
print((f * f).degree())          # 2
print(convolve([1, 2], [3, 4]))  # [3, 10, 8]

g = Poly([1, 2, 3])
values = evaluate(g, [0, 1, 2])
print(interpolate([0, 1, 2], values) == g)   # True
```

Invalid input raises `ValueError`. For example:

- an element that has no inverse;
- a value that is not a quadratic residue, passed to `mod_sqrt`;
- interpolation points that repeat;
- a malformed tree or permutation passed to a solver.

## Command-line solvers

Each command reads its input from standard input.

| Command | Input |
| --- | --- |
| `modcount-ioi2020-10` | `T`, then for each case `n p q` followed by a permutation of `1..n`; prints one line per case |
| `modcount-ioi2020-14` | `k`, then `k` pairs `a p`, where `p` is a percentage |
| `modcount-ioi2020-18` | `n k mod`, then the parents of vertices `2..n`; prints one line per vertex |
| `modcount-ioi2020-21` | `n w`; prints `n` numbers on one line |
| `modcount-ioi2020-25` | `n`, then `n - 1` edges `u v`, then `n` pairs `a b` giving probabilities `a / b`; prints one line per vertex |
| `modcount-ioi2020-27` | `n mod`; prints `n` lines |
| `modcount-ioi2020-34` | `n`, then `n - 1` edges `u v` |
| `modcount-ioi2020-54` | `n d r` |
| `modcount-ioi2021-05` | `n mod` |
| `modcount-ioi2021-06` | `N m k` |
| `modcount-ioi2021-11` | `n w`, then `n` integers |

For example:

```
echo "3 998244353" | modcount-ioi2020-27
```

You can also call a solver directly:

```python
from modcount import ioi2020_27

print(ioi2020_27.solve(3, 998244353))
```

## Limitations

All arithmetic is pure Python. The solvers are correct for the input sizes
these problems allow, but the largest inputs can take a long time to run.

## Running the tests

```
pip install ".[test]"
pytest
```