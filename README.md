# cpalgo

Classic competitive-programming algorithms and judge-style output
checkers, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

All graph functions number vertices from 0.

| Module | Contents |
| --- | --- |
| `cpalgo.numbers` | `binpow(a, b, m=MOD)`, `mat_mul` and `matrix_power` for square integer matrices modulo `MOD` (10**9 + 7), `fibonacci`, `sieve` (primality flags for 0..n), `linear_sieve` (lowest prime factors and primes), `submasks` (non-empty submasks in decreasing order) |
| `cpalgo.dp` | `max_grid_path` (best right/down path sum), `count_ordered_sums`, `min_coins` (raises `ValueError` if the total cannot be formed), `best_wine_profit` |
| `cpalgo.geometry` | `Point` with `cross` and `triangle`, `segments_intersect`, `polygon_area` |
| `cpalgo.strings` | `Trie` (`insert`, prefix `search`), `z_occurrences`, `split` (Z-function based), `join` |
| `cpalgo.fish` | `max_weights(n, m, xs, ys, ws)` for the pier-placement subtasks |
| `cpalgo.structures` | `DisjointSet` (`find`, `union` returning whether two sets were merged), `SegmentTree` (`modify`, inclusive range-sum `get`, `build`) |
| `cpalgo.traversal` | `bfs_distances` (unreachable vertices keep 0), `has_cycle`, `topological_sort`, `eulerian_circuit` (raises `ValueError` when no circuit exists), `euler_tour`, `SubtreeSums` (`update`, `subtree_sum`) |
| `cpalgo.lca` | `BinaryLiftingLCA(parents)`, where `parents[i - 1]` is the parent of vertex `i`; method `lca(a, b)` |
| `cpalgo.paths` | `dijkstra_path` (vertex 0 to `n - 1`, or `None`), `floyd_warshall` (`math.inf` for unreachable pairs), `find_negative_cycle` (a cycle or `None`), `spfa_has_negative_cycle` |
| `cpalgo.verdict` | `Outcome`, `CheckResult` (with `accepted`), `ordinal_suffix`, `compress` |
| `cpalgo.numeric_checkers` | `compare_double`, `compare_double_sequences`, `compare_int`, `compare_long_sequences`, `compare_unordered`, `compare_huge_int`, `score_points` |
| `cpalgo.token_checkers` | `compare_tokens`, `compare_lines`, `compare_line_tokens`, `compare_yes_no`, `compare_cases_single`, `compare_cases_ints`, `compare_cases_tokens` |
| `cpalgo.testgen` | `random_test(rng)`, `write_tests(directory, count=50, rng)` writing `test<i>.txt` files |

## Examples

```python
from cpalgo.numbers import binpow, fibonacci, sieve

binpow(2, 10, 10**9 + 7)   # 1024
fibonacci(10)              # 55, computed modulo 10**9 + 7
primes = [i for i, is_prime in enumerate(sieve(20)) if is_prime]
# [2, 3, 5, 7, 11, 13, 17, 19]
```

```python
from cpalgo.geometry import Point, polygon_area

polygon_area([Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3)])  # 12.0
```

```python
from cpalgo.strings import Trie

trie = Trie(["apple"])
trie.search("app")    # True: any prefix of an inserted word matches
trie.search("apply")  # False
```

```python
from cpalgo.token_checkers import compare_tokens

result = compare_tokens("1 2 3", "1 2 4")
result.outcome   # Outcome.WRONG_ANSWER
result.message   # "3rd words differ - expected: '3', found: '4'"
```

Checkers take the jury answer and the contestant output as text and
return a `CheckResult` holding an `Outcome` (`OK`, `WRONG_ANSWER`,
`PRESENTATION_ERROR`, `FAIL` or `POINTS`) and a message; `score_points`
also sets `points`.

## Command-line tools

`cpalgo-polygon-area` reads a vertex count followed by that many `x y`
pairs, from the file named as its first argument or from standard input,
and prints the polygon's area:

```
printf '4\n0 0\n4 0\n4 3\n0 3\n' | cpalgo-polygon-area
```

`cpalgo-fish` reads `N M` followed by `M` lines of `X Y W` from standard
input and prints the result of `max_weights`:

```
printf '3 2\n0 0 5\n2 0 7\n' | cpalgo-fish
```

## What it does not do

The checkers are Python functions only: there are no checker,
interactor or generator commands that read judge files from the command
line. Test generation is limited to `cpalgo.testgen`'s count-then-numbers
files.