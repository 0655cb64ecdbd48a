# judgesolvers

Solvers for a collection of classic online-judge problems: number puzzles,
prime sieves, dynamic programming, shortest paths and spanning trees,
string puzzles, simulations, contiguous products and a box-pushing maze
solver. Every solver is a plain function you can call from Python, and each
family of problems can also be driven from the command line by feeding the
judge-style input on standard input. The package has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                       | Problem numbers handled by `run`                          | Main functions |
|------------------------------|-----------------------------------------------------------|----------------|
| `judgesolvers.arithmetic`    | 100, 573, 897, 10038, 10071, 10161, 10229, 10751, 11172, 11417, 11547, 11614, 11621, 11878, 13025 | `max_cycle_length`, `is_jolly`, `modular_fibonacci`, `ant_position`, `snail`, `gcd_sum`, ... |
| `judgesolvers.primes`        | 543, 1644, 10555, 10622, 10650, 10680                      | `prime_sieve`, `prime_gap`, `goldbach`, `largest_perfect_power`, `dead_fraction`, `determinate_prime_runs`, `lcm_last_digit` |
| `judgesolvers.dynamic`       | 711, 10405, 10496, 10654, 10702, 11003, 11307, 11782       | `lcs_length`, `beeper_tour`, `uxuhul_vote`, `travelling_profit`, `box_stack_height`, `optimal_cut`, `can_divide`, `arborescence_cost` |
| `judgesolvers.text_puzzles`  | 343, 1584, 11385, 11512, 11855                             | `gattaca`, `buzzwords`, `min_rotation`, `match_bases`, `da_vinci_decode` |
| `judgesolvers.graphs`        | 1112, 10986, 11228, 11631, 11747                           | `UnionFind`, `shortest_path`, `mice_escaping`, `transportation`, `dark_roads_savings`, `heavy_cycle_edges` |
| `judgesolvers.geometry`      | 1595, 10927                                                | `hidden_lights`, `is_symmetric` |
| `judgesolvers.simulation`    | 714, 10172, 10273, 11057, 11348, 12096                     | `cargo_time`, `surviving_cows`, `set_stack`, `exhibition_shares`, `exact_sum`, `copy_books` |
| `judgesolvers.routing`       | trip routing over named roads                              | `RoadMap` (`add_route`, `route`, `report`) |
| `judgesolvers.risk`          | strongest achievable border on a Risk board                | `max_border_armies` |
| `judgesolvers.products`      | largest product of a contiguous run                        | `max_subsequence_product` |
| `judgesolvers.sokoban`       | pushing a box to its target in a maze                      | `Maze`, `parse_maze`, `push_boxes`, `push_boxes_by_states` |

## Using the solvers from Python

```python
from judgesolvers.arithmetic import double_displacement, max_cycle_length
from judgesolvers.dynamic import lcs_length
from judgesolvers.primes import goldbach
from judgesolvers.graphs import UnionFind, shortest_path

double_displacement(5, 12)                 # 120
max_cycle_length(1, 10)                    # 20
lcs_length("a1b2c3d4e", "zz1yy2xx3ww4vv")  # 4
goldbach(8)                                # (3, 5)

components = UnionFind(4)
components.unite(0, 1)
components.same(0, 1)                      # True

shortest_path(3, [(0, 1, 100), (0, 2, 200), (1, 2, 50)], 2, 0)  # 150
```

Functions that find nothing return `None` (for example `shortest_path`
when the target is unreachable, `goldbach` when no pair exists, or
`push_boxes` when the box cannot reach its target). Invalid arguments raise
`ValueError`.

Every module also has a `run` function that takes the whole judge input as
a string and returns the judge output as a string. The themed modules take
the problem number as the first argument, `run("100", "1 10\n")`; the
single-problem modules (`routing`, `risk`, `products`, `sokoban`) take only
the text. An unknown problem number raises `ValueError`.

In `judgesolvers.sokoban`, `push_boxes` finds a solution with the fewest
pushes and, among those, the fewest walking steps; `push_boxes_by_states`
searches over box and player positions together and finds the fewest moves
in total. Pushes are written in upper case (`N`, `E`, `S`, `W`) and walking
steps in lower case. The command and `run` use `push_boxes`.

## Using the solvers from the command line

Each module installs a command that reads judge input from standard input
and writes the answers to standard output:

```
judgesolvers-arithmetic PROBLEM < input.txt
judgesolvers-primes PROBLEM < input.txt
judgesolvers-dynamic PROBLEM < input.txt
judgesolvers-text PROBLEM < input.txt
judgesolvers-graphs PROBLEM < input.txt
judgesolvers-geometry PROBLEM < input.txt
judgesolvers-simulation PROBLEM < input.txt
```

where `PROBLEM` is one of the numbers listed for that module above.

The single-problem commands take their input directly:

```
judgesolvers-routing < trips.txt
judgesolvers-risk < boards.txt
judgesolvers-products < sequences.txt
judgesolvers-sokoban < mazes.txt
```

## What the package does not do

The commands read only from standard input; they take no file names and
write no files. There is no combined command that picks the module from a
problem number: choose the command whose module handles the problem.