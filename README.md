# contestlib

A library of solved competitive programming problems. Each problem is a plain
Python function that takes Python values and returns the answer, so it can be
reused, tested or combined without parsing console input. The package has no
dependencies beyond the standard library.

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

- `contestlib.cses`: introductory, sorting/searching and dynamic programming
  problems: `dice_combinations`, `find_hidden_number`, `weird_algorithm`,
  `longest_repetition`, `beautiful_permutation`, `number_spiral`,
  `missing_number`, `increasing_array`, `assign_apartments`, `ferris_wheel`,
  `concert_tickets`, `restaurant_customers`, `distinct_numbers` and
  `movie_festival`.
- `contestlib.kit_basics`: small exercises: `chocolate_breaks`,
  `cheapest_event`, `greeting`, `max_pie_slices`, `collection_queries`,
  `odd_count_values`, `extract_message`, `house_side`, `find_median` and
  `count_free_squares`.
- `contestlib.kit_greedy`: `can_make_23`, `cast_spells` and
  `smallest_passing_grade`.
- `contestlib.kit_advanced`: `max_non_adjacent_sum`, `count_level_paths`,
  `xor_gate_values`, `max_flow`, `convex_hull`, `count_hull_layers`,
  `guess_structure` and `worst_travel_distance`.
- `contestlib.atcoder`: `color_code`, `process_bag`, `min_meeting_time`,
  `flip_segments`, `clock_hour`, `vote_winners`, `min_sum_queries`,
  `shortest_switch_path` and `arc203_count`.
- `contestlib.codechef`: `has_cat`, `min_vase_cost` and `can_exchange`.
- `contestlib.codeforces`: `sum_with_zero_bonus`, `rearrange_to_avoid`,
  `min_operations`, `build_sequence`, `same_residue_multiset`,
  `has_duplicate`, `total_emeralds` and `longest_path`.

Where a problem has no answer, the function returns `None` (for example
`beautiful_permutation(3)`, `cheapest_event` over budget, or an unreachable
goal in `shortest_switch_path`). Invalid arguments raise `ValueError`.

## Examples

```python
from contestlib.cses import dice_combinations, weird_algorithm

dice_combinations(3)      # 4
weird_algorithm(3)        # [3, 10, 5, 16, 8, 4, 2, 1]
```

Interactive problems take a callable that answers the queries:

```python
from contestlib.cses import find_hidden_number

secret = 123456
find_hidden_number(lambda guess: secret > guess)   # 123456
```

```python
from contestlib.kit_advanced import max_flow, convex_hull

max_flow(3, [(1, 3, 5), (3, 2, 4)])           # 4, from vertex 1 to vertex 2
convex_hull([(0, 0), (2, 0), (1, 1), (0, 2), (2, 2)])
```

## What it does not do

There is no command-line program: nothing reads problem input from standard
input or prints judge-formatted output. Callers pass Python values to the
functions and format the results themselves.