# drillbook

Solutions to classic programming-contest exercises, written as plain Python
functions and classes that take ordinary values (lists, strings, tuples) and
return their answers instead of printing them.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `drillbook.grids` | Flood fills and breadth-first searches on rectangular grids: `count_regions`, `count_color_regions`, `longest_distinct_path`, `shortest_path_breaking_wall`, `melt_cheese` (returns a `MeltResult` of `hours` and `remaining`), `days_to_ripen` |
| `drillbook.graphs` | Tree and graph traversals: `ant_final_rooms`, `count_infected` |
| `drillbook.backtracking` | `permutations_of`, `combinations_of`, `sequences_with_repetition` (generators of tuples in lexicographic order), `solve_sudoku`, `count_n_queens` |
| `drillbook.segment_trees` | `SumSegmentTree` (`query`, `update`), `MinMaxSegmentTree` (`query`), `range_sum_queries`, `count_swaps` |
| `drillbook.heaps` | `AbsoluteHeap` (`push`, `pop`, `len()`), `run_absolute_heap`, `min_merge_cost`, `max_lecture_profit`, `top_k_frequent`, `run_deque` |
| `drillbook.hashing` | `count_pairs_with_sum`, `run_map_commands`, `count_occurrences`, `max_frequency`, `build_lookup`, `count_triples_with_sum` |
| `drillbook.basics` | Short warm-up problems: `number_from_divisors`, `count_group_words`, `compare`, `gear_score`, `statistics` (returns a `Statistics` of `mean`, `median`, `mode`, `spread`), `max_rope_weight`, `count_strokes`, `grade_point_average`, `grid_cost`, `count_croatian_letters`, `letter_grade`, `shell_game` |
| `drillbook.cli` | The `drillbook` command described below |

## Using the library

```python
from drillbook.backtracking import combinations_of, count_n_queens
from drillbook.basics import compare, letter_grade
from drillbook.segment_trees import SumSegmentTree

count_n_queens(8)              # 92
compare(1, 2)                  # "<"
letter_grade(95)               # "A"
list(combinations_of(4, 2))    # [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]

tree = SumSegmentTree([1, 2, 3, 4, 5])
tree.query(1, 3)               # 9: zero-based, both ends included
tree.update(2, 10)             # replace the value at index 2
tree.query(1, 3)               # 16
```

Malformed input (ragged grids, out-of-range node or gear numbers, unknown
commands, an unsolvable sudoku, popping an empty heap or deque) raises
`ValueError` or `IndexError`. Where the exercise itself has a "no answer"
outcome, that outcome is returned: `shortest_path_breaking_wall` and
`days_to_ripen` return `-1`, `grid_cost` returns `None` when the grid is
impossible, and `run_map_commands` records `None` for a `find` of a missing
key.

## Command line

The `drillbook` command reads an exercise's input, as whitespace-separated
words and numbers, from standard input and prints the answer:

```
drillbook --help
drillbook permutations <<< "3 2"
```

| Exercise | Input | Output |
| --- | --- | --- |
| `regions` | `N`, then `N` rows of colour letters | region counts for normal and red-green colour-blind viewing |
| `range-sum` | `N Q`, `N` values, then `Q` lines `x y a b` | one range sum per query (positions from 1) |
| `min-max` | `N M`, `N` values, then `M` lines `a b` | `min max` for each range (positions from 1) |
| `permutations` | `N M` | every sequence of `M` distinct numbers from 1..`N`, one per line |
| `sudoku` | 81 digits, `0` for an empty cell | the completed 9x9 board |
| `strokes` | `T`, then for each case a length and a colour string | `Case #i: strokes` |
| `grids` | `G`, then `G` pairs `d n` | `Grid #i: cost` or `impossible`, each followed by a blank line |
| `occurrences` | `N M`, `N` values, then `M` queries | the count of each query on one line |

Input that runs short or is not a number ends the command with status 1 and
an error message.

## What it does not do

The command covers only the exercises listed above. The rest of the
package's functions are available as a library only and have no command-line
front end.