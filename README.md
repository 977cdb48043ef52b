# cpsolve

Solutions to short competitive-programming problems. Each problem is a plain
Python function that takes parsed values and returns the answer. A
command-line tool reads the usual multi-case input format (first the number
of cases, then each case) and writes the answers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the functions

The solutions are grouped by difficulty:

- `cpsolve.contest`: `amogus_plural`, `coin_split_count`, `fanum_easy`,
  `fanum_hard`, `mex_operations`, `segment_values`, `skibidus_min_length`
- `cpsolve.lvl800_basic`: `array_color`, `beautiful_arrangement`,
  `coin_sum_possible`, `cover_water`, `desorted_ops`, `doremy_paint`,
  `extreme_round`, `forbidden_sum`, `game_winner`, `same_parity_pairs`,
  `halloumi_sortable`, `jagged_sortable`
- `cpsolve.lvl800_more`: `k_index`, `line_trip`, `one_two_split`,
  `fill_sequence`, `has_small_gcd_pair`, `subsegment_has`, `target_score`,
  `twin_permutation`, `unit_array_ops`, `split_united`, `walking_master`
- `cpsolve.lvl900_basic`: `array_clone_ops`, `balanced_removals`,
  `chemistry_possible`, `compare_string_cost`, `deletive_editing`,
  `forked_positions`, `clock_time`, `longest_divisor_run`, `mainak_max`
- `cpsolve.lvl900_more`: `make_ap`, `make_increasing_ops`, `make_zero_ops`,
  `odd_queries`, `perm_swap_k`, `x_sum_possible`
- `cpsolve.lvl1000`: `helmet_cost`, `merge_array_max`, `monster_order`,
  `olya_beauty`, `raspberries_ops`, `ski_resort_ways`, `swap_delete_cost`

```python
from cpsolve.contest import amogus_plural
from cpsolve.lvl900_more import perm_swap_k

amogus_plural("sus")        # "si"
perm_swap_k([3, 1, 2])      # 1
```

Functions raise `ValueError` on input they cannot handle, such as an empty
array where one element is needed.

## Reading input

`cpsolve.reader.TokenReader` splits a text on whitespace and hands out tokens
with `word()`, `integer()` and `integers(count)`; it raises `EOFError` when the
input runs out. `cpsolve.reader.run_cases(text, handler)` reads the case
count, calls `handler(reader)` once per case and joins the results, one per
line. A handler may raise `cpsolve.reader.StopRun` to end the run early,
optionally with a last piece of output.

## Using the command

```
cpsolve <problem> [input-file]
```

Without an input file the command reads standard input. It solves every case
and writes the answers to standard output. If the input is short or
malformed, it prints a message to standard error and exits with status 1.
From Python the same is available as `cpsolve.cli.run_problem(name, text)`,
which returns the output as a string, and `cpsolve.cli.problem_names()` lists
the accepted names.

Problem names and the functions they run:

| Problem | Function |
| --- | --- |
| `among` | `amogus_plural` |
| `coin` | `coin_split_count` |
| `fanum-easy` | `fanum_easy` |
| `fanum-hard` | `fanum_hard` |
| `mex` | `mex_operations` |
| `segment-sumc` | `segment_values` |
| `skibidus` | `skibidus_min_length` |
| `array-color` | `array_color` |
| `beautiful` | `beautiful_arrangement` |
| `coin-sum` | `coin_sum_possible` |
| `contest` | reads each case's heights and writes nothing |
| `cover-water` | `cover_water` |
| `desorted` | `desorted_ops` |
| `doremy-paint` | `doremy_paint` |
| `extreme-round` | `extreme_round` |
| `forbidden` | `forbidden_sum` |
| `game-integer` | `game_winner` |
| `good-parity` | `same_parity_pairs` |
| `halloumi` | `halloumi_sortable` |
| `jagged-swaps` | `jagged_sortable` |
| `k-index` | `k_index` |
| `line-trip` | `line_trip` |
| `one-two` | `one_two_split` |
| `sequence` | `fill_sequence` |
| `serval` | `has_small_gcd_pair` |
| `subsegment` | `subsegment_has` |
| `target-practice` | `target_score` |
| `twin-perm` | `twin_permutation` |
| `unit-array` | `unit_array_ops` |
| `united` | `split_united` |
| `walking-master` | `walking_master` |
| `array-clone` | `array_clone_ops` |
| `balanced-round` | `balanced_removals` |
| `chemistry` | `chemistry_possible` |
| `comp-string` | `compare_string_cost` |
| `deletive-editing` | `deletive_editing` |
| `forked` | `forked_positions` |
| `jellyfish` | `clock_time` |
| `longest-divisor` | `longest_divisor_run` |
| `mainak` | `mainak_max` |
| `make-ap` | `make_ap` |
| `make-increasing` | `make_increasing_ops` |
| `make-zero` | `make_zero_ops` |
| `odd-q` | `odd_queries` |
| `perm-swap` | `perm_swap_k` |
| `x-sum` | `x_sum_possible` |
| `helmet` | `helmet_cost` |
| `merge-array` | `merge_array_max` |
| `monsters` | `monster_order` |
| `olya` | `olya_beauty` |
| `raspberries` | `raspberries_ops` |
| `ski-resort` | `ski_resort_ways` |
| `swap-delete` | `swap_delete_cost` |

For `coin-sum`, the first case whose answer is yes writes `YES` and ends the
run; the remaining cases are not read.