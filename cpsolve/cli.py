"""Command that runs one problem's solution over multi-case input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from cpsolve.contest import (
    amogus_plural,
    coin_split_count,
    fanum_easy,
    fanum_hard,
    mex_operations,
    segment_values,
    skibidus_min_length,
)
from cpsolve.lvl800_basic import (
    array_color,
    beautiful_arrangement,
    coin_sum_possible,
    cover_water,
    desorted_ops,
    doremy_paint,
    extreme_round,
    forbidden_sum,
    game_winner,
    halloumi_sortable,
    jagged_sortable,
    same_parity_pairs,
)
from cpsolve.lvl800_more import (
    fill_sequence,
    has_small_gcd_pair,
    k_index,
    line_trip,
    one_two_split,
    split_united,
    subsegment_has,
    target_score,
    twin_permutation,
    unit_array_ops,
    walking_master,
)
from cpsolve.lvl900_basic import (
    array_clone_ops,
    balanced_removals,
    chemistry_possible,
    clock_time,
    compare_string_cost,
    deletive_editing,
    forked_positions,
    longest_divisor_run,
    mainak_max,
)
from cpsolve.lvl900_more import (
    make_ap,
    make_increasing_ops,
    make_zero_ops,
    odd_queries,
    perm_swap_k,
    x_sum_possible,
)
from cpsolve.lvl1000 import (
    helmet_cost,
    merge_array_max,
    monster_order,
    olya_beauty,
    raspberries_ops,
    ski_resort_ways,
    swap_delete_cost,
)
from cpsolve.reader import StopRun, TokenReader, run_cases

Handler = Callable[[TokenReader], str]

# Handlers whose result is one line block; a newline follows each.
_PROBLEMS: dict[str, Handler] = {}
# Handlers whose result already carries its own line endings.
_RAW_PROBLEMS: dict[str, Handler] = {}

_GRID_CELLS = 100
_GRID_SIZE = 10


def _problem(name: str, raw: bool = False) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        (_RAW_PROBLEMS if raw else _PROBLEMS)[name] = handler
        return handler

    return register


def _spaced(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _answer(ok: bool, yes: str, no: str) -> str:
    return yes if ok else no


@_problem("among")
def _among(reader: TokenReader) -> str:
    return amogus_plural(reader.word())


@_problem("coin")
def _coin(reader: TokenReader) -> str:
    return str(coin_split_count(reader.integer()))


@_problem("fanum-easy")
def _fanum_easy(reader: TokenReader) -> str:
    n = reader.integer()
    reader.integer()
    a = reader.integers(n)
    b = reader.integer()
    return _answer(fanum_easy(a, b), "YES", "NO")


@_problem("fanum-hard")
def _fanum_hard(reader: TokenReader) -> str:
    n = reader.integer()
    m = reader.integer()
    a = reader.integers(n)
    b = reader.integers(m)
    return _answer(fanum_hard(a, b), "YES", "NO")


@_problem("mex")
def _mex(reader: TokenReader) -> str:
    return str(mex_operations(reader.integers(reader.integer())))


@_problem("segment-sumc")
def _segment_sumc(reader: TokenReader) -> str:
    values = segment_values(reader.integers(reader.integer()))
    return f"{len(values)}\n{_spaced(values)}"


@_problem("skibidus")
def _skibidus(reader: TokenReader) -> str:
    return str(skibidus_min_length(reader.word()))


@_problem("helmet")
def _helmet(reader: TokenReader) -> str:
    n = reader.integer()
    p = reader.integer()
    a = reader.integers(n)
    b = reader.integers(n)
    return str(helmet_cost(p, a, b))


@_problem("merge-array")
def _merge_array(reader: TokenReader) -> str:
    n = reader.integer()
    a = reader.integers(n)
    b = reader.integers(n)
    return str(merge_array_max(a, b))


@_problem("monsters")
def _monsters(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    return _spaced(monster_order(reader.integers(n), k))


@_problem("olya")
def _olya(reader: TokenReader) -> str:
    n = reader.integer()
    arrays = [reader.integers(reader.integer()) for _ in range(n)]
    return str(olya_beauty(arrays))


@_problem("raspberries")
def _raspberries(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    return str(raspberries_ops(reader.integers(n), k))


@_problem("ski-resort")
def _ski_resort(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    q = reader.integer()
    return str(ski_resort_ways(reader.integers(n), k, q))


@_problem("swap-delete")
def _swap_delete(reader: TokenReader) -> str:
    return str(swap_delete_cost(reader.word()))


@_problem("array-color")
def _array_color(reader: TokenReader) -> str:
    return _answer(array_color(reader.integers(reader.integer())), "Yes", "No")


@_problem("beautiful")
def _beautiful(reader: TokenReader) -> str:
    arrangement = beautiful_arrangement(reader.integers(reader.integer()))
    if arrangement is None:
        return "No"
    return f"YES\n{_spaced(arrangement)}"


@_problem("coin-sum")
def _coin_sum(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    if coin_sum_possible(n, k):
        raise StopRun("YES")
    return "No"


@_problem("contest", raw=True)
def _contest(reader: TokenReader) -> str:
    reader.integers(reader.integer())
    return ""


@_problem("cover-water")
def _cover_water(reader: TokenReader) -> str:
    n = reader.integer()
    return str(cover_water(reader.word()[:n]))


@_problem("desorted")
def _desorted(reader: TokenReader) -> str:
    return str(desorted_ops(reader.integers(reader.integer())))


@_problem("doremy-paint")
def _doremy_paint(reader: TokenReader) -> str:
    nums = reader.integers(reader.integer())
    if len(set(nums)) >= 3:
        return "No"
    return _answer(doremy_paint(nums), "YES", "NO")


@_problem("extreme-round")
def _extreme_round(reader: TokenReader) -> str:
    return str(extreme_round(reader.integer()))


@_problem("forbidden")
def _forbidden(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    x = reader.integer()
    parts = forbidden_sum(n, k, x)
    if parts is None:
        return "No"
    head = "Yes" if x != 1 else "YES"
    return f"{head}\n{len(parts)}\n{_spaced(parts)}"


@_problem("game-integer")
def _game_integer(reader: TokenReader) -> str:
    return game_winner(reader.integer())


@_problem("good-parity")
def _good_parity(reader: TokenReader) -> str:
    return str(same_parity_pairs(reader.integers(reader.integer())))


@_problem("halloumi")
def _halloumi(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    return _answer(halloumi_sortable(reader.integers(n), k), "YES", "NO")


@_problem("jagged-swaps")
def _jagged_swaps(reader: TokenReader) -> str:
    return _answer(jagged_sortable(reader.integers(reader.integer())), "YES", "NO")


@_problem("k-index")
def _k_index(reader: TokenReader) -> str:
    return str(k_index(reader.integers(reader.integer())))


@_problem("line-trip")
def _line_trip(reader: TokenReader) -> str:
    n = reader.integer()
    x = reader.integer()
    return str(line_trip(reader.integers(n), x))


@_problem("one-two")
def _one_two(reader: TokenReader) -> str:
    return str(one_two_split(reader.integers(reader.integer())))


@_problem("sequence")
def _sequence(reader: TokenReader) -> str:
    values = fill_sequence(reader.integers(reader.integer()))
    return f"{len(values)}\n{_spaced(values)}"


@_problem("serval")
def _serval(reader: TokenReader) -> str:
    return _answer(has_small_gcd_pair(reader.integers(reader.integer())), "YES", "NO")


@_problem("subsegment")
def _subsegment(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    return _answer(subsegment_has(reader.integers(n), k), "Yes", "No")


@_problem("target-practice")
def _target_practice(reader: TokenReader) -> str:
    cells = ""
    while len(cells) < _GRID_CELLS:
        cells += reader.word()
    if len(cells) != _GRID_CELLS:
        raise ValueError("target rows must hold 100 cells in total")
    grid = [cells[start:start + _GRID_SIZE] for start in range(0, _GRID_CELLS, _GRID_SIZE)]
    return str(target_score(grid))


@_problem("twin-perm")
def _twin_perm(reader: TokenReader) -> str:
    return _spaced(twin_permutation(reader.integers(reader.integer())))


@_problem("unit-array")
def _unit_array(reader: TokenReader) -> str:
    return str(unit_array_ops(reader.integers(reader.integer())))


@_problem("united", raw=True)
def _united(reader: TokenReader) -> str:
    split = split_united(reader.integers(reader.integer()))
    if split is None:
        return "-1\n"
    low, high = split
    return f"{len(low)} {len(high)}\n{_spaced(low)}{_spaced(high)}"


@_problem("walking-master")
def _walking_master(reader: TokenReader) -> str:
    a, b, c, d = reader.integers(4)
    return str(walking_master(a, b, c, d))


@_problem("array-clone")
def _array_clone(reader: TokenReader) -> str:
    return str(array_clone_ops(reader.integers(reader.integer())))


@_problem("balanced-round")
def _balanced_round(reader: TokenReader) -> str:
    n = reader.integer()
    k = reader.integer()
    return str(balanced_removals(reader.integers(n), k))


@_problem("chemistry")
def _chemistry(reader: TokenReader) -> str:
    reader.integer()
    k = reader.integer()
    return _answer(chemistry_possible(reader.word(), k), "YES", "NO")


@_problem("comp-string")
def _comp_string(reader: TokenReader) -> str:
    n = reader.integer()
    return str(compare_string_cost(reader.word()[:n]))


@_problem("deletive-editing")
def _deletive_editing(reader: TokenReader) -> str:
    s = reader.word()
    t = reader.word()
    return _answer(deletive_editing(s, t), "Yes", "No")


@_problem("forked")
def _forked(reader: TokenReader) -> str:
    a, b, x1, y1, x2, y2 = reader.integers(6)
    return str(forked_positions(a, b, (x1, y1), (x2, y2)))


@_problem("jellyfish")
def _jellyfish(reader: TokenReader) -> str:
    a, b, n = reader.integers(3)
    return str(clock_time(a, b, reader.integers(n)))


@_problem("longest-divisor")
def _longest_divisor(reader: TokenReader) -> str:
    return str(longest_divisor_run(reader.integer()))


@_problem("mainak")
def _mainak(reader: TokenReader) -> str:
    return str(mainak_max(reader.integers(reader.integer())))


@_problem("make-ap")
def _make_ap(reader: TokenReader) -> str:
    a, b, c = reader.integers(3)
    return _answer(make_ap(a, b, c), "Yes ", "No ")


@_problem("make-increasing")
def _make_increasing(reader: TokenReader) -> str:
    return str(make_increasing_ops(reader.integers(reader.integer())))


@_problem("make-zero")
def _make_zero(reader: TokenReader) -> str:
    n = reader.integer()
    reader.integers(n)
    ops = make_zero_ops(n)
    lines = "\n".join(f"{left} {right}" for left, right in ops)
    return f"{len(ops)}\n{lines}"


@_problem("odd-q", raw=True)
def _odd_q(reader: TokenReader) -> str:
    n = reader.integer()
    q = reader.integer()
    a = reader.integers(n)
    queries = []
    for _ in range(q):
        left, right, k = reader.integers(3)
        queries.append((left, right, k))
    return "".join("Yes\n" if odd else "No\n" for odd in odd_queries(a, queries))


@_problem("perm-swap")
def _perm_swap(reader: TokenReader) -> str:
    return str(perm_swap_k(reader.integers(reader.integer())))


@_problem("x-sum")
def _x_sum(reader: TokenReader) -> str:
    n, k, x = reader.integers(3)
    return _answer(x_sum_possible(n, k, x), "YES", "NO")


def _run_raw(text: str, handler: Handler) -> str:
    reader = TokenReader(text)
    count = reader.integer()
    return "".join(handler(reader) for _ in range(count))


def problem_names() -> list[str]:
    """Names of every problem the command can run, sorted."""
    return sorted(_PROBLEMS.keys() | _RAW_PROBLEMS.keys())


def run_problem(name: str, text: str) -> str:
    """Run the named problem over ``text`` and return its full output."""
    if name in _PROBLEMS:
        return run_cases(text, _PROBLEMS[name])
    if name in _RAW_PROBLEMS:
        return _run_raw(text, _RAW_PROBLEMS[name])
    raise ValueError(f"unknown problem {name!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input and write the answers for every case."""
    parser = argparse.ArgumentParser(
        prog="cpsolve", description="Solve a multi-case problem input."
    )
    parser.add_argument("problem", choices=problem_names(), help="problem to run")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    with args.input as stream:
        text = stream.read()
    try:
        output = run_problem(args.problem, text)
    except (EOFError, ValueError) as exc:
        print(f"cpsolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0