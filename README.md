# bojsolutions

Plain Python solutions to a set of classic algorithm exercises. Everything is
available as a library, and four of the exercises that read several test
cases at once can also be run from the command line. There are no
dependencies beyond the standard library. Python 3.10 or later is required.

## Install

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
| `bojsolutions.strings` | `first_occurrences`, `most_frequent_letter`, `echo_lines`, `repeat_characters`, `missing_isbn_digit` |
| `bojsolutions.arithmetic` | `count_bridges`, `min_product_sum`, `tshirt_and_pen_orders`, `number_vs_string_arithmetic`, `max_wire_length`, `trimmed_average`, `flatten_ground`, `count_all_digit_staircase_numbers` |
| `bojsolutions.bitset` | `BitSet` (`add`, `remove`, `check`, `toggle`, `fill`, `clear`), `run_commands` |
| `bojsolutions.geometry` | `Point`, `Segment`, `ccw`, `segments_intersect` |
| `bojsolutions.grids` | `distance_map`, `count_reachable_people`, `steal_documents` |
| `bojsolutions.graphs` | `shortest_tour`, `schedule_singers`, `postorder_from_preorder` |
| `bojsolutions.sequences` | `next_greater_frequency`, `compress_coordinates`, `min_mbti_distance` |
| `bojsolutions.cli` | `main`, the entry point of the `bojsolutions` command |

Invalid input (letters where digits are expected, out-of-range values, ragged
grids, unknown commands and the like) raises `ValueError` rather than
producing a silent wrong answer.

### Strings

- `first_occurrences(word)` – for each letter `a`..`z`, the first index in a
  lowercase word, or `-1`.
- `most_frequent_letter(word)` – the most used letter in upper case, ignoring
  case; `"?"` on a tie.
- `echo_lines(lines)` – the lines (trailing newlines removed) up to the first
  empty one.
- `repeat_characters(text, times)` – `repeat_characters("ABC", 3) == "AAABBBCCC"`.
- `missing_isbn_digit(code)` – the digit hidden by the single `*` in a
  13-character ISBN.

### Arithmetic

- `count_bridges(west, east)` – number of ways to build non-crossing bridges,
  i.e. the binomial coefficient of the larger over the smaller count.
- `min_product_sum(a, b)` – smallest sum of products when pairing the two
  sequences.
- `tshirt_and_pen_orders(participants, sizes, shirt_bundle, pen_bundle)` –
  `(shirt bundles, pen bundles, single pens)` for six size counts.
- `number_vs_string_arithmetic(a, b, c)` – `A + B - C` computed on numbers and
  with `A` and `B` joined as digit strings.
- `max_wire_length(wires, needed)` – the longest cut length that still yields
  `needed` pieces (`1` if none does).
- `trimmed_average(opinions)` – the rounded average of opinions `0..30` after
  cutting 15% from each end; `0` for no opinions.
- `flatten_ground(heights, inventory)` – `(time, level)` of the fastest way
  to level the ground (heights `0..256`), preferring the highest level on a tie.
- `count_all_digit_staircase_numbers(length)` – how many staircase numbers of
  that length use every digit 0–9, modulo 10^9.

```python
from bojsolutions.arithmetic import count_bridges, min_product_sum

count_bridges(2, 2)     # 1
count_bridges(1, 5)     # 5
count_bridges(13, 29)   # 67863915

min_product_sum([1, 1, 1, 6, 0], [2, 7, 8, 3, 1])  # 18
```

### Bit set

`BitSet` holds a subset of the integers 1 to 20. Besides its methods it
supports `in`, iteration in ascending order and `len`.

```python
from bojsolutions.bitset import BitSet, run_commands

s = BitSet()
s.add(1)
s.check(1)   # True
s.toggle(1)
s.check(1)   # False

run_commands(["add 1", "check 1", "all", "remove 1", "check 1"])  # [1, 0]
```

`run_commands` understands `add x`, `remove x`, `check x`, `toggle x`, `all`
and `empty`, and returns the result of every `check` as `1` or `0`.

### Geometry

`Point(x, y)` is a frozen dataclass ordered by `x`, then `y`;
`Segment(start, end)` is a closed segment. `ccw(p1, p2, p3)` returns `1`, `-1`
or `0` for a counter-clockwise, clockwise or collinear turn.

```python
from bojsolutions.geometry import Point, Segment, segments_intersect

segments_intersect(
    Segment(Point(1, 1), Point(5, 5)),
    Segment(Point(1, 5), Point(5, 1)),
)  # True
```

### Grids

- `distance_map(grid)` – for a grid of `0` (wall), `1` (open) and one `2`
  (target), the distance of every cell from the target; walls and the target
  get `0`, unreachable open cells `-1`.
- `count_reachable_people(grid)` – number of `P` cells reachable from `I`
  without crossing `X`, for a list of row strings.
- `steal_documents(grid, keys)` – number of `$` documents reachable after
  entering from the edge of the grid: `*` is a wall, uppercase letters are
  doors opened by the matching lowercase keys, which are picked up on the
  way. `keys` lists the keys held at the start; `"0"` or `""` means none.

### Graphs

- `shortest_tour(weights)` – cost of the cheapest round trip through every
  city of a square cost matrix (`0` means no road), or `None`.
- `schedule_singers(count, orders)` – an order of singers `1..count` that
  respects every given partial order, or `None` if there is none.
- `postorder_from_preorder(values)` – the post-order of the binary search tree
  with the given pre-order:

```python
from bojsolutions.graphs import postorder_from_preorder

postorder_from_preorder([50, 30, 24, 5, 28, 45, 98, 52, 60])
# [5, 28, 24, 45, 30, 60, 52, 98, 50]
```

### Sequences

```python
from bojsolutions.sequences import compress_coordinates, next_greater_frequency

next_greater_frequency([1, 1, 2, 3, 4, 2, 1])  # [-1, -1, 1, 2, 2, 1, -1]
compress_coordinates([2, 4, -10, 4, -9])       # [2, 3, 0, 3, 1]
```

`min_mbti_distance(types)` takes at least three four-letter personality types
(such as `"ESTJ"` or `"INFP"`) and returns the smallest total pairwise
distance among any three of the people.

## Command line

Installing the package provides the `bojsolutions` command. It takes the name
of a problem, reads that problem's input as whitespace-separated tokens from
standard input, and prints one answer per line:

```
bojsolutions {bitset,bridges,documents,mbti}
bojsolutions --help
```

| Problem | Input | Output |
| --- | --- | --- |
| `bridges` | a case count, then `west east` per case | `count_bridges` per case |
| `mbti` | a case count, then per case a person count followed by that many types | `min_mbti_distance` per case |
| `documents` | a case count, then per case `height width`, `height` rows, and the starting keys (`0` for none) | `steal_documents` per case |
| `bitset` | a command count, then the commands (`add x`, `remove x`, `check x`, `toggle x`, `all`, `empty`) | `1` or `0` for every `check` |

```
$ printf '3\n1 1\n2 2\n13 29\n' | bojsolutions bridges
1
1
67863915
```

On malformed input the command prints `error: ...` to standard error and
exits with status 1.

## What it does not do

Only the four problems above have a command; every other exercise is
available through its library function alone. There is no interactive mode
and nothing is stored between runs.