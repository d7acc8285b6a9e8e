# apeiron

A small toolkit of numerical building blocks:

- `apeiron.typeinfo`: `TypeCategory` and `type_category` for classifying a type or value as boolean, integral, floating-point, string or other; `static_init_value` and `dynamic_init_value` give each category's starting value (`False`, `-1`, `0.0`, ...).
- `apeiron.constants`: tolerances (`SMALL`, `TEN_SMALL`, ...), fractions, `PI` and its multiples, `E`, `PHI` and floating-point limits.
- `apeiron.comparators`: floating-point comparisons that use a relative tolerance and a tolerance near zero (`is_equal`, `is_less`, `is_less_equal`, `is_larger`, `is_larger_equal`, `is_bounded`).
- `apeiron.basicmath`: digit counting, clipping, sign, rounding and angle conversion (`n_digits`, `clipped`, `min_max_entries`, `bound_entries`, `sgn`, `positive`, `negative`, `floor_value`, `ceil_value`, `round_value`, `deg_to_rad`, `rad_to_deg`).
- `apeiron.mathfuncs`: guarded division and modulo, factorials up to 20, binomial coefficients and integer powers up to exponent 30 (`divide`, `modulo`, `factorial`, `factorial_quotient`, `choose`, `ipow`, `square`, `cube`).
- `apeiron.conditionals`: `one_of(...)` for tests of the form "equals any of these values".
- `apeiron.strings`: number/string conversion, replacing, splitting and extracting brace-enclosed substrings (`first_enclosure`, `first_enclosure_chain`, `all_enclosures`).
- `apeiron.printing`: `Printer`, which writes values to a stream with floats in a chosen `PrintFormat` and precision.
- `apeiron.randomiser`: seedable uniform generators `RandomBool`, `RandomInt` and `RandomReal`, and `make_random`.
- `apeiron.timer` and `apeiron.benchmark`: `Timer`, `StopWatch` with per-lap statistics, and `Benchmark`, which prints a table of the results.
- `apeiron.arrays`, `apeiron.indexed_list` and `apeiron.multiarray`: fixed-size and growable arrays, a list and multi-dimensional arrays, all with bound-checked indexing.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Examples

Tolerant comparisons:

```python
from apeiron.comparators import is_equal, is_bounded

is_equal(1.0, 1.0 + 1e-16)          # True
is_equal(1.0, 1.1)                  # False
is_equal(3, 3, exact=True)          # True
is_bounded(2.0, 1.0, 2.0, right_inclusive=True)  # True
```

Membership tests:

```python
from apeiron.conditionals import one_of

"b" == one_of("a", "b", "c")        # True
4 == one_of([1, 2, 3])              # False
```

Enclosures in a string:

```python
from apeiron.strings import all_enclosures

all_enclosures("{a}{b} and {c}", "{", "}")   # ['a', 'b', 'c']
```

Timing code:

```python
from apeiron.benchmark import Benchmark
from apeiron.timer import TimeUnit

bench = Benchmark(TimeUnit.MILLISECOND)
for _ in range(10):
    bench.start_timer("work")
    sum(range(10_000))
    bench.stop_timer("work")
bench.print_results()
```

Arrays:

```python
from apeiron.arrays import DynamicArray, StaticArray
from apeiron.multiarray import StaticMultiArray

a = DynamicArray(3, float, [1.0, 2.0, 3.0])
a.append(4.0)
print(a)                            # (1.0, 2.0, 3.0, 4.0)

s = StaticArray(4, int)
print(s)                            # (-1, -1, -1, -1)

m = StaticMultiArray(2, 3, kind=int, value=0)
m[1, 2] = 7
m.linear_index(1, 2)                # 5
```

Errors are raised as Python exceptions: a `ValueError` for an invalid bound or argument, a `ZeroDivisionError` for a division by zero, an `IndexError` for an index out of range, and `TimerError` or `EnclosureError` for misuse of timers or unbalanced braces.

## What the package does not do

The arrays hold and index values only: there is no element-wise arithmetic on them (no adding, scaling or negating whole arrays) and no tensor type built on the multi-dimensional arrays. There is no command-line program; everything is used as a library.