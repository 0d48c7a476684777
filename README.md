# matbench

matbench times two operations for three element types. The operations are
square matrix by vector and vector by square matrix. The element types are
32-bit `int`, single-precision `float` and double-precision `double`.

Each suite run covers one size `n` and one element type, and times four steps:

1. Builds an `n × n` square matrix and fills it. Element `k`, counted in
   row-major order, gets the value `k % 10`.
2. Builds a vector of length `n` and fills it the same way.
3. Multiplies the matrix by the vector.
4. Multiplies the vector by the matrix.

Each time is processor time in seconds, as reported by `time.process_time()`.

## Installation

```
pip install .
```

## Command line

```
matbench [SIZE ...] [--short] [--no-print]
```

- `SIZE ...`: the matrix sizes to run. The default is `4 8 16`. Each size is
  run for `int`, then `float`, then `double`.
- `--short`: prints one line per run instead of the full report. The line
  holds the size followed by the four timings.
- `--no-print`: leaves out the matrices and vectors from the full report.

Without `--short`, each run starts with a heading that names the element
type. A labelled line follows for each step; the labels are in Ukrainian.
Unless `--no-print` is given, each step's line is followed by the matrix or
vector that step built or produced.

The same entry point can also be run as `python -m matbench.bench`.

## Library use

```python
from matbench.matrix import ElementType, SquareMatrix, Vector

m = SquareMatrix(4, ElementType.INT)
m.fill()
v = Vector(4, ElementType.INT)
v.fill()

print((m @ v).format())   # matrix times vector
print((v @ m).format())   # vector times matrix
```

`Vector` supports `len()`, iteration and indexing by position.
`SquareMatrix` is indexed with a `(row, column)` pair. Its `row(i)` and
`column(i)` methods return single rows and columns as lists, and `rows()`
yields the rows one at a time. Both classes take a size and an
`ElementType`. A negative size raises `ValueError`, and a size that is not
an `int` raises `TypeError`.

The `@` operator is defined only between a `Vector` and a `SquareMatrix`,
in either order. If the element types differ it raises `TypeError`. If the
sizes differ it raises `ValueError`.

Stored values and arithmetic follow the element type. `int` values wrap at
32 bits. `float` values are rounded to single precision at every step, and
`double` values use Python floats. `ElementType.coerce(value)` applies that
conversion to a single value. `ElementType.format_value(value)` formats a
single value in a five-character field: `%5d` for `int` and `%5.1f` for the
other two types.

To run one suite and collect its timings:

```python
import sys
from matbench.bench import run_suite
from matbench.matrix import ElementType

timings = run_suite(8, ElementType.DOUBLE, sys.stdout, short_output=False, print_matrix=True)
print(timings.matrix_vector, timings.vector_matrix)
```

`run_suite` writes its report to the given stream and returns a
`SuiteTimings` record. The record has the fields `size`, `dtype`,
`create_matrix`, `create_vector`, `matrix_vector` and `vector_matrix`.

## Limits

The arithmetic is plain Python over `array` storage, with no vectorised
backend. Large sizes are therefore slow. No sweep over large sizes is built
in, but any list of sizes can be given on the command line.

## Tests

```
pip install .[test]
pytest
```