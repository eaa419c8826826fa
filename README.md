# cmeinverse

This package computes the inverse Laplace transform numerically. It uses the
method of concentrated matrix-exponential (CME) functions.

You give it a Laplace-domain function `F(s)`, which takes and returns complex
numbers, and a time `t`. It returns an approximation of `f(t)`. The
approximation is a weighted sum of the real parts of `F` evaluated at a fixed
set of complex nodes, divided by `t`. The weights and nodes depend on how many
function evaluations you allow.

The package has no dependencies outside the standard library.

## Installation

```
pip install cmeinverse
```

To install the test requirements as well:

```
pip install "cmeinverse[test]"
```

## What you need to supply

The package does not ship any CME parameter data. Before you can invert a
transform, you need a JSON file of CME parameter sets. You then build a
coefficient table from it, as described below.

The file is a JSON array of objects. Each object has these fields:

- `n`: the order of the CME.
- `a`, `b`: lists of numbers, the real and imaginary parts of the weights.
- `c`: the weight of the real node.
- `omega`: the spacing of the complex nodes.
- `mu1`: the scaling of weights and nodes.
- `cv2`: the squared coefficient of variation.

A missing field raises `ValueError`. So does a top level that is not an array.

## Coefficient tables

The table holds one entry per evaluation budget, from `0` up to
`max_evaluations - 1`. For budget `index`, `steepest(params, index)` picks a
parameter set. It starts from the first set and switches to any later set
whose `n` is below `index` and whose `cv2` is smaller. From the chosen set
it computes:

- The real weight `c * mu1`, used at the real node `mu1`.
- The complex weights `mu1 * (a[k] + i*b[k])`, used at the nodes
  `mu1 + i * (k + 1) * omega * mu1`.

Each entry is a `Coefficients` object with the fields `mu1`, `eta_betas` and
`first_eta`. `eta_betas` is a tuple of `(eta_real, eta_imag, beta)` triples.

### Generating a table from the command line

The `cmeinverse-coefficients` command turns a parameter file into a
precomputed table:

```
cmeinverse-coefficients --input params.json --output table.json
```

Options:

- `-i`, `--input` (required): the JSON file of CME parameters.
- `-o`, `--output` (required): the file to write.
- `-m`, `--max-evaluations`: how many table entries to compute. The default is 500.
- `-r`, `--raw`: write the parsed parameter sets back out as a JSON array,
  instead of the precomputed table.

The table is written as a JSON object:
`{"max_evaluations": N, "coefficients": [...]}`. If the input cannot be read
or parsed, or `--max-evaluations` is negative, the command prints an error
and exits with status 2.

### Working with tables in code

The `cmeinverse.coefficients` module provides these functions:

- `parse_params(text)`: turns JSON text into a list of `CmeParam`.
- `precompute(params, max_evaluations=500)`: builds the table.
- `dump_table(table)`: serialises a table to JSON text.
- `load_table(text)`: reads JSON text written by `dump_table`.

`load_table` raises `ValueError` if the declared `max_evaluations` does not
match the number of entries.

```python
from pathlib import Path

from cmeinverse.coefficients import dump_table, load_table, parse_params, precompute

params = parse_params(Path("params.json").read_text())
table = precompute(params, 500)

Path("table.json").write_text(dump_table(table))
table = load_table(Path("table.json").read_text())
```

`CmeParam` and `Coefficients` are frozen dataclasses. Each has
`from_mapping()` and `to_mapping()` for conversion to and from plain
dictionaries.

## Inverting a transform

The Laplace transform of `sin(t)` is `1 / (s**2 + 1)`. To approximate `sin(1)`
with a budget of 50 evaluations:

```python
from pathlib import Path

from cmeinverse.coefficients import load_table
from cmeinverse.inversion import LaplaceInverter, laplace_inversion

table = load_table(Path("table.json").read_text())

value = laplace_inversion(lambda s: 1 / (s**2 + 1), 1.0, 50, table)
```

To reuse one table for many inversions, build a `LaplaceInverter` once:

```python
inverter = LaplaceInverter(table)
value = inverter.invert(lambda s: 1 / (s + 1), 0.5, 30)
print(inverter.max_evaluations)  # number of table entries

# or straight from the parsed parameter sets
inverter = LaplaceInverter.from_params(params, 500)
```

### How often the function is called

For the budget `max_function_evals`, the function is called once at the real
node and once for every complex node of that table entry. It may be any
Python callable, including one that keeps state between calls.

### Valid budgets

The budget must be an index into the table, from `0` to
`max_evaluations - 1`. Any other value raises `ValueError`.

## Accuracy

How accurate the result is depends on the parameter data you supply and on
the budget. A larger budget selects a steeper CME and gives a sharper
approximation.

Smooth functions such as `exp(-t)` and `sin(t)` need fewer evaluations than
discontinuous ones. Examples of discontinuous functions are the staircase
`floor(t)`, whose transform is `1 / (s * (exp(s) - 1))`, and the square wave.
These converge slowly near their jumps.