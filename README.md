# sparsela

Building blocks for sparse linear algebra in pure Python: typed scalars, a
sparse matrix, CPU storage formats with conversions between them, a registry
of algorithm implementations with a dispatcher, a message logger and a lap
timer. It has no dependencies outside the standard library.

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

- `sparsela.status` – `Status` codes, `AcceleratorType`, and `SplaError`,
  the exception raised on failure; it carries a `status` and a `message`.
- `sparsela.scalar` – `ValueType` (`BYTE`, `INT`, `UINT`, `FLOAT`),
  `cast_value`, the `Scalar` box and `make_scalar`, `make_byte`, `make_int`,
  `make_uint`, `make_float`.
- `sparsela.matrix` – `Matrix` and `make_matrix`.
- `sparsela.formats` – `DokVec`, `CooVec`, `DenseVec`, `Coo`, `Csr` and the
  conversions `coo_to_csr`, `csr_to_coo`, `dok_vec_to_coo`,
  `dok_vec_to_dense`.
- `sparsela.descriptor` – `Descriptor`, a dataclass of execution options
  (`push_only`, `pull_only`, `push_pull`, `front_factor`,
  `discovered_factor`, `early_exit`, `struct_only`, `label`).
- `sparsela.registry` – `Registry`, `RegistryAlgo`, `DispatchContext`,
  `Dispatcher` and `make_key`.
- `sparsela.logger` – `Logger` and `default_callback`.
- `sparsela.timer` – `Timer`.

## Typed values

Values are converted to the representation of their type: integral types
wrap around their width, floats are truncated toward zero before becoming
integers, and `FLOAT` values are rounded to single precision.

```python
from sparsela.scalar import ValueType, cast_value, make_uint

cast_value(ValueType.BYTE, 300)      # 44
cast_value(ValueType.INT, 2**31)     # -2147483648
make_uint(-1).value                  # 4294967295
```

Converting a NaN or an infinity to an integral type raises `ValueError`.

## Matrices

```python
from sparsela.matrix import make_matrix
from sparsela.scalar import ValueType

A = make_matrix(3, 3, ValueType.INT)
A.set(0, 1, 5)
A.set(0, 1, 2)                 # by default a new value replaces the old one
A.set_reduce(lambda a, b: a + b)
A.set(0, 1, 3)                 # now values at one position are combined
A.get(0, 1)                    # 5
A.get(2, 2)                    # 0: absent elements read as zero
A.rows()                       # [[(1, 5)], [], []]
A.n_values                     # 1
```

Dimensions must be positive (`SplaError` with `INVALID_ARGUMENT` otherwise),
indices out of range raise `IndexError`, and `clear()` removes every value.

## Storage formats

```python
from sparsela.formats import Coo, coo_to_csr, csr_to_coo

csr = coo_to_csr(3, Coo(Ai=[0, 0, 2], Aj=[1, 2, 0], Ax=[1, 1, 1]))
csr.Ap                         # [0, 2, 2, 3]
csr_to_coo(3, csr).Ai          # [0, 0, 2]
```

`DokVec.add` stores an element by row, combining it with an existing one
through the vector's `reduce` function when one is set.

## Registry and dispatch

Algorithms are registered under keys built with `make_key` plus a suffix
(`"__cpu"` for CPU implementations). A `Dispatcher` runs the implementation
for its accelerator suffix when one is configured and acceleration is not
forced off, and falls back to the CPU one.

```python
from dataclasses import dataclass
from sparsela.registry import DispatchContext, Dispatcher, Registry, RegistryAlgo, make_key

class Echo(RegistryAlgo):
    def name(self): return "echo"
    def description(self): return "returns the task key"
    def execute(self, ctx): return ctx.key

@dataclass
class Task:
    key: str

registry = Registry()
registry.add(make_key("echo", "INT") + "__cpu", Echo())
Dispatcher(registry).dispatch(DispatchContext(Task("echo_INT")))   # "echo_INT"
```

A key with no implementation raises `SplaError` with `NOT_IMPLEMENTED`; an
unexpected exception from an algorithm is logged and raised again as
`SplaError` with `ERROR`.

## What the package does not do

There is no sparse vector type, no masked matrix-vector or vector-matrix
products, no graph search and no command-line program. The formats, matrix,
registry and dispatcher are the pieces such operations would be built on.