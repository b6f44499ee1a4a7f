"""Sparse matrix with typed elements."""

from __future__ import annotations

from typing import Any, Callable

from sparsela.scalar import Number, ValueType, cast_value
from sparsela.status import SplaError, Status


def _keep_second(_: Any, b: Any) -> Any:
    return b


class Matrix:
    """M x N matrix of one value type; absent elements read as zero."""

    def __init__(self, n_rows: int, n_cols: int, value_type: ValueType) -> None:
        if n_rows <= 0 or n_cols <= 0:
            raise SplaError(
                Status.INVALID_ARGUMENT,
                f"matrix dimensions must be > 0, got {n_rows}x{n_cols}",
            )
        self.n_rows = int(n_rows)
        self.n_cols = int(n_cols)
        self.value_type = ValueType(value_type)
        self.label = ""
        self._rows: dict[int, dict[int, Number]] = {}
        self._reduce: Callable[[Any, Any], Any] = _keep_second

    def _check(self, row_id: int, col_id: int) -> tuple[int, int]:
        if not 0 <= row_id < self.n_rows:
            raise IndexError(f"row index {row_id} out of range for {self.n_rows} rows")
        if not 0 <= col_id < self.n_cols:
            raise IndexError(f"column index {col_id} out of range for {self.n_cols} columns")
        return int(row_id), int(col_id)

    def set_reduce(self, op: Callable[[Any, Any], Any]) -> None:
        """Set the function that combines a value with one already stored at its position.

        Raises SplaError with INVALID_ARGUMENT if ``op`` is not callable.
        """
        if not callable(op):
            raise SplaError(Status.INVALID_ARGUMENT, "reduce operation must be callable")
        self._reduce = op

    def set(self, row_id: int, col_id: int, value: Number) -> None:
        """Store ``value`` at (``row_id``, ``col_id``), converted to the matrix's type."""
        i, j = self._check(row_id, col_id)
        value = cast_value(self.value_type, value)
        row = self._rows.setdefault(i, {})
        if j in row:
            row[j] = cast_value(self.value_type, self._reduce(row[j], value))
        else:
            row[j] = value

    def get(self, row_id: int, col_id: int) -> Number:
        """The value at (``row_id``, ``col_id``), or the type's zero if none is stored."""
        i, j = self._check(row_id, col_id)
        return self._rows.get(i, {}).get(j, self.value_type.default)

    def clear(self) -> None:
        """Remove every stored value."""
        self._rows.clear()

    @property
    def n_values(self) -> int:
        """Number of stored values."""
        return sum(len(row) for row in self._rows.values())

    def rows(self) -> list[list[tuple[int, Number]]]:
        """List of ``n_rows`` rows, each a column-ordered list of (column, value) pairs."""
        return [sorted(self._rows.get(i, {}).items()) for i in range(self.n_rows)]

    def __repr__(self) -> str:
        return (
            f"Matrix({self.n_rows}x{self.n_cols}, {self.value_type.key}, "
            f"values={self.n_values})"
        )


def make_matrix(n_rows: int, n_cols: int, value_type: ValueType) -> Matrix:
    """A new empty matrix of the given dimensions and value type."""
    return Matrix(n_rows, n_cols, value_type)