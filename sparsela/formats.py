"""CPU storage formats for sparse vectors and matrices and conversions between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Reduce = Callable[[Any, Any], Any]


@dataclass
class DokVec:
    """Dictionary-of-keys vector: row index to value.

    ``reduce`` combines a new element with one already stored at the same row;
    when it is None the new element replaces the stored one.
    """

    Ax: dict[int, Any] = field(default_factory=dict)
    reduce: Optional[Reduce] = None

    @property
    def values(self) -> int:
        return len(self.Ax)

    def add(self, row_id: int, element: Any) -> None:
        """Store ``element`` at ``row_id``, reducing with any existing value."""
        if row_id in self.Ax and self.reduce is not None:
            self.Ax[row_id] = self.reduce(self.Ax[row_id], element)
        else:
            self.Ax[row_id] = element

    def clear(self) -> None:
        self.Ax.clear()


@dataclass
class CooVec:
    """Coordinate vector: parallel lists of row indices and values."""

    Ai: list[int] = field(default_factory=list)
    Ax: list[Any] = field(default_factory=list)

    @property
    def values(self) -> int:
        return len(self.Ai)


@dataclass
class DenseVec:
    """Dense vector holding every element."""

    Ax: list[Any] = field(default_factory=list)


@dataclass
class Coo:
    """Coordinate matrix: parallel lists of row indices, column indices and values."""

    Ai: list[int] = field(default_factory=list)
    Aj: list[int] = field(default_factory=list)
    Ax: list[Any] = field(default_factory=list)

    @property
    def values(self) -> int:
        return len(self.Ai)


@dataclass
class Csr:
    """Compressed sparse row matrix."""

    Ap: list[int] = field(default_factory=lambda: [0])
    Aj: list[int] = field(default_factory=list)
    Ax: list[Any] = field(default_factory=list)

    @property
    def values(self) -> int:
        return len(self.Aj)


def coo_to_csr(n_rows: int, coo: Coo) -> Csr:
    """Convert a row-ordered COO matrix to CSR.

    Raises ValueError if the lists differ in length or a row index is out of range.
    """
    if not len(coo.Ai) == len(coo.Aj) == len(coo.Ax):
        raise ValueError("coordinate lists differ in length")
    counts = [0] * (n_rows + 1)
    for i in coo.Ai:
        if not 0 <= i < n_rows:
            raise ValueError(f"row index {i} out of range for {n_rows} rows")
        counts[i] += 1

    offsets = [0]
    for count in counts[:-1]:
        offsets.append(offsets[-1] + count)

    return Csr(Ap=offsets, Aj=list(coo.Aj), Ax=list(coo.Ax))


def csr_to_coo(n_rows: int, csr: Csr) -> Coo:
    """Convert a CSR matrix to row-ordered COO.

    Raises ValueError if the row offsets do not match ``n_rows`` or the values.
    """
    if len(csr.Ap) != n_rows + 1:
        raise ValueError(f"expected {n_rows + 1} row offsets, got {len(csr.Ap)}")
    if len(csr.Aj) != len(csr.Ax) or csr.Ap[-1] != len(csr.Aj):
        raise ValueError("row offsets do not match the stored values")
    rows = [
        i
        for i, (begin, end) in enumerate(zip(csr.Ap, csr.Ap[1:]))
        for _ in range(begin, end)
    ]
    return Coo(Ai=rows, Aj=list(csr.Aj), Ax=list(csr.Ax))


def dok_vec_to_coo(dok: DokVec) -> CooVec:
    """Convert a DOK vector to COO ordered by row index."""
    entries = sorted(dok.Ax.items())
    return CooVec(Ai=[i for i, _ in entries], Ax=[x for _, x in entries])


def dok_vec_to_dense(n_rows: int, dok: DokVec) -> DenseVec:
    """Convert a DOK vector to a dense vector of ``n_rows`` elements, zero-filled.

    Raises IndexError if a stored row lies outside the vector.
    """
    dense = [0] * n_rows
    for i, x in dok.Ax.items():
        if not 0 <= i < n_rows:
            raise IndexError(f"row index {i} out of range for {n_rows} rows")
        dense[i] = x
    return DenseVec(Ax=dense)