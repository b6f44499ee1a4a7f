"""Sparse linear algebra building blocks: typed scalars, sparse matrices, storage formats and dispatch."""

__version__ = "0.1.0"