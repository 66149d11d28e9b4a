"""Triplet (coordinate) format matrices, used to build compressed matrices."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .csmat import CompressedStorage, CsMat


class TriMat:
    """Matrix stored as parallel lists of row indices, column indices and values.

    Duplicate locations are allowed; they are summed when converting to a
    compressed matrix.
    """

    def __init__(self, shape: tuple[int, int]):
        nrows, ncols = shape
        if nrows < 0 or ncols < 0:
            raise ValueError("shape must be non-negative")
        self.shape = (nrows, ncols)
        self.row_inds: list[int] = []
        self.col_inds: list[int] = []
        self.data: list[Any] = []

    @classmethod
    def from_triplets(
        cls,
        shape: tuple[int, int],
        row_inds: Iterable[int],
        col_inds: Iterable[int],
        data: Iterable[Any],
    ) -> "TriMat":
        """Build a matrix from its raw components, which must have equal lengths."""
        row_inds, col_inds, data = list(row_inds), list(col_inds), list(data)
        if not len(row_inds) == len(col_inds) == len(data):
            raise ValueError("all inputs should have the same length")
        mat = cls(shape)
        nrows, ncols = mat.shape
        if not all(0 <= i < nrows for i in row_inds):
            raise IndexError("row indices should be within shape")
        if not all(0 <= j < ncols for j in col_inds):
            raise IndexError("col indices should be within shape")
        mat.row_inds, mat.col_inds, mat.data = row_inds, col_inds, data
        return mat

    def rows(self) -> int:
        return self.shape[0]

    def cols(self) -> int:
        return self.shape[1]

    def nnz(self) -> int:
        return len(self.data)

    def _check_location(self, row: int, col: int) -> None:
        if not 0 <= row < self.shape[0]:
            raise IndexError("row index out of bounds")
        if not 0 <= col < self.shape[1]:
            raise IndexError("column index out of bounds")

    def add_triplet(self, row: int, col: int, val: Any) -> None:
        """Append a non-zero entry."""
        self._check_location(row, col)
        self.row_inds.append(row)
        self.col_inds.append(col)
        self.data.append(val)

    def find_locations(self, row: int, col: int) -> list[int]:
        """Positions of all stored entries at (row, col)."""
        return [
            pos
            for pos, (i, j) in enumerate(zip(self.row_inds, self.col_inds))
            if i == row and j == col
        ]

    def set_triplet(self, index: int, row: int, col: int, val: Any) -> None:
        """Replace the entry stored at position index."""
        if not 0 <= index < self.nnz():
            raise IndexError("triplet index out of bounds")
        self._check_location(row, col)
        self.row_inds[index] = row
        self.col_inds[index] = col
        self.data[index] = val

    def transpose_view(self) -> "TriMat":
        """The transposed matrix, sharing the underlying lists."""
        view = TriMat((self.shape[1], self.shape[0]))
        view.row_inds = self.col_inds
        view.col_inds = self.row_inds
        view.data = self.data
        return view

    def _compress(self, storage: CompressedStorage) -> CsMat:
        csr = storage is CompressedStorage.CSR
        outer_dim = self.shape[0] if csr else self.shape[1]
        lines: list[dict[int, Any]] = [{} for _ in range(outer_dim)]
        for val, (row, col) in self:
            outer, inner = (row, col) if csr else (col, row)
            line = lines[outer]
            line[inner] = line[inner] + val if inner in line else val
        indptr = [0]
        indices: list[int] = []
        data: list[Any] = []
        for line in lines:
            for inner in sorted(line):
                indices.append(inner)
                data.append(line[inner])
            indptr.append(len(indices))
        return CsMat._trusted(storage, self.shape, indptr, indices, data)

    def to_csc(self) -> CsMat:
        """Compressed column matrix, with duplicate entries summed."""
        return self._compress(CompressedStorage.CSC)

    def to_csr(self) -> CsMat:
        """Compressed row matrix, with duplicate entries summed."""
        return self._compress(CompressedStorage.CSR)

    def __iter__(self) -> Iterator[tuple[Any, tuple[int, int]]]:
        """Yield (value, (row, col)) for every stored entry, in insertion order."""
        for row, col, val in zip(self.row_inds, self.col_inds, self.data):
            yield val, (row, col)

    def __repr__(self) -> str:
        return (
            f"TriMat(shape={self.shape}, row_inds={self.row_inds}, "
            f"col_inds={self.col_inds}, data={self.data})"
        )