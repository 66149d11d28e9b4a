"""Compressed sparse matrices (CSR/CSC) and sparse vectors."""

from __future__ import annotations

from bisect import bisect_left
from enum import Enum
from itertools import accumulate
from typing import Any, Iterator, Optional, Sequence


class StructureError(ValueError):
    """Raised when sparse structure arrays are inconsistent."""


class CompressedStorage(Enum):
    """Which dimension of the matrix is compressed."""

    CSR = "csr"
    CSC = "csc"

    def other(self) -> "CompressedStorage":
        return CompressedStorage.CSC if self is CompressedStorage.CSR else CompressedStorage.CSR


def _coerce_storage(storage: Any) -> CompressedStorage:
    if isinstance(storage, CompressedStorage):
        return storage
    try:
        return CompressedStorage[str(storage).upper()]
    except KeyError:
        raise StructureError(f"unknown storage {storage!r}") from None


def _check_sorted_in_range(indices: Sequence[int], bound: int) -> None:
    previous = -1
    for ind in indices:
        if not 0 <= ind < bound:
            raise StructureError(f"index {ind} out of bounds for dimension {bound}")
        if ind <= previous:
            raise StructureError("indices are not sorted or contain duplicates")
        previous = ind


class CsVec:
    """Sparse vector with sorted indices."""

    def __init__(self, dim: int, indices: Sequence[int], data: Sequence[Any]):
        indices = list(indices)
        data = list(data)
        if dim < 0:
            raise StructureError("dimension must be non-negative")
        if len(indices) != len(data):
            raise StructureError("indices and data have different lengths")
        _check_sorted_in_range(indices, dim)
        self.dim = dim
        self.indices = indices
        self.data = data

    @classmethod
    def _trusted(cls, dim: int, indices: list, data: list) -> "CsVec":
        vec = cls.__new__(cls)
        vec.dim = dim
        vec.indices = indices
        vec.data = data
        return vec

    @classmethod
    def empty(cls, dim: int) -> "CsVec":
        return cls(dim, [], [])

    def nnz(self) -> int:
        return len(self.data)

    def get(self, index: int) -> Optional[Any]:
        pos = bisect_left(self.indices, index)
        if pos < len(self.indices) and self.indices[pos] == index:
            return self.data[pos]
        return None

    def dot(self, other: "CsVec") -> Any:
        if self.dim != other.dim:
            raise ValueError("Dimension mismatch")
        total = 0
        i = j = 0
        while i < len(self.indices) and j < len(other.indices):
            a, b = self.indices[i], other.indices[j]
            if a == b:
                total += self.data[i] * other.data[j]
                i += 1
                j += 1
            elif a < b:
                i += 1
            else:
                j += 1
        return total

    def append(self, index: int, value: Any) -> None:
        if not 0 <= index < self.dim:
            raise IndexError("index out of bounds")
        if self.indices and index <= self.indices[-1]:
            raise ValueError("appended index must be larger than existing ones")
        self.indices.append(index)
        self.data.append(value)

    def to_dense(self) -> list:
        dense = [0] * self.dim
        assign_vector_to_dense(dense, self)
        return dense

    def to_dict(self) -> dict:
        return {"dim": self.dim, "indices": list(self.indices), "data": list(self.data)}

    @classmethod
    def from_dict(cls, data: dict) -> "CsVec":
        try:
            return cls(data["dim"], data["indices"], data["data"])
        except KeyError as exc:
            raise StructureError(f"missing field {exc.args[0]!r}") from None

    def __iter__(self) -> Iterator[tuple]:
        return iter(zip(self.indices, self.data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CsVec):
            return NotImplemented
        return (self.dim, self.indices, self.data) == (other.dim, other.indices, other.data)

    def __repr__(self) -> str:
        return f"CsVec(dim={self.dim}, indices={self.indices}, data={self.data})"


class CsMat:
    """Sparse matrix in compressed row or column storage."""

    def __init__(self, storage, shape, indptr, indices, data):
        storage = _coerce_storage(storage)
        nrows, ncols = shape
        if nrows < 0 or ncols < 0:
            raise StructureError("shape must be non-negative")
        indptr, indices, data = list(indptr), list(indices), list(data)
        outer = nrows if storage is CompressedStorage.CSR else ncols
        inner = ncols if storage is CompressedStorage.CSR else nrows
        if len(indptr) != outer + 1:
            raise StructureError("indptr length does not match outer dimension")
        if len(indices) != len(data):
            raise StructureError("indices and data have different lengths")
        if indptr[0] != 0:
            raise StructureError("indptr must start at 0")
        if any(b < a for a, b in zip(indptr, indptr[1:])):
            raise StructureError("indptr is not non-decreasing")
        if indptr[-1] != len(indices):
            raise StructureError("indptr does not match the number of non-zeros")
        for start, stop in zip(indptr, indptr[1:]):
            _check_sorted_in_range(indices[start:stop], inner)
        self.storage = storage
        self.shape = (nrows, ncols)
        self.indptr = indptr
        self.indices = indices
        self.data = data

    @classmethod
    def _trusted(cls, storage, shape, indptr, indices, data) -> "CsMat":
        mat = cls.__new__(cls)
        mat.storage = storage
        mat.shape = tuple(shape)
        mat.indptr = indptr
        mat.indices = indices
        mat.data = data
        return mat

    @classmethod
    def new_csr(cls, shape, indptr, indices, data) -> "CsMat":
        return cls(CompressedStorage.CSR, shape, indptr, indices, data)

    @classmethod
    def new_csc(cls, shape, indptr, indices, data) -> "CsMat":
        return cls(CompressedStorage.CSC, shape, indptr, indices, data)

    @classmethod
    def eye(cls, dim: int) -> "CsMat":
        return cls.new_csr((dim, dim), range(dim + 1), range(dim), [1.0] * dim)

    @classmethod
    def eye_csc(cls, dim: int) -> "CsMat":
        return cls.new_csc((dim, dim), range(dim + 1), range(dim), [1.0] * dim)

    @classmethod
    def zero(cls, shape) -> "CsMat":
        return cls.new_csr(shape, [0] * (shape[0] + 1), [], [])

    def rows(self) -> int:
        return self.shape[0]

    def cols(self) -> int:
        return self.shape[1]

    def nnz(self) -> int:
        return len(self.data)

    def is_csr(self) -> bool:
        return self.storage is CompressedStorage.CSR

    def is_csc(self) -> bool:
        return self.storage is CompressedStorage.CSC

    def outer_dims(self) -> int:
        return self.shape[0] if self.is_csr() else self.shape[1]

    def inner_dims(self) -> int:
        return self.shape[1] if self.is_csr() else self.shape[0]

    def outer_view(self, index: int) -> Optional[CsVec]:
        """The sparse vector of one outer line, or None when out of range."""
        if not 0 <= index < self.outer_dims():
            return None
        start, stop = self.indptr[index], self.indptr[index + 1]
        return CsVec._trusted(
            self.inner_dims(), self.indices[start:stop], self.data[start:stop]
        )

    def outer_iterator(self) -> Iterator[CsVec]:
        return (self.outer_view(i) for i in range(self.outer_dims()))

    def get(self, row: int, col: int) -> Optional[Any]:
        if self.is_csr():
            return self.get_outer_inner(row, col)
        return self.get_outer_inner(col, row)

    def get_outer_inner(self, outer: int, inner: int) -> Optional[Any]:
        vec = self.outer_view(outer)
        return None if vec is None else vec.get(inner)

    def degrees(self) -> list:
        """Number of off-diagonal non-zeros of each outer line."""
        return [
            sum(1 for ind in vec.indices if ind != outer)
            for outer, vec in enumerate(self.outer_iterator())
        ]

    def max_outer_nnz(self) -> int:
        return max((b - a for a, b in zip(self.indptr, self.indptr[1:])), default=0)

    def to_other_storage(self) -> "CsMat":
        """The same matrix stored with the other compression."""
        inner = self.inner_dims()
        counts = [0] * inner
        for ind in self.indices:
            counts[ind] += 1
        new_indptr = [0, *accumulate(counts)]
        cursor = new_indptr[:-1]
        new_indices = [0] * self.nnz()
        new_data: list = [None] * self.nnz()
        for outer, vec in enumerate(self.outer_iterator()):
            for ind, val in vec:
                pos = cursor[ind]
                new_indices[pos] = outer
                new_data[pos] = val
                cursor[ind] += 1
        return CsMat._trusted(
            self.storage.other(), self.shape, new_indptr, new_indices, new_data
        )

    def _copy(self) -> "CsMat":
        return CsMat._trusted(
            self.storage, self.shape, list(self.indptr), list(self.indices), list(self.data)
        )

    def to_csr(self) -> "CsMat":
        return self._copy() if self.is_csr() else self.to_other_storage()

    def to_csc(self) -> "CsMat":
        return self._copy() if self.is_csc() else self.to_other_storage()

    def transpose_view(self) -> "CsMat":
        """The transposed matrix, sharing the structure arrays."""
        return CsMat._trusted(
            self.storage.other(),
            (self.shape[1], self.shape[0]),
            self.indptr,
            self.indices,
            self.data,
        )

    def slice_outer(self, start: int, stop: Optional[int] = None) -> "CsMat":
        """The outer lines in [start, stop) as a new matrix."""
        if stop is None:
            stop = self.outer_dims()
        if not 0 <= start <= stop <= self.outer_dims():
            raise ValueError("Invalid view")
        begin, end = self.indptr[start], self.indptr[stop]
        indptr = [p - begin for p in self.indptr[start : stop + 1]]
        if self.is_csr():
            shape = (stop - start, self.shape[1])
        else:
            shape = (self.shape[0], stop - start)
        return CsMat._trusted(
            self.storage, shape, indptr, self.indices[begin:end], self.data[begin:end]
        )

    def to_dense(self) -> list:
        dense = [[0] * self.cols() for _ in range(self.rows())]
        assign_to_dense(dense, self)
        return dense

    def to_dict(self) -> dict:
        return {
            "storage": self.storage.name,
            "nrows": self.shape[0],
            "ncols": self.shape[1],
            "indptr": list(self.indptr),
            "indices": list(self.indices),
            "data": list(self.data),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CsMat":
        try:
            return cls(
                data["storage"],
                (data["nrows"], data["ncols"]),
                data["indptr"],
                data["indices"],
                data["data"],
            )
        except KeyError as exc:
            raise StructureError(f"missing field {exc.args[0]!r}") from None

    def __iter__(self) -> Iterator[tuple]:
        """Yield (value, (row, col)) for every stored entry."""
        for outer, vec in enumerate(self.outer_iterator()):
            for inner, val in vec:
                yield val, ((outer, inner) if self.is_csr() else (inner, outer))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CsMat):
            return NotImplemented
        return (
            self.storage is other.storage
            and self.shape == other.shape
            and self.indptr == other.indptr
            and self.indices == other.indices
            and self.data == other.data
        )

    def __repr__(self) -> str:
        return (
            f"CsMat({self.storage.name}, shape={self.shape}, indptr={self.indptr}, "
            f"indices={self.indices}, data={self.data})"
        )


def assign_to_dense(array: list, spmat: CsMat) -> None:
    """Write the non-zeros of spmat into a dense list of rows, leaving others as is."""
    if len(array) != spmat.rows() or any(len(row) != spmat.cols() for row in array):
        raise ValueError("Dimension mismatch")
    for val, (row, col) in spmat:
        array[row][col] = val


def assign_vector_to_dense(array: list, spvec: CsVec) -> None:
    """Write the non-zeros of spvec into a dense list, leaving others as is."""
    if len(array) != spvec.dim:
        raise ValueError("Dimension mismatch")
    for ind, val in spvec:
        array[ind] = val


def is_symmetric(mat: CsMat) -> bool:
    if mat.rows() != mat.cols():
        return False
    for outer, vec in enumerate(mat.outer_iterator()):
        for inner, value in vec:
            transposed = mat.get_outer_inner(inner, outer)
            if transposed is None or transposed != value:
                return False
    return True