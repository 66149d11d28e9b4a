"""Permutation matrices and their application to sparse matrices."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .csmat import CsMat


def perm_is_valid(perm: Sequence[int]) -> bool:
    """Whether perm holds each of 0..len(perm)-1 exactly once."""
    n = len(perm)
    seen = [False] * n
    for i in perm:
        if not 0 <= i < n or seen[i]:
            return False
        seen[i] = True
    return True


class Permutation:
    """A permutation matrix, stored with its inverse.

    The identity of a given dimension is stored without any index list.
    """

    def __init__(self, perm: Sequence[int]):
        perm = list(perm)
        if not perm_is_valid(perm):
            raise ValueError("invalid permutation")
        self._set(len(perm), perm)

    def _set(self, dim: int, perm: Optional[list]) -> None:
        self._dim = dim
        self._perm = perm
        if perm is None:
            self._perm_inv = None
        else:
            perm_inv = [0] * dim
            for ind, val in enumerate(perm):
                perm_inv[val] = ind
            self._perm_inv = perm_inv

    @classmethod
    def _trusted(cls, perm: list) -> "Permutation":
        result = cls.__new__(cls)
        result._set(len(perm), perm)
        return result

    @classmethod
    def identity(cls, dim: int) -> "Permutation":
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        result = cls.__new__(cls)
        result._set(dim, None)
        return result

    def dim(self) -> int:
        return self._dim

    def inv(self) -> "Permutation":
        """The inverse permutation."""
        result = Permutation.__new__(Permutation)
        result._dim = self._dim
        result._perm = self._perm_inv
        result._perm_inv = self._perm
        return result

    def is_identity(self) -> bool:
        if self._perm is None:
            return True
        return all(ind == val for ind, val in enumerate(self._perm))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._dim:
            raise IndexError("permutation index out of bounds")

    def at(self, index: int) -> int:
        self._check_index(index)
        return index if self._perm is None else self._perm[index]

    def at_inv(self, index: int) -> int:
        self._check_index(index)
        return index if self._perm_inv is None else self._perm_inv[index]

    def vec(self) -> list:
        """The permutation as a list of indices."""
        return list(range(self._dim)) if self._perm is None else list(self._perm)

    def inv_vec(self) -> list:
        """The inverse permutation as a list of indices."""
        if self._perm_inv is None:
            return list(range(self._dim))
        return list(self._perm_inv)

    def __mul__(self, vector: Sequence[Any]) -> list:
        """Apply the permutation to a dense vector: result[i] = vector[perm[i]]."""
        if len(vector) != self._dim:
            raise ValueError("Dimension mismatch")
        if self._perm is None:
            return list(vector)
        return [vector[pi] for pi in self._perm]

    def __repr__(self) -> str:
        if self._perm is None:
            return f"Permutation.identity({self._dim})"
        return f"Permutation({self._perm})"


def _owned(mat: CsMat) -> CsMat:
    return mat.to_csr() if mat.is_csr() else mat.to_csc()


def _rebuild(
    mat: CsMat, outer_order: Sequence[int], inner_map: Optional[Sequence[int]]
) -> CsMat:
    indptr = [0]
    indices: list = []
    data: list = []
    for in_outer in outer_order:
        line = mat.outer_view(in_outer)
        entries = [
            (ind if inner_map is None else inner_map[ind], val) for ind, val in line
        ]
        entries.sort(key=lambda entry: entry[0])
        for ind, val in entries:
            indices.append(ind)
            data.append(val)
        indptr.append(len(indices))
    return CsMat(mat.storage, mat.shape, indptr, indices, data)


def _permute_outer(mat: CsMat, perm: Permutation) -> CsMat:
    if mat.outer_dims() != perm.dim():
        raise ValueError("Dimension mismatch")
    if mat.rows() == 0 or mat.cols() == 0:
        return _owned(mat)
    return _rebuild(mat, perm.vec(), None)


def _permute_inner(mat: CsMat, perm: Permutation) -> CsMat:
    if mat.inner_dims() != perm.dim():
        raise ValueError("Dimension mismatch")
    if mat.rows() == 0 or mat.cols() == 0:
        return _owned(mat)
    return _rebuild(mat, range(mat.outer_dims()), perm.inv_vec())


def permute_rows(mat: CsMat, perm: Permutation) -> CsMat:
    """The product P * A."""
    if mat.is_csc():
        return _permute_inner(mat, perm)
    return _permute_outer(mat, perm)


def permute_cols(mat: CsMat, perm: Permutation) -> CsMat:
    """The product A * P."""
    if mat.is_csc():
        return _permute_outer(mat, perm)
    return _permute_inner(mat, perm)


def transform_mat_papt(mat: CsMat, perm: Permutation) -> CsMat:
    """The square matrix P * A * P^T."""
    if mat.rows() != mat.cols():
        raise ValueError("matrix must be square")
    if mat.rows() != perm.dim():
        raise ValueError("Dimension mismatch")
    if perm.is_identity() or mat.rows() == 0:
        return _owned(mat)
    return _rebuild(mat, perm.vec(), perm.inv_vec())


def transform_mat_paq(
    mat: CsMat, row_perm: Permutation, col_perm: Permutation
) -> CsMat:
    """The matrix P * A * Q, computed in a single pass."""
    if mat.rows() != row_perm.dim() or mat.cols() != col_perm.dim():
        raise ValueError("Dimension mismatch")
    if (
        (row_perm.is_identity() and col_perm.is_identity())
        or mat.rows() == 0
        or mat.cols() == 0
    ):
        return _owned(mat)
    if row_perm._perm is None:
        return permute_cols(mat, col_perm)
    if col_perm._perm is None:
        return permute_rows(mat, row_perm)
    if mat.is_csr():
        outer_order, inner_map = row_perm.vec(), col_perm.inv_vec()
    else:
        outer_order, inner_map = col_perm.vec(), row_perm.inv_vec()
    return _rebuild(mat, outer_order, inner_map)