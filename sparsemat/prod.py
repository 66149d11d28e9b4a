"""Products of sparse matrices and vectors with sparse or dense operands."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Callable, Sequence

from .csmat import CsMat, CsVec


def _dot_impl(
    short: CsVec, long: CsVec, mul: Callable[[Any, Any], Any]
) -> Any:
    total = 0
    lo = 0
    long_indices = long.indices
    for ind, val in short:
        if lo >= len(long_indices):
            break
        pos = bisect_left(long_indices, ind, lo)
        if pos < len(long_indices) and long_indices[pos] == ind:
            total += mul(val, long.data[pos])
        lo = pos
    return total


def csvec_dot_by_binary_search(vec1: CsVec, vec2: CsVec) -> Any:
    """Dot product of two sparse vectors, searching the longer one for each index.

    The operand order of each product is kept as vec1 value times vec2 value.
    """
    if vec1.nnz() > vec2.nnz():
        return _dot_impl(vec2, vec1, lambda b, a: a * b)
    return _dot_impl(vec1, vec2, lambda a, b: a * b)


def _check_mat_vec(mat: CsMat, in_vec: Sequence[Any], res_vec: Sequence[Any]) -> None:
    if mat.cols() != len(in_vec) or mat.rows() != len(res_vec):
        raise ValueError("Dimension mismatch")


def mul_acc_mat_vec_csc(mat: CsMat, in_vec: Sequence[Any], res_vec: list) -> list:
    """Add the product of a CSC matrix and a dense vector into res_vec."""
    _check_mat_vec(mat, in_vec, res_vec)
    if not mat.is_csc():
        raise ValueError("Storage mismatch")
    for col, line in enumerate(mat.outer_iterator()):
        vec_elem = in_vec[col]
        for row, mtx_elem in line:
            res_vec[row] += mtx_elem * vec_elem
    return res_vec


def mul_acc_mat_vec_csr(mat: CsMat, in_vec: Sequence[Any], res_vec: list) -> list:
    """Add the product of a CSR matrix and a dense vector into res_vec."""
    _check_mat_vec(mat, in_vec, res_vec)
    if not mat.is_csr():
        raise ValueError("Storage mismatch")
    for row, line in enumerate(mat.outer_iterator()):
        acc = res_vec[row]
        for col, mtx_elem in line:
            acc += mtx_elem * in_vec[col]
        res_vec[row] = acc
    return res_vec


def csr_mul_csvec(lhs: CsMat, rhs: CsVec) -> CsVec:
    """Product of a sparse matrix with a sparse vector, as a sparse vector."""
    if rhs.dim == 0:
        return CsVec.empty(0)
    if lhs.cols() != rhs.dim:
        raise ValueError("Dimension mismatch")
    if lhs.is_csc():
        lhs = lhs.to_csr()
    result = CsVec.empty(lhs.rows())
    for row, line in enumerate(lhs.outer_iterator()):
        val = line.dot(rhs)
        if val != 0:
            result.append(row, val)
    return result


def _check_dense_product(
    lhs: CsMat, rhs: Sequence[Sequence[Any]], acc: Sequence[Sequence[Any]]
) -> None:
    if lhs.cols() != len(rhs) or lhs.rows() != len(acc):
        raise ValueError("Dimension mismatch")
    width = len(acc[0]) if acc else (len(rhs[0]) if rhs else 0)
    if any(len(row) != width for row in rhs) or any(len(row) != width for row in acc):
        raise ValueError("Dimension mismatch")


def csr_mul_dense(lhs: CsMat, rhs: Sequence[Sequence[Any]], acc: list) -> list:
    """Add the product of a CSR matrix and a dense matrix (list of rows) into acc."""
    _check_dense_product(lhs, rhs, acc)
    if not lhs.is_csr():
        raise ValueError("Storage mismatch")
    for line, out_row in zip(lhs.outer_iterator(), acc):
        for col, lval in line:
            for pos, rval in enumerate(rhs[col]):
                out_row[pos] += lval * rval
    return acc


def csc_mul_dense(lhs: CsMat, rhs: Sequence[Sequence[Any]], acc: list) -> list:
    """Add the product of a CSC matrix and a dense matrix (list of rows) into acc."""
    _check_dense_product(lhs, rhs, acc)
    if not lhs.is_csc():
        raise ValueError("Storage mismatch")
    for line, rhs_row in zip(lhs.outer_iterator(), rhs):
        for row, lval in line:
            out_row = acc[row]
            for pos, rval in enumerate(rhs_row):
                out_row[pos] += lval * rval
    return acc


def sparse_mul_dense(lhs: CsMat, rhs: Sequence[Sequence[Any]]) -> list:
    """The dense product of a sparse matrix and a dense matrix."""
    if lhs.cols() != len(rhs):
        raise ValueError("Dimension mismatch")
    width = len(rhs[0]) if rhs else 0
    out = [[0] * width for _ in range(lhs.rows())]
    if lhs.is_csr():
        return csr_mul_dense(lhs, rhs, out)
    return csc_mul_dense(lhs, rhs, out)


def dense_mul_sparse(lhs: Sequence[Sequence[Any]], rhs: CsMat) -> list:
    """The dense product of a dense matrix and a sparse matrix."""
    if any(len(row) != rhs.rows() for row in lhs):
        raise ValueError("Dimension mismatch")
    out = [[0] * rhs.cols() for _ in lhs]
    for val, (k, col) in rhs:
        for lhs_row, out_row in zip(lhs, out):
            out_row[col] += lhs_row[k] * val
    return out