"""Sparse matrix product of CSR matrices, split into symbolic and numeric passes.

The symbolic pass computes the structure of C = A * B, the numeric pass
fills in its values. Both follow the SMMP scheme of Bank and Douglas.
"""

from __future__ import annotations

from typing import Any, Sequence

from .csmat import CompressedStorage, CsMat


def _check_operands(a: CsMat, b: CsMat) -> None:
    if not (a.is_csr() and b.is_csr()):
        raise ValueError("Storage mismatch")
    if a.cols() != b.rows():
        raise ValueError("Dimension mismatch")


def symbolic(a: CsMat, b: CsMat) -> tuple[list[int], list[int]]:
    """Structure of the product of two CSR matrices.

    Returns the ``(indptr, indices)`` of the CSR product, with the column
    indices of every row sorted.
    """
    _check_operands(a, b)
    seen = [False] * b.cols()
    indptr = [0]
    indices: list[int] = []
    for a_row in a.outer_iterator():
        row_cols: list[int] = []
        for a_col in a_row.indices:
            start, stop = b.indptr[a_col], b.indptr[a_col + 1]
            for b_col in b.indices[start:stop]:
                if not seen[b_col]:
                    seen[b_col] = True
                    row_cols.append(b_col)
        row_cols.sort()
        for col in row_cols:
            seen[col] = False
        indices.extend(row_cols)
        indptr.append(len(indices))
    return indptr, indices


def numeric(
    a: CsMat, b: CsMat, indptr: Sequence[int], indices: Sequence[int]
) -> list[Any]:
    """Values of the product of two CSR matrices on a structure from ``symbolic``."""
    _check_operands(a, b)
    if len(indptr) != a.rows() + 1:
        raise ValueError("Dimension mismatch")
    if indptr[-1] != len(indices):
        raise ValueError("indptr does not match the number of non-zeros")
    tmp: list[Any] = [0] * b.cols()
    data: list[Any] = []
    for row, a_row in enumerate(a.outer_iterator()):
        for a_col, a_val in a_row:
            start, stop = b.indptr[a_col], b.indptr[a_col + 1]
            for b_col, b_val in zip(b.indices[start:stop], b.data[start:stop]):
                tmp[b_col] = tmp[b_col] + a_val * b_val
        for col in indices[indptr[row] : indptr[row + 1]]:
            data.append(tmp[col])
            tmp[col] = 0
    return data


def mul_csr_csr(lhs: CsMat, rhs: CsMat) -> CsMat:
    """The CSR product of two CSR matrices."""
    indptr, indices = symbolic(lhs, rhs)
    data = numeric(lhs, rhs, indptr, indices)
    return CsMat._trusted(
        CompressedStorage.CSR, (lhs.rows(), rhs.cols()), indptr, indices, data
    )