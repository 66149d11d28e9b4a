# sparsemat

Sparse matrices in compressed row (CSR) and compressed column (CSC) storage,
written in plain Python with no dependencies. Dense matrices are lists of rows,
and dense vectors are lists.

## Modules

- `sparsemat.csmat`
  - `CsMat`: a compressed sparse matrix. Build one with `CsMat.new_csr`,
    `CsMat.new_csc`, `CsMat.eye`, `CsMat.eye_csc` or `CsMat.zero`. The structure
    is checked on construction, and a bad structure raises `StructureError`,
    which is a subclass of `ValueError`. Methods:
    - `rows`, `cols`, `nnz`, `get(row, col)`
    - `outer_view`, `outer_iterator`, `degrees`
    - `to_csr`, `to_csc`, `to_other_storage`, `transpose_view`
    - `slice_outer(start, stop)`, `to_dense`
    - `to_dict` / `from_dict`, which use the keys `storage`, `nrows`, `ncols`,
      `indptr`, `indices` and `data`

    Iterating a `CsMat` yields `(value, (row, col))`.
  - `CsVec`: a sparse vector with sorted indices. Methods: `empty`, `get`,
    `dot`, `append`, `to_dense`, `to_dict` / `from_dict`. Iterating yields
    `(index, value)`.
  - `CompressedStorage`: an enum with the members `CSR` and `CSC`.
  - `assign_to_dense`, `assign_vector_to_dense`: write non-zeros into an
    existing dense list. Entries that are not stored are left unchanged.
  - `is_symmetric(mat)`
- `sparsemat.triplet`
  - `TriMat`: a triplet (coordinate) builder. Methods: `add_triplet`,
    `from_triplets`, `find_locations`, `set_triplet`, `transpose_view`. Entries
    that share a location are summed by `to_csr` and `to_csc`.
- `sparsemat.permutation`
  - `Permutation`: a permutation stored together with its inverse. The
    identity of a dimension comes from `Permutation.identity(dim)`.
    - `perm * vector` gives `[vector[perm[i]] ...]`.
    - Other methods: `inv`, `at`, `at_inv`, `vec`, `inv_vec`, `is_identity`.
  - `perm_is_valid`
  - `permute_rows` (P·A), `permute_cols` (A·P), `transform_mat_papt`
    (P·A·Pᵀ) and `transform_mat_paq` (P·A·Q).
- `sparsemat.prod`
  - `csvec_dot_by_binary_search`
  - `mul_acc_mat_vec_csr` / `mul_acc_mat_vec_csc`: accumulate into a dense
    result vector.
  - `csr_mul_csvec`: sparse matrix times sparse vector.
  - `csr_mul_dense` / `csc_mul_dense`: accumulate into a dense result.
  - `sparse_mul_dense` and `dense_mul_sparse`.
- `sparsemat.smmp`
  - `symbolic` computes the structure of a CSR·CSR product.
  - `numeric` computes its values.
  - `mul_csr_csr` does both and returns a CSR `CsMat`.
- `sparsemat.ordering`
  - `reverse_cuthill_mckee(mat)`
  - `cuthill_mckee_custom(mat, strategy, direction)`. It takes a start
    strategy (`Next`, `MinimumDegree` or `PseudoPeripheral`) and a `Direction`
    (`FORWARD` or `REVERSED`).
  - Both return an `Ordering` holding a `perm` and a `connected_parts` list of
    component boundaries.
- `sparsemat.special`
  - `tri_mesh_graph_laplacian(nb_vertices, triangles)`
- `sparsemat.etree`
  - `Parents`: elimination-tree parent storage. Methods: `get_parent`,
    `set_parent`, `set_root`, `is_root`, `uproot`, `nb_nodes`.

## Installation

```
pip install .
```

Run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from sparsemat.csmat import CsMat
from sparsemat.triplet import TriMat
from sparsemat.permutation import Permutation, transform_mat_papt
from sparsemat.ordering import reverse_cuthill_mckee
from sparsemat.smmp import mul_csr_csr

tri = TriMat((3, 3))
tri.add_triplet(0, 0, 2.0)
tri.add_triplet(1, 1, 3.0)
tri.add_triplet(0, 2, 1.0)
tri.add_triplet(2, 0, 1.0)
tri.add_triplet(2, 2, 4.0)
mat = tri.to_csr()

print(mat.to_dense())
print(mul_csr_csr(mat, mat).to_dense())

ordering = reverse_cuthill_mckee(mat)
print(ordering.perm.vec(), ordering.connected_parts)

perm = Permutation([2, 1, 0])
print(transform_mat_papt(mat, perm).to_dense())
```

## Errors

- A malformed compressed structure raises `StructureError`.
- Mismatched dimensions or storages raise `ValueError`.
- Out-of-range indices raise `IndexError`.

## What it does not do

- There are no triangular or iterative solvers, and no factorizations.
- Matrices do not overload `*` or `@`. Use the functions in `prod` and `smmp`.
- The package does not read or write any matrix file format. `to_dict` and
  `from_dict` are its only serialization.
- All computation is single-threaded pure Python.