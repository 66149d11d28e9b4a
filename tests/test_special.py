import pytest

from sparsemat.csmat import CsMat, is_symmetric
from sparsemat.special import tri_mesh_graph_laplacian

TRIANGLES = [[0, 3, 4], [0, 4, 1], [1, 4, 5], [1, 5, 2]]


def test_tri_mesh_graph_laplacian():
    x = -1.0
    expected = CsMat.new_csr(
        (6, 6),
        [0, 4, 9, 12, 15, 20, 24],
        [0, 1, 3, 4,
         0, 1, 2, 4, 5,
         1, 2, 5,
         0, 3, 4,
         0, 1, 3, 4, 5,
         1, 2, 4, 5],
        [3.0, x, x, x,
         x, 4.0, x, x, x,
         x, 2.0, x,
         x, 2.0, x,
         x, x, x, 4.0, x,
         x, x, x, 3.0],
    )
    lap_mat = tri_mesh_graph_laplacian(6, TRIANGLES)
    assert lap_mat == expected


def test_laplacian_is_symmetric_with_zero_row_sums():
    lap_mat = tri_mesh_graph_laplacian(6, TRIANGLES)
    assert is_symmetric(lap_mat)
    assert all(sum(row) == 0 for row in lap_mat.to_dense())


def test_isolated_vertex_has_zero_diagonal():
    lap_mat = tri_mesh_graph_laplacian(7, TRIANGLES)
    assert lap_mat.get(6, 6) == 0.0
    assert lap_mat.outer_view(6).nnz() == 1


def test_bad_triangle():
    with pytest.raises(ValueError):
        tri_mesh_graph_laplacian(3, [[0, 1]])