import pytest

from sparsemat.csmat import CsMat
from sparsemat.triplet import TriMat


def _expected_4x4(last_values=(1.0, 3.0, 2.0, 5.0, 4.0, 6.0)):
    return CsMat.new_csc(
        (4, 4),
        [0, 2, 3, 4, 6],
        [0, 1, 0, 3, 2, 3],
        list(last_values),
    )


def test_triplet_incremental():
    mat = TriMat((4, 4))
    mat.add_triplet(0, 0, 1.0)
    mat.add_triplet(0, 1, 2.0)
    mat.add_triplet(1, 0, 3.0)
    mat.add_triplet(2, 3, 4.0)
    mat.add_triplet(3, 2, 5.0)
    mat.add_triplet(3, 3, 6.0)
    assert mat.to_csc() == _expected_4x4()


def test_triplet_unordered():
    mat = TriMat((4, 4))
    mat.add_triplet(0, 1, 2.0)
    mat.add_triplet(0, 0, 1.0)
    mat.add_triplet(1, 0, 3.0)
    mat.add_triplet(2, 3, 4.0)
    mat.add_triplet(3, 3, 6.0)
    mat.add_triplet(3, 2, 5.0)
    expected = _expected_4x4()
    assert mat.to_csc() == expected
    assert mat.to_csr().to_csc() == expected


def _additive_mat():
    mat = TriMat((4, 4))
    mat.add_triplet(0, 1, 2.0)
    mat.add_triplet(0, 0, 1.0)
    mat.add_triplet(3, 2, 3.0)
    mat.add_triplet(1, 0, 3.0)
    mat.add_triplet(2, 3, 4.0)
    mat.add_triplet(3, 3, 6.0)
    mat.add_triplet(3, 2, 2.0)
    return mat


def test_triplet_additions():
    mat = _additive_mat()
    expected = _expected_4x4()
    assert mat.to_csc() == expected
    assert mat.to_csr() == expected.to_csr()


def test_triplet_to_csr():
    mat = _additive_mat()
    expected = _expected_4x4()
    assert mat.to_csr() == expected.to_csr()
    assert mat.to_csc() == expected


def test_triplet_from_vecs():
    row_inds = [0, 0, 1, 2, 3, 3, 4, 4]
    col_inds = [0, 1, 0, 3, 2, 3, 1, 3]
    data = [1, 2, 3, 4, 5, 6, 7, 8]
    mat = TriMat.from_triplets((5, 4), row_inds, col_inds, data)
    expected = CsMat.new_csc(
        (5, 4),
        [0, 2, 4, 5, 8],
        [0, 1, 0, 4, 3, 2, 3, 4],
        [1, 3, 2, 7, 5, 4, 6, 8],
    )
    assert mat.to_csc() == expected
    assert mat.to_csr() == expected.to_csr()


def test_triplet_mutate_entry():
    mat = TriMat((4, 4))
    mat.add_triplet(0, 0, 1.0)
    mat.add_triplet(0, 1, 2.0)
    mat.add_triplet(1, 0, 3.0)
    mat.add_triplet(2, 3, 4.0)
    mat.add_triplet(3, 2, 5.0)
    mat.add_triplet(3, 3, 6.0)
    locations = mat.find_locations(2, 3)
    assert len(locations) == 1
    mat.set_triplet(locations[0], 2, 3, 0.0)
    expected = _expected_4x4((1.0, 3.0, 2.0, 5.0, 0.0, 6.0))
    assert mat.to_csc() == expected
    assert mat.to_csr() == expected.to_csr()


def test_triplet_complex():
    mat = TriMat((6, 9))
    for row, col, val in [
        (5, 8, 1), (0, 0, 1), (0, 8, 2), (0, 4, 2), (2, 0, 1), (2, 1, 2),
        (2, 3, 2), (2, 6, 3), (2, 8, 2), (1, 0, 1), (1, 5, 1), (1, 8, 1),
        (0, 4, 4), (3, 8, 2), (3, 5, 4), (5, 8, 1), (3, 2, 9), (3, 0, 1),
        (4, 0, 1), (4, 8, 2), (1, 8, 1), (4, 3, 5), (5, 0, 1), (5, 5, 7),
        (2, 3, 1), (5, 7, 8),
    ]:
        mat.add_triplet(row, col, val)
    expected = CsMat.new_csc(
        (6, 9),
        [0, 6, 7, 8, 10, 11, 14, 15, 16, 22],
        [0, 1, 2, 3, 4, 5, 2, 3, 2, 4, 0, 1, 3, 5, 2, 5, 0, 1, 2, 3, 4, 5],
        [1, 1, 1, 1, 1, 1, 2, 9, 3, 5, 6, 1, 4, 7, 3, 8, 2, 2, 2, 2, 2, 2],
    )
    assert mat.to_csc() == expected
    assert mat.to_csr() == expected.to_csr()


def test_triplet_empty_lines():
    empty = TriMat((2, 4))
    m = empty.to_csr()
    assert m.indptr == [0, 0, 0]
    assert m.indices == []
    assert m.data == []
    m = empty.to_csc()
    assert m.indptr == [0, 0, 0, 0, 0]
    assert m.indices == []
    assert m.data == []

    mat = TriMat((6, 9))
    for row, col, val in [
        (5, 8, 1), (0, 0, 1), (0, 8, 2), (0, 4, 2), (2, 0, 1), (2, 1, 2),
        (2, 3, 2), (2, 8, 2), (0, 4, 4), (3, 8, 2), (3, 5, 4), (5, 8, 1),
        (3, 0, 1), (4, 0, 1), (4, 8, 2), (4, 3, 5), (5, 0, 1), (5, 5, 7),
        (2, 3, 1),
    ]:
        mat.add_triplet(row, col, val)
    expected = CsMat.new_csc(
        (6, 9),
        [0, 5, 6, 6, 8, 9, 11, 11, 11, 16],
        [0, 2, 3, 4, 5, 2, 2, 4, 0, 3, 5, 0, 2, 3, 4, 5],
        [1, 1, 1, 1, 1, 2, 3, 5, 6, 4, 7, 2, 2, 2, 2, 2],
    )
    assert mat.to_csc() == expected
    assert mat.to_csr() == expected.to_csr()

    mat = TriMat((4, 6))
    mat.add_triplet(1, 1, 1)
    mat.add_triplet(0, 3, 2)
    m = mat.to_csc()
    assert m.indptr == [0, 0, 1, 1, 2, 2, 2]
    assert m.indices == [1, 0]
    assert m.data == [1, 2]


def test_nnz_counts_duplicates():
    mat = _additive_mat()
    assert mat.nnz() == 7
    assert mat.to_csc().nnz() == 6


def test_find_locations_duplicates():
    mat = _additive_mat()
    assert mat.find_locations(3, 2) == [2, 6]
    assert mat.find_locations(1, 1) == []


def test_iter_yields_insertion_order():
    mat = TriMat((3, 3))
    mat.add_triplet(2, 0, 5)
    mat.add_triplet(0, 1, 7)
    assert list(mat) == [(5, (2, 0)), (7, (0, 1))]


def test_transpose_view():
    mat = TriMat.from_triplets((2, 3), [0, 1], [2, 0], [4, 9])
    t = mat.transpose_view()
    assert t.shape == (3, 2)
    assert list(t) == [(4, (2, 0)), (9, (0, 1))]
    assert t.to_csr() == mat.to_csc().transpose_view()


def test_add_triplet_out_of_bounds():
    mat = TriMat((2, 2))
    with pytest.raises(IndexError):
        mat.add_triplet(2, 0, 1)
    with pytest.raises(IndexError):
        mat.add_triplet(0, 5, 1)


def test_from_triplets_length_mismatch():
    with pytest.raises(ValueError):
        TriMat.from_triplets((2, 2), [0, 1], [0], [1, 2])


def test_from_triplets_index_out_of_shape():
    with pytest.raises(IndexError):
        TriMat.from_triplets((2, 2), [0, 2], [0, 1], [1, 2])
    with pytest.raises(IndexError):
        TriMat.from_triplets((2, 2), [0, 1], [0, 3], [1, 2])


def test_set_triplet_bad_index():
    mat = TriMat((2, 2))
    mat.add_triplet(0, 0, 1)
    with pytest.raises(IndexError):
        mat.set_triplet(1, 0, 0, 2)