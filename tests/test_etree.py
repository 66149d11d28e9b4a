import pytest

from sparsemat.etree import Parents


def test_new_tree_all_roots():
    tree = Parents(4)
    assert tree.nb_nodes() == 4
    assert all(tree.is_root(n) for n in range(4))
    assert all(tree.get_parent(n) is None for n in range(4))


def test_set_parent_and_root():
    tree = Parents(3)
    tree.set_parent(0, 2)
    assert tree.get_parent(0) == 2
    assert not tree.is_root(0)
    tree.set_root(0)
    assert tree.is_root(0)


def test_uproot_only_affects_roots():
    tree = Parents(3)
    tree.uproot(1, 2)
    assert tree.get_parent(1) == 2
    tree.uproot(1, 0)
    assert tree.get_parent(1) == 2


def test_out_of_bounds():
    tree = Parents(2)
    with pytest.raises(IndexError):
        tree.set_parent(0, 2)
    with pytest.raises(IndexError):
        tree.get_parent(2)
    with pytest.raises(IndexError):
        tree.is_root(-1)
    with pytest.raises(IndexError):
        tree.uproot(0, 5)
    assert tree.is_root(0)