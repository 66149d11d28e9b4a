"""Common special sparse matrices."""

from __future__ import annotations

from bisect import bisect_left
from itertools import permutations
from typing import Iterable, Sequence

from .csmat import CsMat


def _insert_sorted(items: list, value: int) -> None:
    pos = bisect_left(items, value)
    if pos == len(items) or items[pos] != value:
        items.insert(pos, value)


def tri_mesh_graph_laplacian(
    nb_vertices: int, triangles: Iterable[Sequence[int]]
) -> CsMat:
    """Graph laplacian (CSR) of a triangle mesh given by vertex triples."""
    neighbors: list[list[int]] = [[] for _ in range(nb_vertices)]
    for triangle in triangles:
        if len(triangle) != 3:
            raise ValueError("triangles must have exactly 3 vertices")
        for v0, v1 in permutations(triangle, 2):
            _insert_sorted(neighbors[v0], v1)

    indptr = [0]
    indices: list[int] = []
    data: list[float] = []
    for vert, vert_neighbors in enumerate(neighbors):
        degree = len(vert_neighbors)
        indptr.append(indptr[-1] + degree + 1)
        below_diag = True
        for neighbor in vert_neighbors:
            if below_diag and neighbor > vert:
                data.append(float(degree))
                indices.append(vert)
                below_diag = False
            data.append(-1.0)
            indices.append(neighbor)
        if below_diag:
            data.append(float(degree))
            indices.append(vert)
    return CsMat.new_csr((nb_vertices, nb_vertices), indptr, indices, data)