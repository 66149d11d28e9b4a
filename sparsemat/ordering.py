"""Cuthill-McKee orderings to reduce the bandwidth of symmetric sparse matrices."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence

from .csmat import CsMat
from .permutation import Permutation


@dataclass
class Ordering:
    """A computed permutation and the bounds of its connected components.

    ``connected_parts`` holds the positions inside the permutation where each
    connected component starts, followed by the total number of vertices.
    """

    perm: Permutation
    connected_parts: list[int] = field(default_factory=list)


class Direction(Enum):
    """Whether the Cuthill-McKee ordering is built forward or reversed."""

    FORWARD = "forward"
    REVERSED = "reversed"


class _Strategy(Protocol):
    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMat
    ) -> int: ...


def _first_unvisited(visited: Sequence[bool]) -> int:
    for vertex, seen in enumerate(visited):
        if not seen:
            return vertex
    raise ValueError("There should always be an unvisited vertex left to choose")


class Next:
    """Start from the first vertex not visited yet."""

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMat
    ) -> int:
        return _first_unvisited(visited)


class MinimumDegree:
    """Start from an unvisited vertex of minimum degree."""

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMat
    ) -> int:
        candidates = [vertex for vertex, seen in enumerate(visited) if not seen]
        if not candidates:
            raise ValueError(
                "There should always be an unvisited vertex left to choose"
            )
        return min(candidates, key=lambda vertex: degrees[vertex])

class PseudoPeripheral:
    """Start from a pseudo-peripheral vertex, found as described by George and Liu.

    The most expensive strategy, but usually the one giving the narrowest
    bandwidth.
    """

    @staticmethod
    def _contender_and_height(
        root: int, degrees: Sequence[int], mat: CsMat
    ) -> tuple[int, int]:
        """Minimum-degree vertex of the last level, and height, of the level
        structure rooted at root."""
        visited = [False] * len(degrees)
        visited[root] = True
        level = [root]
        last_level = level
        height = 0
        while level:
            height += 1
            last_level = level
            next_level = []
            for parent in level:
                for neighbor in mat.outer_view(parent).indices:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        next_level.append(neighbor)
            level = next_level
        contender = min(last_level, key=lambda vertex: degrees[vertex])
        return contender, height

    def find_start_vertex(
        self, visited: Sequence[bool], degrees: Sequence[int], mat: CsMat
    ) -> int:
        current = _first_unvisited(visited)
        if degrees[current] == 0:
            return current
        contender, current_height = self._contender_and_height(current, degrees, mat)
        while True:
            next_contender, contender_height = self._contender_and_height(
                contender, degrees, mat
            )
            if contender_height <= current_height:
                return current
            current, current_height = contender, contender_height
            contender = next_contender


def cuthill_mckee_custom(
    mat: CsMat, starting_strategy: _Strategy, direction: Direction
) -> Ordering:
    """Cuthill-McKee ordering of a symmetric matrix with a chosen start strategy."""
    if mat.rows() != mat.cols():
        raise ValueError("matrix must be square")
    nb_vertices = mat.cols()
    degrees = mat.degrees()
    visited = [False] * nb_vertices
    pending: deque[int] = deque()
    perm: list[int] = []
    parts: list[int] = []

    for perm_index in range(nb_vertices):
        if pending:
            current = pending.popleft()
        else:
            parts.append(perm_index)
            current = starting_strategy.find_start_vertex(visited, degrees, mat)
            if visited[current]:
                raise ValueError(
                    "Vertex returned by starting strategy should always be unvisited"
                )
        perm.append(current)
        visited[current] = True

        neighbors = []
        for neighbor in mat.outer_view(current).indices:
            if not visited[neighbor]:
                visited[neighbor] = True
                neighbors.append(neighbor)
        neighbors.sort(key=lambda vertex: degrees[vertex])
        pending.extend(neighbors)

    parts.append(nb_vertices)

    if direction is Direction.REVERSED:
        perm.reverse()
        parts = [nb_vertices - part for part in reversed(parts)]
    return Ordering(Permutation(perm), parts)


def reverse_cuthill_mckee(mat: CsMat) -> Ordering:
    """Reverse Cuthill-McKee ordering starting from pseudo-peripheral vertices."""
    return cuthill_mckee_custom(mat, PseudoPeripheral(), Direction.REVERSED)