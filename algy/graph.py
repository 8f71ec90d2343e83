from __future__ import annotations

import numpy as np
import pandas as pd
from collections import deque
from .types import *
from .base import _BaseContainer

Vertex = Hashable


class Graph(_BaseContainer[Vertex]):
    """
    adjacency-list graph over hashable vertices.
    each adjacency set is an insertion-ordered dict, so traversals visit same-depth
    neighbours in the order their edges were added. undirected graphs record both
    directions when the edge is added.
    iterating a graph yields its vertices in insertion order.
    """

    def __init__(self, directed: bool = False):
        super().__init__()
        self._adjacency: Dict[Vertex, Dict[Vertex, None]] = {}
        self._directed = directed

    @property
    def directed(self) -> bool: return self._directed

    # --- mutation ---

    def add_vertex(self, vertex: Vertex) -> bool:
        """returns False when the vertex already exists"""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = {}
        return True

    def add_edge(self, u: Vertex, v: Vertex) -> None:
        """connect u to v, creating either endpoint if unseen"""
        self._adjacency.setdefault(u, {})[v] = None
        if self._directed:
            self._adjacency.setdefault(v, {})
        else:
            self._adjacency.setdefault(v, {})[u] = None

    def remove_edge(self, u: Vertex, v: Vertex) -> bool:
        """returns False when there is no such edge. vertices are kept."""
        if not self.has_edge(u, v):
            return False
        del self._adjacency[u][v]
        if not self._directed:
            self._adjacency[v].pop(u, None)
        return True

    # --- queries ---

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adjacency

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return v in self._adjacency.get(u, {})

    def neighbors(self, vertex: Vertex) -> Tuple[Vertex, ...]:
        """adjacent vertices in insertion order; empty for an unknown vertex"""
        return tuple(self._adjacency.get(vertex, ()))

    def degree(self, vertex: Vertex) -> int:
        return len(self._adjacency.get(vertex, ()))

    def vertices(self) -> List[Vertex]:
        return list(self._adjacency)

    def edges(self) -> List[Tuple[Vertex, Vertex]]:
        """every edge once; an undirected edge is reported from the endpoint seen first"""
        result = []
        seen = set()
        for u, adjacent in self._adjacency.items():
            for v in adjacent:
                if not self._directed and (v, u) in seen:
                    continue
                seen.add((u, v))
                result.append((u, v))
        return result

    # --- traversals ---

    def bfs(self, start: Vertex) -> Traversal[Vertex]:
        """
        breadth-first order from start. vertices are marked visited when enqueued,
        so none is ever queued twice.
        """
        def walk():
            if start not in self._adjacency:
                return
            visited = {start}
            frontier = deque([start])
            while frontier:
                vertex = frontier.popleft()
                yield vertex
                for neighbor in self._adjacency[vertex]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        frontier.append(neighbor)

        return Traversal(walk())

    def dfs(self, start: Vertex) -> Traversal[Vertex]:
        """
        depth-first order from start. vertices are marked visited when popped, so a
        vertex may sit on the stack more than once but is yielded exactly once.
        neighbours are pushed in reverse so the first-added one is explored first.
        """
        def walk():
            if start not in self._adjacency:
                return
            visited = set()
            pending = [start]
            while pending:
                vertex = pending.pop()
                if vertex in visited:
                    continue
                visited.add(vertex)
                yield vertex
                for neighbor in reversed(list(self._adjacency[vertex])):
                    if neighbor not in visited:
                        pending.append(neighbor)

        return Traversal(walk())

    def shortest_path(self, source: Vertex, target: Vertex) -> Optional[List[Vertex]]:
        """fewest-edges path from source to target, or None when unreachable"""
        if source not in self._adjacency or target not in self._adjacency:
            return None
        # the source is its own parent, which ends the walk back
        parents: Dict[Vertex, Vertex] = {source: source}
        frontier = deque([source])
        while frontier:
            vertex = frontier.popleft()
            if vertex == target:
                path = [vertex]
                while vertex != source:
                    vertex = parents[vertex]
                    path.append(vertex)
                return path[::-1]
            for neighbor in self._adjacency[vertex]:
                if neighbor not in parents:
                    parents[neighbor] = vertex
                    frontier.append(neighbor)
        return None

    def has_path(self, source: Vertex, target: Vertex) -> bool:
        return self.shortest_path(source, target) is not None

    def connected_components(self) -> List[List[Vertex]]:
        """vertex groups of an undirected graph, each in bfs order"""
        if self._directed:
            raise InvalidOperationError("connected components are defined for undirected graphs only")
        seen = set()
        components = []
        for vertex in self._adjacency:
            if vertex in seen:
                continue
            component = self.bfs(vertex).to.list()
            seen.update(component)
            components.append(component)
        return components

    # --- exports ---

    def adjacency_matrix(self) -> Tuple[np.ndarray, List[Vertex]]:
        """0/1 matrix indexed by the returned vertex order"""
        order = self.vertices()
        position = {vertex: i for i, vertex in enumerate(order)}
        matrix = np.zeros((len(order), len(order)), dtype=np.int8)
        for u, adjacent in self._adjacency.items():
            for v in adjacent:
                matrix[position[u], position[v]] = 1
        return matrix, order

    def edge_frame(self) -> pd.DataFrame:
        """edges as a two-column dataframe"""
        return pd.DataFrame(self.edges(), columns=['source', 'target'])

    # --- python protocol ---

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._adjacency))

    def __len__(self) -> int:
        return len(self._adjacency)
