"""
Graph: the timestamped directed topology that trust flows over.

Nodes carry no identity beyond a dense index in [0, num_nodes). The graph
stores edges as parallel numpy arrays (sources, targets, creation times) so
the engine only ever does indexed reads.

The graph knows NOTHING about decay or rank. It only knows:
- Which edges exist and when they were created
- How many edges leave each node (static out-degree)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from trustflow.core.errors import InvalidInput


def is_integer(value) -> bool:
    """True for Python and numpy integers, False for bools and everything else."""
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


@dataclass(frozen=True)
class Edge:
    """A directed edge created at a discrete time."""

    source: int
    target: int
    creation_time: int = 0


class Graph:
    """
    Immutable edge list over a fixed number of nodes.

    Parallel edges and self-loops are allowed.
    """

    def __init__(self, edges: Iterable[Edge], num_nodes: int):
        if not is_integer(num_nodes):
            raise InvalidInput("num_nodes", f"expected an integer, got {num_nodes!r}")
        if num_nodes <= 0:
            raise InvalidInput("num_nodes", f"must be positive, got {num_nodes}")

        self.num_nodes = int(num_nodes)
        self.edges: tuple[Edge, ...] = tuple(edges)

        for index, edge in enumerate(self.edges):
            for value in (edge.source, edge.target, edge.creation_time):
                if not is_integer(value):
                    raise InvalidInput(
                        "edges", f"edge {index} has non-integer field {value!r}"
                    )
            for end in (edge.source, edge.target):
                if not 0 <= end < self.num_nodes:
                    raise InvalidInput(
                        "edges",
                        f"edge {index} endpoint {end} outside [0, {self.num_nodes})",
                    )
            if edge.creation_time < 0:
                raise InvalidInput(
                    "edges",
                    f"edge {index} has negative creation time {edge.creation_time}",
                )

        n_edges = len(self.edges)
        self.sources = np.fromiter((e.source for e in self.edges), dtype=np.int64, count=n_edges)
        self.targets = np.fromiter((e.target for e in self.edges), dtype=np.int64, count=n_edges)
        self.creation_times = np.fromiter(
            (e.creation_time for e in self.edges), dtype=np.int64, count=n_edges
        )

        # Structural capacity: counts edges, ignores decay
        self.static_out_degree = np.bincount(self.sources, minlength=self.num_nodes).astype(
            np.float64
        )

        for arr in (self.sources, self.targets, self.creation_times, self.static_out_degree):
            arr.setflags(write=False)

    @classmethod
    def from_tuples(
        cls, triples: Iterable[tuple[int, int, int]], num_nodes: int
    ) -> Graph:
        """Build a graph from (source, target, creation_time) triples."""
        return cls((Edge(s, t, c) for s, t, c in triples), num_nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def dangling_nodes(self) -> np.ndarray:
        """Indices of nodes with no outgoing edges at all."""
        return np.flatnonzero(self.static_out_degree == 0)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"
