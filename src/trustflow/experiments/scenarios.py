"""
Pre-built scenarios: a named graph plus its expert nodes.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from trustflow.core.graph import Graph


@dataclass
class Scenario:
    """A graph to animate and the experts favoured by teleportation."""

    name: str
    graph: Graph
    experts: list[int] = field(default_factory=list)

    @property
    def num_nodes(self) -> int:
        return self.graph.num_nodes


def trust_flow_example() -> Scenario:
    """
    Six nodes, one expert, one new edge per time step.

    Node 0 (the expert) endorses 1, which fans out to 2 and 3; 3 fans out
    to 4 and 5, and 5 closes a cycle back to 1. Nodes 2 and 4 are
    dangling throughout.
    """
    graph = Graph.from_tuples(
        [
            (0, 1, 1),
            (1, 2, 2),
            (1, 3, 3),
            (3, 4, 4),
            (3, 5, 5),
            (5, 1, 6),
        ],
        num_nodes=6,
    )
    return Scenario(name="trust-flow-example", graph=graph, experts=[0])


SCENARIOS = {
    "trust-flow-example": trust_flow_example,
}


def get_scenario(name: str) -> Scenario:
    """Look up a pre-built scenario by name."""
    try:
        factory = SCENARIOS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario: {name!r} (available: {sorted(SCENARIOS)})") from None
    return factory()
