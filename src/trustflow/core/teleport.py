"""
Teleportation (restart) distribution biased toward expert nodes.

Every node gets a uniform floor of (1 - f) / n. The expert fraction f is
split equally among the distinct experts on top of that floor. The result
is a probability vector independent of time and topology.
"""

from __future__ import annotations
from typing import Iterable

import numpy as np

from trustflow.core.errors import InvalidInput
from trustflow.core.graph import is_integer


DEFAULT_EXPERT_FRACTION = 0.8


def build_teleport_vector(
    num_nodes: int,
    expert_nodes: Iterable[int],
    expert_fraction: float = DEFAULT_EXPERT_FRACTION,
) -> np.ndarray:
    """
    Build the restart distribution.

    Args:
        num_nodes: Number of nodes in the graph
        expert_nodes: Expert node ids (duplicates are ignored)
        expert_fraction: Share of teleported mass reserved for experts, in [0, 1]

    Returns:
        Vector of length num_nodes summing to 1.0

    Raises:
        InvalidInput: bad node count, fraction, expert id, or a positive
            fraction with no experts to receive it
    """
    if not is_integer(num_nodes):
        raise InvalidInput("num_nodes", f"expected an integer, got {num_nodes!r}")
    if num_nodes <= 0:
        raise InvalidInput("num_nodes", f"must be positive, got {num_nodes}")
    if not 0.0 <= expert_fraction <= 1.0:
        raise InvalidInput("expert_fraction", f"must lie in [0, 1], got {expert_fraction}")

    expert_nodes = list(expert_nodes)
    for e in expert_nodes:
        if not is_integer(e):
            raise InvalidInput("expert_nodes", f"expected integer node ids, got {e!r}")
    experts = sorted(set(int(e) for e in expert_nodes))
    for e in experts:
        if not 0 <= e < num_nodes:
            raise InvalidInput("expert_nodes", f"node {e} outside [0, {num_nodes})")
    if expert_fraction > 0 and not experts:
        raise InvalidInput("expert_nodes", "empty while expert_fraction > 0")

    teleport = np.full(num_nodes, (1.0 - expert_fraction) / num_nodes, dtype=np.float64)
    if experts:
        teleport[experts] += expert_fraction / len(experts)
    return teleport
