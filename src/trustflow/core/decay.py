"""
Edge decay: how strongly an edge carries trust at a given query time.

An edge does not exist before its creation time (weight 0). From then on
its weight starts at base_weight and decays exponentially:

    w(t) = base_weight * exp(-(t - t_created) * k)

k < 0 is accepted and makes edges grow stronger over time; choosing a
sensible constant is the caller's job.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from trustflow.core.graph import Edge, Graph


DEFAULT_DECAY_CONSTANT = 0.1
BASE_WEIGHT = 1.0


def current_weight(
    edge: "Edge",
    query_time: float,
    decay_constant: float,
    base_weight: float = BASE_WEIGHT,
) -> float:
    """
    Weight of a single edge at query_time.

    Args:
        edge: Edge with a creation time
        query_time: Time at which to evaluate
        decay_constant: Exponential rate k
        base_weight: Weight at the moment of creation

    Returns:
        0.0 before creation, otherwise the decayed weight
    """
    if query_time < edge.creation_time:
        return 0.0
    return base_weight * math.exp(-(query_time - edge.creation_time) * decay_constant)


def decayed_weights(
    graph: "Graph",
    query_time: float,
    decay_constant: float,
    base_weight: float = BASE_WEIGHT,
) -> np.ndarray:
    """
    Weight vector for every edge of graph, aligned with graph.edges.

    Returns a fresh array on each call.
    """
    age = query_time - graph.creation_times
    exists = age >= 0
    # Clamp the age of future edges so exp() never overflows for k < 0
    safe_age = np.where(exists, age, 0)
    weights = base_weight * np.exp(-safe_age * decay_constant)
    return np.where(exists, weights, 0.0).astype(np.float64)


@dataclass
class ExponentialDecay:
    """Exponential decay model with a fixed rate."""

    decay_constant: float = DEFAULT_DECAY_CONSTANT
    base_weight: float = BASE_WEIGHT

    def weight(self, edge: "Edge", query_time: float) -> float:
        return current_weight(edge, query_time, self.decay_constant, self.base_weight)

    def weights(self, graph: "Graph", query_time: float) -> np.ndarray:
        return decayed_weights(graph, query_time, self.decay_constant, self.base_weight)

    def describe(self) -> str:
        """Short label for plot and diagram titles."""
        return "Exponential"
