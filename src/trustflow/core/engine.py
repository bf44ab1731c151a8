"""
RankFlowEngine: mass-conserving PageRank variant over decayed edges.

Rank flow is analogous to mass flow. Each iteration:
    new(x) = (1-d)·T(x)                                teleport inflow
           + d · Σ_{s→x} rank(s) · w / deg(s)          edge inflow
           + D / n                                     dangling share

where deg(s) is the STATIC out-degree (edge count, ignoring decay) and D
collects everything a node could not push along its edges:
    D = d · Σ_s rank(s) · (1 - outflow(s)/deg(s))      deg(s) > 0
      + d · Σ_s rank(s)                                deg(s) = 0

Normalising by the static degree rather than the decayed outflow means
decayed capacity is recaptured as dangling mass instead of vanishing, so
Σ rank = (1-d) + d = 1 after every iteration.

The update is synchronous: iteration k+1 reads only iteration k. Rank is
re-seeded to uniform on every call; no state is carried between calls.
There is no convergence test, the engine runs exactly n_iterations.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse

from trustflow.core.errors import InvalidInput
from trustflow.core.graph import is_integer

if TYPE_CHECKING:
    from trustflow.core.graph import Graph

logger = logging.getLogger(__name__)


DEFAULT_DAMPING_FACTOR = 0.5
DEFAULT_N_ITERATIONS = 10
TELEPORT_TOLERANCE = 1e-9


@dataclass
class RankFlowConfig:
    """Configuration for the rank flow engine."""

    damping_factor: float = DEFAULT_DAMPING_FACTOR  # Share of mass routed along edges
    n_iterations: int = DEFAULT_N_ITERATIONS  # Fixed number of update rounds


@dataclass
class RankFlowEngine:
    """
    Runs the rank flow update on one graph.

    The graph's static out-degree is fixed for the lifetime of the engine;
    weights and teleport vector are supplied per call.
    """

    graph: "Graph"
    config: RankFlowConfig = field(default_factory=RankFlowConfig)

    def run(self, weights, teleport) -> np.ndarray:
        """
        Compute the rank vector for one weight snapshot.

        Args:
            weights: One non-negative weight per edge, aligned with graph.edges
            teleport: Restart distribution, one entry per node, summing to 1

        Returns:
            Rank vector after config.n_iterations updates

        Raises:
            InvalidInput: on any precondition violation, before iterating
        """
        return self._iterate(*self._prepare(weights, teleport))

    def trace(self, weights, teleport) -> np.ndarray:
        """
        Rank after every iteration, including the uniform start.

        Returns:
            Array of shape [n_iterations + 1, num_nodes]
        """
        history: list[np.ndarray] = []
        self._iterate(*self._prepare(weights, teleport), history=history)
        return np.vstack(history)

    def _prepare(self, weights, teleport) -> tuple[np.ndarray, sparse.csr_matrix, np.ndarray]:
        """Validate inputs and build the per-run flow operator and leak factors."""
        graph = self.graph
        damping = self.config.damping_factor
        n_iterations = self.config.n_iterations
        n = graph.num_nodes

        if not 0.0 <= damping <= 1.0:
            raise InvalidInput("damping_factor", f"must lie in [0, 1], got {damping}")
        if not is_integer(n_iterations):
            raise InvalidInput("iteration_count", f"expected an integer, got {n_iterations!r}")
        if n_iterations < 0:
            raise InvalidInput("iteration_count", f"must be non-negative, got {n_iterations}")

        weights = np.asarray(weights, dtype=np.float64)
        if weights.shape != (graph.num_edges,):
            raise InvalidInput(
                "weights", f"expected {graph.num_edges} entries, got shape {weights.shape}"
            )
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise InvalidInput("weights", "entries must be finite and non-negative")

        teleport = np.asarray(teleport, dtype=np.float64)
        if teleport.shape != (n,):
            raise InvalidInput("teleport", f"expected {n} entries, got shape {teleport.shape}")
        if not np.all(np.isfinite(teleport)) or np.any(teleport < 0):
            raise InvalidInput("teleport", "entries must be finite and non-negative")
        total = float(teleport.sum())
        if abs(total - 1.0) > TELEPORT_TOLERANCE:
            raise InvalidInput("teleport", f"must sum to 1.0, got {total!r}")

        degree = graph.static_out_degree
        sources, targets = graph.sources, graph.targets

        # Every edge source has degree >= 1, so the division is safe.
        # Duplicate (target, source) entries are summed by the CSR conversion.
        share = damping * weights / degree[sources]
        flow = sparse.coo_matrix((share, (targets, sources)), shape=(n, n)).tocsr()

        outflow = np.bincount(sources, weights=weights, minlength=n)
        leak = np.ones(n, dtype=np.float64)
        has_out = degree > 0
        leak[has_out] = 1.0 - outflow[has_out] / degree[has_out]

        return teleport, flow, leak

    def _iterate(
        self,
        teleport: np.ndarray,
        flow: sparse.csr_matrix,
        leak: np.ndarray,
        history: list[np.ndarray] | None = None,
    ) -> np.ndarray:
        """Run the update loop; append every rank vector to history if given."""
        damping = self.config.damping_factor
        n_iterations = self.config.n_iterations
        n = self.graph.num_nodes

        logger.debug(
            "rank flow: %d nodes, %d edges, %d iterations, damping=%.3f",
            n, self.graph.num_edges, n_iterations, damping,
        )

        # Uniform initial rank (mass) distribution
        rank = np.full(n, 1.0 / n, dtype=np.float64)
        if history is not None:
            history.append(rank)

        inflow_base = (1.0 - damping) * teleport
        for _ in range(n_iterations):
            dangling = damping * float(rank @ leak)
            rank = inflow_base + flow @ rank + dangling / n
            if history is not None:
                history.append(rank)

        logger.debug("rank flow done: total mass %.12f", float(rank.sum()))
        return rank


def run_rank_flow(
    graph: "Graph",
    weights,
    teleport,
    damping_factor: float = DEFAULT_DAMPING_FACTOR,
    iteration_count: int = DEFAULT_N_ITERATIONS,
) -> np.ndarray:
    """Functional form of RankFlowEngine(graph, config).run(weights, teleport)."""
    config = RankFlowConfig(damping_factor=damping_factor, n_iterations=iteration_count)
    return RankFlowEngine(graph, config).run(weights, teleport)
