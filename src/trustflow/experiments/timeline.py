"""
Timeline: evaluate a scenario at every query time in 0..max_time.

Each frame is independent: weights are recomputed for that time and the
engine restarts from uniform rank. The teleport vector is built once,
since it does not depend on time.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np

from trustflow.core.decay import ExponentialDecay, DEFAULT_DECAY_CONSTANT
from trustflow.core.engine import (
    RankFlowConfig,
    RankFlowEngine,
    DEFAULT_DAMPING_FACTOR,
    DEFAULT_N_ITERATIONS,
)
from trustflow.core.teleport import build_teleport_vector, DEFAULT_EXPERT_FRACTION

if TYPE_CHECKING:
    from trustflow.experiments.scenarios import Scenario

logger = logging.getLogger(__name__)


@dataclass
class TimelineConfig:
    """Configuration for a frame sequence."""

    decay_constant: float = DEFAULT_DECAY_CONSTANT
    expert_fraction: float = DEFAULT_EXPERT_FRACTION  # Teleported mass reserved for experts
    damping_factor: float = DEFAULT_DAMPING_FACTOR
    n_iterations: int = DEFAULT_N_ITERATIONS  # Engine iterations per frame
    max_time: int = 20  # Last query time (inclusive)


@dataclass
class Snapshot:
    """Weights and ranks at one query time."""

    time: int
    weights: np.ndarray
    ranks: np.ndarray


@dataclass
class TrustFlowTimeline:
    """Runs the rank flow engine once per query time."""

    scenario: "Scenario"
    config: TimelineConfig = field(default_factory=TimelineConfig)

    def __post_init__(self):
        self.decay = ExponentialDecay(decay_constant=self.config.decay_constant)
        self.teleport = build_teleport_vector(
            self.scenario.num_nodes,
            self.scenario.experts,
            self.config.expert_fraction,
        )
        self.engine = RankFlowEngine(
            self.scenario.graph,
            RankFlowConfig(
                damping_factor=self.config.damping_factor,
                n_iterations=self.config.n_iterations,
            ),
        )

    @property
    def times(self) -> range:
        return range(self.config.max_time + 1)

    @property
    def n_frames(self) -> int:
        return len(self.times)

    def snapshot(self, time: int) -> Snapshot:
        """Evaluate a single query time."""
        weights = self.decay.weights(self.scenario.graph, time)
        ranks = self.engine.run(weights, self.teleport)
        logger.debug("frame t=%d: max rank %.4f at node %d", time, ranks.max(), ranks.argmax())
        return Snapshot(time=time, weights=weights, ranks=ranks)

    def snapshots(self) -> Iterator[Snapshot]:
        """Yield one snapshot per query time, in order."""
        for time in self.times:
            yield self.snapshot(time)

    def run(self) -> list[Snapshot]:
        return list(self.snapshots())


def rank_history(snapshots: Sequence[Snapshot]) -> np.ndarray:
    """Stack snapshot ranks into an array of shape [n_frames, num_nodes]."""
    return np.vstack([s.ranks for s in snapshots])
