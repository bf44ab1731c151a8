"""
Experiment harness: setup and run standard experiments.

Pre-built scenarios and a timeline runner that evaluates a scenario at
every query time, producing one rank snapshot per frame.
"""

from trustflow.experiments.scenarios import Scenario, trust_flow_example, get_scenario
from trustflow.experiments.timeline import (
    TimelineConfig,
    Snapshot,
    TrustFlowTimeline,
    rank_history,
)

__all__ = [
    "Scenario",
    "trust_flow_example",
    "get_scenario",
    "TimelineConfig",
    "Snapshot",
    "TrustFlowTimeline",
    "rank_history",
]
