"""
Core ranking primitives.

This layer knows NOTHING about layouts, colours, or files.
It only knows:
- Graphs of timestamped edges over dense integer node ids
- How an edge's weight decays with age
- How the restart distribution favours experts
- How rank mass flows along weighted edges

Every function here is pure: same inputs, same outputs, no I/O.
"""

from trustflow.core.errors import TrustFlowError, InvalidInput
from trustflow.core.graph import Edge, Graph
from trustflow.core.decay import ExponentialDecay, current_weight, decayed_weights
from trustflow.core.teleport import build_teleport_vector
from trustflow.core.engine import RankFlowConfig, RankFlowEngine, run_rank_flow

__all__ = [
    "TrustFlowError",
    "InvalidInput",
    "Edge",
    "Graph",
    "ExponentialDecay",
    "current_weight",
    "decayed_weights",
    "build_teleport_vector",
    "RankFlowConfig",
    "RankFlowEngine",
    "run_rank_flow",
]
