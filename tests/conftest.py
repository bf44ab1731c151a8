"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def two_node_graph():
    """Single edge 0→1 created at time 0."""
    from trustflow.core import Graph
    return Graph.from_tuples([(0, 1, 0)], num_nodes=2)


@pytest.fixture
def example_scenario():
    """The six-node example with node 0 as expert."""
    from trustflow.experiments import trust_flow_example
    return trust_flow_example()


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
