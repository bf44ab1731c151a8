"""
trustflow: time-aware trust flow ranking

A PageRank variant over a directed graph whose edges are timestamped and
lose influence exponentially with age.

Core concepts:
- Edges are created at discrete times and decay afterwards
- Rank behaves like mass: the total is conserved at exactly 1
- Teleportation is biased toward a set of expert nodes
- Capacity lost to decay is recaptured as dangling mass
"""

__version__ = "0.1.0"
