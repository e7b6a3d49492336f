"""
lwsim: Latency-Window Simulator

A deterministic simulation showing that true transaction order is
unknowable within the latency width of a trustless network.

Idealized network:
- Nodes sit on a square grid; latency is linear in Euclidean distance
- Every node sends exactly one transaction, evenly spaced over a send window
- We know each true send time (impossible in a real zero-trust network)
- Every other node observes the transaction at send time + latency
- The error term (observed - true) is aggregated over all ordered pairs

The mean and spread of that error are of the order of the latency width,
so randomizing transaction order within that width loses no information.
"""

__version__ = "0.1.0"
