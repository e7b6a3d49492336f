"""
NodeGrid: the implicit square grid of network nodes.

Nodes carry no state beyond their (x, y) position, so the grid never
allocates a node object. It only knows:
- How to enumerate node coordinates (row-major: outer x, inner y)
- Which transaction each node sends and when
- The Euclidean distance between two nodes

Row-major order matters only for floating-point rounding: the simulation
sums over all pairs, so any order gives the same answer up to the last bits.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import math

import numpy as np

from lwsim.core.config import SimulationConfig


@dataclass(frozen=True)
class Transaction:
    """One transaction, sent by its origin node at an objective time."""

    index: int  # Order in which origin nodes are visited
    origin: tuple[int, int]
    send_timestamp_ms: float  # Send time (objective)

    def receive_timestamp_ms(self, latency_ms: float) -> float:
        """Arrival time seen by an observer (subjective)."""
        return self.send_timestamp_ms + latency_ms


class NodeGrid:
    """The N x N world of nodes for one simulation config."""

    def __init__(self, config: SimulationConfig):
        self.config = config

    @property
    def size(self) -> int:
        """Nodes per row/column."""
        return self.config.grid_size

    @property
    def total_nodes(self) -> int:
        return self.config.total_nodes

    def iter_nodes(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (x, y) node coordinates, outer x then inner y."""
        n = self.size
        for x in range(n):
            for y in range(n):
                yield x, y

    def node_index(self, x: int, y: int) -> int:
        """Flat index of a node in traversal order."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Node ({x}, {y}) is outside a {self.size}x{self.size} grid")
        return x * self.size + y

    def node_coords(self, index: int) -> tuple[int, int]:
        """Inverse of node_index: x = i // N, y = i % N."""
        if not 0 <= index < self.total_nodes:
            raise IndexError(f"Node index {index} out of range [0, {self.total_nodes})")
        return divmod(index, self.size)

    def send_timestamp_ms(self, index: int) -> float:
        """Send time of the transaction with the given index."""
        return index * self.config.send_step_ms

    def transaction(self, index: int) -> Transaction:
        """The transaction sent by the index-th origin node."""
        return Transaction(
            index=index,
            origin=self.node_coords(index),
            send_timestamp_ms=self.send_timestamp_ms(index),
        )

    def iter_transactions(self) -> Iterator[Transaction]:
        """One transaction per node, in traversal order."""
        for index, origin in enumerate(self.iter_nodes()):
            yield Transaction(index, origin, self.send_timestamp_ms(index))

    @staticmethod
    def distance(a: tuple[int, int], b: tuple[int, int]) -> float:
        """Euclidean grid distance (Pythagoras)."""
        dx = abs(b[0] - a[0])
        dy = abs(b[1] - a[1])
        return math.sqrt(dx * dx + dy * dy)

    def latency_ms(self, a: tuple[int, int], b: tuple[int, int]) -> float:
        """Convert distance between two nodes into latency."""
        return self.distance(a, b) * self.config.latency_step_ms

    def coordinates(self) -> np.ndarray:
        """All node coordinates as a float array [total_nodes, 2], traversal order."""
        n = self.size
        xx, yy = np.meshgrid(np.arange(n), np.arange(n), indexing="ij")
        return np.column_stack([xx.ravel(), yy.ravel()]).astype(np.float64)

    def send_timestamps(self) -> np.ndarray:
        """Send time of every transaction, indexed by node index."""
        return np.arange(self.total_nodes, dtype=np.float64) * self.config.send_step_ms
