"""
LatencySimulator: every node observes every other node's transaction.

For each origin node (row-major), its one transaction is sent at
index * send_step. Every other node sees it arrive after a latency
proportional to their distance. The error term of that observation is

    error = t_receive - t_send = (t_send + latency) - t_send = latency

We keep the long form on purpose: the send time cancels, and spelling it
out is the whole argument.

Two methods produce the same sums:
- "reference": the literal four-level loop in pure Python. O(N⁴) and slow,
  but accumulates in exactly the reference order.
- "vectorized": origins in chunks; distances for a chunk against every
  node come from scipy's cdist, and each chunk's partial sums are merged
  into the total. Equal to "reference" within floating-point tolerance.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np
from scipy.spatial.distance import cdist

from lwsim.core.accumulator import ErrorAccumulator
from lwsim.core.config import DEFAULT_CONFIG, SimulationConfig
from lwsim.core.grid import NodeGrid, Transaction
from lwsim.analysis.statistics import SimulationResult, summarize

logger = logging.getLogger(__name__)

METHODS = ("reference", "vectorized")


@dataclass
class LatencySimulator:
    """
    Runs the all-pairs latency-window simulation for one configuration.

    The simulator is pure: run() has no side effects besides logging and
    always returns the same result for the same config.
    """

    config: SimulationConfig = DEFAULT_CONFIG
    method: str = "vectorized"
    chunk_size: int = 200  # Origin nodes per vectorized chunk

    grid: NodeGrid = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unknown method: {self.method}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        self.grid = NodeGrid(self.config)

    def run(self) -> SimulationResult:
        """Run the full simulation and summarize the error term."""
        cfg = self.config
        logger.info(
            "Simulating %dx%d grid (%d nodes), max latency %s ms, send window %s ms, method=%s",
            cfg.grid_size, cfg.grid_size, cfg.total_nodes,
            cfg.max_latency_ms, cfg.send_window_ms, self.method,
        )

        if self.method == "reference":
            accumulator = self.accumulate_reference()
        else:
            accumulator = self.accumulate_vectorized()

        if accumulator.count != cfg.expected_sample_count:
            raise RuntimeError(
                f"Sample count {accumulator.count} != expected {cfg.expected_sample_count}"
            )

        return summarize(accumulator, cfg)

    def pair_error(
        self,
        origin: tuple[int, int],
        observer: tuple[int, int],
        index: int = 0,
    ) -> float:
        """
        Error term of one observation.

        Args:
            origin: Node that sends the transaction
            observer: Node that sees it arrive
            index: Transaction index (only sets the send time, which cancels)

        Returns:
            Observed arrival time minus true send time, in ms
        """
        txn = Transaction(index, origin, self.grid.send_timestamp_ms(index))
        latency_ms = self.grid.latency_ms(origin, observer)
        return txn.receive_timestamp_ms(latency_ms) - txn.send_timestamp_ms

    def accumulate_reference(self) -> ErrorAccumulator:
        """The literal nested loop: origins outer, observers inner, both row-major."""
        accumulator = ErrorAccumulator()
        step = self.config.latency_step_ms

        # send a transaction for each node
        for txn in self.grid.iter_transactions():
            # and see when it arrives at each other node
            for observer in self.grid.iter_nodes():
                if observer == txn.origin:
                    continue

                latency_ms = NodeGrid.distance(txn.origin, observer) * step
                receive_ms = txn.receive_timestamp_ms(latency_ms)
                accumulator.add(receive_ms - txn.send_timestamp_ms)

        return accumulator

    def accumulate_vectorized(self) -> ErrorAccumulator:
        """Chunked all-pairs pass with an order-independent reduction."""
        accumulator = ErrorAccumulator()
        step = self.config.latency_step_ms
        total = self.grid.total_nodes

        coords = self.grid.coordinates()
        send_ms = self.grid.send_timestamps()

        for start in range(0, total, self.chunk_size):
            stop = min(start + self.chunk_size, total)
            rows = np.arange(stop - start)

            latency_ms = cdist(coords[start:stop], coords) * step
            t_send = send_ms[start:stop, np.newaxis]
            t_receive = t_send + latency_ms
            error = t_receive - t_send

            # ignore yourself
            observed = np.ones(error.shape, dtype=bool)
            observed[rows, rows + start] = False

            partial = ErrorAccumulator()
            partial.add_many(error[observed])
            accumulator.merge(partial)

            logger.debug("Origins %d-%d done (%d samples)", start, stop - 1, partial.count)

        return accumulator


def run_simulation(
    config: SimulationConfig = DEFAULT_CONFIG,
    method: str = "vectorized",
    chunk_size: int = 200,
) -> SimulationResult:
    """Convenience wrapper: build a LatencySimulator and run it once."""
    return LatencySimulator(config=config, method=method, chunk_size=chunk_size).run()
