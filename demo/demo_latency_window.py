#!/usr/bin/env python3
"""
Demo: True Transaction Order Is Unknowable Within the Latency Width

This demonstration walks through the idealized network:

1. Nodes on a 100x100 grid, latency linear in distance (1000 ms across)
2. Every node sends one transaction, evenly spaced over 10 seconds
3. Every other node observes each transaction after its latency
4. The error (observed - true send time) is exactly the latency
5. Mean + stdev of that error is of the order of the latency width

It also cross-checks the all-pairs simulation against the displacement
theory and shows that the error term scales with the latency width.

Output: console only
"""

import time

import numpy as np

from lwsim.core import SimulationConfig, DEFAULT_CONFIG, LatencySimulator
from lwsim.analysis import (
    UNIT_SQUARE_MEAN_DISTANCE,
    expected_moments,
    closed_form_variance,
    continuum_mean_error,
)


def main():
    print("=" * 60)
    print("  LATENCY WINDOW DEMONSTRATION")
    print("=" * 60)

    cfg = DEFAULT_CONFIG
    print("\n1. Configuration...")
    print(f"   Grid: {cfg.grid_size}x{cfg.grid_size} = {cfg.total_nodes} nodes")
    print(f"   Latency width: {cfg.max_latency_ms} ms ({cfg.latency_step_ms} ms per grid step)")
    print(f"   Send window: {cfg.send_window_ms} ms ({cfg.send_step_ms} ms between sends)")
    print(f"   Observations: {cfg.expected_sample_count:,}")

    print("\n2. Running all-pairs simulation...")
    t0 = time.perf_counter()
    result = LatencySimulator(cfg).run()
    elapsed = time.perf_counter() - t0
    print(f"   Done in {elapsed:.1f} s")
    print(f"   avg error   = {result.mean_error_ms:.3f} ms")
    print(f"   stdev error = {result.stdev_error_ms:.3f} ms")
    print(f"   avg + stdev = {result.mean_plus_stdev_ms:.3f} ms")
    print(f"   latency width = {result.max_latency_ms} ms (gap {result.relative_gap:.1%})")

    print("\n3. Cross-checking against theory...")
    theory = expected_moments(cfg)
    print(f"   Displacement-weighted mean:    {theory.mean_error_ms:.3f} ms")
    print(f"   Continuum-limit mean:          {continuum_mean_error(cfg):.3f} ms")
    print(f"   Closed-form mean square:       {closed_form_variance(cfg):.3f} ms²")
    print(f"   Simulated mean square:         {result.variance_ms2:.3f} ms²")

    print("\n4. Scaling with grid size and latency width...")
    print(f"   {'N':>5} {'width':>8} {'avg':>10} {'stdev':>10} {'avg+stdev':>10}")
    for n in (4, 16, 64, 256):
        for width in (500.0, 1000.0):
            r = expected_moments(SimulationConfig(n, width, cfg.send_window_ms))
            print(
                f"   {n:>5} {width:>8.0f} {r.mean_error_ms:>10.2f} "
                f"{r.stdev_error_ms:>10.2f} {r.mean_plus_stdev_ms:>10.2f}"
            )

    ratio = result.mean_plus_stdev_ms / result.max_latency_ms
    print("\n" + "=" * 60)
    print("  Latency window demonstration complete!")
    print("=" * 60)
    print("\nInterpretation:")
    print("  • Every node's view of a send time is off by exactly the latency")
    print(f"  • avg + stdev ≈ {ratio:.2f} × latency width, independent of grid size")
    print("  • True timestamps are unknowable within the latency width")
    print("  • Randomizing order within that width loses no information")
    print(f"\n  (ratio stays ≈ {np.sqrt(1 / 3) + UNIT_SQUARE_MEAN_DISTANCE:.2f} in the continuum limit)")


if __name__ == "__main__":
    main()
