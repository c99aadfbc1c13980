# MIT License (see LICENSE)
"""
Per-phase timing for the simulation step.

Simulator.step() records the "forces", "integrate" and "boundary" phases
when a Profiler is attached.

Example:
    profiler = Profiler()
    sim = Simulator(profiler=profiler)
    ...
    for name, row in profiler.stats.summary().items():
        print(name, row["mean_ms"])
"""
from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) keyed by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'total_ms', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str):
        """Time the enclosed block under the given section name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def report(self, level: int = logging.INFO) -> None:
        """Log one line per section with its mean and max time."""
        for name, row in self.stats.summary().items():
            logger.log(
                level,
                "%s: n=%d mean=%.3fms max=%.3fms",
                name, row["n"], row["mean_ms"], row["max_ms"],
            )
