# MIT License (see LICENSE)
"""
Renderer adapters: the consumer side of the simulator.

A renderer sees exactly what Simulator.render_state() hands out, the
position and radius of each sphere, once per frame. Nothing flows back into
the simulation. Graphics backends (OpenGL, matplotlib, ...) subclass
RendererAdapter; the simulator itself has no rendering dependency.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..simulator import Simulator


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        while running:
            sim.step(dt)
            renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_sphere(self, index: int, position: np.ndarray, radius: float) -> None:
        """
        Draw one sphere.

        Args:
            index: Position of the sphere in the simulator's body list.
            position: Center (model translation).
            radius: Visual scale.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, sim: "Simulator") -> None:
        """Draw every sphere of the simulator as one frame."""
        self.begin_frame(sim.time)
        for index, (position, radius) in enumerate(sim.render_state()):
            self.draw_sphere(index, position, radius)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development without a graphics stack.

    Output:
        === Frame t=0.0167 ===
        [0] r=0.30 @ (0.00, 0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_sphere(self, index: int, position: np.ndarray, radius: float) -> None:
        x, y, z = position
        self.output.write(f"[{index}] r={radius:.2f} @ ({x:.2f}, {y:.2f}, {z:.2f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer for benchmarking the physics alone."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_sphere(self, index: int, position: np.ndarray, radius: float) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames for playback, plotting or export.

    Each frame is {"time": float, "spheres": [{"position": [x, y, z], "radius": r}, ...]}.
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "spheres": []}

    def draw_sphere(self, index: int, position: np.ndarray, radius: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["spheres"].append({
            "position": position.tolist(),
            "radius": radius,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def trajectory(self, index: int) -> np.ndarray:
        """Positions of one sphere over all recorded frames, shape (n_frames, 3)."""
        return np.array([f["spheres"][index]["position"] for f in self.frames], dtype=np.float64)

    def clear(self) -> None:
        self.frames.clear()
