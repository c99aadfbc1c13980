# MIT License (see LICENSE)
"""
Rendering adapters.

    - RendererAdapter: Abstract base class; reads position and radius only.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for benchmarks.
    - BufferedRenderer: Records frames for later use.

Typical usage:
    from sphere_sim.renderer import DebugRenderer

    DebugRenderer().render(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
