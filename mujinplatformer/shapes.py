"""Geometry helpers for drawing simple outlines."""

from __future__ import annotations

import math

DEFAULT_SEGMENTS = 100


def circle_vertices(
    cx: float, cy: float, radius: float, segments: int = DEFAULT_SEGMENTS
) -> list[tuple[float, float]]:
    """Points of a closed line loop approximating a circle."""
    if segments <= 0:
        raise ValueError("segments must be positive")
    points = []
    for index in range(segments):
        theta = 2.0 * math.pi * index / segments
        points.append((radius * math.cos(theta) + cx, radius * math.sin(theta) + cy))
    return points