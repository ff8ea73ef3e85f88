"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, Path


def sample_path(path: Path, samples_per_segment: int = 12) -> NDArray[np.float64]:
    """Sample a path into an Nx2 array of (x, y). Straight lines contribute endpoints only."""
    points: list[complex] = []
    for seg in path:
        if isinstance(seg, Line):
            ts = np.array([0.0])
        else:
            ts = np.linspace(0.0, 1.0, samples_per_segment, endpoint=False)
        points.extend(seg.point(t) for t in ts)
    if len(path) and not path.isclosed():
        points.append(path.end)
    arr = np.array(points, dtype=complex)
    return np.column_stack([arr.real, arr.imag]) if len(arr) else np.empty((0, 2))


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed ring (first point not repeated)."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))
