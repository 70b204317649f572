"""
Vertex transforms.

Positions are gathered into an (N, 3) float64 array, updated column-wise and
written back into the same Vertex objects, so callers holding a Vertex see
the new position.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .geometry import Vec3, Vertex


def positions(vertices: Sequence[Vertex]) -> np.ndarray:
    pts = np.array([(v.x, v.y, v.z) for v in vertices], dtype=np.float64)
    return pts.reshape(-1, 3)


def _store(vertices: Sequence[Vertex], pts: np.ndarray) -> None:
    for v, (x, y, z) in zip(vertices, pts.tolist()):
        v.x, v.y, v.z = x, y, z


def scale(vertices: Sequence[Vertex], factors: Vec3) -> None:
    pts = positions(vertices)
    pts *= np.asarray(factors, dtype=np.float64)
    _store(vertices, pts)


def translate(vertices: Sequence[Vertex], offset: Vec3) -> None:
    pts = positions(vertices)
    pts += np.asarray(offset, dtype=np.float64)
    _store(vertices, pts)


def _rotate_pair(pts: np.ndarray, i: int, j: int, angle: float) -> None:
    # (a, b) -> (a*c - b*s, a*s + b*c) on columns i and j
    c, s = math.cos(angle), math.sin(angle)
    a = pts[:, i].copy()
    b = pts[:, j].copy()
    pts[:, i] = a * c - b * s
    pts[:, j] = a * s + b * c


def rotate(vertices: Sequence[Vertex], angles: Vec3) -> None:
    """Rotate about X, then Y, then Z; each step sees the previous result."""
    rx, ry, rz = angles
    pts = positions(vertices)
    # A zero angle is skipped so the identity rotation leaves values untouched.
    if rx:
        _rotate_pair(pts, 1, 2, rx)  # y, z
    if ry:
        _rotate_pair(pts, 2, 0, ry)  # z, x: x' = x*c + z*s, z' = -x*s + z*c
    if rz:
        _rotate_pair(pts, 0, 1, rz)  # x, y
    _store(vertices, pts)


def apply_deferred(vertices: Sequence[Vertex], scale_acc: Vec3, translation: Vec3) -> np.ndarray:
    """``vertex * scale + translation`` without touching the vertices."""
    pts = positions(vertices)
    return pts * np.asarray(scale_acc, dtype=np.float64) + np.asarray(translation, dtype=np.float64)


def bounds(pts: np.ndarray) -> Tuple[Vec3, Vec3]:
    if len(pts) == 0:
        raise ValueError("bounds of an empty mesh")
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return (float(lo[0]), float(lo[1]), float(lo[2])), (float(hi[0]), float(hi[1]), float(hi[2]))
