"""
Geometry primitives for Wavefront OBJ records.

Vertex is the only mutable record; the transform engine rewrites its
components in place. Texture coordinates, normals and line segments are
frozen once parsed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


# -----------------------------
# Small vector utilities
# -----------------------------

def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_mul(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


# -----------------------------
# Records
# -----------------------------

@dataclass
class Vertex:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class TexCoord:
    u: float = 0.0
    v: float = 0.0


@dataclass(frozen=True)
class Normal:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class LineSegment:
    """Undirected edge between two zero-based vertex indices."""
    start: int
    end: int


@dataclass
class Face:
    """Polygon as zero-based indices.

    ``tex_coords`` and ``normals`` are either empty or run parallel to
    ``vertices``.
    """
    vertices: List[int] = field(default_factory=list)
    tex_coords: List[int] = field(default_factory=list)
    normals: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)

    def reference(self, corner: int) -> str:
        """One-based ``v[/vt][/vn]`` token for a corner."""
        vi = self.vertices[corner] + 1
        has_vt = len(self.tex_coords) > corner
        has_vn = len(self.normals) > corner
        if has_vt and has_vn:
            return f"{vi}/{self.tex_coords[corner] + 1}/{self.normals[corner] + 1}"
        elif has_vt:
            return f"{vi}/{self.tex_coords[corner] + 1}"
        elif has_vn:
            return f"{vi}//{self.normals[corner] + 1}"
        return f"{vi}"
