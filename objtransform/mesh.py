"""
ObjMesh: the document produced by the parser and consumed by the serializer.

Records keep file order. Faces may additionally receive polygons rebuilt
from line segments. Transforms run in place and return ``self`` so calls can
be chained::

    mesh.lines_to_faces().scale(2.0).translate(0.0, 1.0, 0.0).rotate(0.0, 0.0, math.pi / 2)

How scale and translate reach the written coordinates depends on ``mode``:

* ``TransformMode.IMMEDIATE`` multiplies/adds into every vertex right away.
  The accumulators are kept up to date but never applied a second time.
* ``TransformMode.DEFERRED`` leaves the vertices alone and only updates the
  accumulators; the serializer writes ``vertex * scale + translation``.

Rotation always rewrites the stored vertices immediately. In deferred mode
that means every rotation acts before the accumulated scale and offset,
whatever order the calls were made in.
"""
from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from . import topology, transform
from .geometry import Face, LineSegment, Normal, TexCoord, Vec3, Vertex, v_add, v_mul

logger = logging.getLogger(__name__)


class TransformMode(str, enum.Enum):
    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


@dataclass
class ObjMesh:
    vertices: List[Vertex] = field(default_factory=list)
    tex_coords: List[TexCoord] = field(default_factory=list)
    normals: List[Normal] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    lines: List[LineSegment] = field(default_factory=list)
    mode: TransformMode = TransformMode.IMMEDIATE
    scale_acc: Vec3 = (1.0, 1.0, 1.0)
    translation: Vec3 = (0.0, 0.0, 0.0)

    @property
    def scale_factor(self) -> float:
        """Cumulative scale along X."""
        return self.scale_acc[0]

    # ---- topology ----
    def lines_to_faces(self) -> "ObjMesh":
        """Append the closed loops found in ``lines`` as faces."""
        rebuilt = topology.lines_to_faces(self.lines)
        self.faces.extend(rebuilt)
        logger.info(f"Rebuilt {len(rebuilt)} faces from {len(self.lines)} line segments.")
        return self

    # ---- transforms ----
    def scale(self, sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> "ObjMesh":
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        factors = (sx, sy, sz)
        self.scale_acc = v_mul(self.scale_acc, factors)
        self.translation = v_mul(self.translation, factors)
        if self.mode is TransformMode.IMMEDIATE:
            transform.scale(self.vertices, factors)
        logger.info(f"Scaled by ({sx}, {sy}, {sz}) [{self.mode.value}]")
        return self

    def translate(self, dx: float, dy: float, dz: float) -> "ObjMesh":
        offset = (dx, dy, dz)
        self.translation = v_add(self.translation, offset)
        if self.mode is TransformMode.IMMEDIATE:
            transform.translate(self.vertices, offset)
        logger.info(f"Translated by ({dx}, {dy}, {dz}) [{self.mode.value}]")
        return self

    def rotate(self, rx: float, ry: float, rz: float) -> "ObjMesh":
        """Rotate about X, then Y, then Z (radians)."""
        transform.rotate(self.vertices, (rx, ry, rz))
        logger.info(f"Rotated by ({rx}, {ry}, {rz}) rad")
        return self

    # ---- output ----
    def output_positions(self) -> np.ndarray:
        """Vertex positions as they will be written, shape (N, 3)."""
        if self.mode is TransformMode.DEFERRED:
            return transform.apply_deferred(self.vertices, self.scale_acc, self.translation)
        return transform.positions(self.vertices)

    def bounds(self) -> Tuple[Vec3, Vec3]:
        return transform.bounds(self.output_positions())

    def copy(self) -> "ObjMesh":
        return copy.deepcopy(self)
