"""
Wavefront OBJ writer.

Section order is fixed: header, vertices, then texture coordinates, normals
and faces, each only when non-empty. Line segments are never written; they
only feed polygon reconstruction.
"""
from __future__ import annotations

import io
import logging
from typing import IO

from .config import DEFAULT_ENCODING, FLOAT_PRECISION, HEADER_COMMENT
from .errors import ObjIOError
from .mesh import ObjMesh

logger = logging.getLogger(__name__)


def _fmt(x: float) -> str:
    return f"{x:.{FLOAT_PRECISION}f}"


def write_obj(mesh: ObjMesh, f: IO[str]) -> None:
    """Write ``mesh`` to an open text stream."""
    f.write(f"{HEADER_COMMENT}\n\n")

    f.write("# Vertices\n")
    for x, y, z in mesh.output_positions().tolist():
        f.write(f"v {_fmt(x)} {_fmt(y)} {_fmt(z)}\n")

    if mesh.tex_coords:
        f.write("\n# Texture Coordinates\n")
        for vt in mesh.tex_coords:
            f.write(f"vt {_fmt(vt.u)} {_fmt(vt.v)}\n")

    if mesh.normals:
        f.write("\n# Normals\n")
        for vn in mesh.normals:
            f.write(f"vn {_fmt(vn.x)} {_fmt(vn.y)} {_fmt(vn.z)}\n")

    if mesh.faces:
        f.write("\n# Faces\n")
        for face in mesh.faces:
            refs = " ".join(face.reference(i) for i in range(len(face)))
            f.write(f"f {refs}\n")


def dumps_obj(mesh: ObjMesh) -> str:
    buf = io.StringIO()
    write_obj(mesh, buf)
    return buf.getvalue()


def save_obj(path: str, mesh: ObjMesh) -> None:
    """Create or overwrite ``path`` with the OBJ text for ``mesh``."""
    try:
        with open(path, "w", encoding=DEFAULT_ENCODING) as f:
            write_obj(mesh, f)
    except OSError as e:
        raise ObjIOError(f"error writing file {path}: {e}") from e
    logger.info(f"Saved {len(mesh.vertices)} vertices and {len(mesh.faces)} faces to {path}")
