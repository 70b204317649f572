"""
Wavefront OBJ reader.

Only ``v``, ``vt``, ``vn``, ``f`` and ``l`` records are read; every other line
(comments, ``o``/``g``/``usemtl``/``mtllib``, blank lines) is ignored.

A malformed ``v``/``vt``/``vn``/``l`` line is dropped and the load carries on.
A malformed ``f`` line is dropped with a warning by default; with
``strict_faces=True`` it raises ObjParseError and the whole load fails.
"""
from __future__ import annotations

import logging
from typing import IO, Iterable, List, Union

from .config import DEFAULT_ENCODING
from .errors import ObjIOError, ObjParseError
from .geometry import Face, LineSegment, Normal, TexCoord, Vertex
from .mesh import ObjMesh, TransformMode

logger = logging.getLogger(__name__)


# -----------------------------
# Record parsers
# -----------------------------

def _floats(fields: List[str], count: int, kind: str) -> List[float]:
    if len(fields) != count:
        raise ObjParseError(f"{kind} expects {count} values, got {len(fields)}")
    try:
        return [float(f) for f in fields]
    except ValueError as e:
        raise ObjParseError(f"invalid {kind} value: {e}") from e


def parse_vertex(fields: List[str]) -> Vertex:
    return Vertex(*_floats(fields, 3, "vertex"))


def parse_tex_coord(fields: List[str]) -> TexCoord:
    return TexCoord(*_floats(fields, 2, "texture coordinate"))


def parse_normal(fields: List[str]) -> Normal:
    return Normal(*_floats(fields, 3, "normal"))


def _index(token: str, kind: str) -> int:
    try:
        return int(token) - 1
    except ValueError as e:
        raise ObjParseError(f"invalid {kind} index {token!r}") from e


def parse_face(fields: List[str]) -> Face:
    """Parse ``v[/vt][/vn]`` references into a zero-based Face."""
    if not fields:
        raise ObjParseError("face has no vertex references")
    face = Face()
    for ref in fields:
        parts = ref.split("/")
        face.vertices.append(_index(parts[0], "vertex"))
        if len(parts) > 1 and parts[1] != "":
            face.tex_coords.append(_index(parts[1], "texture coordinate"))
        if len(parts) > 2 and parts[2] != "":
            face.normals.append(_index(parts[2], "normal"))
    n = len(face.vertices)
    if face.tex_coords and len(face.tex_coords) != n:
        raise ObjParseError("texture coordinate indices given for only some corners")
    if face.normals and len(face.normals) != n:
        raise ObjParseError("normal indices given for only some corners")
    return face


def parse_line_segment(fields: List[str]) -> LineSegment:
    if len(fields) != 2:
        raise ObjParseError(f"line expects 2 vertex indices, got {len(fields)}")
    return LineSegment(_index(fields[0], "start vertex"), _index(fields[1], "end vertex"))


# -----------------------------
# Document readers
# -----------------------------

def parse_lines(
    lines: Iterable[Union[str, bytes]],
    *,
    strict_faces: bool = False,
    mode: TransformMode = TransformMode.IMMEDIATE,
) -> ObjMesh:
    """Build an ObjMesh from an iterable of text (or bytes) lines."""
    mesh = ObjMesh(mode=mode)
    dropped = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.decode(DEFAULT_ENCODING, errors="replace") if isinstance(raw, bytes) else raw
        tokens = line.split()
        if not tokens:
            continue
        key, fields = tokens[0], tokens[1:]
        try:
            if key == "v":
                mesh.vertices.append(parse_vertex(fields))
            elif key == "vt":
                mesh.tex_coords.append(parse_tex_coord(fields))
            elif key == "vn":
                mesh.normals.append(parse_normal(fields))
            elif key == "l":
                mesh.lines.append(parse_line_segment(fields))
            elif key == "f":
                mesh.faces.append(parse_face(fields))
        except ObjParseError as e:
            if key == "f":
                if strict_faces:
                    raise ObjParseError(str(e), lineno, line.rstrip("\r\n")) from e
                logger.warning(f"Skipping face on line {lineno}: {e}")
            else:
                logger.debug(f"Skipping line {lineno}: {e}")
            dropped += 1

    logger.debug(
        f"Parsed {len(mesh.vertices)} vertices, {len(mesh.tex_coords)} texture coordinates, "
        f"{len(mesh.normals)} normals, {len(mesh.faces)} faces, {len(mesh.lines)} lines "
        f"({dropped} records dropped)"
    )
    return mesh


def read_obj(stream: IO, *, strict_faces: bool = False, mode: TransformMode = TransformMode.IMMEDIATE) -> ObjMesh:
    """Read a whole OBJ document from an open text or binary stream."""
    try:
        lines = stream.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ObjIOError(f"error reading stream: {e}") from e
    return parse_lines(lines, strict_faces=strict_faces, mode=mode)


def load_obj(path: str, *, strict_faces: bool = False, mode: TransformMode = TransformMode.IMMEDIATE) -> ObjMesh:
    logger.info(f"Loading OBJ: {path}")
    try:
        with open(path, "r", encoding=DEFAULT_ENCODING, errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        raise ObjIOError(f"error opening file {path}: {e}") from e
    return parse_lines(lines, strict_faces=strict_faces, mode=mode)
