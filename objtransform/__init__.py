"""
objtransform: read, reposition and rewrite Wavefront OBJ meshes.

    from objtransform import load_obj, save_obj

    mesh = load_obj("model.obj")
    mesh.lines_to_faces().scale(0.001).rotate(-math.pi / 2, 0.0, 0.0)
    save_obj("model_m.obj", mesh)
"""
from .errors import ObjError, ObjIOError, ObjParseError
from .geometry import Face, LineSegment, Normal, TexCoord, Vertex
from .mesh import ObjMesh, TransformMode
from .parser import load_obj, parse_lines, read_obj
from .serializer import dumps_obj, save_obj, write_obj

__all__ = [
    "Face", "LineSegment", "Normal", "TexCoord", "Vertex",
    "ObjMesh", "TransformMode",
    "ObjError", "ObjIOError", "ObjParseError",
    "load_obj", "parse_lines", "read_obj",
    "dumps_obj", "save_obj", "write_obj",
]
