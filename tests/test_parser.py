import io
import logging

import pytest

from objtransform import ObjIOError, ObjParseError, TransformMode, load_obj, parse_lines, read_obj
from objtransform.geometry import LineSegment, Vertex


def test_reads_all_record_kinds(square_mesh):
    assert len(square_mesh.vertices) == 4
    assert len(square_mesh.tex_coords) == 4
    assert len(square_mesh.normals) == 1
    assert len(square_mesh.faces) == 1
    face = square_mesh.faces[0]
    assert face.vertices == [0, 1, 2, 3]
    assert face.tex_coords == [0, 1, 2, 3]
    assert face.normals == [0, 0, 0, 0]


def test_face_indices_are_zero_based():
    mesh = parse_lines(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3"])
    assert mesh.faces[0].vertices == [0, 1, 2]
    assert mesh.faces[0].tex_coords == []
    assert mesh.faces[0].normals == []


def test_face_with_normals_only():
    mesh = parse_lines(["f 1//3 2//3 3//3"])
    assert mesh.faces[0].tex_coords == []
    assert mesh.faces[0].normals == [2, 2, 2]


def test_face_with_trailing_slash():
    mesh = parse_lines(["f 1/ 2/ 3/"])
    assert mesh.faces[0].vertices == [0, 1, 2]
    assert mesh.faces[0].tex_coords == []


def test_short_vertex_line_is_dropped():
    mesh = parse_lines(["v 1 2 3", "v 1 2", "v 4 5 6", "v 1 2 3 4", "v a b c"])
    assert [v.as_tuple() for v in mesh.vertices] == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]


def test_malformed_tex_coord_normal_and_line_records_are_dropped():
    mesh = parse_lines(["vt 0.5", "vt 0.5 x", "vt 0.25 0.75", "vn 0 0", "vn 0 0 1",
                        "l 1", "l 1 2 3", "l a 2", "l 1 2"])
    assert len(mesh.tex_coords) == 1
    assert mesh.tex_coords[0].u == 0.25
    assert len(mesh.normals) == 1
    assert mesh.lines == [LineSegment(0, 1)]


def test_unknown_and_blank_lines_are_ignored():
    mesh = parse_lines(["# comment", "", "   ", "o thing", "g group", "mtllib a.mtl",
                        "s off", "vp 0.1 0.2", "v 1 1 1"])
    assert mesh.vertices == [Vertex(1.0, 1.0, 1.0)]
    assert mesh.faces == []


def test_prefix_is_case_sensitive():
    mesh = parse_lines(["V 1 2 3", "F 1 2 3"])
    assert mesh.vertices == []
    assert mesh.faces == []


def test_crlf_line_endings():
    mesh = parse_lines(["v 1 2 3\r\n", "f 1 1 1\r\n"])
    assert mesh.vertices[0].z == 3.0
    assert mesh.faces[0].vertices == [0, 0, 0]


def test_malformed_face_is_skipped_by_default(caplog):
    with caplog.at_level(logging.WARNING, logger="objtransform"):
        mesh = parse_lines(["v 0 0 0", "f 1 x 3", "f 1 2 3"])
    assert len(mesh.faces) == 1
    assert "line 2" in caplog.text


def test_malformed_face_aborts_load_in_strict_mode():
    with pytest.raises(ObjParseError) as exc:
        parse_lines(["v 0 0 0", "f 1 2/x 3"], strict_faces=True)
    assert exc.value.line_number == 2
    assert exc.value.line == "f 1 2/x 3"
    assert isinstance(exc.value, ValueError)


def test_malformed_vertex_never_aborts_in_strict_mode():
    mesh = parse_lines(["v 0 0", "f 1 2 3"], strict_faces=True)
    assert mesh.vertices == []
    assert len(mesh.faces) == 1


@pytest.mark.parametrize("line", ["f", "f 1/1 2 3", "f 1//1 2//2 3"])
def test_empty_or_partially_attributed_faces_are_malformed(line):
    assert parse_lines([line]).faces == []
    with pytest.raises(ObjParseError):
        parse_lines([line], strict_faces=True)


def test_read_obj_accepts_binary_streams():
    stream = io.BytesIO(b"# caf\xe9\nv 1 2 3\nf 1 1 1\n")
    mesh = read_obj(stream)
    assert mesh.vertices[0].as_tuple() == (1.0, 2.0, 3.0)
    assert len(mesh.faces) == 1


def test_read_obj_sets_mode():
    mesh = read_obj(io.StringIO("v 1 2 3\n"), mode=TransformMode.DEFERRED)
    assert mesh.mode is TransformMode.DEFERRED


def test_load_obj_from_file(wire_square_path):
    mesh = load_obj(str(wire_square_path))
    assert len(mesh.vertices) == 4
    assert len(mesh.lines) == 4
    assert mesh.faces == []


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(ObjIOError) as exc:
        load_obj(str(tmp_path / "missing.obj"))
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_read_obj_wraps_stream_errors():
    class Broken(io.StringIO):
        def readlines(self, hint=-1):
            raise OSError("device went away")

    with pytest.raises(ObjIOError):
        read_obj(Broken())


def test_read_obj_wraps_decode_errors():
    stream = io.TextIOWrapper(io.BytesIO(b"v 1 2 3\n# \xff\xfe\n"), encoding="utf-8")
    with pytest.raises(ObjIOError) as exc:
        read_obj(stream)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
