"""
Command-line front end: load an OBJ file, rebuild faces from line segments,
scale, translate and rotate it, and write the result.

Exit status is 0 on success, 1 when the mesh cannot be read or written and
2 for usage errors (including an unwritable --log-file).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_OUTPUT_PATH, PipelineConfig
from .errors import ObjError
from .logging_config import setup_logging
from .mesh import ObjMesh, TransformMode
from .parser import load_obj
from .serializer import save_obj

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m objtransform -i model.obj --scale 2
  python -m objtransform -i model.obj -o moved.obj --translate 0 1.5 0
  python -m objtransform -i model.obj --rotate 0 0 1.5708 --mode deferred
  python -m objtransform -i wire.obj --no-line-faces --strict-faces
"""


def run_pipeline(config: PipelineConfig) -> ObjMesh:
    """Load, rebuild faces, scale, translate, rotate, save."""
    mesh = load_obj(config.input_path, strict_faces=config.strict_faces, mode=config.mode)

    if config.reconstruct_lines:
        mesh.lines_to_faces()
    if config.scale != 1.0:
        mesh.scale(config.scale)
    if config.translate is not None:
        mesh.translate(*config.translate)
    if config.rotate is not None:
        mesh.rotate(*config.rotate)

    if mesh.vertices:
        lo, hi = mesh.bounds()
        logger.info(f"Bounds: min={lo} max={hi}")

    save_obj(config.output_path, mesh)
    return mesh


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="objtransform",
                                description="objtransform: scale, move and rotate Wavefront OBJ meshes",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("-i", "--input", required=True, help="Input .obj file")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH, help="Output .obj file")
    p.add_argument("--scale", type=float, default=1.0, help="Uniform scale factor")
    p.add_argument("--translate", type=float, nargs=3, metavar=("X", "Y", "Z"))
    p.add_argument("--rotate", type=float, nargs=3, metavar=("RX", "RY", "RZ"),
                   help="Rotation about X, then Y, then Z, in radians")
    p.add_argument("--mode", choices=[m.value for m in TransformMode], default=TransformMode.IMMEDIATE.value,
                   help="immediate: scale/translate rewrite vertices now\n"
                        "deferred: scale/translate are applied when writing")
    p.add_argument("--no-line-faces", action="store_true", help="Do not rebuild faces from 'l' records")
    p.add_argument("--strict-faces", action="store_true", help="Abort on a malformed 'f' record")
    p.add_argument("--log-file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as e:
        print(f"objtransform: cannot open log file {args.log_file}: {e}", file=sys.stderr)
        return 2
    config = PipelineConfig.from_args(args)
    try:
        run_pipeline(config)
    except ObjError as e:
        logger.error(f"Failed: {e}")
        return 1
    logger.info(f"Done. Output written to {config.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
