"""
Defaults and run configuration.

Exports:
    DEFAULT_OUTPUT_PATH (str): Output file used when none is given.
    HEADER_COMMENT (str): First line of every written file.
    FLOAT_PRECISION (int): Digits after the decimal point in written floats.
    DEFAULT_ENCODING (str): Text encoding for reading and writing.
    PipelineConfig: Parameters for one load/transform/save run.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .mesh import TransformMode

DEFAULT_OUTPUT_PATH: str = "parsed_model.obj"
HEADER_COMMENT: str = "# Parsed .obj file"
FLOAT_PRECISION: int = 6
DEFAULT_ENCODING: str = "utf-8"

Vec3 = Tuple[float, float, float]


@dataclass
class PipelineConfig:
    input_path: str
    output_path: str = DEFAULT_OUTPUT_PATH
    scale: float = 1.0
    translate: Optional[Vec3] = None
    rotate: Optional[Vec3] = None
    mode: TransformMode = TransformMode.IMMEDIATE
    reconstruct_lines: bool = True
    strict_faces: bool = False

    @classmethod
    def from_args(cls, args) -> "PipelineConfig":
        """Build from an argparse namespace produced by the CLI parser."""
        return cls(
            input_path=args.input,
            output_path=args.output,
            scale=args.scale,
            translate=None if args.translate is None else tuple(args.translate),
            rotate=None if args.rotate is None else tuple(args.rotate),
            mode=TransformMode(args.mode),
            reconstruct_lines=not args.no_line_faces,
            strict_faces=args.strict_faces,
        )
