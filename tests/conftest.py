import logging

import pytest

from objtransform import parse_lines

SQUARE_OBJ = """\
# a unit square with attributes
o square
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
usemtl default
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

WIRE_SQUARE_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
l 1 2
l 2 3
l 3 4
l 4 1
"""


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("objtransform")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def square_mesh():
    return parse_lines(SQUARE_OBJ.splitlines())


@pytest.fixture
def wire_square_path(tmp_path):
    path = tmp_path / "wire.obj"
    path.write_text(WIRE_SQUARE_OBJ, encoding="utf-8")
    return path
