# -*- coding: utf-8 -*-
"""
conftest.py – маленькие OBJ‑файлы прямо в коде и общие фикстуры.
"""

import pytest

from objmesh.mesh import Mesh


# ----------------------------------------------------------------------
# Один треугольник: позиция + нормаль + текстура, V = 0.0 / 0.5 / 1.0
# ----------------------------------------------------------------------
TEXTURED_TRIANGLE = b"""\
# textured triangle
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vt 0.25 0.0
vt 0.5 0.5
vt 0.75 1.0
vn 0.0 0.0 1.0
f 1/1/1 2/2/1 3/3/1
"""

# ----------------------------------------------------------------------
# Две грани: одна только с позициями, вторая – полная
# ----------------------------------------------------------------------
MIXED_FACES = b"""\
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
v 1.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vn 0.0 0.0 1.0
f 1 2 3
f 2/1/1 4/2/1 3/3/1
"""

# ----------------------------------------------------------------------
# Только позиции + нормали (v//vn)
# ----------------------------------------------------------------------
NORMAL_QUAD = b"""\
o quad
v -1.0 -1.0 0.0
v 1.0 -1.0 0.0
v 1.0 1.0 0.0
v -1.0 1.0 0.0
vn 0.0 0.0 1.0
vn 0.0 1.0 0.0
s off
f 1//1 2//1 3//2 4//2
"""


@pytest.fixture
def textured_triangle() -> bytes:
    return TEXTURED_TRIANGLE


@pytest.fixture
def mixed_faces() -> bytes:
    return MIXED_FACES


@pytest.fixture
def normal_quad() -> bytes:
    return NORMAL_QUAD


@pytest.fixture
def mesh() -> Mesh:
    """Чистый Mesh для каждого теста."""
    return Mesh()
