# -*- coding: utf-8 -*-
"""
Типизированная проекция RawObj: список вершин одной формы + индексы
треугольников. Полигоны режутся «веером» от первого угла.
"""

from enum import Enum
from typing import NamedTuple

from objmesh.errors import InvalidObjError
from objmesh.parser.raw import PolygonKind, RawObj


class Position(NamedTuple):
    position: tuple


class Vertex(NamedTuple):
    position: tuple
    normal: tuple


class TexturedVertex(NamedTuple):
    position: tuple
    normal: tuple
    texture: tuple


class VertexFormat(Enum):
    POSITION = Position
    VERTEX = Vertex
    TEXTURED_VERTEX = TexturedVertex


def _corner_key(fmt, kind, corner):
    """Ключ дедупликации (p, t, n) для угла; t/n = None, если не нужны."""
    if fmt is VertexFormat.POSITION:
        return corner[0], None, None
    if fmt is VertexFormat.VERTEX:
        if kind is PolygonKind.PN:
            return corner[0], None, corner[1]
        if kind is PolygonKind.PTN:
            return corner[0], None, corner[2]
        raise InvalidObjError("tried to extract normal data which are not contained in the model")
    if kind is PolygonKind.PTN:
        return corner
    raise InvalidObjError("tried to extract normal and texture data which are not contained in the model")


def _lookup(items, idx, what):
    if idx >= len(items):
        raise InvalidObjError(f"{what} index {idx + 1} out of range ({len(items)} defined)")
    return items[idx]


def _make_vertex(fmt, raw, key):
    p, t, n = key
    position = _lookup(raw.positions, p, "position")
    if fmt is VertexFormat.POSITION:
        return Position(position)
    normal = _lookup(raw.normals, n, "normal")
    if fmt is VertexFormat.VERTEX:
        return Vertex(position, normal)
    return TexturedVertex(position, normal, _lookup(raw.texcoords, t, "texture"))


class Obj:
    """Вершины выбранной формы и плоский список индексов (triangle list)."""

    def __init__(self, vertices, indices):
        self.vertices = vertices
        self.indices = indices

    @classmethod
    def from_raw(cls, raw: RawObj, fmt: VertexFormat) -> "Obj":
        vertices = []
        indices = []
        vert_dict = {}   # (p, t, n) -> index

        for polygon in raw.polygons:
            keys = [_corner_key(fmt, polygon.kind, c) for c in polygon.indices]
            k0 = keys[0]
            for i in range(1, len(keys) - 1):
                for key in (k0, keys[i], keys[i + 1]):
                    if key not in vert_dict:
                        vertices.append(_make_vertex(fmt, raw, key))
                        vert_dict[key] = len(vert_dict)
                    indices.append(vert_dict[key])

        return cls(vertices, indices)
