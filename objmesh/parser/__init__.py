"""
Пакет parser – разбор OBJ‑текста в сырые записи и их типизированная проекция.
"""

from objmesh.parser.raw import PolygonKind, Polygon, RawObj, parse_obj
from objmesh.parser.typed import (
    Obj, VertexFormat, Position, Vertex, TexturedVertex
)

__all__ = ["PolygonKind", "Polygon", "RawObj", "parse_obj",
           "Obj", "VertexFormat", "Position", "Vertex", "TexturedVertex"]
