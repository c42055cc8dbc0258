# -*- coding: utf-8 -*-
"""
Парсер «сырых» записей Wavefront OBJ.

Читает позиции, нормали, texcoords и грани. Каждая грань помечается
вариантом (P, PT, PN, PTN) – какие атрибуты несут ссылки её углов.
Группы, материалы и сглаживание разбираются, но игнорируются.
"""

from enum import Enum
from typing import NamedTuple

from objmesh.errors import InvalidObjError


class PolygonKind(Enum):
    P = "p"          # v
    PT = "pt"        # v/vt
    PN = "pn"        # v//vn
    PTN = "ptn"      # v/vt/vn


class Polygon(NamedTuple):
    """Одна грань: вариант + кортежи 0‑based индексов для каждого угла."""
    kind: PolygonKind
    indices: tuple


class RawObj(NamedTuple):
    positions: list
    texcoords: list
    normals: list
    polygons: list


# Директивы, которые допустимы, но не влияют на геометрию меша
IGNORED_DIRECTIVES = frozenset(("o", "g", "s", "mtllib", "usemtl", "l", "p", "vp"))


def _floats(args, line_no, min_count, max_count, directive):
    if not (min_count <= len(args) <= max_count):
        raise InvalidObjError(
            f"'{directive}' expects {min_count}..{max_count} values, got {len(args)}",
            line_no,
        )
    try:
        return [float(a) for a in args]
    except ValueError as exc:
        raise InvalidObjError(f"bad number in '{directive}': {exc}", line_no) from exc


def _resolve(token, count, line_no):
    """1‑based (или отрицательный относительный) индекс → 0‑based."""
    try:
        idx = int(token)
    except ValueError as exc:
        raise InvalidObjError(f"bad face index '{token}'", line_no) from exc
    if idx > 0:
        return idx - 1
    if idx < 0 and count + idx >= 0:
        return count + idx
    raise InvalidObjError(f"face index {idx} out of range", line_no)


def _parse_corner(token, raw, line_no):
    # форматы: v, v/vt, v//vn, v/vt/vn
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise InvalidObjError(f"bad face corner '{token}'", line_no)

    p = _resolve(parts[0], len(raw.positions), line_no)
    t = parts[1] if len(parts) > 1 else ""
    n = parts[2] if len(parts) > 2 else ""

    if len(parts) == 2 and not t:
        raise InvalidObjError(f"bad face corner '{token}'", line_no)

    if t and n:
        return PolygonKind.PTN, (p,
                                 _resolve(t, len(raw.texcoords), line_no),
                                 _resolve(n, len(raw.normals), line_no))
    if t:
        return PolygonKind.PT, (p, _resolve(t, len(raw.texcoords), line_no))
    if n:
        return PolygonKind.PN, (p, _resolve(n, len(raw.normals), line_no))
    if len(parts) == 3:
        raise InvalidObjError(f"bad face corner '{token}'", line_no)
    return PolygonKind.P, (p,)


def _parse_face(args, raw, line_no):
    if len(args) < 3:
        raise InvalidObjError(f"face needs at least 3 vertices, got {len(args)}", line_no)

    kind = None
    corners = []
    for token in args:
        corner_kind, corner = _parse_corner(token, raw, line_no)
        if kind is None:
            kind = corner_kind
        elif corner_kind is not kind:
            raise InvalidObjError("face mixes different vertex reference formats", line_no)
        corners.append(corner)
    return Polygon(kind, tuple(corners))


def _logical_lines(text):
    """Склеивает строки с продолжением через обратный слеш."""
    pending = ""
    start = None
    for line_no, line in enumerate(text.splitlines(), start=1):
        if start is None:
            start = line_no
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            pending += stripped[:-1] + " "
            continue
        yield start, pending + line
        pending = ""
        start = None
    if pending:
        yield start, pending


def parse_obj(data) -> RawObj:
    """
    Разобрать OBJ‑текст (bytes или str) в RawObj.
    Любая синтаксическая ошибка → InvalidObjError.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidObjError(f"not UTF-8 text: {exc}") from exc
    else:
        text = data

    raw = RawObj(positions=[], texcoords=[], normals=[], polygons=[])

    for line_no, line in _logical_lines(text):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        directive, args = parts[0], parts[1:]

        if directive == "v":
            x, y, z = _floats(args, line_no, 3, 4, directive)[:3]
            raw.positions.append((x, y, z))
        elif directive == "vn":
            raw.normals.append(tuple(_floats(args, line_no, 3, 3, directive)))
        elif directive == "vt":
            uvw = _floats(args, line_no, 1, 3, directive)
            raw.texcoords.append(tuple(uvw + [0.0] * (3 - len(uvw))))
        elif directive == "f":
            raw.polygons.append(_parse_face(args, raw, line_no))
        elif directive in IGNORED_DIRECTIVES:
            continue
        else:
            raise InvalidObjError(f"unsupported directive '{directive}'", line_no)

    return raw
