"""
Определяет самый полный вершинный формат, который поддерживают все грани файла.

    3 – позиция, нормаль, текстура
    2 – позиция, нормаль
    1 – только позиция
"""

from objmesh.parser.raw import PolygonKind

TIER_POSITION = 1
TIER_NORMAL = 2
TIER_TEXTURED = 3

# PT без нормали допустим только в форме «только позиция»
_KIND_TIER = {
    PolygonKind.P: TIER_POSITION,
    PolygonKind.PT: TIER_POSITION,
    PolygonKind.PN: TIER_NORMAL,
    PolygonKind.PTN: TIER_TEXTURED,
}


def classify(polygons) -> int:
    tier = TIER_TEXTURED
    for polygon in polygons:
        tier = min(tier, _KIND_TIER[polygon.kind])
    return tier
