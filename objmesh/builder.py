"""
Сборка буферов меша из RawObj на выбранном уровне вершинного формата.
"""

import numpy as np

from objmesh.classifier import TIER_POSITION, TIER_NORMAL, TIER_TEXTURED
from objmesh.errors import UnknownVertexFormatError
from objmesh.mesh import Mesh
from objmesh.parser.typed import Obj, VertexFormat

TIER_FORMATS = {
    TIER_POSITION: VertexFormat.POSITION,
    TIER_NORMAL: VertexFormat.VERTEX,
    TIER_TEXTURED: VertexFormat.TEXTURED_VERTEX,
}


def _vec3_array(rows) -> np.ndarray:
    return np.array(rows, dtype=np.float32).reshape((-1, 3))


def flip_uv(texcoords) -> np.ndarray:
    """OBJ хранит V снизу вверх, рендер ждёт сверху вниз: v → 1 - v."""
    uvs = _vec3_array(texcoords)
    uvs[:, 1] = np.float32(1.0) - uvs[:, 1]
    return uvs


def build_mesh(raw, tier: int, mesh: Mesh) -> Mesh:
    """
    Перепроецировать `raw` в вершины формы `tier` и записать в `mesh`
    четыре буфера: позиции, нормали, UV и индексы.
    Отсутствующие атрибуты заполняются нулями.
    """
    fmt = TIER_FORMATS.get(tier)
    if fmt is None:
        raise UnknownVertexFormatError(tier)

    obj = Obj.from_raw(raw, fmt)
    count = len(obj.vertices)
    zeros = np.zeros((count, 3), dtype=np.float32)

    positions = _vec3_array([v.position for v in obj.vertices])
    normals = _vec3_array([v.normal for v in obj.vertices]) if tier >= TIER_NORMAL else zeros
    uvs = flip_uv([v.texture for v in obj.vertices]) if tier == TIER_TEXTURED else zeros.copy()

    mesh.set_attribute(Mesh.ATTRIBUTE_POSITION, positions)
    mesh.set_attribute(Mesh.ATTRIBUTE_NORMAL, normals)
    mesh.set_attribute(Mesh.ATTRIBUTE_UV_0, uvs)
    mesh.set_indices(np.array(obj.indices, dtype=np.uint32))
    return mesh
