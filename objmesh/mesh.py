"""
Меш‑приёмник: именованные слоты вершинных атрибутов + индексный буфер.
"""

from enum import Enum

import numpy as np


class PrimitiveTopology(Enum):
    TRIANGLE_LIST = "triangle_list"


class Mesh:
    """Контейнер буферов, который заполняет загрузчик и забирает движок."""

    ATTRIBUTE_POSITION = "Vertex_Position"
    ATTRIBUTE_NORMAL = "Vertex_Normal"
    ATTRIBUTE_UV_0 = "Vertex_Uv"

    def __init__(self, topology=PrimitiveTopology.TRIANGLE_LIST):
        self.topology = topology
        self.attributes = {}
        self.indices = None

    def set_attribute(self, name: str, values):
        values = np.asarray(values, dtype=np.float32)
        if values.size == 0:
            values = values.reshape((0, 3))
        if values.ndim != 2 or values.shape[1] != 3:
            raise ValueError(f"[Mesh] attribute '{name}' must have shape (N, 3), got {values.shape}")
        self.attributes[name] = values

    def attribute(self, name: str):
        return self.attributes.get(name)

    def set_indices(self, indices):
        self.indices = np.asarray(indices, dtype=np.uint32).ravel() if indices is not None else None

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        positions = self.attributes.get(self.ATTRIBUTE_POSITION)
        return len(positions) if positions is not None else 0

    @property
    def index_count(self) -> int:
        return len(self.indices) if self.indices is not None else 0

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    def interleaved(self) -> np.ndarray:
        """position | normal | uv в одном (N, 9) float32 массиве."""
        components = [self.attributes[name] for name in (self.ATTRIBUTE_POSITION,
                                                         self.ATTRIBUTE_NORMAL,
                                                         self.ATTRIBUTE_UV_0)]
        return np.column_stack(components).astype(np.float32)
