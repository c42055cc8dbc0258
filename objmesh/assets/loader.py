# objmesh/assets/loader.py
"""Загрузчик OBJ‑ассетов для движка: байты файла → Mesh по‑умолчанию."""

from objmesh.convert import load_obj_from_bytes
from objmesh.mesh import Mesh, PrimitiveTopology
from objmesh.utils.logger import logger


class LoadContext:
    """Контекст одного запроса на загрузку ассета."""

    def __init__(self, path: str = None):
        self.path = path
        self.default_asset = None

    def set_default_asset(self, asset):
        self.default_asset = asset


class ObjLoader:
    """Загрузчик Wavefront OBJ."""

    EXTENSIONS = ("obj",)

    def extensions(self):
        return self.EXTENSIONS

    def load(self, data: bytes, load_context: LoadContext):
        mesh = Mesh(PrimitiveTopology.TRIANGLE_LIST)
        load_obj_from_bytes(data, mesh)
        load_context.set_default_asset(mesh)
        logger.debug(f"[ObjLoader] Loaded mesh {load_context.path or '<bytes>'}: "
                     f"{mesh.vertex_count} vertices, {mesh.triangle_count} triangles")
        return load_context
