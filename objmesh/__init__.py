"""
objmesh – импорт Wavefront OBJ в триангулированный меш, готовый для рендера:
позиции, нормали, UV и индексный буфер.
"""

from objmesh.utils import logger, Config
from objmesh.errors import (
    ObjError, InvalidObjError, UnknownVertexFormatError, UnsupportedExtensionError
)
from objmesh.mesh import Mesh, PrimitiveTopology
from objmesh.classifier import classify
from objmesh.builder import build_mesh, flip_uv
from objmesh.convert import load_obj_from_bytes
from objmesh.assets import LoadContext, ObjLoader, LoaderRegistry

__version__ = "0.1.0"

__all__ = [
    "ObjError",
    "InvalidObjError",
    "UnknownVertexFormatError",
    "UnsupportedExtensionError",
    "Mesh",
    "PrimitiveTopology",
    "classify",
    "build_mesh",
    "flip_uv",
    "load_obj_from_bytes",
    "LoadContext",
    "ObjLoader",
    "LoaderRegistry",
    "Config",
    "logger",
]
