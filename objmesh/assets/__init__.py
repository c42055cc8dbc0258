# objmesh/assets/__init__.py
"""Пакет с загрузчиком OBJ и реестром загрузчиков по расширению."""
from objmesh.assets.loader import LoadContext, ObjLoader
from objmesh.assets.registry import LoaderRegistry

__all__ = ["LoadContext", "ObjLoader", "LoaderRegistry"]
