# objmesh/assets/registry.py
"""
Реестр загрузчиков: расширение файла → функция `fn(data, load_context)`.
"""

from pathlib import PurePath

from objmesh.assets.loader import LoadContext
from objmesh.errors import UnsupportedExtensionError
from objmesh.utils.logger import logger


def _normalize(extension: str) -> str:
    return extension.lower().lstrip(".")


class LoaderRegistry:
    def __init__(self):
        self.loaders = {}

    def register(self, extension: str, fn):
        ext = _normalize(extension)
        if ext in self.loaders:
            logger.warning(f"[LoaderRegistry] Replacing loader for '.{ext}'")
        self.loaders[ext] = fn
        logger.debug(f"[LoaderRegistry] Registered loader for '.{ext}'")

    def get(self, extension: str):
        return self.loaders.get(_normalize(extension))

    def extensions(self):
        return sorted(self.loaders)

    def load(self, path: str, data: bytes) -> LoadContext:
        """Найти загрузчик по суффиксу `path` и выполнить его."""
        ext = _normalize(PurePath(path).suffix)
        fn = self.get(ext)
        if fn is None:
            raise UnsupportedExtensionError(ext)
        context = LoadContext(path)
        fn(data, context)
        return context
