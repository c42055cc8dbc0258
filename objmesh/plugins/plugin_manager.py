"""
Простейший менеджер плагинов.
Плагины – обычные модули, содержащие функцию `register(manager)`.
"""

import importlib
import pkgutil
from pathlib import Path

from objmesh.assets.registry import LoaderRegistry
from objmesh.utils.config import Config
from objmesh.utils.logger import logger


class PluginManager:
    """Сканирует пакет `objmesh.plugins` и регистрирует найденные загрузчики."""
    def __init__(self, registry: LoaderRegistry = None, config: Config = None):
        self.dir = Path(__file__).parent
        self.registry = registry if registry is not None else LoaderRegistry()
        self.config = config if config is not None else Config()
        self.config.apply_logging()

    def discover(self):
        """Импортировать все модули и вызвать `register`."""
        for modinfo in pkgutil.iter_modules([str(self.dir)]):
            module = importlib.import_module(f"objmesh.plugins.{modinfo.name}")
            if hasattr(module, "register"):
                module.register(self)
                logger.debug(f"[PluginManager] Registered plugin '{modinfo.name}'")
        return self.registry

    def register_loader(self, extension: str, fn):
        self.registry.register(extension, fn)

    def get_loader(self, extension: str):
        return self.registry.get(extension)
