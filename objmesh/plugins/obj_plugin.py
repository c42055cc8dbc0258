from objmesh.assets.loader import ObjLoader


def register(manager):
    """Регистрирует ObjLoader под всеми расширениями из конфигурации."""
    loader = ObjLoader()
    for ext in manager.config.obj_extensions:
        manager.register_loader(ext, loader.load)
