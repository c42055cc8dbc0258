# objmesh/errors.py
"""
Ошибки конвертера OBJ → Mesh.

Один базовый тип `ObjError` и плоский набор случаев:
    * InvalidObjError           – парсер отверг входные байты
    * UnknownVertexFormatError  – уровень вершинного формата вне {1, 2, 3}
    * UnsupportedExtensionError – реестр не знает расширение файла
"""


class ObjError(Exception):
    """Базовая ошибка загрузки OBJ."""


class InvalidObjError(ObjError):
    """Некорректный OBJ‑файл (синтаксис, обрезанный файл, неизвестная директива)."""

    def __init__(self, reason: str, line: int = None):
        self.reason = reason
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"Invalid OBJ file{where}: {reason}")


class UnknownVertexFormatError(ObjError):
    """Уровень вершинного формата, который билдер не умеет обрабатывать."""

    def __init__(self, tier):
        self.tier = tier
        super().__init__(f"Unknown vertex format: {tier!r}")


class UnsupportedExtensionError(ObjError, KeyError):
    """Для расширения не зарегистрирован загрузчик."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"No loader registered for extension '{extension}'")

    def __str__(self):
        return self.args[0]
