"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Без пути конфигурация живёт только в памяти; если путь задан, но файл
не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "obj": {"extensions": ["obj"]},
}


class Config:
    """Объект конфигурации загрузчика."""

    def __init__(self, path: str = None):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        if self.path is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
        elif self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                self.data = data
                self._merge_defaults()
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def _merge_defaults(self):
        for key, value in DEFAULT_CONFIG.items():
            self.data.setdefault(key, copy.deepcopy(value))

    def save(self):
        if self.path is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def apply_logging(self):
        set_log_level(self["log_level"])

    @property
    def obj_extensions(self):
        section = self["obj"] or {}
        exts = section.get("extensions", DEFAULT_CONFIG["obj"]["extensions"])
        return [e.lower().lstrip(".") for e in exts]

    def __getitem__(self, key):
        return self.data.get(key, copy.deepcopy(DEFAULT_CONFIG.get(key)))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
