# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger  – готовый объект logging.Logger (с level INFO)
    * Config  – JSON‑конфигурация загрузчика
"""

from .logger import logger, set_log_level
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "set_log_level", "Config", "DEFAULT_CONFIG"]
