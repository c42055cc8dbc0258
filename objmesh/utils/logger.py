# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета. Ядро конвертера ничего не пишет в лог,
# логируют только загрузчик ассетов, реестр и менеджер плагинов.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("objmesh")


logger = init_logger()


def set_log_level(level):
    """Принимает имя уровня ("DEBUG") или число из модуля logging."""
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logger.setLevel(level)
