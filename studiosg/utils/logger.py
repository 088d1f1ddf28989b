# studiosg/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер графа сцены. Один объект на весь пакет,
# сообщения помечаются компонентом: "[Commit] ...", "[Importer] ...".
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("StudioSG")

logger = init_logger()


def set_level(level: str = "INFO"):
    """Поменять уровень логирования (DEBUG / INFO / WARNING / ERROR)."""
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        logger.warning(f"[Logger] Unknown log level '{level}', keeping {logging.getLevelName(logger.level)}")
        return
    logger.setLevel(value)
