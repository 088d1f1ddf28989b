# studiosg/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger    – готовый объект logging.Logger (с level INFO)
    * Config    – JSON‑конфигурация с настройками по‑умолчанию
    * Profiler  – контекст‑менеджер замера времени
    * Timer     – таймер кадров
"""

from .logger import logger, set_level
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler
from .timer import Timer

__all__ = ["logger", "set_level", "Config", "DEFAULT_CONFIG", "Profiler", "Timer"]
