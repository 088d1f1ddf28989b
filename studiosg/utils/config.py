"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только явным вызовом `save()`).
"""

import copy
import json
from pathlib import Path
from studiosg.utils.logger import logger

DEFAULT_CONFIG = {
    "backend": "memory",
    "renderer": "pathtracer",
    "camera": "perspective",
    "window_size": [1024, 768],
    "samples": 32,
    "image": {"name": "studio", "format": "png"},
    "grid_spacing": 1.2,
    "cams_file": "cams.json",
    "plugins": True,
    "log_level": "INFO",
    "raw": {
        "voxel_type": "float",
        "dimensions": [1, 1, 1],
        "grid_origin": [0.0, 0.0, 0.0],
        "grid_spacing": [1.0, 1.0, 1.0],
    },
}


def _merge(defaults: dict, data: dict) -> dict:
    """Рекурсивно дополнить `data` недостающими ключами из `defaults`."""
    result = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "studiosg.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить singleton (следующий `Config(path)` перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = _merge(DEFAULT_CONFIG, json.load(f))
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
